# -*- coding: utf-8 -*-
# Surveymesh/mesh/api.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose
-------
High-level helpers tying the rasterizer to the mesh container: load a surface mesh,
check that it can receive survey samples, and attach the averaged values as a
named cell array.

Main Tasks
----------
    1. `load_surface_mesh` → read a .vtu and require a non-empty 2D mesh.
    2. `add_samples_as_cell_array` → rasterize samples and attach the result.
"""

from typing import Optional
import logging
import numpy as np

from .core.errors import InvalidMesh
from .core.model import Mesh
from .core.rasterize import accumulate
from .io.vtu import read_vtu

logger = logging.getLogger(__name__)


def require_surface(mesh: Mesh) -> Mesh:
    """
    Raise InvalidMesh unless `mesh` is a non-empty 2D mesh.
    """
    if mesh.n_nodes == 0 or mesh.n_cells == 0:
        raise InvalidMesh("Mesh is empty.", {"name": mesh.name})
    if mesh.dimension != 2:
        raise InvalidMesh("This utility can handle only 2d meshes.",
                          {"name": mesh.name, "dimension": mesh.dimension})
    return mesh


def load_surface_mesh(path: str) -> Mesh:
    """Read a .vtu file and check that it is a 2D surface mesh."""
    mesh = require_surface(read_vtu(path))
    logger.info("[load_surface_mesh] Mesh read: %d nodes, %d elements.", mesh.n_nodes, mesh.n_cells)
    return mesh


def add_samples_as_cell_array(
    mesh: Mesh,
    samples,
    name: str,
    *,
    log: Optional[logging.Logger] = None,
    max_per_bin: int = 16,
) -> np.ndarray:
    """
    Rasterize `samples` onto `mesh` and store the result as cell array `name`.

    Parameters
    ----------
    mesh : Mesh
        Surface mesh; receives the new cell array.
    samples : array-like
        (M,3) rows of (x, y, value).
    name : str
        Name of the new cell array (replaced if it exists).
    log : logging.Logger, optional
        Diagnostic sink forwarded to the rasterizer.
    max_per_bin : int, optional
        Spatial grid density forwarded to the rasterizer.

    Returns
    -------
    np.ndarray
        The attached (C,) array.
    """
    stats = accumulate(mesh, samples, log=log, max_per_bin=max_per_bin)
    values = mesh.add_cell_array(name, stats.values())
    logger.info("[add_samples_as_cell_array] '%s': %d samples assigned, %d dropped.",
                name, stats.assigned, stats.dropped)
    return values
