# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/projection.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Planar projection of meshes. Produces a structurally identical mesh whose node
coordinates are projected onto a plane given by origin + normal.

Notes:
------
- Node and cell indices, cell types and adjacency are preserved; only coordinates change.
- The input mesh is never modified.
- For the z=0 plane the X and Y coordinates are carried over bit-identically,
  so re-attaching the original Z restores the input exactly.
"""

from typing import Sequence
import numpy as np

from .model import Mesh


def project_points(points, origin: Sequence[float], normal: Sequence[float]) -> np.ndarray:
    """
    Project (N,3) points onto the plane through `origin` with normal `normal`.

    Raises
    ------
    ValueError
        If the normal has zero length.
    """
    n = np.asarray(normal, dtype=float).reshape(3)
    length = float(np.linalg.norm(n))
    if not (length > 0.0):
        raise ValueError("Projection plane normal must be non-zero (got {}).".format(tuple(n)))
    n = n / length
    o = np.asarray(origin, dtype=float).reshape(3)
    P = np.asarray(points, dtype=float)
    d = (P - o) @ n
    return P - np.outer(d, n)


def project_onto_plane(mesh: Mesh, origin: Sequence[float] = (0.0, 0.0, 0.0),
                       normal: Sequence[float] = (0.0, 0.0, -1.0)) -> Mesh:
    """
    Return a copy of `mesh` with every node projected onto the given plane.
    """
    return mesh.with_nodes(project_points(mesh.nodes, origin, normal))


def flatten(mesh: Mesh) -> Mesh:
    """Project onto the z=0 plane (drop elevation, keep X/Y exactly)."""
    flat = mesh.nodes.copy()
    flat[:, 2] = 0.0
    return mesh.with_nodes(flat)
