# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/locate.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Locate the surface cell containing an XY position. Bundles the planar-projected
mesh, a `NodeGrid` over its nodes and the node -> cell adjacency, built once and
reused for many queries.

Lookup:
-------
nearest node (grid) -> incident cells (ascending cell id) -> first cell whose
footprint contains the point (boundary inclusive).

Notes:
------
- A point on an edge shared by two cells goes to the first of them in incidence order.
- A point whose nearest node has no containing incident cell is reported as None,
  even if some other cell would contain it (e.g. in strongly anisotropic meshes).
"""

from typing import Optional, Sequence
import numpy as np

from .errors import InvalidMesh
from .grid import NodeGrid
from .kernels import point_in_cell
from .model import Mesh
from .projection import project_onto_plane


class CellLocator:
    """
    Point-in-cell lookup over a mesh projected onto a plane.

    Parameters
    ----------
    mesh : Mesh
        Source mesh; not modified.
    origin, normal : sequence of float, optional
        Projection plane (default: z=0 plane).
    max_per_bin : int, optional
        Grid density passed to `NodeGrid`.
    """

    def __init__(self, mesh: Mesh, origin: Sequence[float] = (0.0, 0.0, 0.0),
                 normal: Sequence[float] = (0.0, 0.0, -1.0), max_per_bin: int = 16):
        if mesh.n_nodes == 0 or mesh.n_cells == 0:
            raise InvalidMesh("Mesh has no nodes or no cells.",
                              {"name": mesh.name, "n_nodes": mesh.n_nodes, "n_cells": mesh.n_cells})
        self.mesh = mesh
        self.flat = project_onto_plane(mesh, origin, normal)
        self.grid = NodeGrid(self.flat.nodes, max_per_bin=max_per_bin)
        self.node_cells = self.flat.node_cells()

    def nearest_node(self, x: float, y: float) -> int:
        return self.grid.nearest(x, y)

    def find(self, x: float, y: float) -> Optional[int]:
        """Id of the first incident cell (of the nearest node) containing (x, y), else None."""
        if not (np.isfinite(x) and np.isfinite(y)):
            return None
        pt = np.array((x, y), dtype=float)
        node = self.grid.nearest(x, y)
        for cid in self.node_cells[node]:
            if point_in_cell(pt, self.flat.cell_coords(cid)):
                return cid
        return None
