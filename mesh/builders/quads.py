# -*- coding: utf-8 -*-
# Surveymesh/mesh/builders/quads.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Build quad meshes from survey tables.

Main Tasks:
-----------
    1) `build_ert_mesh`: one vertical quad per ERT row, between two surface
       points and two depths below them.
    2) `build_section_mesh`: structured section grid from column coordinates
       (x, y) and layer elevations (z).

Notes:
------
- ERT quads do not share nodes; every row gets four fresh nodes.
- Both builders attach an integer `MaterialIDs` cell array.
"""

import logging
import numpy as np

from ..core.errors import InvalidMesh, ReadFailure
from ..core.model import Mesh

logger = logging.getLogger(__name__)

MATERIAL_IDS = "MaterialIDs"


def build_ert_mesh(points1, points2, z1, z2, name: str = "ERT Mesh") -> Mesh:
    """
    Build a quad mesh from ERT electrode pairs.

    Row i yields the quad
        (p1, h1 - z1), (p1, h1 - z2), (p2, h2 - z2), (p2, h2 - z1)
    where p = (E, N) and h = H of the two surface points. The material id starts
    at 0 and increases by one whenever z1 differs from the previous row.

    Parameters
    ----------
    points1, points2 : array-like
        (N,3) surface points (E, N, H).
    z1, z2 : array-like
        (N,) upper and lower depths.

    Raises
    ------
    ReadFailure
        If the four inputs differ in length.
    """
    p1 = np.asarray(points1, dtype=float).reshape(-1, 3)
    p2 = np.asarray(points2, dtype=float).reshape(-1, 3)
    d1 = np.asarray(z1, dtype=float).ravel()
    d2 = np.asarray(z2, dtype=float).ravel()
    n = len(p1)
    if not (len(p2) == len(d1) == len(d2) == n):
        raise ReadFailure("ERT columns differ in length.",
                          {"points1": n, "points2": len(p2), "z1": len(d1), "z2": len(d2)})

    nodes = np.empty((4 * n, 3), dtype=np.float64)
    nodes[0::4] = np.column_stack([p1[:, 0], p1[:, 1], p1[:, 2] - d1])
    nodes[1::4] = np.column_stack([p1[:, 0], p1[:, 1], p1[:, 2] - d2])
    nodes[2::4] = np.column_stack([p2[:, 0], p2[:, 1], p2[:, 2] - d2])
    nodes[3::4] = np.column_stack([p2[:, 0], p2[:, 1], p2[:, 2] - d1])
    cells = [(4 * i, 4 * i + 1, 4 * i + 2, 4 * i + 3) for i in range(n)]

    materials = np.zeros(n, dtype=np.int32)
    if n > 1:
        materials[1:] = np.cumsum(d1[1:] != d1[:-1])

    mesh = Mesh(name=name, nodes=nodes, cells=cells, cell_types=["quad"] * n,
                cell_data={MATERIAL_IDS: materials})
    logger.info("[build_ert_mesh] %d quads, %d material groups.",
                n, int(materials.max()) + 1 if n else 0)
    return mesh


def build_section_mesh(x, y, z, name: str = "Mesh") -> Mesh:
    """
    Structured section mesh.

    Node (r, c) sits at (x[c], y[c], z[r]) with id r * n_cols + c. Quad (r, c)
    connects (r, c), (r+1, c), (r+1, c+1), (r, c+1); its material id is r.

    Raises
    ------
    InvalidMesh
        If len(x) != len(y) or there are fewer than two rows or columns.
    """
    xs = np.asarray(x, dtype=float).ravel()
    ys = np.asarray(y, dtype=float).ravel()
    zs = np.asarray(z, dtype=float).ravel()
    if len(xs) != len(ys):
        raise InvalidMesh("x and y columns differ in length.", {"x": len(xs), "y": len(ys)})
    n_cols, n_rows = len(xs), len(zs)
    if n_cols < 2 or n_rows < 2:
        raise InvalidMesh("Section mesh needs at least two rows and two columns.",
                          {"rows": n_rows, "cols": n_cols})

    nodes = np.column_stack([
        np.tile(xs, n_rows),
        np.tile(ys, n_rows),
        np.repeat(zs, n_cols),
    ])

    cells = []
    materials = []
    for r in range(n_rows - 1):
        base = r * n_cols
        for c in range(n_cols - 1):
            cells.append((base + c, base + c + n_cols, base + c + n_cols + 1, base + c + 1))
            materials.append(r)

    mesh = Mesh(name=name, nodes=nodes, cells=cells, cell_types=["quad"] * len(cells),
                cell_data={MATERIAL_IDS: np.asarray(materials, dtype=np.int32)})
    logger.info("[build_section_mesh] %d x %d nodes, %d quads.", n_rows, n_cols, len(cells))
    return mesh
