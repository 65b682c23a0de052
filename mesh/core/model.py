# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/model.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Provide the `Mesh` container used by every tool: an arena of nodes and cells
addressed by stable integer indices, plus named per-cell / per-node property arrays.

Main Tasks:
-----------
    1) Hold node coordinates as an (N,3) float64 array; node id == row index.
    2) Hold cells as an immutable tuple of node-index tuples; cell id == position.
    3) Validate that every cell references existing nodes.
    4) Derive (once) the node -> incident cells adjacency.
    5) Attach named cell/point arrays with length checks.

Unification Convention:
-----------------------
- Cells of all types share one index space, in the order they were given (or read).
- Every per-cell array in `cell_data` is index-aligned with `cells`.

Notes:
------
- The mesh is the sole owner of nodes and cells; there are no back-references
  from nodes to cells. Adjacency is a derived, read-only mapping.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple
import numpy as np

from .errors import InvalidMesh


# Topological dimension per (meshio) cell type name
CELL_DIMENSION: Dict[str, int] = {
    "vertex": 0,
    "line": 1,
    "triangle": 2,
    "quad": 2,
    "tetra": 3,
    "hexahedron": 3,
    "wedge": 3,
    "pyramid": 3,
}

_TYPE_BY_SIZE = {1: "vertex", 2: "line", 3: "triangle", 4: "quad"}


def _as_nodes(nodes) -> np.ndarray:
    """Coerce node coordinates to (N,3) float64; 2D input gets z = 0."""
    pts = np.asarray(nodes, dtype=np.float64)
    if pts.size == 0:
        return np.zeros((0, 3), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise InvalidMesh("Node array must have shape (N,2) or (N,3).", {"shape": pts.shape})
    if pts.shape[1] == 2:
        pts3 = np.zeros((pts.shape[0], 3), dtype=np.float64)
        pts3[:, :2] = pts
        return pts3
    return pts.copy()


def build_node_cells(cells: Sequence[Sequence[int]], n_nodes: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Build node -> incident cell ids: entry k lists the cells using node k,
    in ascending cell order.
    """
    incident = [[] for _ in range(n_nodes)]
    for cid, conn in enumerate(cells):
        for n in conn:
            lst = incident[int(n)]
            # a cell listing the same node twice is still incident once
            if not lst or lst[-1] != cid:
                lst.append(cid)
    return tuple(tuple(lst) for lst in incident)


@dataclass(eq=False)
class Mesh:
    """
    Unstructured mesh: nodes, cells and named property arrays.

    Attributes
    ----------
    name : str
        Mesh name (informational).
    nodes : np.ndarray
        (N,3) float64 node coordinates.
    cells : tuple of tuple of int
        Node indices per cell.
    cell_types : tuple of str
        meshio cell type per cell ("line", "triangle", "quad", ...).
    cell_data : dict
        name -> (C,) or (C,k) array.
    point_data : dict
        name -> (N,) or (N,k) array.
    """
    name: str
    nodes: np.ndarray
    cells: Tuple[Tuple[int, ...], ...]
    cell_types: Tuple[str, ...] = ()
    cell_data: Dict[str, np.ndarray] = field(default_factory=dict)
    point_data: Dict[str, np.ndarray] = field(default_factory=dict)
    _node_cells: Optional[Tuple[Tuple[int, ...], ...]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.nodes = _as_nodes(self.nodes)
        self.cells = tuple(tuple(int(n) for n in conn) for conn in self.cells)

        if not self.cell_types:
            types = []
            for conn in self.cells:
                t = _TYPE_BY_SIZE.get(len(conn))
                if t is None:
                    raise InvalidMesh("Cannot infer cell type from node count.", {"n_nodes": len(conn)})
                types.append(t)
            self.cell_types = tuple(types)
        else:
            self.cell_types = tuple(self.cell_types)
        if len(self.cell_types) != len(self.cells):
            raise InvalidMesh(
                "cell_types and cells differ in length.",
                {"n_types": len(self.cell_types), "n_cells": len(self.cells)},
            )

        n = len(self.nodes)
        for cid, conn in enumerate(self.cells):
            for k in conn:
                if k < 0 or k >= n:
                    raise InvalidMesh(
                        "Cell references a node that does not exist.",
                        {"cell": cid, "node": k, "n_nodes": n},
                    )

        for key in list(self.cell_data):
            self.cell_data[key] = self._checked(key, self.cell_data[key], len(self.cells), "cell")
        for key in list(self.point_data):
            self.point_data[key] = self._checked(key, self.point_data[key], n, "point")

    # --------------------
    # Sizes & topology
    # --------------------
    @property
    def n_nodes(self) -> int:
        return int(len(self.nodes))

    @property
    def n_cells(self) -> int:
        return int(len(self.cells))

    @property
    def dimension(self) -> int:
        """Largest topological dimension of the cells (0 for an empty mesh)."""
        if not self.cell_types:
            return 0
        return max(CELL_DIMENSION.get(t, 0) for t in self.cell_types)

    def node_cells(self) -> Tuple[Tuple[int, ...], ...]:
        """Node -> incident cell ids, built on first use and cached."""
        if self._node_cells is None:
            self._node_cells = build_node_cells(self.cells, self.n_nodes)
        return self._node_cells

    def cell_coords(self, cid: int) -> np.ndarray:
        """(k,3) coordinates of the nodes of cell `cid`."""
        return self.nodes[list(self.cells[cid])]

    # --------------------
    # Property arrays
    # --------------------
    @staticmethod
    def _checked(name: str, values, expected: int, kind: str) -> np.ndarray:
        arr = np.asarray(values)
        if arr.ndim == 0 or arr.shape[0] != expected:
            raise InvalidMesh(
                "Property array '{}' does not match the number of {}s.".format(name, kind),
                {"expected": expected, "got": None if arr.ndim == 0 else arr.shape[0]},
            )
        return arr

    def add_cell_array(self, name: str, values) -> np.ndarray:
        """Attach (or replace) a per-cell array; returns the stored array."""
        arr = self._checked(name, values, self.n_cells, "cell")
        self.cell_data[name] = arr
        return arr

    def add_point_array(self, name: str, values) -> np.ndarray:
        """Attach (or replace) a per-node array; returns the stored array."""
        arr = self._checked(name, values, self.n_nodes, "point")
        self.point_data[name] = arr
        return arr

    def with_nodes(self, nodes, name: Optional[str] = None) -> "Mesh":
        """
        Structurally identical copy with replaced node coordinates.
        Cells, cell types and (copied) property arrays are preserved.
        """
        new_nodes = _as_nodes(nodes)
        if len(new_nodes) != self.n_nodes:
            raise InvalidMesh("Replacement node array has a different length.",
                              {"expected": self.n_nodes, "got": len(new_nodes)})
        out = Mesh(
            name=self.name if name is None else name,
            nodes=new_nodes,
            cells=self.cells,
            cell_types=self.cell_types,
            cell_data={k: np.array(v, copy=True) for k, v in self.cell_data.items()},
            point_data={k: np.array(v, copy=True) for k, v in self.point_data.items()},
        )
        # same cells -> same adjacency
        out._node_cells = self._node_cells
        return out
