# -*- coding: utf-8 -*-
# Surveymesh/mesh/io/vtu.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Read and write VTK unstructured-grid (.vtu) meshes with `meshio`, converting
between meshio's block-wise cell layout and the unified `Mesh` container.

Main Tasks:
-----------
    1. Read with `meshio.read`; pad 2D points to 3D.
    2. Unify cell blocks in file order; concatenate block-wise cell data.
    3. Write consecutive runs of equal cell type as separate meshio blocks so the
       unified cell order (and every per-cell array) round-trips exactly.

Notes:
------
- Cell data arrays missing from some blocks cannot be unified and are skipped
  with a warning.
- Field data is not carried.
"""

import os
import logging
from typing import Dict, List, Tuple
import numpy as np
import meshio

from ..core.errors import FileNotFound, ReadFailure
from ..core.model import Mesh

logger = logging.getLogger(__name__)


def _unify_cell_data(m: "meshio.Mesh", n_blocks: int) -> Dict[str, np.ndarray]:
    """Concatenate per-block cell data into unified arrays (name -> (C,...))."""
    out: Dict[str, np.ndarray] = {}
    for name, blocks in (getattr(m, "cell_data", {}) or {}).items():
        if len(blocks) != n_blocks:
            logger.warning("[read_vtu] Cell array '%s' is not defined on every block; skipped.", name)
            continue
        out[name] = np.concatenate([np.asarray(b) for b in blocks], axis=0)
    return out


def read_vtu(path: str) -> Mesh:
    """
    Load a .vtu file into a `Mesh`.

    Raises
    ------
    FileNotFound
        If `path` does not exist.
    ReadFailure
        If meshio cannot parse the file.
    """
    if not os.path.exists(path):
        raise FileNotFound("Mesh file not found.", {"path": path})
    try:
        m = meshio.read(path, file_format="vtu")
    # meshio exits the interpreter on some unparseable files
    except (Exception, SystemExit) as e:
        raise ReadFailure("Could not read mesh file: {}".format(e), {"path": path})

    cells: List[Tuple[int, ...]] = []
    types: List[str] = []
    for cb in m.cells:
        t = getattr(cb, "type", None)
        for conn in np.asarray(cb.data, dtype=np.int64):
            cells.append(tuple(int(k) for k in conn))
            types.append(t)

    point_data = {k: np.asarray(v) for k, v in (getattr(m, "point_data", {}) or {}).items()}
    mesh = Mesh(
        name=os.path.splitext(os.path.basename(path))[0],
        nodes=np.asarray(m.points, dtype=float),
        cells=cells,
        cell_types=types,
        cell_data=_unify_cell_data(m, len(m.cells)),
        point_data=point_data,
    )
    logger.info("[read_vtu] %s: %d nodes, %d cells.", path, mesh.n_nodes, mesh.n_cells)
    return mesh


def _runs(cell_types) -> List[Tuple[str, int, int]]:
    """Consecutive (type, start, stop) runs over the unified cell list."""
    runs: List[Tuple[str, int, int]] = []
    start = 0
    for i in range(1, len(cell_types) + 1):
        if i == len(cell_types) or cell_types[i] != cell_types[start]:
            runs.append((cell_types[start], start, i))
            start = i
    return runs


def write_vtu(mesh: Mesh, path: str) -> str:
    """
    Write `mesh` (nodes, cells, cell and point arrays) to a .vtu file.

    Returns
    -------
    str
        Written file path.
    """
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    runs = _runs(mesh.cell_types) if mesh.n_cells else []
    cells = []
    for t, a, b in runs:
        cells.append((t, np.asarray(mesh.cells[a:b], dtype=np.int64)))

    cell_data = {}
    for name, arr in mesh.cell_data.items():
        arr = np.asarray(arr)
        cell_data[name] = [arr[a:b] for _, a, b in runs]

    meshio.write(
        path,
        meshio.Mesh(
            points=mesh.nodes,
            cells=cells,
            point_data={k: np.asarray(v) for k, v in mesh.point_data.items()},
            cell_data=cell_data,
        ),
    )
    logger.info("[write_vtu] %s written (%d nodes, %d cells).", path, mesh.n_nodes, mesh.n_cells)
    return path
