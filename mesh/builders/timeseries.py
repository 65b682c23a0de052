# -*- coding: utf-8 -*-
# Surveymesh/mesh/builders/timeseries.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Read a scalar time series laid out on a layered mesh and attach one time step
at a time as a cell array.

File layout:
------------
    label,v1,v2,...,vk        <- row 0 of step 0
    ...                       <- n_rows lines per step
    label,v1,v2,...,vk        <- row n_rows-1 of step 0
    <blank line>
    label,v1,...              <- row 0 of step 1
    ...

Row r of a step fills cells r*k .. r*k + k - 1. "NaN" fields are replaced by
`nan_value` (0 by default).

Notes:
------
- The row count of a mesh is max(MaterialIDs) + 1; k = n_cells / n_rows.
- Any number of blank lines may separate steps; a step cut short by the end of
  the file is an error.
"""

import os
import logging
from typing import List, Tuple
import numpy as np

from ..core.errors import FieldCountMismatch, FileNotFound, InvalidMesh, ReadFailure
from ..core.model import Mesh
from .quads import MATERIAL_IDS

logger = logging.getLogger(__name__)


def layer_shape(mesh: Mesh, material_key: str = MATERIAL_IDS) -> Tuple[int, int]:
    """
    (n_rows, n_cols) of a layered mesh from its material ids.

    Raises
    ------
    InvalidMesh
        If the material array is missing or the cells do not split evenly into rows.
    """
    if material_key not in mesh.cell_data or mesh.n_cells == 0:
        raise InvalidMesh("Mesh has no '{}' cell array.".format(material_key), {"name": mesh.name})
    n_rows = int(np.max(mesh.cell_data[material_key])) + 1
    if n_rows <= 0 or mesh.n_cells % n_rows:
        raise InvalidMesh("Cells do not split evenly into material rows.",
                          {"n_cells": mesh.n_cells, "n_rows": n_rows})
    return n_rows, mesh.n_cells // n_rows


def _parse_value(token: str, nan_value: float, path: str, line_no: int) -> float:
    token = token.strip()
    if token in ("NaN", "nan"):
        return nan_value
    try:
        return float(token)
    except ValueError:
        raise ReadFailure("Cannot convert field '{}'.".format(token), {"path": path, "line": line_no})


def parse_time_series(path: str, n_rows: int, n_cols: int, nan_value: float = 0.0) -> List[np.ndarray]:
    """
    Parse all time steps of `path`.

    Returns
    -------
    list of np.ndarray
        One (n_rows * n_cols,) float64 array per time step.

    Raises
    ------
    FileNotFound
        Missing file.
    FieldCountMismatch
        A line does not hold exactly `n_cols` values after its label.
    ReadFailure
        Non-numeric value, or the last step has fewer than `n_rows` lines.
    """
    if not os.path.exists(path):
        raise FileNotFound("Time series file not found.", {"path": path})

    steps: List[np.ndarray] = []
    current: List[List[float]] = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            fields = line.split(",")
            if len(fields) != n_cols + 1:
                raise FieldCountMismatch(
                    "Wrong number of fields.",
                    {"path": path, "line": line_no, "expected": n_cols + 1, "got": len(fields)},
                )
            current.append([_parse_value(t, nan_value, path, line_no) for t in fields[1:]])
            if len(current) == n_rows:
                steps.append(np.asarray(current, dtype=np.float64).ravel())
                current = []

    if current:
        raise ReadFailure("Incomplete time step at end of file.",
                          {"path": path, "step": len(steps), "rows": len(current), "expected": n_rows})
    logger.info("[parse_time_series] %s: %d time steps of %d x %d values.", path, len(steps), n_rows, n_cols)
    return steps


def assign_time_step(mesh: Mesh, values, name: str) -> np.ndarray:
    """Attach one time step as cell array `name` (replaced if present)."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape[0] != mesh.n_cells:
        raise InvalidMesh("Time step does not match the number of cells.",
                          {"name": name, "values": arr.shape[0], "n_cells": mesh.n_cells})
    return mesh.add_cell_array(name, arr)
