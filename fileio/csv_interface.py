# -*- coding: utf-8 -*-
# Surveymesh/fileio/csv_interface.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Read survey tables (tab- or comma-separated, one header line) into NumPy arrays.
Columns are selected either by zero-based index or by header string.

Main Features:
--------------
   1) `read_points`: two or three columns -> (N,3) points (z = 0 with two columns).
   2) `read_column`: one column -> (N,) array of the requested dtype.
   3) `column_count`: number of fields in the header line.

Notes:
------
   - The first line is always treated as the header, also when selecting by index.
   - Blank lines are skipped; any other malformed row fails the whole read.
   - "NaN"/"nan" fields parse as float NaN.
"""

import csv
import os
from typing import List, Sequence, Union
import numpy as np

from mesh.core.errors import FileNotFound, ReadFailure

Column = Union[int, str]


def _read_rows(path: str, delimiter: str):
    """Return (header, [(line_no, fields), ...]) with blank lines removed."""
    if not os.path.exists(path):
        raise FileNotFound("CSV file not found.", {"path": path})
    with open(path, "r", newline="", encoding="utf-8", errors="ignore") as f:
        reader = csv.reader(f, delimiter=delimiter)
        header = None
        rows = []
        for line_no, fields in enumerate(reader, start=1):
            if not fields or all(not s.strip() for s in fields):
                continue
            if header is None:
                header = [s.strip() for s in fields]
                continue
            rows.append((line_no, fields))
    if header is None:
        raise ReadFailure("CSV file is empty.", {"path": path})
    return header, rows


def _resolve(header: List[str], column: Column, path: str) -> int:
    """Map a header name or index to a column index."""
    if isinstance(column, str):
        try:
            return header.index(column.strip())
        except ValueError:
            raise ReadFailure("Column '{}' not found in header.".format(column),
                              {"path": path, "header": header})
    idx = int(column)
    if idx < 0 or idx >= len(header):
        raise ReadFailure("Column index {} out of range.".format(idx),
                          {"path": path, "n_columns": len(header)})
    return idx


def _field(fields, idx: int, path: str, line_no: int, cast=float):
    if idx >= len(fields):
        raise ReadFailure("Row has too few fields.",
                          {"path": path, "line": line_no, "needed": idx + 1, "got": len(fields)})
    token = fields[idx].strip()
    try:
        return cast(token)
    except ValueError:
        raise ReadFailure("Cannot convert field '{}'.".format(token),
                          {"path": path, "line": line_no, "column": idx})


def column_count(path: str, delimiter: str = "\t") -> int:
    """Number of fields in the header line."""
    header, _ = _read_rows(path, delimiter)
    return len(header)


def read_points(path: str, delimiter: str = "\t", columns: Sequence[Column] = (0, 1, 2)) -> np.ndarray:
    """
    Read point coordinates from a table.

    Parameters
    ----------
    path : str
        Input file.
    delimiter : str, optional
        Field separator (default tab).
    columns : sequence of int or str
        Two (x, y) or three (x, y, z) column selectors.

    Returns
    -------
    np.ndarray
        (N,3) float64 points.

    Raises
    ------
    FileNotFound, ReadFailure
    """
    if len(columns) not in (2, 3):
        raise ValueError("columns must hold 2 or 3 selectors, got {}.".format(len(columns)))
    header, rows = _read_rows(path, delimiter)
    idx = [_resolve(header, c, path) for c in columns]

    pts = np.zeros((len(rows), 3), dtype=np.float64)
    for i, (line_no, fields) in enumerate(rows):
        for j, k in enumerate(idx):
            pts[i, j] = _field(fields, k, path, line_no)
    return pts


def read_column(path: str, delimiter: str = "\t", column: Column = 0, dtype=float) -> np.ndarray:
    """
    Read a single column as a 1D array of `dtype` (float, int or str).

    Raises
    ------
    FileNotFound, ReadFailure
    """
    header, rows = _read_rows(path, delimiter)
    k = _resolve(header, column, path)
    values = [_field(fields, k, path, line_no, cast=dtype) for line_no, fields in rows]
    if dtype is str:
        return np.asarray(values, dtype=object)
    return np.asarray(values, dtype=dtype)
