# -*- coding: utf-8 -*-
# Surveymesh/fileio/emi.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Locate and read EMI survey tables. One survey is split over several regions and
two dipole orientations, one file each:

    <base>_<region>_<dipole>.txt      e.g. survey_A_H.txt, survey_B_H.txt, ...

Rows of all regions of one dipole are concatenated in region order.
"""

import logging
from typing import Sequence
import numpy as np

from mesh.core.errors import EmptyInput
from .csv_interface import Column, read_column, read_points

logger = logging.getLogger(__name__)


def emi_file(base: str, region: str, dipole: str) -> str:
    return "{}_{}_{}.txt".format(base, region, dipole)


def read_emi_points(base: str, dipole: str, regions: Sequence[str] = ("A", "B", "C"),
                    delimiter: str = "\t", columns: Sequence[Column] = (1, 2)) -> np.ndarray:
    """
    (N,3) survey positions of one dipole over all regions (z from the third
    selector, 0 if only two are given).

    Raises
    ------
    FileNotFound, ReadFailure
        From the CSV reader.
    EmptyInput
        If the files hold no rows at all.
    """
    parts = []
    for region in regions:
        path = emi_file(base, region, dipole)
        logger.info("[read_emi_points] Reading file %s.", path)
        parts.append(read_points(path, delimiter=delimiter, columns=columns))
    pts = np.vstack(parts) if parts else np.zeros((0, 3))
    if len(pts) == 0:
        raise EmptyInput("No EMI data found.", {"base": base, "dipole": dipole})
    return pts


def read_emi_values(base: str, dipole: str, regions: Sequence[str] = ("A", "B", "C"),
                    delimiter: str = "\t", column: Column = 3) -> np.ndarray:
    """(N,) measurements of one dipole over all regions."""
    parts = []
    for region in regions:
        path = emi_file(base, region, dipole)
        values = read_column(path, delimiter=delimiter, column=column)
        logger.info("[read_emi_values] Read %d values from %s", len(values), path)
        parts.append(values)
    return np.concatenate(parts) if parts else np.zeros(0)


def read_emi_samples(base: str, dipole: str, regions: Sequence[str] = ("A", "B", "C"),
                     delimiter: str = "\t", point_columns: Sequence[Column] = (1, 2),
                     value_column: Column = 3) -> np.ndarray:
    """(N,3) samples (x, y, value) of one dipole, ready for rasterization."""
    cols = list(point_columns)[:2] + [value_column]
    return read_emi_points(base, dipole, regions, delimiter, cols)
