# -*- coding: utf-8 -*-
# Surveymesh/fileio/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

Modules:
--------
- csv_interface: survey tables -> NumPy arrays (columns by index or header name).
- emi:           EMI survey file layout (<base>_<region>_<dipole>.txt).
"""

from .csv_interface import read_points, read_column, column_count
from .emi import emi_file, read_emi_points, read_emi_values, read_emi_samples

__all__ = [
    "read_points",
    "read_column",
    "column_count",
    "emi_file",
    "read_emi_points",
    "read_emi_values",
    "read_emi_samples",
]
