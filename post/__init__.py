# -*- coding: utf-8 -*-
# Surveymesh/post/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

Modules:
--------
- plot_mesh:   Quick 2D preview of per-cell arrays (rasterized survey data, material ids).
               Uses matplotlib PolyCollection; headless-safe backend.
"""

from .plot_mesh import plot_cell_array

__all__ = ["plot_mesh", "plot_cell_array"]
