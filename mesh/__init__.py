# -*- coding: utf-8 -*-
# Surveymesh/mesh/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

Modules:
--------
- core:     mesh container, kernels, spatial grid, projection, rasterizer.
- io:       VTU reading/writing via meshio.
- builders: quad meshes from survey tables, scalar time series.
- api:      high-level helpers used by the command-line tools.
"""

__all__ = ["core", "io", "builders", "api"]
