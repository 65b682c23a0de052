# -*- coding: utf-8 -*-
# Surveymesh/mesh/io/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

I/O Subpackage:
---------------
- vtu: VTK unstructured-grid reader/writer on top of `meshio`.
"""

from .vtu import read_vtu, write_vtu

__all__ = ["read_vtu", "write_vtu"]
