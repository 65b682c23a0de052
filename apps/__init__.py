# -*- coding: utf-8 -*-
# Surveymesh/apps/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

Modules:
--------
- add_emi_data:          EMI samples -> cell arrays TM_DD_H / TM_DD_V on a 2D mesh.
- emi_to_polydata:       EMI samples -> GML point sets (+ optional DEM draping) and value lists.
- ert_to_mesh:           ERT table -> quad mesh with MaterialIDs.
- make_buildings:        building footprints (GML) -> extruded 3D geometry.
- add_scalar_timeseries: CSV time series -> one cell array per time-step mesh.
- common / config:       logging setup, exit codes, defaults and JSON overrides.
- registry:              tool id -> entry point, used by main.py.
"""

__all__ = [
    "add_emi_data",
    "emi_to_polydata",
    "ert_to_mesh",
    "make_buildings",
    "add_scalar_timeseries",
    "common",
    "config",
    "registry",
]
