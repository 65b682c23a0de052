# -*- coding: utf-8 -*-
# Surveymesh/mesh/builders/__init__.py

"""
Builders Subpackage:
--------------------
- quads:      ERT quad-strip mesh and structured section mesh.
- timeseries: layered scalar time series parsing and per-step assignment.
"""

from .quads import MATERIAL_IDS, build_ert_mesh, build_section_mesh
from .timeseries import layer_shape, parse_time_series, assign_time_step

__all__ = [
    "MATERIAL_IDS",
    "build_ert_mesh",
    "build_section_mesh",
    "layer_shape",
    "parse_time_series",
    "assign_time_step",
]
