# -*- coding: utf-8 -*-
# Surveymesh/apps/registry.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Single source of truth for the command-line tools: id, entry point and a short
description. `main.py` dispatches through `TOOLS`.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import add_emi_data, add_scalar_timeseries, emi_to_polydata, ert_to_mesh, make_buildings


@dataclass(frozen=True)
class ToolSpec:
    id: str
    main: Callable[[Optional[List[str]]], int]
    description: str


TOOLS: Dict[str, ToolSpec] = {
    t.id: t for t in (
        ToolSpec("add-emi-data", add_emi_data.main,
                 "Rasterize EMI survey data onto a 2D mesh as cell arrays."),
        ToolSpec("emi-to-polydata", emi_to_polydata.main,
                 "Convert EMI survey data to point geometries (GML) and value lists."),
        ToolSpec("ert-to-mesh", ert_to_mesh.main,
                 "Convert an ERT table to a quad mesh."),
        ToolSpec("make-buildings", make_buildings.main,
                 "Extrude building footprints into 3D geometry."),
        ToolSpec("add-scalar-time-series", add_scalar_timeseries.main,
                 "Add a scalar time series to a layered mesh."),
    )
}


def get_tool(tool_id: str) -> ToolSpec:
    try:
        return TOOLS[tool_id]
    except KeyError:
        raise KeyError("Unknown tool '{}'. Available: {}".format(tool_id, ", ".join(TOOLS)))
