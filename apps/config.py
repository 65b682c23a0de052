# -*- coding: utf-8 -*-
# Surveymesh/apps/config.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Tool defaults and JSON override loading.

Main Tasks
----------
   - Provide `DEFAULTS` for file layout, column selectors and array names per tool.
   - Deep-merge a user JSON file over the defaults without mutating them.
"""

from typing import Any, Dict, Optional
import copy
import json
import os

from mesh.core.errors import FileNotFound, ReadFailure


# -------------------------
# Defaults
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "csv": {
        "delimiter": "\t",
    },
    "emi": {
        "regions": ["A", "B", "C"],
        "dipoles": ["H", "V"],
        "point_columns": [1, 2],          # x, y
        "value_column": 3,
        "array_prefix": "TM_DD_",         # cell array name = prefix + dipole
        "geometry_prefix": "EMI Data ",   # GML collection name = prefix + dipole
    },
    "ert": {
        "points1": ["E1", "N1", "H1"],
        "points2": ["E2", "N2", "H2"],
        "z1": "z1/m",
        "z2": "z2/m",
        "mesh_name": "ERT Mesh",
    },
    "buildings": {
        "output_name": "output",
    },
    "timeseries": {
        "nan_value": 0.0,
        "material_key": "MaterialIDs",
        "grid_column": 0,                 # column read from each --grid file
    },
    "grid": {
        "max_per_bin": 16,                # target nodes per spatial grid bin
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Defaults, deep-merged with the JSON file at `path` (if any), then with `overrides`.

    Raises
    ------
    FileNotFound, ReadFailure
    """
    cfg = copy.deepcopy(DEFAULTS)
    if path:
        if not os.path.exists(path):
            raise FileNotFound("Config file not found.", {"path": path})
        try:
            with open(path, "r", encoding="utf-8") as f:
                user = json.load(f)
        except json.JSONDecodeError as e:
            raise ReadFailure("Config file is not valid JSON: {}".format(e), {"path": path})
        if not isinstance(user, dict):
            raise ReadFailure("Config file must hold a JSON object.", {"path": path})
        cfg = _deep_merge(cfg, user)
    return _deep_merge(cfg, overrides)
