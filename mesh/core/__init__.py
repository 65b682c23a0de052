# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/__init__.py

"""
Project: Surveymesh
Date: 10/16/2026

Core Subpackage:
----------------
- model:      `Mesh` container (nodes, cells, property arrays, adjacency).
- errors:     typed exceptions shared across the project.
- kernels:    XY point-in-cell predicates and interpolation.
- grid:       uniform bucket grid with nearest-node queries.
- projection: planar projection of meshes.
- locate:     cell lookup (grid + adjacency + footprint test).
- rasterize:  point-to-cell averaging of scattered samples.
"""

from .errors import (
    SurveymeshError,
    ReadFailure,
    FileNotFound,
    InvalidMesh,
    EmptyInput,
    GeometryError,
    FieldCountMismatch,
)
from .model import Mesh, CELL_DIMENSION, build_node_cells
from .grid import NodeGrid
from .projection import project_onto_plane, project_points, flatten
from .locate import CellLocator
from .rasterize import RasterStats, accumulate, rasterize

__all__ = [
    "SurveymeshError",
    "ReadFailure",
    "FileNotFound",
    "InvalidMesh",
    "EmptyInput",
    "GeometryError",
    "FieldCountMismatch",
    "Mesh",
    "CELL_DIMENSION",
    "build_node_cells",
    "NodeGrid",
    "project_onto_plane",
    "project_points",
    "flatten",
    "CellLocator",
    "RasterStats",
    "accumulate",
    "rasterize",
]
