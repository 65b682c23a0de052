# -*- coding: utf-8 -*-
# Surveymesh/geometry/__init__.py

"""
Geometry Package:
-----------------
- model:     `GeoCollection` (points, polylines, surfaces) and the `GeoObjects` container.
- gml:       OpenGeoSys GML reader/writer.
- buildings: extrusion of building footprints into 3D blocks.
- mapping:   elevation mapping of points onto a surface mesh.
"""

from .model import GeoCollection, GeoObjects, Polyline, Surface
from .gml import read_gml, write_gml, to_gml_string
from .buildings import make_buildings
from .mapping import map_onto_surface, map_collection

__all__ = [
    "GeoCollection",
    "GeoObjects",
    "Polyline",
    "Surface",
    "read_gml",
    "write_gml",
    "to_gml_string",
    "make_buildings",
    "map_onto_surface",
    "map_collection",
]
