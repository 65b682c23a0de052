# -*- coding: utf-8 -*-
# Surveymesh/geometry/model.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
In-memory geometry collections: named sets of points, polylines and triangulated
surfaces, several of which live side by side in a `GeoObjects` container.

Notes:
------
- Polylines and surfaces reference points by position in the collection's point array.
- Collections are validated on construction; bad references raise GeometryError.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np

from mesh.core.errors import GeometryError


@dataclass(eq=False)
class Polyline:
    points: List[int]
    name: Optional[str] = None


@dataclass(eq=False)
class Surface:
    triangles: List[Tuple[int, int, int]]
    name: Optional[str] = None


@dataclass(eq=False)
class GeoCollection:
    """
    One named geometry: (P,3) points plus polylines and surfaces over them.
    """
    name: str
    points: np.ndarray
    polylines: List[Polyline] = field(default_factory=list)
    surfaces: List[Surface] = field(default_factory=list)
    point_names: Dict[int, str] = field(default_factory=dict)

    def __post_init__(self):
        pts = np.asarray(self.points, dtype=np.float64)
        if pts.size == 0:
            pts = np.zeros((0, 3), dtype=np.float64)
        elif pts.ndim != 2 or pts.shape[1] not in (2, 3):
            raise GeometryError("Points must have shape (P,2) or (P,3).", {"name": self.name, "shape": pts.shape})
        elif pts.shape[1] == 2:
            pts = np.column_stack([pts, np.zeros(len(pts))])
        self.points = pts
        self.validate()

    @property
    def n_points(self) -> int:
        return int(len(self.points))

    def validate(self) -> None:
        """Check that every polyline/surface references existing points."""
        n = self.n_points
        for i, ply in enumerate(self.polylines):
            bad = [p for p in ply.points if p < 0 or p >= n]
            if bad:
                raise GeometryError("Polyline references unknown points.",
                                    {"geometry": self.name, "polyline": i, "ids": bad[:5]})
        for i, sfc in enumerate(self.surfaces):
            for tri in sfc.triangles:
                if len(tri) != 3 or any(p < 0 or p >= n for p in tri):
                    raise GeometryError("Surface has an invalid triangle.",
                                        {"geometry": self.name, "surface": i, "triangle": tuple(tri)})


class GeoObjects:
    """
    Container of named geometry collections.
    """

    def __init__(self):
        self._items: Dict[str, GeoCollection] = {}

    def add(self, geo: GeoCollection, replace: bool = False) -> GeoCollection:
        if geo.name in self._items and not replace:
            raise GeometryError("Geometry name already in use.", {"name": geo.name})
        self._items[geo.name] = geo
        return geo

    def get(self, name: str) -> GeoCollection:
        try:
            return self._items[name]
        except KeyError:
            raise GeometryError("Unknown geometry.", {"name": name, "available": self.names()})

    def names(self) -> List[str]:
        return list(self._items.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
