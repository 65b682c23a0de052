# -*- coding: utf-8 -*-
# Surveymesh/geometry/buildings.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Extrude building footprints (polylines of a geometry collection) into simple 3D
block objects of a given height.

Construction:
-------------
    points   : P originals, then P copies lifted by `height` (copy of point i is i + P)
    polylines: copied unchanged
    surfaces : originals, then one wall surface per polyline, then one roof per
               original surface (triangles shifted by P)

Wall triangles for consecutive polyline points (i-1, i):
    (i, i-1, i-1+P) and (i, i-1+P, i+P)
"""

import logging
import numpy as np

from mesh.core.errors import GeometryError
from .model import GeoCollection, Polyline, Surface

logger = logging.getLogger(__name__)


def make_buildings(src: GeoCollection, height: float, name: str = "output") -> GeoCollection:
    """
    Build the extruded collection `name` from `src`; `src` is not modified.
    """
    height = float(height)
    if not np.isfinite(height):
        raise GeometryError("Building height must be finite.", {"height": height})

    P = src.n_points
    top = src.points.copy()
    top[:, 2] += height
    points = np.vstack([src.points, top])

    polylines = [Polyline(points=list(p.points), name=p.name) for p in src.polylines]
    surfaces = [Surface(triangles=[tuple(t) for t in s.triangles], name=s.name) for s in src.surfaces]

    for ply in src.polylines:
        ids = ply.points
        tris = []
        for i in range(1, len(ids)):
            a, b = ids[i], ids[i - 1]
            tris.append((a, b, b + P))
            tris.append((a, b + P, a + P))
        surfaces.append(Surface(triangles=tris))

    for sfc in src.surfaces:
        surfaces.append(Surface(triangles=[(a + P, b + P, c + P) for a, b, c in sfc.triangles]))

    out = GeoCollection(name=name, points=points, polylines=polylines, surfaces=surfaces,
                        point_names=dict(src.point_names))
    logger.info("[make_buildings] '%s' -> '%s': %d points, %d surfaces (height %g).",
                src.name, name, out.n_points, len(surfaces), height)
    return out
