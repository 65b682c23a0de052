# -*- coding: utf-8 -*-
# Surveymesh/geometry/mapping.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Map point elevations onto a surface mesh (DEM). Each point's z is replaced by
the surface elevation at its (x, y) position.

Notes:
------
- Elevation inside a cell is linear (triangle weights; quads via the containing
  sub-triangle).
- Points outside the surface footprint take the elevation of the nearest surface node.
- Points with a NaN or infinite x/y are returned unchanged.
"""

import logging
import numpy as np

from mesh.api import require_surface
from mesh.core.kernels import interpolate_in_cell
from mesh.core.locate import CellLocator
from mesh.core.model import Mesh
from .model import GeoCollection

logger = logging.getLogger(__name__)


def map_onto_surface(points, surface: Mesh) -> np.ndarray:
    """
    Return a copy of (N,3) `points` with z taken from `surface`.

    Raises
    ------
    InvalidMesh
        If `surface` is empty or not 2D.
    """
    require_surface(surface)
    pts = np.array(points, dtype=np.float64, copy=True)
    if pts.size == 0:
        return pts.reshape(0, 3)
    if pts.shape[1] == 2:
        pts = np.column_stack([pts, np.zeros(len(pts))])

    locator = CellLocator(surface)
    outside = 0
    skipped = 0
    for i in range(len(pts)):
        x, y = pts[i, 0], pts[i, 1]
        if not (np.isfinite(x) and np.isfinite(y)):
            skipped += 1
            continue
        cid = locator.find(x, y)
        z = None
        if cid is not None:
            # interpolate with the original (unflattened) elevations
            z = interpolate_in_cell(pts[i, :2], surface.cell_coords(cid))
        if z is None:
            z = float(surface.nodes[locator.nearest_node(x, y), 2])
            outside += 1
        pts[i, 2] = z

    if outside:
        logger.info("[map_onto_surface] %d of %d points outside the surface; nearest node elevation used.",
                    outside, len(pts))
    if skipped:
        logger.warning("[map_onto_surface] %d points with non-finite x/y left unchanged.", skipped)
    return pts


def map_collection(geo: GeoCollection, surface: Mesh) -> GeoCollection:
    """Map the points of `geo` onto `surface` in place; returns `geo`."""
    geo.points = map_onto_surface(geo.points, surface)
    logger.info("[map_collection] '%s': %d points mapped onto '%s'.", geo.name, geo.n_points, surface.name)
    return geo
