# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/grid.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Uniform 2D bucket grid over a fixed point set (mesh nodes) with nearest-point queries.

Main Tasks:
-----------
   - Bucket points into nx * ny bins whose shape follows the bounding-box aspect ratio.
   - nearest(x, y): ring search outward from the query's (clamped) bin; stop once
     every unsearched bin is farther away than the best candidate.

Notes:
------
   - Read-only after construction; built once per rasterization / mapping call.
   - Queries outside the bounding box are clamped to border bins; the search then
     widens until the whole grid has been covered on the open sides.
   - Ties keep the first candidate found (bin order, then insertion order).
"""

import math
from typing import Dict, List, Tuple
import numpy as np

from .errors import InvalidMesh


class NodeGrid:
    """
    Uniform spatial grid for nearest-node lookup.

    Parameters
    ----------
    points : array-like
        (N, >=2) coordinates; only X,Y are used.
    max_per_bin : int, optional
        Target average number of points per bin (default 16).
    """

    __slots__ = ("_pts", "_bins", "_nx", "_ny", "_x0", "_y0", "_dx", "_dy")

    def __init__(self, points, max_per_bin: int = 16):
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[0] == 0 or pts.shape[1] < 2:
            raise InvalidMesh("Cannot build a spatial grid over an empty point set.",
                              {"shape": pts.shape})
        self._pts = pts[:, :2].copy()

        n = len(self._pts)
        x0 = float(self._pts[:, 0].min()); y0 = float(self._pts[:, 1].min())
        x1 = float(self._pts[:, 0].max()); y1 = float(self._pts[:, 1].max())
        wx = x1 - x0; wy = y1 - y0
        n_bins = max(1, n // max(1, int(max_per_bin)))

        if wx <= 0.0 and wy <= 0.0:
            nx, ny = 1, 1
        elif wy <= 0.0:
            nx, ny = n_bins, 1
        elif wx <= 0.0:
            nx, ny = 1, n_bins
        else:
            nx = max(1, int(round(math.sqrt(n_bins * wx / wy))))
            ny = max(1, int(math.ceil(n_bins / float(nx))))

        self._x0, self._y0 = x0, y0
        self._nx, self._ny = nx, ny
        self._dx = wx / nx if wx > 0.0 else 1.0
        self._dy = wy / ny if wy > 0.0 else 1.0

        bins: Dict[Tuple[int, int], List[int]] = {}
        for idx in range(n):
            key = (self._clamp_x(self._pts[idx, 0]), self._clamp_y(self._pts[idx, 1]))
            bins.setdefault(key, []).append(idx)
        self._bins = bins

    @property
    def shape(self) -> Tuple[int, int]:
        """(nx, ny) bin counts."""
        return (self._nx, self._ny)

    def _clamp_x(self, x: float) -> int:
        """Map X to integer grid column index, clamped to [0, _nx-1]."""
        ix = int(math.floor((x - self._x0) / self._dx))
        return max(0, min(self._nx - 1, ix))

    def _clamp_y(self, y: float) -> int:
        """Map Y to integer grid row index, clamped to [0, _ny-1]."""
        iy = int(math.floor((y - self._y0) / self._dy))
        return max(0, min(self._ny - 1, iy))

    def _ring(self, ix: int, iy: int, r: int):
        """Yield the in-range bins at Chebyshev distance `r` from (ix, iy)."""
        if r == 0:
            yield (ix, iy)
            return
        for cx in range(ix - r, ix + r + 1):
            if cx < 0 or cx >= self._nx:
                continue
            for cy in (iy - r, iy + r):
                if 0 <= cy < self._ny:
                    yield (cx, cy)
        for cy in range(iy - r + 1, iy + r):
            if cy < 0 or cy >= self._ny:
                continue
            for cx in (ix - r, ix + r):
                if 0 <= cx < self._nx:
                    yield (cx, cy)

    def _clearance(self, x: float, y: float, ix: int, iy: int, r: int) -> float:
        """
        Distance from (x, y) to the nearest side of the searched block that still
        has unsearched bins behind it (inf if the block covers the whole grid).
        """
        d = math.inf
        if ix - r > 0:
            d = min(d, x - (self._x0 + (ix - r) * self._dx))
        if ix + r < self._nx - 1:
            d = min(d, (self._x0 + (ix + r + 1) * self._dx) - x)
        if iy - r > 0:
            d = min(d, y - (self._y0 + (iy - r) * self._dy))
        if iy + r < self._ny - 1:
            d = min(d, (self._y0 + (iy + r + 1) * self._dy) - y)
        return d

    def nearest(self, x: float, y: float) -> int:
        """
        Index of the point closest to (x, y) in XY.
        """
        ix = self._clamp_x(x); iy = self._clamp_y(y)
        best = -1
        best_d2 = math.inf
        max_r = max(self._nx, self._ny)

        for r in range(max_r + 1):
            for key in self._ring(ix, iy, r):
                for idx in self._bins.get(key, ()):
                    px, py = self._pts[idx]
                    d2 = (px - x) * (px - x) + (py - y) * (py - y)
                    if d2 < best_d2:
                        best, best_d2 = idx, d2
            if best >= 0:
                c = self._clearance(x, y, ix, iy, r)
                if c == math.inf or (c > 0.0 and c * c >= best_d2):
                    break
        return int(best)
