# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/kernels.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Lightweight 2D geometry kernels for point location on surface meshes.
Numpy-only routines that operate in the XY plane.

Main Tasks:
-----------
   - Basic primitives: signed triangle area, barycentric coordinates.
   - Predicates: point-in-triangle / quad / cell (boundary inclusive).
   - Linear interpolation of node elevations inside a triangle or quad.

Notes:
------
   - Inputs may have >=2 coordinates; only X,Y are used (Z ignored).
   - Quads are treated as the union of triangles (0,1,2) and (0,2,3).
   - Tolerances (`eps`) are conservative defaults; callers may override.
"""

from typing import Optional, Tuple
import numpy as np


# ---------------------------
# Basic vector helpers
# ---------------------------
def _xy(a: np.ndarray) -> np.ndarray:
    """
    Return the X,Y slice of `a`, ensuring shape (..., 2). Extra coords are ignored.
    """
    a = np.asarray(a, dtype=float)
    if a.shape[-1] > 2:
        return a[..., :2]
    return a


def signed_area_tri(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """
    Signed area of triangle ABC in XY (CCW > 0).
    """
    a = _xy(a); b = _xy(b); c = _xy(c)
    return 0.5 * float((b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0]))


def barycentric(p: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray,
                eps: float = 1e-14) -> Optional[Tuple[float, float, float]]:
    """
    Barycentric weights (wa, wb, wc) of P with respect to triangle ABC in XY.
    Returns None for a degenerate (zero-area) triangle.
    """
    P = _xy(p); A = _xy(a); B = _xy(b); C = _xy(c)
    v0 = C - A; v1 = B - A; v2 = P - A
    den = v0[0]*v1[1] - v0[1]*v1[0]
    if abs(den) < eps:
        return None
    wc = (v2[0]*v1[1] - v2[1]*v1[0]) / den
    wb = (v2[0]*v0[1] - v2[1]*v0[0]) / -den
    wa = 1.0 - wb - wc
    return (float(wa), float(wb), float(wc))


# ---------------------------
# Point tests
# ---------------------------
def point_in_triangle(p: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray, eps: float = 1e-14) -> bool:
    """
    Barycentric point-in-triangle test (boundary inclusive).
    """
    w = barycentric(p, a, b, c, eps)
    if w is None:
        return False
    return (w[0] >= -eps) and (w[1] >= -eps) and (w[2] >= -eps)


def point_in_quad(p: np.ndarray, quad4: np.ndarray, eps: float = 1e-14) -> bool:
    """
    Point-in-quad via split into two triangles: (0,1,2) ∪ (0,2,3).
    quad4: array-like shape (4,2) or (4,>=2).
    """
    Q = _xy(np.asarray(quad4))
    return point_in_triangle(p, Q[0], Q[1], Q[2], eps) or point_in_triangle(p, Q[0], Q[2], Q[3], eps)


def point_in_cell(p: np.ndarray, coords: np.ndarray, eps: float = 1e-14) -> bool:
    """
    Footprint test for a surface cell given its node coordinates (k, >=2).
    Only triangles (k=3) and quads (k=4) have an areal footprint.
    """
    k = len(coords)
    if k == 3:
        return point_in_triangle(p, coords[0], coords[1], coords[2], eps)
    if k == 4:
        return point_in_quad(p, coords, eps)
    return False


# ---------------------------
# Interpolation
# ---------------------------
def interpolate_in_cell(p: np.ndarray, coords: np.ndarray, eps: float = 1e-14) -> Optional[float]:
    """
    Linearly interpolate the Z of `coords` (k,3) at XY position `p`.

    Triangles use barycentric weights; quads use the sub-triangle that contains
    `p`. Returns None if `p` is outside the cell footprint.
    """
    C = np.asarray(coords, dtype=float)
    if len(C) == 3:
        tris = ((0, 1, 2),)
    elif len(C) == 4:
        tris = ((0, 1, 2), (0, 2, 3))
    else:
        return None

    for i, j, k in tris:
        w = barycentric(p, C[i], C[j], C[k], eps)
        if w is None:
            continue
        if (w[0] >= -eps) and (w[1] >= -eps) and (w[2] >= -eps):
            return float(w[0]*C[i, 2] + w[1]*C[j, 2] + w[2]*C[k, 2])
    return None
