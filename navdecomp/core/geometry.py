"""Geometry primitives for the decomposition pipeline.

Points are ``(x, y)`` float tuples and polygons are lists of points in
boundary order. Point identity is tolerance based (``EPS_POINT``) rather than
exact: triangulation and fusion rebuild vertices from independently computed
floats, so every edge-matching and splicing routine goes through
:func:`points_equal`.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .constants import EPS_POINT

Point = Tuple[float, float]
Polygon = List[Point]
Edge = Tuple[Point, Point]

__all__ = [
    'Point', 'Polygon', 'Edge',
    'as_point', 'as_polygon',
    'points_equal', 'polygon_edges', 'turn_cross', 'is_convex',
    'edges_match', 'find_shared_edge', 'share_edge',
    'polygon_signed_area', 'polygon_area', 'point_in_polygon',
]


def as_point(p) -> Point:
    """Return ``p`` as an ``(x, y)`` float tuple; raise ValueError if it is not a finite 2D point."""
    arr = np.asarray(p, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"expected a 2D point, got {p!r}")
    x, y = float(arr[0]), float(arr[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"point coordinates must be finite, got {p!r}")
    return (x, y)


def as_polygon(poly) -> Polygon:
    """Normalize a sequence of 2D points (pairs or an (N, 2) array) to a list of float tuples."""
    if poly is None:
        raise ValueError("polygon is None")
    return [as_point(p) for p in poly]


def points_equal(a: Sequence[float], b: Sequence[float], tol: float = EPS_POINT) -> bool:
    return abs(a[0] - b[0]) < tol and abs(a[1] - b[1]) < tol


def polygon_edges(poly: Sequence[Point]) -> List[Edge]:
    """Directed boundary edges ``(p[i], p[i+1])``, wrapping around to the first vertex."""
    n = len(poly)
    return [(poly[i], poly[(i + 1) % n]) for i in range(n)]


def turn_cross(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """2D cross product of the edge vectors ``b - a`` and ``c - b``."""
    return (b[0] - a[0]) * (c[1] - b[1]) - (b[1] - a[1]) * (c[0] - b[0])


def is_convex(poly: Sequence[Point]) -> bool:
    """Sign-consistency convexity test.

    Every vertex turn must have the same sign as the first non-zero one.
    Collinear triples (cross product exactly zero) are skipped, so polygons
    carrying straight-through vertices left behind by fusion still count as
    convex. Fewer than 3 points is never convex.
    """
    n = len(poly)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        cross = turn_cross(poly[i], poly[(i + 1) % n], poly[(i + 2) % n])
        if cross == 0.0:
            continue
        s = 1 if cross > 0.0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    return True


def edges_match(e1: Edge, e2: Edge, tol: float = EPS_POINT) -> bool:
    """Undirected edge identity: same endpoints in either order."""
    (a, b), (c, d) = e1, e2
    return ((points_equal(a, c, tol) and points_equal(b, d, tol)) or
            (points_equal(a, d, tol) and points_equal(b, c, tol)))


def find_shared_edge(poly1: Sequence[Point], poly2: Sequence[Point], tol: float = EPS_POINT) -> Optional[Edge]:
    """Return the first edge of ``poly1`` (in poly1's direction) that also bounds ``poly2``, or None."""
    edges2 = polygon_edges(poly2)
    for e1 in polygon_edges(poly1):
        for e2 in edges2:
            if edges_match(e1, e2, tol):
                return e1
    return None


def share_edge(poly1: Sequence[Point], poly2: Sequence[Point], tol: float = EPS_POINT) -> bool:
    return find_shared_edge(poly1, poly2, tol) is not None


def polygon_signed_area(polygon) -> float:
    """Return signed area of polygon (list of (x,y)); positive if CCW."""
    arr = np.asarray(polygon, dtype=float)
    if arr.ndim != 2 or arr.shape[0] < 3:
        return 0.0
    x = arr[:, 0]; y = arr[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def polygon_area(polygon) -> float:
    return abs(polygon_signed_area(polygon))


def point_in_polygon(x: float, y: float, polygon: Sequence[Point]) -> bool:
    """Ray casting even-odd rule; polygon: list of (x,y)."""
    inside = False
    n = len(polygon)
    if n < 3:
        return False
    for i in range(n):
        x1, y1 = polygon[i]; x2, y2 = polygon[(i + 1) % n]
        if (y1 > y) != (y2 > y) and x < (x2 - x1) * (y - y1) / (y2 - y1) + x1:
            inside = not inside
    return inside
