"""Structural checks on a finished decomposition.

A valid decomposition is a set of convex polygons that do not overlap and
whose areas add up to the rectangle minus the obstacles. Together those two
properties mean the polygons tile the walkable area.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .adjacency import AdjacencyGraph
from .constants import EPS_AREA_REL, EPS_POINT
from .geometry import Point, is_convex, polygon_area, polygon_edges

__all__ = [
    'ConformityReport',
    'convex_polygons_overlap',
    'check_decomposition',
    'check_adjacency_symmetry',
]


@dataclass
class ConformityReport:
    non_convex: List[int] = field(default_factory=list)
    overlapping: List[Tuple[int, int]] = field(default_factory=list)
    expected_area: float = 0.0
    actual_area: float = 0.0
    area_ok: bool = True

    @property
    def area_error(self) -> float:
        return self.actual_area - self.expected_area

    @property
    def ok(self) -> bool:
        return self.area_ok and not self.non_convex and not self.overlapping

    def summary(self) -> str:
        if self.ok:
            return f"ok (area {self.actual_area:.9g})"
        parts = []
        if self.non_convex:
            parts.append(f"{len(self.non_convex)} non-convex polygon(s) {self.non_convex}")
        if self.overlapping:
            parts.append(f"{len(self.overlapping)} overlapping pair(s) {self.overlapping}")
        if not self.area_ok:
            parts.append(f"area {self.actual_area:.9g} != expected {self.expected_area:.9g}")
        return "; ".join(parts)


def _bbox(poly: Sequence[Point]):
    xs = [p[0] for p in poly]; ys = [p[1] for p in poly]
    return min(xs), max(xs), min(ys), max(ys)


def convex_polygons_overlap(p: Sequence[Point], q: Sequence[Point], tol: float = EPS_POINT) -> bool:
    """Separating-axis test for two convex polygons.

    Polygons that only touch along an edge or at a vertex (within ``tol``)
    do not overlap.
    """
    for a, b in polygon_edges(p) + polygon_edges(q):
        ex, ey = b[0] - a[0], b[1] - a[1]
        length = math.hypot(ex, ey)
        if length < tol:
            continue
        nx, ny = -ey / length, ex / length
        proj_p = [v[0] * nx + v[1] * ny for v in p]
        proj_q = [v[0] * nx + v[1] * ny for v in q]
        if max(proj_p) <= min(proj_q) + tol or max(proj_q) <= min(proj_p) + tol:
            return False
    return True


def check_decomposition(bounding_box: Sequence[Point], obstacles: Sequence[Sequence[Point]],
                        polygons: Sequence[Sequence[Point]], tol: float = EPS_POINT,
                        area_rel_tol: float = EPS_AREA_REL) -> ConformityReport:
    """Check convexity, pairwise non-overlap and area coverage of ``polygons``."""
    report = ConformityReport()
    report.non_convex = [i for i, poly in enumerate(polygons) if not is_convex(poly)]

    boxes = [_bbox(poly) for poly in polygons]
    for i in range(len(polygons)):
        for j in range(i + 1, len(polygons)):
            a, b = boxes[i], boxes[j]
            if a[1] <= b[0] + tol or b[1] <= a[0] + tol or a[3] <= b[2] + tol or b[3] <= a[2] + tol:
                continue
            if convex_polygons_overlap(polygons[i], polygons[j], tol):
                report.overlapping.append((i, j))

    box_area = polygon_area(bounding_box)
    report.expected_area = box_area - sum(polygon_area(o) for o in obstacles)
    report.actual_area = sum(polygon_area(poly) for poly in polygons)
    report.area_ok = abs(report.area_error) <= area_rel_tol * max(box_area, 1.0)
    return report


def check_adjacency_symmetry(adjacency: AdjacencyGraph) -> List[Tuple[int, int]]:
    """Return the links ``(i, j)`` listed for ``i`` but missing the reverse entry."""
    return [(i, j) for i, ns in adjacency.items() for j in ns if i not in adjacency.get(j, ())]
