"""Greedy convex merging of triangles.

Starting from each not-yet-used triangle, the merge pass tries to absorb the
triangle's neighbors one at a time, keeping a fusion only while the merged
polygon stays convex. It is a local heuristic: the polygon count depends on
the order in which the triangulation emitted its triangles and is not
minimal in general.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .adjacency import AdjacencyGraph
from .constants import EPS_POINT
from .geometry import Point, Polygon, find_shared_edge, is_convex, points_equal
from .logging_utils import get_logger
from .stats import DecomposeStats

logger = get_logger('navdecomp.merge')

__all__ = ['fuse_polygons', 'merge_triangles_to_convex_polygons']


def fuse_polygons(poly1: Sequence[Point], poly2: Sequence[Point], tol: float = EPS_POINT) -> Optional[Polygon]:
    """Splice two polygons that share an edge into one boundary.

    With ``(a, b)`` the shared edge as it runs along ``poly1``, the result is
    ``poly1`` up to and including ``a``, then the ``len(poly2) - 2`` vertices
    of ``poly2`` that follow ``a`` in ``poly2``'s own order, then the rest of
    ``poly1``. Both polygons must have the same winding. Returns None when
    the polygons share no edge.
    """
    shared = find_shared_edge(poly1, poly2, tol)
    if shared is None:
        return None
    edge_start = shared[0]
    n2 = len(poly2)
    index = next(k for k, p in enumerate(poly2) if points_equal(p, edge_start, tol))
    index = (index + 1) % n2

    fused: Polygon = []
    for p in poly1:
        fused.append(tuple(p))
        if not points_equal(p, edge_start, tol):
            continue
        for _ in range(n2 - 2):
            fused.append(tuple(poly2[index]))
            index = (index + 1) % n2
    return fused


def merge_triangles_to_convex_polygons(triangles: Sequence[Sequence[Point]], adjacency: AdjacencyGraph,
                                       tol: float = EPS_POINT,
                                       stats: Optional[DecomposeStats] = None) -> List[Polygon]:
    """Greedily fuse adjacent triangles into convex polygons.

    Triangles are seeded in index order. For a seed, only its own adjacency
    list is walked (in list order); a neighbor whose fusion fails or would
    break convexity is skipped for that seed and stays available as a later
    seed. Every triangle ends up in exactly one output polygon.
    """
    visited = set()
    result: List[Polygon] = []
    for i in range(len(triangles)):
        if i in visited:
            continue
        merged: Polygon = [tuple(p) for p in triangles[i]]
        visited.add(i)

        for j in adjacency.get(i, ()):
            if j in visited:
                continue
            if stats is not None:
                stats.fusion_attempts += 1
            candidate = fuse_polygons(merged, triangles[j], tol)
            if candidate is None:
                if stats is not None:
                    stats.rejected_no_shared_edge += 1
                logger.debug("seed %d: triangle %d no longer touches the merged boundary", i, j)
                continue
            if not is_convex(candidate):
                if stats is not None:
                    stats.rejected_nonconvex += 1
                logger.debug("seed %d: fusing triangle %d would break convexity", i, j)
                continue
            merged = candidate
            visited.add(j)
            if stats is not None:
                stats.fusions_accepted += 1

        result.append(merged)
    return result
