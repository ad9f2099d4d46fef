"""Triangle adjacency graph (which triangles share an edge).

Two triangles are adjacent when one of their edges coincides under the
point tolerance, in either direction. The graph maps each triangle index
to the ascending list of its neighbors' indices; that order is the order
the merge pass visits neighbors in.
"""
from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from .constants import EPS_POINT
from .geometry import Point, points_equal, share_edge
from .logging_utils import get_logger

logger = get_logger('navdecomp.adjacency')

AdjacencyGraph = Dict[int, List[int]]

__all__ = [
    'AdjacencyGraph',
    'build_adjacency',
    'build_adjacency_edge_map',
    'count_links',
]


def build_adjacency(triangles: Sequence[Sequence[Point]], tol: float = EPS_POINT) -> AdjacencyGraph:
    """Dense O(T^2) scan over every ordered pair of distinct triangles."""
    n = len(triangles)
    graph: AdjacencyGraph = {}
    for i in range(n):
        graph[i] = [j for j in range(n) if j != i and share_edge(triangles[i], triangles[j], tol)]
    logger.debug("pairwise adjacency: %d triangles, %d links", n, count_links(graph))
    return graph


def _snap_vertices(triangles: Sequence[Sequence[Point]], tol: float) -> List[Tuple[int, ...]]:
    """Assign every triangle corner a canonical vertex id.

    Vertices are bucketed on a grid of cell size ``tol``; a corner reuses the
    id of a tolerance-equal vertex found in its own or a neighboring cell.
    """
    cells: Dict[Tuple[int, int], List[Tuple[Point, int]]] = defaultdict(list)
    next_id = 0
    out = []
    for tri in triangles:
        ids = []
        for p in tri:
            cx, cy = math.floor(p[0] / tol), math.floor(p[1] / tol)
            found = None
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    for q, vid in cells.get((cx + dx, cy + dy), ()):
                        if points_equal(p, q, tol):
                            found = vid
                            break
                    if found is not None:
                        break
                if found is not None:
                    break
            if found is None:
                found = next_id
                next_id += 1
                cells[(cx, cy)].append((p, found))
            ids.append(found)
        out.append(tuple(ids))
    return out


def build_adjacency_edge_map(triangles: Sequence[Sequence[Point]], tol: float = EPS_POINT) -> AdjacencyGraph:
    """Edge-keyed adjacency: same relation as :func:`build_adjacency` in O(T) expected time.

    Corners are snapped to canonical vertex ids first, so the relation only
    differs from the pairwise scan when vertices form chains of points that
    are each within ``tol`` of the next but not of each other.
    """
    corner_ids = _snap_vertices(triangles, tol)
    users: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for t, ids in enumerate(corner_ids):
        for k in range(len(ids)):
            a, b = ids[k], ids[(k + 1) % len(ids)]
            users[(a, b) if a < b else (b, a)].append(t)

    neighbors: Dict[int, set] = {t: set() for t in range(len(triangles))}
    for tris in users.values():
        for t in tris:
            neighbors[t].update(u for u in tris if u != t)
    graph: AdjacencyGraph = {t: sorted(ns) for t, ns in neighbors.items()}
    logger.debug("edge-map adjacency: %d triangles, %d edges, %d links",
                 len(triangles), len(users), count_links(graph))
    return graph


def count_links(graph: AdjacencyGraph) -> int:
    """Number of undirected adjacency links (each symmetric pair counted once)."""
    return sum(len(v) for v in graph.values()) // 2
