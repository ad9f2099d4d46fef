"""Walkable-area decomposition pipeline.

    validate -> flatten rings -> triangulate -> adjacency -> greedy convex merge

The pipeline is a pure function of its inputs: every intermediate structure
is built per call and dropped afterwards, and the same input always yields
the same polygons in the same order.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .adjacency import AdjacencyGraph, build_adjacency, build_adjacency_edge_map, count_links
from .config import DecomposeConfig
from .conformity import ConformityReport, check_decomposition
from .errors import ConformityError
from .geometry import Polygon
from .logging_utils import get_logger
from .merge import merge_triangles_to_convex_polygons
from .stats import DecomposeStats
from .triangulation import build_triangulation_input, triangulate
from .validation import validate_input

logger = get_logger('navdecomp.decompose')

__all__ = ['DecompositionResult', 'decompose_with_result', 'decompose_walkable_area']


@dataclass
class DecompositionResult:
    polygons: List[Polygon]
    triangles: List[Polygon]
    adjacency: AdjacencyGraph
    stats: DecomposeStats
    report: Optional[ConformityReport] = None


def decompose_with_result(bounding_box, obstacles: Sequence = (),
                          config: Optional[DecomposeConfig] = None) -> DecompositionResult:
    """Run the full pipeline and keep the intermediate triangles, graph and stats.

    Raises
    ------
    InvalidBoundingBox, InvalidObstacle
        On malformed input (see :func:`validate_input`).
    TriangulationFailure
        If the triangulation engine fails.
    ConformityError
        Only with ``config.check_result``, if the output is not a convex tiling.
    """
    cfg = (config or DecomposeConfig()).validate()
    stats = DecomposeStats()
    t_start = time.perf_counter()

    box, holes = validate_input(bounding_box, obstacles)
    t_valid = time.perf_counter()
    stats.time_validate = t_valid - t_start

    tin = build_triangulation_input(box, holes)
    triangles = triangulate(tin, cfg.engine)
    t_tri = time.perf_counter()
    stats.time_triangulate = t_tri - t_valid
    stats.triangles = len(triangles)

    if cfg.adjacency_method == 'edge_map':
        adjacency = build_adjacency_edge_map(triangles, cfg.point_tol)
    else:
        adjacency = build_adjacency(triangles, cfg.point_tol)
    t_adj = time.perf_counter()
    stats.time_adjacency = t_adj - t_tri
    stats.adjacency_links = count_links(adjacency)

    polygons = merge_triangles_to_convex_polygons(triangles, adjacency, cfg.point_tol, stats)
    t_end = time.perf_counter()
    stats.time_merge = t_end - t_adj
    stats.time_total = t_end - t_start
    stats.polygons = len(polygons)

    logger.debug("decomposed %d obstacle(s): %d triangles -> %d convex polygons (%d/%d fusions accepted)",
                 len(holes), stats.triangles, stats.polygons, stats.fusions_accepted, stats.fusion_attempts)

    result = DecompositionResult(polygons, triangles, adjacency, stats)
    if cfg.check_result:
        report = check_decomposition(box, holes, polygons, cfg.point_tol, cfg.area_rel_tol)
        result.report = report
        if not report.ok:
            raise ConformityError(f"decomposition failed conformity check: {report.summary()}", report)
    return result


def decompose_walkable_area(bounding_box, obstacles: Sequence = (),
                            config: Optional[DecomposeConfig] = None) -> List[Polygon]:
    """Split a rectangle minus convex obstacles into convex polygons.

    Parameters
    ----------
    bounding_box : sequence of 4 (x, y) points
        The walkable rectangle, clockwise.
    obstacles : sequence of polygons
        Convex holes inside the rectangle (each >= 3 points, clockwise).
    config : DecomposeConfig, optional
        Tolerance, engine and adjacency settings.

    Returns
    -------
    list of polygons
        Convex polygons whose union is the rectangle minus the obstacles, in
        triangle traversal order.
    """
    return decompose_with_result(bounding_box, obstacles, config).polygons
