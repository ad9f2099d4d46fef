#!/usr/bin/env python3
"""Decompose a walkable-area scene file into convex cells.

Examples:
  navdecomp scene.json                          # print cell count
  navdecomp scene.json --out cells.json --stats
  navdecomp scene.json --engine delaunay --check --plot cells.png
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from navdecomp.core.config import ADJACENCY_METHODS, ENGINE_NAMES, DecomposeConfig
from navdecomp.core.decompose import decompose_with_result
from navdecomp.core.errors import ConformityError, InvalidInput, TriangulationFailure
from navdecomp.core.io import load_scene, save_polygons, write_vtk
from navdecomp.core.logging_utils import configure_logging, get_logger
from navdecomp.core.stats import format_stats_table

log = get_logger('navdecomp.cli')

EXIT_OK = 0
EXIT_INVALID_INPUT = 2
EXIT_TRIANGULATION = 3
EXIT_CONFORMITY = 4


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='navdecomp', description=__doc__.splitlines()[0])
    p.add_argument('scene', help='JSON scene with bounding_box and obstacles')
    p.add_argument('--out', help='Write the convex cells to this JSON file (default: print to stdout)')
    p.add_argument('--vtk', help='Also write the cells as legacy VTK polydata')
    p.add_argument('--plot', help='Render the decomposition to this image file')
    p.add_argument('--engine', choices=ENGINE_NAMES, default='earcut', help='Triangulation engine (default: earcut)')
    p.add_argument('--adjacency', choices=ADJACENCY_METHODS, default='pairwise',
                   help='Adjacency graph construction (default: pairwise)')
    p.add_argument('--tol', type=float, default=None, help='Point identity tolerance')
    p.add_argument('--check', action='store_true', help='Verify convexity, overlap and area of the result')
    p.add_argument('--stats', action='store_true', help='Print run statistics')
    p.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, WARNING, ...)')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    # Log records share stdout with the JSON result, and successful runs only log at DEBUG
    if not args.out and log.isEnabledFor(logging.DEBUG):
        parser.error("--log-level DEBUG writes log records to stdout; use --out to save the cells")

    try:
        bounding_box, obstacles = load_scene(args.scene)
    except (OSError, ValueError) as e:
        log.error("cannot read scene %s: %s", args.scene, e)
        return EXIT_INVALID_INPUT

    cfg = DecomposeConfig(engine=args.engine, adjacency_method=args.adjacency,
                          check_result=args.check).with_overrides(point_tol=args.tol)
    try:
        result = decompose_with_result(bounding_box, obstacles, cfg)
    except InvalidInput as e:
        log.error("invalid input: %s", e)
        return EXIT_INVALID_INPUT
    except TriangulationFailure as e:
        log.error("triangulation failed: %s", e)
        return EXIT_TRIANGULATION
    except ConformityError as e:
        log.error("%s", e)
        return EXIT_CONFORMITY

    stats = result.stats.to_dict()
    log.debug("%d triangles -> %d convex cells", stats['triangles'], stats['polygons'])
    if args.out:
        save_polygons(args.out, result.polygons, stats=stats if args.stats else None)
    else:
        json.dump({'polygons': [[list(p) for p in poly] for poly in result.polygons]}, sys.stdout)
        sys.stdout.write('\n')
    if args.vtk:
        write_vtk(args.vtk, result.polygons)
    if args.plot:
        from navdecomp.core.visualization import plot_decomposition
        plot_decomposition(bounding_box, obstacles, result.polygons, args.plot, triangles=result.triangles)
    if args.stats:
        print(format_stats_table(stats), file=sys.stderr)
    if result.report is not None:
        print(f"conformity: {result.report.summary()}", file=sys.stderr)
    return EXIT_OK


if __name__ == '__main__':
    raise SystemExit(main())
