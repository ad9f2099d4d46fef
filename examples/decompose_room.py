#!/usr/bin/env python3
"""Decompose a scene, print statistics and render the cells.

Usage:
  python examples/decompose_room.py                       # bundled room scene
  python examples/decompose_room.py my_scene.json --engine delaunay --out room.png
"""
from __future__ import annotations

import argparse
import os

from navdecomp.core.config import ENGINE_NAMES, DecomposeConfig
from navdecomp.core.decompose import decompose_with_result
from navdecomp.core.io import load_scene
from navdecomp.core.logging_utils import configure_logging, get_logger
from navdecomp.core.stats import format_stats_table
from navdecomp.core.visualization import plot_decomposition

log = get_logger('navdecomp.examples.room')

HERE = os.path.dirname(os.path.abspath(__file__))


def main() -> int:
    p = argparse.ArgumentParser()
    p.add_argument('scene', nargs='?', default=os.path.join(HERE, 'scenes', 'room.json'))
    p.add_argument('--engine', choices=ENGINE_NAMES, default='earcut')
    p.add_argument('--out', default='room_cells.png', help='Output image')
    p.add_argument('--log-level', default='INFO')
    args = p.parse_args()
    configure_logging(args.log_level)

    box, obstacles = load_scene(args.scene)
    result = decompose_with_result(box, obstacles, DecomposeConfig(engine=args.engine, check_result=True))
    log.info("conformity: %s", result.report.summary())
    print(format_stats_table(result.stats.to_dict()))
    plot_decomposition(box, obstacles, result.polygons, args.out, triangles=result.triangles)
    log.info("wrote %s", args.out)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
