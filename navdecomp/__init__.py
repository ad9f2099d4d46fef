"""Public package API for navdecomp.

Splits a rectangular walkable area with convex obstacles into convex
polygons for navigation meshes. This facade provides a flat import surface
on top of ``navdecomp.core`` and defers the matplotlib-backed plotting
module until first use to keep ``import navdecomp`` fast.

Example
-------
    from navdecomp import decompose

    cells = decompose([(0, 0), (10, 0), (10, 10), (0, 10)],
                      [[(4, 4), (6, 4), (6, 6), (4, 6)]])
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PkgNotFound

try:
    __version__ = _pkg_version("navmesh-decomp")
except _PkgNotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import EPS_POINT, EPS_AREA, EPS_AREA_REL
from .core.config import DecomposeConfig
from .core.errors import (
    InvalidInput, InvalidBoundingBox, InvalidObstacle, TriangulationFailure, ConformityError,
)
from .core.geometry import points_equal, polygon_edges, is_convex, polygon_area
from .core.validation import validate_input
from .core.triangulation import build_triangulation_input, triangulate, ENGINES
from .core.adjacency import build_adjacency, build_adjacency_edge_map
from .core.merge import fuse_polygons, merge_triangles_to_convex_polygons
from .core.decompose import decompose_walkable_area, decompose_with_result, DecompositionResult
from .core.conformity import check_decomposition, check_adjacency_symmetry
from .core.stats import DecomposeStats, format_stats_table
from .core.logging_utils import configure_logging, get_logger
from .core import io

decompose = decompose_walkable_area


def __getattr__(name):
    # matplotlib is only imported when plotting is first requested
    if name == "visualization":
        return _imp("navdecomp.core.visualization")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    '__version__',
    # entry points
    'decompose', 'decompose_walkable_area', 'decompose_with_result', 'DecompositionResult',
    'DecomposeConfig', 'DecomposeStats', 'format_stats_table',
    # errors
    'InvalidInput', 'InvalidBoundingBox', 'InvalidObstacle', 'TriangulationFailure', 'ConformityError',
    # pipeline stages
    'validate_input', 'build_triangulation_input', 'triangulate', 'ENGINES',
    'build_adjacency', 'build_adjacency_edge_map', 'fuse_polygons', 'merge_triangles_to_convex_polygons',
    'check_decomposition', 'check_adjacency_symmetry',
    # geometry primitives
    'points_equal', 'polygon_edges', 'is_convex', 'polygon_area',
    # tolerances
    'EPS_POINT', 'EPS_AREA', 'EPS_AREA_REL',
    # logging
    'configure_logging', 'get_logger',
    # submodules
    'io', 'visualization',
]
