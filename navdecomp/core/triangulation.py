"""Triangulation of the walkable area (rectangle with obstacle holes).

The triangulator itself is an external oracle with an earcut-style contract:

    engine(vertices, holes, dims) -> flat sequence of vertex indices

``vertices`` is the flattened ``[x0, y0, x1, y1, ...]`` buffer holding the
outer ring followed by every hole ring, ``holes`` lists the vertex index at
which each hole starts, and every consecutive index triple names one
triangle. Two adapters ship with the package:

- ``earcut_engine`` (default) wraps ``mapbox_earcut``;
- ``delaunay_engine`` runs ``scipy.spatial.Delaunay`` on the ring vertices
  and keeps the simplices that fall inside the walkable area.

Any callable honouring the contract can be passed instead.
"""
from __future__ import annotations

from typing import Callable, Dict, List, NamedTuple, Sequence, Union

import mapbox_earcut as earcut
import numpy as np
from scipy.spatial import Delaunay

from .constants import EPS_AREA, EPS_AREA_REL
from .errors import TriangulationFailure
from .geometry import Polygon, point_in_polygon, polygon_area, polygon_signed_area
from .logging_utils import get_logger

logger = get_logger('navdecomp.triangulation')

TriangulationEngine = Callable[[Sequence[float], Sequence[int], int], Sequence[int]]

__all__ = [
    'TriangulationInput',
    'TriangulationEngine',
    'build_triangulation_input',
    'earcut_engine',
    'delaunay_engine',
    'ENGINES',
    'get_engine',
    'triangles_from_indices',
    'triangulate',
    'triangulate_polygon_with_holes',
]


class TriangulationInput(NamedTuple):
    vertices: List[float]
    holes: List[int]


def build_triangulation_input(bounding_box: Sequence[Sequence[float]],
                              obstacles: Sequence[Sequence[Sequence[float]]] = ()) -> TriangulationInput:
    """Flatten the outer ring and the obstacle rings into the engine's input format.

    Obstacles are appended in the order given; each hole start is the
    cumulative vertex count before that obstacle (not a buffer offset).
    """
    vertices: List[float] = []
    holes: List[int] = []
    for x, y in bounding_box:
        vertices.extend((float(x), float(y)))
    offset = len(bounding_box)
    for obstacle in obstacles:
        holes.append(offset)
        for x, y in obstacle:
            vertices.extend((float(x), float(y)))
        offset += len(obstacle)
    return TriangulationInput(vertices, holes)


def _split_rings(coords: np.ndarray, holes: Sequence[int]) -> List[np.ndarray]:
    bounds = [0] + [int(h) for h in holes] + [coords.shape[0]]
    return [coords[bounds[i]:bounds[i + 1]] for i in range(len(bounds) - 1)]


def _as_coords(vertices: Sequence[float], dims: int) -> np.ndarray:
    if dims != 2:
        raise ValueError(f"only 2D coordinates are supported, got dims={dims}")
    coords = np.asarray(vertices, dtype=np.float64)
    if coords.ndim != 1 or coords.size % dims:
        raise ValueError(f"vertex buffer length {coords.size} is not a multiple of {dims}")
    return coords.reshape(-1, dims)


def earcut_engine(vertices: Sequence[float], holes: Sequence[int], dims: int = 2) -> np.ndarray:
    """Ear-clipping triangulation through ``mapbox_earcut``.

    ``mapbox_earcut`` describes rings by their end index rather than the
    hole start index, so the hole starts are shifted by one ring and the
    total vertex count closes the last ring.
    """
    coords = _as_coords(vertices, dims)
    ring_ends = np.asarray([int(h) for h in holes] + [coords.shape[0]], dtype=np.uint32)
    return earcut.triangulate_float64(coords, ring_ends)


def delaunay_engine(vertices: Sequence[float], holes: Sequence[int], dims: int = 2,
                    area_rel_tol: float = EPS_AREA_REL) -> List[int]:
    """Delaunay triangulation of the ring vertices clipped to the walkable area.

    Simplices whose centroid lies outside the outer ring or inside a hole
    are dropped and the survivors are wound like the outer ring. Delaunay
    does not enforce constraint edges, so if a hole edge is missing from the
    triangulation the kept area no longer matches the walkable area and the
    result is rejected.
    """
    coords = _as_coords(vertices, dims)
    rings = _split_rings(coords, holes)
    shell, hole_rings = rings[0], rings[1:]
    if coords.shape[0] < 3:
        raise TriangulationFailure("not enough points for triangulation")
    tri = Delaunay(coords)
    shell_ccw = polygon_signed_area(shell) > 0.0
    shell_list = [tuple(p) for p in shell]
    hole_lists = [[tuple(p) for p in h] for h in hole_rings]

    out: List[int] = []
    kept_area = 0.0
    for s in tri.simplices:
        i, j, k = int(s[0]), int(s[1]), int(s[2])
        a, b, c = coords[i], coords[j], coords[k]
        signed = 0.5 * ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))
        if abs(signed) < EPS_AREA:
            continue
        cx = (a[0] + b[0] + c[0]) / 3.0
        cy = (a[1] + b[1] + c[1]) / 3.0
        if not point_in_polygon(cx, cy, shell_list):
            continue
        if any(point_in_polygon(cx, cy, h) for h in hole_lists):
            continue
        if (signed > 0.0) != shell_ccw:
            j, k = k, j
        out.extend((i, j, k))
        kept_area += abs(signed)

    expected = polygon_area(shell) - sum(polygon_area(h) for h in hole_rings)
    if abs(kept_area - expected) > area_rel_tol * max(polygon_area(shell), 1.0):
        raise TriangulationFailure(
            f"Delaunay triangulation does not respect the obstacle boundaries "
            f"(kept area {kept_area:.9g}, walkable area {expected:.9g})")
    return out


ENGINES: Dict[str, TriangulationEngine] = {
    'earcut': earcut_engine,
    'delaunay': delaunay_engine,
}


def get_engine(engine: Union[str, TriangulationEngine]) -> TriangulationEngine:
    if callable(engine):
        return engine
    try:
        return ENGINES[engine]
    except KeyError:
        raise ValueError(f"unknown triangulation engine {engine!r}; expected one of {sorted(ENGINES)}") from None


def triangles_from_indices(vertices: Sequence[float], indices: Sequence[int], dims: int = 2) -> List[Polygon]:
    """Dereference the engine's flat index triples back into coordinate triangles."""
    idx = [int(i) for i in indices]
    if len(idx) % 3:
        raise TriangulationFailure(f"engine returned {len(idx)} indices, not a multiple of 3")
    n_vertices = len(vertices) // dims
    triangles: List[Polygon] = []
    for t in range(0, len(idx), 3):
        tri: Polygon = []
        for v in idx[t:t + 3]:
            if v < 0 or v >= n_vertices:
                raise TriangulationFailure(f"engine returned vertex index {v} outside [0, {n_vertices})")
            tri.append((float(vertices[v * dims]), float(vertices[v * dims + 1])))
        triangles.append(tri)
    return triangles


def triangulate(tin: TriangulationInput, engine: Union[str, TriangulationEngine] = 'earcut',
                dims: int = 2) -> List[Polygon]:
    """Run ``engine`` on ``tin`` and return the triangles as coordinate lists.

    Whatever the engine raises is re-raised as TriangulationFailure with the
    engine's own message.
    """
    fn = get_engine(engine)
    try:
        indices = fn(tin.vertices, tin.holes, dims)
    except TriangulationFailure:
        raise
    except Exception as e:
        raise TriangulationFailure(str(e)) from e
    triangles = triangles_from_indices(tin.vertices, indices, dims)
    logger.debug("triangulated %d vertices / %d holes into %d triangles",
                 len(tin.vertices) // dims, len(tin.holes), len(triangles))
    return triangles


def triangulate_polygon_with_holes(shell, holes=(), engine: Union[str, TriangulationEngine] = 'earcut') -> List[Polygon]:
    """Triangulate an arbitrary outer ring with hole rings (no validation of shape or convexity)."""
    return triangulate(build_triangulation_input(shell, holes), engine)
