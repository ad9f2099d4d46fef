"""Lightweight file I/O for scenes and decompositions.

- load_scene / save_scene: JSON walkable-area description
- save_polygons / load_polygons: JSON list of convex cells
- write_vtk: legacy VTK POLYDATA for ParaView/VisIt

Scene format::

    {
      "bounding_box": [[0, 0], [10, 0], [10, 10], [0, 10]],
      "obstacles": [[[4, 4], [6, 4], [6, 6], [4, 6]]]
    }

Points may also be written as ``{"x": 0, "y": 0}`` objects.
"""
from __future__ import annotations

import json
from typing import List, Sequence, Tuple

import numpy as np

from .geometry import Point, Polygon

__all__ = ['parse_point', 'parse_polygon', 'load_scene', 'save_scene',
           'save_polygons', 'load_polygons', 'write_vtk']


def parse_point(obj) -> Point:
    """Read a point written as ``[x, y]`` or ``{"x": x, "y": y}``."""
    if isinstance(obj, dict):
        try:
            return (float(obj['x']), float(obj['y']))
        except KeyError as e:
            raise ValueError(f"point object is missing key {e}: {obj!r}") from None
    if isinstance(obj, (list, tuple)) and len(obj) == 2:
        return (float(obj[0]), float(obj[1]))
    raise ValueError(f"cannot read a 2D point from {obj!r}")


def parse_polygon(obj) -> Polygon:
    if not isinstance(obj, list):
        raise ValueError(f"polygon must be a list of points, got {type(obj).__name__}")
    return [parse_point(p) for p in obj]


def load_scene(filepath: str) -> Tuple[Polygon, List[Polygon]]:
    """Read a walkable-area scene from JSON.

    Parameters
    ----------
    filepath : str
        Path to a JSON file with ``bounding_box`` and optional ``obstacles``.

    Returns
    -------
    bounding_box : list of (x, y)
    obstacles : list of polygons

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not follow the scene layout.
    FileNotFoundError
        If the file doesn't exist.

    Notes
    -----
    Only the layout is checked here; point counts and convexity are the
    pipeline's :func:`validate_input` job.
    """
    with open(filepath, 'r', encoding='utf-8') as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath}: invalid JSON ({e})") from e
    if not isinstance(data, dict) or 'bounding_box' not in data:
        raise ValueError(f"{filepath}: expected an object with a 'bounding_box' key")
    obstacles = data.get('obstacles')
    if obstacles is None:
        obstacles = []
    if not isinstance(obstacles, list):
        raise ValueError(f"{filepath}: 'obstacles' must be a list of polygons")
    return parse_polygon(data['bounding_box']), [parse_polygon(o) for o in obstacles]


def save_scene(filepath: str, bounding_box: Sequence[Point], obstacles: Sequence[Sequence[Point]] = ()) -> None:
    data = {
        'bounding_box': [[float(x), float(y)] for x, y in bounding_box],
        'obstacles': [[[float(x), float(y)] for x, y in o] for o in obstacles],
    }
    with open(filepath, 'w', encoding='utf-8') as fh:
        json.dump(data, fh, indent=2)


def save_polygons(filepath: str, polygons: Sequence[Sequence[Point]], stats=None) -> None:
    """Write convex cells as ``{"polygons": [[[x, y], ...], ...]}`` (plus ``stats`` if given)."""
    data = {'polygons': [[[float(x), float(y)] for x, y in poly] for poly in polygons]}
    if stats is not None:
        data['stats'] = stats
    with open(filepath, 'w', encoding='utf-8') as fh:
        json.dump(data, fh, indent=2)


def load_polygons(filepath: str) -> List[Polygon]:
    with open(filepath, 'r', encoding='utf-8') as fh:
        data = json.load(fh)
    if not isinstance(data, dict) or not isinstance(data.get('polygons'), list):
        raise ValueError(f"{filepath}: expected an object with a 'polygons' list")
    return [parse_polygon(p) for p in data['polygons']]


def write_vtk(filepath: str, polygons: Sequence[Sequence[Point]], title: str = "navdecomp polygons") -> None:
    """Write convex cells to legacy VTK POLYDATA (ASCII).

    Vertices are written per polygon (not shared between cells), z=0, and a
    ``cell_id`` scalar is attached to every polygon.

    Examples
    --------
    >>> polys = decompose_walkable_area(box, obstacles)
    >>> write_vtk('cells.vtk', polys)
    """
    polys = [np.asarray(p, dtype=float) for p in polygons]
    for k, p in enumerate(polys):
        if p.ndim != 2 or p.shape[1] != 2 or p.shape[0] < 3:
            raise ValueError(f"polygon {k} must be (N>=3, 2), got shape {p.shape}")
    n_points = sum(p.shape[0] for p in polys)
    size = sum(p.shape[0] + 1 for p in polys)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write("# vtk DataFile Version 3.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET POLYDATA\n")
        f.write(f"POINTS {n_points} double\n")
        for p in polys:
            for x, y in p:
                f.write(f"{x:.15g} {y:.15g} 0\n")
        f.write(f"POLYGONS {len(polys)} {size}\n")
        offset = 0
        for p in polys:
            ids = " ".join(str(offset + i) for i in range(p.shape[0]))
            f.write(f"{p.shape[0]} {ids}\n")
            offset += p.shape[0]
        f.write(f"CELL_DATA {len(polys)}\n")
        f.write("SCALARS cell_id int 1\n")
        f.write("LOOKUP_TABLE default\n")
        for k in range(len(polys)):
            f.write(f"{k}\n")
