"""Input gate for the decomposition pipeline."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import InvalidBoundingBox, InvalidObstacle
from .geometry import Polygon, as_polygon, is_convex

__all__ = ['validate_input']


def validate_input(bounding_box, obstacles: Sequence = ()) -> Tuple[Polygon, List[Polygon]]:
    """Check the walkable rectangle and its obstacles, returning normalized copies.

    Raises
    ------
    InvalidBoundingBox
        If the bounding box does not have exactly 4 points.
    InvalidObstacle
        If an obstacle has fewer than 3 points or is not convex. The
        exception's ``index`` is the obstacle's position in ``obstacles``.
    """
    try:
        box = as_polygon(bounding_box)
    except (TypeError, ValueError) as e:
        raise InvalidBoundingBox(f"bounding box has unreadable coordinates: {e}") from e
    if len(box) != 4:
        raise InvalidBoundingBox(f"bounding box must have exactly 4 points, got {len(box)}")

    holes = []
    for i, obstacle in enumerate(obstacles if obstacles is not None else ()):
        try:
            poly = as_polygon(obstacle)
        except (TypeError, ValueError) as e:
            raise InvalidObstacle(f"obstacle {i} has unreadable coordinates: {e}", index=i) from e
        if len(poly) < 3:
            raise InvalidObstacle(f"obstacle {i} needs at least 3 points, got {len(poly)}", index=i)
        if not is_convex(poly):
            raise InvalidObstacle(f"obstacle {i} must be a convex polygon", index=i)
        holes.append(poly)
    return box, holes
