"""Exception types raised by the decomposition pipeline."""
from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """Base class for rejected bounding boxes and obstacles."""


class InvalidBoundingBox(InvalidInput):
    """The outer walkable rectangle is malformed (must have exactly 4 points)."""


class InvalidObstacle(InvalidInput):
    """An obstacle has fewer than 3 points or is not convex.

    ``index`` is the 0-based position of the obstacle in the input list.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class TriangulationFailure(RuntimeError):
    """The triangulation engine could not triangulate the input, or returned
    output that does not describe triangles over the input vertices."""


class ConformityError(RuntimeError):
    """A decomposition failed the optional post-run conformity check."""

    def __init__(self, message: str, report=None):
        super().__init__(message)
        self.report = report


__all__ = [
    'InvalidInput',
    'InvalidBoundingBox',
    'InvalidObstacle',
    'TriangulationFailure',
    'ConformityError',
]
