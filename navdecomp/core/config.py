"""Configuration objects for the walkable-area decomposition pipeline."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Union

from .constants import EPS_AREA_REL, EPS_POINT

ENGINE_NAMES = ('earcut', 'delaunay')
ADJACENCY_METHODS = ('pairwise', 'edge_map')


@dataclass
class DecomposeConfig:
    """Tunables for :func:`navdecomp.core.decompose.decompose_walkable_area`.

    Attributes
    ----------
    point_tol : float
        Two points are the same vertex when both coordinate differences are
        strictly below this value.
    engine : str or callable
        Name of a registered triangulation engine (``'earcut'`` or
        ``'delaunay'``) or any callable ``engine(vertices, holes, dims)``
        returning a flat sequence of vertex indices.
    adjacency_method : str
        ``'pairwise'`` scans every triangle pair; ``'edge_map'`` goes through
        an edge-keyed lookup. Both produce the same graph.
    check_result : bool
        Run the conformity check on the output and raise ConformityError
        if it fails.
    area_rel_tol : float
        Relative tolerance for area comparisons.
    """
    point_tol: float = EPS_POINT
    engine: Union[str, Callable[..., Any]] = 'earcut'
    adjacency_method: str = 'pairwise'
    check_result: bool = False
    area_rel_tol: float = EPS_AREA_REL

    def validate(self) -> 'DecomposeConfig':
        if not self.point_tol > 0.0:
            raise ValueError(f"point_tol must be positive, got {self.point_tol!r}")
        if not self.area_rel_tol > 0.0:
            raise ValueError(f"area_rel_tol must be positive, got {self.area_rel_tol!r}")
        if not callable(self.engine) and self.engine not in ENGINE_NAMES:
            raise ValueError(f"unknown triangulation engine {self.engine!r}; expected one of {ENGINE_NAMES}")
        if self.adjacency_method not in ADJACENCY_METHODS:
            raise ValueError(f"unknown adjacency method {self.adjacency_method!r}; expected one of {ADJACENCY_METHODS}")
        return self

    def with_overrides(self, **overrides) -> 'DecomposeConfig':
        """Return a copy with the given fields replaced (None values are ignored)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


__all__ = ['DecomposeConfig', 'ENGINE_NAMES', 'ADJACENCY_METHODS']
