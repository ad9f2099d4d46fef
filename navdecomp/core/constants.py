"""Central numerical tolerances for the decomposition pipeline.

Point identity, edge matching and fusion splicing all compare coordinates
through ``EPS_POINT``; keep the literal here so the tolerance can be tuned
in one place.
"""
from __future__ import annotations

# Geometry tolerances
EPS_POINT: float = 1e-6         # two points coincide if |dx| and |dy| are below this
EPS_AREA: float = 1e-12         # minimum positive (absolute) triangle area
EPS_AREA_REL: float = 1e-9      # relative tolerance for summed-area comparisons

__all__ = [
    'EPS_POINT',
    'EPS_AREA',
    'EPS_AREA_REL',
]
