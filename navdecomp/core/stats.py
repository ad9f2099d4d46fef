"""Per-run statistics for the decomposition pipeline and their presentation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class DecomposeStats:
    triangles: int = 0
    polygons: int = 0
    adjacency_links: int = 0
    # Merge pass
    fusion_attempts: int = 0
    fusions_accepted: int = 0
    rejected_no_shared_edge: int = 0
    rejected_nonconvex: int = 0
    # Timing (seconds)
    time_validate: float = 0.0
    time_triangulate: float = 0.0
    time_adjacency: float = 0.0
    time_merge: float = 0.0
    time_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'triangles': self.triangles,
            'polygons': self.polygons,
            'adjacency_links': self.adjacency_links,
            'fusion_attempts': self.fusion_attempts,
            'fusions_accepted': self.fusions_accepted,
            'rejected_no_shared_edge': self.rejected_no_shared_edge,
            'rejected_nonconvex': self.rejected_nonconvex,
            'acceptance_rate': (self.fusions_accepted / self.fusion_attempts) if self.fusion_attempts else 0.0,
            'reduction_ratio': (self.polygons / self.triangles) if self.triangles else 0.0,
            'time_validate': self.time_validate,
            'time_triangulate': self.time_triangulate,
            'time_adjacency': self.time_adjacency,
            'time_merge': self.time_merge,
            'time_total': self.time_total,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable two-column table of a ``DecomposeStats.to_dict()`` mapping."""
    if not stats_dict:
        return "<no stats>"
    rows = []
    for key, value in stats_dict.items():
        if key.startswith('time_'):
            rows.append((key[5:] + '_ms', f"{value * 1000.0:.3f}"))
        elif isinstance(value, float):
            rows.append((key, f"{value:.3f}"))
        else:
            rows.append((key, str(value)))
    kw = max(len(k) for k, _ in rows)
    vw = max(len(v) for _, v in rows)
    lines = [f"{'stat'.ljust(kw)} {'value'.rjust(vw)}", "-" * (kw + vw + 1)]
    lines += [f"{k.ljust(kw)} {v.rjust(vw)}" for k, v in rows]
    return "\n".join(lines)


__all__ = ['DecomposeStats', 'format_stats_table']
