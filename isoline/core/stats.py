"""Build statistics for the incremental triangulation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class BuildStats:
    points_inserted: int = 0
    edge_splits: int = 0          # insertions landing exactly on an interior edge
    collinear_skips: int = 0      # sub-triangles not created because p was on that edge
    flips: int = 0
    duplicate_removals: int = 0
    cleanup_removed: int = 0      # triangles touching the super-triangle
    triangles: int = 0
    time_total: float = 0.0       # seconds

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'points_inserted': self.points_inserted,
            'edge_splits': self.edge_splits,
            'collinear_skips': self.collinear_skips,
            'flips': self.flips,
            'duplicate_removals': self.duplicate_removals,
            'cleanup_removed': self.cleanup_removed,
            'triangles': self.triangles,
            'time_total': self.time_total,
            'flips_per_point': (self.flips / self.points_inserted) if self.points_inserted else 0.0,
        }


def format_stats_table(stats: BuildStats) -> str:
    """Return a human readable two-column table of build statistics."""
    d = stats.to_dict()
    rows = []
    for key, val in d.items():
        if key == 'time_total':
            rows.append(('time_ms', f"{val * 1000.0:.3f}"))
        elif isinstance(val, float):
            rows.append((key, f"{val:.3f}"))
        else:
            rows.append((key, str(val)))
    kw = max(len(k) for k, _ in rows)
    vw = max(len(v) for _, v in rows)
    lines = [f"{'stat'.ljust(kw)} {'value'.rjust(vw)}", "-" * (kw + vw + 1)]
    lines += [f"{k.ljust(kw)} {v.rjust(vw)}" for k, v in rows]
    return "\n".join(lines)


__all__ = ['BuildStats', 'format_stats_table']
