"""Sample collection: distinct points each carrying a scalar elevation."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

import numpy as np

from .geometry import Point
from .logging_utils import get_logger

logger = get_logger('isoline.heightmap')

__all__ = ['HeightMap']


class HeightMap(Mapping[Point, float]):
    """Read-only mapping of Point -> elevation.

    Iteration follows insertion order, which is also the order in which the
    triangulation inserts the points. A repeated coordinate keeps the later
    elevation.
    """

    def __init__(self, heights: Optional[Mapping[Point, float]] = None):
        self._heights: Dict[Point, float] = {}
        if heights:
            for p, h in heights.items():
                self._set(p, h)

    @classmethod
    def from_samples(cls, samples: Iterable[Tuple[float, float, float]]) -> 'HeightMap':
        hm = cls()
        for x, y, z in samples:
            hm._set(Point(x, y), z)
        return hm

    @classmethod
    def from_arrays(cls, points, elevations) -> 'HeightMap':
        """Build from an (N, 2) coordinate array and an (N,) elevation array."""
        pts = np.asarray(points, dtype=np.float64)
        z = np.asarray(elevations, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points must be (N, 2), got shape {pts.shape}")
        if z.shape != (pts.shape[0],):
            raise ValueError(f"elevations must be ({pts.shape[0]},), got shape {z.shape}")
        return cls.from_samples(zip(pts[:, 0].tolist(), pts[:, 1].tolist(), z.tolist()))

    def _set(self, p: Point, h: float) -> None:
        if p in self._heights:
            logger.warning("duplicate sample at %s: elevation %g replaces %g", p, h, self._heights[p])
        self._heights[p] = float(h)

    def __getitem__(self, p: Point) -> float:
        return self._heights[p]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._heights)

    def __len__(self) -> int:
        return len(self._heights)

    @property
    def marks(self) -> Tuple[Point, ...]:
        return tuple(self._heights)

    @property
    def min_height(self) -> float:
        return min(self._heights.values())

    @property
    def max_height(self) -> float:
        return max(self._heights.values())

    def bounds(self) -> Tuple[Point, Point]:
        """Axis-aligned (lower-left, upper-right) corners of the sample points."""
        if not self._heights:
            raise ValueError("bounds of an empty HeightMap")
        xs = [p.x for p in self._heights]
        ys = [p.y for p in self._heights]
        return Point(min(xs), min(ys)), Point(max(xs), max(ys))

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        pts = np.array([p.as_tuple() for p in self._heights], dtype=np.float64).reshape(-1, 2)
        z = np.fromiter(self._heights.values(), dtype=np.float64, count=len(self._heights))
        return pts, z

    def __repr__(self):
        return f"HeightMap(n={len(self)})"
