"""Geometry primitives: immutable Point, Edge and Circle values plus array helpers.

Points compare with exact float equality and order lexicographically on
``(x, y)``. Edge canonicalization relies on that total order, so an edge built
from ``(a, b)`` and one built from ``(b, a)`` store the same endpoints in the
same slots and hash identically across runs.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

__all__ = [
    'Point', 'Edge', 'Circle',
    'triangles_signed_areas',
]


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D coordinate with vector algebra.

    Ordering is lexicographic on ``(x, y)``. Equality is bit-exact: two points
    a rounding error apart are different points.
    """
    x: float
    y: float

    def __post_init__(self):
        x = float(self.x); y = float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def __mul__(self, scalar: float) -> 'Point':
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def dot(self, other: 'Point') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Point') -> float:
        """Scalar 2D cross product ``self.x*other.y - self.y*other.x``."""
        return self.x * other.y - self.y * other.x

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalize(self) -> 'Point':
        """Return the unit vector in this direction.

        Raises ZeroDivisionError for the zero vector; callers must guard.
        """
        return self * (1.0 / self.length())

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self):
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True, order=True)
class Edge:
    """Unordered pair of distinct points stored in canonical order.

    ``point1 < point2`` always holds after construction, so ``Edge(a, b)`` and
    ``Edge(b, a)`` are indistinguishable. Edges order lexicographically on
    ``(point1, point2)``.
    """
    point1: Point
    point2: Point

    def __post_init__(self):
        if self.point1 == self.point2:
            raise ValueError(f"Edge endpoints must differ, got {self.point1} twice")
        if self.point2 < self.point1:
            p1, p2 = self.point2, self.point1
            object.__setattr__(self, 'point1', p1)
            object.__setattr__(self, 'point2', p2)

    @property
    def points(self) -> Tuple[Point, Point]:
        return (self.point1, self.point2)

    def has_point(self, p: Point) -> bool:
        return p == self.point1 or p == self.point2

    def other(self, p: Point) -> Point:
        """Return the endpoint that is not ``p``."""
        if p == self.point1:
            return self.point2
        if p == self.point2:
            return self.point1
        raise ValueError(f"{p} is not an endpoint of {self}")

    def length(self) -> float:
        return (self.point2 - self.point1).length()

    def __str__(self):
        return f"(P1:{self.point1} P2:{self.point2})"


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def __post_init__(self):
        if self.radius < 0.0:
            raise ValueError(f"Circle radius must be >= 0, got {self.radius}")

    def contains(self, p: Point) -> bool:
        """Open-disk test: points exactly on the circle are not contained."""
        return (self.center - p).length() < self.radius

    def __str__(self):
        return f"(C:{self.center} R:{self.radius:g})"


def triangles_signed_areas(points, tris):
    """Vectorized signed area for a batch of triangles.

    points: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,) float64 array of signed areas.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int32)
    if T.size == 0:
        return np.empty((0,), dtype=float)
    p0 = pts[T[:, 0]]; p1 = pts[T[:, 1]]; p2 = pts[T[:, 2]]
    d1 = p1 - p0
    d2 = p2 - p0
    return 0.5 * (d1[:, 0] * d2[:, 1] - d1[:, 1] * d2[:, 0])
