"""Orientation and in-circle predicates with symbolic super-triangle vertices.

The super-triangle vertices are treated as points infinitely far from the
samples, along their directions from the super-triangle centre. Every test that
involves one of them is decided by the leading non-vanishing term of the exact
predicate as the super-triangle grows without bound, so the finite part of the
mesh is the Delaunay triangulation of the samples alone, whatever the margin.
Tests on finite points only are the plain float tests.

Limits used
-----------
- circle through finite x, y and one far vertex s: the open half-plane of line
  xy on the side of s's direction; a point on line xy is inside only strictly
  between x and y.
- circle through finite x and two far vertices: the open half-plane through x
  facing away from the third far vertex's direction; on its boundary line,
  points closer than x to the centre are inside.
- a far vertex is never inside a circle through points of which at least one
  is finite.
"""
from __future__ import annotations

from typing import Dict

from .geometry import Point
from .triangle import Triangle

__all__ = ['SuperFrame']


def _sign(v: float) -> int:
    return (v > 0.0) - (v < 0.0)


class SuperFrame:
    """Super-triangle around the box ``lower``-``upper`` and the predicates over it.

    Parameters
    ----------
    lower, upper : Point
        Corners of the axis-aligned sample bounds.
    margin : float
        Positive margin passed to :meth:`Triangle.super_triangle`. It only
        places the vertices; the predicates do not depend on it.
    """

    def __init__(self, lower: Point, upper: Point, margin: float):
        self.center = (lower + upper) * 0.5
        self.triangle = Triangle.super_triangle(lower, upper, margin)
        self.directions: Dict[Point, Point] = {v: v - self.center for v in self.triangle.vertices}

    def is_super(self, p: Point) -> bool:
        return p in self.directions

    def touches(self, tri: Triangle) -> bool:
        return any(v in self.directions for v in tri.vertices)

    def orient(self, a: Point, b: Point, c: Point) -> int:
        """Sign of the turn a -> b -> c: +1 counter-clockwise, -1 clockwise, 0 collinear."""
        far = sum(1 for p in (a, b, c) if p in self.directions)
        if far == 0 or far == 3:
            return _sign((b - a).cross(c - a))
        if far == 2:
            while a in self.directions:
                a, b, c = b, c, a
            return _sign(self.directions[b].cross(self.directions[c]))
        while c not in self.directions:
            a, b, c = b, c, a
        turn = (b - a).cross(self.directions[c])
        if turn != 0.0:
            return _sign(turn)
        # a->b parallel to the far direction: the finite offset decides
        return _sign((b - a).cross(self.center - a))

    def contains(self, tri: Triangle, p: Point) -> bool:
        """Inside-or-on-boundary test, for either winding."""
        if not self.touches(tri):
            return tri.contains_point(p)
        v1, v2, v3 = tri.vertices
        turns = (self.orient(v1, v2, p), self.orient(v2, v3, p), self.orient(v3, v1, p))
        return all(t >= 0 for t in turns) or all(t <= 0 for t in turns)

    def in_circle(self, a: Point, b: Point, c: Point, d: Point) -> bool:
        """True if ``d`` lies strictly inside the circle through a, b, c."""
        if d in self.directions:
            return False
        far = [p for p in (a, b, c) if p in self.directions]
        if not far:
            return Triangle.from_points(a, b, c).circumscribed_circle().contains(d)
        if len(far) == 3:
            return True
        if len(far) == 2:
            x = next(p for p in (a, b, c) if p not in self.directions)
            away = next(u for v, u in self.directions.items() if v not in far)
            w = away.dot(d - x)
            if w != 0.0:
                return w < 0.0
            return (d - self.center).length_sq() < (x - self.center).length_sq()
        s = far[0]
        x, y = (p for p in (a, b, c) if p != s)
        side = (y - x).cross(self.directions[s])
        if side == 0.0:
            side = (y - x).cross(self.center - x)
            if side == 0.0:
                return False
        turn = (y - x).cross(d - x)
        if turn != 0.0:
            return (turn > 0.0) == (side > 0.0)
        return (x - d).dot(y - d) < 0.0

    def flip_needed(self, a: Point, b: Point, c: Point, d: Point) -> bool:
        """Lawson test for edge ab shared by triangles abc and abd.

        c and d lie on opposite sides of ab, so the test is symmetric in them;
        a finite one is used as the query point when there is one.
        """
        if d in self.directions and c not in self.directions:
            c, d = d, c
        return self.in_circle(a, b, c, d)
