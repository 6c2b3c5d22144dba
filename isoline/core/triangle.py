"""Triangle built from three edges, with the predicates used by the Delaunay builder.

Edges are kept sorted by the Edge total order and vertex ``i`` is the vertex
opposite edge ``i``; two triangles over the same three points are therefore
equal whatever order or orientation their edges were supplied in.
"""
from __future__ import annotations

import math
from typing import Tuple

from .geometry import Circle, Edge, Point

__all__ = ['Triangle']

_SQRT3 = math.sqrt(3.0)


class Triangle:
    __slots__ = ('_edges', '_vertices', '_hash')

    def __init__(self, e1: Edge, e2: Edge, e3: Edge):
        edges = tuple(sorted((e1, e2, e3)))
        vertices = {p for e in edges for p in e.points}
        if len(vertices) != 3 or len(set(edges)) != 3:
            raise ValueError(f"Triangle needs 3 distinct vertices, got edges {e1}, {e2}, {e3}")
        self._edges: Tuple[Edge, Edge, Edge] = edges
        self._vertices: Tuple[Point, Point, Point] = tuple(
            next(v for v in vertices if not e.has_point(v)) for e in edges
        )
        self._hash = hash(edges)

    @classmethod
    def from_points(cls, a: Point, b: Point, c: Point) -> 'Triangle':
        return cls(Edge(a, b), Edge(b, c), Edge(c, a))

    @classmethod
    def super_triangle(cls, lower: Point, upper: Point, margin: float) -> 'Triangle':
        """Equilateral triangle enclosing the axis-aligned box ``lower``-``upper``.

        The box is enclosed by a circle centred on its midpoint whose radius is
        the half-diagonal plus ``margin``; the triangle is circumscribed about
        that circle (centroid at the centre, side ``2*sqrt(3)*r``).
        """
        center = (lower + upper) * 0.5
        radius = (center - lower).length() + margin
        v1 = center + Point(+_SQRT3, -1.0) * radius
        v2 = center + Point(-_SQRT3, -1.0) * radius
        v3 = center + Point(0.0, 2.0 * radius)
        return cls.from_points(v1, v2, v3)

    @property
    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return self._edges

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return self._vertices

    def has_vertex(self, p: Point) -> bool:
        return p in self._vertices

    def has_edge(self, e: Edge) -> bool:
        return e in self._edges

    def opposite_vertex(self, edge: Edge) -> Point:
        for e, v in zip(self._edges, self._vertices):
            if e == edge:
                return v
        raise ValueError(f"{edge} is not an edge of {self}")

    def opposite_edge(self, vertex: Point) -> Edge:
        for e, v in zip(self._edges, self._vertices):
            if v == vertex:
                return e
        raise ValueError(f"{vertex} is not a vertex of {self}")

    def has_common_vertex(self, other: 'Triangle') -> bool:
        return any(v in other._vertices for v in self._vertices)

    def contains_point(self, p: Point) -> bool:
        """True if ``p`` is inside or on the boundary, for either winding."""
        v1, v2, v3 = self._vertices
        c1 = (v2 - v1).cross(p - v1)
        c2 = (v3 - v2).cross(p - v2)
        c3 = (v1 - v3).cross(p - v3)
        return (c1 >= 0 and c2 >= 0 and c3 >= 0) or (c1 <= 0 and c2 <= 0 and c3 <= 0)

    def circumscribed_circle(self) -> Circle:
        """Circumcircle from barycentric weights on the squared side lengths.

        The weights sum to 16*area**2, so near-collinear triangles lose
        precision quickly. An exactly degenerate triangle (zero weight sum)
        gets an unbounded circle centred on its centroid.
        """
        v1, v2, v3 = self._vertices
        a2 = (v2 - v3).length_sq()
        b2 = (v3 - v1).length_sq()
        c2 = (v1 - v2).length_sq()
        wa = a2 * (b2 + c2 - a2)
        wb = b2 * (c2 + a2 - b2)
        wc = c2 * (a2 + b2 - c2)
        total = wa + wb + wc
        if total == 0.0:
            return Circle(self.centroid(), math.inf)
        center = (v1 * wa + v2 * wb + v3 * wc) * (1.0 / total)
        return Circle(center, (center - v1).length())

    def signed_area(self) -> float:
        v1, v2, v3 = self._vertices
        return 0.5 * (v2 - v1).cross(v3 - v1)

    def area(self) -> float:
        return abs(self.signed_area())

    def centroid(self) -> Point:
        v1, v2, v3 = self._vertices
        return (v1 + v2 + v3) * (1.0 / 3.0)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._edges == other._edges

    def __hash__(self):
        return self._hash

    def __repr__(self):
        v1, v2, v3 = self._vertices
        return f"Triangle({v1}, {v2}, {v3})"
