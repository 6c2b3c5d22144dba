"""Unit tests for Point, Edge and Circle."""
import math

import numpy as np
import pytest

from isoline.core.geometry import Circle, Edge, Point, triangles_signed_areas


class TestPoint:

    def test_arithmetic(self):
        a = Point(1, 2)
        b = Point(3, 4)
        assert a + b == Point(4, 6)
        assert b - a == Point(2, 2)
        assert -a == Point(-1, -2)
        assert a * 2 == Point(2, 4)
        assert 2 * a == Point(2, 4)

    def test_products_and_length(self):
        assert Point(1, 2).dot(Point(3, 4)) == 11.0
        assert Point(1, 0).cross(Point(0, 1)) == 1.0
        assert Point(0, 1).cross(Point(1, 0)) == -1.0
        assert Point(3, 4).length_sq() == 25.0
        assert Point(3, 4).length() == 5.0

    def test_normalize(self):
        n = Point(3, 4).normalize()
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_fails(self):
        with pytest.raises(ZeroDivisionError):
            Point(0, 0).normalize()

    def test_coordinates_are_floats(self):
        p = Point(1, 2)
        assert isinstance(p.x, float) and isinstance(p.y, float)
        assert p == Point(1.0, 2.0)
        assert hash(p) == hash(Point(1.0, 2.0))

    def test_lexicographic_order(self):
        assert Point(0, 5) < Point(1, 0)
        assert Point(1, 0) < Point(1, 2)
        assert sorted([Point(2, 0), Point(1, 3), Point(1, -1)]) == [Point(1, -1), Point(1, 3), Point(2, 0)]

    def test_exact_equality_no_tolerance(self):
        assert Point(0.1 + 0.2, 0) != Point(0.3, 0)

    @pytest.mark.parametrize("x,y", [(math.nan, 0.0), (0.0, math.inf)])
    def test_non_finite_rejected(self, x, y):
        with pytest.raises(ValueError):
            Point(x, y)


class TestEdge:

    def test_canonical_order_independent_of_input(self):
        """Edge((1,2),(3,4)) and Edge((3,4),(1,2)) store the same endpoints."""
        e1 = Edge(Point(1, 2), Point(3, 4))
        e2 = Edge(Point(3, 4), Point(1, 2))
        assert e1.point1 == e2.point1 == Point(1, 2)
        assert e1.point2 == e2.point2 == Point(3, 4)
        assert e1 == e2
        assert hash(e1) == hash(e2)

    def test_symmetric_for_many_pairs(self):
        rng = np.random.default_rng(3)
        coords = rng.uniform(-10, 10, size=(20, 2))
        pts = [Point(x, y) for x, y in coords]
        for a in pts:
            for b in pts:
                if a != b:
                    assert Edge(a, b) == Edge(b, a)
                    assert Edge(a, b).point1 < Edge(a, b).point2

    def test_equal_points_rejected(self):
        with pytest.raises(ValueError):
            Edge(Point(1, 1), Point(1, 1))

    def test_as_dict_key(self):
        data = {Edge(Point(5, 2), Point(0, 0)): "edge_A"}
        assert data[Edge(Point(0, 0), Point(5, 2))] == "edge_A"

    def test_other_endpoint(self):
        e = Edge(Point(0, 0), Point(1, 1))
        assert e.other(Point(0, 0)) == Point(1, 1)
        assert e.other(Point(1, 1)) == Point(0, 0)
        with pytest.raises(ValueError):
            e.other(Point(2, 2))

    def test_total_order(self):
        a, b, c = Point(0, 0), Point(0, 1), Point(1, 0)
        assert sorted([Edge(b, c), Edge(a, c), Edge(a, b)]) == [Edge(a, b), Edge(a, c), Edge(b, c)]


class TestCircle:

    def test_contains_is_open_disk(self):
        c = Circle(Point(0, 0), 1.0)
        assert c.contains(Point(0.5, 0))
        assert not c.contains(Point(1, 0))
        assert not c.contains(Point(0, -1))
        assert not c.contains(Point(2, 0))

    def test_negative_radius_rejected(self):
        with pytest.raises(ValueError):
            Circle(Point(0, 0), -1.0)


def test_triangles_signed_areas():
    points = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
    areas = triangles_signed_areas(points, [[0, 1, 2], [0, 3, 2]])
    assert np.allclose(areas, [0.5, -0.5])
    assert triangles_signed_areas(points, np.empty((0, 3), dtype=int)).shape == (0,)
