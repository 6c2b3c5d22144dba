import numpy as np
import pytest

from isoline.core.geometry import Point
from isoline.core.heightmap import HeightMap


def test_min_max_and_marks_keep_insertion_order():
    hm = HeightMap.from_samples([(1, 1, 5.0), (0, 0, -2.0), (2, 3, 7.5)])
    assert hm.marks == (Point(1, 1), Point(0, 0), Point(2, 3))
    assert hm.min_height == -2.0
    assert hm.max_height == 7.5
    assert len(hm) == 3
    assert hm[Point(0, 0)] == -2.0


def test_bounds():
    hm = HeightMap.from_samples([(1, 5, 0), (-3, 2, 0), (4, -1, 0)])
    assert hm.bounds() == (Point(-3, -1), Point(4, 5))
    with pytest.raises(ValueError):
        HeightMap().bounds()


def test_duplicate_coordinate_keeps_later_elevation(capture_isoline_logs):
    hm = HeightMap.from_samples([(0, 0, 1.0), (1, 0, 2.0), (0, 0, 3.0)])
    assert len(hm) == 2
    assert hm[Point(0, 0)] == 3.0
    assert "duplicate sample" in capture_isoline_logs.getvalue()


def test_from_arrays_round_trip_shapes():
    pts = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    z = np.array([1.0, 2.0, 3.0])
    hm = HeightMap.from_arrays(pts, z)
    out_pts, out_z = hm.to_arrays()
    assert np.array_equal(out_pts, pts)
    assert np.array_equal(out_z, z)


@pytest.mark.parametrize("pts,z", [
    (np.zeros((3, 3)), np.zeros(3)),
    (np.zeros((3, 2)), np.zeros(4)),
])
def test_from_arrays_shape_errors(pts, z):
    with pytest.raises(ValueError):
        HeightMap.from_arrays(pts, z)


def test_empty_to_arrays():
    pts, z = HeightMap().to_arrays()
    assert pts.shape == (0, 2)
    assert z.shape == (0,)
