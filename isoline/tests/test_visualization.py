import pytest

from isoline.core.contour import ContourExtractor
from isoline.core.heightmap import HeightMap
from isoline.core.triangulation import Triangulation

viz = pytest.importorskip("isoline.core.visualization")


@pytest.fixture
def square():
    tri = Triangulation(HeightMap.from_samples([
        (0, 0, 0), (10, 0, 0), (10, 10, 10), (0, 10, 10), (5, 3, 4),
    ]))
    tri.build()
    return tri


@pytest.mark.parametrize("color_by_height", [False, True])
def test_plot_triangulation_writes_file(tmp_path, square, color_by_height):
    out = tmp_path / "mesh.png"
    viz.plot_triangulation(square, str(out), color_by_height=color_by_height)
    assert out.exists() and out.stat().st_size > 0


def test_plot_empty_triangulation(tmp_path, capture_isoline_logs):
    tri = Triangulation(HeightMap.from_samples([(0, 0, 1), (1, 1, 2)]))
    tri.build()
    out = tmp_path / "empty.png"
    viz.plot_triangulation(tri, str(out))
    assert out.exists()
    assert "plotting empty triangulation" in capture_isoline_logs.getvalue()


def test_plot_contours_writes_file(tmp_path, square):
    ext = ContourExtractor(square)
    ext.extract(4)
    out = tmp_path / "contours.png"
    viz.plot_contours(ext, str(out))
    assert out.exists() and out.stat().st_size > 0
