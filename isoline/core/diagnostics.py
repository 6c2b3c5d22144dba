"""Diagnostics helpers for built triangulations.

Functions take a Triangulation-like object exposing ``.triangles`` (iterable
of Triangle) and ``.heights`` (mapping of sample Point -> elevation); they never
mutate it.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .constants import EPS_AREA, EPS_DELAUNAY
from .geometry import Edge, Point
from .triangle import Triangle

__all__ = [
    'delaunay_violations', 'build_edge_to_tri_map', 'non_manifold_edges',
    'boundary_edges', 'degenerate_triangles', 'triangulation_area', 'convex_hull_area', 'overlapping_pairs',
]


def delaunay_violations(tri, rel_tol: float = EPS_DELAUNAY) -> List[Tuple[Triangle, Point]]:
    """Return (triangle, point) pairs where a sample lies inside a circumcircle.

    A point counts as inside only if it is closer to the centre than
    ``radius * (1 - rel_tol)``, so cocircular samples separated by rounding
    noise are not reported.
    """
    samples = list(tri.heights)
    out = []
    for t in tri.triangles:
        circle = t.circumscribed_circle()
        limit = circle.radius * (1.0 - rel_tol)
        for p in samples:
            if t.has_vertex(p):
                continue
            if (circle.center - p).length() < limit:
                out.append((t, p))
    return out


def build_edge_to_tri_map(triangles: Iterable[Triangle]) -> Dict[Edge, List[Triangle]]:
    edge_map: Dict[Edge, List[Triangle]] = defaultdict(list)
    for t in triangles:
        for e in t.edges:
            edge_map[e].append(t)
    return dict(edge_map)


def non_manifold_edges(triangles: Iterable[Triangle]) -> Set[Edge]:
    """Edges shared by more than two triangles (never present in a valid mesh)."""
    return {e for e, ts in build_edge_to_tri_map(triangles).items() if len(ts) > 2}


def boundary_edges(triangles: Iterable[Triangle]) -> Set[Edge]:
    """Edges owned by exactly one triangle; for a finished mesh, the convex hull."""
    return {e for e, ts in build_edge_to_tri_map(triangles).items() if len(ts) == 1}


def degenerate_triangles(triangles: Iterable[Triangle], eps: float = EPS_AREA) -> List[Triangle]:
    """Triangles whose absolute area is below ``eps``."""
    return [t for t in triangles if t.area() < eps]


def triangulation_area(triangles: Iterable[Triangle]) -> float:
    return float(sum(t.area() for t in triangles))


def convex_hull_area(points: Iterable[Point]) -> float:
    """Area of the convex hull of ``points``; 0.0 for fewer than 3 or collinear points."""
    arr = np.array([p.as_tuple() for p in points], dtype=np.float64).reshape(-1, 2)
    if arr.shape[0] < 3:
        return 0.0
    try:
        hull = ConvexHull(arr)
    except QhullError:
        return 0.0
    # for 2D input ConvexHull.volume is the enclosed area
    return float(hull.volume)


def _strictly_separated(t1: Triangle, t2: Triangle) -> bool:
    """True if some edge line of either triangle separates their interiors."""
    for a, b in ((t1, t2), (t2, t1)):
        for e in a.edges:
            p, q = e.points
            inner = (q - p).cross(a.opposite_vertex(e) - p)
            if inner == 0.0:
                continue
            if all((q - p).cross(v - p) * inner <= 0.0 for v in b.vertices):
                return True
    return False


def overlapping_pairs(triangles: Iterable[Triangle]) -> List[Tuple[Triangle, Triangle]]:
    """Pairs of triangles whose interiors overlap. O(M^2); for tests and debugging."""
    ts = list(triangles)
    out = []
    for i in range(len(ts)):
        for j in range(i + 1, len(ts)):
            if not _strictly_separated(ts[i], ts[j]):
                out.append((ts[i], ts[j]))
    return out
