"""Iso-elevation contour crossings over a finished triangulation.

For every distinct mesh edge whose elevation range spans a level, the crossing
point is interpolated linearly along the edge. Consumers then join, per
triangle and level, the two crossing points found on that triangle's edges
into a contour segment (:meth:`ContourExtractor.segments`).

Tie-breaks
----------
- A level equal to an endpoint elevation crosses exactly at that endpoint, so
  the two edges meeting there report the same Point and a triangle never
  yields more than two distinct crossings per level.
- Edges whose endpoints have equal elevation register no crossings.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import ContourConfig
from .geometry import Edge, Point
from .logging_utils import get_logger

logger = get_logger('isoline.contour')

__all__ = ['contour_levels', 'interpolate_crossing', 'ContourExtractor']


def contour_levels(min_height: float, max_height: float, bands: int) -> List[float]:
    """The ``bands - 1`` levels splitting [min_height, max_height] into equal bands.

    Returns an empty list for a flat range or a single band.
    """
    if bands < 1:
        raise ValueError(f"bands must be >= 1, got {bands}")
    span = max_height - min_height
    if not span > 0.0:
        return []
    return [k * span / bands + min_height for k in range(1, bands)]


def interpolate_crossing(start: Point, h_start: float, end: Point, h_end: float,
                         level: float) -> Optional[Point]:
    """Point where the linear elevation along start->end equals ``level``.

    Returns None when the level is outside the edge's elevation range or the
    edge is flat.
    """
    if h_start > h_end:
        start, end = end, start
        h_start, h_end = h_end, h_start
    if h_start == h_end or not (h_start <= level <= h_end):
        return None
    if level == h_start:
        return start
    if level == h_end:
        return end
    dh = h_end - h_start
    ratio_start = (level - h_start) / dh
    ratio_end = (h_end - level) / dh
    return start * ratio_end + end * ratio_start


class ContourExtractor:
    """Per-edge iso-level crossings of a built triangulation.

    Parameters
    ----------
    triangulation : Triangulation
        A built triangulation; read, never modified.
    heights : Mapping[Point, float], optional
        Per-vertex elevations. Defaults to ``triangulation.heights``.
    config : ContourConfig, optional
        Supplies the default band count for :meth:`extract`.
    """

    def __init__(self, triangulation, heights: Optional[Mapping[Point, float]] = None,
                 config: Optional[ContourConfig] = None):
        self.triangulation = triangulation
        self.heights = heights if heights is not None else triangulation.heights
        self.config = config or ContourConfig()
        self._levels: Tuple[float, ...] = ()
        self._crossings: Dict[Edge, Mapping[float, Point]] = {}

    @property
    def levels(self) -> Tuple[float, ...]:
        return self._levels

    @property
    def crossings(self) -> Mapping[Edge, Mapping[float, Point]]:
        """Read-only Edge -> {level: Point} view of the last extraction."""
        return MappingProxyType(self._crossings)

    def crossing(self, edge: Edge, level: float) -> Optional[Point]:
        per_edge = self._crossings.get(edge)
        return None if per_edge is None else per_edge.get(level)

    def extract(self, bands: Optional[int] = None) -> Mapping[Edge, Mapping[float, Point]]:
        """Compute crossings for the ``bands - 1`` evenly spaced interior levels."""
        bands = self.config.bands if bands is None else bands
        if len(self.heights) == 0:
            levels: List[float] = contour_levels(0.0, 0.0, bands)
        else:
            levels = contour_levels(min(self.heights.values()), max(self.heights.values()), bands)
        return self.extract_levels(levels)

    def extract_levels(self, levels: Iterable[float]) -> Mapping[Edge, Mapping[float, Point]]:
        """Compute crossings for explicit levels. Replaces any previous result."""
        lv = tuple(sorted({float(v) for v in levels}))
        crossings: Dict[Edge, Mapping[float, Point]] = {}
        count = 0
        for edge in self.triangulation.edges():
            a, b = edge.points
            ha, hb = self.heights[a], self.heights[b]
            per_edge: Dict[float, Point] = {}
            for level in lv:
                p = interpolate_crossing(a, ha, b, hb, level)
                if p is not None:
                    per_edge[level] = p
            count += len(per_edge)
            crossings[edge] = MappingProxyType(per_edge)
        self._levels = lv
        self._crossings = crossings
        logger.debug("extracted %d crossings on %d edges for %d levels", count, len(crossings), len(lv))
        return self.crossings

    def segments(self, levels: Optional[Sequence[float]] = None) -> Dict[float, List[Tuple[Point, Point]]]:
        """Contour segments per level from the last extraction.

        Each triangle contributes at most one segment per level: the two
        distinct crossing points on its edges. A single crossing (the level
        only touches a vertex) yields nothing. A segment lying on an edge shared
        by two triangles is reported once.
        """
        wanted = self._levels if levels is None else tuple(levels)
        out: Dict[float, List[Tuple[Point, Point]]] = {}
        for level in wanted:
            seen = set()
            segs: List[Tuple[Point, Point]] = []
            for tri in self.triangulation:
                pts: List[Point] = []
                for e in tri.edges:
                    p = self.crossing(e, level)
                    if p is not None and p not in pts:
                        pts.append(p)
                if len(pts) != 2:
                    continue
                key = Edge(pts[0], pts[1])
                if key in seen:
                    continue
                seen.add(key)
                segs.append(key.points)
            out[level] = segs
        return out
