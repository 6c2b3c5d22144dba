"""Incremental Delaunay triangulation with edge-flip legalization.

Triangles live in an arena addressed by stable slot (removed triangles leave a
``None`` tombstone) and an :class:`EdgeIndex` maps every canonical edge to the
slots owning it. Point location is a linear scan over the arena; neighbour
lookups during legalization go through the index.

Algorithm
---------
1. Circumscribe an equilateral super-triangle about a circle enclosing the
   sample bounds and seed the arena with it. Its vertices take part in the
   predicates symbolically, as points at infinity (see :mod:`.predicates`).
2. For each sample point, in HeightMap order: locate a triangle containing it,
   split that triangle into (up to) three, then legalize the split edges with
   a worklist of Lawson flips.
3. Drop every triangle sharing a vertex with the super-triangle.
"""
from __future__ import annotations

import time
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Set, Tuple

import numpy as np

from .config import TriangulationConfig
from .diagnostics import degenerate_triangles, delaunay_violations
from .geometry import Edge, Point, triangles_signed_areas
from .heightmap import HeightMap
from .incremental import EdgeIndex
from .logging_utils import get_logger
from .predicates import SuperFrame
from .stats import BuildStats
from .triangle import Triangle

logger = get_logger('isoline.triangulation')

__all__ = ['Triangulation', 'TriangulationError']


class TriangulationError(RuntimeError):
    """Internal invariant violated while building (e.g. point location failed)."""


class Triangulation:
    """Delaunay triangulation of a set of elevation samples.

    Parameters
    ----------
    heights : Mapping[Point, float]
        Distinct sample points and their elevations. A plain mapping is
        wrapped in a :class:`HeightMap`.
    config : TriangulationConfig, optional

    The instance is empty until :meth:`build` is called; afterwards
    :attr:`triangles` is a read-only frozenset. Every retained triangle has
    only sample points as vertices and no sample point lies strictly inside
    its circumcircle.
    """

    def __init__(self, heights: Mapping[Point, float], config: Optional[TriangulationConfig] = None):
        self.heights = heights if isinstance(heights, HeightMap) else HeightMap(heights)
        self.config = config or TriangulationConfig()
        self.stats = BuildStats()
        self._arena: List[Optional[Triangle]] = []
        self._slots: Dict[Triangle, int] = {}
        self._index = EdgeIndex()
        self._frame: Optional[SuperFrame] = None
        self._ordered: Tuple[Triangle, ...] = ()
        self._triangles: FrozenSet[Triangle] = frozenset()
        self._built = False

    # ------------------------------------------------------------------
    # read-only views
    # ------------------------------------------------------------------
    @property
    def triangles(self) -> FrozenSet[Triangle]:
        return self._triangles

    @property
    def is_built(self) -> bool:
        return self._built

    def __len__(self):
        return len(self._ordered)

    def __iter__(self) -> Iterator[Triangle]:
        """Triangles in creation order (deterministic for a given input)."""
        return iter(self._ordered)

    def __contains__(self, tri) -> bool:
        return tri in self._triangles

    def edges(self) -> List[Edge]:
        """Distinct edges of the retained triangles, sorted."""
        return sorted(self._index.edges())

    def vertices(self) -> Set[Point]:
        return {v for t in self._ordered for v in t.vertices}

    def triangles_sharing(self, edge: Edge) -> Tuple[Triangle, ...]:
        """The one or two retained triangles owning ``edge`` (empty if none)."""
        return tuple(self._arena[s] for s in self._index.owners(edge))

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(points, triangles, elevations)`` arrays.

        ``points`` holds every sample in HeightMap order (including samples no
        triangle uses), ``triangles`` is (M, 3) int32 indices into it with
        counter-clockwise orientation.
        """
        pts, z = self.heights.to_arrays()
        lookup = {p: i for i, p in enumerate(self.heights)}
        rows = [[lookup[v] for v in t.vertices] for t in self._ordered]
        tris = np.asarray(rows, dtype=np.int32).reshape(-1, 3)
        cw = triangles_signed_areas(pts, tris) < 0.0
        tris[cw] = tris[cw][:, [0, 2, 1]]
        return pts, tris, z

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    def build(self) -> FrozenSet[Triangle]:
        """Triangulate the samples. Calling it again rebuilds from scratch.

        Fewer than 3 samples, or only collinear samples, give an empty result.
        Raises TriangulationError if a point cannot be located in the mesh;
        the partial mesh is discarded in that case.
        """
        t0 = time.perf_counter()
        self._reset()
        marks = self.heights.marks
        if len(marks) < 3:
            logger.warning("need at least 3 samples to triangulate, got %d", len(marks))
            self._finish(t0)
            return self._triangles

        lower, upper = self.heights.bounds()
        self._frame = SuperFrame(lower, upper, self.config.super_margin)
        self._add(self._frame.triangle)
        try:
            for p in marks:
                self._insert(p)
        except TriangulationError:
            self._reset()
            raise

        for slot, tri in enumerate(self._arena):
            if tri is not None and tri.has_common_vertex(self._frame.triangle):
                self._remove(slot)
                self.stats.cleanup_removed += 1

        self._finish(t0)
        if not self._ordered:
            logger.warning("samples are collinear; no triangles produced")
        if self.config.validate:
            for tri, p in delaunay_violations(self):
                logger.warning("Delaunay violation: %s lies inside circumcircle of %r", p, tri)
            for tri in degenerate_triangles(self._ordered):
                logger.warning("degenerate triangle %r (area %g)", tri, tri.area())
        return self._triangles

    def _reset(self) -> None:
        self.stats = BuildStats()
        self._arena = []
        self._slots = {}
        self._index = EdgeIndex()
        self._frame = None
        self._ordered = ()
        self._triangles = frozenset()
        self._built = False

    def _finish(self, t0: float) -> None:
        self._ordered = tuple(t for t in self._arena if t is not None)
        self._triangles = frozenset(self._ordered)
        self._built = True
        self.stats.triangles = len(self._ordered)
        self.stats.time_total = time.perf_counter() - t0
        logger.info("triangulated %d samples: %d triangles, %d edges, %d flips, %d edge splits",
                    self.stats.points_inserted, self.stats.triangles, len(self._index),
                    self.stats.flips, self.stats.edge_splits)

    def _add(self, tri: Triangle) -> None:
        if tri in self._slots:
            return
        slot = len(self._arena)
        self._arena.append(tri)
        self._slots[tri] = slot
        self._index.add(slot, tri)

    def _remove(self, slot: int) -> Triangle:
        tri = self._arena[slot]
        self._arena[slot] = None
        del self._slots[tri]
        self._index.remove(slot, tri)
        return tri

    def _locate(self, p: Point) -> Optional[int]:
        for slot, tri in enumerate(self._arena):
            if tri is not None and self._frame.contains(tri, p):
                return slot
        return None

    def _split(self, p: Point, edge: Edge) -> bool:
        """Add the triangle (edge, p) unless p is collinear with edge."""
        a, b = edge.points
        if self._frame.orient(p, b, a) == 0:
            self.stats.collinear_skips += 1
            logger.debug("skipping degenerate split of %s at %s", edge, p)
            return False
        self._add(Triangle(edge, Edge(b, p), Edge(p, a)))
        return True

    def _insert(self, p: Point) -> None:
        slot = self._locate(p)
        if slot is None:
            raise TriangulationError(f"no triangle contains {p}; the mesh does not cover the sample bounds")
        host = self._remove(slot)
        stack: List[Edge] = []
        for e in host.edges:
            if self._split(p, e):
                stack.append(e)
                continue
            # p lies on e: the triangle across e must be split too
            for n_slot in self._index.owners(e):
                neighbour = self._remove(n_slot)
                self.stats.edge_splits += 1
                for ne in neighbour.edges:
                    if ne != e and self._split(p, ne):
                        stack.append(ne)
        self.stats.points_inserted += 1
        self._legalize(stack)

    def _legalize(self, stack: List[Edge]) -> None:
        while stack:
            edge = stack.pop()
            owners = self._index.owners(edge)
            if len(owners) != 2:
                continue
            abc = self._arena[owners[0]]
            abd = self._arena[owners[1]]
            if abc == abd:
                self._remove(owners[0])
                self._remove(owners[1])
                self.stats.duplicate_removals += 1
                continue
            a, b = edge.points
            c = abc.opposite_vertex(edge)
            d = abd.opposite_vertex(edge)
            if self._frame.touches(abc) or self._frame.touches(abd):
                illegal = self._frame.flip_needed(a, b, c, d)
            else:
                illegal = abc.circumscribed_circle().contains(d)
            if not illegal:
                continue
            self._remove(owners[0])
            self._remove(owners[1])
            diagonal = Edge(c, d)
            self._add(Triangle(diagonal, abc.opposite_edge(b), abd.opposite_edge(b)))
            self._add(Triangle(diagonal, abc.opposite_edge(a), abd.opposite_edge(a)))
            self.stats.flips += 1
            stack.extend(e for e in abc.edges + abd.edges if e != edge)

    def __repr__(self):
        state = f"{len(self)} triangles" if self._built else "not built"
        return f"Triangulation(samples={len(self.heights)}, {state})"
