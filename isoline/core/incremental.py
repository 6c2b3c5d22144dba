"""Incrementally maintained edge-to-triangle index.

The triangulation keeps its triangles in an arena addressed by stable integer
slot; this index maps each canonical Edge to the slots of the triangles that
own it and is updated as triangles are added or removed, so neighbour lookups
during legalization are O(1) instead of a scan over the whole mesh.
"""
from __future__ import annotations

from typing import Dict, Iterable, Set, Tuple

from .geometry import Edge
from .triangle import Triangle

__all__ = ['EdgeIndex']


class EdgeIndex:
    """Edge -> owning triangle slots.

    Performance:
    - add/remove of a triangle: O(1) (three edges)
    - owner query: O(1)

    Example:
        >>> index = EdgeIndex()
        >>> index.add(0, tri_abc)
        >>> index.add(1, tri_abd)
        >>> index.owners(Edge(a, b))
        (0, 1)
    """

    def __init__(self):
        self.edge_to_tris: Dict[Edge, Set[int]] = {}

    def add(self, idx: int, tri: Triangle) -> None:
        for e in tri.edges:
            self.edge_to_tris.setdefault(e, set()).add(idx)

    def remove(self, idx: int, tri: Triangle) -> None:
        for e in tri.edges:
            owners = self.edge_to_tris.get(e)
            if owners is None:
                continue
            owners.discard(idx)
            if not owners:
                del self.edge_to_tris[e]

    def owners(self, edge: Edge) -> Tuple[int, ...]:
        """Slots of the triangles sharing ``edge``, in ascending order."""
        return tuple(sorted(self.edge_to_tris.get(edge, ())))

    def edges(self) -> Iterable[Edge]:
        return self.edge_to_tris.keys()

    def __len__(self):
        return len(self.edge_to_tris)
