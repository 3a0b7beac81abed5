from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .geometry import segments_cross
from .models import Edge, Point


class DegreeQueue:
    """Vertices ordered by ``(degree, index)``, lowest first.

    Degrees change while the generator walks the queue, so positional
    access always reads the current ordering rather than a snapshot.
    Lookup is a bisect; :meth:`increment` shifts the backing list, which is
    linear in the vertex count but cheap at puzzle sizes.
    """

    def __init__(self, n: int) -> None:
        self._degree: List[int] = [0] * n
        self._entries: List[Tuple[int, int]] = [(0, v) for v in range(n)]

    def degree(self, v: int) -> int:
        return self._degree[v]

    def increment(self, v: int) -> int:
        entry = (self._degree[v], v)
        del self._entries[bisect_left(self._entries, entry)]
        self._degree[v] += 1
        insort(self._entries, (self._degree[v], v))
        return self._degree[v]

    def ordered(self) -> List[int]:
        return [v for _, v in self._entries]

    def __getitem__(self, i: int) -> Tuple[int, int]:
        return self._entries[i]

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def crossing_pairs(points: Sequence[Point], edges: Iterable[Edge]) -> Iterator[Tuple[Edge, Edge]]:
    """Yield every pair of edges, sharing no endpoint, that cross."""
    edge_list = list(edges)
    for i, edge_a in enumerate(edge_list):
        pa1, pa2 = points[edge_a.a], points[edge_a.b]
        for edge_b in edge_list[i + 1 :]:
            if edge_a.shares_endpoint(edge_b):
                continue
            if segments_cross(pa1, pa2, points[edge_b.a], points[edge_b.b]):
                yield edge_a, edge_b


def find_crossing(points: Sequence[Point], edges: Iterable[Edge]) -> Optional[Tuple[Edge, Edge]]:
    return next(crossing_pairs(points, edges), None)


def has_edge_crossings(points: Sequence[Point], edges: Iterable[Edge]) -> bool:
    return find_crossing(points, edges) is not None


def edge_is_clear(
    points: Sequence[Point],
    edges: Iterable[Edge],
    u: int,
    v: int,
) -> bool:
    """True if segment u-v passes through no other point and crosses no edge.

    Edges incident to *u* or *v* are ignored.
    """
    pu, pv = points[u], points[v]
    for p, point in enumerate(points):
        if p != u and p != v and segments_cross(pu, pv, point, point):
            return False
    for edge in edges:
        if edge.a in (u, v) or edge.b in (u, v):
            continue
        if segments_cross(pu, pv, points[edge.a], points[edge.b]):
            return False
    return True
