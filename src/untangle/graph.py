from __future__ import annotations

import threading
from bisect import insort
from typing import Iterable, Iterator, List, Optional, Set

from .models import Edge


class EdgeSet:
    """Deduplicated undirected edges, enumerated in ascending ``(a, b)`` order.

    Membership goes through a hash set; a bisect-maintained list keeps the
    canonical ordering so enumeration and positional access need no sort.
    """

    def __init__(self, edges: Optional[Iterable[Edge]] = None) -> None:
        self._members: Set[Edge] = set()
        self._ordered: List[Edge] = []
        for edge in edges or ():
            self.add_edge(edge)

    def add(self, a: int, b: int) -> Edge:
        return self.add_edge(Edge(a, b))

    def add_edge(self, edge: Edge) -> Edge:
        if edge in self._members:
            raise ValueError(f"Edge {edge} is already present")
        self._members.add(edge)
        insort(self._ordered, edge)
        return edge

    def contains(self, a: int, b: int) -> bool:
        if a == b:
            raise ValueError(f"Edge endpoints must differ, got {a}-{b}")
        return Edge(a, b) in self._members

    def enumerate(self) -> List[Edge]:
        return list(self._ordered)

    def count(self) -> int:
        return len(self._ordered)

    def clear(self) -> None:
        self._members.clear()
        self._ordered.clear()

    def __contains__(self, edge: object) -> bool:
        return edge in self._members

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __getitem__(self, i: int) -> Edge:
        return self._ordered[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeSet):
            return NotImplemented
        return self._ordered == other._ordered

    def __repr__(self) -> str:
        return f"EdgeSet([{', '.join(str(e) for e in self._ordered)}])"


class Graph:
    """Ownership-counted handle on an immutable :class:`EdgeSet`.

    The creator holds the first reference.  Every additional owner calls
    :meth:`acquire`; every owner calls :meth:`release` exactly once.  The
    edge storage is torn down when the count reaches zero, after which the
    handle refuses further use.
    """

    def __init__(self, edges: EdgeSet) -> None:
        self._edges = edges
        self._refcount = 1
        self._lock = threading.Lock()

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def released(self) -> bool:
        return self._refcount <= 0

    @property
    def edges(self) -> EdgeSet:
        if self.released:
            raise RuntimeError("Graph has been released by its last owner")
        return self._edges

    def acquire(self) -> "Graph":
        with self._lock:
            if self._refcount <= 0:
                raise RuntimeError("Cannot acquire a released graph")
            self._refcount += 1
        return self

    def release(self) -> None:
        with self._lock:
            if self._refcount <= 0:
                raise RuntimeError("Graph released more times than it was acquired")
            self._refcount -= 1
            last = self._refcount == 0
        if last:
            self._edges.clear()
