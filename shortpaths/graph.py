"""Graph views consumed by the shortest-path engines."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .exceptions import ConfigError, GraphFormatError, InputError
from .weights import DistanceMatrix, Float, to_number

Vertex = int
Edge = Tuple[Vertex, Vertex]
WeightedEdge = Tuple[Vertex, Vertex, Float]


class GraphView(Protocol):
    """Read-only graph interface required by the engines.

    Vertices are the integers ``0 .. n-1``. For undirected graphs
    :meth:`edges` yields each edge once while :meth:`outneighbors` reports
    both directions.
    """

    n: int

    @property
    def is_directed(self) -> bool:
        ...

    def edges(self) -> Iterator[Edge]:
        ...

    def outneighbors(self, v: Vertex) -> Iterable[Vertex]:
        ...


@dataclass
class Graph:
    """Adjacency-list graph with optional per-edge weights.

    Unlike a distance matrix, the graph only records which edges exist;
    weights stored here are what :meth:`weights` hands to the engines when
    the caller does not pass a matrix of their own. Negative weights are
    allowed.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        directed: ``False`` stores every edge in both directions.
    """

    n: int
    directed: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 0:
            raise InputError("Graph.n must be a non-negative integer.")
        self.adj: List[List[Vertex]] = [[] for _ in range(self.n)]
        self._edges: List[Edge] = []
        self._weights: Dict[Edge, Float] = {}

    @property
    def is_directed(self) -> bool:
        return self.directed

    @property
    def ne(self) -> int:
        """Number of edges (undirected edges count once)."""
        return len(self._edges)

    def _key(self, u: Vertex, v: Vertex) -> Edge:
        if self.directed or u <= v:
            return (u, v)
        return (v, u)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return self._key(u, v) in self._weights

    def add_edge(self, u: Vertex, v: Vertex, w: Optional[Float] = None) -> bool:
        """Add the edge ``u -> v`` (or ``u -- v`` when undirected).

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Edge weight, ``1`` when omitted. Integral weights are kept as
                exact ``int``.

        Returns:
            ``True`` if a new edge was inserted, ``False`` for a duplicate. A
            duplicate keeps the smaller of the two weights.

        Raises:
            InputError: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is not numeric or is NaN.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, -1.5)
            True
            >>> list(g.outneighbors(0))
            [1]
            ```
        """
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise InputError("u and v must be vertex ids in [0, n).")
        if w is None:
            w = 1.0
        if isinstance(w, bool) or not isinstance(w, numbers.Real):
            raise GraphFormatError(f"non-numeric weight {w!r} on edge ({u}, {v})")
        try:
            w = to_number(w)
        except ConfigError as exc:
            raise GraphFormatError(f"{exc} on edge ({u}, {v})") from exc
        key = self._key(u, v)
        if key in self._weights:
            self._weights[key] = min(self._weights[key], w)
            return False
        self._weights[key] = w
        self._edges.append(key)
        self.adj[u].append(v)
        if not self.directed and u != v:
            self.adj[v].append(u)
        return True

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Sequence[float]],
        directed: bool = True,
    ) -> "Graph":
        """Create a graph from ``(u, v)`` or ``(u, v, w)`` tuples."""
        g = cls(n, directed=directed)
        for e in edges:
            if len(e) == 2:
                g.add_edge(int(e[0]), int(e[1]))
            elif len(e) == 3:
                g.add_edge(int(e[0]), int(e[1]), e[2])
            else:
                raise GraphFormatError(f"edge must have 2 or 3 fields, got {e!r}")
        return g

    def vertices(self) -> range:
        return range(self.n)

    def edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    def weighted_edges(self) -> Iterator[WeightedEdge]:
        for e in self._edges:
            yield e[0], e[1], self._weights[e]

    def outneighbors(self, v: Vertex) -> Iterator[Vertex]:
        return iter(self.adj[v])

    def out_degree(self, u: Vertex) -> int:
        return len(self.adj[u])

    def weight(self, u: Vertex, v: Vertex) -> Float:
        """Return the stored weight of edge ``(u, v)``.

        Raises:
            InputError: If the edge does not exist.
        """
        try:
            return self._weights[self._key(u, v)]
        except KeyError:
            raise InputError(f"no edge ({u}, {v})") from None

    def weights(self) -> DistanceMatrix:
        """Return the stored edge weights as a sparse distance matrix.

        Undirected edges appear in both orientations. Pairs without an edge
        read as ``1``, matching the unit default.
        """
        entries: Dict[Edge, Float] = {}
        for (u, v), w in self._weights.items():
            entries[(u, v)] = w
            if not self.directed:
                entries[(v, u)] = w
        return DistanceMatrix.from_mapping(self.n, entries, fill=1.0)


__all__ = ["Edge", "Graph", "GraphView", "Vertex", "WeightedEdge"]
