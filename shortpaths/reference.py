"""Reference Bellman-Ford implementation used in tests and benchmarks."""

from __future__ import annotations

from typing import Any, List

from .exceptions import DomainError, NegativeCycleError
from .graph import GraphView, Vertex
from .path import NO_PARENT
from .result import SingleSourceResult
from .weights import INF, Float, as_distance_matrix


def bellman_ford_reference(G: GraphView, source: Vertex, distmx: Any = None) -> SingleSourceResult:
    """Run textbook Bellman-Ford: ``n - 1`` full rounds plus a check round.

    Args:
        G: Input graph.
        source: Source vertex identifier.
        distmx: Distance matrix, defaults as in the engines.

    Returns:
        Distances and predecessors from ``source``.

    Raises:
        NegativeCycleError: If an edge can still be relaxed after ``n - 1``
            rounds.
    """
    n = G.n
    if not 0 <= source < n:
        raise DomainError(source, n)
    dm = as_distance_matrix(distmx, G)
    dm.check_shape(n)

    arcs = []
    for u in range(n):
        for v in G.outneighbors(u):
            arcs.append((u, v, dm[u, v]))

    dist: List[Float] = [INF] * n
    pred: List[int] = [NO_PARENT] * n
    dist[source] = 0
    for _ in range(n - 1):
        updated = False
        for u, v, w in arcs:
            du = dist[u]
            if du == INF:
                continue
            if du + w < dist[v]:
                dist[v] = du + w
                pred[v] = u
                updated = True
        if not updated:
            break

    for u, v, w in arcs:
        if dist[u] != INF and dist[u] + w < dist[v]:
            raise NegativeCycleError()
    return SingleSourceResult(source=source, dists=dist, parents=pred)


__all__ = ["bellman_ford_reference"]
