"""Single-source shortest paths with the Shortest Path Faster Algorithm.

SPFA is Bellman-Ford driven by a FIFO work queue: only vertices whose
distance just improved are rescanned. Without a negative cycle no vertex is
enqueued more than ``n - 1`` times, so a vertex exceeding ``n`` enqueues
proves a negative cycle reachable from the source and the run aborts.
"""

from __future__ import annotations

import numbers
import time
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .exceptions import ConfigError, DomainError, NegativeCycleError
from .graph import GraphView, Vertex
from .logger import Logger, NoopLogger
from .path import NO_PARENT
from .result import SingleSourceResult, SolveOutcome
from .solver import Algorithm, SolverConfig, SolverMetrics, count_edges
from .weights import INF, Float, as_distance_matrix, inf_add


class SPFASolver:
    """Queue-based Bellman-Ford from a single source.

    Args:
        G: Input graph.
        source: Source vertex identifier.
        distmx: Distance matrix; the graph's weights or unit weights when
            omitted.
        config: Solver configuration, must select SPFA when given.
        logger: Optional event logger.

    Raises:
        ConfigError: If the distance matrix is smaller than ``n x n``.
        DomainError: If ``source`` is not a valid vertex id.
    """

    def __init__(
        self,
        G: GraphView,
        source: Vertex,
        distmx: Any = None,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.cfg = config or SolverConfig(algorithm=Algorithm.SPFA)
        if self.cfg.algorithm is not Algorithm.SPFA:
            raise ConfigError(f"SPFASolver cannot run {self.cfg.algorithm.value!r}")
        self.distmx = as_distance_matrix(distmx, G)
        self.distmx.check_shape(G.n)
        if isinstance(source, bool) or not isinstance(source, numbers.Integral) or not 0 <= source < G.n:
            raise DomainError(source, G.n)
        self.G = G
        self.source = int(source)
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "edges_relaxed": 0,
            "enqueues": 0,
            "max_enqueue_count": 0,
        }
        self.wall_ms: Optional[float] = None

    def run(self) -> SolveOutcome[SingleSourceResult]:
        """Drain the work queue and return the result or the negative cycle.

        The negative-cycle failure is returned, not raised, and no partial
        distances are exposed with it.
        """
        n = self.G.n
        s = self.source
        dm = self.distmx
        self.logger.debug("spfa.start", n=n, source=s)
        t0 = time.perf_counter()

        dists: List[Float] = [INF] * n
        parents: List[int] = [NO_PARENT] * n
        dists[s] = 0
        count = [0] * n
        inqueue = [False] * n
        queue: Deque[Vertex] = deque([s])
        inqueue[s] = True

        relaxed = 0
        enqueues = 0
        error: Optional[NegativeCycleError] = None
        while queue and error is None:
            v = queue.popleft()
            inqueue[v] = False
            for w in self.G.outneighbors(v):
                relaxed += 1
                cand = inf_add(dists[v], dm[v, w])
                if cand < dists[w]:
                    dists[w] = cand
                    parents[w] = v
                    if not inqueue[w]:
                        queue.append(w)
                        inqueue[w] = True
                        count[w] += 1
                        enqueues += 1
                        if count[w] > n:
                            error = NegativeCycleError(w)
                            break

        self.counters["edges_relaxed"] += relaxed
        self.counters["enqueues"] += enqueues
        self.counters["max_enqueue_count"] = max(count, default=0)
        self.wall_ms = (time.perf_counter() - t0) * 1000.0

        if error is not None:
            self.logger.warning("spfa.negative_cycle", n=n, source=s, vertex=error.vertex)
            return SolveOutcome(error=error)
        self.logger.info(
            "spfa.done",
            n=n,
            source=s,
            wall_ms=round(self.wall_ms, 3),
            **self.counters,
        )
        return SolveOutcome(result=SingleSourceResult(source=s, dists=dists, parents=parents))

    def solve(self) -> SingleSourceResult:
        """Run SPFA, raising :class:`NegativeCycleError` on a negative cycle."""
        return self.run().unwrap()

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: Optional[float] = None) -> SolverMetrics:
        """Return metrics for the most recent run."""
        if wall_ms is None:
            wall_ms = self.wall_ms if self.wall_ms is not None else 0.0
        return SolverMetrics(
            n=self.G.n,
            m=count_edges(self.G),
            algorithm=Algorithm.SPFA.value,
            backend=self.cfg.backend,
            counters=self.summary(),
            wall_ms=wall_ms,
        )


def try_single_source_shortest_paths(
    graph: GraphView,
    source: Vertex,
    distmx: Any = None,
    *,
    logger: Logger | None = None,
) -> SolveOutcome[SingleSourceResult]:
    """Run SPFA and return an outcome holding the result or the error.

    Configuration and domain errors are still raised: they describe a bad
    call, not a property of the graph.
    """
    return SPFASolver(graph, source, distmx, logger=logger).run()


def single_source_shortest_paths(
    graph: GraphView,
    source: Vertex,
    distmx: Any = None,
    *,
    logger: Logger | None = None,
) -> SingleSourceResult:
    """Compute shortest distances from ``source`` to every vertex.

    Raises:
        ConfigError: If ``distmx`` is smaller than ``n x n``.
        DomainError: If ``source`` is not in ``[0, n)``.
        NegativeCycleError: If a negative cycle is reachable from ``source``.
    """
    return try_single_source_shortest_paths(graph, source, distmx, logger=logger).unwrap()


def has_negative_cycle(graph: GraphView, distmx: Any = None) -> bool:
    """Return ``True`` if SPFA from vertex ``0`` finds a negative cycle.

    Only cycles reachable from vertex ``0`` are seen; a negative cycle in a
    part of the graph that vertex ``0`` cannot reach is reported as ``False``.

    Examples:
        ```python
        >>> g = complete_graph(3)
        >>> has_negative_cycle(g, [[1, -3, 1], [-3, 1, 1], [1, 1, 1]])
        True
        ```
    """
    if graph.n == 0:
        return False
    outcome = try_single_source_shortest_paths(graph, 0, distmx)
    return isinstance(outcome.error, NegativeCycleError)


__all__ = [
    "SPFASolver",
    "has_negative_cycle",
    "single_source_shortest_paths",
    "try_single_source_shortest_paths",
]
