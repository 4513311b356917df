"""All-pairs shortest paths with the Floyd-Warshall algorithm.

Pivots are processed in increasing order and each pivot's relaxation pass
completes before the next one starts: after pivot ``p`` every ``dists[u][v]``
is the shortest distance using only vertices ``0..p`` as intermediates.

Floyd-Warshall does not detect negative cycles. On such input it returns
distances that are not shortest-path distances.

The numpy backend works on ``object`` arrays of exact Python numbers when
integer weights could add up past the range float64 represents exactly.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .exceptions import ConfigError
from .graph import GraphView
from .logger import Logger, NoopLogger
from .path import NO_PARENT
from .result import AllPairsResult
from .solver import Algorithm, SolverConfig, SolverMetrics, count_edges
from .weights import INF, Float, as_distance_matrix, needs_exact, weight_array

Matrix = List[List[Float]]
ParentMatrix = List[List[int]]


class FloydWarshallSolver:
    """Floyd-Warshall over a graph view and a distance matrix.

    Args:
        G: Input graph.
        distmx: Distance matrix; the graph's weights or unit weights when
            omitted.
        config: Solver configuration selecting the backend.
        logger: Optional event logger.

    Raises:
        ConfigError: If the distance matrix is smaller than ``n x n`` or the
            configuration names another algorithm.
    """

    def __init__(
        self,
        G: GraphView,
        distmx: Any = None,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.cfg = config or SolverConfig()
        if self.cfg.algorithm is not Algorithm.FLOYD_WARSHALL:
            raise ConfigError(f"FloydWarshallSolver cannot run {self.cfg.algorithm.value!r}")
        self.distmx = as_distance_matrix(distmx, G)
        self.distmx.check_shape(G.n)
        self.G = G
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {"pivots": 0, "relaxations": 0}
        self.wall_ms: Optional[float] = None

    def _initial_state(self) -> Tuple[Matrix, ParentMatrix]:
        """Return distances and parents before any pivot is processed."""
        n = self.G.n
        dm = self.distmx
        dists: Matrix = [[INF] * n for _ in range(n)]
        parents: ParentMatrix = [[NO_PARENT] * n for _ in range(n)]
        for v in range(n):
            dists[v][v] = 0
        undirected = not self.G.is_directed
        for u, v in self.G.edges():
            d = dm[u, v]
            if u == v:
                dists[u][u] = min(d, dists[u][u])
                continue
            # an infinite weight leaves the pair unreachable and parentless
            if d < dists[u][v]:
                dists[u][v] = d
                parents[u][v] = u
            if undirected and d < dists[v][u]:
                dists[v][u] = d
                parents[v][u] = v
        return dists, parents

    def _relax_python(self, dists: Matrix, parents: ParentMatrix) -> None:
        n = self.G.n
        relaxations = 0
        for pivot in range(n):
            row_p = dists[pivot]
            par_p = parents[pivot]
            for v in range(n):
                d = row_p[v]
                if d == INF:
                    continue
                p = par_p[v]
                for u in range(n):
                    row_u = dists[u]
                    dup = row_u[pivot]
                    cand = INF if dup == INF else dup + d
                    if cand < row_u[v]:
                        row_u[v] = cand
                        parents[u][v] = p
                        relaxations += 1
            self.counters["pivots"] += 1
        self.counters["relaxations"] += relaxations

    def _relax_numpy(self, D: np.ndarray, P: np.ndarray) -> None:
        n = self.G.n
        for pivot in range(n):
            # the pivot row and column are read-only for the whole pass
            col = D[:, pivot].copy()
            row = D[pivot, :].copy()
            prow = P[pivot, :].copy()
            with np.errstate(invalid="ignore"):
                cand = col[:, None] + row[None, :]
                better = np.asarray(cand < D, dtype=bool)
            k = int(np.count_nonzero(better))
            if k:
                D[better] = cand[better]
                P[better] = np.broadcast_to(prow, (n, n))[better]
                self.counters["relaxations"] += k
            self.counters["pivots"] += 1

    def solve(self) -> AllPairsResult:
        """Run Floyd-Warshall and return all-pairs distances and parents."""
        n = self.G.n
        self.logger.debug("floyd_warshall.start", n=n, backend=self.cfg.backend)
        t0 = time.perf_counter()
        dists, parents = self._initial_state()
        if self.cfg.backend == "numpy":
            exact = needs_exact((d for row in dists for d in row), 2 * n)
            D = np.array(dists, dtype=object if exact else np.float64).reshape(n, n)
            P = np.array(parents, dtype=np.int64).reshape(n, n)
            self._relax_numpy(D, P)
        else:
            self._relax_python(dists, parents)
            D = weight_array(dists).reshape(n, n)
            P = np.array(parents, dtype=np.int64).reshape(n, n)
        result = AllPairsResult(dists=D, parents=P)
        self.wall_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.info(
            "floyd_warshall.done",
            n=n,
            backend=self.cfg.backend,
            wall_ms=round(self.wall_ms, 3),
            **self.counters,
        )
        return result

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: Optional[float] = None) -> SolverMetrics:
        """Return metrics for the most recent :meth:`solve` call."""
        if wall_ms is None:
            wall_ms = self.wall_ms if self.wall_ms is not None else 0.0
        return SolverMetrics(
            n=self.G.n,
            m=count_edges(self.G),
            algorithm=Algorithm.FLOYD_WARSHALL.value,
            backend=self.cfg.backend,
            counters=self.summary(),
            wall_ms=wall_ms,
        )


def all_pairs_shortest_paths(
    graph: GraphView,
    distmx: Any = None,
    *,
    backend: str = "python",
    logger: Logger | None = None,
) -> AllPairsResult:
    """Compute shortest distances between every pair of vertices.

    Args:
        graph: Input graph.
        distmx: Distance matrix, at least ``n x n``.
        backend: ``"python"`` or ``"numpy"``.
        logger: Optional event logger.

    Returns:
        The all-pairs result.

    Raises:
        ConfigError: If ``distmx`` is smaller than ``n x n`` or ``backend``
            is unknown.

    Examples:
        ```python
        >>> g = Graph.from_edges(3, [(0, 1, 1.0), (1, 2, -2.0)])
        >>> all_pairs_shortest_paths(g).distance(0, 2)
        -1.0
        ```
    """
    cfg = SolverConfig(algorithm=Algorithm.FLOYD_WARSHALL, backend=backend)
    return FloydWarshallSolver(graph, distmx, config=cfg, logger=logger).solve()


__all__ = ["FloydWarshallSolver", "all_pairs_shortest_paths"]
