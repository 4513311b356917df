"""Algorithm selection, solver configuration and the dispatching entry point."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ConfigError, NotSupportedError
from .graph import GraphView, Vertex
from .logger import Logger
from .result import ShortestPathResult

BACKENDS = ("python", "numpy")


class Algorithm(str, enum.Enum):
    """Engine selected by the caller."""

    FLOYD_WARSHALL = "floyd-warshall"
    SPFA = "spfa"

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ConfigError(f"unknown algorithm {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    algorithm: str
    backend: str
    counters: Dict[str, int]
    wall_ms: float


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for a shortest-path run.

    Attributes:
        algorithm: Engine to run. All-pairs Floyd-Warshall is the default;
            single-source SPFA must always be requested explicitly.
        backend: ``"python"`` (literal triple loop) or ``"numpy"``
            (vectorised per pivot). Only Floyd-Warshall has a numpy backend.
    """

    algorithm: Algorithm = Algorithm.FLOYD_WARSHALL
    backend: str = "python"

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))
        if self.backend not in BACKENDS:
            raise ConfigError(f"unknown backend {self.backend!r} (expected one of: {', '.join(BACKENDS)})")
        if self.algorithm is Algorithm.SPFA and self.backend != "python":
            raise NotSupportedError(f"SPFA has no {self.backend!r} backend")


def count_edges(graph: GraphView) -> int:
    """Return the number of edges reported by ``graph.edges()``."""
    return sum(1 for _ in graph.edges())


def shortest_paths(
    graph: GraphView,
    distmx: Any = None,
    *,
    source: Optional[Vertex] = None,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathResult:
    """Run the engine named by ``config.algorithm``.

    Args:
        graph: Graph to search.
        distmx: Distance matrix; defaults to the graph's weights or unit
            weights.
        source: Source vertex, required for SPFA and rejected for
            Floyd-Warshall.
        config: Solver configuration, Floyd-Warshall when omitted.
        logger: Optional event logger.

    Returns:
        An :class:`~shortpaths.result.AllPairsResult` or a
        :class:`~shortpaths.result.SingleSourceResult`.

    Raises:
        ConfigError: If ``source`` does not match the chosen algorithm or the
            distance matrix is too small.
        DomainError: If ``source`` is out of range.
        NegativeCycleError: If SPFA finds a negative cycle.
    """
    cfg = config or SolverConfig()
    if cfg.algorithm is Algorithm.FLOYD_WARSHALL:
        if source is not None:
            raise ConfigError("Floyd-Warshall computes all pairs; select SPFA for a single source")
        from .floyd_warshall import FloydWarshallSolver

        return FloydWarshallSolver(graph, distmx, config=cfg, logger=logger).solve()

    if source is None:
        raise ConfigError("SPFA requires a source vertex")
    from .spfa import SPFASolver

    return SPFASolver(graph, source, distmx, config=cfg, logger=logger).solve()


__all__ = [
    "Algorithm",
    "BACKENDS",
    "SolverConfig",
    "SolverMetrics",
    "count_edges",
    "shortest_paths",
]
