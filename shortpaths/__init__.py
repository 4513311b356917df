"""Public package exports for :mod:`shortpaths`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    DomainError,
    GraphFormatError,
    InputError,
    NegativeCycleError,
    NotSupportedError,
    ShortestPathError,
)
from .floyd_warshall import FloydWarshallSolver, all_pairs_shortest_paths
from .generators import complete_graph, path_graph, random_graph
from .graph import Graph, GraphView
from .graph_numpy import DenseGraph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .reference import bellman_ford_reference
from .result import AllPairsResult, ShortestPathResult, SingleSourceResult, SolveOutcome
from .solver import Algorithm, SolverConfig, SolverMetrics, shortest_paths
from .spfa import (
    SPFASolver,
    has_negative_cycle,
    single_source_shortest_paths,
    try_single_source_shortest_paths,
)
from .weights import INF, DistanceMatrix

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "AllPairsResult",
    "DenseGraph",
    "DistanceMatrix",
    "FloydWarshallSolver",
    "Graph",
    "GraphView",
    "INF",
    "Logger",
    "NoopLogger",
    "SPFASolver",
    "ShortestPathResult",
    "SingleSourceResult",
    "SolveOutcome",
    "SolverConfig",
    "SolverMetrics",
    "StdLogger",
    "all_pairs_shortest_paths",
    "bellman_ford_reference",
    "complete_graph",
    "has_negative_cycle",
    "path_graph",
    "random_graph",
    "read_graph",
    "shortest_paths",
    "single_source_shortest_paths",
    "try_single_source_shortest_paths",
    "write_graph",
    "AlgorithmError",
    "ConfigError",
    "DomainError",
    "GraphFormatError",
    "InputError",
    "NegativeCycleError",
    "NotSupportedError",
    "ShortestPathError",
]
