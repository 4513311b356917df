"""Tests for algorithm selection and the dispatching entry point."""

import numpy as np
import pytest

from shortpaths import (
    Algorithm,
    AllPairsResult,
    ConfigError,
    DomainError,
    NegativeCycleError,
    NotSupportedError,
    SingleSourceResult,
    SolverConfig,
    shortest_paths,
)


class TestAlgorithm:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("floyd-warshall", Algorithm.FLOYD_WARSHALL),
            ("FLOYD_WARSHALL", Algorithm.FLOYD_WARSHALL),
            ("spfa", Algorithm.SPFA),
            ("SPFA", Algorithm.SPFA),
            (Algorithm.SPFA, Algorithm.SPFA),
        ],
    )
    def test_parse(self, value, expected):
        assert Algorithm.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ConfigError, match="dijkstra"):
            Algorithm.parse("dijkstra")


class TestSolverConfig:
    def test_defaults(self):
        cfg = SolverConfig()

        assert cfg.algorithm is Algorithm.FLOYD_WARSHALL
        assert cfg.backend == "python"

    def test_string_algorithm_is_parsed(self):
        assert SolverConfig(algorithm="spfa").algorithm is Algorithm.SPFA

    def test_unknown_backend(self):
        with pytest.raises(ConfigError):
            SolverConfig(backend="cuda")

    def test_spfa_numpy_backend(self):
        with pytest.raises(NotSupportedError):
            SolverConfig(algorithm="spfa", backend="numpy")


class TestDispatch:
    def test_default_is_floyd_warshall(self, sample_graph):
        res = shortest_paths(sample_graph)

        assert isinstance(res, AllPairsResult)
        assert res.distance(0, 3) == 0.0

    def test_numpy_backend(self, sample_graph):
        res = shortest_paths(sample_graph, config=SolverConfig(backend="numpy"))
        ref = shortest_paths(sample_graph)

        np.testing.assert_array_equal(res.dists, ref.dists)

    def test_spfa(self, sample_graph):
        res = shortest_paths(sample_graph, source=0, config=SolverConfig(algorithm="spfa"))

        assert isinstance(res, SingleSourceResult)
        assert res.path(3) == [0, 2, 1, 3]

    def test_spfa_requires_source(self, sample_graph):
        with pytest.raises(ConfigError):
            shortest_paths(sample_graph, config=SolverConfig(algorithm="spfa"))

    def test_floyd_warshall_rejects_source(self, sample_graph):
        with pytest.raises(ConfigError):
            shortest_paths(sample_graph, source=0)

    def test_spfa_bad_source(self, sample_graph):
        with pytest.raises(DomainError):
            shortest_paths(sample_graph, source=7, config=SolverConfig(algorithm="spfa"))

    def test_spfa_negative_cycle(self, negative_triangle):
        g, d = negative_triangle

        with pytest.raises(NegativeCycleError):
            shortest_paths(g, d, source=0, config=SolverConfig(algorithm="spfa"))

    def test_floyd_warshall_undersized_matrix(self, sample_graph):
        with pytest.raises(ConfigError):
            shortest_paths(sample_graph, [[0.0]])
