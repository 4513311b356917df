"""Tests for graph containers."""

import math

import numpy as np
import pytest

from shortpaths import (
    DenseGraph,
    DomainError,
    Graph,
    GraphFormatError,
    InputError,
    all_pairs_shortest_paths,
    has_negative_cycle,
    single_source_shortest_paths,
)


class TestGraph:
    @pytest.mark.parametrize("n", [-1, 2.5, True, "3"])
    def test_rejects_bad_sizes(self, n):
        with pytest.raises(InputError):
            Graph(n)

    def test_empty_graph(self):
        g = Graph(0)
        res = all_pairs_shortest_paths(g)

        assert g.ne == 0
        assert list(g.edges()) == []
        assert res.n == 0
        assert res.dists.shape == (0, 0)
        assert not has_negative_cycle(g)
        with pytest.raises(DomainError):
            single_source_shortest_paths(g, 0)

    def test_add_edge(self):
        g = Graph(3)

        assert g.add_edge(0, 1, -2.5) is True
        assert g.add_edge(1, 2) is True
        assert g.weight(0, 1) == -2.5
        assert g.weight(1, 2) == 1.0
        assert list(g.outneighbors(0)) == [1]
        assert g.ne == 2

    def test_out_of_range_vertex(self):
        g = Graph(2)

        with pytest.raises(InputError):
            g.add_edge(0, 2)
        with pytest.raises(InputError):
            g.add_edge(-1, 0)

    @pytest.mark.parametrize("w", ["1", True, [1.0]])
    def test_non_numeric_weight(self, w):
        with pytest.raises(GraphFormatError):
            Graph(2).add_edge(0, 1, w)

    def test_integer_weights_are_kept_exact(self):
        g = Graph(2)
        g.add_edge(0, 1, 2**60 + 1)
        g.add_edge(1, 0, np.int64(-3))

        assert g.weight(0, 1) == 2**60 + 1
        assert type(g.weight(1, 0)) is int

    def test_nan_weight(self):
        with pytest.raises(GraphFormatError, match="NaN"):
            Graph(2).add_edge(0, 1, math.nan)

    def test_duplicate_keeps_minimum(self):
        g = Graph(2)
        g.add_edge(0, 1, 3.0)

        assert g.add_edge(0, 1, 1.0) is False
        assert g.add_edge(0, 1, 5.0) is False
        assert g.weight(0, 1) == 1.0
        assert g.ne == 1
        assert list(g.outneighbors(0)) == [1]

    def test_undirected_storage(self):
        g = Graph(3, directed=False)
        g.add_edge(2, 0, 4.0)

        assert g.has_edge(0, 2) and g.has_edge(2, 0)
        assert g.weight(0, 2) == 4.0
        assert list(g.outneighbors(0)) == [2]
        assert list(g.outneighbors(2)) == [0]
        assert list(g.edges()) == [(0, 2)]
        assert g.add_edge(0, 2, 1.0) is False

    def test_missing_weight(self):
        with pytest.raises(InputError):
            Graph(2).weight(0, 1)

    def test_from_edges(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2, 0.5)])

        assert list(g.weighted_edges()) == [(0, 1, 1.0), (1, 2, 0.5)]
        with pytest.raises(GraphFormatError):
            Graph.from_edges(3, [(0, 1, 2, 3)])

    def test_weights_matrix(self):
        g = Graph.from_edges(3, [(0, 1, -4.0)], directed=False)
        dm = g.weights()

        assert dm.shape == (3, 3)
        assert dm[0, 1] == -4.0
        assert dm[1, 0] == -4.0
        assert dm[1, 2] == 1.0


class TestDenseGraph:
    def test_edges_from_finite_entries(self):
        inf = math.inf
        g = DenseGraph.from_matrix([[0, 2, inf], [inf, 0, -1], [inf, inf, 0]])

        assert g.n == 3
        assert g.ne == 2
        assert list(g.edges()) == [(0, 1), (1, 2)]
        assert list(g.outneighbors(1)) == [2]
        assert g.out_degree(2) == 0

    def test_matrix_doubles_as_weights(self):
        inf = math.inf
        g = DenseGraph.from_matrix([[0, 2, inf], [inf, 0, -1], [inf, inf, 0]])
        res = all_pairs_shortest_paths(g)

        assert res.distance(0, 2) == 1.0
        assert res.path(0, 2) == [0, 1, 2]
        assert res.distance(2, 0) == math.inf

    def test_undirected_edges_listed_once(self):
        g = DenseGraph(np.array([[0.0, 3.0], [3.0, 0.0]]), directed=False)

        assert list(g.edges()) == [(0, 1)]
        assert g.ne == 1
        assert list(g.outneighbors(1)) == [0]

    def test_validation(self):
        with pytest.raises(InputError):
            DenseGraph(np.zeros((2, 3)))
        with pytest.raises(GraphFormatError):
            DenseGraph(np.array([[0.0, np.nan], [1.0, 0.0]]))
        with pytest.raises(GraphFormatError):
            DenseGraph(np.array([[0.0, 1.0], [2.0, 0.0]]), directed=False)

    def test_empty_matrix(self):
        g = DenseGraph(np.zeros((0, 0)))

        assert g.n == 0
        assert g.ne == 0
        assert all_pairs_shortest_paths(g).n == 0

    def test_matrix_is_read_only(self):
        g = DenseGraph.from_matrix([[0.0, 1.0], [1.0, 0.0]])

        with pytest.raises(ValueError):
            g.matrix[0, 1] = 5.0


class RingView:
    """Minimal graph satisfying the view protocol, without weights."""

    def __init__(self, n):
        self.n = n

    @property
    def is_directed(self):
        return True

    def edges(self):
        return iter([(v, (v + 1) % self.n) for v in range(self.n)])

    def outneighbors(self, v):
        return [(v + 1) % self.n]


def test_protocol_graph_uses_unit_weights():
    ring = RingView(5)
    res = single_source_shortest_paths(ring, 1)

    assert res.dists.tolist() == [4.0, 0.0, 1.0, 2.0, 3.0]
    assert res.path(0) == [1, 2, 3, 4, 0]
    assert all_pairs_shortest_paths(ring).distance(4, 3) == 4.0
