"""Tests for graph generators."""

import pytest

from shortpaths import (
    InputError,
    complete_graph,
    has_negative_cycle,
    path_graph,
    random_graph,
    try_single_source_shortest_paths,
)


def test_complete_graph():
    g = complete_graph(4)

    assert g.ne == 6
    assert sorted(g.outneighbors(2)) == [0, 1, 3]
    assert complete_graph(4, directed=True).ne == 12


def test_path_graph():
    g = path_graph(5, directed=True, weight=-1.0)

    assert list(g.weighted_edges())[-1] == (3, 4, -1.0)
    assert g.ne == 4


class TestRandomGraph:
    def test_edge_count_and_determinism(self):
        a = random_graph(12, 40, seed=5)
        b = random_graph(12, 40, seed=5)

        assert a.ne == 40
        assert list(a.weighted_edges()) == list(b.weighted_edges())

    def test_default_edge_count(self):
        assert random_graph(5).ne == 20
        assert random_graph(30).ne == 120

    def test_weight_bounds(self):
        g = random_graph(10, 50, seed=1, w_min=2, w_max=4)

        assert all(2 <= w <= 4 for _, _, w in g.weighted_edges())

    def test_no_self_loops_by_default(self):
        g = random_graph(4, 12, seed=3)

        assert all(u != v for u, v in g.edges())

    @pytest.mark.parametrize("seed", range(5))
    def test_negative_weights_without_negative_cycles(self, seed):
        g = random_graph(12, 60, seed=seed, negative=True)

        assert any(w < 0 for _, _, w in g.weighted_edges())
        assert not has_negative_cycle(g)
        for s in range(g.n):
            assert try_single_source_shortest_paths(g, s).ok

    def test_undirected(self):
        g = random_graph(6, 15, seed=2, directed=False)

        assert g.ne == 15
        assert not g.is_directed

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n": 0},
            {"n": 3, "m": 7},
            {"n": 3, "m": -1},
            {"n": 3, "w_min": -1},
            {"n": 3, "w_min": 5, "w_max": 2},
            {"n": 3, "negative": True, "directed": False},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(InputError):
            random_graph(**kwargs)
