"""Tests for distance matrices and inf-aware arithmetic."""

import math

import numpy as np
import pytest

from shortpaths import ConfigError, DistanceMatrix, Graph, INF
from shortpaths.weights import (
    as_distance_matrix,
    default_weights,
    inf_add,
    is_finite,
    needs_exact,
    to_number,
    weight_array,
)


def test_inf_add():
    assert inf_add(1.0, 2.0) == 3.0
    assert inf_add(INF, -5.0) == INF
    assert inf_add(-5.0, INF) == INF
    assert inf_add(-1e308, -1e308) == -math.inf
    assert is_finite(-1e300)
    assert not is_finite(INF)


class TestDistanceMatrix:
    def test_dense(self):
        dm = DistanceMatrix([[0, 1.5], [-2, 0]])

        assert dm.shape == (2, 2)
        assert dm[1, 0] == -2.0
        assert "dense" in repr(dm)

    def test_dense_is_copied_and_read_only(self):
        arr = np.array([[0.0, 1.0], [1.0, 0.0]])
        dm = DistanceMatrix(arr)
        arr[0, 1] = 9.0

        assert dm[0, 1] == 1.0
        view = dm.as_array(2)
        with pytest.raises(ValueError):
            view[0, 0] = 1.0

    def test_sparse(self):
        dm = DistanceMatrix.from_mapping(3, {(0, 2): -7}, fill=2.0)

        assert dm[0, 2] == -7.0
        assert dm[2, 0] == 2.0
        assert dm.as_array(3)[0].tolist() == [2.0, 2.0, -7.0]
        assert "sparse" in repr(dm)

    def test_unit(self):
        dm = DistanceMatrix.unit(4)

        assert dm.shape == (4, 4)
        assert dm[3, 1] == 1.0

    def test_copy_constructor(self):
        src = DistanceMatrix.from_mapping(2, {(0, 1): 3.0})
        dm = DistanceMatrix(src)

        assert dm[0, 1] == 3.0
        assert dm.shape == (2, 2)

    @pytest.mark.parametrize(
        "data",
        [
            [1.0, 2.0],
            [[["a"]]],
            [["x", "y"], ["z", "w"]],
            [[0.0, float("nan")], [1.0, 0.0]],
        ],
    )
    def test_invalid_dense_input(self, data):
        with pytest.raises(ConfigError):
            DistanceMatrix(data)

    def test_check_shape(self):
        dm = DistanceMatrix(np.ones((3, 4)))
        dm.check_shape(3)
        dm.check_shape(1)

        with pytest.raises(ConfigError, match="3x4 is smaller than 4x4"):
            dm.check_shape(4)

    def test_leading_block(self):
        dm = DistanceMatrix(np.arange(16.0).reshape(4, 4))

        assert dm.as_array(2).tolist() == [[0.0, 1.0], [4.0, 5.0]]


class TestDefaults:
    def test_graph_weights_are_used(self):
        g = Graph.from_edges(2, [(0, 1, -3.0)])

        assert default_weights(g)[0, 1] == -3.0

    def test_graph_without_weights_gets_unit(self):
        class Bare:
            n = 3

        dm = default_weights(Bare())
        assert dm.shape == (3, 3)
        assert dm[0, 1] == 1.0

    def test_weights_returning_none(self):
        class NoWeights:
            n = 2

            def weights(self):
                return None

        assert default_weights(NoWeights())[1, 0] == 1.0

    def test_explicit_matrix_wins(self):
        g = Graph.from_edges(2, [(0, 1, -3.0)])
        dm = as_distance_matrix([[0, 8], [8, 0]], g)

        assert dm[0, 1] == 8.0
        assert as_distance_matrix(dm, g) is dm


class TestExactIntegers:
    def test_large_integer_entries_are_exact(self):
        big = 2**60 + 1
        dm = DistanceMatrix([[0, big], [1, 0]])

        assert dm[0, 1] == big
        assert isinstance(dm[0, 1], int)
        assert dm.as_array(2).dtype == object
        assert dm.as_array(2)[0, 1] == big

    def test_small_integers_pack_as_float(self):
        assert DistanceMatrix([[0, 3], [-2, 0]]).as_array(2).dtype == np.float64
        assert weight_array([[1, INF]]).dtype == np.float64

    def test_sparse_large_integer(self):
        dm = DistanceMatrix.from_mapping(2, {(0, 1): 2**53 + 1})

        assert dm.as_array(2)[0, 1] == 2**53 + 1

    def test_to_number(self):
        assert to_number(np.int64(7)) == 7
        assert isinstance(to_number(np.int64(7)), int)
        assert isinstance(to_number(np.float32(0.5)), float)
        with pytest.raises(ConfigError):
            to_number("3")
        with pytest.raises(ConfigError):
            to_number(float("nan"))

    def test_needs_exact(self):
        assert not needs_exact([1, 2.5, INF], 10)
        assert needs_exact([2**52, 0], 4)
        assert not needs_exact([], 0)
