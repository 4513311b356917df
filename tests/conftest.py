"""Pytest configuration and shared fixtures for shortpaths tests.

This module provides:
- A deterministic RNG fixture
- Small hand-checked graphs used across test modules
"""

import os
import random

import pytest

from shortpaths import Graph, complete_graph


@pytest.fixture(scope="function")
def rng() -> random.Random:
    """Provide a deterministic RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return random.Random(seed)


@pytest.fixture
def sample_graph() -> Graph:
    """Directed graph with one negative edge and no negative cycle.

    Shortest distances from 0 are ``[0, -1, 1, 0]`` via ``0 -> 2 -> 1 -> 3``.
    """
    return Graph.from_edges(4, [(0, 1, 4), (0, 2, 1), (2, 1, -2), (1, 3, 1)])


@pytest.fixture
def negative_triangle():
    """Complete graph on 3 vertices whose 0-1 edge weighs -3."""
    return complete_graph(3), [[1, -3, 1], [-3, 1, 1], [1, 1, 1]]


@pytest.fixture
def harmless_square():
    """Complete graph on 4 vertices with two -1 entries that form no negative cycle."""
    return complete_graph(4), [[1, 1, -1, 1], [1, 1, -1, 1], [1, 1, 1, 1], [1, 1, 1, 1]]
