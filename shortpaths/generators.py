"""Small graph generators for fixtures, the CLI and benchmarks.

``random_graph`` produces directed weighted graphs. With ``negative=True``
every edge weight is shifted by a vertex potential,
``w'(u, v) = w(u, v) + h(u) - h(v)``. The shift cancels around every cycle,
so edges may become negative while no cycle does.
"""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from .exceptions import InputError
from .graph import Graph


def complete_graph(n: int, directed: bool = False) -> Graph:
    """Return the complete graph on ``n`` vertices with unit weights."""
    g = Graph(n, directed=directed)
    for u in range(n):
        for v in range(n):
            if u == v or (not directed and v < u):
                continue
            g.add_edge(u, v)
    return g


def path_graph(n: int, directed: bool = False, weight: float = 1.0) -> Graph:
    """Return the path ``0 - 1 - ... - n-1`` with a constant edge weight."""
    g = Graph(n, directed=directed)
    for u in range(n - 1):
        g.add_edge(u, u + 1, weight)
    return g


def random_graph(
    n: int,
    m: Optional[int] = None,
    *,
    seed: Optional[int] = 0,
    w_min: int = 1,
    w_max: int = 10,
    negative: bool = False,
    directed: bool = True,
    allow_self_loops: bool = False,
) -> Graph:
    """Generate a random weighted graph with ``n`` vertices and ``m`` edges.

    Args:
        n: Number of vertices.
        m: Number of distinct edges, ``4 * n`` (capped) by default.
        seed: Seed for :class:`random.Random`.
        w_min: Smallest base weight (``>= 0``).
        w_max: Largest base weight.
        negative: Apply a random vertex potential so some edges become
            negative without creating a negative cycle. Directed graphs only.
        directed: Generate a directed graph.
        allow_self_loops: Permit ``u -> u`` edges.

    Returns:
        The generated graph; its weights are available via ``weights()``.

    Raises:
        InputError: On invalid sizes or weight bounds.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if w_min < 0:
        raise InputError("w_min must be >= 0.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")
    if negative and not directed:
        # an undirected negative edge is a negative cycle of length two
        raise InputError("negative weights require a directed graph.")

    slots = n * n if allow_self_loops else n * (n - 1)
    if not directed:
        slots = (n * (n + 1)) // 2 if allow_self_loops else (n * (n - 1)) // 2
    if m is None:
        m = min(4 * n, slots)
    if m < 0 or m > slots:
        raise InputError(f"m must be in [0, {slots}] for n={n}.")

    rng = random.Random(seed)
    potential: List[int] = [rng.randint(0, w_max) for _ in range(n)] if negative else [0] * n

    seen: Set[Tuple[int, int]] = set()
    g = Graph(n, directed=directed)
    while len(seen) < m:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if u == v and not allow_self_loops:
            continue
        key = (u, v) if directed or u <= v else (v, u)
        if key in seen:
            continue
        seen.add(key)
        w = rng.randint(w_min, w_max) + potential[u] - potential[v]
        g.add_edge(u, v, w)
    return g


__all__ = ["complete_graph", "path_graph", "random_graph"]
