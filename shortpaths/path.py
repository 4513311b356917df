"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Sequence

from .exceptions import AlgorithmError

Vertex = int

NO_PARENT = -1


def reconstruct_path(
    parents: Sequence[int],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a predecessor row.

    Args:
        parents: Predecessor of each vertex on a shortest path from
            ``source``, or :data:`NO_PARENT`.
        source: Source vertex identifier.
        target: Target vertex identifier, assumed reachable from ``source``.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list when
        ``target == source``.

    Raises:
        AlgorithmError: If the chain does not lead back to ``source`` within
            ``len(parents)`` steps, which only happens for results computed
            on a graph with a negative cycle.
    """
    if source == target:
        return []
    chain: List[Vertex] = []
    cur = target
    for _ in range(len(parents)):
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        prev = parents[cur]
        # a self-referencing entry marks the row origin
        if prev == NO_PARENT or prev == cur:
            break
        cur = prev
    raise AlgorithmError(f"predecessor chain from {target} does not lead back to {source}")


__all__ = ["NO_PARENT", "reconstruct_path"]
