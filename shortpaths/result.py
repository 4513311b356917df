"""Immutable shortest-path results and the outcome wrapper returned by SPFA."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

import numpy as np
import numpy.typing as npt

from .exceptions import AlgorithmError, ConfigError, InputError
from .path import NO_PARENT, reconstruct_path
from .weights import Float, is_finite, weight_array

Vertex = int


def _frozen(data: Any, dtype: Any) -> npt.NDArray[Any]:
    arr = np.array(data, dtype=dtype)
    arr.setflags(write=False)
    return arr


def _frozen_distances(data: Any) -> npt.NDArray[Any]:
    try:
        arr = weight_array(data)
    except ConfigError as exc:
        raise InputError(f"distances: {exc}") from exc
    arr.setflags(write=False)
    return arr


def _scalar(x: Any) -> Float:
    return x.item() if isinstance(x, np.generic) else x


class ShortestPathResult(ABC):
    """Common read-only interface of all-pairs and single-source results."""

    @property
    @abstractmethod
    def n(self) -> int:
        """Number of vertices covered by the result."""

    def _check_vertex(self, v: Any) -> int:
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
            raise InputError(f"vertex ids must be integers, got {v!r}")
        if not 0 <= v < self.n:
            raise InputError(f"vertex {v} out of range [0, {self.n})")
        return int(v)

    @abstractmethod
    def paths(self, *args: int) -> List[List[Vertex]]:
        """Return one path per target vertex."""


@dataclass(frozen=True, eq=False)
class AllPairsResult(ShortestPathResult):
    """Distances and predecessors for every ordered vertex pair.

    Attributes:
        dists: ``n x n`` read-only array, ``inf`` where unreachable. float64,
            or ``object`` holding exact ints when float64 would round one.
        parents: ``n x n`` read-only array; ``parents[u, v]`` is the vertex
            before ``v`` on a shortest ``u -> v`` path or ``-1``.
    """

    dists: npt.NDArray[Any]
    parents: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        dists = _frozen_distances(self.dists)
        parents = _frozen(self.parents, np.int64)
        if dists.ndim != 2 or dists.shape[0] != dists.shape[1]:
            raise InputError("all-pairs distances must be a square matrix")
        if parents.shape != dists.shape:
            raise InputError("parents and distances must have the same shape")
        object.__setattr__(self, "dists", dists)
        object.__setattr__(self, "parents", parents)

    @property
    def n(self) -> int:
        return int(self.dists.shape[0])

    def distance(self, u: Vertex, v: Vertex) -> Float:
        """Return the shortest ``u -> v`` distance (``inf`` if unreachable)."""
        return _scalar(self.dists[self._check_vertex(u), self._check_vertex(v)])

    def is_reachable(self, u: Vertex, v: Vertex) -> bool:
        return is_finite(self.distance(u, v))

    def parent(self, u: Vertex, v: Vertex) -> Optional[Vertex]:
        p = int(self.parents[self._check_vertex(u), self._check_vertex(v)])
        return None if p == NO_PARENT else p

    def path(self, u: Vertex, v: Vertex) -> List[Vertex]:
        """Return the vertices of a shortest ``u -> v`` path.

        Empty when ``u == v`` or ``v`` is unreachable from ``u``.
        """
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if u == v or not is_finite(self.dists[u, v]):
            return []
        return reconstruct_path(self.parents[u].tolist(), u, v)

    def paths(self, *args: int) -> List[List[Vertex]]:
        """Return ``paths(u)[v] == path(u, v)`` for every target ``v``."""
        if len(args) != 1:
            raise TypeError("AllPairsResult.paths() takes exactly one source vertex")
        u = self._check_vertex(args[0])
        row = self.parents[u].tolist()
        dist_row = self.dists[u].tolist()
        return [
            [] if v == u or not is_finite(dist_row[v]) else reconstruct_path(row, u, v)
            for v in range(self.n)
        ]

    def all_paths(self) -> List[List[List[Vertex]]]:
        return [self.paths(u) for u in range(self.n)]

    def row(self, u: Vertex) -> "SingleSourceResult":
        """Return the single-source view of row ``u``."""
        u = self._check_vertex(u)
        return SingleSourceResult(source=u, dists=self.dists[u], parents=self.parents[u])


@dataclass(frozen=True, eq=False)
class SingleSourceResult(ShortestPathResult):
    """Distances and predecessors from one source vertex.

    Attributes:
        source: The source vertex.
        dists: Length-``n`` read-only array, ``inf`` where unreachable; same
            dtype rule as :class:`AllPairsResult`.
        parents: Length-``n`` read-only array of predecessors or ``-1``.
    """

    source: Vertex
    dists: npt.NDArray[Any]
    parents: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        dists = _frozen_distances(self.dists)
        parents = _frozen(self.parents, np.int64)
        if dists.ndim != 1 or parents.shape != dists.shape:
            raise InputError("single-source distances and parents must be equal-length vectors")
        object.__setattr__(self, "dists", dists)
        object.__setattr__(self, "parents", parents)
        object.__setattr__(self, "source", self._check_vertex(self.source))

    @property
    def n(self) -> int:
        return int(self.dists.shape[0])

    def distance(self, v: Vertex) -> Float:
        return _scalar(self.dists[self._check_vertex(v)])

    def is_reachable(self, v: Vertex) -> bool:
        return is_finite(self.distance(v))

    def parent(self, v: Vertex) -> Optional[Vertex]:
        p = int(self.parents[self._check_vertex(v)])
        return None if p == NO_PARENT else p

    def path(self, target: Vertex) -> List[Vertex]:
        """Return a shortest path from :attr:`source` to ``target``."""
        target = self._check_vertex(target)
        if target == self.source or not is_finite(self.dists[target]):
            return []
        return reconstruct_path(self.parents.tolist(), self.source, target)

    def paths(self, *args: int) -> List[List[Vertex]]:
        if args:
            raise TypeError("SingleSourceResult.paths() takes no arguments")
        row = self.parents.tolist()
        dist_row = self.dists.tolist()
        return [
            [] if v == self.source or not is_finite(dist_row[v])
            else reconstruct_path(row, self.source, v)
            for v in range(self.n)
        ]


R = TypeVar("R", bound=ShortestPathResult)


@dataclass(frozen=True)
class SolveOutcome(Generic[R]):
    """Either a result or the error that prevented one.

    Exactly one of ``result`` and ``error`` is set. Callers inspect
    :attr:`ok` directly instead of catching an exception.
    """

    result: Optional[R] = None
    error: Optional[AlgorithmError] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("SolveOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> R:
        """Return the result or raise the recorded error."""
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


__all__ = ["AllPairsResult", "ShortestPathResult", "SingleSourceResult", "SolveOutcome"]
