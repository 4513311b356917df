"""NumPy-backed dense graph representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List

import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError, GraphFormatError, InputError
from .graph import Edge, Vertex
from .weights import INF, DistanceMatrix, weight_array


@dataclass(eq=False)
class DenseGraph:
    """Graph whose edges are the finite off-diagonal entries of a weight matrix.

    ``inf`` marks a missing edge; the diagonal is ignored. The matrix doubles
    as the graph's distance matrix through :meth:`weights`.
    """

    matrix: npt.NDArray[Any]
    directed: bool = True
    n: int = field(init=False)

    def __post_init__(self) -> None:
        try:
            mat = weight_array(self.matrix)
        except ConfigError as exc:
            raise GraphFormatError(f"adjacency matrix: {exc}") from exc
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise InputError("adjacency matrix must be a square 2-D array.")
        if not self.directed and not np.array_equal(mat, mat.T):
            raise GraphFormatError("undirected adjacency matrix must be symmetric")
        mat.setflags(write=False)
        self.matrix = mat
        self.n = int(mat.shape[0])
        present = np.asarray((mat != INF) & (mat != -INF), dtype=bool)
        np.fill_diagonal(present, False)
        self._present = present
        self._out: List[npt.NDArray[np.intp]] = [np.flatnonzero(row) for row in present]

    @classmethod
    def from_matrix(cls, matrix: Any, directed: bool = True) -> "DenseGraph":
        """Build a graph from a square weight matrix (``inf`` = no edge)."""
        return cls(matrix, directed=directed)

    @property
    def is_directed(self) -> bool:
        return self.directed

    @property
    def ne(self) -> int:
        count = int(self._present.sum())
        return count if self.directed else count // 2

    def edges(self) -> Iterator[Edge]:
        mask = self._present if self.directed else np.triu(self._present)
        for u, v in np.argwhere(mask):
            yield int(u), int(v)

    def outneighbors(self, v: Vertex) -> Iterator[Vertex]:
        return (int(w) for w in self._out[v])

    def out_degree(self, u: Vertex) -> int:
        return int(self._out[u].shape[0])

    def weights(self) -> DistanceMatrix:
        return DistanceMatrix(self.matrix)


__all__ = ["DenseGraph"]
