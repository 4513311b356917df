"""Custom exception types used across :mod:`shortpaths`."""

from __future__ import annotations


class ShortestPathError(Exception):
    """Base class for all package-specific errors."""


class InputError(ShortestPathError, ValueError):
    """Raised for invalid user input such as out-of-range vertex ids."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file or an edge weight fails."""


class DomainError(InputError):
    """Raised when a source vertex lies outside ``[0, n)``."""

    def __init__(self, source: object, n: int) -> None:
        self.source = source
        self.n = n
        super().__init__(f"source should be in [0, {n}), got {source!r}")


class ConfigError(ShortestPathError, ValueError):
    """Raised for invalid configuration, including undersized distance matrices."""


class NotSupportedError(ShortestPathError):
    """Raised when requesting a feature that is not implemented."""


class AlgorithmError(ShortestPathError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class NegativeCycleError(AlgorithmError):
    """Raised when a negative-weight cycle is reachable from the source."""

    def __init__(self, vertex: int | None = None) -> None:
        self.vertex = vertex
        msg = "negative-weight cycle reachable from source"
        if vertex is not None:
            msg += f" (vertex {vertex} exceeded its enqueue bound)"
        super().__init__(msg)


__all__ = [
    "ShortestPathError",
    "InputError",
    "GraphFormatError",
    "DomainError",
    "ConfigError",
    "NotSupportedError",
    "AlgorithmError",
    "NegativeCycleError",
]
