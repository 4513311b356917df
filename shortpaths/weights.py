"""Distance matrices and inf-aware arithmetic for the engines.

Unreachable distances are represented by :data:`INF` (``math.inf``) rather
than a maximal representable value, so a finite sum can never wrap around and
masquerade as a short distance.

Integer weights stay Python ``int`` throughout the pure-Python engines. Arrays
are float64 while every value is an exactly representable integer or a float;
an integer that float64 would round switches the array to ``object`` dtype
holding the exact Python numbers.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError

INF = math.inf
Float = float
Number = Union[int, float]

# every integer of magnitude up to 2**53 is exactly representable in float64
FLOAT_EXACT_MAX = 2**53


def inf_add(a: Float, b: Float) -> Float:
    """Return ``a + b`` where any infinite operand yields :data:`INF`."""
    if a == INF or b == INF:
        return INF
    return a + b


def is_finite(x: Float) -> bool:
    """Return ``True`` if ``x`` is a reachable (finite) distance."""
    return x < INF


def to_number(x: Any) -> Number:
    """Return ``x`` as a Python ``int`` (integral input) or ``float``.

    Raises:
        ConfigError: If ``x`` is not a real number or is NaN.
    """
    if isinstance(x, numbers.Integral):
        return int(x)
    if not isinstance(x, numbers.Real):
        raise ConfigError(f"weights must be numeric, got {x!r}")
    x = float(x)
    if math.isnan(x):
        raise ConfigError("weights contain NaN entries")
    return x


def _fits_float(x: Number) -> bool:
    if not isinstance(x, int):
        return True
    try:
        return float(x) == x
    except OverflowError:
        return False


def pack_weights(values: List[Number], shape: Tuple[int, ...]) -> npt.NDArray[Any]:
    """Pack Python numbers into a float64 array, or ``object`` if float64 would round."""
    if all(_fits_float(x) for x in values):
        return np.array(values, dtype=np.float64).reshape(shape)
    arr = np.empty(len(values), dtype=object)
    arr[:] = values
    return arr.reshape(shape)


def flatten_weights(data: Any) -> Tuple[List[Number], Tuple[int, ...]]:
    """Return the entries of ``data`` as exact Python numbers plus its shape.

    Raises:
        ConfigError: If ``data`` is ragged, not numeric or contains NaN.
    """
    try:
        obj = np.array(data, dtype=object)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"weights must be numeric: {exc}") from exc
    return [to_number(x) for x in obj.ravel().tolist()], obj.shape


def weight_array(data: Any) -> npt.NDArray[Any]:
    """Copy ``data`` into a new float64 array, or an exact ``object`` array."""
    values, shape = flatten_weights(data)
    return pack_weights(values, shape)


def needs_exact(values: Iterable[Any], terms: int) -> bool:
    """Return ``True`` if a sum of ``terms`` integer ``values`` may exceed float64's exact range."""
    peak = max((abs(x) for x in values if isinstance(x, int)), default=0)
    return peak * max(terms, 1) > FLOAT_EXACT_MAX


class DistanceMatrix:
    """Read-only ``n x n`` edge-weight lookup indexed as ``dm[u, v]``.

    A matrix is either dense (built from a numpy array or nested sequence) or
    sparse (a mapping of ``(u, v)`` pairs over a constant fill value). The
    unit matrix used when the caller supplies no weights is the sparse form
    with an empty mapping and a fill of ``1``.

    Entries are only meaningful where the corresponding edge exists. Lookups
    return Python numbers; integral entries come back as exact ``int``.

    Raises:
        ConfigError: If dense input is not 2-D, not numeric or contains NaN.
    """

    __slots__ = ("_rows", "_array", "_map", "_fill", "_shape")

    def __init__(self, data: Any) -> None:
        if isinstance(data, DistanceMatrix):
            self._rows = data._rows
            self._array = data._array
            self._map = data._map
            self._fill = data._fill
            self._shape = data._shape
            return
        values, shape = flatten_weights(data)
        if len(shape) != 2:
            raise ConfigError(f"distance matrix must be 2-D, got {len(shape)} dimension(s)")
        rows, cols = shape
        arr = pack_weights(values, shape)
        arr.setflags(write=False)
        self._array: Optional[npt.NDArray[Any]] = arr
        self._rows: Optional[List[List[Number]]] = [values[r * cols:(r + 1) * cols] for r in range(rows)]
        self._map: Optional[Dict[Tuple[int, int], Number]] = None
        self._fill: Number = 1.0
        self._shape: Tuple[int, int] = (int(rows), int(cols))

    @classmethod
    def from_mapping(
        cls,
        n: int,
        weights: Mapping[Tuple[int, int], Float],
        fill: Float = 1.0,
    ) -> "DistanceMatrix":
        """Create a sparse ``n x n`` matrix from ``{(u, v): w}`` entries.

        Args:
            n: Matrix dimension.
            weights: Explicit entries.
            fill: Value returned for every pair absent from ``weights``.
        """
        dm = cls.__new__(cls)
        dm._rows = None
        dm._array = None
        dm._map = {(int(u), int(v)): to_number(w) for (u, v), w in weights.items()}
        dm._fill = to_number(fill)
        dm._shape = (n, n)
        return dm

    @classmethod
    def unit(cls, n: int) -> "DistanceMatrix":
        """Return the ``n x n`` matrix with weight ``1`` everywhere."""
        return cls.from_mapping(n, {}, fill=1.0)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    def __getitem__(self, key: Tuple[int, int]) -> Number:
        u, v = key
        if self._rows is not None:
            return self._rows[u][v]
        assert self._map is not None
        return self._map.get((u, v), self._fill)

    def check_shape(self, n: int) -> None:
        """Raise :class:`ConfigError` if the matrix is smaller than ``n x n``."""
        rows, cols = self._shape
        if rows < n or cols < n:
            raise ConfigError(f"distance matrix of shape {rows}x{cols} is smaller than {n}x{n}")

    def as_array(self, n: int) -> npt.NDArray[Any]:
        """Return the leading ``n x n`` block, float64 unless an integer needs ``object``."""
        self.check_shape(n)
        if self._array is not None:
            return self._array[:n, :n]
        return pack_weights([self[u, v] for u in range(n) for v in range(n)], (n, n))

    def __repr__(self) -> str:
        kind = "dense" if self._rows is not None else "sparse"
        return f"DistanceMatrix({kind}, shape={self._shape[0]}x{self._shape[1]})"


def default_weights(graph: Any) -> DistanceMatrix:
    """Return the graph's own weights if it exposes any, else unit weights."""
    weights = getattr(graph, "weights", None)
    if callable(weights):
        dm = weights()
        if dm is not None:
            return dm if isinstance(dm, DistanceMatrix) else DistanceMatrix(dm)
    return DistanceMatrix.unit(graph.n)


def as_distance_matrix(distmx: Any, graph: Any) -> DistanceMatrix:
    """Coerce ``distmx`` (or the graph default when ``None``) to a matrix."""
    if distmx is None:
        return default_weights(graph)
    if isinstance(distmx, DistanceMatrix):
        return distmx
    return DistanceMatrix(distmx)


__all__ = [
    "FLOAT_EXACT_MAX",
    "INF",
    "DistanceMatrix",
    "as_distance_matrix",
    "default_weights",
    "flatten_weights",
    "inf_add",
    "is_finite",
    "needs_exact",
    "pack_weights",
    "to_number",
    "weight_array",
]
