"""Graph input/output helpers.

Supported formats are CSV (``u,v,w`` rows, ``#`` comments), JSON Lines
(``{"u": .., "v": .., "w": ..}`` objects) and Matrix Market coordinate files
(1-based ids). Weights may be negative.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import Graph, WeightedEdge
from .weights import Number

EdgeList = List[WeightedEdge]


def _parse_weight(text: str) -> Number:
    """Parse an integer weight exactly, anything else as a float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def _parse_row(parts: List[str], lineno: int) -> WeightedEdge:
    try:
        u = int(parts[0].strip())
        v = int(parts[1].strip())
        w = _parse_weight(parts[2].strip()) if len(parts) > 2 and parts[2].strip() else 1.0
    except ValueError as exc:
        raise GraphFormatError(f"line {lineno}: {exc}") from exc
    if u < 0 or v < 0:
        raise GraphFormatError(f"line {lineno}: negative vertex id")
    return u, v, w


def _read_csv(path: Path) -> Tuple[int, EdgeList]:
    """Read ``u,v[,w]`` rows; tabs are accepted as separators."""
    edges: EdgeList = []
    max_id = -1
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) < 2:
                raise GraphFormatError(f"line {lineno}: expected at least two columns")
            u, v, w = _parse_row(parts, lineno)
            edges.append((u, v, w))
            max_id = max(max_id, u, v)
    if max_id < 0:
        raise GraphFormatError("no edges parsed from file")
    return max_id + 1, edges


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# u,v,w\n")
        for u, v, w in G.weighted_edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> Tuple[int, EdgeList]:
    edges: EdgeList = []
    max_id = -1
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                u, v = int(obj["u"]), int(obj["v"])
                w = obj.get("w", 1.0)
                if isinstance(w, bool) or not isinstance(w, int):
                    w = float(w)
            except (ValueError, KeyError, TypeError, AttributeError) as exc:
                raise GraphFormatError(f"line {lineno}: {exc!r}") from exc
            if u < 0 or v < 0:
                raise GraphFormatError(f"line {lineno}: negative vertex id")
            edges.append((u, v, w))
            max_id = max(max_id, u, v)
    if max_id < 0:
        raise GraphFormatError("no edges parsed from file")
    return max_id + 1, edges


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.weighted_edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


def _read_mtx(path: Path) -> Tuple[int, EdgeList]:
    """Read a Matrix Market coordinate file, converting ids to 0-based."""
    edges: EdgeList = []
    dims: Optional[Tuple[int, int]] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line or line.startswith("%"):
                continue
            parts = line.split()
            if dims is None:
                try:
                    dims = (int(parts[0]), int(parts[1]))
                except (ValueError, IndexError) as exc:
                    raise GraphFormatError(f"line {lineno}: bad size line") from exc
                continue
            if len(parts) < 2:
                raise GraphFormatError(f"line {lineno}: expected at least two columns")
            u, v, w = _parse_row(parts, lineno)
            if u == 0 or v == 0:
                raise GraphFormatError(f"line {lineno}: Matrix Market ids are 1-based")
            edges.append((u - 1, v - 1, w))
    if dims is None:
        raise GraphFormatError("missing Matrix Market size line")
    return max(dims), edges


def _write_mtx(path: Path, G: Graph) -> None:
    edges = list(G.weighted_edges())
    with path.open("w", encoding="utf-8") as fh:
        fh.write("%%MatrixMarket matrix coordinate real general\n")
        fh.write(f"{G.n} {G.n} {len(edges)}\n")
        for u, v, w in edges:
            fh.write(f"{u + 1} {v + 1} {w}\n")


_FMT_READERS: Dict[str, Callable[[Path], Tuple[int, EdgeList]]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "mtx": _read_mtx,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "mtx": _write_mtx,
}

FORMATS = tuple(_FMT_READERS)


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    if ext == ".mtx":
        return "mtx"
    return None


def read_graph(
    path: str | Path,
    fmt: Optional[str] = None,
    directed: bool = True,
    n: Optional[int] = None,
) -> Graph:
    """Read a weighted graph from ``path``.

    Args:
        path: Graph file.
        fmt: ``"csv"``, ``"jsonl"`` or ``"mtx"``; detected from the
            extension when omitted.
        directed: Build a directed graph.
        n: Vertex count, when larger than the highest id in the file.

    Raises:
        GraphFormatError: If the format is unknown or the file is malformed.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown graph format")
    n_file, edges = _FMT_READERS[fmt](p)
    if n is not None and n < n_file:
        raise GraphFormatError(f"file references vertex {n_file - 1} but n={n}")
    return Graph.from_edges(n or n_file, edges, directed=directed)


def write_graph(G: Graph, path: str | Path, fmt: Optional[str] = None) -> None:
    """Write ``G`` to ``path`` in ``fmt`` (detected from the extension).

    Raises:
        GraphFormatError: If the format is unknown.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError("unknown graph format")
    _FMT_WRITERS[fmt](p, G)


__all__ = ["FORMATS", "read_graph", "write_graph"]
