"""Export utilities for shortest-path results."""

from __future__ import annotations

import csv
import io
import json
from typing import Any, Dict, List, Optional

from .result import AllPairsResult, SingleSourceResult
from .weights import Float, is_finite


def _num(d: Float) -> Optional[Float]:
    return d if is_finite(d) else None


def shortest_path_tree(result: SingleSourceResult) -> List[Dict[str, Any]]:
    """Return the predecessor tree as ``{"source", "target"}`` edge records."""
    edges: List[Dict[str, Any]] = []
    for v in range(result.n):
        p = result.parent(v)
        if p is not None:
            edges.append({"source": p, "target": v})
    return edges


def export_tree_json(result: SingleSourceResult) -> str:
    """Return a JSON document with per-vertex distances and tree edges.

    Unreachable vertices carry ``"distance": null``.
    """
    data = {
        "source": result.source,
        "nodes": [{"id": v, "distance": _num(result.distance(v))} for v in range(result.n)],
        "edges": shortest_path_tree(result),
    }
    return json.dumps(data)


def export_tree_graphml(result: SingleSourceResult) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="double"/>')
    lines.append('  <graph id="T" edgedefault="directed">')
    for v in range(result.n):
        d = result.distance(v)
        if is_finite(d):
            lines.append(f'    <node id="n{v}"><data key="d">{d}</data></node>')
        else:
            lines.append(f'    <node id="n{v}"/>')
    for edge in shortest_path_tree(result):
        lines.append(f'    <edge source="n{edge["source"]}" target="n{edge["target"]}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def export_distances_csv(result: AllPairsResult) -> str:
    """Return the all-pairs distance table as ``u,v,distance`` CSV rows.

    Unreachable pairs are omitted.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["u", "v", "distance"])
    for u in range(result.n):
        for v in range(result.n):
            d = result.distance(u, v)
            if is_finite(d):
                writer.writerow([u, v, d])
    return buf.getvalue()


__all__ = [
    "export_distances_csv",
    "export_tree_graphml",
    "export_tree_json",
    "shortest_path_tree",
]
