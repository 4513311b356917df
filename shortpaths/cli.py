"""Command-line interface for running the shortest-path engines."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .exceptions import (
    ConfigError,
    InputError,
    NegativeCycleError,
    NotSupportedError,
    ShortestPathError,
)
from .export import export_distances_csv, export_tree_graphml, export_tree_json
from .floyd_warshall import FloydWarshallSolver
from .generators import random_graph
from .graph import Graph
from .io import FORMATS, read_graph
from .logger import StdLogger
from .result import AllPairsResult, SingleSourceResult
from .solver import BACKENDS, Algorithm, SolverConfig
from .spfa import SPFASolver, has_negative_cycle
from .weights import is_finite

EXAMPLE_CSV = """# u,v,w
0,1,4.0
0,2,1.0
2,1,-2.0
1,3,1.0
"""

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_NEGATIVE_CYCLE = 65
EXIT_INTERNAL = 70


def _build_graph_from_file(path: str, fmt: Optional[str], directed: bool) -> Graph:
    if not Path(path).exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt, directed=directed)


def _finite_or_none(values: Sequence[float]) -> List[Optional[float]]:
    return [v if is_finite(v) else None for v in values]


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``shortpaths`` command-line tool."""
    examples = (
        "Examples:\n"
        "  shortpaths --edges graph.csv\n"
        "  shortpaths --edges graph.csv --algorithm spfa --source 0 --target 3\n"
        "  shortpaths --random --n 50 --m 200 --negative --backend numpy\n"
        "  shortpaths --edges graph.csv --check-negative-cycle\n"
    )
    p = argparse.ArgumentParser(
        prog="shortpaths",
        description="All-pairs (Floyd-Warshall) and single-source (SPFA) shortest paths",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )

    p.add_argument("--format", choices=list(FORMATS), default=None, help="Edge file format")
    p.add_argument("--undirected", action="store_true", help="Treat edges as undirected")
    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=None, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed for random graph generation")
    p.add_argument(
        "--negative",
        action="store_true",
        help="Random mode: allow negative edges (never negative cycles)",
    )

    p.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.FLOYD_WARSHALL.value,
        help="Engine to run; spfa requires --source",
    )
    p.add_argument("--backend", choices=list(BACKENDS), default="python")
    p.add_argument("--source", type=int, default=None, help="Source vertex id (spfa)")
    p.add_argument("--target", type=int, default=None, help="Target vertex id for path output")
    p.add_argument(
        "--check-negative-cycle",
        action="store_true",
        help="Only report whether a negative cycle is reachable from vertex 0",
    )

    p.add_argument("--export-json", type=str, default=None, help="Write SPFA shortest-path tree as JSON")
    p.add_argument("--export-graphml", type=str, default=None, help="Write SPFA shortest-path tree as GraphML")
    p.add_argument("--export-csv", type=str, default=None, help="Write all-pairs distances as CSV")
    p.add_argument("--metrics-out", type=str, default=None, help="Write run metrics to this JSON file")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    try:
        directed = not args.undirected
        if args.random:
            G = random_graph(
                args.n,
                args.m,
                seed=args.seed,
                negative=args.negative,
                directed=directed,
            )
        else:
            G = _build_graph_from_file(args.edges, args.format, directed)

        stream = sys.stdout if args.log_json else sys.stderr
        level = "info" if args.log_json and args.log_level == "warning" else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

        if args.check_negative_cycle:
            found = has_negative_cycle(G)
            logger.info("negative_cycle_check", n=G.n, found=found)
            print(json.dumps({"n": G.n, "negative_cycle": found}))
            return EXIT_OK

        cfg = SolverConfig(algorithm=Algorithm.parse(args.algorithm), backend=args.backend)
        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: n={G.n} m={G.ne} algorithm={cfg.algorithm.value} "
                f"backend={cfg.backend} source={args.source}\n"
            )

        out: dict[str, Any] = {"algorithm": cfg.algorithm.value, "n": G.n}
        solver: Any
        if cfg.algorithm is Algorithm.SPFA:
            if args.source is None:
                raise ConfigError("--algorithm spfa requires --source")
            solver = SPFASolver(G, args.source, config=cfg, logger=logger)
            res: Any = solver.solve()
            assert isinstance(res, SingleSourceResult)
            out["source"] = res.source
            out["distances"] = _finite_or_none(res.dists.tolist())
            if args.target is not None:
                out["target"] = args.target
                out["path"] = res.path(args.target)
            if args.export_json:
                Path(args.export_json).write_text(export_tree_json(res), encoding="utf-8")
            if args.export_graphml:
                Path(args.export_graphml).write_text(export_tree_graphml(res), encoding="utf-8")
        else:
            if args.export_json or args.export_graphml:
                raise ConfigError("tree export needs a single-source run (--algorithm spfa)")
            solver = FloydWarshallSolver(G, config=cfg, logger=logger)
            res = solver.solve()
            assert isinstance(res, AllPairsResult)
            out["distances"] = [_finite_or_none(row) for row in res.dists.tolist()]
            if args.target is not None:
                if args.source is None:
                    raise ConfigError("--target with floyd-warshall also needs --source")
                out["source"] = args.source
                out["target"] = args.target
                out["path"] = res.path(args.source, args.target)
            if args.export_csv:
                Path(args.export_csv).write_text(export_distances_csv(res), encoding="utf-8")

        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics()), fh)

        logger.info("run", n=G.n, m=G.ne, algorithm=cfg.algorithm.value, **solver.summary())
        if not args.log_json:
            print(json.dumps(out))
        return EXIT_OK

    except NegativeCycleError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_NEGATIVE_CYCLE
    except (InputError, ConfigError, NotSupportedError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except ShortestPathError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
