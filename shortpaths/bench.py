"""Micro-benchmark comparing Floyd-Warshall backends with SPFA.

Each trial builds a random graph with negative edges (but no negative
cycle), runs Floyd-Warshall with both backends and SPFA from every source,
and checks all of them against each other.

Example:
```bash
python -m shortpaths.bench --trials 3 --sizes 20,80 60,300 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np

from .floyd_warshall import FloydWarshallSolver
from .generators import random_graph
from .solver import Algorithm, SolverConfig
from .spfa import SPFASolver


@dataclass
class BenchResult:
    """Timings of a single benchmarking run."""

    n: int
    m: int
    fw_python_ms: float
    fw_numpy_ms: float
    spfa_all_ms: float
    spfa_enqueues: int
    max_abs_err: float


def _max_abs_err(a: np.ndarray, b: np.ndarray) -> float:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    both_inf = np.isinf(a) & np.isinf(b)
    if not np.array_equal(np.isinf(a), np.isinf(b)):
        return float("inf")
    diff = np.abs(np.where(both_inf, 0.0, a) - np.where(both_inf, 0.0, b))
    return float(diff.max()) if diff.size else 0.0


def run_once(n: int, m: int, seed: int = 0) -> BenchResult:
    """Run all engines once on a random graph and compare their distances.

    Args:
        n: Number of vertices.
        m: Number of edges.
        seed: Seed for the random graph generator.
    """
    G = random_graph(n, m, seed=seed, negative=True)
    dm = G.weights()

    t0 = time.perf_counter()
    fw_py = FloydWarshallSolver(G, dm, config=SolverConfig(backend="python")).solve()
    t1 = time.perf_counter()
    fw_np = FloydWarshallSolver(G, dm, config=SolverConfig(backend="numpy")).solve()
    t2 = time.perf_counter()

    rows = []
    enqueues = 0
    spfa_cfg = SolverConfig(algorithm=Algorithm.SPFA)
    for s in range(n):
        solver = SPFASolver(G, s, dm, config=spfa_cfg)
        rows.append(solver.solve().dists)
        enqueues += solver.summary()["enqueues"]
    t3 = time.perf_counter()

    spfa_all = np.vstack(rows)
    err = max(_max_abs_err(fw_py.dists, fw_np.dists), _max_abs_err(fw_py.dists, spfa_all))
    return BenchResult(
        n=n,
        m=m,
        fw_python_ms=(t1 - t0) * 1000.0,
        fw_numpy_ms=(t2 - t1) * 1000.0,
        spfa_all_ms=(t3 - t2) * 1000.0,
        spfa_enqueues=enqueues,
        max_abs_err=err,
    )


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,30", "30,120"],
        help="Size pairs as n,m (e.g. 50,200). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:  # pragma: no cover - argparse handles
            parser.error(f"invalid size specification '{spec}'")

    results: Dict[Tuple[int, int], List[BenchResult]] = {}
    for n, m in sizes:
        results[(n, m)] = [run_once(n, m, seed=args.seed_base + t) for t in range(args.trials)]

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                ["n", "m", "trial", "fw_python_ms", "fw_numpy_ms", "spfa_all_ms", "spfa_enqueues", "max_abs_err"]
            )
            for runs in results.values():
                for trial, r in enumerate(runs):
                    writer.writerow(
                        [
                            r.n,
                            r.m,
                            trial,
                            f"{r.fw_python_ms:.6f}",
                            f"{r.fw_numpy_ms:.6f}",
                            f"{r.spfa_all_ms:.6f}",
                            r.spfa_enqueues,
                            r.max_abs_err,
                        ]
                    )

    print(
        f"{'n':>6} {'m':>7} {'fw_py_med':>10} {'fw_np_med':>10}"
        f" {'spfa_med':>10} {'enqueues':>9} {'max_err':>8}"
    )
    for (n, m), runs in results.items():
        print(
            f"{n:6d} {m:7d}"
            f" {statistics.median(r.fw_python_ms for r in runs):10.2f}"
            f" {statistics.median(r.fw_numpy_ms for r in runs):10.2f}"
            f" {statistics.median(r.spfa_all_ms for r in runs):10.2f}"
            f" {int(statistics.median(r.spfa_enqueues for r in runs)):9d}"
            f" {max(r.max_abs_err for r in runs):8.2g}"
        )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
