"""Smoke tests for the benchmark harness."""

import csv

import numpy as np

from shortpaths.bench import _max_abs_err, main, run_once


def test_run_once_agrees():
    r = run_once(12, 40, seed=3)

    assert r.n == 12 and r.m == 40
    assert r.max_abs_err == 0.0
    assert r.spfa_enqueues > 0
    assert min(r.fw_python_ms, r.fw_numpy_ms, r.spfa_all_ms) >= 0.0


def test_max_abs_err():
    a = np.array([[0.0, np.inf], [1.0, 0.0]])

    assert _max_abs_err(a, a) == 0.0
    assert _max_abs_err(a, np.array([[0.0, np.inf], [1.5, 0.0]])) == 0.5
    assert _max_abs_err(a, np.zeros((2, 2))) == np.inf


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    main(["--trials", "2", "--sizes", "6,12", "--out-csv", str(out)])

    rows = list(csv.reader(out.read_text().splitlines()))
    assert rows[0][:3] == ["n", "m", "trial"]
    assert len(rows) == 3
    assert "fw_py_med" in capsys.readouterr().out
