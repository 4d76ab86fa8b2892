"""Timing harness for the direct DFT kernels.

Runs each configured kernel on the same input, keeps the best wall-clock time over
``repeat`` runs and reports the speed-up relative to a baseline kernel (the plain
``sin``/``cos`` loop by default).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from dft_challenge.analysis.dft import ArrayLike, DFT_METHODS, as_samples, transform


@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Benchmark configuration.

    methods:
      Kernel names to time, in report order.
    repeat:
      Number of runs per kernel; the minimum time is reported.
    n_workers:
      Worker counts to time for every kernel. ``1`` is the serial path.
    executor:
      Pool kind used when a worker count is > 1.
    baseline:
      Kernel used as the speed-up reference (serial run). Must be in ``methods``.
    """
    methods: Tuple[str, ...] = ("sincos", "exp", "cis", "numpy")
    repeat: int = 1
    n_workers: Tuple[int, ...] = (1,)
    executor: str = "thread"
    baseline: str = "sincos"


def time_call(fn, *args, repeat: int = 1, **kwargs) -> Tuple[float, object]:
    """Return ``(best_seconds, last_result)`` over ``repeat`` calls of ``fn``."""
    repeat = int(repeat)
    if repeat <= 0:
        raise ValueError(f"repeat must be > 0, got {repeat}")
    best = float("inf")
    result = None
    for _ in range(repeat):
        t0 = time.perf_counter()
        result = fn(*args, **kwargs)
        best = min(best, time.perf_counter() - t0)
    return best, result


def benchmark_methods(x: ArrayLike, config: Optional[BenchmarkConfig] = None) -> pd.DataFrame:
    """Time each kernel on ``x``.

    Returns
    -------
    pandas.DataFrame
        Columns ``method, workers, seconds, speedup``, sorted fastest first. ``speedup`` is
        ``baseline_seconds / seconds``.
    """
    cfg = config or BenchmarkConfig()
    for m in cfg.methods:
        if m not in DFT_METHODS:
            raise ValueError(f"unknown DFT method {m!r}; expected one of {sorted(DFT_METHODS)}")
    if cfg.baseline not in cfg.methods:
        raise ValueError(f"baseline {cfg.baseline!r} must be one of the benchmarked methods {cfg.methods}")

    xs = as_samples(x)

    rows = []
    for m in cfg.methods:
        for w in cfg.n_workers:
            sec, _ = time_call(transform, xs, method=m, n_workers=int(w), executor=cfg.executor, repeat=cfg.repeat)
            rows.append({"method": m, "workers": int(w), "seconds": sec})

    df = pd.DataFrame(rows, columns=["method", "workers", "seconds"])

    base = df.loc[(df["method"] == cfg.baseline) & (df["workers"] == 1), "seconds"]
    if base.empty:
        base_sec, _ = time_call(transform, xs, method=cfg.baseline, repeat=cfg.repeat)
    else:
        base_sec = float(base.iloc[0])

    with np.errstate(divide="ignore", invalid="ignore"):
        df["speedup"] = base_sec / df["seconds"].to_numpy(dtype=np.float64)

    return df.sort_values("seconds", kind="stable").reset_index(drop=True)
