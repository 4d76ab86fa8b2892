"""Data-parallel evaluation of the direct DFT over the output bin range.

Each output bin depends only on the (read-only) input sequence, so the range ``0..N-1`` is
split into contiguous blocks, one task per block. Workers return their block; the caller
writes each block into its own slice of the output after all tasks have finished.
No locks are needed since the slices are disjoint.
"""

from __future__ import annotations

import os
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from dft_challenge.analysis.dft import ArrayLike, as_samples, dft_bins, get_kernel
from dft_challenge.models.spectrum import Spectrum

EXECUTORS = ("thread", "process")


def partition_bins(n: int, n_parts: int) -> List[Tuple[int, int]]:
    """Split ``range(n)`` into at most ``n_parts`` contiguous, non-empty ``[start, stop)`` blocks.

    Block sizes differ by at most one; the first ``n % n_parts`` blocks take the extra bin.

    Examples
    --------
    >>> partition_bins(10, 3)
    [(0, 4), (4, 7), (7, 10)]
    >>> partition_bins(2, 4)
    [(0, 1), (1, 2)]
    >>> partition_bins(0, 4)
    []
    """
    n = int(n)
    n_parts = int(n_parts)
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n_parts <= 0:
        raise ValueError(f"n_parts must be > 0, got {n_parts}")
    if n == 0:
        return []

    n_parts = min(n_parts, n)
    base, extra = divmod(n, n_parts)
    out: List[Tuple[int, int]] = []
    start = 0
    for i in range(n_parts):
        stop = start + base + (1 if i < extra else 0)
        out.append((start, stop))
        start = stop
    return out


def _make_executor(executor: str, n_workers: int) -> Executor:
    if executor == "thread":
        return ThreadPoolExecutor(max_workers=n_workers)
    if executor == "process":
        return ProcessPoolExecutor(max_workers=n_workers)
    raise ValueError(f"executor must be one of {EXECUTORS}, got {executor!r}")


def parallel_transform(
    x: ArrayLike,
    *,
    method: str = "exp",
    n_workers: Optional[int] = None,
    executor: str = "thread",
) -> Spectrum:
    """Evaluate the DFT with a fixed-size worker pool.

    Parameters
    ----------
    x:
        Input samples (shared, read-only).
    method:
        Kernel name (see :data:`dft_challenge.analysis.dft.DFT_METHODS`).
    n_workers:
        Pool size. ``None`` uses ``os.cpu_count()``. ``1`` runs serially without a pool.
    executor:
        ``"thread"`` (ThreadPoolExecutor) or ``"process"`` (ProcessPoolExecutor). The
        pure-Python kernels hold the GIL, so only the process pool gives real speed-up for them.

    Returns
    -------
    Spectrum
        Identical to the serial result for the same ``method``.

    Notes
    -----
    There is no cancellation and no partial result: an exception raised in any worker is
    re-raised here once the pool has shut down.
    """
    xs = as_samples(x)
    get_kernel(method)
    if executor not in EXECUTORS:
        raise ValueError(f"executor must be one of {EXECUTORS}, got {executor!r}")

    if n_workers is None:
        n_workers = os.cpu_count() or 1
    n_workers = int(n_workers)
    if n_workers <= 0:
        raise ValueError(f"n_workers must be > 0, got {n_workers}")

    N = int(xs.size)
    coeff = np.empty(N, dtype=np.complex128)
    parts = partition_bins(N, n_workers)

    if n_workers == 1 or len(parts) <= 1:
        coeff[:] = dft_bins(xs, 0, N, method=method)
        return Spectrum(bins=np.arange(N, dtype=int), coeff=coeff, method=method)

    with _make_executor(executor, len(parts)) as pool:
        futures = [pool.submit(dft_bins, xs, start, stop, method) for start, stop in parts]
        blocks = [f.result() for f in futures]

    for (start, stop), block in zip(parts, blocks):
        coeff[start:stop] = block

    return Spectrum(bins=np.arange(N, dtype=int), coeff=coeff, method=method)
