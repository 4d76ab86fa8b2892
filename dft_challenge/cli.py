"""Command-line harness: load (or synthesize) samples, run the direct DFT, print the bins.

Examples
--------
Synthetic 2000-point sine, default kernel::

    python -m dft_challenge --synthetic 2000

Samples from a file, 4 worker processes, sin/cos kernel::

    python -m dft_challenge data.csv --method sincos --workers 4 --executor process

Compare all kernels instead of printing the bins::

    python -m dft_challenge --synthetic 500 --benchmark
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dft_challenge.analysis.benchmark import BenchmarkConfig, benchmark_methods, time_call
from dft_challenge.analysis.dft import DFT_METHODS, transform
from dft_challenge.analysis.spectrum_tools import dominant_bins, format_pairs
from dft_challenge.ingest.readers_text import SampleTextReader, SampleTextReaderConfig
from dft_challenge.ingest.synthetic import sampled_sine
from dft_challenge.models.samples import SampleSeries
from dft_challenge.validation.checks import validate_samples


def _load(ns) -> SampleSeries:
    if ns.file is not None:
        reader = SampleTextReader(SampleTextReaderConfig(max_samples=ns.max_samples))
        return reader.read(ns.file)
    n = ns.synthetic if ns.synthetic is not None else 2000
    if ns.max_samples is not None:
        n = min(n, ns.max_samples)
    return sampled_sine(n, cycles=ns.cycles)


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m dft_challenge",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Compute the direct (O(N^2)) discrete Fourier transform of a sample sequence.

            Samples come from a text file (one real value per whitespace/newline/comma
            separated token) or from a synthetic sine sampled on linspace(0, 1, N).
            Output is one "re im" pair per line, in bin order k = 0..N-1.
            """
        ),
    )
    p.add_argument("file", nargs="?", default=None, help="Sample file (omit to use a synthetic sine)")
    p.add_argument("--synthetic", type=int, default=None, help="Number of synthetic samples (default 2000)")
    p.add_argument("--cycles", type=float, default=1.0, help="Synthetic sine cycles over the window")
    p.add_argument("--max-samples", type=int, default=None, help="Use only the first N samples")
    p.add_argument("--method", choices=sorted(DFT_METHODS), default="exp", help="DFT kernel")
    p.add_argument("--workers", type=int, default=1, help="Worker count for the bin loop (1 = serial)")
    p.add_argument("--executor", choices=("thread", "process"), default="thread", help="Worker pool kind")
    p.add_argument("--precision", type=int, default=6, help="Significant digits in printed values")
    p.add_argument("--no-bins", action="store_true", help="Do not print the bins (timing and summary only)")
    p.add_argument("--benchmark", action="store_true", help="Time every kernel and print a comparison table")
    p.add_argument("--repeat", type=int, default=1, help="Benchmark runs per kernel (best time is kept)")

    ns = p.parse_args(list(argv) if argv is not None else None)

    if ns.file is not None and ns.synthetic is not None:
        p.error("give either a sample file or --synthetic, not both")
    if ns.workers <= 0:
        p.error(f"--workers must be > 0, got {ns.workers}")
    if ns.repeat <= 0:
        p.error(f"--repeat must be > 0, got {ns.repeat}")
    if ns.precision <= 0:
        p.error(f"--precision must be > 0, got {ns.precision}")

    try:
        series = _load(ns)
    except (OSError, ValueError) as e:
        print(f"[error] {type(e).__name__}: {e}", file=sys.stderr)
        return 2

    rep = validate_samples(series.values)
    if not rep.ok:
        for e in rep.errors:
            print(f"[error] {e}", file=sys.stderr)
        return 2
    for w in (*series.warnings, *rep.warnings):
        print(f"[warn] {w}")

    N = series.n_samples
    print(f"[info] Read in {N} samples from {series.source}")

    if ns.benchmark:
        cfg = BenchmarkConfig(
            repeat=ns.repeat,
            n_workers=(1,) if ns.workers == 1 else (1, ns.workers),
            executor=ns.executor,
        )
        table = benchmark_methods(series, cfg)
        print(table.to_string(index=False, float_format=lambda v: f"{v:.4g}"))
        return 0

    print("[info] Calculating DFT")
    dt, spectrum = time_call(transform, series, method=ns.method, n_workers=ns.workers, executor=ns.executor)
    print(f"[info] {N}-point DFT took {dt:.4g} seconds.")

    if N:
        top = ", ".join(str(int(k)) for k in dominant_bins(spectrum, 2))
        print(f"[info] dominant bins: {top}")

    if not ns.no_bins:
        for line in format_pairs(spectrum, precision=ns.precision):
            print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
