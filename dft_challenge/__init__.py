"""DFT Challenge -- the discrete Fourier transform written by hand, as in the textbook.

This package provides tools for:
- Computing the DFT by direct O(N^2) summation (no FFT), with several equivalent kernels
  (complex exponential, separate sin/cos accumulation, exact-phase "cis", numpy matrix form)
- Evaluating the outer frequency loop on a thread or process pool
- Reading sample sequences from text files, or generating a sampled sine
- Timing the kernels against each other
- Printing the spectrum as (real, imaginary) pairs in bin order

Key principles:
- The transform is a pure function: input is never modified, output is always fresh
- Division by N in the exponent is always floating point
- No validation inside the transform: NaN/Inf propagate per IEEE-754

Main subpackages:
- analysis: DFT kernels, parallel evaluation, spectrum helpers, benchmark
- ingest: Sample file reader and synthetic signals
- models: Data models (SampleSeries, Spectrum, ComplexPair)
- validation: Input checks and spectrum agreement checks
"""

from dft_challenge.analysis.dft import transform

__all__ = ["transform"]
