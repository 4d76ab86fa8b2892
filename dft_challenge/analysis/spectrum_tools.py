"""Helpers to inspect and print a :class:`~dft_challenge.models.spectrum.Spectrum`.

Functions
---------
bin_frequencies
    Signed frequency of each bin (standard DFT ordering, negative frequencies in the upper half).
dominant_bins
    Indices of the largest-magnitude bins.
spectrum_table
    Tabular view (pandas) with real, imaginary, magnitude and frequency columns.
format_pairs
    One ``"re im"`` line per bin, in bin order.
"""

from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from dft_challenge.models.spectrum import Spectrum


def bin_frequencies(n: int, *, sample_rate: float = 1.0) -> np.ndarray:
    """Signed frequency of bins ``0..n-1``.

    Bin ``k`` maps to ``k * fs / n`` for ``k <= (n-1)//2`` and to ``(k - n) * fs / n`` above
    that, so the upper half holds the negative-frequency images.

    Examples
    --------
    >>> bin_frequencies(4).tolist()
    [0.0, 0.25, -0.5, -0.25]
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    k = np.arange(n, dtype=np.float64)
    signed = np.where(k <= (n - 1) // 2, k, k - float(n))
    if n == 0:
        return signed
    return signed * (float(sample_rate) / float(n))


def dominant_bins(spectrum: Spectrum, count: int = 2) -> np.ndarray:
    """Return the ``count`` bins with the largest magnitude, sorted by bin index.

    Ties are broken by the lower bin index (stable sort). NaN magnitudes sort last.
    """
    count = int(count)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    mag = spectrum.magnitude
    key = np.where(np.isnan(mag), -np.inf, mag)
    order = np.argsort(-key, kind="stable")[:count]
    return np.sort(spectrum.bins[order])


def spectrum_table(spectrum: Spectrum, *, sample_rate: float = 1.0) -> pd.DataFrame:
    """Build a per-bin table with columns ``k, re, im, magnitude, freq``."""
    return pd.DataFrame(
        {
            "k": spectrum.bins.astype(int),
            "re": spectrum.real.astype(np.float64),
            "im": spectrum.imag.astype(np.float64),
            "magnitude": spectrum.magnitude.astype(np.float64),
            "freq": bin_frequencies(spectrum.n, sample_rate=sample_rate),
        }
    )


def format_pairs(spectrum: Spectrum, precision: int = 6) -> List[str]:
    """Format the spectrum as ``"<re> <im>"`` lines, one per bin (k = 0..N-1).

    Examples
    --------
    >>> import numpy as np
    >>> s = Spectrum(bins=np.arange(2), coeff=np.array([1+0j, 0.5-2j]))
    >>> format_pairs(s, precision=3)
    ['1 0', '0.5 -2']
    """
    p = int(precision)
    return [f"{re:.{p}g} {im:.{p}g}" for re, im in spectrum.as_pairs()]
