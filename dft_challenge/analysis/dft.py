r"""Direct (O(N^2)) discrete Fourier transform.

Every kernel evaluates the textbook summation

.. math::

    H[k] = \sum_{n=0}^{N-1} x[n] \, e^{-i 2\pi k n / N}, \qquad k = 0 \ldots N-1

bin by bin. There is no FFT here: the direct summation is the reference baseline.

Kernels
-------
exp
    Complex exponential per term (``cmath.exp``).
sincos
    Real and imaginary parts accumulated separately from ``cos`` and ``sin``.
cis
    Like ``exp`` but reduces ``k*n mod N`` with exact integer arithmetic before dividing,
    which keeps the phase accurate for large products (the ``cispi`` formulation).
numpy
    The same summation as one matrix-vector product on the explicit DFT matrix.

Numeric notes
-------------
The division by ``N`` in the exponent is always done in floating point: ``N``, ``k`` and
``n`` are cast to float first. Truncating integer division would corrupt every bin.
No validation of sample values is done: NaN/Inf propagate through the arithmetic.
"""

from __future__ import annotations

import cmath
import math
from typing import Callable, Dict, Optional, Sequence, Union

import numpy as np

from dft_challenge.models.samples import SampleSeries
from dft_challenge.models.spectrum import ComplexPair, Spectrum

ArrayLike = Union[Sequence[float], Sequence[complex], np.ndarray, SampleSeries]

# bins kernel signature: (samples, N, k_start, k_stop) -> complex128 array of length k_stop-k_start
BinsKernel = Callable[[np.ndarray, int, int, int], np.ndarray]


def as_samples(x: ArrayLike) -> np.ndarray:
    """Return ``x`` as a 1D float64 (or complex128) array.

    Integer input is promoted to float64 so no later step can fall into integer arithmetic.
    """
    if isinstance(x, SampleSeries):
        arr = x.values
    else:
        arr = np.asarray(x)
    if arr.ndim != 1:
        raise ValueError(f"x must be 1D (N,), got shape {arr.shape}")
    if np.iscomplexobj(arr):
        return arr.astype(np.complex128, copy=False)
    return arr.astype(np.float64, copy=False)


def _bins_exp(x: np.ndarray, N: int, k_start: int, k_stop: int) -> np.ndarray:
    xs = x.tolist()
    Nf = float(N)
    out = np.empty(k_stop - k_start, dtype=np.complex128)
    for i, k in enumerate(range(k_start, k_stop)):
        kf = float(k)
        out[i] = sum(
            (xs[n] * cmath.exp(-2j * math.pi * kf * float(n) / Nf) for n in range(N)),
            0j,
        )
    return out


def _bins_sincos(x: np.ndarray, N: int, k_start: int, k_stop: int) -> np.ndarray:
    if np.iscomplexobj(x):
        xr = np.real(x).tolist()
        xi = np.imag(x).tolist()
    else:
        xr = x.tolist()
        xi = None
    Nf = float(N)
    out = np.empty(k_stop - k_start, dtype=np.complex128)
    for i, k in enumerate(range(k_start, k_stop)):
        kf = float(k)
        acc = ComplexPair()
        for n in range(N):
            angle = -2.0 * math.pi * kf * float(n) / Nf
            c = math.cos(angle)
            s = math.sin(angle)
            acc = acc + xr[n] * ComplexPair(c, s)
            if xi is not None:
                # (a + ib)(c + is) = a(c + is) + b(-s + ic)
                acc = acc.add(ComplexPair(-s, c).scale(xi[n]))
        out[i] = acc.to_complex()
    return out


def _bins_cis(x: np.ndarray, N: int, k_start: int, k_stop: int) -> np.ndarray:
    xs = x.tolist()
    Nf = float(N)
    out = np.empty(k_stop - k_start, dtype=np.complex128)
    for i, k in enumerate(range(k_start, k_stop)):
        acc = 0j
        for n in range(N):
            # exact integer reduction: the phase is a fraction of a full turn in [0, 1)
            turns = float((k * n) % N) / Nf
            acc += xs[n] * cmath.rect(1.0, -2.0 * math.pi * turns)
        out[i] = acc
    return out


def _bins_numpy(x: np.ndarray, N: int, k_start: int, k_stop: int) -> np.ndarray:
    k = np.arange(k_start, k_stop, dtype=np.float64)
    n = np.arange(N, dtype=np.float64)
    W = np.exp(-2j * np.pi * np.outer(k, n) / float(N))
    # inf * (1+0j) is inf+nanj term by term, but the BLAS product also mixes the nan
    # imaginary part into the real sum: a bin with an infinite sample comes out nan+nanj.
    with np.errstate(invalid="ignore"):
        return (W @ x).astype(np.complex128, copy=False)


DFT_METHODS: Dict[str, BinsKernel] = {
    "exp": _bins_exp,
    "sincos": _bins_sincos,
    "cis": _bins_cis,
    "numpy": _bins_numpy,
}


def get_kernel(method: str) -> BinsKernel:
    try:
        return DFT_METHODS[method]
    except KeyError:
        raise ValueError(f"unknown DFT method {method!r}; expected one of {sorted(DFT_METHODS)}") from None


def dft_bins(x: ArrayLike, k_start: int, k_stop: int, method: str = "exp") -> np.ndarray:
    """Compute bins ``k_start <= k < k_stop`` of the DFT of ``x``.

    This is the unit of work for the parallel evaluation: it only reads ``x`` and returns a
    fresh array for its own bin range.
    """
    xs = as_samples(x)
    N = int(xs.size)
    k_start = int(k_start)
    k_stop = int(k_stop)
    if not (0 <= k_start <= k_stop <= N):
        raise ValueError(f"bin range must satisfy 0 <= k_start <= k_stop <= {N}, got [{k_start}, {k_stop})")
    return get_kernel(method)(xs, N, k_start, k_stop)


def _full(x: ArrayLike, method: str) -> np.ndarray:
    xs = as_samples(x)
    return dft_bins(xs, 0, xs.size, method=method)


def dft_exp(x: ArrayLike) -> np.ndarray:
    """Textbook form: ``sum(x[n] * exp(-2j*pi*k*n/N))``."""
    return _full(x, "exp")


def dft_sincos(x: ArrayLike) -> np.ndarray:
    """Separate real/imaginary accumulation with ``cos(-2*pi*k*n/N)`` and ``sin(-2*pi*k*n/N)``."""
    return _full(x, "sincos")


def dft_cis(x: ArrayLike) -> np.ndarray:
    """Exponential form with the phase reduced modulo one turn before dividing."""
    return _full(x, "cis")


def dft_numpy(x: ArrayLike) -> np.ndarray:
    """Vectorized direct summation (explicit DFT matrix times ``x``)."""
    return _full(x, "numpy")


def transform(
    x: ArrayLike,
    *,
    method: str = "exp",
    n_workers: Optional[int] = None,
    executor: str = "thread",
) -> Spectrum:
    """Compute the direct DFT of ``x``.

    Parameters
    ----------
    x:
        Sequence of N real or complex samples (or a :class:`SampleSeries`). ``N = 0`` gives
        an empty spectrum.
    method:
        Kernel name, one of :data:`DFT_METHODS`.
    n_workers:
        ``None`` or ``1`` evaluates serially. Larger values split the bin range across a
        worker pool (see :mod:`dft_challenge.analysis.parallel`).
    executor:
        ``"thread"`` or ``"process"``; only used when ``n_workers > 1``.

    Returns
    -------
    Spectrum
        N complex coefficients in bin order, without normalization.
    """
    xs = as_samples(x)
    get_kernel(method)

    if n_workers is not None and int(n_workers) != 1:
        from dft_challenge.analysis.parallel import parallel_transform

        return parallel_transform(xs, method=method, n_workers=n_workers, executor=executor)

    coeff = dft_bins(xs, 0, xs.size, method=method)
    return Spectrum(bins=np.arange(xs.size, dtype=int), coeff=coeff, method=method)
