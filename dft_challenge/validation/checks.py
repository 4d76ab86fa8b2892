"""
Input and output checks around the transform.

The transform itself never validates sample values: NaN/Inf propagate, and an empty input
gives an empty spectrum. The checks here only *report*: pathological samples become
warnings and only structural problems (wrong shape, non-numeric dtype) are errors.

Examples
--------
>>> import numpy as np
>>> from dft_challenge.validation.checks import validate_samples
>>> rep = validate_samples(np.array([1.0, np.nan, 2.0]))
>>> rep.ok, len(rep.warnings)
(True, 1)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union

import numpy as np

from dft_challenge.models.spectrum import Spectrum


@dataclass(frozen=True)
class ValidationResult:
    """Verdict on one input sequence, produced before the transform runs.

    ``errors`` holds structural problems (wrong shape, non-numeric dtype) that make the
    sequence unusable as DFT input. ``warnings`` holds value-level findings such as an empty
    sequence or NaN/Inf samples; those never stop the transform, they only explain a
    spectrum that comes out empty or non-finite. ``n_nonfinite`` counts the NaN/Inf samples.
    """
    ok: bool
    errors: List[str]
    warnings: List[str]
    n_nonfinite: int = 0

    def raise_if_errors(self) -> None:
        """Refuse the sequence with one ``ValueError`` naming every structural problem."""
        if not self.errors:
            return
        raise ValueError(f"samples rejected ({len(self.errors)} problem(s)): " + "; ".join(self.errors))


def validate_samples(x: Union[Sequence[float], np.ndarray]) -> ValidationResult:
    """
    Check that ``x`` is a usable input sequence.

    Errors: not 1D, or not numeric.
    Warnings: empty sequence, non-finite samples.
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        arr = np.asarray(x)
    except (TypeError, ValueError) as e:
        return ValidationResult(ok=False, errors=[f"cannot convert samples to an array: {e}"], warnings=[])

    if arr.ndim != 1:
        errors.append(f"samples must be 1D, got shape {arr.shape}")
    if arr.size and not (np.issubdtype(arr.dtype, np.number) or arr.dtype == bool):
        errors.append(f"samples must be numeric, got dtype {arr.dtype}")
    if errors:
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    if arr.size == 0:
        warnings.append("empty sequence: the spectrum will be empty")

    n_nonfinite = int((~np.isfinite(arr)).sum()) if arr.size else 0
    if n_nonfinite:
        first = int(np.flatnonzero(~np.isfinite(arr))[0])
        warnings.append(
            f"{n_nonfinite} non-finite sample(s) (first at index {first}); they will propagate into every bin"
        )

    return ValidationResult(ok=True, errors=errors, warnings=warnings, n_nonfinite=n_nonfinite)


@dataclass(frozen=True)
class SpectrumComparison:
    """Element-wise agreement of two spectra."""
    close: bool
    max_abs_diff: float
    max_rel_diff: float
    worst_bin: int = -1
    notes: List[str] = field(default_factory=list)


def compare_spectra(
    a: Union[Spectrum, np.ndarray],
    b: Union[Spectrum, np.ndarray],
    *,
    rtol: float = 1e-9,
    atol: float = 1e-9,
) -> SpectrumComparison:
    """
    Compare two spectra bin by bin.

    A bin agrees when ``|a-b| <= atol + rtol*max(|a|, |b|)``. Bins that are analytically
    zero come out as rounding noise and are covered by ``atol``. NaN bins agree only with
    NaN bins.
    """
    ca = np.asarray(a.coeff if isinstance(a, Spectrum) else a, dtype=np.complex128)
    cb = np.asarray(b.coeff if isinstance(b, Spectrum) else b, dtype=np.complex128)
    if ca.shape != cb.shape:
        return SpectrumComparison(
            close=False,
            max_abs_diff=float("inf"),
            max_rel_diff=float("inf"),
            notes=[f"shape mismatch: {ca.shape} vs {cb.shape}"],
        )
    if ca.size == 0:
        return SpectrumComparison(close=True, max_abs_diff=0.0, max_rel_diff=0.0)

    nan_a = np.isnan(ca)
    nan_b = np.isnan(cb)
    notes: List[str] = []
    if np.any(nan_a != nan_b):
        notes.append("NaN pattern differs")

    both = ~(nan_a | nan_b)
    with np.errstate(invalid="ignore"):
        diff = np.where(both, np.abs(ca - cb), 0.0)
    scale = np.where(both, np.maximum(np.abs(ca), np.abs(cb)), 0.0)
    diff = np.nan_to_num(diff, nan=0.0, posinf=np.inf)

    with np.errstate(divide="ignore", invalid="ignore"):
        rel = np.where(scale > 0, diff / scale, 0.0)

    ok_bins = diff <= (float(atol) + float(rtol) * scale)
    close = bool(np.all(ok_bins)) and not notes
    worst = int(np.argmax(diff))

    return SpectrumComparison(
        close=close,
        max_abs_diff=float(np.max(diff)),
        max_rel_diff=float(np.max(rel)),
        worst_bin=worst,
        notes=notes,
    )


def spectra_close(a, b, *, rtol: float = 1e-9, atol: float = 1e-9) -> bool:
    """Shorthand for ``compare_spectra(a, b, ...).close``."""
    return compare_spectra(a, b, rtol=rtol, atol=atol).close
