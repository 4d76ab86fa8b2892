"""Validation utilities: input sample checks and spectrum agreement checks."""

from .checks import SpectrumComparison, ValidationResult, compare_spectra, spectra_close, validate_samples

__all__ = [
    "SpectrumComparison",
    "ValidationResult",
    "compare_spectra",
    "spectra_close",
    "validate_samples",
]
