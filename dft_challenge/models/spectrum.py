from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True)
class ComplexPair:
    """Explicit ``{re, im}`` pair used by the sin/cos accumulation kernel.

    Arithmetic is defined once here (add, scale, magnitude) so that kernels which keep
    real and imaginary parts in separate accumulators do not deal with ad hoc tuples.
    """

    re: float = 0.0
    im: float = 0.0

    def add(self, other: "ComplexPair") -> "ComplexPair":
        return ComplexPair(self.re + other.re, self.im + other.im)

    def scale(self, alpha: float) -> "ComplexPair":
        return ComplexPair(alpha * self.re, alpha * self.im)

    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: "ComplexPair") -> "ComplexPair":
        return self.add(other)

    def __mul__(self, alpha: float) -> "ComplexPair":
        return self.scale(alpha)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Spectrum:
    """Output of a direct DFT.

    Attributes
    ----------
    bins:
        Bin index vector ``[0, 1, ..., N-1]``. Bin 0 is DC.
    coeff:
        Complex coefficients of shape ``(N,)``. No normalization is applied:
        ``coeff[k] = sum_n x[n] * exp(-2j*pi*k*n/N)``.
    method:
        Name of the kernel that produced the coefficients.
    """

    bins: np.ndarray
    coeff: np.ndarray
    method: str = "exp"

    @property
    def n(self) -> int:
        return int(self.coeff.size)

    @property
    def real(self) -> np.ndarray:
        return np.real(self.coeff)

    @property
    def imag(self) -> np.ndarray:
        return np.imag(self.coeff)

    @property
    def magnitude(self) -> np.ndarray:
        return np.abs(self.coeff)

    def as_pairs(self) -> List[Tuple[float, float]]:
        """Return ``(re, im)`` tuples in bin order."""
        return [(float(c.real), float(c.imag)) for c in self.coeff]

    def __len__(self) -> int:
        return self.n
