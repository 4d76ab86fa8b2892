from __future__ import annotations

import numpy as np

from dft_challenge.models.samples import SampleSeries


def sampled_sine(
    n: int = 2000,
    *,
    cycles: float = 1.0,
    amplitude: float = 1.0,
    endpoint: bool = True,
) -> SampleSeries:
    """Sample ``amplitude * sin(2*pi*cycles*t)`` on ``t = linspace(0, 1, n)``.

    With ``endpoint=True`` (the classic 2000-point test signal) the last sample sits at
    ``t = 1`` and the window spans slightly less than a whole number of periods, so a little
    leakage appears around the two dominant bins. ``endpoint=False`` gives an exact
    whole-period window.

    Examples
    --------
    >>> s = sampled_sine(4, endpoint=False)
    >>> [round(v, 12) for v in s.values.tolist()]
    [0.0, 1.0, 0.0, -1.0]
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    t = np.linspace(0.0, 1.0, n, endpoint=endpoint)
    x = float(amplitude) * np.sin(2.0 * np.pi * float(cycles) * t)
    return SampleSeries(values=x, source="synthetic")
