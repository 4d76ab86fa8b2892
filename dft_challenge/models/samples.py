from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np


@dataclass(frozen=True)
class SampleSeries:
    """
    In-memory representation of one input sequence for the transform.

    Notes
    - 'values' is a read-only float64 (or complex128) array; the transform never modifies it.
    - 'source' is the file the samples came from, or "synthetic".
    - Non-fatal ingest issues are kept in 'warnings' instead of being raised.
    """
    values: np.ndarray
    source: Union[Path, str] = "synthetic"
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        arr = np.asarray(self.values)
        if not np.iscomplexobj(arr):
            arr = arr.astype(np.float64, copy=True)
        else:
            arr = arr.astype(np.complex128, copy=True)
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @property
    def n_samples(self) -> int:
        return int(self.values.size)

    def __len__(self) -> int:
        return self.n_samples
