from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from dft_challenge.models.samples import SampleSeries


@dataclass(frozen=True)
class SampleTextReaderConfig:
    """
    Reader configuration for plain-text sample files.

    comment:
      Lines starting with this prefix (after leading whitespace) are skipped. None disables.
    allow_commas:
      Treat commas as separators too, so a one-column 'data.csv' reads the same as a
      whitespace-delimited file.
    max_samples:
      Keep only the first max_samples values (None keeps all).
    encoding:
      Text encoding of the file.
    """
    comment: Optional[str] = "#"
    allow_commas: bool = True
    max_samples: Optional[int] = None
    encoding: str = "utf-8"


class SampleTextReader:
    """
    Reader for newline/whitespace-delimited real samples (one value per token).

    HARD REQUIREMENT:
      - every token must parse as a float ('nan'/'inf' are accepted and kept as-is)
      - any other token is a fatal input error; no partial sequence is returned
    """

    def __init__(self, config: Optional[SampleTextReaderConfig] = None):
        self.config = config or SampleTextReaderConfig()

    def read(self, file_path: str | Path) -> SampleSeries:
        path = Path(file_path).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(str(path))
        if not path.is_file():
            raise ValueError(f"not a regular file: {path}")

        text = path.read_text(encoding=self.config.encoding)
        tokens, positions = self._tokenize(text)
        warnings: List[str] = []

        values = self._parse_tokens(tokens, positions, path)

        if self.config.max_samples is not None:
            n_max = int(self.config.max_samples)
            if n_max < 0:
                raise ValueError(f"max_samples must be >= 0, got {n_max}")
            if values.size > n_max:
                warnings.append(f"truncated to first {n_max} of {values.size} samples")
                values = values[:n_max]

        if values.size == 0:
            warnings.append("file contains no samples")
        n_nonfinite = int((~np.isfinite(values)).sum())
        if n_nonfinite:
            warnings.append(f"{n_nonfinite} non-finite sample(s) (kept as-is)")

        return SampleSeries(values=values, source=path, warnings=tuple(warnings))

    def _tokenize(self, text: str) -> tuple[List[str], List[tuple[int, int]]]:
        """Split text into tokens; also return (line, column) of each token (1-based)."""
        sep = r"[\s,]+" if self.config.allow_commas else r"\s+"
        comment = self.config.comment
        tokens: List[str] = []
        positions: List[tuple[int, int]] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped:
                continue
            if comment and stripped.startswith(comment):
                continue
            col = 0
            for tok in re.split(sep, stripped):
                if not tok:
                    continue
                col += 1
                tokens.append(tok)
                positions.append((lineno, col))
        return tokens, positions

    @staticmethod
    def _parse_tokens(tokens: List[str], positions: List[tuple[int, int]], path: Path) -> np.ndarray:
        if not tokens:
            return np.zeros((0,), dtype=np.float64)

        s = pd.Series(tokens, dtype=object)
        values = pd.to_numeric(s, errors="coerce").to_numpy(dtype=np.float64)

        # to_numeric maps both garbage and literal 'nan' to NaN; re-check only those tokens.
        for i in np.flatnonzero(np.isnan(values)):
            tok = tokens[i]
            try:
                values[i] = float(tok)
            except ValueError:
                line, col = positions[i]
                raise ValueError(f"non-numeric token {tok!r} at line {line}, column {col} in {path}") from None
        return values
