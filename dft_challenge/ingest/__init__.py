"""Ingest package - sample sources for the transform.

This package handles:
- Reading newline/whitespace-delimited sample files (*.txt, *.csv)
- Generating synthetic test signals (sampled sinusoid)

Key classes:
- SampleTextReader: Reads one real sample per token from a text file

Design principle:
- Sources produce SampleSeries objects
- Unparsable input is a fatal error; the transform never sees it
- Non-fatal issues (empty file, non-finite samples) are kept as warnings
"""

from .readers_text import SampleTextReader, SampleTextReaderConfig
from .synthetic import sampled_sine

__all__ = [
    "SampleTextReader",
    "SampleTextReaderConfig",
    "sampled_sine",
]
