"""Analysis package.

Design principle:
  - Ingest produces :class:`~dft_challenge.models.samples.SampleSeries` objects.
  - Analysis consumes plain 1D sample arrays (or SampleSeries) and produces
    :class:`~dft_challenge.models.spectrum.Spectrum` objects.

The transform is always the direct summation; kernels differ only in how each term is
evaluated.
"""

from .dft import DFT_METHODS, dft_bins, dft_cis, dft_exp, dft_numpy, dft_sincos, transform
from .parallel import parallel_transform, partition_bins

__all__ = [
    "DFT_METHODS",
    "dft_bins",
    "dft_cis",
    "dft_exp",
    "dft_numpy",
    "dft_sincos",
    "parallel_transform",
    "partition_bins",
    "transform",
]
