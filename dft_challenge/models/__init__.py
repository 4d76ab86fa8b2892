from .samples import SampleSeries
from .spectrum import ComplexPair, Spectrum

__all__ = [
    "ComplexPair",
    "SampleSeries",
    "Spectrum",
]
