"""
octave_bands: octave and fractional-octave frequency bands

Computes [low, center, high] band limits following the ANSI/IEC
octave-band convention, equalizer bands for a fixed band count, and the
fractional bandwidth of an octave fraction.
"""

from . import config
from .config import BandOptions, resolve_options
from .bands import (
    Band,
    octaves,
    equalizer,
    bandwidth,
    BandValidationError,
    FractionError,
    SpectrumError,
    CenterError,
    BandCountError,
)

__version__ = "0.1.0"
__all__ = [
    "config",
    "BandOptions",
    "resolve_options",
    "Band",
    "octaves",
    "equalizer",
    "bandwidth",
    "BandValidationError",
    "FractionError",
    "SpectrumError",
    "CenterError",
    "BandCountError",
]
