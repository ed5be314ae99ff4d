"""
Band generation module.

Implements:
- Input validation with a dedicated error per quantity
- Octave / fractional-octave bands stepped from a reference center
- Equalizer bands fitting a fixed count into a spectrum
- Fractional bandwidth
- Band table conversion and CSV I/O
"""

from .validation import (
    BandValidationError,
    FractionError,
    SpectrumError,
    CenterError,
    BandCountError,
    is_valid_fraction,
    is_steppable_fraction,
    is_valid_spectrum,
    is_valid_center,
    is_valid_band_count,
    validate_fraction,
    validate_spectrum,
    validate_center,
    validate_band_count,
)

from .octaves import (
    Band,
    make_band,
    octaves,
    bandwidth,
)

from .equalizer import (
    equalizer,
    equalizer_fraction,
)

from .table import (
    bands_to_array,
    round_bands,
    band_centers,
    fractional_bandwidths,
    get_band_info,
    format_band_table,
    write_bands_csv,
    load_bands_csv,
)

__all__ = [
    # Validation
    "BandValidationError",
    "FractionError",
    "SpectrumError",
    "CenterError",
    "BandCountError",
    "is_valid_fraction",
    "is_steppable_fraction",
    "is_valid_spectrum",
    "is_valid_center",
    "is_valid_band_count",
    "validate_fraction",
    "validate_spectrum",
    "validate_center",
    "validate_band_count",
    # Generators
    "Band",
    "make_band",
    "octaves",
    "bandwidth",
    "equalizer",
    "equalizer_fraction",
    # Tables
    "bands_to_array",
    "round_bands",
    "band_centers",
    "fractional_bandwidths",
    "get_band_info",
    "format_band_table",
    "write_bands_csv",
    "load_bands_csv",
]
