"""
Equalizer band generation.

Instead of fixing the octave fraction, the equalizer fixes the number of
bands N and derives the fraction that spaces N centers geometrically from
the spectrum minimum to the spectrum maximum:

    f = log2(max / min) / (N - 1)

Bands are generated upward from the minimum until the upper edge of the
last band reaches the maximum. Note that this stops on the band edge,
whereas ``octaves`` stops on the band center.
"""

import math
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..config import BandOptions, resolve_options
from .octaves import Band, make_band
from .validation import (
    BandCountError,
    SpectrumError,
    is_steppable_fraction,
    validate_band_count,
    validate_spectrum,
)


def equalizer_fraction(band_count: int, spectrum: Tuple[float, float]) -> float:
    """
    Octave fraction that fits ``band_count`` band centers into ``spectrum``.

    A single band has no step to fit, so it is given the fraction of the
    whole spectrum, log2(max / min).

    Parameters
    ----------
    band_count : int
        Number of bands.
    spectrum : tuple of float
        (min, max) center frequencies.

    Returns
    -------
    float
        The implicit octave fraction.

    Raises
    ------
    BandCountError
        If the count is invalid, or so large that the step rounds to 1.
    SpectrumError
        If the spectrum is invalid, its max/min ratio overflows, or a
        single band would have no usable width.

    Examples
    --------
    >>> equalizer_fraction(11, (31.25, 32000))
    1.0
    """
    band_count = validate_band_count(band_count)
    low, high = validate_spectrum(spectrum)

    octaves_spanned = math.log2(high / low)
    if not math.isfinite(octaves_spanned):
        raise SpectrumError(
            f"spectrum ratio max/min overflows, got ({low}, {high})"
        )

    if band_count == 1:
        fraction = octaves_spanned
    else:
        fraction = octaves_spanned / (band_count - 1)

    if not is_steppable_fraction(fraction):
        if band_count == 1:
            raise SpectrumError(
                f"spectrum too narrow for a band step, got ({low}, {high})"
            )
        raise BandCountError(
            f"band count {band_count} is too large for spectrum ({low}, {high})"
        )
    return fraction


def equalizer(
    band_count: int,
    options: Optional[Union[BandOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> List[Band]:
    """
    Compute ``band_count`` bands spanning the spectrum.

    The first band is centered on the spectrum minimum and the last on the
    spectrum maximum. The ``center`` option is not used.

    Parameters
    ----------
    band_count : int
        Number of bands (positive integer).
    options : BandOptions or mapping, optional
        Only ``spectrum`` is read; defaults to (15, 21000).
    **overrides
        ``spectrum=`` applied over ``options``.

    Returns
    -------
    list of Band
        Bands in ascending center order.

    Raises
    ------
    BandCountError, SpectrumError
        On invalid input, checked in that order.

    Examples
    --------
    >>> bands = equalizer(3, spectrum=(100, 400))
    >>> [round(b.center, 3) for b in bands]
    [100.0, 200.0, 400.0]
    """
    band_count = validate_band_count(band_count)
    opts = resolve_options(options, **overrides)
    low, high = validate_spectrum(opts.spectrum)

    fraction = equalizer_fraction(band_count, (low, high))
    factor = 2.0 ** fraction
    half_factor = math.sqrt(factor)

    bands = [make_band(low, half_factor)]
    if band_count == 1:
        return bands

    while bands[-1].high < high:
        bands.append(make_band(bands[-1].center * factor, half_factor))

    return bands
