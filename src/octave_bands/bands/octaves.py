"""
Octave and fractional-octave band generation.

Band centers are spaced by the factor G = 2^f, where f is the octave
fraction (1 = octave, 1/3 = third-octave). Each band extends half a step
on either side of its center:

    f_low  = f_center / 2^(f/2)
    f_high = f_center * 2^(f/2)

Starting from a reference center (1 kHz by default), centers are generated
downward and upward by repeated division/multiplication until they leave
the spectrum. Only the centers are bounded; edges may extend outside it.

Reference: ANSI S1.11, IEC 61260
"""

import math
from typing import Any, List, Mapping, NamedTuple, Optional, Union

from ..config import DEFAULT_FRACTION, BandOptions, resolve_options
from .validation import validate_center, validate_fraction, validate_spectrum


class Band(NamedTuple):
    """Lower edge, center and upper edge frequencies of a band, in Hz."""
    low: float
    center: float
    high: float


def make_band(center: float, half_factor: float) -> Band:
    """Build the band centered at ``center`` with edges ``half_factor`` away."""
    return Band(center / half_factor, center, center * half_factor)


def octaves(
    fraction: float = DEFAULT_FRACTION,
    options: Optional[Union[BandOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> List[Band]:
    """
    Compute the frequency limits of octave bands.

    Parameters
    ----------
    fraction : float, optional
        Octave band fraction. Default is 1 (full octaves).
    options : BandOptions or mapping, optional
        ``center`` and/or ``spectrum``; missing fields keep their defaults.
    **overrides
        ``center=`` / ``spectrum=`` applied over ``options``.

    Returns
    -------
    list of Band
        Bands in ascending center order. The band centered at ``center``
        is always included.

    Raises
    ------
    FractionError, SpectrumError, CenterError
        On invalid input, checked in that order.

    Examples
    --------
    >>> [round(b.center, 3) for b in octaves(1, spectrum=(100, 1000))]
    [125.0, 250.0, 500.0, 1000.0]
    """
    fraction = validate_fraction(fraction)
    opts = resolve_options(options, **overrides)
    low, high = validate_spectrum(opts.spectrum)
    center = validate_center(opts.center, (low, high))

    factor = 2.0 ** fraction
    half_factor = math.sqrt(2.0) ** fraction

    below: List[Band] = []
    c = center
    while c >= low:
        below.append(make_band(c, half_factor))
        c /= factor
    below.reverse()

    above: List[Band] = []
    c = center * factor
    while c <= high:
        above.append(make_band(c, half_factor))
        c *= factor

    return below + above


def bandwidth(fraction: float = DEFAULT_FRACTION) -> float:
    """
    Fractional bandwidth of an octave band: (f_high - f_low) / f_center.

    The ratio is the same for every band of a given fraction:

        BW = (2^f - 1) / 2^(f/2)

    Parameters
    ----------
    fraction : float, optional
        Octave band fraction. Default is 1.

    Returns
    -------
    float
        The fractional bandwidth.

    Raises
    ------
    FractionError
        If the fraction is not a positive finite number.

    Examples
    --------
    >>> round(bandwidth(1), 3)
    0.707
    >>> round(bandwidth(1 / 3), 3)
    0.232
    """
    fraction = validate_fraction(fraction)
    return (2.0 ** fraction - 1.0) / 2.0 ** (fraction / 2.0)
