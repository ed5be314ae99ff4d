"""
Input validation for band generation.

Each quantity has a predicate (``is_valid_*``) that never raises and a
guard (``validate_*``) that raises a dedicated error and returns the
normalized value:

- Fraction: positive finite real
- Spectrum: pair (min, max) of positive finite reals with min < max
- Center: finite real with min <= center <= max
- Band count: integer >= 1

All errors derive from ``BandValidationError``, itself a ``ValueError``.
"""

import math
from numbers import Integral, Real
from typing import Any, Tuple


class BandValidationError(ValueError):
    """Base class for invalid band generation inputs."""


class FractionError(BandValidationError):
    """Octave fraction is not a positive finite number."""


class SpectrumError(BandValidationError):
    """Spectrum is not an ordered pair of positive finite numbers."""


class CenterError(BandValidationError):
    """Center frequency is not a finite number inside the spectrum."""


class BandCountError(BandValidationError):
    """Band count is not a positive integer."""


def _is_real(value: Any) -> bool:
    # bool is an Integral, but True is not a frequency
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite_real(value: Any) -> bool:
    return _is_real(value) and math.isfinite(value)


def is_steppable_fraction(fraction: float) -> bool:
    """
    Check that a fraction gives a usable float64 band step.

    The step 2^f must be finite and the half step 2^(f/2) must exceed 1,
    otherwise centers never move or edges collapse onto the center.

    Examples
    --------
    >>> is_steppable_fraction(1 / 3)
    True
    >>> is_steppable_fraction(1e-17)
    False
    >>> is_steppable_fraction(2000)
    False
    """
    try:
        factor = 2.0 ** fraction
    except OverflowError:
        return False
    return math.isfinite(factor) and 2.0 ** (fraction / 2.0) > 1.0


# =============================================================================
# Predicates
# =============================================================================

def is_valid_fraction(fraction: Any) -> bool:
    """
    Check if a value is a usable octave fraction.

    Examples
    --------
    >>> is_valid_fraction(1 / 3)
    True
    >>> is_valid_fraction(0)
    False
    >>> is_valid_fraction(float("inf"))
    False
    >>> is_valid_fraction(1e-17)
    False
    """
    return (
        _is_finite_real(fraction)
        and fraction > 0
        and is_steppable_fraction(fraction)
    )


def is_valid_spectrum(spectrum: Any) -> bool:
    """
    Check if a value is an ordered (min, max) pair of positive frequencies.

    Examples
    --------
    >>> is_valid_spectrum((15, 21000))
    True
    >>> is_valid_spectrum((100, 50))
    False
    """
    try:
        low, high = spectrum
    except (TypeError, ValueError):
        return False

    for bound in (low, high):
        if not _is_finite_real(bound) or bound <= 0:
            return False
    return low < high


def is_valid_center(center: Any, spectrum: Tuple[float, float]) -> bool:
    """
    Check if a center frequency lies inside a (valid) spectrum, bounds included.

    Examples
    --------
    >>> is_valid_center(1000, (15, 21000))
    True
    >>> is_valid_center(5, (10, 100))
    False
    """
    if not _is_finite_real(center):
        return False
    low, high = spectrum
    return low <= center <= high


def is_valid_band_count(band_count: Any) -> bool:
    """
    Check if a value is a positive integer band count.

    Integral floats such as ``4.0`` are accepted.

    Examples
    --------
    >>> is_valid_band_count(10)
    True
    >>> is_valid_band_count(1.5)
    False
    >>> is_valid_band_count(0)
    False
    """
    if not _is_finite_real(band_count):
        return False
    if not isinstance(band_count, Integral) and not float(band_count).is_integer():
        return False
    return band_count >= 1


# =============================================================================
# Guards
# =============================================================================

def validate_fraction(fraction: Any) -> float:
    """
    Validate an octave fraction.

    Parameters
    ----------
    fraction : float
        The octave fraction (1 = octave, 1/3 = third-octave).

    Returns
    -------
    float
        The fraction as a float.

    Raises
    ------
    FractionError
        If the fraction is not a number, is not finite, is not positive,
        or its band step 2^f is not representable as a float above 1.
    """
    if not _is_real(fraction):
        raise FractionError(f"fraction should be a number, got {fraction!r}")
    if not (math.isfinite(fraction) and fraction > 0):
        raise FractionError(f"fraction should be positive and finite, got {fraction}")
    if not is_steppable_fraction(fraction):
        raise FractionError(
            f"fraction out of range, 2**{fraction} is not a usable band step"
        )
    return float(fraction)


def validate_spectrum(spectrum: Any) -> Tuple[float, float]:
    """
    Validate a (min, max) spectrum.

    Returns
    -------
    tuple of float
        The (min, max) bounds as floats.

    Raises
    ------
    SpectrumError
        If the spectrum is not a pair, a bound is not a positive finite
        number, or min >= max.
    """
    try:
        low, high = spectrum
    except (TypeError, ValueError):
        raise SpectrumError(
            f"spectrum should be a (min, max) pair, got {spectrum!r}"
        ) from None

    for name, bound in (("min", low), ("max", high)):
        if not _is_real(bound):
            raise SpectrumError(f"spectrum {name} should be a number, got {bound!r}")
        if not math.isfinite(bound) or bound <= 0:
            raise SpectrumError(
                f"spectrum {name} should be positive and finite, got {bound}"
            )

    if low >= high:
        raise SpectrumError(
            f"spectrum min should be below max, got ({low}, {high})"
        )
    return float(low), float(high)


def validate_center(center: Any, spectrum: Tuple[float, float]) -> float:
    """
    Validate a center frequency against an already validated spectrum.

    Raises
    ------
    CenterError
        If the center is not a finite number or lies outside [min, max].
    """
    if not _is_finite_real(center):
        raise CenterError(f"center should be a finite number, got {center!r}")
    if not is_valid_center(center, spectrum):
        low, high = spectrum
        raise CenterError(
            f"center should be within spectrum [{low}, {high}], got {center}"
        )
    return float(center)


def validate_band_count(band_count: Any) -> int:
    """
    Validate an equalizer band count.

    Returns
    -------
    int
        The band count as an int.

    Raises
    ------
    BandCountError
        If the count is not a number, not an integer, or below 1.
    """
    if not _is_finite_real(band_count):
        raise BandCountError(f"band count should be a number, got {band_count!r}")
    if not is_valid_band_count(band_count):
        raise BandCountError(
            f"band count should be a positive integer, got {band_count}"
        )
    return int(band_count)
