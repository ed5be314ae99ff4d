"""
Global configuration and default values for octave band generation.

Band defaults follow the common audio convention: bands are anchored at
1 kHz and the spectrum of valid center frequencies spans 15 Hz to 21 kHz.

Reference: ANSI S1.11 / IEC 61260 octave-band filter conventions
"""

import collections.abc
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Tuple, Union


# =============================================================================
# Band Defaults
# =============================================================================

DEFAULT_FRACTION = 1.0
"""Default octave fraction (full octave bands)."""

DEFAULT_CENTER = 1000.0
"""Default reference center frequency in Hz."""

DEFAULT_SPECTRUM_MIN = 15.0
"""Default lowest allowed center frequency in Hz."""

DEFAULT_SPECTRUM_MAX = 21000.0
"""Default highest allowed center frequency in Hz."""

DEFAULT_SPECTRUM = (DEFAULT_SPECTRUM_MIN, DEFAULT_SPECTRUM_MAX)
"""Default spectrum (min, max) bounding the band centers."""


# =============================================================================
# Numerical Parameters
# =============================================================================

DEFAULT_DECIMALS = 3
"""Number of decimals used when displaying or exporting band tables."""


# =============================================================================
# Band Options
# =============================================================================

Spectrum = Tuple[float, float]  # (min, max)


@dataclass(frozen=True)
class BandOptions:
    """
    Options bounding a band computation.

    Attributes
    ----------
    center : float
        Reference center frequency in Hz. Bands are stepped outward from it.
    spectrum : tuple of float
        (min, max) range that band centers must fall into.

    Values are not validated here; each band generator validates the
    fields it actually uses.
    """
    center: float = DEFAULT_CENTER
    spectrum: Spectrum = DEFAULT_SPECTRUM

    def __post_init__(self):
        if isinstance(self.spectrum, list):
            object.__setattr__(self, "spectrum", tuple(self.spectrum))


def resolve_options(
    options: Optional[Union[BandOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> BandOptions:
    """
    Merge user options over the defaults, field by field.

    Parameters
    ----------
    options : BandOptions or mapping, optional
        Base options. A mapping may hold any of the keys ``center`` and
        ``spectrum``; missing keys and ``None`` values keep the defaults.
    **overrides
        Field values applied last. ``None`` values are ignored.

    Returns
    -------
    BandOptions
        The effective options.

    Raises
    ------
    TypeError
        If an unknown option name is given.

    Examples
    --------
    >>> resolve_options({"center": 500}).spectrum
    (15.0, 21000.0)
    >>> resolve_options(spectrum=[100, 16000]).spectrum
    (100, 16000)
    """
    if options is None:
        base = BandOptions()
    elif isinstance(options, BandOptions):
        base = options
    elif isinstance(options, collections.abc.Mapping):
        base = _merge(BandOptions(), options)
    else:
        raise TypeError(
            f"options must be a BandOptions or a mapping, got {type(options).__name__}"
        )

    return _merge(base, overrides)


def _merge(base: BandOptions, values: Mapping[str, Any]) -> BandOptions:
    known = {f.name for f in fields(BandOptions)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise TypeError(f"Unknown band options: {unknown}")

    changes = {k: v for k, v in values.items() if v is not None}
    if not changes:
        return base
    return replace(base, **changes)
