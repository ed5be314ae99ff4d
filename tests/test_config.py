"""
Tests for configuration module.
"""

import pytest
from octave_bands import config
from octave_bands.config import BandOptions, resolve_options


class TestDefaults:
    """Test default band parameters."""

    def test_default_fraction(self):
        """Default bands are full octaves."""
        assert config.DEFAULT_FRACTION == 1.0

    def test_default_center(self):
        """Bands are anchored at 1 kHz."""
        assert config.DEFAULT_CENTER == 1000.0

    def test_default_spectrum(self):
        """Default spectrum is 15 Hz to 21 kHz."""
        assert config.DEFAULT_SPECTRUM == (15.0, 21000.0)
        assert config.DEFAULT_SPECTRUM == (
            config.DEFAULT_SPECTRUM_MIN, config.DEFAULT_SPECTRUM_MAX
        )

    def test_default_center_inside_spectrum(self):
        """The default center must be a valid center for the default spectrum."""
        assert config.DEFAULT_SPECTRUM_MIN <= config.DEFAULT_CENTER <= config.DEFAULT_SPECTRUM_MAX


class TestBandOptions:
    """Test the BandOptions dataclass."""

    def test_defaults(self):
        opts = BandOptions()
        assert opts.center == 1000.0
        assert opts.spectrum == (15.0, 21000.0)

    def test_list_spectrum_becomes_tuple(self):
        """A list spectrum is stored as a tuple."""
        opts = BandOptions(spectrum=[100, 16000])
        assert opts.spectrum == (100, 16000)
        assert isinstance(opts.spectrum, tuple)

    def test_frozen(self):
        """Options are immutable."""
        opts = BandOptions()
        with pytest.raises(AttributeError):
            opts.center = 500

    def test_no_validation_on_construction(self):
        """Construction accepts any values; generators validate."""
        opts = BandOptions(center=-1, spectrum=(100, 50))
        assert opts.center == -1


class TestResolveOptions:
    """Test the shallow, field-by-field option merge."""

    def test_none_gives_defaults(self):
        assert resolve_options() == BandOptions()
        assert resolve_options(None) == BandOptions()

    def test_mapping_center_keeps_default_spectrum(self):
        opts = resolve_options({"center": 500})
        assert opts.center == 500
        assert opts.spectrum == config.DEFAULT_SPECTRUM

    def test_mapping_spectrum_keeps_default_center(self):
        opts = resolve_options({"spectrum": [80, 200]})
        assert opts.center == config.DEFAULT_CENTER
        assert opts.spectrum == (80, 200)

    def test_none_values_keep_defaults(self):
        opts = resolve_options({"center": None, "spectrum": None})
        assert opts == BandOptions()

    def test_options_instance_passes_through(self):
        base = BandOptions(center=125, spectrum=(80, 200))
        assert resolve_options(base) is base

    def test_overrides_applied_last(self):
        opts = resolve_options({"center": 500, "spectrum": (100, 1000)}, center=250)
        assert opts.center == 250
        assert opts.spectrum == (100, 1000)

    def test_override_on_instance(self):
        base = BandOptions(center=125, spectrum=(80, 200))
        opts = resolve_options(base, spectrum=(100, 200))
        assert opts == BandOptions(center=125, spectrum=(100, 200))
        assert base.spectrum == (80, 200)

    def test_unknown_key_raises(self):
        with pytest.raises(TypeError):
            resolve_options({"centre": 500})
        with pytest.raises(TypeError):
            resolve_options(width=3)

    def test_bad_options_type_raises(self):
        with pytest.raises(TypeError):
            resolve_options([1000, (15, 21000)])
