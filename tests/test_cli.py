"""
Tests for the command-line interface.
"""

import argparse

import pytest

from octave_bands.cli import main, parse_fraction
from octave_bands.bands import load_bands_csv


class TestParseFraction:
    """Tests for fraction parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [("1", 1.0), ("1/3", 1 / 3), ("1/2", 0.5), ("0.25", 0.25), (" 2/3 ", 2 / 3)],
    )
    def test_valid(self, text, expected):
        assert parse_fraction(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["third", "1/0", "", "1e400"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_fraction(text)


class TestOctavesCommand:
    """Tests for the octaves subcommand."""

    def test_third_octave_table(self, capsys):
        assert main(["octaves", "--fraction", "1/3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 33
        assert lines[19].split() == ["18", "890.899", "1000.000", "1122.462"]

    def test_spectrum_and_center(self, capsys):
        args = [
            "octaves", "--fraction", "1/2", "--center", "125",
            "--spectrum-min", "80", "--spectrum-max", "200",
        ]
        assert main(args) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[2].split()[2] == "125.000"

    def test_single_spectrum_bound(self, capsys):
        """Only --spectrum-min given keeps the default maximum."""
        assert main(["octaves", "--spectrum-min", "100"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1 + 8

    def test_verbose_summary(self, capsys):
        assert main(["octaves", "--verbose"]) == 0
        first = capsys.readouterr().out.splitlines()[0]
        assert first.startswith("11 bands")

    def test_decimals(self, capsys):
        assert main(["octaves", "--decimals", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[7].split() == ["6", "707.1", "1000.0", "1414.2"]

    def test_invalid_fraction_exits_1(self, capsys):
        assert main(["octaves", "--fraction", "0"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR:")
        assert "fraction" in err

    def test_center_outside_spectrum_exits_1(self, capsys):
        args = ["octaves", "--center", "5", "--spectrum-min", "10", "--spectrum-max", "100"]
        assert main(args) == 1
        assert "center" in capsys.readouterr().err

    def test_unparseable_fraction_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["octaves", "--fraction", "third"])
        assert exc.value.code == 2

    def test_csv_output(self, tmp_path, capsys):
        output = tmp_path / "out" / "octaves.csv"
        assert main(["octaves", "--output", str(output)]) == 0
        assert f"Saved: {output}" in capsys.readouterr().out
        assert len(load_bands_csv(output)) == 11

    def test_plot_output(self, tmp_path):
        output = tmp_path / "octaves.png"
        assert main(["octaves", "--plot", str(output), "--title", "Octaves"]) == 0
        assert output.exists()


class TestEqualizerCommand:
    """Tests for the equalizer subcommand."""

    def test_band_count(self, capsys):
        args = ["equalizer", "--bands", "10", "--spectrum-min", "20", "--spectrum-max", "20000"]
        assert main(args) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 11
        assert lines[1].split()[2] == "20.000"
        assert lines[-1].split()[2] == "20000.000"

    def test_bands_required(self):
        with pytest.raises(SystemExit):
            main(["equalizer"])

    def test_zero_bands_exits_1(self, capsys):
        assert main(["equalizer", "--bands", "0"]) == 1
        assert "band count" in capsys.readouterr().err

    def test_reversed_spectrum_exits_1(self, capsys):
        args = ["equalizer", "--bands", "4", "--spectrum-min", "500", "--spectrum-max", "100"]
        assert main(args) == 1
        assert "spectrum" in capsys.readouterr().err


class TestBandwidthCommand:
    """Tests for the bandwidth subcommand."""

    def test_default(self, capsys):
        assert main(["bandwidth"]) == 0
        assert capsys.readouterr().out.strip() == "0.707"

    def test_third_octave(self, capsys):
        assert main(["bandwidth", "--fraction", "1/3", "--decimals", "2"]) == 0
        assert capsys.readouterr().out.strip() == "0.23"

    def test_negative_fraction_exits_1(self, capsys):
        assert main(["bandwidth", "--fraction", "-1"]) == 1
        assert "fraction" in capsys.readouterr().err

    @pytest.mark.parametrize("fraction", ["2000", "1e-17"])
    def test_out_of_range_fraction_exits_1(self, fraction, capsys):
        """Fractions beyond the float64 step range are reported, not raised."""
        assert main(["bandwidth", "--fraction", fraction]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR:")
        assert "fraction" in err

    def test_root_decimals_rejected(self):
        """--decimals belongs to the subcommand."""
        with pytest.raises(SystemExit):
            main(["--decimals", "2", "bandwidth"])


class TestFractionLimits:
    """Extreme fractions end with an error instead of looping or overflowing."""

    def test_huge_octaves_fraction_exits_1(self, capsys):
        assert main(["octaves", "--fraction", "1100"]) == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_tiny_octaves_fraction_exits_1(self, capsys):
        assert main(["octaves", "--fraction", "1e-17"]) == 1
        assert "fraction" in capsys.readouterr().err

    def test_unrepresentable_fraction_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["octaves", "--fraction", "1e400"])
        assert exc.value.code == 2
