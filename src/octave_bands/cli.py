"""
Command-line interface for octave band tables.

Usage:
    octave-bands octaves --fraction 1/3
    octave-bands octaves --fraction 1/2 --spectrum-min 100 --spectrum-max 16000 \\
        --output data/half_octaves.csv --plot figures/half_octaves.png
    octave-bands equalizer --bands 10 --spectrum-min 20 --spectrum-max 20000
    octave-bands bandwidth --fraction 1/3

The same is available as ``python -m octave_bands.cli``.
"""

import argparse
import sys
from fractions import Fraction
from pathlib import Path
from typing import List, Optional

from .config import (
    DEFAULT_FRACTION,
    DEFAULT_CENTER,
    DEFAULT_SPECTRUM_MIN,
    DEFAULT_SPECTRUM_MAX,
    DEFAULT_DECIMALS,
)
from .bands import (
    Band,
    octaves,
    equalizer,
    bandwidth,
    get_band_info,
    format_band_table,
    write_bands_csv,
)


def parse_fraction(text: str) -> float:
    """Parse an octave fraction given as ``1/3``, ``0.5`` or ``1``."""
    try:
        return float(Fraction(text.strip()))
    except (ValueError, ZeroDivisionError, OverflowError):
        raise argparse.ArgumentTypeError(f"invalid fraction: {text!r}") from None


def _spectrum_from_args(args: argparse.Namespace):
    if args.spectrum_min is None and args.spectrum_max is None:
        return None
    low = DEFAULT_SPECTRUM_MIN if args.spectrum_min is None else args.spectrum_min
    high = DEFAULT_SPECTRUM_MAX if args.spectrum_max is None else args.spectrum_max
    return (low, high)


def _report_bands(bands: List[Band], args: argparse.Namespace) -> None:
    if args.verbose:
        info = get_band_info(bands)
        print(
            f"{info['n_bands']} bands, centers {info['first_center']:.3f} .. "
            f"{info['last_center']:.3f} Hz, bandwidth {info['bandwidth']:.3f}"
        )

    print(format_band_table(bands, decimals=args.decimals))

    if args.output:
        path = write_bands_csv(bands, Path(args.output))
        print(f"Saved: {path}")

    if args.plot:
        # Deferred so table output does not pay for importing matplotlib
        from .plot import plot_bands
        plot_bands(bands, output=Path(args.plot), title=args.title)


def run_octaves(args: argparse.Namespace) -> None:
    bands = octaves(
        args.fraction,
        center=args.center,
        spectrum=_spectrum_from_args(args),
    )
    _report_bands(bands, args)


def run_equalizer(args: argparse.Namespace) -> None:
    bands = equalizer(args.bands, spectrum=_spectrum_from_args(args))
    _report_bands(bands, args)


def run_bandwidth(args: argparse.Namespace) -> None:
    print(f"{bandwidth(args.fraction):.{args.decimals}f}")


def _add_spectrum_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--spectrum-min", type=float, default=None,
        help=f"Lowest band center in Hz (default: {DEFAULT_SPECTRUM_MIN:g})"
    )
    parser.add_argument(
        "--spectrum-max", type=float, default=None,
        help=f"Highest band center in Hz (default: {DEFAULT_SPECTRUM_MAX:g})"
    )


def _add_decimals_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--decimals", type=int, default=DEFAULT_DECIMALS,
        help=f"Decimals in printed values (default: {DEFAULT_DECIMALS})"
    )


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    _add_decimals_arg(parser)
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write the band table to this CSV path"
    )
    parser.add_argument(
        "--plot", type=str, default=None,
        help="Save a band chart to this path (.png or .pdf)"
    )
    parser.add_argument(
        "--title", type=str, default=None,
        help="Band chart title"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print a summary line before the table"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its three subcommands."""
    parser = argparse.ArgumentParser(
        prog="octave-bands",
        description="Compute octave and fractional-octave frequency bands"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_oct = subparsers.add_parser("octaves", help="Octave bands around a center")
    p_oct.add_argument(
        "--fraction", type=parse_fraction, default=DEFAULT_FRACTION,
        help="Octave fraction, e.g. 1, 1/2, 1/3 (default: 1)"
    )
    p_oct.add_argument(
        "--center", type=float, default=None,
        help=f"Reference center frequency in Hz (default: {DEFAULT_CENTER:g})"
    )
    _add_spectrum_args(p_oct)
    _add_output_args(p_oct)
    p_oct.set_defaults(func=run_octaves)

    p_eq = subparsers.add_parser("equalizer", help="Fixed number of bands over a spectrum")
    p_eq.add_argument(
        "--bands", type=int, required=True,
        help="Number of bands"
    )
    _add_spectrum_args(p_eq)
    _add_output_args(p_eq)
    p_eq.set_defaults(func=run_equalizer)

    p_bw = subparsers.add_parser("bandwidth", help="Fractional bandwidth of a fraction")
    p_bw.add_argument(
        "--fraction", type=parse_fraction, default=DEFAULT_FRACTION,
        help="Octave fraction (default: 1)"
    )
    _add_decimals_arg(p_bw)
    p_bw.set_defaults(func=run_bandwidth)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
