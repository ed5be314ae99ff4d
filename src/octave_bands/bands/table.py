"""
Band table utilities: array conversion, rounding, summaries and CSV I/O.
"""

import csv
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from ..config import DEFAULT_DECIMALS
from .octaves import Band


CSV_COLUMNS = ["low", "center", "high"]


def bands_to_array(bands: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Convert bands to a numpy array of shape (N, 3).

    Parameters
    ----------
    bands : list of Band
        The bands.

    Returns
    -------
    np.ndarray
        Array where each row is [low, center, high].
    """
    if len(bands) == 0:
        return np.empty((0, 3))
    return np.array([[b[0], b[1], b[2]] for b in bands], dtype=float)


def round_bands(
    bands: Sequence[Sequence[float]],
    decimals: int = DEFAULT_DECIMALS,
) -> List[Band]:
    """Round every frequency of every band to ``decimals`` places."""
    return [Band(*(round(float(v), decimals) for v in b)) for b in bands]


def band_centers(bands: Sequence[Sequence[float]]) -> np.ndarray:
    """Return the center frequencies as an array."""
    return bands_to_array(bands)[:, 1]


def fractional_bandwidths(bands: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Return (high - low) / center for each band.

    For bands produced by a single ``octaves`` or ``equalizer`` call all
    entries are equal up to rounding.
    """
    arr = bands_to_array(bands)
    return (arr[:, 2] - arr[:, 0]) / arr[:, 1]


def get_band_info(bands: Sequence[Sequence[float]]) -> dict:
    """
    Summarize a band list.

    Parameters
    ----------
    bands : list of Band
        A non-empty band list in ascending order.

    Returns
    -------
    dict
        Dictionary with 'n_bands', 'first_center', 'last_center',
        'low_edge', 'high_edge', 'bandwidth' keys.

    Raises
    ------
    ValueError
        If ``bands`` is empty.
    """
    if len(bands) == 0:
        raise ValueError("Cannot summarize an empty band list")

    arr = bands_to_array(bands)
    return {
        'n_bands': len(arr),
        'first_center': float(arr[0, 1]),
        'last_center': float(arr[-1, 1]),
        'low_edge': float(arr[0, 0]),
        'high_edge': float(arr[-1, 2]),
        'bandwidth': float(np.mean(fractional_bandwidths(bands))),
    }


def format_band_table(
    bands: Sequence[Sequence[float]],
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """
    Format bands as an indexed, right-aligned text table.

    >>> print(format_band_table([(707.1068, 1000.0, 1414.2136)], decimals=1))
    idx    low  center    high
      0  707.1  1000.0  1414.2
    """
    rows = [
        [str(i)] + [f"{v:.{decimals}f}" for v in b]
        for i, b in enumerate(round_bands(bands, decimals))
    ]
    header = ["idx"] + CSV_COLUMNS
    widths = [
        max([len(header[col])] + [len(r[col]) for r in rows])
        for col in range(len(header))
    ]

    lines = ["  ".join(h.rjust(w) for h, w in zip(header, widths))]
    for r in rows:
        lines.append("  ".join(v.rjust(w) for v, w in zip(r, widths)))
    return "\n".join(lines)


# =============================================================================
# CSV I/O
# =============================================================================

def write_bands_csv(
    bands: Sequence[Sequence[float]],
    output_path: Union[str, Path],
    decimals: Optional[int] = None,
) -> Path:
    """
    Write bands to a CSV file with a ``low,center,high`` header.

    Parameters
    ----------
    bands : list of Band
        The bands to write.
    output_path : str or Path
        Destination file. Parent directories are created.
    decimals : int, optional
        Round values before writing. Default writes full precision.

    Returns
    -------
    Path
        The path written.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if decimals is not None:
        bands = round_bands(bands, decimals)

    with open(output_path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for b in bands:
            writer.writerow([repr(float(v)) for v in b])

    return output_path


def load_bands_csv(csv_path: Union[str, Path]) -> List[Band]:
    """
    Load bands written by ``write_bands_csv``.

    Returns
    -------
    list of Band
    """
    bands = []
    with open(csv_path, 'r') as f:
        reader = csv.DictReader(f)
        for row in reader:
            bands.append(Band(
                float(row['low']),
                float(row['center']),
                float(row['high']),
            ))
    return bands
