"""
Band chart: draw octave bands on a logarithmic frequency axis.

Each band is shaded between its edges, alternating colors so adjacent
bands stay distinguishable, and its center is marked with a vertical line.
"""

from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from ..bands.table import bands_to_array


def plot_bands(
    bands: Sequence[Sequence[float]],
    output: Optional[Path] = None,
    dpi: int = 150,
    show: bool = False,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Plot a band list.

    Parameters
    ----------
    bands : list of Band
        Bands to draw.
    output : Path, optional
        Save figure to this path. Supports .png and .pdf.
    dpi : int
        Resolution for PNG output.
    show : bool
        Display plot interactively.
    title : str, optional
        Figure title.

    Returns
    -------
    matplotlib.figure.Figure

    Raises
    ------
    ValueError
        If ``bands`` is empty.
    """
    arr = bands_to_array(bands)
    if len(arr) == 0:
        raise ValueError("Cannot plot an empty band list")

    fig, ax = plt.subplots(figsize=(10, 3))

    colors = ("tab:blue", "tab:orange")
    for i, (low, center, high) in enumerate(arr):
        ax.axvspan(low, high, alpha=0.3, color=colors[i % 2])
        ax.axvline(x=center, color="k", linewidth=0.8)

    ax.set_xscale("log")
    ax.set_xlim(arr[0, 0], arr[-1, 2])
    ax.set_yticks([])
    ax.set_xlabel("Frequency (Hz)", fontsize=12)
    if title:
        ax.set_title(title, fontsize=12)

    # Label centers only when they stay readable
    if len(arr) <= 16:
        ax.set_xticks(arr[:, 1])
        ax.set_xticklabels([f"{c:g}" for c in np.round(arr[:, 1], 1)], rotation=45)
        ax.minorticks_off()

    fig.tight_layout()

    if output is not None:
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=dpi, bbox_inches="tight")
        print(f"Saved: {output}")

        # Also save PDF if primary output is PNG
        if output.suffix.lower() == ".png":
            pdf_path = output.with_suffix(".pdf")
            fig.savefig(pdf_path, bbox_inches="tight")
            print(f"Saved: {pdf_path}")

    if show:
        plt.show()

    return fig
