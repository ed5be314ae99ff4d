"""
Plotting module.

Implements:
- Band chart on a logarithmic frequency axis with matplotlib
"""

from .band_chart import plot_bands

__all__ = ["plot_bands"]
