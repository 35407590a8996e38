"""High- vs low-depth scatter figures with an identity reference line."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from sigdepth.plotting.distributions import plot_sample_boxplots
from sigdepth.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle
from sigdepth.plotting.utils import save_figure


def shared_limits(x: np.ndarray, y: np.ndarray) -> tuple[float, float]:
    """Common [min, max] over both series, ignoring non-finite values."""
    both = np.concatenate([np.asarray(x, dtype=float), np.asarray(y, dtype=float)])
    both = both[np.isfinite(both)]
    if both.size == 0:
        raise ValueError("No finite values to derive axis limits from.")
    lo, hi = float(both.min()), float(both.max())
    if lo == hi:
        pad = 0.5 if lo == 0.0 else abs(lo) * 0.05
        lo, hi = lo - pad, hi + pad
    return lo, hi


def plot_depth_scatter(
    x: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
    *,
    xlabel: str = "high depth",
    ylabel: str = "low depth",
    title: str = "High vs low depth",
    ax: plt.Axes | None = None,
    out_png: Path | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> tuple[plt.Figure, plt.Axes]:
    """Scatter one high-depth sample against its paired low-depth sample.

    Both axes share the same [min, max] range and the y = x line is overlaid.
    """
    a = np.asarray(x, dtype=float).ravel()
    b = np.asarray(y, dtype=float).ravel()
    if a.size == 0 or b.size == 0:
        raise ValueError("Scatter series must be non-empty.")
    if a.size != b.size:
        raise ValueError(f"Scatter series length mismatch: {a.size} != {b.size}.")
    lo, hi = shared_limits(a, b)

    if ax is None:
        fig, ax = plt.subplots(figsize=style.figsize_scatter)
    else:
        fig = ax.figure
    ax.scatter(
        a,
        b,
        s=style.s_point,
        alpha=style.alpha_point,
        color=style.high_color,
        linewidths=0.0,
    )
    ax.plot([lo, hi], [lo, hi], linestyle="--", color=style.identity_color, linewidth=1.0)
    ax.set_xlim(lo, hi)
    ax.set_ylim(lo, hi)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(alpha=0.25, linewidth=0.6)

    if out_png is not None:
        fig.tight_layout()
        save_figure(fig, Path(out_png), style=style)
    return fig, ax


def plot_variant_panel(
    scores: pd.DataFrame,
    pair: tuple[str, str],
    *,
    title: str,
    out_png: Path | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> plt.Figure:
    """Boxplot of all samples next to the paired high/low scatter."""
    high, low = pair
    fig, (ax_box, ax_sc) = plt.subplots(1, 2, figsize=style.figsize_panel)
    plot_sample_boxplots(scores, title="Per-sample distribution", ax=ax_box, style=style)
    plot_depth_scatter(
        scores[high],
        scores[low],
        xlabel=high,
        ylabel=low,
        title=f"{high} vs {low}",
        ax=ax_sc,
        style=style,
    )
    fig.suptitle(title)
    fig.tight_layout()
    if out_png is not None:
        save_figure(fig, Path(out_png), style=style, bbox_tight=True)
    return fig
