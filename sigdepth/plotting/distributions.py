"""Per-sample distribution figures for signature score tables."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from sigdepth.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle
from sigdepth.plotting.utils import save_figure


def _sample_color(sample: str, style: PlotStyle) -> str:
    return style.high_color if str(sample).startswith("high") else style.low_color


def plot_sample_boxplots(
    scores: pd.DataFrame,
    *,
    samples: Sequence[str] | None = None,
    title: str = "Signature scores per sample",
    ylabel: str = "score",
    ax: plt.Axes | None = None,
    out_png: Path | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> tuple[plt.Figure, plt.Axes]:
    """Box-and-whisker summary of each sample's values across signatures.

    High-depth samples are drawn in ``style.high_color`` and low-depth samples
    in ``style.low_color``. NaN scores are dropped per sample.
    """
    cols = list(samples) if samples is not None else list(scores.columns)
    if not cols:
        raise ValueError("At least one sample column is required.")
    missing = [c for c in cols if c not in scores.columns]
    if missing:
        raise KeyError(f"Samples missing from score table: {missing}")
    data = []
    for col in cols:
        v = scores[col].to_numpy(dtype=float)
        v = v[np.isfinite(v)]
        if v.size == 0:
            raise ValueError(f"Sample '{col}' has no finite values to plot.")
        data.append(v)

    if ax is None:
        fig, ax = plt.subplots(figsize=style.figsize_boxplot)
    else:
        fig = ax.figure
    bp = ax.boxplot(data, patch_artist=True, widths=0.6)
    for patch, col in zip(bp["boxes"], cols):
        patch.set_facecolor(_sample_color(col, style))
        patch.set_alpha(0.75)
    for median in bp["medians"]:
        median.set_color("black")
    ax.set_xticks(np.arange(1, len(cols) + 1))
    ax.set_xticklabels(cols, rotation=30, ha="right")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(axis="y", alpha=0.25, linewidth=0.6)

    if out_png is not None:
        fig.tight_layout()
        save_figure(fig, Path(out_png), style=style)
    return fig, ax
