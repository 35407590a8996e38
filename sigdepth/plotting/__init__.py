"""Plotting API for sigdepth simulation figures."""

from sigdepth.plotting.distributions import plot_sample_boxplots
from sigdepth.plotting.pairs import plot_depth_scatter, plot_variant_panel, shared_limits
from sigdepth.plotting.styles import (
    DEFAULT_PLOT_STYLE,
    PlotStyle,
    apply_plot_style,
    plot_style_dict,
)
from sigdepth.plotting.utils import save_figure

__all__ = [
    "PlotStyle",
    "DEFAULT_PLOT_STYLE",
    "apply_plot_style",
    "plot_style_dict",
    "save_figure",
    "plot_sample_boxplots",
    "plot_depth_scatter",
    "plot_variant_panel",
    "shared_limits",
]
