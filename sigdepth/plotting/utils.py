"""Figure writer shared by the sigdepth figure factories."""

from __future__ import annotations

from pathlib import Path

import matplotlib.figure
import matplotlib.pyplot as plt

from sigdepth.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle


def save_figure(
    fig: matplotlib.figure.Figure,
    out_path: Path,
    *,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    bbox_tight: bool = False,
) -> Path:
    """Write ``fig`` at the style's dpi on a white background, then close it.

    ``bbox_tight`` crops to the drawn artists, which keeps a suptitle above
    side-by-side panels inside the image.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    save_kwargs: dict[str, object] = {"dpi": style.dpi, "facecolor": "white"}
    if bbox_tight:
        save_kwargs["bbox_inches"] = "tight"
        save_kwargs["pad_inches"] = 0.05
    fig.savefig(out, **save_kwargs)
    plt.close(fig)
    return out
