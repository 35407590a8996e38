"""Agreement metrics between paired high- and low-depth samples."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np
import pandas as pd
from scipy.stats import pearsonr, spearmanr


def _paired_arrays(
    x: Sequence[float] | np.ndarray, y: Sequence[float] | np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(x, dtype=float).ravel()
    b = np.asarray(y, dtype=float).ravel()
    if a.size == 0 or b.size == 0:
        raise ValueError("Paired series must be non-empty.")
    if a.size != b.size:
        raise ValueError(f"Paired series length mismatch: {a.size} != {b.size}.")
    return a, b


def _safe_corr(fn, a: np.ndarray, b: np.ndarray) -> float:
    # Correlation is undefined for fewer than two points or a constant series.
    if a.size < 2 or np.ptp(a) == 0.0 or np.ptp(b) == 0.0:
        return float("nan")
    return float(fn(a, b)[0])


def pair_concordance(
    x: Sequence[float] | np.ndarray, y: Sequence[float] | np.ndarray
) -> dict[str, Any]:
    """Pearson, Spearman, RMSD and mean difference (x - y) for paired values."""
    a, b = _paired_arrays(x, y)
    finite = np.isfinite(a) & np.isfinite(b)
    a, b = a[finite], b[finite]
    n = int(a.size)
    if n == 0:
        return {
            "n": 0,
            "pearson_r": float("nan"),
            "spearman_rho": float("nan"),
            "rmsd": float("nan"),
            "mean_diff": float("nan"),
        }
    diff = a - b
    return {
        "n": n,
        "pearson_r": _safe_corr(pearsonr, a, b),
        "spearman_rho": _safe_corr(spearmanr, a, b),
        "rmsd": math.sqrt(float(np.mean(diff * diff))),
        "mean_diff": float(np.mean(diff)),
    }


def replicate_concordance(
    scores: pd.DataFrame,
    high_samples: Sequence[str],
    low_samples: Sequence[str],
) -> pd.DataFrame:
    """Concordance for each ``high_i`` / ``low_i`` replicate pair."""
    if len(high_samples) != len(low_samples):
        raise ValueError("high_samples and low_samples must pair up one-to-one.")
    records = []
    for high, low in zip(high_samples, low_samples):
        for col in (high, low):
            if col not in scores.columns:
                raise KeyError(f"Sample '{col}' missing from score table.")
        row = {"high_sample": high, "low_sample": low}
        row.update(pair_concordance(scores[high], scores[low]))
        records.append(row)
    return pd.DataFrame(
        records,
        columns=[
            "high_sample",
            "low_sample",
            "n",
            "pearson_r",
            "spearman_rho",
            "rmsd",
            "mean_diff",
        ],
    )
