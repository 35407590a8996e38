"""Normalization pipelines for simulated count tables.

Two modes are supported:

- ``simple``: ``log2(count / depth + pseudo_count)`` per entry.
- ``adjusted``: the simple matrix, quantile normalized across samples and then
  centered per gene (background subtraction).

Every transform returns a new DataFrame and leaves its input untouched.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np
import pandas as pd

from sigdepth.core.types import NORMALIZATION_MODES

DEFAULT_PSEUDO_COUNT = 0.001


def log_relative_abundance(
    counts: pd.DataFrame,
    depths: Mapping[str, int] | None = None,
    pseudo_count: float = DEFAULT_PSEUDO_COUNT,
) -> pd.DataFrame:
    """Log2 relative frequency with a pseudo-count.

    Args:
        counts: genes x samples non-negative counts.
        depths: Read depth per sample; defaults to each column's sum.
        pseudo_count: Strictly positive offset so zero counts stay finite.

    Returns:
        genes x samples float table.
    """
    if not float(pseudo_count) > 0.0:
        raise ValueError(f"pseudo_count must be > 0, got {pseudo_count!r}.")
    values = counts.to_numpy(dtype=float)
    if values.size and np.any(values < 0):
        raise ValueError("counts must be non-negative.")
    if depths is None:
        depth_vec = values.sum(axis=0)
    else:
        depth_vec = np.asarray([float(depths[s]) for s in counts.columns], dtype=float)
    if np.any(depth_vec <= 0):
        raise ValueError("Every sample needs a positive depth.")
    out = np.log2(values / depth_vec[None, :] + float(pseudo_count))
    return pd.DataFrame(out, index=counts.index.copy(), columns=counts.columns.copy())


def quantile_normalize(values: pd.DataFrame) -> pd.DataFrame:
    """Give every sample (column) the same marginal distribution.

    Each column is stably sorted, the across-sample mean is taken per rank and
    written back at the original gene positions, so every sorted column is the
    identical rank-mean vector. Ties are broken by row order.
    """
    X = values.to_numpy(dtype=float)
    if X.size == 0:
        raise ValueError("values must be non-empty.")
    order = np.argsort(X, axis=0, kind="mergesort")
    rank_means = np.take_along_axis(X, order, axis=0).mean(axis=1)
    out = np.empty_like(X)
    for j in range(X.shape[1]):
        out[order[:, j], j] = rank_means
    return pd.DataFrame(out, index=values.index.copy(), columns=values.columns.copy())


def center_rows(values: pd.DataFrame) -> pd.DataFrame:
    """Subtract each gene's across-sample mean."""
    return values.sub(values.mean(axis=1), axis=0)


def normalize_counts(
    counts: pd.DataFrame,
    mode: str = "simple",
    depths: Mapping[str, int] | None = None,
    pseudo_count: float = DEFAULT_PSEUDO_COUNT,
) -> pd.DataFrame:
    """Run the ``simple`` or ``adjusted`` normalization pipeline."""
    if mode not in NORMALIZATION_MODES:
        raise ValueError(f"Unknown normalization mode '{mode}'. Use one of {NORMALIZATION_MODES}.")
    logged = log_relative_abundance(counts, depths=depths, pseudo_count=pseudo_count)
    if mode == "simple":
        return logged
    return center_rows(quantile_normalize(logged))
