"""Tabulation of simulated reads into zero-filled gene count tables."""

from __future__ import annotations

from collections import Counter
from typing import Mapping, Sequence

import numpy as np
import pandas as pd


def tabulate_draws(draws: Sequence[str] | np.ndarray, genes: Sequence[str]) -> pd.Series:
    """Count draws per gene, keeping unobserved vocabulary genes at zero."""
    vocab = list(genes)
    tally = Counter(str(g) for g in np.asarray(draws, dtype=object).ravel())
    unknown = sorted(set(tally) - set(vocab))
    if unknown:
        raise ValueError(f"Draws contain genes outside the vocabulary: {unknown[:5]}")
    return pd.Series(
        [int(tally.get(g, 0)) for g in vocab], index=pd.Index(vocab, name="gene"), dtype="int64"
    )


def build_count_table(
    draws_by_sample: Mapping[str, Sequence[str] | np.ndarray], genes: Sequence[str]
) -> pd.DataFrame:
    """Return a genes x samples count table, columns in insertion order."""
    if not draws_by_sample:
        raise ValueError("draws_by_sample must contain at least one sample.")
    columns = {name: tabulate_draws(draws, genes) for name, draws in draws_by_sample.items()}
    table = pd.DataFrame(columns)
    table.index.name = "gene"
    table.columns.name = "sample"
    return table


def check_depths(counts: pd.DataFrame, depths: Mapping[str, int]) -> None:
    """Raise if any sample's column sum differs from its configured depth."""
    for sample, depth in depths.items():
        if sample not in counts.columns:
            raise KeyError(f"Sample '{sample}' missing from count table.")
        total = int(counts[sample].sum())
        if total != int(depth):
            raise ValueError(
                f"Sample '{sample}' counts sum to {total}, expected depth {int(depth)}."
            )
