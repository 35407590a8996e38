"""Categorical read sampling for simulated depth regimes."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from sigdepth.core.counts import build_count_table, check_depths
from sigdepth.core.types import SimulationConfig


def rng_from_seed(seed: int) -> np.random.Generator:
    """Construct a NumPy Generator from seed."""
    return np.random.default_rng(int(seed))


def make_gene_vocabulary(n_genes: int) -> list[str]:
    """Return the fixed gene identifiers ``GENE1`` .. ``GENE<n_genes>``."""
    if int(n_genes) < 1:
        raise ValueError(f"n_genes must be >= 1, got {n_genes}.")
    return [f"GENE{i}" for i in range(1, int(n_genes) + 1)]


def uniform_probabilities(n_genes: int) -> np.ndarray:
    if int(n_genes) < 1:
        raise ValueError(f"n_genes must be >= 1, got {n_genes}.")
    return np.full(int(n_genes), 1.0 / float(n_genes), dtype=float)


def sample_draws(
    genes: Sequence[str],
    n_draws: int,
    probs: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw ``n_draws`` gene ids independently with replacement.

    Args:
        genes: Gene vocabulary.
        n_draws: Number of simulated reads.
        probs: Categorical probability per gene (same length as ``genes``).
        rng: Explicit random stream; consumed in call order.

    Returns:
        Array of ``n_draws`` gene ids.
    """
    vocab = np.asarray(list(genes), dtype=object)
    if vocab.size == 0:
        raise ValueError("genes must contain at least one identifier.")
    if int(n_draws) != n_draws or int(n_draws) < 0:
        raise ValueError(f"n_draws must be a non-negative integer, got {n_draws!r}.")
    p = np.asarray(probs, dtype=float).ravel()
    if p.size != vocab.size:
        raise ValueError(
            f"probs length mismatch: expected {vocab.size}, got {p.size}."
        )
    if np.any(p < 0.0) or not np.isclose(float(p.sum()), 1.0):
        raise ValueError("probs must be non-negative and sum to 1.")
    return rng.choice(vocab, size=int(n_draws), replace=True, p=p)


def simulate_depth(
    genes: Sequence[str],
    depth: int,
    n_replicates: int,
    probs: np.ndarray,
    rng: np.random.Generator,
    label: str,
) -> dict[str, np.ndarray]:
    """Simulate ``n_replicates`` samples of ``depth`` reads named ``<label>_<i>``."""
    return {
        f"{label}_{i}": sample_draws(genes, depth, probs, rng)
        for i in range(1, int(n_replicates) + 1)
    }


def simulate_draws(
    config: SimulationConfig,
    rng: np.random.Generator,
    genes: Sequence[str] | None = None,
) -> dict[str, np.ndarray]:
    """Simulate all high-depth replicates, then all low-depth replicates."""
    vocab = list(genes) if genes is not None else make_gene_vocabulary(config.n_genes)
    probs = uniform_probabilities(len(vocab))
    draws = simulate_depth(vocab, config.high_depth, config.n_replicates, probs, rng, "high")
    draws.update(
        simulate_depth(vocab, config.low_depth, config.n_replicates, probs, rng, "low")
    )
    return draws


def simulate_counts(
    config: SimulationConfig,
    rng: np.random.Generator | None = None,
) -> pd.DataFrame:
    """Simulate draws for every sample and tabulate them into a count table.

    Without an explicit ``rng`` a fresh stream is seeded from ``config.seed``,
    so two calls with the same config return identical tables.
    """
    stream = rng if rng is not None else rng_from_seed(config.seed)
    genes = make_gene_vocabulary(config.n_genes)
    counts = build_count_table(simulate_draws(config, stream, genes), genes)
    check_depths(counts, config.depths)
    return counts
