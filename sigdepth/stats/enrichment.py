"""Signature scoring dispatch, including rank-based GSVA enrichment via gseapy."""

from __future__ import annotations

import logging

import gseapy
import pandas as pd

from sigdepth.core.signatures import signature_means
from sigdepth.core.types import SCORING_METHODS, SignatureSet

DEFAULT_GSVA_SEED = 123


def _unique_gene_sets(signatures: SignatureSet) -> dict[str, list[str]]:
    # GSVA scores sets, not multisets.
    return {name: list(dict.fromkeys(genes)) for name, genes in signatures.items()}


def gsva_scores(
    values: pd.DataFrame,
    signatures: SignatureSet,
    *,
    kcdf: str | None = "Gaussian",
    n_jobs: int = 1,
    seed: int = DEFAULT_GSVA_SEED,
    logger: logging.Logger | None = None,
) -> pd.DataFrame:
    """Single-sample GSVA enrichment scores per signature.

    Args:
        values: genes x samples normalized expression matrix (the background).
        signatures: Gene signatures to score.
        kcdf: Kernel for the per-gene expression CDF ("Gaussian" for
            continuous log values, "Poisson" for counts, None for ranks only).
        n_jobs: Thread hint forwarded to gseapy.
        seed: Seed forwarded to gseapy.
        logger: Optional logger for dropped-signature warnings.

    Returns:
        signatures x samples float table in signature and sample order.
    """
    if values.empty:
        raise ValueError("values must be a non-empty genes x samples matrix.")
    if len(signatures) == 0:
        raise ValueError("signatures must contain at least one signature.")
    data = values.copy()
    data.index = data.index.astype(str)
    gene_sets = _unique_gene_sets(signatures)
    max_size = max(len(g) for g in gene_sets.values())

    res = gseapy.gsva(
        data=data,
        gene_sets=gene_sets,
        outdir=None,
        kcdf=kcdf,
        min_size=1,
        max_size=max_size,
        threads=int(n_jobs),
        seed=int(seed),
        verbose=False,
    )
    long_df = res.res2d
    wide = long_df.pivot(index="Term", columns="Name", values="ES")
    out = wide.reindex(index=list(signatures.names), columns=list(values.columns)).astype(float)
    out.index.name = "signature"
    out.columns.name = values.columns.name

    n_missing = int(out.isna().all(axis=1).sum())
    if n_missing and logger is not None:
        logger.warning("GSVA returned no score for %s signatures.", n_missing)
    return out


def score_signatures(
    values: pd.DataFrame,
    signatures: SignatureSet,
    method: str = "mean",
    *,
    kcdf: str | None = "Gaussian",
    n_jobs: int = 1,
    seed: int = DEFAULT_GSVA_SEED,
    logger: logging.Logger | None = None,
) -> pd.DataFrame:
    """Score signatures by duplicate-weighted ``mean`` or ``gsva`` enrichment."""
    if method not in SCORING_METHODS:
        raise ValueError(f"Unknown scoring method '{method}'. Use one of {SCORING_METHODS}.")
    if method == "mean":
        return signature_means(values, signatures)
    return gsva_scores(
        values, signatures, kcdf=kcdf, n_jobs=n_jobs, seed=seed, logger=logger
    )
