"""Random gene signatures and mean-based signature scoring."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from sigdepth.core.types import SignatureSet


def draw_signatures(
    genes: Sequence[str],
    n_signatures: int,
    size: int,
    rng: np.random.Generator,
) -> SignatureSet:
    """Draw ``n_signatures`` signatures of ``size`` genes, each with replacement."""
    vocab = np.asarray(list(genes), dtype=object)
    if vocab.size == 0:
        raise ValueError("genes must contain at least one identifier.")
    if int(n_signatures) < 1 or int(size) < 1:
        raise ValueError("n_signatures and size must both be >= 1.")
    names = tuple(f"sig{i}" for i in range(1, int(n_signatures) + 1))
    members = tuple(
        tuple(str(g) for g in rng.choice(vocab, size=int(size), replace=True))
        for _ in names
    )
    return SignatureSet(names=names, genes=members)


def signature_means(values: pd.DataFrame, signatures: SignatureSet) -> pd.DataFrame:
    """Mean normalized value per signature and sample.

    Entries are averaged as listed, so a gene appearing twice in a signature
    carries twice the weight of a gene appearing once.
    """
    if len(signatures) == 0:
        raise ValueError("signatures must contain at least one signature.")
    gene_pos = {g: i for i, g in enumerate(values.index)}
    X = values.to_numpy(dtype=float)
    rows = np.empty((len(signatures), X.shape[1]), dtype=float)
    for k, (name, members) in enumerate(signatures.items()):
        missing = [g for g in members if g not in gene_pos]
        if missing:
            raise KeyError(f"Signature '{name}' references genes absent from table: {missing}")
        idx = np.fromiter((gene_pos[g] for g in members), dtype=int, count=len(members))
        rows[k] = X[idx].mean(axis=0)
    return pd.DataFrame(
        rows,
        index=pd.Index(signatures.names, name="signature"),
        columns=values.columns.copy(),
    )
