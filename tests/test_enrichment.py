from __future__ import annotations

import logging
import types

import numpy as np
import pandas as pd
import pytest

from sigdepth.core.normalize import normalize_counts
from sigdepth.core.types import SignatureSet, SimulationConfig
from sigdepth.pipeline.simulation import simulate_inputs
from sigdepth.stats import enrichment
from sigdepth.stats.enrichment import gsva_scores, score_signatures


def _fake_gsva(calls: list[dict]):
    def _gsva(data, gene_sets, **kwargs):
        calls.append({"data": data, "gene_sets": gene_sets, **kwargs})
        rows = []
        for term, genes in gene_sets.items():
            for sample in data.columns:
                rows.append(
                    {"Name": sample, "Term": term, "ES": float(data.loc[genes, sample].mean())}
                )
        # Shuffled order to check reindexing.
        return types.SimpleNamespace(res2d=pd.DataFrame(rows[::-1]))

    return _gsva


@pytest.fixture
def values() -> pd.DataFrame:
    return pd.DataFrame(
        {"high_1": [1.0, 2.0, 3.0], "low_1": [0.5, 0.0, -1.0]},
        index=["GENE1", "GENE2", "GENE3"],
    )


def test_gsva_scores_contract(monkeypatch, values):
    calls: list[dict] = []
    monkeypatch.setattr(enrichment.gseapy, "gsva", _fake_gsva(calls))
    sigs = SignatureSet(names=("sig1", "sig2"), genes=(("GENE1", "GENE1", "GENE3"), ("GENE2",)))

    out = gsva_scores(values, sigs, kcdf="Gaussian", n_jobs=4, seed=9)

    assert list(out.index) == ["sig1", "sig2"]
    assert list(out.columns) == ["high_1", "low_1"]
    assert (out.dtypes == np.float64).all()
    assert np.isclose(out.loc["sig1", "high_1"], 2.0)

    call = calls[0]
    assert call["gene_sets"] == {"sig1": ["GENE1", "GENE3"], "sig2": ["GENE2"]}
    assert call["kcdf"] == "Gaussian"
    assert call["threads"] == 4
    assert call["seed"] == 9
    assert call["min_size"] == 1


def test_gsva_missing_signature_is_nan_and_logged(monkeypatch, values, caplog):
    def _partial(data, gene_sets, **kwargs):
        return types.SimpleNamespace(
            res2d=pd.DataFrame(
                [{"Name": s, "Term": "sig1", "ES": 0.1} for s in data.columns]
            )
        )

    monkeypatch.setattr(enrichment.gseapy, "gsva", _partial)
    sigs = SignatureSet(names=("sig1", "sig2"), genes=(("GENE1",), ("GENE2",)))

    caplog.set_level(logging.WARNING)
    out = gsva_scores(values, sigs, logger=logging.getLogger("test"))
    assert out.loc["sig2"].isna().all()
    assert "no score for 1 signatures" in caplog.text


def test_score_signatures_dispatch(monkeypatch, values):
    sigs = SignatureSet(names=("sig1",), genes=(("GENE1", "GENE2"),))
    mean = score_signatures(values, sigs, "mean")
    assert np.isclose(mean.loc["sig1", "high_1"], 1.5)

    calls: list[dict] = []
    monkeypatch.setattr(enrichment.gseapy, "gsva", _fake_gsva(calls))
    score_signatures(values, sigs, "gsva", kcdf=None)
    assert calls[0]["kcdf"] is None

    with pytest.raises(ValueError, match="Unknown scoring method"):
        score_signatures(values, sigs, "ssgsea")


def test_gsva_rejects_empty_matrix():
    sigs = SignatureSet(names=("sig1",), genes=(("GENE1",),))
    with pytest.raises(ValueError, match="non-empty"):
        gsva_scores(pd.DataFrame(), sigs)


@pytest.fixture(scope="module")
def default_inputs():
    cfg = SimulationConfig()
    counts, sigs = simulate_inputs(cfg)
    return cfg, counts, sigs


@pytest.mark.parametrize("mode", ["simple", "adjusted"])
def test_real_gsva_scores_every_signature(default_inputs, mode):
    cfg, counts, sigs = default_inputs
    values = normalize_counts(counts, mode=mode, depths=cfg.depths)
    out = gsva_scores(values, sigs, kcdf=cfg.gsva_kcdf, n_jobs=1, seed=cfg.seed)
    assert out.shape == (500, 6)
    assert list(out.index) == list(sigs.names)
    assert list(out.columns) == cfg.sample_names
    assert not out.isna().any().any()
    assert np.all(np.abs(out.to_numpy()) <= 1.0)


def test_real_gsva_independent_of_thread_count(default_inputs):
    cfg, counts, sigs = default_inputs
    values = normalize_counts(counts, mode="adjusted", depths=cfg.depths)
    single = gsva_scores(values, sigs, n_jobs=1, seed=cfg.seed)
    multi = gsva_scores(values, sigs, n_jobs=4, seed=cfg.seed)
    assert np.allclose(single.to_numpy(), multi.to_numpy())


def test_real_gsva_accepts_rank_only_kernel(default_inputs):
    cfg, counts, sigs = default_inputs
    values = normalize_counts(counts, mode="simple", depths=cfg.depths)
    out = gsva_scores(values, sigs, kcdf=None, seed=cfg.seed)
    assert out.shape == (500, 6)
    assert not out.isna().any().any()
