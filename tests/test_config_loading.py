from __future__ import annotations

import json
from pathlib import Path

import pytest

from sigdepth.config import load_json_config, load_simulation_config
from sigdepth.core.types import SimulationConfig


def test_project_config_matches_defaults():
    root = Path(__file__).resolve().parents[1]
    cfg = load_simulation_config(root / "configs" / "sigdepth_default.json")
    assert cfg == SimulationConfig()


def test_defaults_restate_fixed_constants():
    cfg = SimulationConfig()
    assert cfg.n_genes == 100
    assert (cfg.high_depth, cfg.low_depth, cfg.n_replicates) == (1000, 250, 3)
    assert cfg.pseudo_count == 0.001
    assert (cfg.n_signatures, cfg.signature_size, cfg.seed) == (500, 10, 123)
    assert cfg.depths["high_3"] == 1000
    assert cfg.depths["low_1"] == 250


def test_overrides_and_none_passthrough(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"seed": 5, "scoring_methods": ["mean"]}), encoding="utf-8")
    cfg = load_simulation_config(path, seed=None, n_jobs=2)
    assert cfg.seed == 5
    assert cfg.n_jobs == 2
    assert cfg.scoring_methods == ("mean",)
    assert SimulationConfig.from_dict(cfg.to_dict()) == cfg


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown simulation config keys"):
        SimulationConfig.from_dict({"depth": 10})


@pytest.mark.parametrize(
    "kwargs, match",
    [
        ({"pseudo_count": 0.0}, "pseudo_count"),
        ({"low_depth": 0}, "low_depth"),
        ({"normalization_modes": ("tmm",)}, "normalization_modes"),
        ({"scoring_methods": ()}, "scoring_methods"),
        ({"pair": ("high_1", "low_4")}, "unknown samples"),
        ({"gsva_kcdf": "Epanechnikov"}, "gsva_kcdf"),
        ({"n_signatures": None}, "n_signatures"),
        ({"n_replicates": True}, "n_replicates"),
        ({"signature_size": 2.5}, "signature_size"),
        ({"pseudo_count": None}, "pseudo_count"),
    ],
)
def test_invalid_config_values(kwargs, match):
    with pytest.raises(ValueError, match=match):
        SimulationConfig(**kwargs)


def test_invalid_json_reports_line_and_column(tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"a": 1,}\n', encoding="utf-8")
    with pytest.raises(ValueError, match=r"line \d+, column \d+"):
        load_json_config(bad)


def test_non_object_json_config_rejected(tmp_path: Path):
    bad = tmp_path / "list.json"
    bad.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError, match="expected JSON object"):
        load_json_config(bad)


def test_non_json_extension_rejected(tmp_path: Path):
    bad = tmp_path / "cfg.yaml"
    bad.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="Use a .json config file"):
        load_json_config(bad)


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_json_config(tmp_path / "nope.json")


def test_null_size_in_json_reports_value_error(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"high_depth": None}), encoding="utf-8")
    with pytest.raises(ValueError, match="high_depth must be a positive integer"):
        load_simulation_config(path)
