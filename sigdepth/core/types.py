"""Typed configuration and result containers for sigdepth simulations."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

import pandas as pd

NORMALIZATION_MODES: tuple[str, ...] = ("simple", "adjusted")
SCORING_METHODS: tuple[str, ...] = ("mean", "gsva")
GSVA_KCDF_CHOICES: tuple[str | None, ...] = ("Gaussian", "Poisson", None)


@dataclass(frozen=True)
class SimulationConfig:
    """Fixed constants for one depth/normalization simulation run."""

    n_genes: int = 100
    high_depth: int = 1000
    low_depth: int = 250
    n_replicates: int = 3
    pseudo_count: float = 0.001
    n_signatures: int = 500
    signature_size: int = 10
    seed: int = 123
    gsva_kcdf: str | None = "Gaussian"
    n_jobs: int = 1
    normalization_modes: tuple[str, ...] = NORMALIZATION_MODES
    scoring_methods: tuple[str, ...] = SCORING_METHODS
    pair: tuple[str, str] = ("high_1", "low_1")

    def __post_init__(self) -> None:
        for name in (
            "n_genes",
            "high_depth",
            "low_depth",
            "n_replicates",
            "n_signatures",
            "signature_size",
            "n_jobs",
        ):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}.")
        if (
            not isinstance(self.pseudo_count, (int, float))
            or isinstance(self.pseudo_count, bool)
            or not self.pseudo_count > 0.0
        ):
            raise ValueError(
                f"pseudo_count must be > 0 to keep log2 defined, got {self.pseudo_count!r}."
            )
        unknown_modes = [m for m in self.normalization_modes if m not in NORMALIZATION_MODES]
        if unknown_modes or not self.normalization_modes:
            raise ValueError(
                f"normalization_modes must be a non-empty subset of {NORMALIZATION_MODES}, "
                f"got {self.normalization_modes!r}."
            )
        unknown_methods = [m for m in self.scoring_methods if m not in SCORING_METHODS]
        if unknown_methods or not self.scoring_methods:
            raise ValueError(
                f"scoring_methods must be a non-empty subset of {SCORING_METHODS}, "
                f"got {self.scoring_methods!r}."
            )
        if self.gsva_kcdf not in GSVA_KCDF_CHOICES:
            raise ValueError(
                f"gsva_kcdf must be one of {GSVA_KCDF_CHOICES}, got {self.gsva_kcdf!r}."
            )
        if len(self.pair) != 2:
            raise ValueError(f"pair must name exactly two samples, got {self.pair!r}.")
        samples = self.sample_names
        missing = [s for s in self.pair if s not in samples]
        if missing:
            raise ValueError(f"pair references unknown samples {missing}; known: {samples}.")

    @property
    def high_samples(self) -> list[str]:
        return [f"high_{i}" for i in range(1, self.n_replicates + 1)]

    @property
    def low_samples(self) -> list[str]:
        return [f"low_{i}" for i in range(1, self.n_replicates + 1)]

    @property
    def sample_names(self) -> list[str]:
        return self.high_samples + self.low_samples

    @property
    def depths(self) -> dict[str, int]:
        """Configured read depth per sample name."""
        out = {s: int(self.high_depth) for s in self.high_samples}
        out.update({s: int(self.low_depth) for s in self.low_samples})
        return out

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        for key in ("normalization_modes", "scoring_methods", "pair"):
            d[key] = list(d[key])
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown simulation config keys: {unknown}")
        kwargs = dict(data)
        for key in ("normalization_modes", "scoring_methods", "pair"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        return cls(**kwargs)


@dataclass(frozen=True)
class SignatureSet:
    """Immutable collection of named random gene signatures.

    Signatures are multisets: a gene may appear more than once within one
    signature and across signatures.
    """

    names: tuple[str, ...]
    genes: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if len(self.names) != len(self.genes):
            raise ValueError(
                f"SignatureSet names/genes length mismatch: {len(self.names)} != {len(self.genes)}."
            )
        if len(set(self.names)) != len(self.names):
            raise ValueError("SignatureSet names must be unique.")

    def __len__(self) -> int:
        return len(self.names)

    def items(self) -> list[tuple[str, tuple[str, ...]]]:
        return list(zip(self.names, self.genes))

    def as_dict(self) -> dict[str, list[str]]:
        return {name: list(genes) for name, genes in self.items()}

    def to_frame(self) -> pd.DataFrame:
        """Long-format table with one row per signature entry (duplicates kept)."""
        rows = [
            {"signature": name, "position": pos, "gene": gene}
            for name, genes in self.items()
            for pos, gene in enumerate(genes)
        ]
        return pd.DataFrame(rows, columns=["signature", "position", "gene"])


@dataclass(frozen=True)
class VariantResult:
    """Output of one (normalization mode, scoring method) pipeline variant."""

    mode: str
    method: str
    normalized: pd.DataFrame
    scores: pd.DataFrame
    concordance: pd.DataFrame
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.mode}_{self.method}"
