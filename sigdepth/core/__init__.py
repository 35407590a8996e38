"""Core simulation subpackage."""

from sigdepth.core.counts import build_count_table, check_depths, tabulate_draws
from sigdepth.core.normalize import (
    center_rows,
    log_relative_abundance,
    normalize_counts,
    quantile_normalize,
)
from sigdepth.core.sampling import (
    make_gene_vocabulary,
    rng_from_seed,
    sample_draws,
    simulate_counts,
    simulate_depth,
    simulate_draws,
    uniform_probabilities,
)
from sigdepth.core.signatures import draw_signatures, signature_means
from sigdepth.core.types import (
    NORMALIZATION_MODES,
    SCORING_METHODS,
    SignatureSet,
    SimulationConfig,
    VariantResult,
)

__all__ = [
    "NORMALIZATION_MODES",
    "SCORING_METHODS",
    "SimulationConfig",
    "SignatureSet",
    "VariantResult",
    "make_gene_vocabulary",
    "uniform_probabilities",
    "rng_from_seed",
    "sample_draws",
    "simulate_depth",
    "simulate_draws",
    "simulate_counts",
    "tabulate_draws",
    "build_count_table",
    "check_depths",
    "log_relative_abundance",
    "quantile_normalize",
    "center_rows",
    "normalize_counts",
    "draw_signatures",
    "signature_means",
]
