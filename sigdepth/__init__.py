"""sigdepth public API."""

from sigdepth._version import __version__
from sigdepth.core.normalize import normalize_counts
from sigdepth.core.sampling import simulate_counts
from sigdepth.core.signatures import draw_signatures, signature_means
from sigdepth.core.types import SignatureSet, SimulationConfig, VariantResult


def run_simulation(*args, **kwargs):
    """Lazy wrapper to avoid importing plotting and gseapy at import time."""
    from sigdepth.pipeline.simulation import run_simulation as _run_simulation

    return _run_simulation(*args, **kwargs)


__all__ = [
    "__version__",
    "SimulationConfig",
    "SignatureSet",
    "VariantResult",
    "simulate_counts",
    "normalize_counts",
    "draw_signatures",
    "signature_means",
    "run_simulation",
]
