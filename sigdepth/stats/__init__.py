"""Statistical utilities for sigdepth."""

from sigdepth.stats.concordance import pair_concordance, replicate_concordance
from sigdepth.stats.enrichment import gsva_scores, score_signatures

__all__ = [
    "pair_concordance",
    "replicate_concordance",
    "gsva_scores",
    "score_signatures",
]
