"""
Matrimony Profile Scoring
Profile completeness, strength metrics and pairwise compatibility
"""
from profile_scoring.core.logging_config import configure_logging
from profile_scoring.engine import (
    ScoringEngine,
    compute_completeness,
    compute_strength_metrics,
    rank_candidates,
    score_compatibility,
)

__version__ = "1.0.0"

__all__ = [
    "configure_logging",
    "ScoringEngine",
    "compute_completeness",
    "compute_strength_metrics",
    "rank_candidates",
    "score_compatibility",
]
