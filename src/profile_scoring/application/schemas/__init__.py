"""Response schemas"""

from .completeness import (
    CompatibilityResponse,
    MissingSectionsResponse,
    RecommendationResponse,
    StrengthMetricsResponse,
)

__all__ = [
    "CompatibilityResponse",
    "MissingSectionsResponse",
    "RecommendationResponse",
    "StrengthMetricsResponse",
]
