"""Value Objects - Immutable objects defined by their attributes"""

from .match_score import MatchScore
from .weights import (
    SectionWeights,
    DimensionWeights,
    DEFAULT_SECTION_WEIGHTS,
    DEFAULT_DIMENSION_WEIGHTS,
)
__all__ = [
    "MatchScore",
    "SectionWeights",
    "DimensionWeights",
    "DEFAULT_SECTION_WEIGHTS",
    "DEFAULT_DIMENSION_WEIGHTS",
]
