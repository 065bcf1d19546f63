"""
Compatibility Domain Entities
Tagged per-dimension outcomes and the pairwise breakdown they collapse into
"""
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from ..enums import CompatibilityDimension, DegradationReason
from ..value_objects import DimensionWeights, MatchScore


@dataclass(frozen=True)
class DimensionOutcome:
    """Score of one dimension plus the reason it fell short, if it did"""

    score: int
    reason: Optional[DegradationReason] = None

    @classmethod
    def full(cls, weight: int) -> "DimensionOutcome":
        return cls(weight)

    @classmethod
    def degraded(cls, score: int, reason: DegradationReason) -> "DimensionOutcome":
        return cls(score, reason)


@dataclass(frozen=True)
class CompatibilityBreakdown:
    """Pairwise compatibility - never persisted, computed fresh per request"""

    outcomes: Mapping[CompatibilityDimension, DimensionOutcome]
    weights: DimensionWeights = field(default_factory=DimensionWeights)

    def __post_init__(self):
        for dimension, outcome in self.outcomes.items():
            weight = self.weights.for_dimension(dimension)
            if not 0 <= outcome.score <= weight:
                raise ValueError(f"{dimension.value} score {outcome.score} outside [0, {weight}]")

    @property
    def scores(self) -> Dict[CompatibilityDimension, int]:
        return {dimension: outcome.score for dimension, outcome in self.outcomes.items()}

    @property
    def degradations(self) -> Dict[CompatibilityDimension, DegradationReason]:
        return {
            dimension: outcome.reason
            for dimension, outcome in self.outcomes.items()
            if outcome.reason is not None
        }

    @property
    def overall(self) -> int:
        total_weight = self.weights.total
        if total_weight <= 0:
            return 0
        total = sum(outcome.score for outcome in self.outcomes.values())
        return max(0, min(100, round(100 * total / total_weight)))

    @property
    def match_score(self) -> MatchScore:
        return MatchScore(self.overall)

    def score_for(self, dimension: CompatibilityDimension) -> int:
        outcome = self.outcomes.get(dimension)
        return outcome.score if outcome else 0

    def as_dict(self) -> Dict[str, int]:
        """Dimension name -> score, plus "overall" """
        breakdown = {dimension.value: self.score_for(dimension) for dimension in CompatibilityDimension}
        breakdown["overall"] = self.overall
        return breakdown
