"""
Scoring Engine
In-process entry point wiring the calculators, scorer and ranking service
"""
from typing import Callable, Iterable, List, Optional

from profile_scoring.application.repositories import IProfileRepository
from profile_scoring.application.services import (
    CompatibilityScorer,
    CompletenessCalculator,
    MatchRankingService,
    StrengthMetricsCalculator,
)
from profile_scoring.domain.entities import (
    CompatibilityBreakdown,
    CompletenessResult,
    PartnerPreference,
    ProfileAggregate,
    StrengthMetrics,
    UserId,
)
from profile_scoring.domain.value_objects import DimensionWeights, SectionWeights


class ScoringEngine:
    """
    Stateless facade over the scoring components.

    Weight tables are fixed at construction. Ranking needs a profile
    repository; the pure calculators do not.
    """

    def __init__(
        self,
        profile_repository: Optional[IProfileRepository] = None,
        section_weights: Optional[SectionWeights] = None,
        dimension_weights: Optional[DimensionWeights] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.completeness_calculator = CompletenessCalculator(section_weights)
        self.strength_calculator = StrengthMetricsCalculator()
        self.scorer = CompatibilityScorer(dimension_weights)
        self.ranking_service: Optional[MatchRankingService] = None
        if profile_repository is not None:
            ranking_kwargs = {"clock": clock} if clock is not None else {}
            self.ranking_service = MatchRankingService(profile_repository, scorer=self.scorer, **ranking_kwargs)

    def compute_completeness(self, aggregate: ProfileAggregate) -> CompletenessResult:
        return self.completeness_calculator.calculate(aggregate)

    def compute_strength_metrics(self, aggregate: ProfileAggregate) -> StrengthMetrics:
        return self.strength_calculator.calculate(aggregate)

    def score_compatibility(
        self,
        profile_a: ProfileAggregate,
        profile_b: ProfileAggregate,
        preferences_a: Optional[PartnerPreference] = None,
        preferences_b: Optional[PartnerPreference] = None,
    ) -> CompatibilityBreakdown:
        return self.scorer.score(profile_a, profile_b, preferences_a, preferences_b)

    async def rank_candidates(
        self,
        seed_user_id: UserId,
        limit: int,
        candidate_pool: Iterable[UserId],
        deadline: Optional[float] = None,
    ) -> List[UserId]:
        if self.ranking_service is None:
            raise RuntimeError("ScoringEngine was created without a profile repository")
        return await self.ranking_service.rank_candidates(seed_user_id, limit, candidate_pool, deadline)


_default_engine = ScoringEngine()


def compute_completeness(aggregate: ProfileAggregate) -> CompletenessResult:
    """Completeness with the default section weights"""
    return _default_engine.compute_completeness(aggregate)


def compute_strength_metrics(aggregate: ProfileAggregate) -> StrengthMetrics:
    return _default_engine.compute_strength_metrics(aggregate)


def score_compatibility(
    profile_a: ProfileAggregate,
    profile_b: ProfileAggregate,
    preferences_a: Optional[PartnerPreference] = None,
    preferences_b: Optional[PartnerPreference] = None,
) -> CompatibilityBreakdown:
    """Compatibility with the default dimension weights"""
    return _default_engine.score_compatibility(profile_a, profile_b, preferences_a, preferences_b)


async def rank_candidates(
    profile_repository: IProfileRepository,
    seed_user_id: UserId,
    limit: int,
    candidate_pool: Iterable[UserId],
    deadline: Optional[float] = None,
) -> List[UserId]:
    """Rank a candidate pool with a one-off ranking service over ``profile_repository``"""
    service = MatchRankingService(profile_repository, scorer=_default_engine.scorer)
    return await service.rank_candidates(seed_user_id, limit, candidate_pool, deadline)
