"""
Compatibility Service
Repository-backed compatibility checks and suggested matches
"""
from typing import List, Optional, Tuple

from loguru import logger

from profile_scoring.application.repositories import ICandidateSource, IProfileRepository
from profile_scoring.application.services.compatibility_scorer import CompatibilityScorer
from profile_scoring.application.services.match_ranking_service import MatchRankingService
from profile_scoring.core.config import settings
from profile_scoring.core.exceptions import ProfileNotFoundException, ValidationException
from profile_scoring.domain.entities import CompatibilityBreakdown, ProfileAggregate, UserId


class CompatibilityService:
    """Resolves profiles through the repository and scores them"""

    def __init__(
        self,
        profile_repository: IProfileRepository,
        candidate_source: Optional[ICandidateSource] = None,
        scorer: Optional[CompatibilityScorer] = None,
        ranking_service: Optional[MatchRankingService] = None,
    ):
        self.profile_repo = profile_repository
        self.candidate_source = candidate_source
        self.scorer = scorer or CompatibilityScorer()
        self.ranking_service = ranking_service or MatchRankingService(profile_repository, scorer=self.scorer)

    async def _load_pair(
        self, user_id1: UserId, user_id2: UserId
    ) -> Tuple[Optional[ProfileAggregate], Optional[ProfileAggregate]]:
        if user_id1 == user_id2:
            raise ValidationException("user_id2", "Cannot check compatibility of a user with themself")

        profile1 = await self.profile_repo.get_aggregate(user_id1)
        profile2 = await self.profile_repo.get_aggregate(user_id2)

        if profile1 is None and profile2 is None:
            logger.warning(f"Both users not found: {user_id1} and {user_id2}")
            raise ProfileNotFoundException(f"{user_id1}, {user_id2}")
        return profile1, profile2

    async def calculate_compatibility_score(self, user_id1: UserId, user_id2: UserId) -> int:
        """
        Overall compatibility between two stored users

        Returns:
            Score in [0, 100]; the fixed fallback score when exactly one
            profile cannot be resolved

        Raises:
            ValidationException: If both IDs name the same user
            ProfileNotFoundException: If neither profile can be resolved
        """
        logger.debug(f"Calculating compatibility score between users {user_id1} and {user_id2}")
        profile1, profile2 = await self._load_pair(user_id1, user_id2)

        if profile1 is None or profile2 is None:
            missing = user_id1 if profile1 is None else user_id2
            logger.warning(
                f"Profile not found for user {missing} - using fallback score "
                f"{settings.MISSING_PROFILE_FALLBACK_SCORE} for users {user_id1} and {user_id2}"
            )
            return settings.MISSING_PROFILE_FALLBACK_SCORE

        return self.scorer.score(profile1, profile2).overall

    async def get_compatibility_breakdown(self, user_id1: UserId, user_id2: UserId) -> CompatibilityBreakdown:
        """
        Per-dimension breakdown for two stored users

        Raises:
            ProfileNotFoundException: If either profile cannot be resolved
        """
        logger.debug(f"Getting compatibility breakdown between users {user_id1} and {user_id2}")
        profile1, profile2 = await self._load_pair(user_id1, user_id2)
        if profile1 is None:
            raise ProfileNotFoundException(user_id1)
        if profile2 is None:
            raise ProfileNotFoundException(user_id2)
        return self.scorer.score(profile1, profile2)

    async def are_basically_compatible(self, user_id1: UserId, user_id2: UserId) -> bool:
        try:
            score = await self.calculate_compatibility_score(user_id1, user_id2)
        except ProfileNotFoundException as e:
            logger.warning(f"Cannot check basic compatibility for users {user_id1} and {user_id2}: {e}")
            return False
        return score >= settings.BASIC_COMPATIBILITY_THRESHOLD

    async def get_suggested_matches(self, user_id: UserId, limit: int = 10) -> List[UserId]:
        """
        Ranked suggestions for a user from the candidate source

        The requested limit is capped at SUGGESTION_LIMIT.
        """
        if self.candidate_source is None:
            raise ValidationException("candidate_source", "A candidate source is required for suggestions")

        limit = min(limit, settings.SUGGESTION_LIMIT)
        logger.debug(f"Getting suggested matches for user: {user_id} (limit={limit})")

        candidates = await self.candidate_source.list_candidates(user_id)
        return await self.ranking_service.rank_candidates(user_id, limit, candidates)
