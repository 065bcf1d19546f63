"""
Match Ranking Service
Scores a candidate pool against a seed user and returns the strongest matches
"""
import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from loguru import logger

from profile_scoring.application.repositories import IProfileRepository
from profile_scoring.application.services.compatibility_scorer import CompatibilityScorer
from profile_scoring.application.services.gender_compatibility_validator import GenderCompatibilityValidator
from profile_scoring.core.config import settings
from profile_scoring.domain.entities import UserId
from profile_scoring.domain.value_objects import MatchScore


@dataclass(frozen=True)
class RankedCandidate:
    """A candidate that passed the minimum-score filter"""

    user_id: UserId
    score: MatchScore
    pool_position: int


class MatchRankingService:
    """Ranks candidates for a user by pairwise compatibility"""

    def __init__(
        self,
        profile_repository: IProfileRepository,
        scorer: Optional[CompatibilityScorer] = None,
        min_score: Optional[int] = None,
        max_concurrency: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        require_opposite_gender: bool = False,
    ):
        """
        Initialize ranking service

        Args:
            profile_repository: Source of profile aggregates
            scorer: Pairwise scorer (default weights when omitted)
            min_score: Candidates scoring below this are dropped
            max_concurrency: Upper bound on in-flight scoring tasks
            clock: Monotonic clock in seconds, used to enforce deadlines
            require_opposite_gender: Also drop same-gender candidates
        """
        self.profile_repo = profile_repository
        self.scorer = scorer or CompatibilityScorer()
        self.min_score = settings.RANKING_MIN_SCORE if min_score is None else min_score
        self.max_concurrency = max_concurrency or settings.RANKING_MAX_CONCURRENCY
        self.clock = clock
        self.require_opposite_gender = require_opposite_gender
        self.gender_validator = GenderCompatibilityValidator()

    async def rank_candidates(
        self,
        seed_user_id: UserId,
        limit: int,
        candidate_pool: Iterable[UserId],
        deadline: Optional[float] = None,
    ) -> List[UserId]:
        """
        Rank a candidate pool for a seed user

        Args:
            seed_user_id: User to find matches for
            limit: Maximum number of identifiers returned
            candidate_pool: Candidate user IDs, in tie-break order
            deadline: Absolute time in seconds on this service's clock;
                candidates not scored by then are left out

        Returns:
            Candidate IDs, highest score first
        """
        ranked = await self.rank_with_scores(seed_user_id, limit, candidate_pool, deadline)
        return [candidate.user_id for candidate in ranked]

    async def rank_with_scores(
        self,
        seed_user_id: UserId,
        limit: int,
        candidate_pool: Iterable[UserId],
        deadline: Optional[float] = None,
    ) -> List[RankedCandidate]:
        """Same as rank_candidates, keeping each candidate's score"""
        if limit <= 0:
            return []

        if deadline is None and settings.RANKING_TIMEOUT_SECONDS is not None:
            deadline = self.clock() + settings.RANKING_TIMEOUT_SECONDS

        try:
            seed = await self.profile_repo.get_aggregate(seed_user_id)
        except Exception as e:
            logger.warning(f"Cannot rank candidates - failed to load seed user {seed_user_id}: {e}")
            return []
        if seed is None:
            logger.warning(f"Cannot rank candidates - profile not found for seed user {seed_user_id}")
            return []

        positions: Dict[UserId, int] = {}
        for candidate_id in candidate_pool:
            if candidate_id == seed_user_id or candidate_id in positions:
                continue
            positions[candidate_id] = len(positions)

        scores: Dict[UserId, int] = {}
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def score_candidate(candidate_id: UserId) -> None:
            async with semaphore:
                try:
                    candidate = await self.profile_repo.get_aggregate(candidate_id)
                    if candidate is None:
                        logger.debug(f"Skipping candidate {candidate_id}: profile not found")
                        return
                    if self.require_opposite_gender and not self.gender_validator.are_genders_compatible(seed, candidate):
                        return
                    scores[candidate_id] = self.scorer.score(seed, candidate).overall
                except Exception as e:
                    logger.warning(f"Skipping candidate {candidate_id} for user {seed_user_id}: {e}")

        timeout = None
        if deadline is not None:
            timeout = deadline - self.clock()
            if timeout <= 0:
                logger.warning(f"Ranking deadline already passed for user {seed_user_id}: no candidates scored")
                return []

        tasks = [asyncio.create_task(score_candidate(candidate_id)) for candidate_id in positions]
        if tasks:
            done, pending = await asyncio.wait(tasks, timeout=timeout)
            if pending:
                logger.warning(
                    f"Ranking deadline reached for user {seed_user_id}: "
                    f"{len(done)}/{len(tasks)} candidates scored"
                )
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)

        ranked = sorted(
            (
                RankedCandidate(user_id=candidate_id, score=MatchScore(score), pool_position=positions[candidate_id])
                for candidate_id, score in scores.items()
                if score >= self.min_score
            ),
            key=lambda candidate: (-candidate.score.value, candidate.pool_position),
        )[:limit]

        logger.info(
            f"Ranked {len(ranked)} of {len(positions)} candidates for user {seed_user_id} (min_score={self.min_score})"
        )
        return ranked
