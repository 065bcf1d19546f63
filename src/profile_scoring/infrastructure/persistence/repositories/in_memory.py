"""
In-Memory Repository Implementation
Dictionary-backed profiles, candidates and snapshots for embedding and tests
"""
from typing import Dict, Iterable, List, Optional, Tuple

from profile_scoring.application.repositories import (
    ICandidateSource,
    ICompletenessRepository,
    IProfileRepository,
)
from profile_scoring.domain.entities import CompletenessResult, ProfileAggregate, StrengthMetrics, UserId


class InMemoryProfileRepository(IProfileRepository, ICandidateSource, ICompletenessRepository):
    """Keeps aggregates and snapshots in insertion-ordered dicts"""

    def __init__(self, aggregates: Optional[Iterable[ProfileAggregate]] = None, verified_only: bool = False):
        """
        Args:
            aggregates: Initial profiles
            verified_only: Only email-verified users are offered as candidates
        """
        self.verified_only = verified_only
        self._aggregates: Dict[UserId, ProfileAggregate] = {}
        self._snapshots: Dict[UserId, Tuple[CompletenessResult, StrengthMetrics]] = {}
        for aggregate in aggregates or ():
            self.put(aggregate)

    def put(self, aggregate: ProfileAggregate) -> None:
        self._aggregates[aggregate.user_id] = aggregate

    def remove(self, user_id: UserId) -> None:
        self._aggregates.pop(user_id, None)
        self._snapshots.pop(user_id, None)

    async def get_aggregate(self, user_id: UserId) -> Optional[ProfileAggregate]:
        return self._aggregates.get(user_id)

    async def list_candidates(self, seed_user_id: UserId) -> List[UserId]:
        return [
            user_id
            for user_id, aggregate in self._aggregates.items()
            if user_id != seed_user_id and (aggregate.email_verified or not self.verified_only)
        ]

    async def save(self, result: CompletenessResult, metrics: StrengthMetrics) -> None:
        self._snapshots[result.user_id] = (result, metrics)

    async def get_by_user_id(self, user_id: UserId) -> Optional[CompletenessResult]:
        snapshot = self._snapshots.get(user_id)
        return snapshot[0] if snapshot else None

    async def get_strength_metrics(self, user_id: UserId) -> Optional[StrengthMetrics]:
        snapshot = self._snapshots.get(user_id)
        return snapshot[1] if snapshot else None

    async def list_all(self) -> List[CompletenessResult]:
        return [result for result, _ in self._snapshots.values()]

    async def list_strength_metrics(self) -> List[StrengthMetrics]:
        return [metrics for _, metrics in self._snapshots.values()]
