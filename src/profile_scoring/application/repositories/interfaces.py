"""
Repository Interfaces (Abstract Base Classes)
Contracts the host application supplies; the engine never reaches storage directly
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from profile_scoring.domain.entities import (
    CompletenessResult,
    ProfileAggregate,
    StrengthMetrics,
    UserId,
)


class IProfileRepository(ABC):
    """Profile section repository interface"""

    @abstractmethod
    async def get_aggregate(self, user_id: UserId) -> Optional[ProfileAggregate]:
        """
        Load every section of a user's profile as one consistent snapshot

        Returns:
            ProfileAggregate, or None when the user does not exist
        """
        pass


class ICandidateSource(ABC):
    """Candidate enumeration interface"""

    @abstractmethod
    async def list_candidates(self, seed_user_id: UserId) -> List[UserId]:
        """List users eligible to be suggested (e.g. all verified users)"""
        pass


class ICompletenessRepository(ABC):
    """Completeness snapshot store interface"""

    @abstractmethod
    async def save(self, result: CompletenessResult, metrics: StrengthMetrics) -> None:
        """Replace the stored snapshot for the user (last write wins)"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UserId) -> Optional[CompletenessResult]:
        """Get the latest stored completeness result"""
        pass

    @abstractmethod
    async def get_strength_metrics(self, user_id: UserId) -> Optional[StrengthMetrics]:
        """Get the strength metrics stored alongside the completeness result"""
        pass

    @abstractmethod
    async def list_all(self) -> List[CompletenessResult]:
        """All stored completeness results (analytics)"""
        pass

    @abstractmethod
    async def list_strength_metrics(self) -> List[StrengthMetrics]:
        """All stored strength metrics (analytics)"""
        pass
