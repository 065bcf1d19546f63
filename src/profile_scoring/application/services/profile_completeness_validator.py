"""
Profile Completeness Validator
Gate applied before a user may send an interest
"""
from typing import Optional

from loguru import logger

from profile_scoring.application.repositories import ICompletenessRepository
from profile_scoring.core.config import settings
from profile_scoring.core.exceptions import IncompleteProfileException
from profile_scoring.domain.entities import UserId


class ProfileCompletenessValidator:
    """Checks stored completion percentages against the configured minimum"""

    def __init__(
        self,
        completeness_repository: ICompletenessRepository,
        min_profile_completion: Optional[int] = None,
        require_profile_completion: Optional[bool] = None,
    ):
        self.completeness_repo = completeness_repository
        self.min_profile_completion = (
            settings.MIN_PROFILE_COMPLETION if min_profile_completion is None else min_profile_completion
        )
        self.require_profile_completion = (
            settings.REQUIRE_PROFILE_COMPLETION if require_profile_completion is None else require_profile_completion
        )

    async def validate_profile_completeness(self, user_id: UserId, user_type: str = "Your") -> None:
        """
        Validate one user's stored completion percentage

        Raises:
            IncompleteProfileException: If no snapshot exists or it is below the minimum
        """
        if not self.require_profile_completion:
            logger.debug("Profile completion validation disabled")
            return

        result = await self.completeness_repo.get_by_user_id(user_id)
        if result is None:
            logger.warning(f"No complete profile found for user {user_id}")
            raise IncompleteProfileException(
                user_id,
                0,
                f"Please complete your profile before sending interests. {user_type} profile not found.",
            )

        if result.completion_percentage < self.min_profile_completion:
            logger.warning(f"User {user_id} has insufficient profile completion: {result.completion_percentage}%")
            raise IncompleteProfileException(
                user_id,
                result.completion_percentage,
                f"Your profile is only {result.completion_percentage}% complete. Please complete at least "
                f"{self.min_profile_completion}% of your profile before sending interests.",
            )

        logger.debug(f"Profile completeness validated for user {user_id}: {result.completion_percentage}%")

    async def validate_both_profiles_completeness(self, from_user_id: UserId, to_user_id: UserId) -> None:
        await self.validate_profile_completeness(from_user_id, "Your")
        await self.validate_profile_completeness(to_user_id, "Target user's")

    async def is_profile_complete(self, user_id: UserId) -> bool:
        result = await self.completeness_repo.get_by_user_id(user_id)
        return result is not None and result.completion_percentage >= self.min_profile_completion

    async def get_profile_completion_percentage(self, user_id: UserId) -> int:
        """Stored completion percentage, 0 when the user has no snapshot"""
        result = await self.completeness_repo.get_by_user_id(user_id)
        return result.completion_percentage if result is not None else 0
