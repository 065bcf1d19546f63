"""
Gender Compatibility Validator
Interests and suggestions are only exchanged between different genders
"""
from typing import Optional

from loguru import logger

from profile_scoring.core.exceptions import IncompatibleGenderException
from profile_scoring.domain.entities import ProfileAggregate
from profile_scoring.domain.enums import Gender, ProfileSection


def _gender_of(profile: ProfileAggregate) -> Optional[Gender]:
    basic = profile.section(ProfileSection.BASIC_PROFILE)
    if basic is None or basic.gender is None:
        return None
    try:
        return Gender(str(basic.gender).strip().upper())
    except ValueError:
        logger.debug(f"Unrecognized gender {basic.gender!r} for user {profile.user_id}")
        return None


class GenderCompatibilityValidator:
    """Validates that two users have recorded, different genders"""

    def validate_gender_compatibility(self, from_profile: ProfileAggregate, to_profile: ProfileAggregate) -> None:
        from_gender, to_gender = _gender_of(from_profile), _gender_of(to_profile)

        if from_gender is None or to_gender is None:
            logger.warning(f"Gender information missing for users {from_profile.user_id} or {to_profile.user_id}")
            raise IncompatibleGenderException("Gender information is required for both users")

        if from_gender == to_gender:
            logger.warning(
                f"Same gender interest attempt: {from_profile.user_id} ({from_gender.value}) "
                f"trying to send interest to {to_profile.user_id} ({to_gender.value})"
            )
            raise IncompatibleGenderException(
                f"Cannot send interest to same gender. You are {from_gender.value} and target user is also {to_gender.value}"
            )

        logger.debug(
            f"Gender compatibility validated: {from_profile.user_id} ({from_gender.value}) -> {to_profile.user_id} ({to_gender.value})"
        )

    def are_genders_compatible(self, profile_a: ProfileAggregate, profile_b: ProfileAggregate) -> bool:
        gender_a, gender_b = _gender_of(profile_a), _gender_of(profile_b)
        if gender_a is None or gender_b is None:
            return False
        return gender_a != gender_b
