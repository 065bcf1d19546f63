"""
Strength Metrics Calculator
Per-facet display scores from section presence and verification flags
"""
from loguru import logger

from profile_scoring.domain.entities import ProfileAggregate, StrengthMetrics
from profile_scoring.domain.enums import ProfileSection

BASIC_INFO_BASELINE = 95
PERSONAL_DETAILS_BASELINE = 90
FAMILY_INFO_BASELINE = 85
PROFESSIONAL_INFO_BASELINE = 85
PREFERENCES_BASELINE = 80

CONTACT_BASE = 60
CONTACT_MOBILE_BONUS = 20
CONTACT_EMAIL_BONUS = 20

DOCUMENT_BASE = 40
DOCUMENT_PHOTO_BONUS = 30
DOCUMENT_IDENTITY_BONUS = 30

MAX_FACET_SCORE = 100


class StrengthMetricsCalculator:
    """Computes StrengthMetrics from a ProfileAggregate"""

    def calculate(self, aggregate: ProfileAggregate) -> StrengthMetrics:
        def baseline(section: ProfileSection, score: int) -> int:
            return score if aggregate.has_section(section) else 0

        metrics = StrengthMetrics(
            user_id=aggregate.user_id,
            basic_info_score=baseline(ProfileSection.BASIC_PROFILE, BASIC_INFO_BASELINE),
            contact_info_score=self._contact_score(aggregate),
            personal_details_score=baseline(ProfileSection.HOROSCOPE, PERSONAL_DETAILS_BASELINE),
            family_info_score=baseline(ProfileSection.FAMILY_BACKGROUND, FAMILY_INFO_BASELINE),
            professional_info_score=baseline(ProfileSection.EDUCATION_PROFESSION, PROFESSIONAL_INFO_BASELINE),
            preferences_score=baseline(ProfileSection.PARTNER_PREFERENCE, PREFERENCES_BASELINE),
            document_score=self._document_score(aggregate),
            has_profile_photo=bool(aggregate.has_profile_photo),
            mobile_verified=bool(aggregate.mobile_verified),
            email_verified=bool(aggregate.email_verified),
            identity_verified=bool(aggregate.identity_verified),
        )

        logger.debug(f"Strength metrics for user {aggregate.user_id}: verification={metrics.verification_status.value}")
        return metrics

    def _contact_score(self, aggregate: ProfileAggregate) -> int:
        if not aggregate.has_section(ProfileSection.CONTACT_DETAILS):
            return 0
        score = CONTACT_BASE
        if aggregate.mobile_verified:
            score += CONTACT_MOBILE_BONUS
        if aggregate.email_verified:
            score += CONTACT_EMAIL_BONUS
        return min(score, MAX_FACET_SCORE)

    def _document_score(self, aggregate: ProfileAggregate) -> int:
        if not aggregate.has_section(ProfileSection.DOCUMENTS):
            return 0
        score = DOCUMENT_BASE
        if aggregate.has_profile_photo:
            score += DOCUMENT_PHOTO_BONUS
        if aggregate.identity_verified:
            score += DOCUMENT_IDENTITY_BONUS
        return min(score, MAX_FACET_SCORE)
