"""
Completeness Calculator
Derives completion percentage, weighted score, quality tier and
recommendations from section presence. Pure and total.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from loguru import logger

from profile_scoring.domain.entities import (
    CompletenessResult,
    CompletionRecommendation,
    ProfileAggregate,
)
from profile_scoring.domain.entities.completeness import TOTAL_SECTIONS
from profile_scoring.domain.enums import (
    CANONICAL_SECTION_ORDER,
    PRIORITY_SECTIONS,
    ProfileQuality,
    ProfileSection,
    RecommendationPriority,
)
from profile_scoring.domain.value_objects import DEFAULT_SECTION_WEIGHTS, SectionWeights


# Minutes a user typically needs to fill each section
SECTION_COMPLETION_MINUTES: Dict[ProfileSection, int] = {
    ProfileSection.BASIC_PROFILE: 10,
    ProfileSection.HOROSCOPE: 5,
    ProfileSection.EDUCATION_PROFESSION: 8,
    ProfileSection.FAMILY_BACKGROUND: 12,
    ProfileSection.PARTNER_PREFERENCE: 15,
    ProfileSection.CONTACT_DETAILS: 7,
    ProfileSection.DOCUMENTS: 10,
}

RECOMMENDATIONS: Dict[ProfileSection, CompletionRecommendation] = {
    ProfileSection.BASIC_PROFILE: CompletionRecommendation(
        section=ProfileSection.BASIC_PROFILE,
        title="Complete Basic Profile",
        description="Add your basic information to make your profile visible to others",
        priority=RecommendationPriority.CRITICAL,
        estimated_minutes=10,
        score_impact=25,
    ),
    ProfileSection.CONTACT_DETAILS: CompletionRecommendation(
        section=ProfileSection.CONTACT_DETAILS,
        title="Add Contact Information",
        description="Provide contact details so interested matches can reach you",
        priority=RecommendationPriority.HIGH,
        estimated_minutes=7,
        score_impact=20,
    ),
    ProfileSection.PARTNER_PREFERENCE: CompletionRecommendation(
        section=ProfileSection.PARTNER_PREFERENCE,
        title="Define Partner Preferences",
        description="Specify your partner preferences to get better matches",
        priority=RecommendationPriority.HIGH,
        estimated_minutes=15,
        score_impact=20,
    ),
    ProfileSection.EDUCATION_PROFESSION: CompletionRecommendation(
        section=ProfileSection.EDUCATION_PROFESSION,
        title="Add Professional Details",
        description="Include your education and career information",
        priority=RecommendationPriority.MEDIUM,
        estimated_minutes=8,
        score_impact=15,
    ),
    ProfileSection.FAMILY_BACKGROUND: CompletionRecommendation(
        section=ProfileSection.FAMILY_BACKGROUND,
        title="Share Family Background",
        description="Add family information to help matches understand your background",
        priority=RecommendationPriority.MEDIUM,
        estimated_minutes=12,
        score_impact=10,
    ),
    ProfileSection.HOROSCOPE: CompletionRecommendation(
        section=ProfileSection.HOROSCOPE,
        title="Include Horoscope Details",
        description="Add horoscope information for astrological compatibility",
        priority=RecommendationPriority.LOW,
        estimated_minutes=5,
        score_impact=5,
    ),
    ProfileSection.DOCUMENTS: CompletionRecommendation(
        section=ProfileSection.DOCUMENTS,
        title="Upload Profile Documents",
        description="Add photos and verification documents to build trust",
        priority=RecommendationPriority.MEDIUM,
        estimated_minutes=10,
        score_impact=15,
    ),
}

# (lower bound, tier), checked highest first
QUALITY_TIERS = (
    (90, ProfileQuality.EXCELLENT),
    (75, ProfileQuality.VERY_GOOD),
    (60, ProfileQuality.GOOD),
    (40, ProfileQuality.FAIR),
)


def determine_profile_quality(completeness_score: int) -> ProfileQuality:
    """Quality tier for a completeness score (inclusive lower bounds)"""
    for lower_bound, quality in QUALITY_TIERS:
        if completeness_score >= lower_bound:
            return quality
    return ProfileQuality.POOR


class CompletenessCalculator:
    """Computes CompletenessResult from a ProfileAggregate"""

    def __init__(self, section_weights: Optional[SectionWeights] = None):
        self.section_weights = section_weights or DEFAULT_SECTION_WEIGHTS

    def calculate(self, aggregate: ProfileAggregate) -> CompletenessResult:
        """
        Calculate completeness for one profile

        Args:
            aggregate: Consistent snapshot of all seven sections

        Returns:
            CompletenessResult (never raises for absent data)
        """
        present = [section for section in CANONICAL_SECTION_ORDER if aggregate.has_section(section)]
        missing = self.missing_sections(aggregate)

        completed_sections = len(present)
        completeness_score = sum(self.section_weights.for_section(section) for section in present)

        result = CompletenessResult(
            user_id=aggregate.user_id,
            completed_sections=completed_sections,
            completion_percentage=round(100 * completed_sections / TOTAL_SECTIONS),
            completeness_score=completeness_score,
            profile_quality=determine_profile_quality(completeness_score),
            missing_section_names=tuple(missing),
            priority_sections=tuple(s for s in PRIORITY_SECTIONS if s in missing),
            estimated_completion_minutes=sum(SECTION_COMPLETION_MINUTES[s] for s in missing),
            recommendations=tuple(self.recommendations_for(missing)),
            calculated_at=datetime.now(timezone.utc),
        )

        logger.debug(
            f"Completeness for user {aggregate.user_id}: {result.completion_percentage}% "
            f"score={result.completeness_score} quality={result.profile_quality.value}"
        )
        return result

    def missing_sections(self, aggregate: ProfileAggregate) -> List[ProfileSection]:
        """Missing sections in canonical order"""
        return [section for section in CANONICAL_SECTION_ORDER if not aggregate.has_section(section)]

    def recommendations_for(self, missing: List[ProfileSection]) -> List[CompletionRecommendation]:
        return [RECOMMENDATIONS[section] for section in CANONICAL_SECTION_ORDER if section in missing]
