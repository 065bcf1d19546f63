"""
Pairwise Compatibility Scorer
Scores two profile aggregates across eight weighted dimensions.

Every dimension rule returns a DimensionOutcome tagged with the reason it
fell short of full weight. Missing or malformed data lowers a score and is
logged at debug level; it never raises.
"""
from typing import Callable, Dict, Optional

from loguru import logger

from profile_scoring.domain.entities import (
    BasicProfile,
    CompatibilityBreakdown,
    ContactDetails,
    DimensionOutcome,
    EducationProfession,
    PartnerPreference,
    ProfileAggregate,
)
from profile_scoring.domain.enums import (
    EDUCATION_LEVELS,
    CompatibilityDimension,
    DegradationReason,
    ProfileSection,
    get_profession_group,
)
from profile_scoring.domain.value_objects import DEFAULT_DIMENSION_WEIGHTS, DimensionWeights

ANY_PREFERENCE = "any"


def _clean(value: Optional[str]) -> Optional[str]:
    """Normalize a free-text field; blank counts as missing"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _same(left: Optional[str], right: Optional[str]) -> bool:
    left, right = _clean(left), _clean(right)
    return left is not None and right is not None and left.casefold() == right.casefold()


def _preference_accepts(preferred: Optional[str], actual: str) -> bool:
    """Stated preference is "Any" or names the other side's actual value"""
    preferred = _clean(preferred)
    if preferred is None:
        return False
    return preferred.casefold() == ANY_PREFERENCE or _same(preferred, actual)


def _tiered(weight: int, tier: int) -> int:
    """Share of the weight for tier 0 (full) .. 3 (quarter)"""
    return (weight, weight * 3 // 4, weight // 2, weight // 4)[tier]


class CompatibilityScorer:
    """Computes CompatibilityBreakdown for a pair of profiles"""

    def __init__(self, dimension_weights: Optional[DimensionWeights] = None):
        self.weights = dimension_weights or DEFAULT_DIMENSION_WEIGHTS
        self._rules: Dict[CompatibilityDimension, Callable[..., DimensionOutcome]] = {
            CompatibilityDimension.RELIGION: self._religion,
            CompatibilityDimension.CASTE: self._caste,
            CompatibilityDimension.EDUCATION: self._education,
            CompatibilityDimension.PROFESSION: self._profession,
            CompatibilityDimension.INCOME: self._income,
            CompatibilityDimension.AGE: self._age,
            CompatibilityDimension.LOCATION: self._location,
            CompatibilityDimension.LIFESTYLE: self._lifestyle,
        }

    def score(
        self,
        profile_a: ProfileAggregate,
        profile_b: ProfileAggregate,
        preferences_a: Optional[PartnerPreference] = None,
        preferences_b: Optional[PartnerPreference] = None,
    ) -> CompatibilityBreakdown:
        """
        Calculate compatibility between two profiles

        Args:
            profile_a: First user's aggregate
            profile_b: Second user's aggregate
            preferences_a: First user's partner preference; defaults to the
                aggregate's own partner preference section
            preferences_b: Second user's partner preference, same default

        Returns:
            CompatibilityBreakdown with overall in [0, 100]
        """
        if preferences_a is None:
            preferences_a = profile_a.section(ProfileSection.PARTNER_PREFERENCE)
        if preferences_b is None:
            preferences_b = profile_b.section(ProfileSection.PARTNER_PREFERENCE)

        outcomes = {}
        for dimension, rule in self._rules.items():
            weight = self.weights.for_dimension(dimension)
            try:
                outcome = rule(weight, profile_a, profile_b, preferences_a, preferences_b)
            except Exception as e:
                logger.warning(
                    f"Error scoring {dimension.value} for users {profile_a.user_id} and {profile_b.user_id}: {e}"
                )
                outcome = DimensionOutcome.degraded(0, DegradationReason.SCORING_ERROR)

            if outcome.reason is not None:
                logger.debug(
                    f"{dimension.value} degraded for users {profile_a.user_id} and {profile_b.user_id}: "
                    f"{outcome.reason.value} ({outcome.score}/{weight})"
                )
            outcomes[dimension] = outcome

        breakdown = CompatibilityBreakdown(outcomes=outcomes, weights=self.weights)
        logger.debug(
            f"Compatibility score calculated: {breakdown.overall} for users {profile_a.user_id} and {profile_b.user_id}"
        )
        return breakdown

    # --- dimension rules -------------------------------------------------

    @staticmethod
    def _basic(profile: ProfileAggregate) -> Optional[BasicProfile]:
        return profile.section(ProfileSection.BASIC_PROFILE)

    @staticmethod
    def _career(profile: ProfileAggregate) -> Optional[EducationProfession]:
        return profile.section(ProfileSection.EDUCATION_PROFESSION)

    @staticmethod
    def _contact(profile: ProfileAggregate) -> Optional[ContactDetails]:
        return profile.section(ProfileSection.CONTACT_DETAILS)

    def _religion(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        basic_a, basic_b = self._basic(profile_a), self._basic(profile_b)
        if basic_a is None or basic_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        religion_a, religion_b = _clean(basic_a.religion), _clean(basic_b.religion)
        if religion_a is None or religion_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)

        if _same(religion_a, religion_b):
            return DimensionOutcome.full(weight)

        if (pref_a is not None and _preference_accepts(pref_a.religion, religion_b)) or (
            pref_b is not None and _preference_accepts(pref_b.religion, religion_a)
        ):
            return DimensionOutcome.degraded(weight // 2, DegradationReason.PREFERENCE_MATCH)

        return DimensionOutcome.degraded(0, DegradationReason.NO_MATCH)

    def _caste(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        basic_a, basic_b = self._basic(profile_a), self._basic(profile_b)
        if basic_a is None or basic_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        caste_a, caste_b = _clean(basic_a.caste), _clean(basic_b.caste)
        # Caste is a soft signal: an unstated caste still earns half
        if caste_a is None or caste_b is None:
            return DimensionOutcome.degraded(weight // 2, DegradationReason.MISSING_VALUE)

        if _same(caste_a, caste_b):
            return DimensionOutcome.full(weight)

        if (pref_a is not None and _preference_accepts(pref_a.caste, caste_b)) or (
            pref_b is not None and _preference_accepts(pref_b.caste, caste_a)
        ):
            return DimensionOutcome.degraded(weight // 2, DegradationReason.PREFERENCE_MATCH)

        return DimensionOutcome.degraded(0, DegradationReason.NO_MATCH)

    def _education(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        career_a, career_b = self._career(profile_a), self._career(profile_b)
        if career_a is None or career_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        education_a, education_b = _clean(career_a.education), _clean(career_b.education)
        if education_a is None or education_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)

        level_a, level_b = EDUCATION_LEVELS.get(education_a), EDUCATION_LEVELS.get(education_b)
        if level_a is None or level_b is None:
            return DimensionOutcome.degraded(weight // 2, DegradationReason.UNRECOGNIZED_VALUE)

        level_diff = min(abs(level_a - level_b), 3)
        if level_diff == 0:
            return DimensionOutcome.full(weight)
        return DimensionOutcome.degraded(_tiered(weight, level_diff), DegradationReason.PARTIAL_MATCH)

    def _profession(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        career_a, career_b = self._career(profile_a), self._career(profile_b)
        if career_a is None or career_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        profession_a, profession_b = _clean(career_a.occupation), _clean(career_b.occupation)
        if profession_a is None or profession_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)

        if _same(profession_a, profession_b):
            return DimensionOutcome.full(weight)

        if set(get_profession_group(profession_a)) & set(get_profession_group(profession_b)):
            return DimensionOutcome.degraded(weight * 3 // 4, DegradationReason.PARTIAL_MATCH)

        return DimensionOutcome.degraded(weight // 2, DegradationReason.NO_MATCH)

    def _income(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        career_a, career_b = self._career(profile_a), self._career(profile_b)
        if career_a is None or career_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        income_a, income_b = career_a.income_per_year, career_b.income_per_year
        if income_a is None or income_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)
        if income_a < 0 or income_b < 0:
            return DimensionOutcome.degraded(0, DegradationReason.UNRECOGNIZED_VALUE)

        if income_a == income_b:
            return DimensionOutcome.full(weight)

        income_diff = abs(income_a - income_b) / max(income_a, income_b)
        if income_diff <= 0.2:
            return DimensionOutcome.full(weight)
        if income_diff <= 0.5:
            tier = 1
        elif income_diff <= 1.0:
            tier = 2
        else:
            tier = 3
        return DimensionOutcome.degraded(_tiered(weight, tier), DegradationReason.PARTIAL_MATCH)

    def _age(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        basic_a, basic_b = self._basic(profile_a), self._basic(profile_b)
        if basic_a is None or basic_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        if basic_a.age is None or basic_b.age is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)

        age_diff = abs(basic_a.age - basic_b.age)
        if age_diff <= 2:
            return DimensionOutcome.full(weight)
        if age_diff <= 5:
            tier = 1
        elif age_diff <= 10:
            tier = 2
        else:
            tier = 3
        return DimensionOutcome.degraded(_tiered(weight, tier), DegradationReason.PARTIAL_MATCH)

    def _location(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        contact_a, contact_b = self._contact(profile_a), self._contact(profile_b)

        if contact_a is None or contact_b is None:
            # Coarse fallback: the basic profile's current city, exact match only
            basic_a, basic_b = self._basic(profile_a), self._basic(profile_b)
            if basic_a is None or basic_b is None:
                return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)
            if _same(basic_a.current_city, basic_b.current_city):
                return DimensionOutcome.degraded(weight // 2, DegradationReason.FALLBACK_FIELD)
            return DimensionOutcome.degraded(0, DegradationReason.FALLBACK_FIELD)

        if _clean(contact_a.country) is None or _clean(contact_b.country) is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_VALUE)

        if not _same(contact_a.country, contact_b.country):
            return DimensionOutcome.degraded(0, DegradationReason.NO_MATCH)

        if _same(contact_a.city, contact_b.city):
            return DimensionOutcome.full(weight)

        if _same(contact_a.state, contact_b.state):
            return DimensionOutcome.degraded(weight * 3 // 4, DegradationReason.PARTIAL_MATCH)

        return DimensionOutcome.degraded(weight // 2, DegradationReason.PARTIAL_MATCH)

    def _lifestyle(self, weight, profile_a, profile_b, pref_a, pref_b) -> DimensionOutcome:
        basic_a, basic_b = self._basic(profile_a), self._basic(profile_b)
        if basic_a is None or basic_b is None:
            return DimensionOutcome.degraded(0, DegradationReason.MISSING_RECORD)

        baseline = weight // 2
        if _same(basic_a.diet, basic_b.diet):
            return DimensionOutcome(baseline + weight // 2)

        if _clean(basic_a.diet) is None or _clean(basic_b.diet) is None:
            return DimensionOutcome.degraded(baseline, DegradationReason.MISSING_VALUE)
        return DimensionOutcome.degraded(baseline, DegradationReason.NO_MATCH)
