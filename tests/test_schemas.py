"""
Tests for response schemas
"""
from profile_scoring.application.schemas import (
    CompatibilityResponse,
    MissingSectionsResponse,
    StrengthMetricsResponse,
)
from profile_scoring.application.services import (
    CompatibilityScorer,
    CompletenessCalculator,
    StrengthMetricsCalculator,
)
from profile_scoring.domain.enums import ProfileSection


class TestResponseSchemas:
    """Test entity -> response conversion"""

    def test_missing_sections_response(self, profile_factory):
        aggregate = profile_factory(1, sections={ProfileSection.BASIC_PROFILE, ProfileSection.CONTACT_DETAILS})
        response = MissingSectionsResponse.from_entity(CompletenessCalculator().calculate(aggregate))

        assert response.basic_profile is True
        assert response.documents is False
        assert response.completed_sections == 2
        assert response.missing_sections == 5
        assert response.priority_sections == ["partnerPreference"]
        assert response.estimated_completion_time == 50
        assert [rec.section for rec in response.recommendations] == [
            "horoscope",
            "educationProfession",
            "familyBackground",
            "partnerPreference",
            "documents",
        ]

    def test_public_strength_metrics_hide_private_fields(self, profile_factory):
        metrics = StrengthMetricsCalculator().calculate(
            profile_factory(1, mobile_verified=True, email_verified=True, has_profile_photo=True)
        )

        owner = StrengthMetricsResponse.from_entity(metrics)
        public = StrengthMetricsResponse.public_from_entity(metrics)

        assert owner.contact_info_score == 100
        assert owner.verification_status == "PENDING"
        assert public.basic_info_score == 95
        assert public.has_profile_photo is True
        assert public.contact_info_score is None
        assert public.document_score is None
        assert public.mobile_verified is None
        assert public.verification_status is None

    def test_compatibility_response(self, seed_profile, matching_profile):
        breakdown = CompatibilityScorer().score(seed_profile, matching_profile)

        response = CompatibilityResponse.from_breakdown(1, 2, breakdown)

        assert response.overall == 99
        assert response.is_good_match
        assert "overall" not in response.breakdown
        assert response.breakdown["lifestyle"] == 4
