"""
Completeness Schemas
Pydantic response payloads for the host application's API layer
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from profile_scoring.domain.entities import CompatibilityBreakdown, CompletenessResult, StrengthMetrics
from profile_scoring.domain.enums import ProfileSection


class RecommendationResponse(BaseModel):
    """One completion recommendation"""

    section: str
    title: str
    description: str
    priority: str
    estimated_minutes: int
    score_impact: int


class MissingSectionsResponse(BaseModel):
    """Section status and completion guidance for one user"""

    basic_profile: bool
    horoscope: bool
    education_profession: bool
    family_background: bool
    partner_preference: bool
    contact_details: bool
    documents: bool

    completion_percentage: int = Field(..., ge=0, le=100)
    total_sections: int = 7
    completed_sections: int = Field(..., ge=0, le=7)
    missing_sections: int = Field(..., ge=0, le=7)
    profile_quality: str = "POOR"

    missing_section_names: List[str] = Field(default_factory=list)
    priority_sections: List[str] = Field(default_factory=list)
    estimated_completion_time: int = Field(0, ge=0, description="Minutes to fill every missing section")
    recommendations: List[RecommendationResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, result: CompletenessResult) -> "MissingSectionsResponse":
        missing = set(result.missing_section_names)
        return cls(
            basic_profile=ProfileSection.BASIC_PROFILE not in missing,
            horoscope=ProfileSection.HOROSCOPE not in missing,
            education_profession=ProfileSection.EDUCATION_PROFESSION not in missing,
            family_background=ProfileSection.FAMILY_BACKGROUND not in missing,
            partner_preference=ProfileSection.PARTNER_PREFERENCE not in missing,
            contact_details=ProfileSection.CONTACT_DETAILS not in missing,
            documents=ProfileSection.DOCUMENTS not in missing,
            completion_percentage=result.completion_percentage,
            total_sections=result.total_sections,
            completed_sections=result.completed_sections,
            missing_sections=result.missing_sections_count,
            profile_quality=result.profile_quality.value,
            missing_section_names=[section.value for section in result.missing_section_names],
            priority_sections=[section.value for section in result.priority_sections],
            estimated_completion_time=result.estimated_completion_minutes,
            recommendations=[
                RecommendationResponse(
                    section=rec.section.value,
                    title=rec.title,
                    description=rec.description,
                    priority=rec.priority.value,
                    estimated_minutes=rec.estimated_minutes,
                    score_impact=rec.score_impact,
                )
                for rec in result.recommendations
            ],
        )


class StrengthMetricsResponse(BaseModel):
    """Per-facet strength scores; hidden fields are None in the public view"""

    basic_info_score: int
    contact_info_score: Optional[int] = None
    personal_details_score: int
    family_info_score: int
    professional_info_score: int
    preferences_score: int
    document_score: Optional[int] = None

    has_profile_photo: bool
    mobile_verified: Optional[bool] = None
    email_verified: Optional[bool] = None
    identity_verified: Optional[bool] = None
    verification_status: Optional[str] = None

    @classmethod
    def from_entity(cls, metrics: StrengthMetrics) -> "StrengthMetricsResponse":
        """Owner's view with every score and verification flag"""
        return cls(
            basic_info_score=metrics.basic_info_score,
            contact_info_score=metrics.contact_info_score,
            personal_details_score=metrics.personal_details_score,
            family_info_score=metrics.family_info_score,
            professional_info_score=metrics.professional_info_score,
            preferences_score=metrics.preferences_score,
            document_score=metrics.document_score,
            has_profile_photo=metrics.has_profile_photo,
            mobile_verified=metrics.mobile_verified,
            email_verified=metrics.email_verified,
            identity_verified=metrics.identity_verified,
            verification_status=metrics.verification_status.value,
        )

    @classmethod
    def public_from_entity(cls, metrics: StrengthMetrics) -> "StrengthMetricsResponse":
        """Public-safe view: contact and document scores and verification details hidden"""
        return cls(
            basic_info_score=metrics.basic_info_score,
            personal_details_score=metrics.personal_details_score,
            family_info_score=metrics.family_info_score,
            professional_info_score=metrics.professional_info_score,
            preferences_score=metrics.preferences_score,
            has_profile_photo=metrics.has_profile_photo,
        )


class CompatibilityResponse(BaseModel):
    """Pairwise compatibility between two users"""

    user_id: Any
    other_user_id: Any
    overall: int = Field(..., ge=0, le=100)
    breakdown: Dict[str, int] = Field(default_factory=dict)
    is_good_match: bool = False

    @classmethod
    def from_breakdown(
        cls, user_id: Any, other_user_id: Any, breakdown: CompatibilityBreakdown
    ) -> "CompatibilityResponse":
        scores = breakdown.as_dict()
        scores.pop("overall")
        return cls(
            user_id=user_id,
            other_user_id=other_user_id,
            overall=breakdown.overall,
            breakdown=scores,
            is_good_match=breakdown.match_score.is_good_match(),
        )
