"""
Completeness Domain Entities
Immutable outputs of the completeness and strength calculators
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from ..enums import ProfileQuality, ProfileSection, RecommendationPriority, VerificationStatus
from .profile import UserId

TOTAL_SECTIONS = len(ProfileSection)


@dataclass(frozen=True)
class CompletionRecommendation:
    """One suggested next step for a missing section"""

    section: ProfileSection
    title: str
    description: str
    priority: RecommendationPriority
    estimated_minutes: int
    score_impact: int


@dataclass(frozen=True)
class CompletenessResult:
    """Completeness view of one profile aggregate - replaced wholesale on change"""

    user_id: UserId
    completed_sections: int
    completion_percentage: int
    completeness_score: int
    profile_quality: ProfileQuality
    missing_section_names: Tuple[ProfileSection, ...] = field(default_factory=tuple)
    priority_sections: Tuple[ProfileSection, ...] = field(default_factory=tuple)
    estimated_completion_minutes: int = 0
    recommendations: Tuple[CompletionRecommendation, ...] = field(default_factory=tuple)
    calculated_at: Optional[datetime] = None

    def __post_init__(self):
        if not 0 <= self.completion_percentage <= 100:
            raise ValueError("Completion percentage must be between 0 and 100")
        if not 0 <= self.completeness_score <= 100:
            raise ValueError("Completeness score must be between 0 and 100")

    @property
    def total_sections(self) -> int:
        return TOTAL_SECTIONS

    @property
    def missing_sections_count(self) -> int:
        return TOTAL_SECTIONS - self.completed_sections

    @property
    def profile_completed(self) -> bool:
        return self.completed_sections == TOTAL_SECTIONS


@dataclass(frozen=True)
class StrengthMetrics:
    """Per-facet strength scores for profile-quality displays"""

    user_id: UserId
    basic_info_score: int = 0
    contact_info_score: int = 0
    personal_details_score: int = 0
    family_info_score: int = 0
    professional_info_score: int = 0
    preferences_score: int = 0
    document_score: int = 0

    has_profile_photo: bool = False
    mobile_verified: bool = False
    email_verified: bool = False
    identity_verified: bool = False

    @property
    def verification_status(self) -> VerificationStatus:
        if self.mobile_verified and self.email_verified and self.identity_verified:
            return VerificationStatus.VERIFIED
        if self.mobile_verified or self.email_verified or self.identity_verified:
            return VerificationStatus.PENDING
        return VerificationStatus.UNVERIFIED
