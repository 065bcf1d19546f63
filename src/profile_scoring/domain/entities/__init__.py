"""Domain Entities - Core business objects"""

from .profile import (
    UserId,
    BasicProfile,
    HoroscopeDetails,
    EducationProfession,
    FamilyBackground,
    PartnerPreference,
    ContactDetails,
    Document,
    ProfileAggregate,
)
from .completeness import CompletionRecommendation, CompletenessResult, StrengthMetrics
from .compatibility import DimensionOutcome, CompatibilityBreakdown
__all__ = [
    "UserId",
    "BasicProfile",
    "HoroscopeDetails",
    "EducationProfession",
    "FamilyBackground",
    "PartnerPreference",
    "ContactDetails",
    "Document",
    "ProfileAggregate",
    "CompletionRecommendation",
    "CompletenessResult",
    "StrengthMetrics",
    "DimensionOutcome",
    "CompatibilityBreakdown",
]
