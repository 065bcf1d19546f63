"""
Domain Enums
Business enumerations for profile scoring
"""
from enum import Enum
from typing import List


class ProfileSection(str, Enum):
    """The seven independently maintained profile sections, in canonical order"""
    BASIC_PROFILE = "basicProfile"
    HOROSCOPE = "horoscope"
    EDUCATION_PROFESSION = "educationProfession"
    FAMILY_BACKGROUND = "familyBackground"
    PARTNER_PREFERENCE = "partnerPreference"
    CONTACT_DETAILS = "contactDetails"
    DOCUMENTS = "documents"


# Enum iteration order is declaration order
CANONICAL_SECTION_ORDER: List[ProfileSection] = list(ProfileSection)

PRIORITY_SECTIONS: List[ProfileSection] = [
    ProfileSection.BASIC_PROFILE,
    ProfileSection.CONTACT_DETAILS,
    ProfileSection.PARTNER_PREFERENCE,
]


class ProfileQuality(str, Enum):
    """Quality tier derived from the weighted completeness score"""
    POOR = "POOR"
    FAIR = "FAIR"
    GOOD = "GOOD"
    VERY_GOOD = "VERY_GOOD"
    EXCELLENT = "EXCELLENT"


class VerificationStatus(str, Enum):
    """Aggregate of mobile, email and identity verification"""
    VERIFIED = "VERIFIED"
    PENDING = "PENDING"
    UNVERIFIED = "UNVERIFIED"


class RecommendationPriority(str, Enum):
    """Urgency of a completion recommendation"""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class CompatibilityDimension(str, Enum):
    """Weighted dimensions of pairwise compatibility"""
    RELIGION = "religion"
    CASTE = "caste"
    EDUCATION = "education"
    PROFESSION = "profession"
    INCOME = "income"
    AGE = "age"
    LOCATION = "location"
    LIFESTYLE = "lifestyle"


class DegradationReason(str, Enum):
    """Why a compatibility dimension scored below its full weight"""
    MISSING_RECORD = "missing_record"  # Section record absent on either side
    MISSING_VALUE = "missing_value"  # Record present, field empty
    UNRECOGNIZED_VALUE = "unrecognized_value"  # Value outside the known vocabulary
    PREFERENCE_MATCH = "preference_match"  # Partial credit through stated preference
    PARTIAL_MATCH = "partial_match"  # Same bucket, not identical
    FALLBACK_FIELD = "fallback_field"  # Scored from a coarser field
    NO_MATCH = "no_match"
    SCORING_ERROR = "scoring_error"


class Gender(str, Enum):
    """Gender as recorded on the basic profile"""
    MALE = "MALE"
    FEMALE = "FEMALE"


# Education ordinal scale used by the education dimension
EDUCATION_LEVELS = {
    "High School": 1,
    "Diploma": 2,
    "Bachelor's Degree": 3,
    "Master's Degree": 4,
    "PhD": 5,
}

# Profession affinity groups (tech, medical, business, education)
PROFESSION_GROUPS = {
    "tech": frozenset({
        "Software Engineer",
        "Data Scientist",
        "System Administrator",
        "Web Developer",
        "Mobile Developer",
        "DevOps Engineer",
    }),
    "medical": frozenset({"Doctor", "Nurse", "Pharmacist", "Dentist", "Surgeon"}),
    "business": frozenset({
        "Manager",
        "Consultant",
        "Analyst",
        "Sales Executive",
        "Marketing Manager",
    }),
    "education": frozenset({"Teacher", "Professor", "Principal", "Lecturer", "Trainer"}),
}


def get_profession_group(profession: str) -> List[str]:
    """Names of the affinity groups a profession belongs to"""
    return [name for name, members in PROFESSION_GROUPS.items() if profession in members]
