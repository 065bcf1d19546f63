"""
Shared fixtures for scoring engine tests
"""
import pytest

from profile_scoring.domain.entities import (
    BasicProfile,
    ContactDetails,
    Document,
    EducationProfession,
    FamilyBackground,
    HoroscopeDetails,
    PartnerPreference,
    ProfileAggregate,
)
from profile_scoring.domain.enums import ProfileSection
from profile_scoring.infrastructure.persistence.repositories import InMemoryProfileRepository


def build_profile(
    user_id,
    sections=None,
    religion="Hindu",
    caste="Patel",
    age=28,
    gender="MALE",
    current_city="Pune",
    diet="Vegetarian",
    education="Master's Degree",
    occupation="Software Engineer",
    income=1200000,
    city="Pune",
    state="Maharashtra",
    country="India",
    preferred_religion="Hindu",
    preferred_caste="Any",
    **flags,
) -> ProfileAggregate:
    """Profile with every section by default; ``sections`` limits which are present"""
    if sections is None:
        sections = set(ProfileSection)

    def include(section, value):
        return value if section in sections else None

    return ProfileAggregate(
        user_id=user_id,
        basic_profile=include(
            ProfileSection.BASIC_PROFILE,
            BasicProfile(
                religion=religion,
                caste=caste,
                age=age,
                gender=gender,
                current_city=current_city,
                diet=diet,
            ),
        ),
        horoscope=include(ProfileSection.HOROSCOPE, HoroscopeDetails(rashi="Mesh", nakshatra="Ashwini")),
        education_profession=include(
            ProfileSection.EDUCATION_PROFESSION,
            EducationProfession(education=education, occupation=occupation, income_per_year=income),
        ),
        family_background=include(ProfileSection.FAMILY_BACKGROUND, FamilyBackground(family_type="Nuclear")),
        partner_preference=include(
            ProfileSection.PARTNER_PREFERENCE,
            PartnerPreference(religion=preferred_religion, caste=preferred_caste),
        ),
        contact_details=include(
            ProfileSection.CONTACT_DETAILS,
            ContactDetails(city=city, state=state, country=country),
        ),
        documents=(Document(document_type="PHOTO", file_name="photo.jpg"),)
        if ProfileSection.DOCUMENTS in sections
        else (),
        **flags,
    )


@pytest.fixture
def profile_factory():
    return build_profile


@pytest.fixture
def seed_profile():
    return build_profile(1, gender="MALE")


@pytest.fixture
def matching_profile():
    return build_profile(2, gender="FEMALE", age=27)


@pytest.fixture
def repository(seed_profile, matching_profile):
    return InMemoryProfileRepository([seed_profile, matching_profile])
