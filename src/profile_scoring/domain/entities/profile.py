"""
Profile Domain Entities
Immutable read model of a user's seven profile sections
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Hashable, Optional, Tuple

from loguru import logger

from ..enums import ProfileSection

UserId = Hashable


@dataclass(frozen=True)
class BasicProfile:
    """Basic profile section"""

    religion: Optional[str] = None
    caste: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    current_city: Optional[str] = None
    diet: Optional[str] = None
    marital_status: Optional[str] = None


@dataclass(frozen=True)
class HoroscopeDetails:
    """Horoscope section"""

    rashi: Optional[str] = None
    nakshatra: Optional[str] = None
    birth_place: Optional[str] = None


@dataclass(frozen=True)
class EducationProfession:
    """Education and profession section"""

    education: Optional[str] = None
    occupation: Optional[str] = None
    income_per_year: Optional[int] = None


@dataclass(frozen=True)
class FamilyBackground:
    """Family background section"""

    family_type: Optional[str] = None
    father_occupation: Optional[str] = None
    mother_occupation: Optional[str] = None


@dataclass(frozen=True)
class PartnerPreference:
    """Stated partner preferences; "Any" accepts every value"""

    religion: Optional[str] = None
    caste: Optional[str] = None


@dataclass(frozen=True)
class ContactDetails:
    """Contact details section"""

    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """Uploaded document reference"""

    document_type: str
    file_name: Optional[str] = None
    uploaded_at: Optional[datetime] = None


_SECTION_TYPES = {
    ProfileSection.BASIC_PROFILE: ("basic_profile", BasicProfile),
    ProfileSection.HOROSCOPE: ("horoscope", HoroscopeDetails),
    ProfileSection.EDUCATION_PROFESSION: ("education_profession", EducationProfession),
    ProfileSection.FAMILY_BACKGROUND: ("family_background", FamilyBackground),
    ProfileSection.PARTNER_PREFERENCE: ("partner_preference", PartnerPreference),
    ProfileSection.CONTACT_DETAILS: ("contact_details", ContactDetails),
}


@dataclass(frozen=True)
class ProfileAggregate:
    """
    Snapshot of every profile section for one user.

    A section reference that is not an instance of its section type is
    treated as absent, so partially loaded rows never count as present.
    """

    user_id: UserId
    basic_profile: Optional[BasicProfile] = None
    horoscope: Optional[HoroscopeDetails] = None
    education_profession: Optional[EducationProfession] = None
    family_background: Optional[FamilyBackground] = None
    partner_preference: Optional[PartnerPreference] = None
    contact_details: Optional[ContactDetails] = None
    documents: Tuple[Document, ...] = field(default_factory=tuple)

    # Verification flags
    mobile_verified: bool = False
    email_verified: bool = False
    identity_verified: bool = False
    has_profile_photo: bool = False

    def has_section(self, section: ProfileSection) -> bool:
        """Section presence as seen by the completeness calculator"""
        if section == ProfileSection.DOCUMENTS:
            return bool(self.valid_documents)
        return self.section(section) is not None

    def section(self, section: ProfileSection) -> Optional[Any]:
        """Resolved section value, or None when absent or corrupt"""
        if section == ProfileSection.DOCUMENTS:
            return self.valid_documents or None
        attr, expected_type = _SECTION_TYPES[section]
        value = getattr(self, attr)
        if value is None:
            return None
        if not isinstance(value, expected_type):
            logger.debug(f"Ignoring corrupt {section.value} section for user {self.user_id}")
            return None
        return value

    @property
    def valid_documents(self) -> Tuple[Document, ...]:
        if not self.documents:
            return ()
        try:
            return tuple(doc for doc in self.documents if isinstance(doc, Document))
        except TypeError:
            logger.debug(f"Ignoring non-iterable documents for user {self.user_id}")
            return ()

    @property
    def completed_sections(self) -> int:
        return sum(1 for section in ProfileSection if self.has_section(section))

    def __str__(self) -> str:
        return f"ProfileAggregate({self.user_id}, {self.completed_sections}/7 sections)"
