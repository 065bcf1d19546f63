"""
Weight Table Value Objects
Scoring policy constants, injected into the calculators at construction
"""
from dataclasses import dataclass, fields
from typing import Dict

from ..enums import CompatibilityDimension, ProfileSection


def _validate_weight_table(table: object) -> None:
    values = [getattr(table, f.name) for f in fields(table)]
    if any(v < 0 for v in values):
        raise ValueError(f"{type(table).__name__} weights cannot be negative")
    if sum(values) != 100:
        raise ValueError(f"{type(table).__name__} weights must sum to 100, got {sum(values)}")


@dataclass(frozen=True)
class SectionWeights:
    """Per-section contribution to the completeness score (sums to 100)"""

    basic_profile: int = 25
    contact_details: int = 20
    partner_preference: int = 20
    education_profession: int = 15
    family_background: int = 10
    horoscope: int = 5
    documents: int = 5

    def __post_init__(self):
        _validate_weight_table(self)

    def for_section(self, section: ProfileSection) -> int:
        return self.as_dict()[section]

    def as_dict(self) -> Dict[ProfileSection, int]:
        return {
            ProfileSection.BASIC_PROFILE: self.basic_profile,
            ProfileSection.HOROSCOPE: self.horoscope,
            ProfileSection.EDUCATION_PROFESSION: self.education_profession,
            ProfileSection.FAMILY_BACKGROUND: self.family_background,
            ProfileSection.PARTNER_PREFERENCE: self.partner_preference,
            ProfileSection.CONTACT_DETAILS: self.contact_details,
            ProfileSection.DOCUMENTS: self.documents,
        }


@dataclass(frozen=True)
class DimensionWeights:
    """Per-dimension maximum of the compatibility score (sums to 100)"""

    religion: int = 20
    caste: int = 15
    education: int = 15
    profession: int = 10
    income: int = 10
    age: int = 15
    location: int = 10
    lifestyle: int = 5

    def __post_init__(self):
        _validate_weight_table(self)

    def for_dimension(self, dimension: CompatibilityDimension) -> int:
        return getattr(self, dimension.value)

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


DEFAULT_SECTION_WEIGHTS = SectionWeights()
DEFAULT_DIMENSION_WEIGHTS = DimensionWeights()
