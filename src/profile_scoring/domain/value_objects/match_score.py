"""
MatchScore Value Object
Type-safe compatibility score with validation (0-100)
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchScore:
    """Pairwise compatibility score value object - immutable"""

    value: int

    def __post_init__(self):
        """Validate match score range"""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Match score must be an integer")

        if not 0 <= self.value <= 100:
            raise ValueError("Match score must be between 0 and 100")

    def is_good_match(self, threshold: int = 60) -> bool:
        """Check if score meets threshold for good match"""
        return self.value >= threshold

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}%"

    def __repr__(self) -> str:
        return f"MatchScore({self.value})"
