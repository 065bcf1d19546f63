"""Repository implementations"""

from .in_memory import InMemoryProfileRepository
from .profile_completeness import ProfileCompletenessRepository

__all__ = ["InMemoryProfileRepository", "ProfileCompletenessRepository"]
