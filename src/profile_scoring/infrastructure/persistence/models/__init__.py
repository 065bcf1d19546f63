"""ORM Models Package"""

from .profile_completeness import ProfileCompletenessModel

__all__ = [
    "ProfileCompletenessModel",
]
