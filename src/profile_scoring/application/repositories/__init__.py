"""Repository contracts"""

from .interfaces import ICandidateSource, ICompletenessRepository, IProfileRepository
__all__ = ["ICandidateSource", "ICompletenessRepository", "IProfileRepository"]
