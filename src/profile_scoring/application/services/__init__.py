"""Application services"""

from .completeness_calculator import CompletenessCalculator, determine_profile_quality
from .strength_metrics import StrengthMetricsCalculator
from .compatibility_scorer import CompatibilityScorer
from .match_ranking_service import MatchRankingService, RankedCandidate
from .compatibility_service import CompatibilityService
from .recalculation_worker import RecalculationWorker
from .profile_completeness_validator import ProfileCompletenessValidator
from .gender_compatibility_validator import GenderCompatibilityValidator
from .profile_analytics_service import ProfileAnalytics, ProfileAnalyticsService

__all__ = [
    "CompletenessCalculator",
    "determine_profile_quality",
    "StrengthMetricsCalculator",
    "CompatibilityScorer",
    "MatchRankingService",
    "RankedCandidate",
    "CompatibilityService",
    "RecalculationWorker",
    "ProfileCompletenessValidator",
    "GenderCompatibilityValidator",
    "ProfileAnalytics",
    "ProfileAnalyticsService",
]
