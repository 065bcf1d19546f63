"""
Profile Analytics Service - Aggregate view over completeness snapshots
Provides totals, rates and distributions for admin dashboards
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from loguru import logger

from profile_scoring.application.repositories import ICompletenessRepository
from profile_scoring.domain.entities import CompletenessResult, StrengthMetrics
from profile_scoring.domain.enums import CANONICAL_SECTION_ORDER, ProfileQuality, VerificationStatus

# (label, lower bound, upper bound) inclusive
COMPLETION_RANGES = (
    ("0-24", 0, 24),
    ("25-49", 25, 49),
    ("50-74", 50, 74),
    ("75-99", 75, 99),
    ("100", 100, 100),
)


class ProfileAnalytics:
    """Container for profile analytics data"""

    def __init__(self):
        self.timestamp = datetime.now(timezone.utc)
        self.total_profiles = 0
        self.complete_profiles = 0
        self.incomplete_profiles = 0
        self.verified_profiles = 0

        self.completion_rate = 0.0
        self.verification_rate = 0.0
        self.average_completion_percentage = 0.0

        self.quality_distribution: Dict[str, int] = {}
        self.verification_distribution: Dict[str, int] = {}
        self.completion_range_distribution: Dict[str, int] = {}
        self.section_completion_counts: Dict[str, int] = {}
        self.section_completion_rates: Dict[str, float] = {}

        self.top_profiles: List[Dict] = []


def _rate(count: int, total: int) -> float:
    return round(100 * count / total, 2) if total else 0.0


class ProfileAnalyticsService:
    """Calculate profile analytics from stored snapshots"""

    def __init__(self, completeness_repository: ICompletenessRepository):
        self.completeness_repo = completeness_repository

    async def calculate_analytics(self, top_limit: int = 10) -> ProfileAnalytics:
        results = await self.completeness_repo.list_all()
        metrics = await self.completeness_repo.list_strength_metrics()
        analytics = self.summarize(results, metrics, top_limit)
        logger.info(f"Profile analytics calculated for {analytics.total_profiles} profiles")
        return analytics

    def summarize(
        self,
        results: List[CompletenessResult],
        metrics: Optional[List[StrengthMetrics]] = None,
        top_limit: int = 10,
    ) -> ProfileAnalytics:
        """Build analytics from in-memory snapshots"""
        analytics = ProfileAnalytics()
        metrics = metrics or []
        total = len(results)

        analytics.total_profiles = total
        analytics.complete_profiles = sum(1 for r in results if r.profile_completed)
        analytics.incomplete_profiles = total - analytics.complete_profiles
        analytics.completion_rate = _rate(analytics.complete_profiles, total)
        if total:
            analytics.average_completion_percentage = round(
                sum(r.completion_percentage for r in results) / total, 2
            )

        analytics.quality_distribution = {quality.value: 0 for quality in ProfileQuality}
        for result in results:
            analytics.quality_distribution[result.profile_quality.value] += 1

        analytics.completion_range_distribution = {label: 0 for label, _, _ in COMPLETION_RANGES}
        for result in results:
            for label, lower, upper in COMPLETION_RANGES:
                if lower <= result.completion_percentage <= upper:
                    analytics.completion_range_distribution[label] += 1
                    break

        for section in CANONICAL_SECTION_ORDER:
            completed = sum(1 for r in results if section not in r.missing_section_names)
            analytics.section_completion_counts[section.value] = completed
            analytics.section_completion_rates[section.value] = _rate(completed, total)

        analytics.verification_distribution = {status.value: 0 for status in VerificationStatus}
        for metric in metrics:
            analytics.verification_distribution[metric.verification_status.value] += 1
        analytics.verified_profiles = analytics.verification_distribution[VerificationStatus.VERIFIED.value]
        analytics.verification_rate = _rate(analytics.verified_profiles, len(metrics))

        top = sorted(results, key=lambda r: r.completeness_score, reverse=True)[:top_limit]
        analytics.top_profiles = [
            {
                "user_id": r.user_id,
                "completeness_score": r.completeness_score,
                "completion_percentage": r.completion_percentage,
                "profile_quality": r.profile_quality.value,
            }
            for r in top
        ]
        return analytics
