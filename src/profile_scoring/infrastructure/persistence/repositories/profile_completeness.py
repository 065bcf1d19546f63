"""
ProfileCompleteness Repository Implementation
SQLAlchemy-based completeness snapshot store
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from profile_scoring.application.repositories import ICompletenessRepository
from profile_scoring.application.services.completeness_calculator import RECOMMENDATIONS
from profile_scoring.core.exceptions import RepositoryException
from profile_scoring.domain.entities import CompletenessResult, StrengthMetrics, UserId
from profile_scoring.domain.enums import CANONICAL_SECTION_ORDER, ProfileQuality, ProfileSection
from profile_scoring.infrastructure.persistence.models.profile_completeness import ProfileCompletenessModel


class ProfileCompletenessRepository(ICompletenessRepository):
    """SQLAlchemy implementation of the completeness snapshot store"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, result: CompletenessResult, metrics: StrengthMetrics) -> None:
        """Insert or replace the user's snapshot"""
        try:
            existing = await self._get_model(result.user_id)
            model = self._to_model(result, metrics, existing)
            if existing is None:
                self.session.add(model)
            await self.session.flush()

        except Exception as e:
            logger.error(f"Failed to save profile completeness for user {result.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to save profile completeness: {str(e)}")

    async def get_by_user_id(self, user_id: UserId) -> Optional[CompletenessResult]:
        try:
            model = await self._get_model(user_id)
            return self._to_entity(model)[0] if model else None

        except Exception as e:
            logger.error(f"Failed to get profile completeness for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get profile completeness: {str(e)}")

    async def get_strength_metrics(self, user_id: UserId) -> Optional[StrengthMetrics]:
        try:
            model = await self._get_model(user_id)
            return self._to_entity(model)[1] if model else None

        except Exception as e:
            logger.error(f"Failed to get strength metrics for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get strength metrics: {str(e)}")

    async def list_all(self) -> List[CompletenessResult]:
        return [result for result, _ in await self._list_entities()]

    async def list_strength_metrics(self) -> List[StrengthMetrics]:
        return [metrics for _, metrics in await self._list_entities()]

    async def _list_entities(self) -> List[Tuple[CompletenessResult, StrengthMetrics]]:
        try:
            result = await self.session.execute(
                select(ProfileCompletenessModel).order_by(ProfileCompletenessModel.id)
            )
            return [self._to_entity(model) for model in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list profile completeness: {str(e)}")
            raise RepositoryException(f"Failed to list profile completeness: {str(e)}")

    async def _get_model(self, user_id: UserId) -> Optional[ProfileCompletenessModel]:
        result = await self.session.execute(
            select(ProfileCompletenessModel).where(ProfileCompletenessModel.user_id == str(user_id))
        )
        return result.scalar_one_or_none()

    def _to_model(
        self,
        result: CompletenessResult,
        metrics: StrengthMetrics,
        model: Optional[ProfileCompletenessModel] = None,
    ) -> ProfileCompletenessModel:
        """Convert entities to model, updating ``model`` in place when given"""
        if model is None:
            model = ProfileCompletenessModel(user_id=str(result.user_id))

        model.completed_sections = result.completed_sections
        model.completion_percentage = result.completion_percentage
        model.completeness_score = result.completeness_score
        model.profile_quality = result.profile_quality.value
        model.missing_section_names = [section.value for section in result.missing_section_names]
        model.priority_sections = [section.value for section in result.priority_sections]
        model.estimated_completion_minutes = result.estimated_completion_minutes
        model.calculated_at = result.calculated_at

        model.basic_info_score = metrics.basic_info_score
        model.contact_info_score = metrics.contact_info_score
        model.personal_details_score = metrics.personal_details_score
        model.family_info_score = metrics.family_info_score
        model.professional_info_score = metrics.professional_info_score
        model.preferences_score = metrics.preferences_score
        model.document_score = metrics.document_score

        model.has_profile_photo = metrics.has_profile_photo
        model.mobile_verified = metrics.mobile_verified
        model.email_verified = metrics.email_verified
        model.identity_verified = metrics.identity_verified
        return model

    def _to_entity(self, model: ProfileCompletenessModel) -> Tuple[CompletenessResult, StrengthMetrics]:
        """Convert model to entities; recommendations are rebuilt from the missing sections"""
        missing = [ProfileSection(name) for name in model.missing_section_names or []]
        missing = [section for section in CANONICAL_SECTION_ORDER if section in missing]

        result = CompletenessResult(
            user_id=model.user_id,
            completed_sections=model.completed_sections,
            completion_percentage=model.completion_percentage,
            completeness_score=model.completeness_score,
            profile_quality=ProfileQuality(model.profile_quality),
            missing_section_names=tuple(missing),
            priority_sections=tuple(ProfileSection(name) for name in model.priority_sections or []),
            estimated_completion_minutes=model.estimated_completion_minutes,
            recommendations=tuple(RECOMMENDATIONS[section] for section in missing),
            calculated_at=model.calculated_at,
        )

        metrics = StrengthMetrics(
            user_id=model.user_id,
            basic_info_score=model.basic_info_score,
            contact_info_score=model.contact_info_score,
            personal_details_score=model.personal_details_score,
            family_info_score=model.family_info_score,
            professional_info_score=model.professional_info_score,
            preferences_score=model.preferences_score,
            document_score=model.document_score,
            has_profile_photo=bool(model.has_profile_photo),
            mobile_verified=bool(model.mobile_verified),
            email_verified=bool(model.email_verified),
            identity_verified=bool(model.identity_verified),
        )
        return result, metrics
