"""
Tests for the completeness snapshot repository
"""
import pytest
from unittest.mock import AsyncMock, Mock

from profile_scoring.application.services.completeness_calculator import CompletenessCalculator
from profile_scoring.application.services.strength_metrics import StrengthMetricsCalculator
from profile_scoring.core.exceptions import RepositoryException
from profile_scoring.domain.enums import ProfileQuality, ProfileSection
from profile_scoring.infrastructure.persistence.models import ProfileCompletenessModel
from profile_scoring.infrastructure.persistence.repositories import ProfileCompletenessRepository


def query_result(model):
    result = Mock()
    result.scalar_one_or_none.return_value = model
    return result


class TestProfileCompletenessRepository:
    """Test SQLAlchemy repository mapping and writes"""

    @pytest.fixture
    def session(self):
        session = Mock()
        session.execute = AsyncMock(return_value=query_result(None))
        session.flush = AsyncMock()
        return session

    @pytest.fixture
    def snapshot(self, profile_factory):
        aggregate = profile_factory(
            42,
            sections={ProfileSection.BASIC_PROFILE, ProfileSection.CONTACT_DETAILS},
            mobile_verified=True,
        )
        return CompletenessCalculator().calculate(aggregate), StrengthMetricsCalculator().calculate(aggregate)

    def test_model_mapping(self, session, snapshot):
        """Test entity -> model -> entity keeps the snapshot"""
        repo = ProfileCompletenessRepository(session)
        result, metrics = snapshot

        model = repo._to_model(result, metrics)
        assert model.user_id == "42"
        assert model.profile_quality == "FAIR"
        assert model.missing_section_names == [
            "horoscope",
            "educationProfession",
            "familyBackground",
            "partnerPreference",
            "documents",
        ]

        restored, restored_metrics = repo._to_entity(model)
        assert restored.user_id == "42"
        assert restored.completion_percentage == 29
        assert restored.profile_quality == ProfileQuality.FAIR
        assert restored.missing_section_names == result.missing_section_names
        assert restored.priority_sections == (ProfileSection.PARTNER_PREFERENCE,)
        assert restored.recommendations == result.recommendations
        assert restored_metrics.contact_info_score == 80
        assert restored_metrics.mobile_verified

    @pytest.mark.asyncio
    async def test_save_inserts_new_snapshot(self, session, snapshot):
        repo = ProfileCompletenessRepository(session)

        await repo.save(*snapshot)

        session.add.assert_called_once()
        added = session.add.call_args.args[0]
        assert isinstance(added, ProfileCompletenessModel)
        assert added.completion_percentage == 29
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_replaces_existing_snapshot(self, session, snapshot):
        existing = ProfileCompletenessModel(user_id="42", completion_percentage=0, completeness_score=0)
        session.execute = AsyncMock(return_value=query_result(existing))
        repo = ProfileCompletenessRepository(session)

        await repo.save(*snapshot)

        session.add.assert_not_called()
        assert existing.completion_percentage == 29
        assert existing.completeness_score == 45

    @pytest.mark.asyncio
    async def test_get_by_user_id_missing(self, session):
        repo = ProfileCompletenessRepository(session)
        assert await repo.get_by_user_id(42) is None

    @pytest.mark.asyncio
    async def test_database_errors_are_wrapped(self, session, snapshot):
        session.execute = AsyncMock(side_effect=ConnectionError("connection refused"))
        repo = ProfileCompletenessRepository(session)

        with pytest.raises(RepositoryException):
            await repo.save(*snapshot)
        with pytest.raises(RepositoryException):
            await repo.get_by_user_id(42)

    @pytest.mark.asyncio
    async def test_get_strength_metrics(self, session, snapshot):
        repo = ProfileCompletenessRepository(session)
        result, metrics = snapshot
        session.execute = AsyncMock(return_value=query_result(repo._to_model(result, metrics)))

        stored = await repo.get_strength_metrics(42)

        assert stored.contact_info_score == metrics.contact_info_score
        assert stored.mobile_verified
        assert stored.verification_status == metrics.verification_status

    @pytest.mark.asyncio
    async def test_get_strength_metrics_missing(self, session):
        repo = ProfileCompletenessRepository(session)
        assert await repo.get_strength_metrics(42) is None
