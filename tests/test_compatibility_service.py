"""
Tests for the repository-backed Compatibility Service
"""
import pytest
from unittest.mock import AsyncMock, Mock

from profile_scoring.application.services.compatibility_service import CompatibilityService
from profile_scoring.core.config import settings
from profile_scoring.core.exceptions import (
    ProfileNotFoundException,
    ResourceNotFoundException,
    ValidationException,
)
from profile_scoring.domain.enums import CompatibilityDimension
from profile_scoring.infrastructure.persistence.repositories import InMemoryProfileRepository


class TestCompatibilityScore:
    """Test compatibility between stored users"""

    @pytest.fixture
    def service(self, repository):
        return CompatibilityService(repository, candidate_source=repository)

    @pytest.mark.asyncio
    async def test_both_profiles_present(self, service):
        assert await service.calculate_compatibility_score(1, 2) == 99

    @pytest.mark.asyncio
    async def test_one_missing_profile_uses_fallback(self, service):
        """Test that exactly one unresolvable user scores the fixed fallback"""
        assert await service.calculate_compatibility_score(1, 404) == 25
        assert await service.calculate_compatibility_score(404, 2) == 25

    @pytest.mark.asyncio
    async def test_both_missing_raises_not_found(self, service):
        with pytest.raises(ProfileNotFoundException) as exc_info:
            await service.calculate_compatibility_score(404, 405)

        assert isinstance(exc_info.value, ResourceNotFoundException)
        assert exc_info.value.resource_type == "Profile"

    @pytest.mark.asyncio
    async def test_same_user_raises_validation(self, service):
        with pytest.raises(ValidationException):
            await service.calculate_compatibility_score(1, 1)

    @pytest.mark.asyncio
    async def test_breakdown(self, service):
        breakdown = await service.get_compatibility_breakdown(1, 2)

        assert breakdown.overall == 99
        assert breakdown.score_for(CompatibilityDimension.RELIGION) == 20

    @pytest.mark.asyncio
    async def test_breakdown_requires_both_profiles(self, service):
        with pytest.raises(ProfileNotFoundException):
            await service.get_compatibility_breakdown(1, 404)

    @pytest.mark.asyncio
    async def test_basic_compatibility(self, service):
        assert await service.are_basically_compatible(1, 2) is True
        assert await service.are_basically_compatible(1, 404) is False
        assert await service.are_basically_compatible(404, 405) is False

    @pytest.mark.asyncio
    async def test_repository_is_consulted_once_per_user(self, seed_profile, matching_profile):
        profile_repo = Mock()
        profile_repo.get_aggregate = AsyncMock(side_effect=[seed_profile, matching_profile])
        service = CompatibilityService(profile_repo)

        await service.calculate_compatibility_score(1, 2)

        assert profile_repo.get_aggregate.await_count == 2


class TestSuggestedMatches:
    """Test suggestions from the candidate source"""

    @pytest.mark.asyncio
    async def test_suggestions_exclude_seed(self, repository):
        service = CompatibilityService(repository, candidate_source=repository)

        assert await service.get_suggested_matches(1) == [2]

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, repository, profile_factory, monkeypatch):
        for user_id in range(10, 15):
            repository.put(profile_factory(user_id, gender="FEMALE"))
        monkeypatch.setattr(settings, "SUGGESTION_LIMIT", 3)
        service = CompatibilityService(repository, candidate_source=repository)

        suggestions = await service.get_suggested_matches(1, limit=50)

        assert len(suggestions) == 3
        assert 1 not in suggestions

    @pytest.mark.asyncio
    async def test_verified_only_candidates(self, profile_factory, seed_profile):
        repository = InMemoryProfileRepository(
            [
                seed_profile,
                profile_factory(2, gender="FEMALE", email_verified=True),
                profile_factory(3, gender="FEMALE"),
            ],
            verified_only=True,
        )
        service = CompatibilityService(repository, candidate_source=repository)

        assert await service.get_suggested_matches(1) == [2]

    @pytest.mark.asyncio
    async def test_requires_candidate_source(self, repository):
        service = CompatibilityService(repository)

        with pytest.raises(ValidationException):
            await service.get_suggested_matches(1)
