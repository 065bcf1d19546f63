"""
Tests for the Recalculation Worker
"""
import asyncio

import pytest
from unittest.mock import AsyncMock, Mock

from profile_scoring.application.services.recalculation_worker import RecalculationWorker
from profile_scoring.core.exceptions import ProfileNotFoundException
from profile_scoring.domain.enums import ProfileQuality, ProfileSection
from profile_scoring.domain.events import SectionChangedEvent, SectionChangeType
from profile_scoring.infrastructure.persistence.repositories import InMemoryProfileRepository


class TestRecalculationWorker:
    """Test event-driven recalculation"""

    @pytest.fixture
    def store(self):
        store = Mock()
        store.save = AsyncMock()
        return store

    @pytest.mark.asyncio
    async def test_publish_does_not_recalculate(self, repository, store):
        worker = RecalculationWorker(repository, store)

        worker.publish(SectionChangedEvent(1, ProfileSection.BASIC_PROFILE))

        assert worker.pending_count == 1
        store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_events_for_same_user_are_coalesced(self, repository, store):
        worker = RecalculationWorker(repository, store)

        worker.publish(SectionChangedEvent(1, ProfileSection.BASIC_PROFILE))
        worker.publish(SectionChangedEvent(1, ProfileSection.HOROSCOPE))
        worker.publish(SectionChangedEvent(1, ProfileSection.DOCUMENTS, SectionChangeType.DELETED))

        assert worker.pending_count == 1
        await worker.drain()

        store.save.assert_awaited_once()
        result, metrics = store.save.await_args.args
        assert result.user_id == 1
        assert result.completion_percentage == 100
        assert metrics.basic_info_score == 95

    @pytest.mark.asyncio
    async def test_drain_processes_every_user(self, profile_factory, store):
        repository = InMemoryProfileRepository([profile_factory(user_id) for user_id in range(5)])
        worker = RecalculationWorker(repository, store, max_concurrent_tasks=2)

        for user_id in range(5):
            worker.publish(SectionChangedEvent(user_id, ProfileSection.CONTACT_DETAILS))
        await worker.drain()

        assert store.save.await_count == 5
        assert worker.pending_count == 0
        assert not worker.active_tasks

    @pytest.mark.asyncio
    async def test_missing_profile_is_skipped(self, repository, store):
        worker = RecalculationWorker(repository, store)

        worker.publish(SectionChangedEvent(404, ProfileSection.BASIC_PROFILE))
        await worker.drain()

        store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_does_not_stop_other_users(self, repository):
        store = Mock()
        store.save = AsyncMock(side_effect=[RuntimeError("disk full"), None])
        worker = RecalculationWorker(repository, store, max_concurrent_tasks=1)

        worker.publish(SectionChangedEvent(1, ProfileSection.BASIC_PROFILE))
        worker.publish(SectionChangedEvent(2, ProfileSection.BASIC_PROFILE))
        await worker.drain()

        assert store.save.await_count == 2

    @pytest.mark.asyncio
    async def test_recalculate_now(self, profile_factory):
        repository = InMemoryProfileRepository(
            [profile_factory(1, sections={ProfileSection.BASIC_PROFILE, ProfileSection.CONTACT_DETAILS})]
        )
        worker = RecalculationWorker(repository, repository)

        result, metrics = await worker.recalculate_now(1)

        assert result.completion_percentage == 29
        assert result.profile_quality == ProfileQuality.FAIR
        assert await repository.get_by_user_id(1) == result
        assert await repository.get_strength_metrics(1) == metrics

    @pytest.mark.asyncio
    async def test_recalculate_now_missing_profile(self, repository, store):
        worker = RecalculationWorker(repository, store)

        with pytest.raises(ProfileNotFoundException):
            await worker.recalculate_now(404)

    @pytest.mark.asyncio
    async def test_start_and_stop(self, repository):
        worker = RecalculationWorker(repository, repository, poll_interval=0.01)
        runner = asyncio.create_task(worker.start())

        worker.publish(SectionChangedEvent(2, ProfileSection.FAMILY_BACKGROUND))
        for _ in range(200):
            if await repository.get_by_user_id(2) is not None:
                break
            await asyncio.sleep(0.01)

        await worker.stop()
        await asyncio.wait_for(runner, timeout=1)

        assert not worker.running
        assert (await repository.get_by_user_id(2)).completed_sections == 7
