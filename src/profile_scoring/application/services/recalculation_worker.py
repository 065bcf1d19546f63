"""
Recalculation Worker - Background worker for section-changed events
Recomputes completeness and strength metrics off the publisher's path
"""
import asyncio
from typing import Dict, Optional, Set, Tuple

from loguru import logger

from profile_scoring.application.repositories import ICompletenessRepository, IProfileRepository
from profile_scoring.application.services.completeness_calculator import CompletenessCalculator
from profile_scoring.application.services.strength_metrics import StrengthMetricsCalculator
from profile_scoring.core.config import settings
from profile_scoring.core.exceptions import ProfileNotFoundException
from profile_scoring.domain.entities import CompletenessResult, StrengthMetrics, UserId
from profile_scoring.domain.events import SectionChangedEvent


class RecalculationWorker:
    """Background worker that keeps stored completeness snapshots current"""

    def __init__(
        self,
        profile_repository: IProfileRepository,
        completeness_repository: ICompletenessRepository,
        completeness_calculator: Optional[CompletenessCalculator] = None,
        strength_calculator: Optional[StrengthMetricsCalculator] = None,
        poll_interval: Optional[float] = None,
        max_concurrent_tasks: Optional[int] = None,
    ):
        """
        Initialize recalculation worker

        Args:
            profile_repository: Source of profile aggregates
            completeness_repository: Snapshot store written after each run
            poll_interval: Seconds between queue checks
            max_concurrent_tasks: Maximum number of users recalculated concurrently
        """
        self.profile_repo = profile_repository
        self.completeness_repo = completeness_repository
        self.completeness_calculator = completeness_calculator or CompletenessCalculator()
        self.strength_calculator = strength_calculator or StrengthMetricsCalculator()
        self.poll_interval = settings.RECALC_POLL_INTERVAL if poll_interval is None else poll_interval
        self.max_concurrent_tasks = max_concurrent_tasks or settings.RECALC_MAX_CONCURRENT_TASKS

        self.running = False
        self.active_tasks: Set[asyncio.Task] = set()
        self._queue: "asyncio.Queue[UserId]" = asyncio.Queue()
        # Latest event per queued user; a user sits in the queue at most once
        self._pending: Dict[UserId, SectionChangedEvent] = {}
        self._in_flight: Set[UserId] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def publish(self, event: SectionChangedEvent) -> None:
        """Enqueue a section change; never waits for recomputation"""
        if event.user_id not in self._pending:
            self._queue.put_nowait(event.user_id)
        self._pending[event.user_id] = event
        logger.debug(f"Queued recalculation for user {event.user_id} ({event.section.value} {event.change_type.value})")

    async def start(self):
        """Start the background worker"""
        self.running = True
        logger.info(
            f"Recalculation worker started (poll_interval={self.poll_interval}s, "
            f"max_concurrent={self.max_concurrent_tasks})"
        )

        try:
            while self.running:
                self._dispatch()
                await asyncio.sleep(self.poll_interval)
        except Exception as e:
            logger.error(f"Recalculation worker crashed: {e}")
            raise
        finally:
            logger.info("Recalculation worker stopped")

    async def stop(self):
        """Stop the background worker"""
        logger.info("Stopping recalculation worker...")
        self.running = False

        if self.active_tasks:
            logger.info(f"Waiting for {len(self.active_tasks)} active recalculations to complete...")
            await asyncio.gather(*self.active_tasks, return_exceptions=True)

    async def drain(self) -> None:
        """Process queued events until the queue and active set are empty"""
        while self._pending or self.active_tasks:
            self._dispatch()
            if self.active_tasks:
                await asyncio.wait(set(self.active_tasks), return_when=asyncio.FIRST_COMPLETED)

    def _dispatch(self) -> None:
        """Start recalculations for queued users, up to the free slots"""
        available_slots = self.max_concurrent_tasks - len(self.active_tasks)
        deferred = []

        while available_slots > 0 and not self._queue.empty():
            user_id = self._queue.get_nowait()
            # One run per user at a time, so an older snapshot never overwrites a newer one
            if user_id in self._in_flight:
                deferred.append(user_id)
                continue

            self._pending.pop(user_id, None)
            self._in_flight.add(user_id)
            task = asyncio.create_task(self._process_single_user(user_id))
            self.active_tasks.add(task)
            task.add_done_callback(self.active_tasks.discard)
            available_slots -= 1

        for user_id in deferred:
            self._queue.put_nowait(user_id)

    async def _process_single_user(self, user_id: UserId) -> None:
        try:
            await self.recalculate_now(user_id)
        except ProfileNotFoundException:
            logger.warning(f"Skipping recalculation for user {user_id}: profile not found")
        except Exception as e:
            logger.error(f"Recalculation failed for user {user_id}: {e}")
        finally:
            self._in_flight.discard(user_id)

    async def recalculate_now(self, user_id: UserId) -> Tuple[CompletenessResult, StrengthMetrics]:
        """
        Recompute and store one user's snapshot immediately

        Raises:
            ProfileNotFoundException: If the user has no profile aggregate
        """
        aggregate = await self.profile_repo.get_aggregate(user_id)
        if aggregate is None:
            raise ProfileNotFoundException(user_id)

        result = self.completeness_calculator.calculate(aggregate)
        metrics = self.strength_calculator.calculate(aggregate)
        await self.completeness_repo.save(result, metrics)

        logger.info(
            f"Recalculated profile completeness for user {user_id}: "
            f"{result.completion_percentage}% ({result.profile_quality.value})"
        )
        return result, metrics
