"""Task scheduler facade.

Usage:
    source = ManualTickSource()
    scheduler = TaskScheduler(source=source)

    heal = scheduler.run_interval(regen_players, delay_ticks=20)
    scheduler.run_timeout(close_arena, delay_ticks=1200).on_complete(announce)
    scheduler.run_job(rebuild_index, on_progress=report)

    # Inside a coroutine
    await scheduler.sleep(40)
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Generator
from typing import Any

from ticktask.config import SchedulerSettings
from ticktask.core.types import Action, ProgressCallback
from ticktask.scheduling.job import Job, StepFunction
from ticktask.scheduling.models import TaskKind
from ticktask.scheduling.task import Task
from ticktask.source.local import ManualTickSource
from ticktask.source.protocol import TickSource


def sleep_ticks(source: TickSource, ticks: int) -> asyncio.Future[None]:
    """Return a future resolved after ``ticks`` ticks of ``source``.

    Must be called with a running event loop. Zero ticks resolves immediately.
    Cancelling the future cancels the tick-source registration.

    Raises:
        ValueError: If ticks is negative.
    """
    if ticks < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}")

    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()
    if ticks == 0:
        future.set_result(None)
        return future

    def _resolve() -> None:
        if not future.done():
            future.set_result(None)

    handle = source.schedule_once_after(_resolve, ticks)

    def _on_done(f: asyncio.Future[None]) -> None:
        if f.cancelled():
            source.cancel(handle)

    future.add_done_callback(_on_done)
    return future


class TaskScheduler:
    """Entry points that construct tasks and jobs against one tick source.

    The scheduler keeps no registry of its own: each Task owns its state and
    its tick-source registration.

    Args:
        source: Tick source to schedule on. Defaults to a new ManualTickSource.
        settings: Default delay and job budgets. Defaults to SchedulerSettings().
    """

    def __init__(
        self,
        source: TickSource | None = None,
        settings: SchedulerSettings | None = None,
    ) -> None:
        self._source = source or ManualTickSource()
        self._settings = settings or SchedulerSettings()

    @property
    def source(self) -> TickSource:
        return self._source

    @property
    def settings(self) -> SchedulerSettings:
        return self._settings

    def run_interval(self, callback: Action, delay_ticks: int | None = None) -> Task:
        """Run callback every ``delay_ticks`` ticks (minimum 1) until aborted."""
        if delay_ticks is None:
            delay_ticks = self._settings.default_delay_ticks
        return Task(self._source, callback, delay_ticks, kind=TaskKind.INTERVAL)

    def run_timeout(self, callback: Action, delay_ticks: int | None = None) -> Task:
        """Run callback once after ``delay_ticks`` ticks (minimum 1)."""
        if delay_ticks is None:
            delay_ticks = self._settings.default_delay_ticks
        return Task(self._source, callback, delay_ticks, kind=TaskKind.TIMEOUT)

    def run_job(
        self,
        work: StepFunction | Generator[Any, Any, Any] | Callable[[], Generator[Any, Any, Any]],
        on_progress: ProgressCallback | None = None,
    ) -> Job:
        """Start a staged job.

        ``work`` is a step function, a generator, or a generator function.
        """
        if isinstance(work, Generator) or inspect.isgeneratorfunction(work):
            return Job.from_generator(work, self._source, on_progress, self._settings)
        return Job(work, self._source, on_progress, self._settings)

    def sleep(self, ticks: int) -> asyncio.Future[None]:
        """Awaitable delay measured in ticks of this scheduler's source."""
        return sleep_ticks(self._source, ticks)
