"""Staged jobs: bounded slices of work advanced once per tick.

A job wraps a pull-based step function. Each tick the job calls ``step()``
until it returns a terminal result, the step cap is hit, or the tick's time
budget is spent. Progress is reported at most once per tick.

Usage:
    def scan_chunks():
        for i, chunk in enumerate(chunks):
            index(chunk)
            yield i / len(chunks)
        return len(chunks)

    job = Job.from_generator(scan_chunks, source, on_progress=show_bar)
    job.on_done(lambda n: print(f"indexed {n}")).on_finally(cleanup)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator
from typing import Any

from ticktask.config import SchedulerSettings
from ticktask.core.identity import RunHandle
from ticktask.core.types import ProgressCallback
from ticktask.scheduling.models import Done, Failed, Progress, StepResult, TaskStatus
from ticktask.source.protocol import TickSource

logger = logging.getLogger(__name__)

StepFunction = Callable[[], StepResult]


def generator_step(generator: Generator[Any, Any, Any]) -> StepFunction:
    """Adapt a generator to a step function.

    Each yielded value becomes Progress, the return value becomes Done and a
    raised exception becomes Failed.
    """

    def step() -> StepResult:
        try:
            value = next(generator)
        except StopIteration as stop:
            return Done(stop.value)
        except Exception as e:
            return Failed(e)
        return Progress(value)

    return step


class Job:
    """Resumable computation driven by a tick source.

    Status reuses TaskStatus: RUNNING until the step function reports Done
    (COMPLETED) or Failed / raises (FAILED), or until abort() (ABORTED).
    Callbacks registered after the job terminated never fire; abort() runs
    no callbacks.

    Args:
        step: Zero-argument function returning Progress, Done or Failed.
        source: Tick source driving the job.
        on_progress: Optional callback receiving one progress value per tick.
        settings: Time budget and step cap per tick.
    """

    def __init__(
        self,
        step: StepFunction,
        source: TickSource,
        on_progress: ProgressCallback | None = None,
        settings: SchedulerSettings | None = None,
    ) -> None:
        settings = settings or SchedulerSettings()
        self._step = step
        self._source = source
        self._on_progress = on_progress
        self._time_budget = settings.job_time_budget_ms / 1000.0
        self._max_steps = settings.job_max_steps_per_tick

        self._status = TaskStatus.PENDING
        self._result: Any = None
        self._error: BaseException | None = None
        self._done_callbacks: list[Callable[[Any], Any]] = []
        self._error_callbacks: list[Callable[[BaseException], Any]] = []
        self._finally_callbacks: list[Callable[[], Any]] = []

        self._handle: RunHandle | None = source.schedule_every_tick(self._on_tick)
        self._status = TaskStatus.RUNNING

    @classmethod
    def from_generator(
        cls,
        generator: Generator[Any, Any, Any] | Callable[[], Generator[Any, Any, Any]],
        source: TickSource,
        on_progress: ProgressCallback | None = None,
        settings: SchedulerSettings | None = None,
    ) -> Job:
        """Create a job from a generator or a generator function."""
        if callable(generator):
            generator = generator()
        return cls(generator_step(generator), source, on_progress, settings)

    def __repr__(self) -> str:
        return f"Job(status={self._status.value})"

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def result(self) -> Any:
        """Value carried by Done, None until the job completes."""
        return self._result

    @property
    def error(self) -> BaseException | None:
        return self._error

    def on_done(self, callback: Callable[[Any], Any]) -> Job:
        if not self._status.is_terminal:
            self._done_callbacks.append(callback)
        return self

    def on_error(self, callback: Callable[[BaseException], Any]) -> Job:
        if not self._status.is_terminal:
            self._error_callbacks.append(callback)
        return self

    def on_finally(self, callback: Callable[[], Any]) -> Job:
        if not self._status.is_terminal:
            self._finally_callbacks.append(callback)
        return self

    def abort(self) -> Job:
        """Stop the job. Idempotent; a finished job keeps its status."""
        self._release()
        if not self._status.is_terminal:
            self._status = TaskStatus.ABORTED
            self._clear_callbacks()
        return self

    def _release(self) -> None:
        if self._handle is not None:
            self._source.cancel(self._handle)
            self._handle = None

    def _on_tick(self) -> None:
        if self._status is not TaskStatus.RUNNING:
            return

        deadline = time.perf_counter() + self._time_budget
        reported = False
        for _ in range(self._max_steps):
            try:
                outcome = self._step()
            except Exception as e:
                if self._status is TaskStatus.RUNNING:
                    self._reject(e)
                return
            if self._status is not TaskStatus.RUNNING:
                return  # aborted from inside the step

            if isinstance(outcome, Done):
                self._resolve(outcome.result)
                return
            if isinstance(outcome, Failed):
                self._reject(outcome.error)
                return
            if not isinstance(outcome, Progress):
                self._reject(
                    TypeError(
                        f"Job step must return Progress, Done or Failed, got {type(outcome)}"
                    )
                )
                return

            if not reported and self._on_progress is not None:
                reported = True
                self._safe_call(self._on_progress, outcome.value)
            if self._status is not TaskStatus.RUNNING:
                return  # aborted from inside the progress callback
            if time.perf_counter() >= deadline:
                return

    def _resolve(self, result: Any) -> None:
        self._status = TaskStatus.COMPLETED
        self._result = result
        self._release()
        done, final = self._done_callbacks, self._finally_callbacks
        self._clear_callbacks()
        for callback in done:
            self._safe_call(callback, result)
        for callback in final:
            self._safe_call(callback)

    def _reject(self, error: BaseException) -> None:
        self._status = TaskStatus.FAILED
        self._error = error
        self._release()
        logger.error("Job failed: %s", error, exc_info=error)
        errors, final = self._error_callbacks, self._finally_callbacks
        self._clear_callbacks()
        for callback in errors:
            self._safe_call(callback, error)
        for callback in final:
            self._safe_call(callback)

    def _clear_callbacks(self) -> None:
        self._done_callbacks = []
        self._error_callbacks = []
        self._finally_callbacks = []

    def _safe_call(self, callback: Callable[..., Any], *args: Any) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception("Job callback %r failed for %r", callback, self)
