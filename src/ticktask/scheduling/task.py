"""Tick-driven tasks with an explicit status state machine.

Usage:
    source = ManualTickSource()
    task = Task(source, spawn_wave, delay_ticks=100, kind=TaskKind.INTERVAL)
    task.pause()
    task.start()
    task.abort()

Transitions:
    construction -> RUNNING
    RUNNING -> PAUSED          pause()
    PAUSED -> RUNNING          start()
    RUNNING -> COMPLETED       one-shot callback returned
    RUNNING -> FAILED          callback raised
    non-terminal -> ABORTED    abort()
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from ticktask.core.identity import RunHandle
from ticktask.core.types import Action
from ticktask.scheduling.models import InvalidTransitionError, TaskKind, TaskStatus
from ticktask.source.protocol import TickSource

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[], Any] | Callable[["Task"], Any]


def _wants_task_argument(callback: Callable[..., Any]) -> bool:
    """Check whether a completion callback takes the task as its argument."""
    try:
        params = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = [
        p
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
    ]
    return bool(positional)


class Task:
    """One scheduled unit of repeating or one-shot work.

    Owns its countdown, its status and its completion callbacks. Nothing is
    shared with other tasks; the tick source only sees this task's handle.

    Interval tasks register an every-tick callback and count down internally.
    One-shot tasks use the source's run-after primitive. Pausing a one-shot
    task cancels that registration and resuming re-registers it for the
    ticks that were still remaining.

    Args:
        source: Tick source delivering callbacks.
        callback: Zero-argument action to run.
        delay_ticks: Ticks between runs (interval) or before the run (one-shot).
            Values below 1 are coerced to 1.
        kind: TaskKind.INTERVAL or TaskKind.TIMEOUT.
    """

    def __init__(
        self,
        source: TickSource,
        callback: Action,
        delay_ticks: int = 1,
        kind: TaskKind = TaskKind.TIMEOUT,
    ) -> None:
        self._source = source
        self._callback = callback
        self._kind = kind
        self._delay_ticks = max(1, int(delay_ticks))
        self._ticks_remaining = self._delay_ticks
        self._due_tick: int | None = None
        self._status = TaskStatus.PENDING
        self._paused = False
        self._handle: RunHandle | None = None
        self._completion_callbacks: list[CompletionCallback] = []

        self._register()
        self._status = TaskStatus.RUNNING

    def __repr__(self) -> str:
        return (
            f"Task(kind={self._kind.value}, delay_ticks={self._delay_ticks}, "
            f"status={self._status.value})"
        )

    # --- Accessors ---

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def kind(self) -> TaskKind:
        return self._kind

    @property
    def is_interval(self) -> bool:
        return self._kind is TaskKind.INTERVAL

    @property
    def delay_ticks(self) -> int:
        return self._delay_ticks

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def handle(self) -> RunHandle | None:
        """Current tick-source registration, None once released."""
        return self._handle

    @property
    def ticks_remaining(self) -> int:
        """Ticks until the next (interval) or only (one-shot) run."""
        if self._status.is_terminal:
            return 0
        if not self.is_interval and self._due_tick is not None and not self._paused:
            return max(0, self._due_tick - self._source.current_tick)
        return self._ticks_remaining

    # --- Control API ---

    def pause(self) -> Task:
        """Suspend the task.

        Raises:
            InvalidTransitionError: If status is not RUNNING.
        """
        if self._status is not TaskStatus.RUNNING:
            raise InvalidTransitionError("pause", self._status, TaskStatus.RUNNING)

        if not self.is_interval:
            self._ticks_remaining = max(1, self.ticks_remaining)
            self._release()
        self._paused = True
        self._status = TaskStatus.PAUSED
        logger.debug("Paused %r", self)
        return self

    def start(self) -> Task:
        """Resume a paused task.

        Raises:
            InvalidTransitionError: If status is not PAUSED.
        """
        if self._status is not TaskStatus.PAUSED:
            raise InvalidTransitionError("start", self._status, TaskStatus.PAUSED)

        self._paused = False
        self._status = TaskStatus.RUNNING
        if not self.is_interval:
            self._register()
        logger.debug("Resumed %r", self)
        return self

    def abort(self) -> Task:
        """Release the registration and mark the task ABORTED.

        Idempotent. A COMPLETED or FAILED task keeps its status.
        """
        self._release()
        if self._status not in (TaskStatus.COMPLETED, TaskStatus.FAILED):
            self._status = TaskStatus.ABORTED
            self._paused = False
            self._completion_callbacks.clear()
        return self

    def on_complete(self, callback: CompletionCallback) -> Task:
        """Register a callback for successful completion.

        Callbacks take no argument or the task itself, and fire once in
        registration order. Registering on a task that has already reached
        a terminal status is accepted but the callback never fires.
        """
        if self._status.is_terminal:
            logger.debug("Ignoring completion callback on %r", self)
            return self
        self._completion_callbacks.append(callback)
        return self

    # --- Tick-source facing ---

    def _register(self) -> None:
        if self.is_interval:
            self._handle = self._source.schedule_every_tick(self._on_tick)
        else:
            self._due_tick = self._source.current_tick + self._ticks_remaining
            self._handle = self._source.schedule_once_after(self._on_fire, self._ticks_remaining)

    def _release(self) -> None:
        if self._handle is not None:
            self._source.cancel(self._handle)
            self._handle = None

    def _on_tick(self) -> None:
        if self._paused or self._status is not TaskStatus.RUNNING:
            return

        self._ticks_remaining -= 1
        if self._ticks_remaining > 0:
            return

        try:
            self._callback()
        except Exception:
            logger.exception("Interval task callback failed: %r", self)
            self._fail()
            return
        self._ticks_remaining = self._delay_ticks

    def _on_fire(self) -> None:
        # The source consumed the one-shot registration before calling us.
        self._handle = None
        if self._paused or self._status is not TaskStatus.RUNNING:
            return

        try:
            self._callback()
        except Exception:
            logger.exception("Timeout task callback failed: %r", self)
            self._fail()
            return

        if self._status is TaskStatus.ABORTED:
            return
        self._complete()
        self.abort()

    def _fail(self) -> None:
        if self._status.is_terminal:
            return  # callback aborted its own task before raising
        self._status = TaskStatus.FAILED
        self._paused = False
        self._completion_callbacks.clear()
        self.abort()

    def _complete(self) -> None:
        self._status = TaskStatus.COMPLETED
        self._paused = False
        self._ticks_remaining = 0

        callbacks = self._completion_callbacks
        self._completion_callbacks = []
        for callback in callbacks:
            try:
                if _wants_task_argument(callback):
                    callback(self)  # type: ignore[call-arg]
                else:
                    callback()  # type: ignore[call-arg]
            except Exception:
                logger.exception("Completion callback %r failed for %r", callback, self)
