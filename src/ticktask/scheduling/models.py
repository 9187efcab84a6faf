"""Scheduling models and errors.

Types for task status, task kinds, job step results, and the errors raised on
invalid state transitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Lifecycle status shared by tasks and jobs.

    PENDING is never observed externally: construction moves straight to RUNNING.
    """

    PENDING = "pending"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.FAILED, TaskStatus.ABORTED)


class TaskKind(str, Enum):
    """Whether a task fires once or repeatedly."""

    INTERVAL = "interval"
    TIMEOUT = "timeout"


# --- Job step results ---
# A job's step function returns exactly one of these per call.


@dataclass(frozen=True, slots=True)
class Progress:
    """Work remains. ``value`` is offered to the progress callback."""

    value: Any = None


@dataclass(frozen=True, slots=True)
class Done:
    """Job finished successfully with ``result``."""

    result: Any = None


@dataclass(frozen=True, slots=True)
class Failed:
    """Job finished with ``error``."""

    error: BaseException


StepResult = Progress | Done | Failed
"""Return type of a job step function."""


class TickTaskError(Exception):
    """Base class for errors raised by ticktask."""

    pass


class InvalidTransitionError(TickTaskError):
    """Raised when pause()/start() is called from a status that forbids it.

    Attributes:
        operation: The requested operation ("pause" or "start").
        current: Status the task was in.
        required: Status the operation needs.
    """

    def __init__(self, operation: str, current: TaskStatus, required: TaskStatus) -> None:
        self.operation = operation
        self.current = current
        self.required = required
        super().__init__(
            f"cannot {operation} task: status is {current.value!r}, expected {required.value!r}"
        )
