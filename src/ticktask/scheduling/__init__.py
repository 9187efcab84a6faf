"""Task scheduling: tasks, staged jobs and the scheduler facade."""

from ticktask.scheduling.job import Job, StepFunction, generator_step
from ticktask.scheduling.models import (
    Done,
    Failed,
    InvalidTransitionError,
    Progress,
    StepResult,
    TaskKind,
    TaskStatus,
    TickTaskError,
)
from ticktask.scheduling.scheduler import TaskScheduler, sleep_ticks
from ticktask.scheduling.task import Task

__all__ = [
    # Facade
    "TaskScheduler",
    "sleep_ticks",
    # Tasks
    "Task",
    "TaskKind",
    "TaskStatus",
    # Jobs
    "Job",
    "StepFunction",
    "StepResult",
    "Progress",
    "Done",
    "Failed",
    "generator_step",
    # Errors
    "TickTaskError",
    "InvalidTransitionError",
]
