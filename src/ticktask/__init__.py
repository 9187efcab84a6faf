"""ticktask: cooperative tick-driven task scheduling for game-server scripts.

Usage:
    from ticktask import ManualTickSource, TaskScheduler

    source = ManualTickSource()
    scheduler = TaskScheduler(source=source)

    task = scheduler.run_interval(lambda: print("tick tock"), delay_ticks=20)
    source.advance(40)  # prints twice
    task.pause()
    task.start()
    task.abort()
"""

__version__ = "0.1.0"

# Configuration
from ticktask.config import SchedulerSettings

# Core primitives
from ticktask.core import (
    Chunk,
    MersenneTwister,
    OperationTimer,
    RunHandle,
    TickTime,
    format_dhms,
    format_hms,
    is_slime_chunk,
)

# Scheduling
from ticktask.scheduling import (
    Done,
    Failed,
    InvalidTransitionError,
    Job,
    Progress,
    Task,
    TaskKind,
    TaskScheduler,
    TaskStatus,
    TickTaskError,
    sleep_ticks,
)

# Tick sources
from ticktask.source import (
    ManualTickSource,
    TickSource,
)

# Storage
from ticktask.storage import MemoryBuffer

__all__ = [
    # Version
    "__version__",
    # Config
    "SchedulerSettings",
    # Core
    "RunHandle",
    "TickTime",
    "OperationTimer",
    "format_hms",
    "format_dhms",
    "MersenneTwister",
    "Chunk",
    "is_slime_chunk",
    # Sources
    "TickSource",
    "ManualTickSource",
    # Scheduling
    "TaskScheduler",
    "Task",
    "TaskKind",
    "TaskStatus",
    "Job",
    "Progress",
    "Done",
    "Failed",
    "sleep_ticks",
    "TickTaskError",
    "InvalidTransitionError",
    # Storage
    "MemoryBuffer",
]
