"""Configuration module using Pydantic Settings.

Usage:
    from ticktask.config import SchedulerSettings

    settings = SchedulerSettings(job_time_budget_ms=2.0)
"""

from ticktask.config.settings import SchedulerSettings

__all__ = [
    "SchedulerSettings",
]
