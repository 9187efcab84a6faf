"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from ticktask.config import SchedulerSettings

    # Load from environment variables (TICKTASK_*)
    settings = SchedulerSettings()

    # Or override with explicit values
    settings = SchedulerSettings(default_delay_ticks=5)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchedulerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the task scheduler and staged jobs.

    Attributes:
        default_delay_ticks: Delay used when run_interval/run_timeout get none.
        job_time_budget_ms: Wall-clock budget a job may spend per tick.
        job_max_steps_per_tick: Hard cap on job steps per tick.
        log_level: Level name used by setup_logging.

    Environment Variables:
        TICKTASK_DEFAULT_DELAY_TICKS
        TICKTASK_JOB_TIME_BUDGET_MS
        TICKTASK_JOB_MAX_STEPS_PER_TICK
        TICKTASK_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKTASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_delay_ticks: int = 1
    job_time_budget_ms: float = Field(default=4.0, gt=0)
    job_max_steps_per_tick: int = Field(default=1000, ge=1)
    log_level: str = "INFO"
