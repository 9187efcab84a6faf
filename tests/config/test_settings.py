"""Tests for SchedulerSettings environment loading."""

import pytest
from pydantic import ValidationError

from ticktask.config import SchedulerSettings


def test_defaults(monkeypatch):
    for name in (
        "TICKTASK_DEFAULT_DELAY_TICKS",
        "TICKTASK_JOB_TIME_BUDGET_MS",
        "TICKTASK_JOB_MAX_STEPS_PER_TICK",
        "TICKTASK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = SchedulerSettings(_env_file=None)

    assert settings.default_delay_ticks == 1
    assert settings.job_time_budget_ms == 4.0
    assert settings.job_max_steps_per_tick == 1000
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TICKTASK_DEFAULT_DELAY_TICKS", "20")
    monkeypatch.setenv("TICKTASK_JOB_TIME_BUDGET_MS", "2.5")
    monkeypatch.setenv("TICKTASK_LOG_LEVEL", "DEBUG")

    settings = SchedulerSettings(_env_file=None)

    assert settings.default_delay_ticks == 20
    assert settings.job_time_budget_ms == 2.5
    assert settings.log_level == "DEBUG"


def test_explicit_values_beat_environment(monkeypatch):
    monkeypatch.setenv("TICKTASK_DEFAULT_DELAY_TICKS", "20")
    assert SchedulerSettings(_env_file=None, default_delay_ticks=3).default_delay_ticks == 3


@pytest.mark.parametrize(
    "kwargs",
    [{"job_time_budget_ms": 0}, {"job_max_steps_per_tick": 0}],
    ids=["zero-budget", "zero-steps"],
)
def test_invalid_job_limits_rejected(kwargs):
    with pytest.raises(ValidationError):
        SchedulerSettings(_env_file=None, **kwargs)
