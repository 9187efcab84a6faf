"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from ticktask import ManualTickSource, SchedulerSettings, TaskScheduler


@pytest.fixture
def source():
    """Fresh ManualTickSource at tick 0."""
    return ManualTickSource()


@pytest.fixture
def settings():
    """Settings independent of the environment."""
    return SchedulerSettings(
        default_delay_ticks=1,
        job_time_budget_ms=1000.0,
        job_max_steps_per_tick=1,
        log_level="INFO",
    )


@pytest.fixture
def scheduler(source, settings):
    """TaskScheduler bound to the source fixture."""
    return TaskScheduler(source=source, settings=settings)


class CallRecorder:
    """Zero-argument callback that records the tick of every call."""

    def __init__(self, source: ManualTickSource) -> None:
        self._source = source
        self.ticks: list[int] = []

    def __call__(self) -> None:
        self.ticks.append(self._source.current_tick)

    @property
    def count(self) -> int:
        return len(self.ticks)


@pytest.fixture
def recorder(source):
    return CallRecorder(source)
