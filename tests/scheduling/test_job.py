"""Tests for staged jobs.

Critical Invariants:
- Progress is reported at most once per tick
- Done completes, Failed / raised errors fail, exactly once
- Termination releases the tick-source registration
- Callback errors are contained
"""

import pytest

from ticktask import Done, Failed, Job, ManualTickSource, Progress, SchedulerSettings, TaskStatus
from ticktask.scheduling import generator_step


def _counting_steps(total: int, result: str = "ok"):
    state = {"n": 0}

    def step():
        state["n"] += 1
        if state["n"] > total:
            return Done(result)
        return Progress(state["n"])

    return step


@pytest.fixture
def fast_settings():
    """Unbounded steps per tick so a job can run to completion in one tick."""
    return SchedulerSettings(job_time_budget_ms=10_000.0, job_max_steps_per_tick=1000)


# Step results


def test_one_step_per_tick_reports_every_progress(source, settings):
    progress: list[int] = []
    job = Job(_counting_steps(3), source, on_progress=progress.append, settings=settings)

    source.advance(3)
    assert progress == [1, 2, 3]
    assert job.status is TaskStatus.RUNNING

    source.tick()
    assert job.status is TaskStatus.COMPLETED
    assert job.result == "ok"
    assert source.pending_count == 0


def test_progress_reported_at_most_once_per_tick(source, fast_settings):
    """CRITICAL: Many steps in one tick yield a single progress report.

    Why: Progress callbacks usually touch the host UI; once per tick is the cap.
    """
    progress: list[int] = []
    job = Job(_counting_steps(50), source, on_progress=progress.append, settings=fast_settings)

    source.tick()

    assert progress == [1]
    assert job.status is TaskStatus.COMPLETED


def test_step_cap_limits_work_per_tick(source):
    settings = SchedulerSettings(job_time_budget_ms=10_000.0, job_max_steps_per_tick=4)
    progress: list[int] = []
    job = Job(_counting_steps(10), source, on_progress=progress.append, settings=settings)

    source.advance(2)

    assert progress == [1, 5]
    assert job.status is TaskStatus.RUNNING


def test_failed_result_fails_job(source, settings, caplog):
    error = ValueError("corrupt region file")
    errors: list[BaseException] = []
    done: list[object] = []
    job = Job(lambda: Failed(error), source, settings=settings)
    job.on_error(errors.append).on_done(done.append)

    source.tick()

    assert job.status is TaskStatus.FAILED
    assert job.error is error
    assert errors == [error]
    assert done == []
    assert source.pending_count == 0
    assert "Job failed" in caplog.text


def test_raising_step_fails_job(source, settings):
    def step():
        raise RuntimeError("index out of bounds")

    job = Job(step, source, settings=settings)
    source.tick()

    assert job.status is TaskStatus.FAILED
    assert isinstance(job.error, RuntimeError)


def test_invalid_step_result_fails_job(source, settings):
    job = Job(lambda: 42, source, settings=settings)  # type: ignore[arg-type, return-value]
    source.tick()

    assert job.status is TaskStatus.FAILED
    assert isinstance(job.error, TypeError)


# Callbacks


def test_done_then_finally_order(source, settings):
    calls: list[str] = []
    job = Job(lambda: Done("loot"), source, settings=settings)
    job.on_finally(lambda: calls.append("finally"))
    job.on_done(lambda r: calls.append(f"done:{r}"))
    job.on_error(lambda e: calls.append("error"))

    source.tick()

    assert calls == ["done:loot", "finally"]


def test_error_then_finally_order(source, settings):
    calls: list[str] = []
    job = Job(lambda: Failed(OSError("disk")), source, settings=settings)
    job.on_done(lambda r: calls.append("done"))
    job.on_error(lambda e: calls.append(f"error:{e}"))
    job.on_finally(lambda: calls.append("finally"))

    source.tick()

    assert calls == ["error:disk", "finally"]


def test_callback_errors_are_contained(source, settings, caplog):
    calls: list[str] = []

    def broken(_result):
        raise RuntimeError("listener broke")

    job = Job(lambda: Done(1), source, on_progress=None, settings=settings)
    job.on_done(broken).on_done(lambda r: calls.append("second"))
    job.on_finally(lambda: calls.append("finally"))

    source.tick()

    assert job.status is TaskStatus.COMPLETED
    assert calls == ["second", "finally"]
    assert "Job callback" in caplog.text


def test_progress_callback_error_does_not_fail_job(source, settings):
    def bad_progress(_value):
        raise RuntimeError("ui gone")

    job = Job(_counting_steps(1), source, on_progress=bad_progress, settings=settings)
    source.advance(2)

    assert job.status is TaskStatus.COMPLETED


def test_callbacks_after_termination_never_fire(source, settings):
    calls: list[str] = []
    job = Job(lambda: Done(None), source, settings=settings)
    source.tick()

    job.on_done(lambda r: calls.append("done")).on_finally(lambda: calls.append("finally"))
    source.advance(3)

    assert calls == []


# abort()


def test_abort_is_idempotent_and_silent(source, settings):
    calls: list[str] = []
    job = Job(_counting_steps(10), source, settings=settings)
    job.on_done(lambda r: calls.append("done")).on_finally(lambda: calls.append("finally"))

    source.tick()
    job.abort()
    job.abort()
    source.advance(20)

    assert job.status is TaskStatus.ABORTED
    assert calls == []
    assert source.pending_count == 0


def test_abort_after_completion_keeps_status(source, settings):
    job = Job(lambda: Done(3), source, settings=settings)
    source.tick()
    job.abort()

    assert job.status is TaskStatus.COMPLETED
    assert job.result == 3


def test_abort_from_progress_callback_stops_job(source, fast_settings):
    steps: list[int] = []

    def step():
        steps.append(1)
        return Progress(len(steps))

    job = Job(step, source, on_progress=lambda _v: job.abort(), settings=fast_settings)
    source.advance(3)

    assert job.status is TaskStatus.ABORTED
    assert steps == [1]


@pytest.mark.parametrize(
    "outcome",
    [Done("x"), Failed(ValueError("late")), Progress(1)],
    ids=["done", "failed", "progress"],
)
def test_step_aborting_its_job_ignores_returned_result(source, settings, outcome):
    """CRITICAL: Whatever a self-aborting step returns, the job stays ABORTED.

    Why: ABORTED is terminal and abort() runs no callbacks, progress included.
    """
    progress: list[object] = []
    calls: list[str] = []

    def step():
        job.abort()
        return outcome

    job = Job(step, source, on_progress=progress.append, settings=settings)
    job.on_done(lambda r: calls.append("done"))
    job.on_error(lambda e: calls.append("error"))
    job.on_finally(lambda: calls.append("finally"))
    source.advance(3)

    assert job.status is TaskStatus.ABORTED
    assert job.result is None
    assert job.error is None
    assert progress == []
    assert calls == []
    assert source.pending_count == 0


def test_step_aborting_its_job_then_raising_stays_aborted(source, settings):
    def step():
        job.abort()
        raise RuntimeError("chunk unloaded")

    job = Job(step, source, settings=settings)
    source.tick()

    assert job.status is TaskStatus.ABORTED
    assert job.error is None


# Generator adapter


def test_from_generator_maps_yield_return_and_raise():
    def ok():
        yield "a"
        return "b"

    step = generator_step(ok())
    assert step() == Progress("a")
    assert step() == Done("b")

    def bad():
        yield 1
        raise LookupError("missing biome")

    step = generator_step(bad())
    assert step() == Progress(1)
    failed = step()
    assert isinstance(failed, Failed)
    assert isinstance(failed.error, LookupError)


def test_from_generator_runs_to_completion(settings):
    source = ManualTickSource()
    progress: list[float] = []

    def work():
        for i in range(4):
            yield i / 4
        return "done"

    job = Job.from_generator(work, source, on_progress=progress.append, settings=settings)
    source.advance(10)

    assert progress == [0.0, 0.25, 0.5, 0.75]
    assert job.result == "done"
    assert job.status is TaskStatus.COMPLETED
