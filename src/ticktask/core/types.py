"""Core type definitions for ticktask."""

from collections.abc import Callable
from typing import Any, TypeAlias

Action: TypeAlias = Callable[[], Any]
"""Zero-argument callable scheduled on the tick source. Return value is ignored."""

ProgressCallback: TypeAlias = Callable[[Any], Any]
"""Receives the progress value reported by a job, at most once per tick."""
