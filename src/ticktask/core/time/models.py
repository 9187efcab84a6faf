"""Tick time value.

Usage:
    remaining = TickTime(6000).subtract_seconds(30)
    str(remaining)  # "00:04:30"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ticktask.core.time.operations import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    format_hms,
)

if TYPE_CHECKING:
    from ticktask.source.protocol import TickSource


class TickTime:
    """Mutable amount of game time stored in ticks.

    Arithmetic methods mutate in place and return self for chaining.
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: float = 0) -> None:
        self._ticks = ticks

    @classmethod
    def now(cls, source: TickSource) -> TickTime:
        """Current tick of ``source`` as a TickTime."""
        return cls(source.current_tick)

    def __repr__(self) -> str:
        return f"TickTime({self._ticks!r})"

    def __str__(self) -> str:
        return format_hms(self._ticks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickTime):
            return NotImplemented
        return self._ticks == other._ticks

    __hash__ = None  # type: ignore[assignment]

    @property
    def ticks(self) -> float:
        return self._ticks

    @ticks.setter
    def ticks(self, value: float) -> None:
        self._ticks = value

    @property
    def seconds(self) -> float:
        return self._ticks / TICKS_PER_SECOND

    @seconds.setter
    def seconds(self, value: float) -> None:
        self._ticks = value * TICKS_PER_SECOND

    @property
    def minutes(self) -> float:
        return self._ticks / TICKS_PER_MINUTE

    @minutes.setter
    def minutes(self, value: float) -> None:
        self._ticks = value * TICKS_PER_MINUTE

    @property
    def hours(self) -> float:
        return self._ticks / TICKS_PER_HOUR

    @hours.setter
    def hours(self, value: float) -> None:
        self._ticks = value * TICKS_PER_HOUR

    @property
    def days(self) -> float:
        return self._ticks / TICKS_PER_DAY

    @days.setter
    def days(self, value: float) -> None:
        self._ticks = value * TICKS_PER_DAY

    def add_ticks(self, ticks: float) -> TickTime:
        self._ticks += ticks
        return self

    def add_seconds(self, seconds: float) -> TickTime:
        return self.add_ticks(seconds * TICKS_PER_SECOND)

    def add_minutes(self, minutes: float) -> TickTime:
        return self.add_ticks(minutes * TICKS_PER_MINUTE)

    def add_hours(self, hours: float) -> TickTime:
        return self.add_ticks(hours * TICKS_PER_HOUR)

    def add_days(self, days: float) -> TickTime:
        return self.add_ticks(days * TICKS_PER_DAY)

    def subtract_ticks(self, ticks: float) -> TickTime:
        self._ticks -= ticks
        return self

    def subtract_seconds(self, seconds: float) -> TickTime:
        return self.subtract_ticks(seconds * TICKS_PER_SECOND)

    def subtract_minutes(self, minutes: float) -> TickTime:
        return self.subtract_ticks(minutes * TICKS_PER_MINUTE)

    def subtract_hours(self, hours: float) -> TickTime:
        return self.subtract_ticks(hours * TICKS_PER_HOUR)

    def subtract_days(self, days: float) -> TickTime:
        return self.subtract_ticks(days * TICKS_PER_DAY)

    def clone(self) -> TickTime:
        return TickTime(self._ticks)
