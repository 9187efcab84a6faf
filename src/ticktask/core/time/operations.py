"""Pure tick/time conversions and formatting.

Game time runs at 20 ticks per second.
"""

from __future__ import annotations

import math

TICKS_PER_SECOND = 20
TICKS_PER_MINUTE = TICKS_PER_SECOND * 60
TICKS_PER_HOUR = TICKS_PER_MINUTE * 60
TICKS_PER_DAY = TICKS_PER_HOUR * 24
SECONDS_PER_TICK = 1 / TICKS_PER_SECOND


def ticks_to_seconds(ticks: float) -> float:
    return ticks / TICKS_PER_SECOND


def seconds_to_ticks(seconds: float) -> float:
    return seconds * TICKS_PER_SECOND


def ticks_to_minutes(ticks: float) -> float:
    return ticks / TICKS_PER_MINUTE


def minutes_to_ticks(minutes: float) -> float:
    return minutes * TICKS_PER_MINUTE


def ticks_to_hours(ticks: float) -> float:
    return ticks / TICKS_PER_HOUR


def hours_to_ticks(hours: float) -> float:
    return hours * TICKS_PER_HOUR


def ticks_to_days(ticks: float) -> float:
    return ticks / TICKS_PER_DAY


def days_to_ticks(days: float) -> float:
    return days * TICKS_PER_DAY


def ms_to_ticks(milliseconds: float) -> int:
    """Whole ticks elapsed in ``milliseconds`` (floored)."""
    return int(milliseconds // (1000 / TICKS_PER_SECOND))


def format_hms(ticks: float) -> str:
    """Format ticks as HH:MM:SS.

    Seconds are floored, so negative input counts back from the hour below:
    ``format_hms(-20) == "-1:59:59"``.
    """
    total_seconds = math.floor(ticks_to_seconds(ticks))
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_dhms(ticks: float) -> str:
    """Format ticks as DD:HH:MM:SS."""
    days = math.floor(ticks_to_days(ticks))
    return f"{days:02d}:{format_hms(ticks % TICKS_PER_DAY)}"


def is_interval_tick(current_tick: int, interval: int) -> bool:
    """True on every tick that is a multiple of ``interval``.

    Raises:
        ValueError: If interval is not positive.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    return current_tick % interval == 0
