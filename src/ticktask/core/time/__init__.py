"""Tick time: conversion constants, formatting, TickTime values and timers."""

from ticktask.core.time.models import TickTime
from ticktask.core.time.operations import (
    SECONDS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    days_to_ticks,
    format_dhms,
    format_hms,
    hours_to_ticks,
    is_interval_tick,
    minutes_to_ticks,
    ms_to_ticks,
    seconds_to_ticks,
    ticks_to_days,
    ticks_to_hours,
    ticks_to_minutes,
    ticks_to_seconds,
)
from ticktask.core.time.timer import OperationTimer

__all__ = [
    # Constants
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "SECONDS_PER_TICK",
    # Conversions
    "ticks_to_seconds",
    "seconds_to_ticks",
    "ticks_to_minutes",
    "minutes_to_ticks",
    "ticks_to_hours",
    "hours_to_ticks",
    "ticks_to_days",
    "days_to_ticks",
    "ms_to_ticks",
    # Formatting
    "format_hms",
    "format_dhms",
    "is_interval_tick",
    # Models
    "TickTime",
    "OperationTimer",
]
