"""Tick sources."""

from ticktask.source.local import ManualTickSource
from ticktask.source.protocol import TickSource

__all__ = [
    "TickSource",
    "ManualTickSource",
]
