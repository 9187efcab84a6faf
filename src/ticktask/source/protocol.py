"""Tick source protocol for swappable hosts.

The tick source is the host facility that delivers callbacks on tick
boundaries. Abstracting it enables:
- Manual in-process ticking (default, tests, simulations)
- Bridges to a real game-server scripting host

Usage:
    source = ManualTickSource()
    scheduler = TaskScheduler(source=source)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ticktask.core.identity import RunHandle
from ticktask.core.types import Action


@runtime_checkable
class TickSource(Protocol):
    """Abstract tick source interface. Implementations own the tick clock."""

    @property
    def current_tick(self) -> int:
        """Number of ticks elapsed since the source was created."""
        ...

    def schedule_once_after(self, callback: Action, delay_ticks: int) -> RunHandle:
        """Invoke callback exactly once, no sooner than delay_ticks ticks from now."""
        ...

    def schedule_every_tick(self, callback: Action) -> RunHandle:
        """Invoke callback on every subsequent tick until cancelled."""
        ...

    def cancel(self, handle: RunHandle) -> None:
        """Stop future invocations tied to handle.

        Safe to call on an already-cancelled or already-fired handle.
        """
        ...
