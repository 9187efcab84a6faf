"""Local in-process tick source implementation.

Simple dict-based registry driven by explicit ``tick()`` calls. Suitable for
single-process use, simulations and testing. A host bridge can drive it by
calling ``tick()`` from its own per-tick hook.

Usage:
    source = ManualTickSource()
    scheduler = TaskScheduler(source=source)
    source.advance(20)  # one second of game time
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass

from ticktask.core.identity import RunHandle
from ticktask.core.types import Action

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Registration:
    callback: Action
    due_tick: int | None  # None = every tick


class ManualTickSource:
    """In-memory tick source advanced by the caller.

    Structure:
        _entries[handle] = registration, in registration order

    Callbacks due on the same tick run in registration order. Registrations
    made while a tick is being delivered are first eligible on a later tick.

    Args:
        paused: Start with the clock stopped (default False).
    """

    def __init__(self, paused: bool = False) -> None:
        self._tick = 0
        self._paused = paused
        self._ids = itertools.count()
        self._entries: dict[RunHandle, _Registration] = {}

    @property
    def current_tick(self) -> int:
        return self._tick

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def pending_count(self) -> int:
        """Number of live registrations."""
        return len(self._entries)

    def play(self) -> ManualTickSource:
        self._paused = False
        return self

    def pause(self) -> ManualTickSource:
        self._paused = True
        return self

    def schedule_once_after(self, callback: Action, delay_ticks: int) -> RunHandle:
        delay = max(1, int(delay_ticks))
        handle = RunHandle(next(self._ids))
        self._entries[handle] = _Registration(callback=callback, due_tick=self._tick + delay)
        return handle

    def schedule_every_tick(self, callback: Action) -> RunHandle:
        handle = RunHandle(next(self._ids))
        self._entries[handle] = _Registration(callback=callback, due_tick=None)
        return handle

    def cancel(self, handle: RunHandle) -> None:
        self._entries.pop(handle, None)

    def is_scheduled(self, handle: RunHandle) -> bool:
        """Check if handle still has a pending registration."""
        return handle in self._entries

    def tick(self) -> None:
        """Advance the clock one tick and deliver due callbacks.

        Does nothing while the source is paused. An exception escaping a
        callback is logged and does not stop delivery to the others.
        """
        if self._paused:
            return

        self._tick += 1
        for handle, registration in list(self._entries.items()):
            if handle not in self._entries:
                continue  # cancelled earlier in this tick

            if registration.due_tick is not None:
                if registration.due_tick > self._tick:
                    continue
                self.cancel(handle)

            try:
                registration.callback()
            except Exception:
                logger.exception("Tick callback %s raised on tick %d", handle, self._tick)

    def advance(self, ticks: int) -> None:
        """Run ``tick()`` the given number of times."""
        for _ in range(ticks):
            self.tick()

    def clear(self) -> None:
        """Cancel every pending registration."""
        for handle in list(self._entries):
            self.cancel(handle)
