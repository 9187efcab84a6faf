"""Run handle models.

Usage:
    handle = RunHandle(42)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RunHandle:
    """Opaque identifier for one tick-source registration.

    Ids come from a per-source counter and are never reused, so a handle
    kept after cancellation can never match a newer registration.
    """

    id: int

    def __str__(self) -> str:
        return f"run#{self.id}"
