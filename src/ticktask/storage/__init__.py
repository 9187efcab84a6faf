"""In-memory storage helpers."""

from ticktask.storage.buffer import MemoryBuffer

__all__ = [
    "MemoryBuffer",
]
