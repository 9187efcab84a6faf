"""Fixed-size FIFO memory buffer.

Usage:
    recent = MemoryBuffer[str](max_size=3)
    recent.add(["a", "b", "c", "d"])
    recent.snapshot()  # ["b", "c", "d"]
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class MemoryBuffer(Generic[T]):
    """FIFO buffer that drops its oldest items when it overflows.

    Args:
        max_size: Maximum number of items held.

    Raises:
        ValueError: If max_size is not greater than 0.
    """

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be greater than 0")
        self._items: deque[T] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._items.maxlen  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.max_size

    def add(self, items: Iterable[T]) -> None:
        """Append items in order, evicting the oldest on overflow."""
        self._items.extend(items)

    def snapshot(self) -> list[T]:
        """Copy of the whole buffer, oldest first."""
        return list(self._items)

    def get(self, amount: int | None = None, remove: bool = False) -> list[T]:
        """Up to ``amount`` items from the oldest end (all when None)."""
        if amount is None or amount > len(self._items):
            amount = len(self._items)
        amount = max(0, amount)
        if remove:
            return [self._items.popleft() for _ in range(amount)]
        return [self._items[i] for i in range(amount)]

    def first(self, remove: bool = False) -> T | None:
        if not self._items:
            return None
        return self._items.popleft() if remove else self._items[0]

    def last(self, remove: bool = False) -> T | None:
        if not self._items:
            return None
        return self._items.pop() if remove else self._items[-1]

    def clear(self) -> None:
        self._items.clear()
