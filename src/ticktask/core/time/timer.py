"""Wall-clock timing of named operations, reported through logging."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class OperationTimer:
    """Measures one named operation at a time.

    Starting a new operation ends the one in progress.

    Usage:
        timer = OperationTimer()
        timer.begin("rebuild spawn map")
        ...
        elapsed_ms = timer.end()
    """

    def __init__(self) -> None:
        self._started: float | None = None
        self._operation = ""

    @property
    def operation(self) -> str | None:
        """Name of the operation being measured, None when idle."""
        return self._operation if self._started is not None else None

    def begin(self, operation: str) -> None:
        self.end()
        self._started = time.perf_counter()
        self._operation = operation

    def end(self) -> float | None:
        """Stop measuring and log the elapsed time at DEBUG.

        Returns:
            Elapsed milliseconds, or None if nothing was being measured.
        """
        if self._started is None:
            return None
        elapsed_ms = (time.perf_counter() - self._started) * 1000.0
        logger.debug("Operation %s took %.3fms", self._operation, elapsed_ms)
        self._started = None
        return elapsed_ms
