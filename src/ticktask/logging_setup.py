from __future__ import annotations

import logging
import sys
from pathlib import Path

from ticktask.config import SchedulerSettings

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow all ticktask logs at the handler level
    - suppress Python warnings (captured as 'py.warnings') unless WARNING+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "ticktask" or name.startswith("ticktask."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.WARNING

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    level: int | str | None = None,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
    settings: SchedulerSettings | None = None,
) -> None:
    """
    Configure logging with:
    - Console handler: filtered, at `level` (defaults to settings.log_level)
    - File handler (optional): full logs for post-hoc diagnosis

    Call this once from the host script, before scheduling anything.
    """
    if level is None:
        level = (settings or SchedulerSettings()).log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
