"""Registration identity: lightweight run handles."""

from ticktask.core.identity.models import RunHandle

__all__ = [
    "RunHandle",
]
