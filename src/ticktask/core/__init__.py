"""Core functionalities: stateless primitives and value types.

Architecture Note:
    core/ contains pure building blocks with no tick-source dependency.
    For stateful services, see source/, scheduling/ and storage/.
"""

from ticktask.core.identity import RunHandle
from ticktask.core.prng import Chunk, MersenneTwister, is_slime_chunk
from ticktask.core.time import (
    TICKS_PER_SECOND,
    OperationTimer,
    TickTime,
    format_dhms,
    format_hms,
    is_interval_tick,
    ms_to_ticks,
)
from ticktask.core.types import Action, ProgressCallback

__all__ = [
    # Types
    "Action",
    "ProgressCallback",
    # Identity
    "RunHandle",
    # Time
    "TICKS_PER_SECOND",
    "TickTime",
    "OperationTimer",
    "format_hms",
    "format_dhms",
    "is_interval_tick",
    "ms_to_ticks",
    # PRNG
    "MersenneTwister",
    "Chunk",
    "is_slime_chunk",
]
