"""Deterministic pseudo-random generation and chunk classification."""

from ticktask.core.prng.chunk import CHUNK_SIZE, Chunk, is_slime_chunk, slime_seed
from ticktask.core.prng.mersenne import MersenneTwister

__all__ = [
    "MersenneTwister",
    "Chunk",
    "CHUNK_SIZE",
    "is_slime_chunk",
    "slime_seed",
]
