"""Chunk bounds and slime-chunk classification.

Usage:
    chunk = Chunk(x=-37, z=120)
    chunk.chunk_x, chunk.chunk_z  # (-3, 7)
    chunk.is_slime()
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ticktask.core.prng.mersenne import MersenneTwister

CHUNK_SIZE = 16
_SLIME_MULTIPLIER = 0x1F1F1F1F
_MASK32 = 0xFFFFFFFF


def slime_seed(chunk_x: int, chunk_z: int) -> int:
    """MT seed for a chunk: low 32 bits of ``chunk_x * 0x1f1f1f1f`` xor ``chunk_z``.

    Chunk coordinates are taken as unsigned 32-bit values.
    """
    return ((chunk_x & _MASK32) * _SLIME_MULTIPLIER & _MASK32) ^ (chunk_z & _MASK32)


def is_slime_chunk(x: float, z: float) -> bool:
    """Check whether the block position (x, z) lies in a slime chunk."""
    chunk_x = math.floor(x / CHUNK_SIZE)
    chunk_z = math.floor(z / CHUNK_SIZE)
    return MersenneTwister(slime_seed(chunk_x, chunk_z)).next_uint32() % 10 == 0


@dataclass(frozen=True, slots=True)
class Chunk:
    """The 16x16 column containing block position (x, z)."""

    x: float
    z: float
    min_x: int = field(init=False)
    min_z: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_x", math.floor(self.x / CHUNK_SIZE) * CHUNK_SIZE)
        object.__setattr__(self, "min_z", math.floor(self.z / CHUNK_SIZE) * CHUNK_SIZE)

    @property
    def max_x(self) -> int:
        return self.min_x + CHUNK_SIZE - 1

    @property
    def max_z(self) -> int:
        return self.min_z + CHUNK_SIZE - 1

    @property
    def chunk_x(self) -> int:
        return self.min_x // CHUNK_SIZE

    @property
    def chunk_z(self) -> int:
        return self.min_z // CHUNK_SIZE

    @property
    def center(self) -> tuple[float, float]:
        return (self.min_x + 7.5, self.min_z + 7.5)

    def contains(self, x: float, z: float) -> bool:
        return (
            self.min_x <= x < self.min_x + CHUNK_SIZE
            and self.min_z <= z < self.min_z + CHUNK_SIZE
        )

    def is_slime(self) -> bool:
        return is_slime_chunk(self.x, self.z)
