"""MT19937 Mersenne Twister.

The standard library's ``random.Random`` seeds through ``init_by_array``, so
its output for an integer seed differs from the reference ``init_genrand``
stream that game worlds use for chunk classification. This generator uses
``init_genrand`` directly.

Usage:
    mt = MersenneTwister(5489)
    mt.next_uint32()  # 3499211612
"""

from __future__ import annotations

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """32-bit Mersenne Twister seeded from an unsigned 32-bit integer.

    Args:
        seed: Seed value; reduced modulo 2**32.
    """

    __slots__ = ("_mt", "_index")

    def __init__(self, seed: int) -> None:
        self._mt = [0] * _N
        self._index = _N
        self.seed(seed)

    def seed(self, seed: int) -> None:
        mt = self._mt
        mt[0] = seed & _MASK32
        for i in range(1, _N):
            prev = mt[i - 1]
            mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32
        self._index = _N

    def _twist(self) -> None:
        mt = self._mt
        for k in range(_N):
            y = (mt[k] & _UPPER_MASK) | (mt[(k + 1) % _N] & _LOWER_MASK)
            mt[k] = mt[(k + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._index = 0

    def next_uint32(self) -> int:
        """Next raw 32-bit output."""
        if self._index >= _N:
            self._twist()

        y = self._mt[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def next_int(self, a: int | None = None, b: int | None = None) -> int:
        """Unbiased integer.

        - ``next_int()``: raw 32-bit output
        - ``next_int(n)``: in ``[0, n)``
        - ``next_int(lo, hi)``: in ``[lo, hi)``

        A span outside ``(0, 2**32)`` falls back to a raw output offset by lo.
        """
        if a is None:
            return self.next_uint32()
        if b is None:
            low, span = 0, a
        else:
            low, span = a, b - a

        if not 0 < span < 0x100000000:
            return self.next_uint32() + low
        if span & (span - 1) == 0:
            return (self.next_uint32() & (span - 1)) + low

        while True:
            value = self.next_uint32()
            remainder = value % span
            # reject draws from the incomplete final bucket
            if 0x100000000 - (value - remainder) >= span:
                return remainder + low

    def next_float(self) -> float:
        """Float in [0, 1) with 53 bits of precision."""
        a = self.next_uint32() >> 5
        b = self.next_uint32() >> 6
        return (a * 67108864 + b) / 9007199254740992
