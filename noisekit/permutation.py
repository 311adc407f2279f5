"""Seeded permutation tables used to hash lattice coordinates."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

TABLE_SIZE = 256

_MASK32 = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_ZERO_SEED_FALLBACK = 0x0BAD_5EED


class XorShiftRng:
    """Marsaglia xorshift128 generator producing 32-bit words.

    The seed is 16 bytes, read as four little-endian 32-bit words. An all-zero
    seed would lock the generator at zero, so a fixed fallback state is used.
    """

    def __init__(self, seed: bytes) -> None:
        raw = bytes(seed)
        if len(raw) != 16:
            raise ValueError(f"seed must be exactly 16 bytes, got {len(raw)}")
        words = [int.from_bytes(raw[i : i + 4], "little") for i in range(0, 16, 4)]
        if not any(words):
            words = [_ZERO_SEED_FALLBACK] * 4
        self._x, self._y, self._z, self._w = words

    def next_u32(self) -> int:
        """Advance the generator and return the next 32-bit word."""
        t = (self._x ^ (self._x << 11)) & _MASK32
        self._x, self._y, self._z = self._y, self._z, self._w
        w = self._w
        self._w = (w ^ (w >> 19) ^ (t ^ (t >> 8))) & _MASK32
        return self._w

    def _next_u64(self) -> int:
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low

    def gen_range(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in ``[low, high)``."""
        if low >= high:
            raise ValueError(f"empty range: low ({low}) must be below high ({high})")
        span = (high - low) & _MASK64
        leading_zeros = 64 - span.bit_length()
        zone = ((span << leading_zeros) & _MASK64) - 1
        while True:
            product = self._next_u64() * span
            if product & _MASK64 <= zone:
                return low + (product >> 64)

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place (Fisher-Yates, from the back)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.gen_range(0, i + 1)
            items[i], items[j] = items[j], items[i]


class PermutationTable:
    """A shuffled table of the byte values 0..255, required by noise functions.

    Building a table is comparatively expensive; one per generator is enough.
    """

    __slots__ = ("_values",)

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        rng = XorShiftRng((1).to_bytes(4, "little") + seed.to_bytes(4, "little") * 3)
        self._values = self._shuffled(rng)

    @classmethod
    def from_rng(cls, rng: XorShiftRng) -> PermutationTable:
        """Build a table by shuffling with an existing generator."""
        table = cls.__new__(cls)
        table._values = cls._shuffled(rng)
        return table

    @staticmethod
    def _shuffled(rng: XorShiftRng) -> tuple[int, ...]:
        values = list(range(TABLE_SIZE))
        rng.shuffle(values)
        return tuple(values)

    @property
    def values(self) -> tuple[int, ...]:
        """The 256 table entries."""
        return self._values

    def get1(self, x: int) -> int:
        return self._values[x & 0xFF]

    def get2(self, pos) -> int:
        x, y = pos
        return self._values[self.get1(x) ^ (y & 0xFF)]

    def get3(self, pos) -> int:
        x, y, z = pos
        return self._values[self.get2((x, y)) ^ (z & 0xFF)]

    def get4(self, pos) -> int:
        x, y, z, w = pos
        return self._values[self.get3((x, y, z)) ^ (w & 0xFF)]

    def __repr__(self) -> str:
        return "PermutationTable(..)"