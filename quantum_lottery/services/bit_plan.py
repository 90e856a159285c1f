"""Minimum number of random bits (and bytes) covering a combination space."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BitPlan:
    bits_needed: int
    bytes_needed: int

    @property
    def random_number_max(self) -> int:
        """Size of the raw random range, ``2 ** bits_needed``."""
        return 1 << self.bits_needed

    def overlap(self, combinations: int) -> int:
        """How many raw values alias onto an already covered combination."""
        return max(self.random_number_max - combinations, 0)


def bytes_for_bits(bits_needed: int) -> int:
    if bits_needed <= 0:
        return 0
    return (bits_needed - 1) // 8 + 1


def plan_bits(combinations: int) -> BitPlan:
    """Smallest ``b`` with ``2 ** b >= combinations``.

    Found by repeated doubling so no float rounding creeps in for counts far
    beyond double precision. ``combinations <= 1`` needs no randomness.
    """

    bits_needed = 0
    product = 1
    while product < combinations:
        product *= 2
        bits_needed += 1
    return BitPlan(bits_needed=bits_needed, bytes_needed=bytes_for_bits(bits_needed))
