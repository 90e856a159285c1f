"""Turn raw random bytes into a rank inside the combination space."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from quantum_lottery.errors import ArithmeticInvariantError
from quantum_lottery.services.bit_plan import bytes_for_bits


@dataclass(frozen=True)
class IndexSample:
    bits: str
    truncated_bits: str
    candidate: int
    index: int

    @property
    def reduced(self) -> bool:
        return self.candidate != self.index


def bit_string(value: int) -> str:
    """One byte as exactly 8 big-endian binary digits."""

    if not 0 <= int(value) <= 255:
        raise ValueError(f"Not an unsigned byte: {value!r}")
    return format(int(value), "08b")


def bytes_to_bits(raw_bytes: Sequence[int]) -> str:
    return "".join(bit_string(b) for b in raw_bytes)


def sample_index(raw_bytes: Sequence[int], bits_needed: int, combinations: int) -> IndexSample:
    """Derive the rank index for a draw from ``raw_bytes``.

    The byte string is truncated to ``bits_needed`` bits and read as an
    unsigned integer. Candidates at or above ``combinations`` are folded back
    with a modulo, which leaves the low ranks slightly more likely; that
    trade-off keeps the byte consumption fixed at one request per draw.
    """

    expected = bytes_for_bits(bits_needed)
    if len(raw_bytes) != expected:
        raise ValueError(f"Expected {expected} bytes for {bits_needed} bits, got {len(raw_bytes)}")
    if combinations < 1:
        raise ValueError(f"Combination count must be positive, got {combinations}")

    bits = bytes_to_bits(raw_bytes)
    truncated_bits = bits[:bits_needed]
    candidate = int(truncated_bits, 2) if truncated_bits else 0

    index = candidate
    if index >= combinations:
        index %= combinations

    if not 0 <= index < combinations:
        raise ArithmeticInvariantError(
            message=f"Index {index} outside [0, {combinations})",
            details={"index": str(index), "combinations": str(combinations)},
        )

    return IndexSample(bits=bits, truncated_bits=truncated_bits, candidate=candidate, index=index)
