"""Exact combination counting and combinatorial number system unranking.

Ranks map to combinations in colexicographic order: rank 0 is ``[1..k]`` and
each rank ``r`` decomposes uniquely as ``C(c_k, k) + ... + C(c_1, 1)`` with
``c_k > ... > c_1 >= 0``; the drawn numbers are ``c_j + 1``.

See https://en.wikipedia.org/wiki/Combinatorial_number_system
"""

from __future__ import annotations

from dataclasses import dataclass
from math import comb

from quantum_lottery.errors import ArithmeticInvariantError, InvalidDrawSpecError


@dataclass(frozen=True)
class DrawSpec:
    """How many balls are drawn (``ball_count``) from ``1..max_number``."""

    ball_count: int
    max_number: int

    def __post_init__(self) -> None:
        problems: dict[str, list[str]] = {}
        if self.ball_count <= 0:
            problems["ball_count"] = ["Must be >= 1"]
        if self.max_number <= 0:
            problems["max_number"] = ["Must be >= 1"]
        if not problems and self.ball_count > self.max_number:
            problems["ball_count"] = ["Must be <= max_number"]
        if problems:
            raise InvalidDrawSpecError(
                message=f"Cannot draw {self.ball_count} balls numbered 1 to {self.max_number}",
                details=problems,
            )


def n_choose_k(n: int, k: int) -> int:
    """Exact binomial coefficient; ``0`` when ``k > n``."""

    if k < 0 or n < 0 or k > n:
        return 0
    return comb(n, k)


def count_combinations(ball_count: int, max_number: int) -> int:
    """Number of distinct draws of ``ball_count`` balls from ``1..max_number``."""

    return count_draws(DrawSpec(ball_count, max_number))


def count_draws(spec: DrawSpec) -> int:
    """Exact ``C(max_number, ball_count)`` for an already validated draw."""

    numerator = 1
    denominator = 1
    for i in range(spec.ball_count):
        numerator *= spec.max_number - i
        denominator *= i + 1
    return numerator // denominator


def unrank_combination(ball_count: int, rank: int, max_number: int | None = None) -> list[int]:
    """Return the strictly increasing combination whose rank is ``rank``.

    For every slot, scan ``i`` upward from ``k - 1`` until ``C(i, k)`` exceeds
    the remaining position; ``i`` is the next number (prepended so the result
    ends up increasing) and the largest coefficient not exceeding the
    position is subtracted.
    """

    if rank < 0:
        raise ArithmeticInvariantError(message=f"Negative rank {rank}")

    numbers: list[int] = []
    k = ball_count
    position = rank
    for _ in range(ball_count):
        i = k - 1
        previous = 0
        current = n_choose_k(i, k)
        while current <= position:
            i += 1
            if max_number is not None and i > max_number:
                raise ArithmeticInvariantError(
                    message=f"Rank {rank} is outside the combinations of {ball_count} from {max_number}",
                    details={"rank": str(rank), "ball_count": ball_count, "max_number": max_number},
                )
            previous = current
            current = n_choose_k(i, k)
        numbers.insert(0, i)
        position -= previous
        k -= 1

    return numbers
