"""Business logic for drawing lottery numbers from a random byte source."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from quantum_lottery.errors import ArithmeticInvariantError
from quantum_lottery.random_source import validate_payload
from quantum_lottery.services.bit_plan import BitPlan, plan_bits
from quantum_lottery.services.combinatorics import DrawSpec, count_draws, unrank_combination
from quantum_lottery.services.index_sampler import IndexSample, sample_index
from quantum_lottery.utils.formatting import format_number, format_sequence

logger = logging.getLogger(__name__)


FetchBytes = Callable[[int], Sequence[int]]


@dataclass(frozen=True)
class DrawResult:
    spec: DrawSpec
    combinations: int
    plan: BitPlan
    raw_bytes: tuple[int, ...]
    sample: IndexSample
    numbers: tuple[int, ...]


def describe_plan(spec: DrawSpec, combinations: int, plan: BitPlan) -> list[str]:
    lines = [
        f"For {spec.ball_count} balls numbered 1 to {spec.max_number}, "
        f"there are {format_number(combinations)} possible combinations.",
        f"To generate a random number in that range requires {plan.bits_needed} bits.",
    ]
    if plan.bits_needed == 0:
        lines.append("There is only one combination, so no random bytes are needed.")
        return lines

    lines.append(
        f"This will give us a random number in the range 1 to {format_number(plan.random_number_max)}."
    )
    overlap = plan.overlap(combinations)
    if overlap:
        lines.append(
            f"That's a bit too big so {format_number(overlap)} numbers will map to the same combination."
        )
    lines.append(f"The random source generates bytes, not bits, so we'll need at least {plan.bytes_needed} bytes.")
    return lines


def describe_draw(result: DrawResult) -> list[str]:
    """Human readable walk-through of every stage of a draw."""

    lines = describe_plan(result.spec, result.combinations, result.plan)
    sample = result.sample
    if result.plan.bytes_needed:
        lines.extend(
            [
                f"The random bytes we got from the random source are {format_sequence(result.raw_bytes)}.",
                f"These bytes convert to these random bits: {sample.bits}.",
                f"Truncating to the minimum number of bits we need gives us {sample.truncated_bits}.",
                f"Converted back into an integer, that's {format_number(sample.candidate)}.",
            ]
        )
    if sample.reduced:
        lines.append(
            f"Since this is too large, we mod it by {format_number(result.combinations)} "
            f"to get {format_number(sample.index)}."
        )
    lines.append(
        f"The corresponding lottery numbers for {format_number(sample.index)} are "
        f"{format_sequence(result.numbers)}"
    )
    return lines


class LotteryDrawService:
    """Draw lottery numbers: count, plan, fetch bytes, sample, unrank."""

    def __init__(self, fetch_bytes: FetchBytes) -> None:
        self._fetch_bytes = fetch_bytes

    @staticmethod
    def plan(ball_count: int, max_number: int) -> tuple[DrawSpec, int, BitPlan]:
        """Validate the draw and work out how much randomness it needs."""

        spec = DrawSpec(ball_count, max_number)
        combinations = count_draws(spec)
        return spec, combinations, plan_bits(combinations)

    def _fetch(self, count: int) -> tuple[int, ...]:
        if count == 0:
            return ()
        data = self._fetch_bytes(count)
        if isinstance(data, (bytes, bytearray, tuple)):
            data = list(data)
        return tuple(validate_payload(data, count))

    def draw(self, ball_count: int, max_number: int) -> DrawResult:
        """Draw ``ball_count`` distinct numbers from ``1..max_number``.

        Raises:
            InvalidDrawSpecError: before any bytes are requested.
            RandomSourceError: the byte source failed or returned a bad payload.
            ArithmeticInvariantError: an internal check failed.
        """

        spec, combinations, plan = self.plan(ball_count, max_number)
        planned = describe_plan(spec, combinations, plan)
        for line in planned:
            logger.info(line)

        raw_bytes = self._fetch(plan.bytes_needed)
        sample = sample_index(raw_bytes, plan.bits_needed, combinations)
        numbers = unrank_combination(spec.ball_count, sample.index, max_number=spec.max_number)

        if len(numbers) != spec.ball_count or any(b <= a for a, b in zip(numbers, numbers[1:])):
            raise ArithmeticInvariantError(
                message="Unranking produced a malformed combination",
                details={"numbers": numbers, "index": str(sample.index)},
            )

        result = DrawResult(
            spec=spec,
            combinations=combinations,
            plan=plan,
            raw_bytes=raw_bytes,
            sample=sample,
            numbers=tuple(numbers),
        )
        for line in describe_draw(result)[len(planned):]:
            logger.info(line)
        return result
