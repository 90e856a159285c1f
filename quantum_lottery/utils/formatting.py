"""Stateless formatting helpers for human readable progress output."""

from __future__ import annotations

from collections.abc import Sequence


def format_number(value: int) -> str:
    """Format an integer of any size with thousands separators (``45,057,474``)."""

    return f"{int(value):,}"


def format_sequence(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(int(v)) for v in values) + "]"
