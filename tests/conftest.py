from __future__ import annotations

from collections.abc import Sequence

import pytest

from quantum_lottery import create_app


class FixedByteSource:
    """Hands out a fixed byte sequence and records every request."""

    name = "fixed"

    def __init__(self, data: Sequence[int]) -> None:
        self.data = list(data)
        self.calls: list[int] = []

    def __call__(self, count: int) -> list[int]:
        self.calls.append(count)
        return list(self.data)


class FailingByteSource:
    name = "failing"

    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls: list[int] = []

    def __call__(self, count: int) -> list[int]:
        self.calls.append(count)
        raise self.exc


@pytest.fixture
def fixed_bytes():
    """Build a byte source that always returns the given bytes."""
    return FixedByteSource


@pytest.fixture
def failing_bytes():
    """Build a byte source that raises the given exception."""
    return FailingByteSource


@pytest.fixture
def fixed_source():
    # 0b0111_0000: the first 4 bits decode to rank 7 of C(5, 2) = 10
    return FixedByteSource([0x70])


@pytest.fixture
def app(fixed_source):
    return create_app({"TESTING": True, "MAX_NUMBER_LIMIT": 1000}, byte_source=fixed_source)


@pytest.fixture
def client(app):
    return app.test_client()
