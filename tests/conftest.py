"""Shared fixtures for mathedit tests."""

from collections.abc import Iterator

import pytest

from mathedit import Cursor


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class ChangeCounter:
    """on_change callback that counts notifications."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cursor(clock: FakeClock) -> Iterator[Cursor]:
    c = Cursor(clock=clock)
    yield c
    c.close()


@pytest.fixture
def changes(cursor: Cursor) -> ChangeCounter:
    counter = ChangeCounter()
    cursor.on_change(counter)
    return counter
