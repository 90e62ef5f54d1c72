"""Shared pytest fixtures."""

import pytest

from glass_timer import AsyncMemoryTimeline


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = 1_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    """Create a fresh FakeClock for each test."""
    return FakeClock()


@pytest.fixture
def timeline() -> AsyncMemoryTimeline:
    """Create a fresh AsyncMemoryTimeline for each test."""
    return AsyncMemoryTimeline()
