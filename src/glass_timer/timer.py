"""Countdown timer state."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol


def monotonic_millis() -> int:
    """Monotonic clock in milliseconds."""
    return time.monotonic_ns() // 1_000_000


def epoch_millis() -> int:
    """Wall clock as a Unix timestamp in milliseconds."""
    return int(time.time() * 1000)


class TimerListener(Protocol):
    """Receives timer state changes."""

    def on_start(self) -> None: ...

    def on_pause(self) -> None: ...

    def on_reset(self) -> None: ...


class Timer:
    """Countdown that can be started, paused, resumed and reset.

    The remaining time keeps decreasing past zero, so a negative
    value is how long the timer has been overdue.
    """

    def __init__(
        self,
        duration_ms: int = 0,
        *,
        clock: Callable[[], int] = monotonic_millis,
    ) -> None:
        self._duration_ms = duration_ms
        self._clock = clock
        self._start_ms: int | None = None
        self._pause_ms: int | None = None
        self._listener: TimerListener | None = None
        self._resets = 0

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, duration_ms: int) -> None:
        self._duration_ms = duration_ms
        self.reset()

    def set_listener(self, listener: TimerListener | None) -> None:
        self._listener = listener

    @property
    def resets(self) -> int:
        """How many times the timer has been reset."""
        return self._resets

    @property
    def is_started(self) -> bool:
        return self._start_ms is not None

    @property
    def is_running(self) -> bool:
        return self._start_ms is not None and self._pause_ms is None

    @property
    def is_paused(self) -> bool:
        return self._pause_ms is not None

    @property
    def remaining_ms(self) -> int:
        """Time left in milliseconds; negative once overdue."""
        if self._start_ms is None:
            return self._duration_ms
        end = self._pause_ms if self._pause_ms is not None else self._clock()
        return self._duration_ms - (end - self._start_ms)

    @property
    def is_finished(self) -> bool:
        return self.is_started and self.remaining_ms <= 0

    def start(self) -> None:
        """Start the countdown, or resume it if paused."""
        if self.is_running:
            return
        now = self._clock()
        elapsed = 0
        if self._start_ms is not None and self._pause_ms is not None:
            elapsed = self._pause_ms - self._start_ms
        self._start_ms = now - elapsed
        self._pause_ms = None
        if self._listener is not None:
            self._listener.on_start()

    def pause(self) -> None:
        """Freeze the remaining time."""
        if not self.is_running:
            return
        self._pause_ms = self._clock()
        if self._listener is not None:
            self._listener.on_pause()

    def reset(self) -> None:
        """Stop the countdown and restore the full duration."""
        self._start_ms = None
        self._pause_ms = None
        self._resets += 1
        if self._listener is not None:
            self._listener.on_reset()
