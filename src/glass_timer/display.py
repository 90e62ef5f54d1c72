"""Countdown rendering for the timer card."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from glass_timer.timer import Timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CountdownFace:
    """What the timer card shows at one instant."""

    hours: int
    minutes: int
    seconds: int
    overtime: bool

    @property
    def text(self) -> str:
        sign = "-" if self.overtime else ""
        return f"{sign}{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


def countdown_face(remaining_ms: int) -> CountdownFace:
    """Split remaining time into a face.

    While counting down, partial seconds round up so the face never
    reads 00:00:00 before the timer has actually run out. Overtime
    counts whole elapsed seconds.
    """
    overtime = remaining_ms < 0
    if overtime:
        total_seconds = -remaining_ms // 1000
    else:
        total_seconds = -(-remaining_ms // 1000)

    minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return CountdownFace(
        hours=hours, minutes=minutes, seconds=seconds, overtime=overtime
    )


class CountdownDrawer:
    """Produces faces for a timer and signals when it runs out."""

    def __init__(
        self,
        timer: Timer,
        *,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._timer = timer
        self._on_finished = on_finished
        # Reset count at the time on_finished last fired
        self._notified_at: int | None = None

    @property
    def timer(self) -> Timer:
        return self._timer

    def draw(self) -> CountdownFace:
        """Render the current face, firing on_finished once at zero."""
        resets = self._timer.resets
        if self._timer.is_finished and self._notified_at != resets:
            self._notified_at = resets
            logger.info("Timer finished")
            if self._on_finished is not None:
                self._on_finished()
        return countdown_face(self._timer.remaining_ms)
