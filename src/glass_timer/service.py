"""Service owning the timer card in the timeline.

This module ties voice input to the timeline:
- on_start_command(): parse the spoken duration and publish the card
- menu_items(), on_menu_action(): the card's start/pause/reset/stop menu
- draw(): the current countdown face
- on_destroy(): unpublish the card
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from glass_timer.adapters.base import AsyncTimelineAdapter
from glass_timer.display import CountdownDrawer, CountdownFace
from glass_timer.timer import Timer, epoch_millis, monotonic_millis
from glass_timer.types import LiveCard
from glass_timer.units import DEFAULT_UNIT_TABLE, LocalizedUnitTable
from glass_timer.voice import first_hypothesis_duration

logger = logging.getLogger(__name__)

LIVE_CARD_TAG = "timer"


class StartMode(Enum):
    """Whether the host should keep the service alive."""

    STICKY = "sticky"
    NOT_STICKY = "not_sticky"


class MenuAction(Enum):
    """Options in the timer card's menu."""

    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    RESET = "reset"
    STOP = "stop"


class TimerService:
    """Publishes a countdown card for a spoken timer request."""

    def __init__(
        self,
        timeline: AsyncTimelineAdapter,
        *,
        unit_table: LocalizedUnitTable = DEFAULT_UNIT_TABLE,
        clock: Callable[[], int] = monotonic_millis,
        wall_clock: Callable[[], int] = epoch_millis,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._timeline = timeline
        self._unit_table = unit_table
        self._wall_clock = wall_clock
        self._timer = Timer(clock=clock)
        self._drawer = CountdownDrawer(self._timer, on_finished=on_finished)
        self._card: LiveCard | None = None

    @property
    def timer(self) -> Timer:
        return self._timer

    @property
    def card(self) -> LiveCard | None:
        return self._card

    async def on_start_command(self, voice_results: Sequence[str] | None) -> StartMode:
        """Handle a voice trigger.

        Args:
            voice_results: Recognizer hypotheses, best first

        Returns:
            STICKY if a timer card is published, NOT_STICKY otherwise
        """
        if not voice_results:
            return StartMode.NOT_STICKY

        if self._card is not None:
            # TODO: start a new timer on the existing card
            logger.warning(
                "Timer card already published, ignoring %r", voice_results[0]
            )
            return StartMode.STICKY

        duration_ms = first_hypothesis_duration(voice_results, self._unit_table)
        if duration_ms == 0:
            logger.info("No timer duration in %r", voice_results[0])
            return StartMode.NOT_STICKY

        stale = await self._timeline.get(LIVE_CARD_TAG)
        if stale is not None:
            # Left over from an earlier service instance; its timer is gone
            logger.info("Replacing timer card published at %d", stale.published_at)

        self._timer.duration_ms = duration_ms
        card = LiveCard(
            tag=LIVE_CARD_TAG,
            duration_ms=duration_ms,
            published_at=self._wall_clock(),
        )
        await self._timeline.publish(card)
        self._card = card
        self._timer.start()
        logger.info("Published timer card for %dms", duration_ms)
        return StartMode.STICKY

    def menu_items(self) -> list[MenuAction]:
        """Menu actions that apply to the timer's current state."""
        if self._card is None:
            return []
        items: list[MenuAction] = []
        if not self._timer.is_started:
            items.append(MenuAction.START)
        elif self._timer.is_running:
            items.append(MenuAction.PAUSE)
        else:
            items.append(MenuAction.RESUME)
        if self._timer.is_started:
            items.append(MenuAction.RESET)
        items.append(MenuAction.STOP)
        return items

    async def on_menu_action(self, action: MenuAction) -> None:
        """Apply a menu action to the timer."""
        if action not in self.menu_items():
            raise ValueError(f"Menu action not available: {action.value}")

        if action is MenuAction.STOP:
            await self.on_destroy()
        elif action is MenuAction.PAUSE:
            self._timer.pause()
        elif action is MenuAction.RESET:
            self._timer.reset()
        else:
            self._timer.start()

    def draw(self) -> CountdownFace | None:
        """Current countdown face, or None without a card."""
        if self._card is None:
            return None
        return self._drawer.draw()

    async def on_destroy(self) -> None:
        """Unpublish the card and reset the timer."""
        if self._card is None:
            return
        await self._timeline.unpublish(self._card.tag)
        self._card = None
        self._timer.reset()
        logger.info("Unpublished timer card")
