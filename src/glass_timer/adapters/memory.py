"""In-memory timeline adapter (async only)."""

import asyncio

from glass_timer.types import LiveCard


class AsyncMemoryTimeline:
    """Async in-memory timeline."""

    def __init__(self) -> None:
        self._cards: dict[str, LiveCard] = {}
        self._lock = asyncio.Lock()

    async def get(self, tag: str) -> LiveCard | None:
        """Get the published card with a tag."""
        async with self._lock:
            return self._cards.get(tag)

    async def publish(self, card: LiveCard) -> None:
        """Publish a card."""
        async with self._lock:
            self._cards[card.tag] = card

    async def unpublish(self, tag: str) -> None:
        """Remove a published card."""
        async with self._lock:
            self._cards.pop(tag, None)

    async def clear(self) -> None:
        """Remove all published cards."""
        async with self._lock:
            self._cards.clear()

    async def disconnect(self) -> None:
        """No-op for the memory timeline."""
        pass
