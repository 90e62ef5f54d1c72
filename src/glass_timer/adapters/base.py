"""Base adapter protocol for timeline backends."""

from typing import Protocol, runtime_checkable

from glass_timer.types import LiveCard


@runtime_checkable
class AsyncTimelineAdapter(Protocol):
    """Async timeline adapter interface."""

    async def get(self, tag: str) -> LiveCard | None:
        """Get the published card with a tag."""
        ...

    async def publish(self, card: LiveCard) -> None:
        """Publish a card, replacing any card with the same tag."""
        ...

    async def unpublish(self, tag: str) -> None:
        """Remove a published card."""
        ...

    async def clear(self) -> None:
        """Remove all published cards."""
        ...

    async def disconnect(self) -> None:
        """Disconnect from the timeline backend."""
        ...
