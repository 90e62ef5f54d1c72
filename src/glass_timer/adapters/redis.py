"""Redis timeline adapter."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from glass_timer.types import LiveCard


def _serialize_card(card: LiveCard) -> str:
    """Serialize a card to JSON."""
    return json.dumps(asdict(card))


def _deserialize_card(data: bytes | str) -> LiveCard:
    """Deserialize JSON to a card."""
    return LiveCard(**json.loads(data))


class AsyncRedisTimeline:
    """Async Redis timeline adapter."""

    def __init__(
        self,
        client: Any,  # redis.asyncio.Redis
        *,
        prefix: str = "glass_timer",
    ) -> None:
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str, *, prefix: str = "glass_timer") -> AsyncRedisTimeline:
        """Connect to Redis at a URL such as redis://localhost:6379/0."""
        import redis.asyncio

        return cls(redis.asyncio.Redis.from_url(url), prefix=prefix)

    def _card_key(self, tag: str) -> str:
        """Generate full Redis key for a card."""
        return f"{self._prefix}:card:{tag}"

    async def get(self, tag: str) -> LiveCard | None:
        """Get the published card with a tag."""
        data = await self._client.get(self._card_key(tag))
        if data is None:
            return None
        return _deserialize_card(data)

    async def publish(self, card: LiveCard) -> None:
        """Publish a card."""
        # Cards stay until unpublished; a timer may run past its duration
        await self._client.set(self._card_key(card.tag), _serialize_card(card))

    async def unpublish(self, tag: str) -> None:
        """Remove a published card."""
        await self._client.delete(self._card_key(tag))

    async def clear(self) -> None:
        """Remove all published cards."""
        keys = [
            key
            async for key in self._client.scan_iter(
                match=f"{self._prefix}:card:*", count=100
            )
        ]
        if keys:
            await self._client.delete(*keys)

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
