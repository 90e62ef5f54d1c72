"""Timeline adapters for glass_timer (async only)."""

from glass_timer.adapters.base import AsyncTimelineAdapter
from glass_timer.adapters.memory import AsyncMemoryTimeline
from glass_timer.adapters.redis import AsyncRedisTimeline

__all__ = [
    "AsyncMemoryTimeline",
    "AsyncRedisTimeline",
    "AsyncTimelineAdapter",
]
