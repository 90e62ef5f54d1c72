"""Integration tests for Redis timeline adapter using testcontainers."""

import pytest

# Skip all tests if redis or testcontainers are not installed
pytest.importorskip("redis")
pytest.importorskip("testcontainers")

import redis
import redis.asyncio
from testcontainers.redis import RedisContainer

from glass_timer import LIVE_CARD_TAG, AsyncRedisTimeline, LiveCard, TimerService


@pytest.fixture(scope="module")
def redis_container():
    """Start a Redis container for the test module."""
    try:
        container = RedisContainer().start()
    except Exception as exc:  # Docker not reachable
        pytest.skip(f"Redis container unavailable: {exc}")
    yield container
    container.stop()


@pytest.fixture
def redis_url(redis_container) -> str:
    """URL of the container's Redis, flushed after each test."""
    host = redis_container.get_container_host_ip()
    port = redis_container.get_exposed_port(6379)
    yield f"redis://{host}:{port}/0"
    client = redis.Redis(host=host, port=port)
    client.flushdb()
    client.close()


@pytest.fixture
def redis_timeline(redis_url: str) -> AsyncRedisTimeline:
    """Create an AsyncRedisTimeline with a test prefix."""
    return AsyncRedisTimeline(
        redis.asyncio.Redis.from_url(redis_url, decode_responses=False),
        prefix="test",
    )


class TestAsyncRedisTimelineIntegration:
    """Integration tests for AsyncRedisTimeline."""

    @pytest.mark.asyncio
    async def test_get_nonexistent_returns_none(
        self, redis_timeline: AsyncRedisTimeline
    ) -> None:
        """Test that getting an unpublished tag returns None."""
        assert await redis_timeline.get("timer") is None
        await redis_timeline.disconnect()

    @pytest.mark.asyncio
    async def test_publish_get_unpublish(
        self, redis_timeline: AsyncRedisTimeline
    ) -> None:
        """Test a card's round trip through Redis."""
        card = LiveCard(tag="timer", duration_ms=300_000, published_at=1000)
        await redis_timeline.publish(card)
        assert await redis_timeline.get("timer") == card

        await redis_timeline.unpublish("timer")
        assert await redis_timeline.get("timer") is None
        await redis_timeline.disconnect()

    @pytest.mark.asyncio
    async def test_clear_only_own_cards(
        self, redis_timeline: AsyncRedisTimeline, redis_url: str
    ) -> None:
        """Test that clear removes cards under the prefix only."""
        other = AsyncRedisTimeline.from_url(redis_url, prefix="other")
        await other.publish(LiveCard(tag="timer", duration_ms=1, published_at=1))
        for tag in ("a", "b", "c"):
            await redis_timeline.publish(
                LiveCard(tag=tag, duration_ms=1, published_at=1)
            )

        await redis_timeline.clear()

        for tag in ("a", "b", "c"):
            assert await redis_timeline.get(tag) is None
        assert await other.get("timer") is not None
        await other.disconnect()
        await redis_timeline.disconnect()

    @pytest.mark.asyncio
    async def test_service_publishes_to_redis(
        self, redis_timeline: AsyncRedisTimeline
    ) -> None:
        """Test the timer service against a Redis timeline."""
        service = TimerService(redis_timeline, wall_clock=lambda: 42)

        await service.on_start_command(["set a timer for 5 minutes"])
        card = await redis_timeline.get(LIVE_CARD_TAG)
        assert card == LiveCard(
            tag=LIVE_CARD_TAG, duration_ms=300_000, published_at=42
        )

        await service.on_destroy()
        assert await redis_timeline.get(LIVE_CARD_TAG) is None
        await redis_timeline.disconnect()
