"""
Redis Configuration

Shared async Redis client. Redis backs the rate limiter; it is optional
and the application keeps serving if it is unreachable.
"""

import logging

from redis.asyncio import Redis, from_url

from mou_tracker.core.config import settings

logger = logging.getLogger(__name__)

# Redis client instance, set on startup
redis_client: Redis | None = None


async def init_redis() -> Redis:
    """
    Initialize the Redis connection and verify it with a PING.

    Call this on application startup.
    """
    global redis_client
    client = from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
    )
    await client.ping()
    redis_client = client
    return redis_client


def get_redis() -> Redis | None:
    """Return the shared client, or None if Redis was not initialized."""
    return redis_client


async def close_redis() -> None:
    """Close the Redis connection."""
    global redis_client
    if redis_client:
        await redis_client.aclose()
        redis_client = None
        logger.debug("Redis connection closed")
