"""Redis connection factory."""

import os
from typing import Optional

import redis.asyncio as redis

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Global client instance
_redis_client: Optional[redis.Redis] = None


async def get_redis() -> redis.Redis:
    """Get or create global Redis client."""
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(
            REDIS_URL,
            encoding="utf-8",
            decode_responses=True,  # Live messages are JSON text
        )
    return _redis_client


async def ping_redis() -> bool:
    """Check that Redis answers. Used at startup to pick the live feed mode."""
    try:
        client = await get_redis()
        return bool(await client.ping())
    except Exception as e:
        print(f"[WARN] Redis unavailable at {REDIS_URL}: {e}")
        return False


async def close_redis() -> None:
    """Close global Redis connection."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
