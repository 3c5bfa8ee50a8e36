"""Best-effort publishing of live dashboard updates."""

from ..shared.redis.pubsub import get_live_publisher
from .config import config


async def publish_live(message_type: str, payload: dict) -> bool:
    """
    Publish a live update to connected dashboards.

    Redis problems are logged and never fail the calling request.

    Returns:
        True if the message was handed to Redis
    """
    if not config.LIVE_EVENTS_ENABLED:
        return False

    try:
        publisher = await get_live_publisher()
        await publisher.publish(message_type, payload)
        return True
    except Exception as e:
        print(f"[LIVE] Failed to publish {message_type}: {e}")
        return False
