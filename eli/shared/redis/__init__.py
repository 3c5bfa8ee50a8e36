"""Redis client and pub/sub helpers."""

from .client import get_redis, close_redis, ping_redis
from .pubsub import (
    LIVE_CHANNEL,
    LIVE_MESSAGE_TYPES,
    LiveEventPublisher,
    LiveEventSubscriber,
    build_live_message,
    get_live_publisher,
    get_live_subscriber,
)

__all__ = [
    # Client
    "get_redis",
    "close_redis",
    "ping_redis",
    # Live feed
    "LIVE_CHANNEL",
    "LIVE_MESSAGE_TYPES",
    "LiveEventPublisher",
    "LiveEventSubscriber",
    "build_live_message",
    "get_live_publisher",
    "get_live_subscriber",
]
