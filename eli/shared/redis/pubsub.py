"""Redis pub/sub helpers for the live campus feed."""

import json
import time
from typing import AsyncGenerator, Optional

import redis.asyncio as redis

from .client import get_redis


LIVE_CHANNEL = "live:campus"

# Message types relayed to dashboard clients
LIVE_MESSAGE_TYPES = (
    "location_update",
    "alert_new",
    "alert_update",
    "camera_status",
    "incident_update",
    "system_status",
    "heartbeat",
)


def build_live_message(message_type: str, payload: dict) -> dict:
    """Wrap a payload in the live feed envelope: type, epoch-ms timestamp, payload."""
    if message_type not in LIVE_MESSAGE_TYPES:
        raise ValueError(f"Unknown live message type: {message_type}")
    return {
        "type": message_type,
        "timestamp": int(time.time() * 1000),
        "payload": payload,
    }


class LiveEventPublisher:
    """Publishes live dashboard updates to Redis."""

    def __init__(self, client: redis.Redis, channel: str = LIVE_CHANNEL):
        self.client = client
        self.channel = channel

    async def publish(self, message_type: str, payload: dict) -> int:
        """
        Publish a live update.

        Args:
            message_type: One of LIVE_MESSAGE_TYPES
            payload: JSON-serializable message body

        Returns:
            Number of subscribers that received the message
        """
        message = build_live_message(message_type, payload)
        return await self.client.publish(self.channel, json.dumps(message, default=str))


class LiveEventSubscriber:
    """Subscribes to live dashboard updates from Redis for SSE."""

    def __init__(self, client: redis.Redis, channel: str = LIVE_CHANNEL):
        self.client = client
        self.channel = channel
        self._pubsub: Optional[redis.client.PubSub] = None

    async def subscribe(self) -> AsyncGenerator[dict, None]:
        """
        Subscribe to the live channel.

        Yields:
            Decoded live messages
        """
        self._pubsub = self.client.pubsub()

        try:
            await self._pubsub.subscribe(self.channel)

            async for message in self._pubsub.listen():
                if message["type"] == "message":
                    try:
                        yield json.loads(message["data"])
                    except json.JSONDecodeError:
                        continue

        finally:
            if self._pubsub:
                await self._pubsub.unsubscribe(self.channel)
                await self._pubsub.aclose()
                self._pubsub = None


async def get_live_publisher() -> LiveEventPublisher:
    """Get a live event publisher instance."""
    client = await get_redis()
    return LiveEventPublisher(client)


async def get_live_subscriber() -> LiveEventSubscriber:
    """Get a live event subscriber instance."""
    client = await get_redis()
    return LiveEventSubscriber(client)
