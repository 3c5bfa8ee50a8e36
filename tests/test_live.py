from __future__ import annotations

import json

import pytest

from eli.shared.redis.pubsub import (
    LIVE_CHANNEL,
    LiveEventPublisher,
    LiveEventSubscriber,
    build_live_message,
)
from eli.web import live
from eli.web.api.v1 import sse
from eli.web.config import config


class FakeRedis:
    def __init__(self, pubsub=None) -> None:
        self.published: list[tuple[str, str]] = []
        self._pubsub = pubsub

    async def publish(self, channel: str, data: str) -> int:
        self.published.append((channel, data))
        return 2

    def pubsub(self):
        return self._pubsub


class FakePubSub:
    def __init__(self, messages: list[dict]) -> None:
        self.messages = messages
        self.subscribed: list[str] = []
        self.closed = False

    async def subscribe(self, channel: str) -> None:
        self.subscribed.append(channel)

    async def unsubscribe(self, channel: str) -> None:
        self.subscribed.remove(channel)

    async def aclose(self) -> None:
        self.closed = True

    async def listen(self):
        for message in self.messages:
            yield message


class FakeRequest:
    async def is_disconnected(self) -> bool:
        return False


def test_live_message_envelope() -> None:
    message = build_live_message("alert_update", {"alert_id": 3, "status": "resolved"})
    assert message["type"] == "alert_update"
    assert message["payload"] == {"alert_id": 3, "status": "resolved"}
    assert isinstance(message["timestamp"], int)
    assert message["timestamp"] > 1_600_000_000_000


def test_unknown_live_message_type() -> None:
    with pytest.raises(ValueError):
        build_live_message("gossip", {})


async def test_publisher_writes_json_to_channel() -> None:
    redis = FakeRedis()
    receivers = await LiveEventPublisher(redis).publish("camera_status", {"camera_id": 9, "status": "offline"})

    assert receivers == 2
    ((channel, data),) = redis.published
    assert channel == LIVE_CHANNEL
    decoded = json.loads(data)
    assert decoded["type"] == "camera_status"
    assert decoded["payload"] == {"camera_id": 9, "status": "offline"}


async def test_subscriber_skips_control_and_garbage_messages() -> None:
    pubsub = FakePubSub([
        {"type": "subscribe", "data": 1},
        {"type": "message", "data": "{not json"},
        {"type": "message", "data": json.dumps({"type": "alert_new", "payload": {"id": 1}})},
    ])
    subscriber = LiveEventSubscriber(FakeRedis(pubsub))

    received = [message async for message in subscriber.subscribe()]

    assert received == [{"type": "alert_new", "payload": {"id": 1}}]
    assert pubsub.subscribed == []
    assert pubsub.closed is True


async def test_publish_live_is_best_effort(monkeypatch) -> None:
    async def broken_publisher():
        raise ConnectionError("redis is down")

    monkeypatch.setattr(config, "LIVE_EVENTS_ENABLED", True)
    monkeypatch.setattr(live, "get_live_publisher", broken_publisher)

    assert await live.publish_live("heartbeat", {}) is False


async def test_publish_live_can_be_disabled(monkeypatch, live_messages) -> None:
    monkeypatch.setattr(config, "LIVE_EVENTS_ENABLED", False)

    assert await live.publish_live("system_status", {}) is False
    assert live_messages.messages == []


async def test_publish_live_hands_off(live_messages) -> None:
    assert await live.publish_live("system_status", {"ok": True}) is True
    assert live_messages.messages == [("system_status", {"ok": True})]


async def test_heartbeat_stream() -> None:
    stream = sse.heartbeat_generator(FakeRequest())

    connected = await stream.__anext__()
    assert connected["event"] == "connected"
    assert json.loads(connected["data"]) == {"status": "connected", "mode": "polling"}

    heartbeat = await stream.__anext__()
    assert heartbeat["event"] == "heartbeat"
    assert json.loads(heartbeat["data"])["type"] == "heartbeat"

    await stream.aclose()


async def test_live_stream_relays_messages(monkeypatch) -> None:
    class OneMessageSubscriber:
        async def subscribe(self):
            yield {"type": "alert_new", "payload": {"id": 5}}

    async def fake_get_live_subscriber():
        return OneMessageSubscriber()

    monkeypatch.setattr(sse, "get_live_subscriber", fake_get_live_subscriber)

    events = [event async for event in sse.live_event_generator(FakeRequest())]

    assert [e["event"] for e in events] == ["connected", "alert_new"]
    assert json.loads(events[0]["data"])["mode"] == "live"
    assert json.loads(events[1]["data"])["payload"] == {"id": 5}
