"""Server-Sent Events (SSE) API endpoints."""

import asyncio
import json
from typing import AsyncGenerator

from fastapi import APIRouter, Request
from sse_starlette.sse import EventSourceResponse

from ....shared.redis.client import ping_redis
from ....shared.redis.pubsub import get_live_subscriber, build_live_message

router = APIRouter()

HEARTBEAT_INTERVAL_SECONDS = 30

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


async def live_event_generator(request: Request) -> AsyncGenerator[dict, None]:
    """
    Relay live messages from Redis to one SSE client.

    Yields:
        SSE event dictionaries
    """
    yield {
        "event": "connected",
        "data": json.dumps({"status": "connected", "mode": "live"}),
    }

    try:
        subscriber = await get_live_subscriber()

        async for message in subscriber.subscribe():
            if await request.is_disconnected():
                break

            yield {
                "event": message.get("type", "message"),
                "data": json.dumps(message),
            }

    except asyncio.CancelledError:
        pass
    except Exception as e:
        print(f"[LIVE] Subscription error: {e}")
        yield {
            "event": "error",
            "data": json.dumps({"error": str(e)}),
        }


async def heartbeat_generator(request: Request) -> AsyncGenerator[dict, None]:
    """
    Periodic heartbeats only.

    This is used when Redis is not available.
    """
    yield {
        "event": "connected",
        "data": json.dumps({"status": "connected", "mode": "polling"}),
    }

    try:
        while True:
            if await request.is_disconnected():
                break

            yield {
                "event": "heartbeat",
                "data": json.dumps(build_live_message("heartbeat", {"status": "ok"})),
            }

            await asyncio.sleep(HEARTBEAT_INTERVAL_SECONDS)

    except asyncio.CancelledError:
        pass


@router.get("/sse/live")
async def sse_live(request: Request):
    """
    Subscribe to live campus updates via Server-Sent Events.

    Event types:
    - connected: Connection established
    - location_update, alert_new, alert_update, camera_status,
      incident_update, system_status: relayed from Redis
    - heartbeat: Keep-alive ping when Redis is unavailable
    - error: Subscription failed
    """
    if await ping_redis():
        generator = live_event_generator(request)
    else:
        generator = heartbeat_generator(request)

    return EventSourceResponse(
        generator,
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
