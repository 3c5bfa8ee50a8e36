from __future__ import annotations

import pytest

from eli import __version__
from eli.web.api.v1 import system
from eli.web.config import config


async def test_rest_health(client) -> None:
    body = (await client.get("/api/health")).json()
    assert body["status"] == "ok"
    assert body["timestamp"]


async def test_liveness(client) -> None:
    body = (await client.get("/health")).json()
    assert body == {"status": "healthy", "service": "api", "version": __version__}


async def test_system_health(client) -> None:
    response = await client.get("/api/v1/system/health", params={"timestamp": 1729300000000})
    assert response.status_code == 200
    assert response.json() == {"ok": True}


async def test_system_health_rejects_negative_timestamp(client) -> None:
    response = await client.get("/api/v1/system/health", params={"timestamp": -1})
    assert response.status_code == 400
    assert response.json()["detail"] == "timestamp cannot be negative"

    assert (await client.get("/api/v1/system/health")).status_code == 422


async def test_notify_owner_needs_configured_service(admin_client, monkeypatch) -> None:
    monkeypatch.setattr(config, "NOTIFY_API_URL", "")
    monkeypatch.setattr(config, "NOTIFY_API_KEY", "key")

    response = await admin_client.post(
        "/api/v1/system/notify-owner", json={"title": "Alert", "content": "Weapon detected"}
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Notification service URL is not configured."


async def test_notify_owner_rejects_blank_title(admin_client, monkeypatch) -> None:
    monkeypatch.setattr(config, "NOTIFY_API_URL", "https://notify.example")
    monkeypatch.setattr(config, "NOTIFY_API_KEY", "key")

    response = await admin_client.post(
        "/api/v1/system/notify-owner", json={"title": "   ", "content": "Weapon detected"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Notification title is required."


async def test_notify_owner_reports_delivery(admin_client, monkeypatch) -> None:
    sent = []

    async def fake_notify_owner(title, content, api_url, api_key):
        sent.append((title, content, api_url, api_key))
        return False

    monkeypatch.setattr(config, "NOTIFY_API_URL", "https://notify.example")
    monkeypatch.setattr(config, "NOTIFY_API_KEY", "key")
    monkeypatch.setattr(system, "notify_owner", fake_notify_owner)

    response = await admin_client.post(
        "/api/v1/system/notify-owner", json={"title": "Alert", "content": "Weapon detected"}
    )
    assert response.status_code == 200
    assert response.json() == {"success": False}
    assert sent == [("Alert", "Weapon detected", "https://notify.example", "key")]


def test_production_requires_a_real_secret(monkeypatch) -> None:
    monkeypatch.setattr(type(config), "ENVIRONMENT", "production")
    monkeypatch.setattr(type(config), "JWT_SECRET", "brown-eli-demo-secret-key-2024")

    with pytest.raises(ValueError, match="JWT_SECRET"):
        config.validate()
