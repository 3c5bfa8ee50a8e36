from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import select

from eli.shared.db.models import Alert, AlertSeverity, AlertStatus, AlertType, AuditLog


def alert(title: str, minutes_ago: int = 0, **kwargs) -> Alert:
    kwargs.setdefault("type", AlertType.INTRUSION)
    kwargs.setdefault("severity", AlertSeverity.MEDIUM)
    kwargs.setdefault("status", AlertStatus.ACTIVE)
    return Alert(title=title, created_at=datetime.utcnow() - timedelta(minutes=minutes_ago), **kwargs)


async def test_list_alerts_newest_first(client, insert) -> None:
    await insert(
        alert("Oldest", minutes_ago=30),
        alert("Newest", minutes_ago=1, type=AlertType.WEAPON, severity=AlertSeverity.CRITICAL),
        alert("Resolved", minutes_ago=10, status=AlertStatus.RESOLVED),
    )

    titles = [a["title"] for a in (await client.get("/api/v1/alerts")).json()]
    assert titles == ["Newest", "Resolved", "Oldest"]

    active = (await client.get("/api/v1/alerts", params={"status": "active"})).json()
    assert [a["title"] for a in active] == ["Newest", "Oldest"]

    weapons = (await client.get("/api/v1/alerts", params={"type": "weapon"})).json()
    assert [a["title"] for a in weapons] == ["Newest"]

    critical = (await client.get("/api/v1/alerts", params={"severity": "critical"})).json()
    assert [a["title"] for a in critical] == ["Newest"]

    limited = (await client.get("/api/v1/alerts", params={"limit": 1})).json()
    assert [a["title"] for a in limited] == ["Newest"]


async def test_alert_stats_count_active_severities(client, insert) -> None:
    await insert(
        alert("a", severity=AlertSeverity.CRITICAL),
        alert("b", severity=AlertSeverity.HIGH),
        alert("c", severity=AlertSeverity.HIGH),
        alert("d", severity=AlertSeverity.CRITICAL, status=AlertStatus.RESOLVED),
        alert("e", severity=AlertSeverity.LOW, status=AlertStatus.ACKNOWLEDGED),
    )

    stats = (await client.get("/api/v1/alerts/stats")).json()
    assert stats == {"total": 5, "active": 3, "critical": 1, "high": 2, "medium": 0, "low": 0}


async def test_create_alert(admin_client, session_factory, live_messages) -> None:
    response = await admin_client.post("/api/v1/alerts", json={
        "type": "weapon",
        "severity": "critical",
        "title": "Weapon Detected",
        "description": "Possible firearm near the main entrance",
        "building_id": 1,
        "floor_id": 2,
        "x": 412.5,
        "y": 96,
        "ai_confidence": 0.93,
    })
    assert response.status_code == 201

    created = response.json()
    assert created["status"] == "active"
    assert created["type"] == "weapon"
    assert created["severity"] == "critical"
    assert float(created["ai_confidence"]) == 0.93

    (published,) = live_messages.of_type("alert_new")
    assert published["id"] == created["id"]
    assert published["title"] == "Weapon Detected"

    async with session_factory() as session:
        log = (await session.execute(select(AuditLog))).scalar_one()
    assert log.action == "alert.create"
    assert log.entity_id == created["id"]
    assert log.details == {"type": "weapon", "severity": "critical"}


async def test_create_alert_validates_body(client) -> None:
    response = await client.post("/api/v1/alerts", json={"type": "alien", "severity": "low", "title": "x"})
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/alerts", json={"type": "fire", "severity": "low", "title": "x", "ai_confidence": 2}
    )
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/alerts", json={"type": "fire", "severity": "low", "title": "x", "x": 1_000_000, "y": 5}
    )
    assert response.status_code == 422


async def test_acknowledge_then_resolve(admin_client, insert, live_messages) -> None:
    (row,) = await insert(alert("Unauthorized Access"))

    response = await admin_client.patch(
        f"/api/v1/alerts/{row.id}/status", json={"status": "acknowledged"}
    )
    assert response.json() == {"success": True}

    acknowledged = (await admin_client.get(f"/api/v1/alerts/{row.id}")).json()
    assert acknowledged["status"] == "acknowledged"
    assert acknowledged["acknowledged_by"] == 1
    assert acknowledged["acknowledged_at"] is not None
    assert acknowledged["resolved_at"] is None

    await admin_client.patch(
        f"/api/v1/alerts/{row.id}/status",
        json={"status": "resolved", "resolution_notes": "Badge reader fault"},
    )
    resolved = (await admin_client.get(f"/api/v1/alerts/{row.id}")).json()
    assert resolved["status"] == "resolved"
    assert resolved["resolved_by"] == 1
    assert resolved["resolved_at"] is not None
    assert resolved["resolution_notes"] == "Badge reader fault"

    assert live_messages.of_type("alert_update") == [
        {"alert_id": row.id, "status": "acknowledged"},
        {"alert_id": row.id, "status": "resolved"},
    ]


async def test_false_alarm_sets_resolved_at_without_session(client, insert) -> None:
    (row,) = await insert(alert("Motion Anomaly"))

    await client.patch(f"/api/v1/alerts/{row.id}/status", json={"status": "false_alarm"})

    updated = (await client.get(f"/api/v1/alerts/{row.id}")).json()
    assert updated["status"] == "false_alarm"
    assert updated["resolved_at"] is not None
    assert updated["resolved_by"] is None


async def test_update_missing_alert_is_404(client) -> None:
    response = await client.patch("/api/v1/alerts/777/status", json={"status": "resolved"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Alert not found"
