from __future__ import annotations

from datetime import datetime, timedelta

from eli.shared.db.models import (
    Alert,
    AlertSeverity,
    AlertStatus,
    AlertType,
    Camera,
    EquipmentStatus,
    Event,
    EventType,
    Incident,
    IncidentStatus,
    Severity,
    TrackedEntity,
)


async def test_dashboard_overview(client, floor, insert) -> None:
    now = datetime.utcnow()
    await insert(
        Camera(building_id=floor.building_id, name="CAM-1", status=EquipmentStatus.ONLINE),
        Camera(building_id=floor.building_id, name="CAM-2", status=EquipmentStatus.OFFLINE),
        Alert(type=AlertType.WEAPON, severity=AlertSeverity.CRITICAL, status=AlertStatus.ACTIVE, title="a"),
        Alert(type=AlertType.CROWD, severity=AlertSeverity.LOW, status=AlertStatus.ACTIVE, title="b"),
        Alert(type=AlertType.FIRE, severity=AlertSeverity.CRITICAL, status=AlertStatus.RESOLVED, title="c"),
        Incident(title="open", status=IncidentStatus.OPEN),
        Incident(title="working", status=IncidentStatus.IN_PROGRESS),
        Incident(title="done", status=IncidentStatus.CLOSED),
        TrackedEntity(last_seen_at=now - timedelta(minutes=1)),
        TrackedEntity(last_seen_at=now - timedelta(minutes=30)),
        TrackedEntity(),
        Event(type=EventType.MOTION_DETECT, timestamp=now - timedelta(minutes=5)),
        Event(type=EventType.ACCESS_ENTRY, timestamp=now - timedelta(hours=3)),
    )

    overview = (await client.get("/api/v1/dashboard/overview")).json()
    assert overview == {
        "total_cameras": 2,
        "cameras_online": 1,
        "active_alerts": 2,
        "critical_alerts": 1,
        "open_incidents": 2,
        "tracked_entities": 1,
        "recent_events": 1,
    }


async def test_empty_dashboard_is_all_zero(client) -> None:
    overview = (await client.get("/api/v1/dashboard/overview")).json()
    assert set(overview.values()) == {0}


async def test_events_filters(client, floor, insert) -> None:
    now = datetime.utcnow()
    await insert(
        Event(type=EventType.ACCESS_DENIED, severity=Severity.MEDIUM, building_id=floor.building_id,
              floor_id=floor.id, title="Access Denied Event", timestamp=now - timedelta(minutes=2)),
        Event(type=EventType.CAMERA_ALERT, severity=Severity.HIGH, building_id=floor.building_id,
              floor_id=floor.id, title="Camera Alert Event", timestamp=now - timedelta(minutes=1)),
        Event(type=EventType.MOTION_DETECT, building_id=floor.building_id + 1,
              title="Motion Detect Event", timestamp=now - timedelta(minutes=3)),
    )

    titles = [e["title"] for e in (await client.get("/api/v1/events")).json()]
    assert titles == ["Camera Alert Event", "Access Denied Event", "Motion Detect Event"]

    by_type = (await client.get("/api/v1/events", params={"type": "access_denied"})).json()
    assert [e["title"] for e in by_type] == ["Access Denied Event"]

    by_severity = (await client.get("/api/v1/events", params={"severity": "high"})).json()
    assert [e["title"] for e in by_severity] == ["Camera Alert Event"]

    by_floor = (await client.get("/api/v1/events", params={"floor_id": floor.id})).json()
    assert len(by_floor) == 2

    by_building = (await client.get("/api/v1/events", params={"building_id": floor.building_id + 1})).json()
    assert [e["severity"] for e in by_building] == ["info"]

    limited = (await client.get("/api/v1/events", params={"limit": 2})).json()
    assert len(limited) == 2
