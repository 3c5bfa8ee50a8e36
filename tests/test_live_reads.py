from __future__ import annotations

import pytest

from eli.shared.db.models import (
    Alert,
    AlertSeverity,
    AlertStatus,
    AlertType,
    Building,
    Camera,
    EquipmentStatus,
    Floor,
    Incident,
    TrackedEntity,
)
from eli.web import live


class ReadBackPublisher:
    """Looks each published row up from a separate session, like a dashboard would."""

    def __init__(self, session_factory, model, key: str) -> None:
        self.session_factory = session_factory
        self.model = model
        self.key = key
        self.seen: list = []

    async def publish(self, message_type: str, payload: dict) -> int:
        async with self.session_factory() as session:
            self.seen.append(await session.get(self.model, payload[self.key]))
        return 1


@pytest.fixture
def read_back(monkeypatch, file_session_factory):
    def _install(model, key: str) -> ReadBackPublisher:
        publisher = ReadBackPublisher(file_session_factory, model, key)

        async def fake_get_live_publisher():
            return publisher

        monkeypatch.setattr(live, "get_live_publisher", fake_get_live_publisher)
        return publisher

    return _install


@pytest.fixture
def insert_file(file_session_factory):
    async def _insert(*rows):
        async with file_session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return rows

    return _insert


async def test_new_alert_is_readable_when_announced(file_client, read_back) -> None:
    publisher = read_back(Alert, "id")

    response = await file_client.post("/api/v1/alerts", json={
        "type": "weapon",
        "severity": "critical",
        "title": "Weapon detected",
    })
    assert response.status_code == 201

    (row,) = publisher.seen
    assert row is not None
    assert row.title == "Weapon detected"


async def test_alert_status_is_readable_when_announced(file_client, read_back, insert_file) -> None:
    (alert,) = await insert_file(Alert(
        type=AlertType.INTRUSION, severity=AlertSeverity.HIGH,
        status=AlertStatus.ACTIVE, title="Door forced",
    ))
    publisher = read_back(Alert, "alert_id")

    response = await file_client.patch(f"/api/v1/alerts/{alert.id}/status", json={"status": "resolved"})
    assert response.status_code == 200

    (row,) = publisher.seen
    assert row.status == AlertStatus.RESOLVED


async def test_new_incident_is_readable_when_announced(file_client, read_back) -> None:
    publisher = read_back(Incident, "id")

    response = await file_client.post("/api/v1/incidents", json={"title": "Fire Alarm", "priority": "critical"})
    assert response.status_code == 201

    (row,) = publisher.seen
    assert row is not None
    assert row.title == "Fire Alarm"


async def test_camera_status_is_readable_when_announced(file_client, read_back, insert_file) -> None:
    (building,) = await insert_file(Building(name="Sciences Library", code="SCILI"))
    (camera,) = await insert_file(Camera(building_id=building.id, name="CAM-0001"))
    publisher = read_back(Camera, "camera_id")

    response = await file_client.patch(f"/api/v1/cameras/{camera.id}/status", json={"status": "offline"})
    assert response.status_code == 200

    (row,) = publisher.seen
    assert row.status == EquipmentStatus.OFFLINE


async def test_location_fix_is_readable_when_announced(file_client, read_back, insert_file) -> None:
    (building,) = await insert_file(Building(name="Sciences Library", code="SCILI"))
    (floor,) = await insert_file(Floor(building_id=building.id, level=1, name="Floor 1"))
    (entity,) = await insert_file(TrackedEntity(display_name="Avery Chen"))
    publisher = read_back(TrackedEntity, "entity_id")

    response = await file_client.post("/api/v1/locations", json={
        "entity_id": entity.id,
        "floor_id": floor.id,
        "source_type": "rfid",
        "x": 320.5,
        "y": 210.25,
    })
    assert response.status_code == 200

    (row,) = publisher.seen
    assert row.last_floor_id == floor.id
    assert float(row.last_x) == 320.5
