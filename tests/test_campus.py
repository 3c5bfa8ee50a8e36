from __future__ import annotations

from sqlalchemy import select

from eli.shared.db.models import (
    AccessReader,
    AuditLog,
    Building,
    Floor,
    Sensor,
    SensorType,
    WifiAccessPoint,
    Zone,
    ZoneType,
)


async def test_buildings_listed_by_name(client, insert) -> None:
    await insert(
        Building(name="Wilson Hall", code="WILSN"),
        Building(name="Barus & Holley", code="BH"),
    )

    response = await client.get("/api/v1/buildings")
    assert response.status_code == 200
    assert [b["name"] for b in response.json()] == ["Barus & Holley", "Wilson Hall"]


async def test_get_building_returns_null_when_missing(client, insert) -> None:
    (building,) = await insert(Building(name="Wilson Hall", code="WILSN"))

    found = (await client.get(f"/api/v1/buildings/{building.id}")).json()
    assert found["code"] == "WILSN"

    response = await client.get("/api/v1/buildings/9999")
    assert response.status_code == 200
    assert response.json() is None


async def test_create_building_is_audited(admin_client, session_factory) -> None:
    response = await admin_client.post(
        "/api/v1/buildings",
        json={"name": "List Art Center", "code": "LIST", "floors_count": 3, "latitude": 41.8264},
    )
    assert response.status_code == 201
    building = response.json()
    assert building["id"]
    assert building["floors_count"] == 3

    async with session_factory() as session:
        log = (await session.execute(select(AuditLog))).scalar_one()
    assert log.action == "building.create"
    assert log.entity_type == "building"
    assert log.entity_id == building["id"]
    assert log.user_id == 1


async def test_create_building_validates_name(client) -> None:
    response = await client.post("/api/v1/buildings", json={"name": ""})
    assert response.status_code == 422


async def test_floors_ordered_by_level(client, insert) -> None:
    first, second = await insert(Building(name="A", code="A"), Building(name="B", code="B"))
    await insert(
        Floor(building_id=first.id, level=2, name="A2"),
        Floor(building_id=first.id, level=1, name="A1"),
        Floor(building_id=second.id, level=1, name="B1"),
    )

    only_first = (await client.get("/api/v1/floors", params={"building_id": first.id})).json()
    assert [f["name"] for f in only_first] == ["A1", "A2"]

    everything = (await client.get("/api/v1/floors")).json()
    assert [f["name"] for f in everything] == ["A1", "A2", "B1"]

    floor_id = only_first[0]["id"]
    assert (await client.get(f"/api/v1/floors/{floor_id}")).json()["level"] == 1
    assert (await client.get("/api/v1/floors/9999")).json() is None


async def test_zones_need_a_floor(client, floor, insert) -> None:
    await insert(
        Zone(floor_id=floor.id, name="Stairwell A", type=ZoneType.STAIRWELL),
        Zone(floor_id=floor.id, name="Main Entrance", type=ZoneType.ENTRY,
             polygon_points=[{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}]),
    )

    zones = (await client.get("/api/v1/zones", params={"floor_id": floor.id})).json()
    assert [z["name"] for z in zones] == ["Main Entrance", "Stairwell A"]
    assert zones[0]["type"] == "entry"
    assert len(zones[0]["polygon_points"]) == 3

    assert (await client.get("/api/v1/zones")).status_code == 422


async def test_device_listings(client, floor, insert) -> None:
    await insert(
        Sensor(building_id=floor.building_id, floor_id=floor.id, name="SENSOR-0002", type=SensorType.SMOKE),
        Sensor(building_id=floor.building_id, floor_id=floor.id, name="SENSOR-0001", type=SensorType.MOTION),
        AccessReader(building_id=floor.building_id, floor_id=floor.id, name="READER-0001"),
        WifiAccessPoint(building_id=floor.building_id, floor_id=floor.id, name="AP-0001", bssid="00:1A:2B:01:10:20"),
    )

    sensors = (await client.get("/api/v1/sensors", params={"floor_id": floor.id})).json()
    assert [s["name"] for s in sensors] == ["SENSOR-0001", "SENSOR-0002"]

    smoke = (await client.get("/api/v1/sensors", params={"type": "smoke"})).json()
    assert [s["name"] for s in smoke] == ["SENSOR-0002"]

    readers = (await client.get("/api/v1/access-readers", params={"building_id": floor.building_id})).json()
    assert readers[0]["type"] == "bidirectional"
    assert readers[0]["status"] == "online"

    access_points = (await client.get("/api/v1/wifi-access-points")).json()
    assert access_points[0]["bssid"] == "00:1A:2B:01:10:20"
    assert access_points[0]["coverage_radius"] == 30
