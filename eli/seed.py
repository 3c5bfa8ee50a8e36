"""Seed the database with Brown University demo data.

Usage:
    python -m eli.seed
    python -m eli.seed --seed 42 --entities 200 --no-clear
"""

import argparse
import asyncio
import random
import sys
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from .shared.db.database import init_db, close_db, get_db
from .shared.db.models import (
    Building,
    Floor,
    Zone,
    ZoneType,
    Camera,
    CameraType,
    EquipmentStatus,
    Sensor,
    SensorType,
    SensorStatus,
    AccessReader,
    AccessReaderType,
    WifiAccessPoint,
    TrackedEntity,
    EntityType,
    EntityRole,
    LocationEvent,
    Event,
    EventType,
    Severity,
    Alert,
    AlertType,
    AlertSeverity,
    AlertStatus,
    Incident,
    IncidentStatus,
    IncidentPriority,
    DemoScenario,
)
from .shared.db.repositories.incidents import timeline_entry


BUILDINGS = [
    {"name": "Barus & Holley", "code": "BH", "address": "184 Hope St", "floors_count": 4,
     "latitude": "41.8268", "longitude": "-71.4025",
     "description": "Engineering building with labs and classrooms"},
    {"name": "Sciences Library (SciLi)", "code": "SL", "address": "210 Thayer St", "floors_count": 14,
     "latitude": "41.8272", "longitude": "-71.4003",
     "description": "Main science library, iconic brutalist tower"},
    {"name": "Keeney Quadrangle", "code": "KQ", "address": "45 Charlesfield St", "floors_count": 4,
     "latitude": "41.8235", "longitude": "-71.4012",
     "description": "Freshman dormitory complex"},
    {"name": "Faunce House", "code": "FH", "address": "75 Waterman St", "floors_count": 3,
     "latitude": "41.8267", "longitude": "-71.4018",
     "description": "Student center with dining and activities"},
    {"name": "Main Green", "code": "MG", "address": "College St", "floors_count": 1,
     "latitude": "41.8262", "longitude": "-71.4028",
     "description": "Central campus green space"},
    {"name": "Wilson Hall", "code": "WH", "address": "69 Brown St", "floors_count": 4,
     "latitude": "41.8258", "longitude": "-71.4035",
     "description": "Academic building"},
    {"name": "Sayles Hall", "code": "SH", "address": "79 Waterman St", "floors_count": 3,
     "latitude": "41.8265", "longitude": "-71.4022",
     "description": "Historic assembly hall"},
    {"name": "MacMillan Hall", "code": "MM", "address": "167 Thayer St", "floors_count": 4,
     "latitude": "41.8275", "longitude": "-71.4008",
     "description": "Engineering and physics building"},
    {"name": "Pembroke Hall", "code": "PH", "address": "172 Meeting St", "floors_count": 3,
     "latitude": "41.8280", "longitude": "-71.4015",
     "description": "Historic academic building"},
    {"name": "John Hay Library", "code": "JH", "address": "20 Prospect St", "floors_count": 5,
     "latitude": "41.8260", "longitude": "-71.4040",
     "description": "Special collections library"},
]

FLOORPLAN_URLS = {
    "BH-1": "/floorplans/barus-holley-1.png",
    "BH-2": "/floorplans/barus-holley-2.png",
    "SL-1": "/floorplans/sciences-library-1.png",
    "KQ-1": "/floorplans/keeney-quad-1.png",
    "FH-1": "/floorplans/faunce-house-1.png",
    "MG-1": "/floorplans/main-green-1.png",
    "WH-1": "/floorplans/wilson-hall-1.png",
    "SH-1": "/floorplans/sayles-hall-1.png",
    "MM-1": "/floorplans/macmillan-hall-1.png",
    "PH-1": "/floorplans/pembroke-hall-1.png",
}

MAX_SEEDED_FLOORS = 4

FIRST_NAMES = [
    "James", "Emma", "Michael", "Sophia", "William", "Olivia", "Alexander", "Ava",
    "Daniel", "Isabella", "David", "Mia", "Joseph", "Charlotte", "Andrew", "Amelia",
    "Ryan", "Harper", "John", "Evelyn",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin",
]

ALERT_TITLES = {
    AlertType.WEAPON: ["Potential weapon detected", "Suspicious object identified", "Security threat detected"],
    AlertType.INTRUSION: ["Unauthorized access attempt", "Perimeter breach detected", "After-hours entry"],
    AlertType.ANOMALY: ["Unusual behavior detected", "Pattern anomaly identified", "Suspicious activity"],
    AlertType.CROWD: ["Large gathering detected", "Crowd density alert", "Unusual congregation"],
    AlertType.ACCESS_VIOLATION: ["Access denied - invalid credentials", "Tailgating detected", "Forced entry attempt"],
    AlertType.SYSTEM: ["Camera offline", "Sensor malfunction", "Network connectivity issue"],
    AlertType.PERSON_DOWN: ["Person down detected", "Medical emergency possible", "Unresponsive individual"],
    AlertType.FIRE: ["Smoke detected", "Fire alarm triggered", "Thermal anomaly"],
}

# Weighted toward active so the dashboard has something to show
ALERT_STATUS_CHOICES = [
    AlertStatus.ACTIVE, AlertStatus.ACTIVE, AlertStatus.ACTIVE,
    AlertStatus.ACKNOWLEDGED, AlertStatus.INVESTIGATING,
    AlertStatus.RESOLVED, AlertStatus.FALSE_ALARM,
]

INCIDENT_TITLES = [
    "Security breach investigation",
    "Medical emergency response",
    "Fire alarm activation",
    "Suspicious package report",
    "Unauthorized access incident",
    "Vandalism report",
    "Theft investigation",
    "Disturbance report",
]

INCIDENT_STATUS_CHOICES = [
    IncidentStatus.OPEN, IncidentStatus.OPEN, IncidentStatus.IN_PROGRESS,
    IncidentStatus.RESOLVED, IncidentStatus.CLOSED,
]

SEEDED_EVENT_TYPES = [
    EventType.CAMERA_ALERT, EventType.ACCESS_ENTRY, EventType.ACCESS_DENIED,
    EventType.MOTION_DETECT, EventType.WIFI_PROBE, EventType.FACIAL_MATCH,
    EventType.ANOMALY, EventType.SYSTEM,
]

EVENT_SEVERITY_CHOICES = [
    Severity.INFO, Severity.INFO, Severity.INFO,
    Severity.LOW, Severity.MEDIUM, Severity.HIGH,
]

# name, type, polygon as fractions of the 1200x800 plan, color
ZONE_LAYOUT = [
    ("Main Entrance", ZoneType.ENTRY, (0.02, 0.40, 0.12, 0.60), "#22c55e"),
    ("Central Hallway", ZoneType.HALLWAY, (0.12, 0.45, 0.88, 0.55), "#64748b"),
    ("North Stairwell", ZoneType.STAIRWELL, (0.88, 0.05, 0.98, 0.20), "#f59e0b"),
    ("Classroom Wing", ZoneType.CLASSROOM, (0.15, 0.05, 0.60, 0.42), "#3b82f6"),
    ("Offices", ZoneType.OFFICE, (0.62, 0.05, 0.86, 0.42), "#8b5cf6"),
    ("Common Area", ZoneType.COMMON, (0.15, 0.58, 0.60, 0.95), "#14b8a6"),
]

DEMO_SCENARIOS = [
    {
        "name": "After-Hours Intrusion",
        "description": "Forced entry at a side door followed by motion on an upper floor",
        "duration": 180,
        "events": [
            {"offset_seconds": 0, "type": "access_denied", "severity": "medium", "title": "Access denied at side door"},
            {"offset_seconds": 20, "type": "intrusion", "severity": "high", "title": "Forced entry attempt"},
            {"offset_seconds": 75, "type": "motion_detect", "severity": "high", "title": "Motion in closed wing"},
        ],
    },
    {
        "name": "Crowd on Main Green",
        "description": "Gathering grows past the density threshold",
        "duration": 300,
        "events": [
            {"offset_seconds": 0, "type": "crowd_gather", "severity": "low", "title": "Gathering forming"},
            {"offset_seconds": 120, "type": "crowd_gather", "severity": "medium", "title": "Crowd density alert"},
        ],
    },
    {
        "name": "Medical Emergency",
        "description": "Person down detected on camera, responders dispatched",
        "duration": 240,
        "events": [
            {"offset_seconds": 0, "type": "person_down", "severity": "critical", "title": "Person down detected"},
            {"offset_seconds": 30, "type": "camera_alert", "severity": "high", "title": "Responder tracking enabled"},
        ],
    },
]

# Children before parents
CLEAR_ORDER = [
    LocationEvent, Event, Alert, Incident, TrackedEntity, Zone, Camera,
    Sensor, AccessReader, WifiAccessPoint, Floor, Building, DemoScenario,
]


def rand_decimal(rng: random.Random, low: float, high: float, places: int = 4) -> Decimal:
    """Uniform decimal in [low, high) rounded to the given places."""
    return Decimal(f"{rng.uniform(low, high):.{places}f}")


def padded(prefix: str, index: int, width: int = 4) -> str:
    return f"{prefix}{str(index).zfill(width)}"


def event_title(event_type: EventType) -> str:
    """'camera_alert' -> 'Camera Alert Event'."""
    return f"{event_type.value.replace('_', ' ').title()} Event"


def event_source_type(event_type: EventType) -> str:
    if event_type == EventType.CAMERA_ALERT:
        return "camera"
    if event_type in (EventType.ACCESS_ENTRY, EventType.ACCESS_DENIED):
        return "access_reader"
    return "sensor"


def build_buildings() -> List[Building]:
    return [
        Building(
            name=b["name"],
            code=b["code"],
            address=b["address"],
            floors_count=b["floors_count"],
            latitude=Decimal(b["latitude"]),
            longitude=Decimal(b["longitude"]),
            description=b["description"],
        )
        for b in BUILDINGS
    ]


def build_floors(buildings: List[Building]) -> List[Floor]:
    """Up to four floors per building, each a 1200x800 plan at 10 px/m."""
    floors = []
    for building in buildings:
        for level in range(1, min(building.floors_count or 1, MAX_SEEDED_FLOORS) + 1):
            key = f"{building.code}-{level}"
            floors.append(Floor(
                building_id=building.id,
                level=level,
                name=f"{building.name} - Floor {level}",
                floorplan_url=FLOORPLAN_URLS.get(key, f"/floorplans/{building.code.lower()}-{level}.png"),
                floorplan_width=1200,
                floorplan_height=800,
                scale_px_per_meter=Decimal("10.0000"),
            ))
    return floors


def build_zones(floors: List[Floor]) -> List[Zone]:
    zones = []
    for floor in floors:
        width = floor.floorplan_width or 1200
        height = floor.floorplan_height or 800
        for name, zone_type, (x1, y1, x2, y2), color in ZONE_LAYOUT:
            zones.append(Zone(
                floor_id=floor.id,
                name=name,
                type=zone_type,
                polygon_points=[
                    {"x": round(x1 * width), "y": round(y1 * height)},
                    {"x": round(x2 * width), "y": round(y1 * height)},
                    {"x": round(x2 * width), "y": round(y2 * height)},
                    {"x": round(x1 * width), "y": round(y2 * height)},
                ],
                color=color,
            ))
    return zones


def build_cameras(rng: random.Random, floors: List[Floor]) -> List[Camera]:
    """15-25 cameras per floor, 95% online."""
    cameras = []
    index = 1
    for floor in floors:
        for _ in range(rng.randint(15, 25)):
            if rng.random() > 0.05:
                status = EquipmentStatus.ONLINE
            else:
                status = rng.choice([
                    EquipmentStatus.OFFLINE, EquipmentStatus.MAINTENANCE, EquipmentStatus.ERROR,
                ])
            cameras.append(Camera(
                building_id=floor.building_id,
                floor_id=floor.id,
                name=padded("CAM-", index),
                type=rng.choice(list(CameraType)),
                status=status,
                x=rand_decimal(rng, 50, 1150),
                y=rand_decimal(rng, 50, 750),
                fov_degrees=rng.randint(60, 120),
                rotation=rng.randint(0, 359),
                has_ai=rng.random() > 0.7,
                rtsp_url=f"rtsp://cameras.brown.edu/cam{index}",
                hls_url=f"/api/cameras/{index}/stream.m3u8",
            ))
            index += 1
    return cameras


def build_sensors(rng: random.Random, floors: List[Floor]) -> List[Sensor]:
    sensors = []
    index = 1
    for floor in floors:
        for _ in range(rng.randint(8, 15)):
            sensors.append(Sensor(
                building_id=floor.building_id,
                floor_id=floor.id,
                name=padded("SENSOR-", index),
                type=rng.choice(list(SensorType)),
                status=SensorStatus.ONLINE if rng.random() > 0.1 else SensorStatus.OFFLINE,
                x=rand_decimal(rng, 50, 1150),
                y=rand_decimal(rng, 50, 750),
                external_id=f"EXT-S-{index}",
            ))
            index += 1
    return sensors


def build_access_readers(rng: random.Random, floors: List[Floor]) -> List[AccessReader]:
    readers = []
    index = 1
    for floor in floors:
        for _ in range(rng.randint(2, 6)):
            readers.append(AccessReader(
                building_id=floor.building_id,
                floor_id=floor.id,
                name=padded("READER-", index),
                type=rng.choice(list(AccessReaderType)),
                status=EquipmentStatus.ONLINE if rng.random() > 0.05 else EquipmentStatus.OFFLINE,
                x=rand_decimal(rng, 50, 1150),
                y=rand_decimal(rng, 50, 750),
                external_id=f"EXT-R-{index}",
            ))
            index += 1
    return readers


def build_wifi_access_points(rng: random.Random, floors: List[Floor]) -> List[WifiAccessPoint]:
    access_points = []
    index = 1
    for floor in floors:
        for _ in range(rng.randint(3, 8)):
            bssid = f"00:1A:2B:{index % 100:02d}:{rng.randint(10, 99):02d}:{rng.randint(10, 99):02d}"
            access_points.append(WifiAccessPoint(
                building_id=floor.building_id,
                floor_id=floor.id,
                name=padded("AP-", index),
                bssid=bssid[:17],
                status=EquipmentStatus.ONLINE if rng.random() > 0.05 else EquipmentStatus.OFFLINE,
                x=rand_decimal(rng, 100, 1100),
                y=rand_decimal(rng, 100, 700),
                coverage_radius=rng.randint(20, 50),
            ))
            index += 1
    return access_points


def build_entities(
    rng: random.Random,
    floors: List[Floor],
    count: int,
    now: datetime,
) -> List[TrackedEntity]:
    """People seen somewhere on campus in the last 5 minutes; 2% watchlisted."""
    entities = []
    for i in range(1, count + 1):
        floor = rng.choice(floors)
        high_risk = rng.random() > 0.95
        entities.append(TrackedEntity(
            type=EntityType.PERSON,
            identifier_hash=padded("HASH-", i, width=6),
            display_name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
            role=rng.choice(list(EntityRole)),
            is_watchlist=rng.random() > 0.98,
            risk_score=rng.randint(50, 100) if high_risk else rng.randint(0, 30),
            last_seen_at=now - timedelta(milliseconds=rng.randint(0, 300000)),
            last_floor_id=floor.id,
            last_x=rand_decimal(rng, 50, 1150),
            last_y=rand_decimal(rng, 50, 750),
        ))
    return entities


def build_alerts(
    rng: random.Random,
    buildings: List[Building],
    floors: List[Floor],
    count: int,
) -> List[Alert]:
    names = {b.id: b.name for b in buildings}
    alerts = []
    for _ in range(count):
        alert_type = rng.choice(list(AlertType))
        floor = rng.choice(floors)
        alerts.append(Alert(
            type=alert_type,
            severity=rng.choice(list(AlertSeverity)),
            status=rng.choice(ALERT_STATUS_CHOICES),
            title=rng.choice(ALERT_TITLES[alert_type]),
            description=f"Alert detected at {names.get(floor.building_id)}, Floor {floor.level}",
            building_id=floor.building_id,
            floor_id=floor.id,
            x=rand_decimal(rng, 50, 1150),
            y=rand_decimal(rng, 50, 750),
            ai_confidence=rand_decimal(rng, 0.7, 0.99),
        ))
    return alerts


def build_incidents(
    rng: random.Random,
    floors: List[Floor],
    count: int,
    now: datetime,
) -> List[Incident]:
    incidents = []
    for _ in range(count):
        floor = rng.choice(floors)
        incidents.append(Incident(
            status=rng.choice(INCIDENT_STATUS_CHOICES),
            priority=rng.choice(list(IncidentPriority)),
            title=rng.choice(INCIDENT_TITLES),
            description="Incident requiring investigation and response",
            building_id=floor.building_id,
            floor_id=floor.id,
            linked_alert_ids=[],
            timeline=[timeline_entry("created", at=now)],
        ))
    return incidents


def build_events(
    rng: random.Random,
    floors: List[Floor],
    count: int,
    now: datetime,
) -> List[Event]:
    """Activity from the last hour."""
    events = []
    for _ in range(count):
        event_type = rng.choice(SEEDED_EVENT_TYPES)
        floor = rng.choice(floors)
        events.append(Event(
            type=event_type,
            severity=rng.choice(EVENT_SEVERITY_CHOICES),
            source_type=event_source_type(event_type),
            building_id=floor.building_id,
            floor_id=floor.id,
            x=rand_decimal(rng, 50, 1150),
            y=rand_decimal(rng, 50, 750),
            title=event_title(event_type),
            description="Automated event detection",
            timestamp=now - timedelta(milliseconds=rng.randint(0, 3600000)),
        ))
    return events


def build_scenarios() -> List[DemoScenario]:
    return [
        DemoScenario(
            name=s["name"],
            description=s["description"],
            duration=s["duration"],
            events=s["events"],
            is_active=False,
        )
        for s in DEMO_SCENARIOS
    ]


async def clear_tables(session: AsyncSession) -> None:
    """Delete seeded tables in foreign-key-safe order."""
    for model in CLEAR_ORDER:
        await session.execute(delete(model))


async def _insert(session: AsyncSession, rows: list, label: str) -> list:
    session.add_all(rows)
    await session.flush()
    print(f"[SEED]   Inserted {len(rows)} {label}")
    return rows


async def seed_database(
    session: AsyncSession,
    rng: Optional[random.Random] = None,
    entities: int = 500,
    alerts: int = 50,
    incidents: int = 15,
    events: int = 200,
    clear: bool = True,
    now: Optional[datetime] = None,
) -> dict:
    """
    Insert a full demo campus.

    Returns:
        Row counts keyed by table label
    """
    rng = rng or random.Random()
    now = now or datetime.utcnow()

    if clear:
        print("[SEED] Clearing existing data...")
        await clear_tables(session)

    buildings = await _insert(session, build_buildings(), "buildings")
    floors = await _insert(session, build_floors(buildings), "floors")
    zones = await _insert(session, build_zones(floors), "zones")
    cameras = await _insert(session, build_cameras(rng, floors), "cameras")
    sensors = await _insert(session, build_sensors(rng, floors), "sensors")
    readers = await _insert(session, build_access_readers(rng, floors), "access readers")
    access_points = await _insert(session, build_wifi_access_points(rng, floors), "Wi-Fi access points")
    tracked = await _insert(session, build_entities(rng, floors, entities, now), "tracked entities")
    alert_rows = await _insert(session, build_alerts(rng, buildings, floors, alerts), "alerts")
    incident_rows = await _insert(session, build_incidents(rng, floors, incidents, now), "incidents")
    event_rows = await _insert(session, build_events(rng, floors, events, now), "events")
    scenarios = await _insert(session, build_scenarios(), "demo scenarios")

    return {
        "buildings": len(buildings),
        "floors": len(floors),
        "zones": len(zones),
        "cameras": len(cameras),
        "sensors": len(sensors),
        "access_readers": len(readers),
        "wifi_access_points": len(access_points),
        "tracked_entities": len(tracked),
        "alerts": len(alert_rows),
        "incidents": len(incident_rows),
        "events": len(event_rows),
        "demo_scenarios": len(scenarios),
    }


async def run(args: argparse.Namespace) -> int:
    if not await init_db():
        print("[SEED] DATABASE_URL is not configured")
        return 1

    rng = random.Random(args.seed)
    print("[SEED] Starting database seed...")
    try:
        async with get_db() as session:
            counts = await seed_database(
                session,
                rng=rng,
                entities=args.entities,
                alerts=args.alerts,
                incidents=args.incidents,
                events=args.events,
                clear=not args.no_clear,
            )
    finally:
        await close_db()

    print("\n[SEED] Database seeding completed")
    print("[SEED] Summary:")
    for label, count in counts.items():
        print(f"[SEED]   - {count} {label.replace('_', ' ')}")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the campus security database with demo data",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--entities", type=int, default=500, help="Tracked people to create (default: 500)")
    parser.add_argument("--alerts", type=int, default=50, help="Alerts to create (default: 50)")
    parser.add_argument("--incidents", type=int, default=15, help="Incidents to create (default: 15)")
    parser.add_argument("--events", type=int, default=200, help="Activity events to create (default: 200)")
    parser.add_argument("--no-clear", action="store_true", help="Keep existing rows instead of clearing tables")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point."""
    sys.exit(asyncio.run(run(parse_args(argv))))


if __name__ == "__main__":
    main()
