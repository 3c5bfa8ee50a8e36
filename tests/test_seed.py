from __future__ import annotations

import random
from datetime import datetime, timedelta

from sqlalchemy import func, select

from eli.seed import (
    BUILDINGS,
    MAX_SEEDED_FLOORS,
    ZONE_LAYOUT,
    event_title,
    parse_args,
    seed_database,
)
from eli.shared.db.models import (
    Building,
    Camera,
    EventType,
    Floor,
    Incident,
    TrackedEntity,
)


async def count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_seed_builds_a_campus(session_factory) -> None:
    now = datetime.utcnow()
    async with session_factory() as session:
        counts = await seed_database(
            session, rng=random.Random(42), entities=25, alerts=6, incidents=3, events=12, now=now
        )
        await session.commit()

    expected_floors = sum(min(b["floors_count"], MAX_SEEDED_FLOORS) for b in BUILDINGS)
    assert counts["buildings"] == len(BUILDINGS)
    assert counts["floors"] == expected_floors
    assert counts["zones"] == expected_floors * len(ZONE_LAYOUT)
    assert counts["tracked_entities"] == 25
    assert counts["alerts"] == 6
    assert counts["incidents"] == 3
    assert counts["events"] == 12
    assert counts["demo_scenarios"] == 3
    assert 15 * expected_floors <= counts["cameras"] <= 25 * expected_floors

    async with session_factory() as session:
        assert await count(session, Building) == len(BUILDINGS)
        assert await count(session, Camera) == counts["cameras"]

        floors = (await session.execute(select(Floor))).scalars().all()
        assert all(f.floorplan_width == 1200 and f.floorplan_height == 800 for f in floors)

        entities = (await session.execute(select(TrackedEntity))).scalars().all()
        floor_ids = {f.id for f in floors}
        for entity in entities:
            assert entity.last_floor_id in floor_ids
            assert now - timedelta(minutes=5) <= entity.last_seen_at <= now
            assert 50 <= float(entity.last_x) <= 1150
            assert 50 <= float(entity.last_y) <= 750

        incident = (await session.execute(select(Incident).limit(1))).scalar_one()
        assert incident.timeline[0]["action"] == "created"


async def test_reseeding_replaces_data(session_factory) -> None:
    for seed in (1, 2):
        async with session_factory() as session:
            await seed_database(session, rng=random.Random(seed), entities=5, alerts=1, incidents=1, events=1)
            await session.commit()

    async with session_factory() as session:
        assert await count(session, Building) == len(BUILDINGS)
        assert await count(session, TrackedEntity) == 5


def test_event_title() -> None:
    assert event_title(EventType.CAMERA_ALERT) == "Camera Alert Event"
    assert event_title(EventType.WIFI_PROBE) == "Wifi Probe Event"


def test_parse_args() -> None:
    args = parse_args(["--seed", "7", "--entities", "40", "--no-clear"])
    assert args.seed == 7
    assert args.entities == 40
    assert args.alerts == 50
    assert args.no_clear is True
