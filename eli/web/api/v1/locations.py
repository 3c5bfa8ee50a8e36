"""Location tracking API endpoints."""

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Query

from ....shared.db.models import LocationSource
from ....shared.db.repositories.campus import FloorRepository
from ....shared.db.repositories.entities import EntityRepository, LocationRepository
from ....shared.schemas.auth import SuccessResponse
from ....shared.schemas.entity import (
    CurrentLocationResponse,
    LocationRecordRequest,
    LocationSimulateRequest,
    LocationSimulateResponse,
)
from ....shared.simulation import simulate_entity_movement
from ...deps import DbSession, require_db, not_found
from ...live import publish_live

router = APIRouter()


def _position(value: float) -> Decimal:
    """Round a floor plan coordinate to the column's 4 decimal places."""
    return Decimal(str(round(value, 4)))


@router.get("/current", response_model=List[CurrentLocationResponse])
async def current_locations(
    db: DbSession,
    floor_id: int = Query(...),
):
    """Entities on a floor seen in the last 5 minutes."""
    if db is None:
        return []
    entities = await EntityRepository(db).get_present_on_floor(floor_id)
    return [
        CurrentLocationResponse(
            entity_id=e.id,
            display_name=e.display_name,
            role=e.role,
            is_watchlist=e.is_watchlist,
            x=e.last_x,
            y=e.last_y,
            last_seen_at=e.last_seen_at,
        )
        for e in entities
    ]


@router.post("", response_model=SuccessResponse)
async def record_location(body: LocationRecordRequest, db: DbSession):
    """
    Record a location fix.

    Moves the entity's last known position and notifies live dashboards.
    """
    db = require_db(db)
    entity = await EntityRepository(db).get_by_id(body.entity_id)
    if not entity:
        raise not_found("Entity")
    if not await FloorRepository(db).get_by_id(body.floor_id):
        raise not_found("Floor")

    event = await LocationRepository(db).record(
        entity,
        floor_id=body.floor_id,
        source_type=body.source_type,
        x=body.x,
        y=body.y,
        confidence=body.confidence,
    )
    await db.commit()
    await publish_live("location_update", {
        "entity_id": entity.id,
        "floor_id": body.floor_id,
        "x": str(body.x),
        "y": str(body.y),
        "source_type": body.source_type.value,
        "timestamp": event.timestamp.isoformat(),
    })
    return SuccessResponse(success=True)


@router.post("/simulate", response_model=LocationSimulateResponse)
async def simulate_locations(body: LocationSimulateRequest, db: DbSession):
    """Advance every entity on a floor by one random-walk step."""
    db = require_db(db)
    if not await FloorRepository(db).get_by_id(body.floor_id):
        raise not_found("Floor")

    entities = await EntityRepository(db).get_filtered(floor_id=body.floor_id)
    locations = LocationRepository(db)

    updates = []
    for entity in entities:
        x, y = simulate_entity_movement(entity.last_x, entity.last_y, body.delta_ms)
        await locations.record(
            entity,
            floor_id=body.floor_id,
            source_type=LocationSource.WIFI,
            x=_position(x),
            y=_position(y),
        )
        updates.append({
            "entity_id": entity.id,
            "floor_id": body.floor_id,
            "x": str(entity.last_x),
            "y": str(entity.last_y),
            "source_type": LocationSource.WIFI.value,
        })

    await db.commit()
    for payload in updates:
        await publish_live("location_update", payload)

    return LocationSimulateResponse(success=True, moved=len(entities))
