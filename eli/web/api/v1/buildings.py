"""Building, floor and zone API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from ....shared.db.models import Building
from ....shared.db.repositories.campus import (
    BuildingRepository,
    FloorRepository,
    ZoneRepository,
)
from ....shared.schemas.campus import (
    BuildingCreate,
    BuildingResponse,
    FloorResponse,
    ZoneResponse,
)
from ...auth.dependencies import OptionalUser
from ...deps import DbSession, require_db, audit

buildings_router = APIRouter()
floors_router = APIRouter()
zones_router = APIRouter()


@buildings_router.get("", response_model=List[BuildingResponse])
async def list_buildings(db: DbSession):
    """List buildings ordered by name."""
    if db is None:
        return []
    buildings = await BuildingRepository(db).list_by_name()
    return [BuildingResponse.model_validate(b) for b in buildings]


@buildings_router.get("/{building_id}", response_model=Optional[BuildingResponse])
async def get_building(building_id: int, db: DbSession):
    if db is None:
        return None
    building = await BuildingRepository(db).get_by_id(building_id)
    return BuildingResponse.model_validate(building) if building else None


@buildings_router.post("", response_model=BuildingResponse, status_code=status.HTTP_201_CREATED)
async def create_building(
    body: BuildingCreate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Create a building."""
    db = require_db(db)
    data = body.model_dump(exclude_none=True)
    building = await BuildingRepository(db).create(Building(**data))
    await audit(db, request, user, "building.create", "building", building.id)
    return BuildingResponse.model_validate(building)


@floors_router.get("", response_model=List[FloorResponse])
async def list_floors(
    db: DbSession,
    building_id: Optional[int] = None,
):
    """
    List floors.

    With building_id the floors come back by level, otherwise by building
    and then level.
    """
    if db is None:
        return []
    floors = await FloorRepository(db).list_floors(building_id)
    return [FloorResponse.model_validate(f) for f in floors]


@floors_router.get("/{floor_id}", response_model=Optional[FloorResponse])
async def get_floor(floor_id: int, db: DbSession):
    if db is None:
        return None
    floor = await FloorRepository(db).get_by_id(floor_id)
    return FloorResponse.model_validate(floor) if floor else None


@zones_router.get("", response_model=List[ZoneResponse])
async def list_zones(
    db: DbSession,
    floor_id: int = Query(...),
):
    """List zones on a floor ordered by name."""
    if db is None:
        return []
    zones = await ZoneRepository(db).get_by_floor(floor_id)
    return [ZoneResponse.model_validate(z) for z in zones]
