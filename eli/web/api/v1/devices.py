"""Sensor, access reader and Wi-Fi access point API endpoints."""

from typing import List, Optional

from fastapi import APIRouter

from ....shared.db.models import SensorType
from ....shared.db.repositories.devices import (
    SensorRepository,
    AccessReaderRepository,
    WifiAccessPointRepository,
)
from ....shared.schemas.device import (
    SensorResponse,
    AccessReaderResponse,
    WifiAccessPointResponse,
)
from ...deps import DbSession

router = APIRouter()


@router.get("/sensors", response_model=List[SensorResponse])
async def list_sensors(
    db: DbSession,
    building_id: Optional[int] = None,
    floor_id: Optional[int] = None,
    type: Optional[SensorType] = None,
):
    """List sensors ordered by name."""
    if db is None:
        return []
    sensors = await SensorRepository(db).get_filtered(
        building_id=building_id,
        floor_id=floor_id,
        type=type,
    )
    return [SensorResponse.model_validate(s) for s in sensors]


@router.get("/access-readers", response_model=List[AccessReaderResponse])
async def list_access_readers(
    db: DbSession,
    building_id: Optional[int] = None,
    floor_id: Optional[int] = None,
):
    """List access readers ordered by name."""
    if db is None:
        return []
    readers = await AccessReaderRepository(db).get_filtered(building_id, floor_id)
    return [AccessReaderResponse.model_validate(r) for r in readers]


@router.get("/wifi-access-points", response_model=List[WifiAccessPointResponse])
async def list_wifi_access_points(
    db: DbSession,
    building_id: Optional[int] = None,
    floor_id: Optional[int] = None,
):
    if db is None:
        return []
    access_points = await WifiAccessPointRepository(db).get_filtered(building_id, floor_id)
    return [WifiAccessPointResponse.model_validate(ap) for ap in access_points]
