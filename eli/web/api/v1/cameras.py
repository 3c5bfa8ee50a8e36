"""Camera API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Request

from ....shared.db.models import EquipmentStatus
from ....shared.db.repositories.cameras import CameraRepository
from ....shared.schemas.auth import SuccessResponse
from ....shared.schemas.camera import (
    CameraResponse,
    CameraStatusUpdate,
    CameraStatsResponse,
)
from ...auth.dependencies import OptionalUser
from ...deps import DbSession, require_db, not_found, audit
from ...live import publish_live

router = APIRouter()


@router.get("", response_model=List[CameraResponse])
async def list_cameras(
    db: DbSession,
    building_id: Optional[int] = None,
    floor_id: Optional[int] = None,
    status: Optional[EquipmentStatus] = None,
):
    """List cameras ordered by name."""
    if db is None:
        return []
    cameras = await CameraRepository(db).get_filtered(
        building_id=building_id,
        floor_id=floor_id,
        status=status,
    )
    return [CameraResponse.model_validate(c) for c in cameras]


@router.get("/stats", response_model=CameraStatsResponse)
async def camera_stats(db: DbSession):
    """Camera counts by status."""
    if db is None:
        return CameraStatsResponse()

    repo = CameraRepository(db)
    counts = await repo.count_by_status()
    return CameraStatsResponse(
        total=sum(counts.values()),
        online=counts.get(EquipmentStatus.ONLINE.value, 0),
        offline=counts.get(EquipmentStatus.OFFLINE.value, 0),
        maintenance=counts.get(EquipmentStatus.MAINTENANCE.value, 0),
        error=counts.get(EquipmentStatus.ERROR.value, 0),
    )


@router.get("/{camera_id}", response_model=Optional[CameraResponse])
async def get_camera(camera_id: int, db: DbSession):
    if db is None:
        return None
    camera = await CameraRepository(db).get_by_id(camera_id)
    return CameraResponse.model_validate(camera) if camera else None


@router.patch("/{camera_id}/status", response_model=SuccessResponse)
async def update_camera_status(
    camera_id: int,
    body: CameraStatusUpdate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Set a camera's operational status."""
    db = require_db(db)
    updated = await CameraRepository(db).update_status(camera_id, body.status)
    if not updated:
        raise not_found("Camera")

    await audit(
        db, request, user, "camera.update_status", "camera", camera_id,
        {"status": body.status.value},
    )
    await db.commit()
    await publish_live("camera_status", {
        "camera_id": camera_id,
        "status": body.status.value,
    })
    return SuccessResponse(success=True)
