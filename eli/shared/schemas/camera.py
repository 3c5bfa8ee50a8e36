"""Camera schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ..db.models import CameraType, EquipmentStatus


class CameraResponse(BaseModel):
    """Camera response schema."""
    id: int
    building_id: int
    floor_id: Optional[int] = None
    name: str
    type: Optional[CameraType] = None

    rtsp_url: Optional[str] = None
    hls_url: Optional[str] = None
    snapshot_url: Optional[str] = None

    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    fov_degrees: Optional[int] = None
    rotation: Optional[int] = None

    status: Optional[EquipmentStatus] = None
    has_ai: Optional[bool] = None
    last_health_check: Optional[datetime] = None
    meta: Optional[dict] = None

    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CameraStatusUpdate(BaseModel):
    """Update camera status request schema."""
    status: EquipmentStatus


class CameraStatsResponse(BaseModel):
    """Camera counts by status."""
    total: int = 0
    online: int = 0
    offline: int = 0
    maintenance: int = 0
    error: int = 0
