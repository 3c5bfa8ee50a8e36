"""Building, floor and zone schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from pydantic import BaseModel, Field

from ..db.models import ZoneType


class BuildingCreate(BaseModel):
    """Create building request schema."""
    name: str = Field(..., min_length=1, max_length=255)
    code: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    floors_count: Optional[int] = Field(None, ge=1)
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    description: Optional[str] = None
    image_url: Optional[str] = None


class BuildingResponse(BaseModel):
    """Building response schema."""
    id: int
    name: str
    code: Optional[str] = None
    address: Optional[str] = None
    floors_count: Optional[int] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FloorResponse(BaseModel):
    """Floor response schema."""
    id: int
    building_id: int
    level: int
    name: str
    floorplan_url: Optional[str] = None
    floorplan_width: Optional[int] = None
    floorplan_height: Optional[int] = None
    scale_px_per_meter: Optional[Decimal] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ZoneResponse(BaseModel):
    """Zone response schema."""
    id: int
    floor_id: int
    name: str
    type: Optional[ZoneType] = None
    polygon_points: Optional[List[dict]] = None  # [{x, y}, ...]
    color: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
