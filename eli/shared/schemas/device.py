"""Sensor, access reader and Wi-Fi access point schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ..db.models import SensorType, SensorStatus, AccessReaderType, EquipmentStatus


class SensorResponse(BaseModel):
    """Sensor response schema."""
    id: int
    building_id: int
    floor_id: Optional[int] = None
    name: str
    type: Optional[SensorType] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    external_id: Optional[str] = None
    status: Optional[SensorStatus] = None
    created_at: datetime

    class Config:
        from_attributes = True


class AccessReaderResponse(BaseModel):
    """Access reader response schema."""
    id: int
    building_id: int
    floor_id: Optional[int] = None
    name: str
    type: Optional[AccessReaderType] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    external_id: Optional[str] = None
    status: Optional[EquipmentStatus] = None
    created_at: datetime

    class Config:
        from_attributes = True


class WifiAccessPointResponse(BaseModel):
    """Wi-Fi access point response schema."""
    id: int
    building_id: int
    floor_id: Optional[int] = None
    name: str
    bssid: Optional[str] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    coverage_radius: Optional[int] = None
    status: Optional[EquipmentStatus] = None
    created_at: datetime

    class Config:
        from_attributes = True
