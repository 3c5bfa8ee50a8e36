"""Activity event schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ..db.models import EventType, Severity


class EventResponse(BaseModel):
    """Event response schema."""
    id: int
    type: EventType
    severity: Optional[Severity] = None
    source_type: Optional[str] = None  # camera, access_reader, sensor
    source_id: Optional[int] = None
    building_id: Optional[int] = None
    floor_id: Optional[int] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    title: Optional[str] = None
    description: Optional[str] = None
    meta: Optional[dict] = None
    incident_id: Optional[int] = None
    timestamp: datetime
    created_at: datetime

    class Config:
        from_attributes = True
