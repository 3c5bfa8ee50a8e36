"""Alert schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ..db.models import AlertType, AlertSeverity, AlertStatus, MAX_COORDINATE


class AlertCreate(BaseModel):
    """Create alert request schema."""
    type: AlertType
    severity: AlertSeverity
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    building_id: Optional[int] = None
    floor_id: Optional[int] = None
    x: Optional[Decimal] = Field(None, ge=0, le=MAX_COORDINATE)
    y: Optional[Decimal] = Field(None, ge=0, le=MAX_COORDINATE)
    ai_confidence: Optional[Decimal] = Field(None, ge=0, le=1)


class AlertStatusUpdate(BaseModel):
    """Update alert status request schema."""
    status: AlertStatus
    resolution_notes: Optional[str] = None


class AlertResponse(BaseModel):
    """Alert response schema."""
    id: int
    type: AlertType
    severity: Optional[AlertSeverity] = None
    status: Optional[AlertStatus] = None
    title: str
    description: Optional[str] = None

    building_id: Optional[int] = None
    floor_id: Optional[int] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None

    ai_confidence: Optional[Decimal] = None
    source_event_id: Optional[int] = None

    assigned_to: Optional[int] = None
    acknowledged_by: Optional[int] = None
    acknowledged_at: Optional[datetime] = None
    resolved_by: Optional[int] = None
    resolved_at: Optional[datetime] = None
    resolution_notes: Optional[str] = None

    meta: Optional[dict] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AlertStatsResponse(BaseModel):
    """Alert counts. Severity counts cover active alerts only."""
    total: int = 0
    active: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
