"""Tracked entity and location schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ..db.models import EntityType, EntityRole, LocationSource, MAX_COORDINATE


class EntityResponse(BaseModel):
    """Tracked entity response schema."""
    id: int
    type: Optional[EntityType] = None
    identifier_hash: Optional[str] = None
    display_name: Optional[str] = None
    role: Optional[EntityRole] = None
    is_watchlist: Optional[bool] = None
    risk_score: Optional[int] = None

    last_seen_at: Optional[datetime] = None
    last_floor_id: Optional[int] = None
    last_x: Optional[Decimal] = None
    last_y: Optional[Decimal] = None

    meta: Optional[dict] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EntityStatsResponse(BaseModel):
    """Entity counts by role. Contractors count as unknown."""
    total: int = 0
    staff: int = 0
    students: int = 0
    visitors: int = 0
    unknown: int = 0
    watchlist: int = 0


class LocationEventResponse(BaseModel):
    """Location fix response schema."""
    id: int
    entity_id: int
    floor_id: int
    source_type: LocationSource
    x: Decimal
    y: Decimal
    confidence: Optional[Decimal] = None
    timestamp: datetime
    meta: Optional[dict] = None

    class Config:
        from_attributes = True


class CurrentLocationResponse(BaseModel):
    """Entity currently present on a floor."""
    entity_id: int
    display_name: Optional[str] = None
    role: Optional[EntityRole] = None
    is_watchlist: Optional[bool] = None
    x: Optional[Decimal] = None
    y: Optional[Decimal] = None
    last_seen_at: Optional[datetime] = None


class LocationRecordRequest(BaseModel):
    """Record location fix request schema."""
    entity_id: int
    floor_id: int
    source_type: LocationSource
    x: Decimal = Field(..., ge=0, le=MAX_COORDINATE)
    y: Decimal = Field(..., ge=0, le=MAX_COORDINATE)
    confidence: Decimal = Field(default=Decimal("0.8"), ge=0, le=1)


class LocationSimulateRequest(BaseModel):
    """Advance the random walk for every entity on a floor."""
    floor_id: int
    delta_ms: int = Field(default=1000, ge=1, le=60000)


class LocationSimulateResponse(BaseModel):
    """Result of a simulation step."""
    success: bool = True
    moved: int
