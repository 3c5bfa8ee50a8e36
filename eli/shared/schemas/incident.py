"""Incident schemas."""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from ..db.models import IncidentStatus, IncidentPriority


class IncidentCreate(BaseModel):
    """Create incident request schema."""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: IncidentPriority
    building_id: Optional[int] = None
    floor_id: Optional[int] = None
    linked_alert_ids: List[int] = Field(default_factory=list)


class IncidentStatusUpdate(BaseModel):
    """Update incident status request schema."""
    status: IncidentStatus


class TimelineEntry(BaseModel):
    """Single incident timeline entry."""
    timestamp: str
    action: str
    user_id: Optional[int] = None


class IncidentResponse(BaseModel):
    """Incident response schema."""
    id: int
    status: Optional[IncidentStatus] = None
    priority: Optional[IncidentPriority] = None
    title: str
    description: Optional[str] = None
    building_id: Optional[int] = None
    floor_id: Optional[int] = None
    commander_id: Optional[int] = None
    assigned_to: Optional[int] = None

    tags: Optional[List[str]] = None
    timeline: Optional[List[TimelineEntry]] = None
    linked_alert_ids: Optional[List[int]] = None
    linked_event_ids: Optional[List[int]] = None
    linked_entity_ids: Optional[List[int]] = None

    created_at: datetime
    updated_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class IncidentStatsResponse(BaseModel):
    """Incident counts by status."""
    total: int = 0
    open: int = 0
    in_progress: int = 0
    resolved: int = 0
    closed: int = 0
