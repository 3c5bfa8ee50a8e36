"""System and platform schemas: health, notifications, config, audit, scenarios."""

from datetime import datetime
from typing import Any, Optional, List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """REST health check response."""
    status: str = "ok"
    timestamp: datetime


class SystemHealthResponse(BaseModel):
    """Typed API health check response."""
    ok: bool = True


class NotifyOwnerRequest(BaseModel):
    """Owner notification request schema. Length rules live in the sender."""
    title: str
    content: str


class NotifyOwnerResponse(BaseModel):
    """Whether the notification service accepted the message."""
    success: bool


class ConfigSetRequest(BaseModel):
    """Upsert setting request schema."""
    key: str = Field(..., min_length=1, max_length=255)
    value: Any
    description: Optional[str] = None


class ConfigResponse(BaseModel):
    """Setting response schema."""
    id: int
    key: str
    value: Any
    description: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True


class AuditLogResponse(BaseModel):
    """Audit log response schema."""
    id: int
    user_id: Optional[int] = None
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[int] = None
    details: Optional[dict] = None
    ip_address: Optional[str] = None
    timestamp: datetime

    class Config:
        from_attributes = True


class ScenarioResponse(BaseModel):
    """Demo scenario response schema."""
    id: int
    name: str
    description: Optional[str] = None
    duration: Optional[int] = None  # seconds
    events: Optional[List[dict]] = None
    is_active: Optional[bool] = None
    created_at: datetime

    class Config:
        from_attributes = True
