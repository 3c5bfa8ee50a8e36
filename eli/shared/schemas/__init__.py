"""Pydantic schemas for API requests and responses."""

from .auth import (
    DemoLoginRequest,
    DemoLoginResponse,
    DemoUser,
    SessionUserResponse,
    SuccessResponse,
)
from .campus import (
    BuildingCreate,
    BuildingResponse,
    FloorResponse,
    ZoneResponse,
)
from .camera import (
    CameraResponse,
    CameraStatusUpdate,
    CameraStatsResponse,
)
from .device import (
    SensorResponse,
    AccessReaderResponse,
    WifiAccessPointResponse,
)
from .entity import (
    EntityResponse,
    EntityStatsResponse,
    LocationEventResponse,
    CurrentLocationResponse,
    LocationRecordRequest,
    LocationSimulateRequest,
    LocationSimulateResponse,
)
from .alert import (
    AlertCreate,
    AlertStatusUpdate,
    AlertResponse,
    AlertStatsResponse,
)
from .incident import (
    IncidentCreate,
    IncidentStatusUpdate,
    IncidentResponse,
    IncidentStatsResponse,
)
from .event import EventResponse
from .stats import DashboardOverviewResponse
from .system import (
    HealthResponse,
    SystemHealthResponse,
    NotifyOwnerRequest,
    NotifyOwnerResponse,
    ConfigSetRequest,
    ConfigResponse,
    AuditLogResponse,
    ScenarioResponse,
)

__all__ = [
    # Auth
    "DemoLoginRequest",
    "DemoLoginResponse",
    "DemoUser",
    "SessionUserResponse",
    "SuccessResponse",
    # Campus
    "BuildingCreate",
    "BuildingResponse",
    "FloorResponse",
    "ZoneResponse",
    # Camera
    "CameraResponse",
    "CameraStatusUpdate",
    "CameraStatsResponse",
    # Devices
    "SensorResponse",
    "AccessReaderResponse",
    "WifiAccessPointResponse",
    # Entities
    "EntityResponse",
    "EntityStatsResponse",
    "LocationEventResponse",
    "CurrentLocationResponse",
    "LocationRecordRequest",
    "LocationSimulateRequest",
    "LocationSimulateResponse",
    # Alerts
    "AlertCreate",
    "AlertStatusUpdate",
    "AlertResponse",
    "AlertStatsResponse",
    # Incidents
    "IncidentCreate",
    "IncidentStatusUpdate",
    "IncidentResponse",
    "IncidentStatsResponse",
    # Events
    "EventResponse",
    # Stats
    "DashboardOverviewResponse",
    # System
    "HealthResponse",
    "SystemHealthResponse",
    "NotifyOwnerRequest",
    "NotifyOwnerResponse",
    "ConfigSetRequest",
    "ConfigResponse",
    "AuditLogResponse",
    "ScenarioResponse",
]
