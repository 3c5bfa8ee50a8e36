"""Database module with PostgreSQL async support."""

from .database import (
    get_db,
    get_db_session,
    init_db,
    close_db,
    get_session_factory,
    is_database_configured,
)
from .models import (
    Base,
    User,
    Building,
    Floor,
    Zone,
    Camera,
    AccessReader,
    Sensor,
    WifiAccessPoint,
    TrackedEntity,
    LocationEvent,
    Event,
    Alert,
    Incident,
    ConfigEntry,
    AuditLog,
    DemoScenario,
    UserRole,
    ZoneType,
    CameraType,
    EquipmentStatus,
    AccessReaderType,
    SensorType,
    SensorStatus,
    EntityType,
    EntityRole,
    LocationSource,
    EventType,
    Severity,
    AlertType,
    AlertSeverity,
    AlertStatus,
    IncidentStatus,
    IncidentPriority,
)

__all__ = [
    # Database functions
    "get_db",
    "get_db_session",
    "init_db",
    "close_db",
    "get_session_factory",
    "is_database_configured",
    # Models
    "Base",
    "User",
    "Building",
    "Floor",
    "Zone",
    "Camera",
    "AccessReader",
    "Sensor",
    "WifiAccessPoint",
    "TrackedEntity",
    "LocationEvent",
    "Event",
    "Alert",
    "Incident",
    "ConfigEntry",
    "AuditLog",
    "DemoScenario",
    # Enums
    "UserRole",
    "ZoneType",
    "CameraType",
    "EquipmentStatus",
    "AccessReaderType",
    "SensorType",
    "SensorStatus",
    "EntityType",
    "EntityRole",
    "LocationSource",
    "EventType",
    "Severity",
    "AlertType",
    "AlertSeverity",
    "AlertStatus",
    "IncidentStatus",
    "IncidentPriority",
]
