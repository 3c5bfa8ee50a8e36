"""SQLAlchemy ORM models for the campus security schema."""

from datetime import datetime
from decimal import Decimal
from enum import Enum as PyEnum
from typing import Any, Optional, List

from sqlalchemy import (
    String,
    Text,
    Integer,
    Numeric,
    Boolean,
    DateTime,
    ForeignKey,
    Enum,
    JSON,
    Index,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def pg_enum(enum_cls: type[PyEnum], name: str) -> Enum:
    """Named Postgres enum storing member values rather than names."""
    return Enum(enum_cls, name=name, values_callable=lambda x: [e.value for e in x])


# Largest floor plan coordinate a Numeric(10, 4) column holds
MAX_COORDINATE = Decimal("999999.9999")


# Enums

class UserRole(str, PyEnum):
    """Dashboard user role."""
    USER = "user"
    ADMIN = "admin"
    OPERATOR = "operator"
    VIEWER = "viewer"


class ZoneType(str, PyEnum):
    """Kind of area a zone polygon covers."""
    CLASSROOM = "classroom"
    HALLWAY = "hallway"
    STAIRWELL = "stairwell"
    ENTRY = "entry"
    OFFICE = "office"
    LAB = "lab"
    COMMON = "common"
    RESTROOM = "restroom"
    OTHER = "other"


class CameraType(str, PyEnum):
    """Camera hardware type."""
    DOME = "dome"
    BULLET = "bullet"
    PTZ = "ptz"
    FISHEYE = "fisheye"
    THERMAL = "thermal"


class EquipmentStatus(str, PyEnum):
    """Operational status shared by cameras, readers and access points."""
    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"
    ERROR = "error"


class AccessReaderType(str, PyEnum):
    """Direction an access reader controls."""
    ENTRY = "entry"
    EXIT = "exit"
    BIDIRECTIONAL = "bidirectional"


class SensorType(str, PyEnum):
    """Environmental or intrusion sensor type."""
    MOTION = "motion"
    GLASS_BREAK = "glass_break"
    SMOKE = "smoke"
    TEMPERATURE = "temperature"
    OCCUPANCY = "occupancy"


class SensorStatus(str, PyEnum):
    """Sensor status."""
    ONLINE = "online"
    OFFLINE = "offline"
    TRIGGERED = "triggered"
    MAINTENANCE = "maintenance"


class EntityType(str, PyEnum):
    """Kind of tracked entity."""
    PERSON = "person"
    DEVICE = "device"
    VEHICLE = "vehicle"
    UNKNOWN = "unknown"


class EntityRole(str, PyEnum):
    """Campus role of a tracked person."""
    STAFF = "staff"
    STUDENT = "student"
    VISITOR = "visitor"
    CONTRACTOR = "contractor"
    UNKNOWN = "unknown"


class LocationSource(str, PyEnum):
    """Signal a location fix came from."""
    WIFI = "wifi"
    RFID = "rfid"
    FACIAL = "facial"
    PHONE = "phone"
    MOTION = "motion"
    MANUAL = "manual"


class EventType(str, PyEnum):
    """Type of activity-log event."""
    CAMERA_ALERT = "camera_alert"
    ACCESS_ENTRY = "access_entry"
    ACCESS_DENIED = "access_denied"
    MOTION_DETECT = "motion_detect"
    WIFI_PROBE = "wifi_probe"
    FACIAL_MATCH = "facial_match"
    WEAPON_DETECT = "weapon_detect"
    ANOMALY = "anomaly"
    CROWD_GATHER = "crowd_gather"
    PERSON_DOWN = "person_down"
    INTRUSION = "intrusion"
    SYSTEM = "system"


class Severity(str, PyEnum):
    """Event severity level."""
    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AlertType(str, PyEnum):
    """Type of security alert."""
    WEAPON = "weapon"
    INTRUSION = "intrusion"
    ANOMALY = "anomaly"
    CROWD = "crowd"
    ACCESS_VIOLATION = "access_violation"
    SYSTEM = "system"
    PERSON_DOWN = "person_down"
    FIRE = "fire"


class AlertSeverity(str, PyEnum):
    """Alert severity level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AlertStatus(str, PyEnum):
    """Alert workflow status."""
    ACTIVE = "active"
    ACKNOWLEDGED = "acknowledged"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    FALSE_ALARM = "false_alarm"


class IncidentStatus(str, PyEnum):
    """Incident workflow status."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class IncidentPriority(str, PyEnum):
    """Incident priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# Models

class User(Base):
    """Dashboard user, upserted on sign-in."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    open_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    login_method: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        pg_enum(UserRole, "user_role"), default=UserRole.USER, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    last_signed_in: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )


class Building(Base):
    """Campus building."""
    __tablename__ = "buildings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    floors_count: Mapped[Optional[int]] = mapped_column(Integer, default=1, nullable=True)
    latitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 8), nullable=True)
    longitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(11, 8), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    floors: Mapped[List["Floor"]] = relationship(
        "Floor", back_populates="building", cascade="all, delete-orphan"
    )


class Floor(Base):
    """Floor of a building, with its floor plan geometry."""
    __tablename__ = "floors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    floorplan_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    floorplan_width: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    floorplan_height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    scale_px_per_meter: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    building: Mapped["Building"] = relationship("Building", back_populates="floors")
    zones: Mapped[List["Zone"]] = relationship(
        "Zone", back_populates="floor", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_floors_building_id", "building_id"),
    )


class Zone(Base):
    """Named polygon on a floor plan."""
    __tablename__ = "zones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    floor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[ZoneType]] = mapped_column(
        pg_enum(ZoneType, "zone_type"), default=ZoneType.OTHER, nullable=True
    )
    polygon_points: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)  # [{x, y}, ...]
    color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    # Relationships
    floor: Mapped["Floor"] = relationship("Floor", back_populates="zones")


class Camera(Base):
    """Security camera placed on a floor plan."""
    __tablename__ = "cameras"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False
    )
    floor_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[CameraType]] = mapped_column(
        pg_enum(CameraType, "camera_type"), default=CameraType.DOME, nullable=True
    )

    # Stream endpoints
    rtsp_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hls_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    snapshot_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Floor plan placement (pixels)
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    fov_degrees: Mapped[Optional[int]] = mapped_column(Integer, default=90, nullable=True)
    rotation: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)

    # Status
    status: Mapped[Optional[EquipmentStatus]] = mapped_column(
        pg_enum(EquipmentStatus, "equipment_status"),
        default=EquipmentStatus.ONLINE, nullable=True
    )
    has_ai: Mapped[Optional[bool]] = mapped_column(Boolean, default=False, nullable=True)
    last_health_check: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    meta: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_cameras_building_id", "building_id"),
        Index("ix_cameras_floor_id", "floor_id"),
        Index("ix_cameras_status", "status"),
    )


class AccessReader(Base):
    """Badge reader on a door."""
    __tablename__ = "access_readers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False
    )
    floor_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[AccessReaderType]] = mapped_column(
        pg_enum(AccessReaderType, "access_reader_type"),
        default=AccessReaderType.BIDIRECTIONAL, nullable=True
    )
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    external_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[Optional[EquipmentStatus]] = mapped_column(
        pg_enum(EquipmentStatus, "equipment_status"),
        default=EquipmentStatus.ONLINE, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )


class Sensor(Base):
    """Motion, smoke, glass-break or environmental sensor."""
    __tablename__ = "sensors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False
    )
    floor_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[SensorType]] = mapped_column(
        pg_enum(SensorType, "sensor_type"), default=SensorType.MOTION, nullable=True
    )
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    external_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[Optional[SensorStatus]] = mapped_column(
        pg_enum(SensorStatus, "sensor_status"), default=SensorStatus.ONLINE, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )


class WifiAccessPoint(Base):
    """Wi-Fi access point used for location fixes."""
    __tablename__ = "wifi_access_points"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False
    )
    floor_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bssid: Mapped[Optional[str]] = mapped_column(String(17), nullable=True)
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    coverage_radius: Mapped[Optional[int]] = mapped_column(Integer, default=30, nullable=True)
    status: Mapped[Optional[EquipmentStatus]] = mapped_column(
        pg_enum(EquipmentStatus, "equipment_status"),
        default=EquipmentStatus.ONLINE, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )


class TrackedEntity(Base):
    """Person, device or vehicle whose position is tracked."""
    __tablename__ = "tracked_entities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[Optional[EntityType]] = mapped_column(
        pg_enum(EntityType, "entity_type"), default=EntityType.UNKNOWN, nullable=True
    )
    identifier_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    display_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role: Mapped[Optional[EntityRole]] = mapped_column(
        pg_enum(EntityRole, "entity_role"), default=EntityRole.UNKNOWN, nullable=True
    )
    is_watchlist: Mapped[Optional[bool]] = mapped_column(Boolean, default=False, nullable=True)
    risk_score: Mapped[Optional[int]] = mapped_column(Integer, default=0, nullable=True)

    # Last known position
    last_seen_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    last_floor_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    last_y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)

    meta: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    location_events: Mapped[List["LocationEvent"]] = relationship(
        "LocationEvent", back_populates="entity", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_tracked_entities_last_floor", "last_floor_id", "last_seen_at"),
    )


class LocationEvent(Base):
    """Single location fix for a tracked entity."""
    __tablename__ = "location_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    entity_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tracked_entities.id", ondelete="CASCADE"), nullable=False
    )
    floor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("floors.id", ondelete="CASCADE"), nullable=False
    )
    source_type: Mapped[LocationSource] = mapped_column(
        pg_enum(LocationSource, "location_source"), nullable=False
    )
    x: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    y: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    confidence: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 4), default=Decimal("0.8"), nullable=True
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    meta: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)

    # Relationships
    entity: Mapped["TrackedEntity"] = relationship(
        "TrackedEntity", back_populates="location_events"
    )

    __table_args__ = (
        Index("ix_location_events_entity_ts", "entity_id", "timestamp"),
    )


class Event(Base):
    """Activity-log event from a camera, reader, sensor or the system."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[EventType] = mapped_column(pg_enum(EventType, "event_type"), nullable=False)
    severity: Mapped[Optional[Severity]] = mapped_column(
        pg_enum(Severity, "severity"), default=Severity.INFO, nullable=True
    )
    source_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    source_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    building_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    floor_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    meta: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    incident_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_events_timestamp", "timestamp"),
    )


class Alert(Base):
    """Security alert raised by detection or an operator."""
    __tablename__ = "alerts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[AlertType] = mapped_column(pg_enum(AlertType, "alert_type"), nullable=False)
    severity: Mapped[Optional[AlertSeverity]] = mapped_column(
        pg_enum(AlertSeverity, "alert_severity"), default=AlertSeverity.MEDIUM, nullable=True
    )
    status: Mapped[Optional[AlertStatus]] = mapped_column(
        pg_enum(AlertStatus, "alert_status"), default=AlertStatus.ACTIVE, nullable=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Location
    building_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    floor_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    x: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)
    y: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 4), nullable=True)

    ai_confidence: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4), nullable=True)
    source_event_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Workflow
    assigned_to: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    acknowledged_by: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    acknowledged_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    resolved_by: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    resolution_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    meta: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_alerts_status", "status", "severity"),
        Index("ix_alerts_created_at", "created_at"),
    )


class Incident(Base):
    """Incident grouping alerts, events and entities under one response."""
    __tablename__ = "incidents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    status: Mapped[Optional[IncidentStatus]] = mapped_column(
        pg_enum(IncidentStatus, "incident_status"), default=IncidentStatus.OPEN, nullable=True
    )
    priority: Mapped[Optional[IncidentPriority]] = mapped_column(
        pg_enum(IncidentPriority, "incident_priority"),
        default=IncidentPriority.MEDIUM, nullable=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    building_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    floor_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    commander_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    assigned_to: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    tags: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    timeline: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)  # [{timestamp, action, user_id}]
    linked_alert_ids: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    linked_event_ids: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    linked_entity_ids: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    closed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_incidents_created_at", "created_at"),
    )


class ConfigEntry(Base):
    """Key/value platform setting."""
    __tablename__ = "config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    key: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class AuditLog(Base):
    """Audit log for tracking user actions."""
    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Action details
    action: Mapped[str] = mapped_column(String(100), nullable=False)
    entity_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    entity_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    details: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    ip_address: Mapped[Optional[str]] = mapped_column(String(45), nullable=True)

    timestamp: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_audit_logs_timestamp", "timestamp"),
    )


class DemoScenario(Base):
    """Scripted sequence of timed events for demos."""
    __tablename__ = "demo_scenarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # seconds
    events: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=False, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
