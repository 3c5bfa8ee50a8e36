"""Database repositories, one per aggregate."""

from .base import BaseRepository
from .users import UserRepository
from .campus import BuildingRepository, FloorRepository, ZoneRepository
from .cameras import CameraRepository
from .devices import SensorRepository, AccessReaderRepository, WifiAccessPointRepository
from .entities import EntityRepository, LocationRepository, PRESENCE_WINDOW
from .alerts import AlertRepository
from .incidents import IncidentRepository, timeline_entry
from .events import EventRepository
from .stats import StatsRepository
from .config import ConfigRepository
from .audit import AuditRepository
from .scenarios import ScenarioRepository

__all__ = [
    # Base
    "BaseRepository",
    # Campus layout
    "BuildingRepository",
    "FloorRepository",
    "ZoneRepository",
    # Equipment
    "CameraRepository",
    "SensorRepository",
    "AccessReaderRepository",
    "WifiAccessPointRepository",
    # Tracking
    "EntityRepository",
    "LocationRepository",
    "PRESENCE_WINDOW",
    # Security workflow
    "AlertRepository",
    "IncidentRepository",
    "timeline_entry",
    "EventRepository",
    "StatsRepository",
    # Platform
    "UserRepository",
    "ConfigRepository",
    "AuditRepository",
    "ScenarioRepository",
]
