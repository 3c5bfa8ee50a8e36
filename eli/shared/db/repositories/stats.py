"""Dashboard statistics repository."""

from typing import Optional
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import (
    Camera,
    EquipmentStatus,
    Alert,
    AlertStatus,
    AlertSeverity,
    Incident,
    IncidentStatus,
    TrackedEntity,
    Event,
)
from .alerts import AlertRepository
from .cameras import CameraRepository
from .entities import EntityRepository, PRESENCE_WINDOW
from .events import EventRepository
from .incidents import IncidentRepository


class StatsRepository:
    """Repository for cross-table dashboard counts."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.cameras = CameraRepository(session)
        self.alerts = AlertRepository(session)
        self.incidents = IncidentRepository(session)
        self.entities = EntityRepository(session)
        self.events = EventRepository(session)

    async def get_overview(self, now: Optional[datetime] = None) -> dict:
        """Get the headline counts shown on the dashboard."""
        now = now or datetime.utcnow()
        return {
            "total_cameras": await self.cameras.count(),
            "cameras_online": await self.cameras.count(
                Camera.status == EquipmentStatus.ONLINE
            ),
            "active_alerts": await self.alerts.count(
                Alert.status == AlertStatus.ACTIVE
            ),
            "critical_alerts": await self.alerts.count(
                Alert.status == AlertStatus.ACTIVE,
                Alert.severity == AlertSeverity.CRITICAL,
            ),
            "open_incidents": await self.incidents.count(
                Incident.status.in_([IncidentStatus.OPEN, IncidentStatus.IN_PROGRESS]),
            ),
            "tracked_entities": await self.entities.count(
                TrackedEntity.last_seen_at >= now - PRESENCE_WINDOW
            ),
            "recent_events": await self.events.count(
                Event.timestamp >= now - timedelta(hours=1)
            ),
        }
