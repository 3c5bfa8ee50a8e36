"""Activity event repository."""

from typing import Optional, List

from sqlalchemy import and_

from ..models import Event, EventType, Severity
from .base import BaseRepository


class EventRepository(BaseRepository[Event]):
    """Repository for activity-log events."""

    model = Event

    async def get_filtered(
        self,
        type: Optional[EventType] = None,
        severity: Optional[Severity] = None,
        building_id: Optional[int] = None,
        floor_id: Optional[int] = None,
        limit: int = 100,
    ) -> List[Event]:
        """Get events with filters, newest first."""
        conditions = []
        if type is not None:
            conditions.append(Event.type == type)
        if severity is not None:
            conditions.append(Event.severity == severity)
        if building_id is not None:
            conditions.append(Event.building_id == building_id)
        if floor_id is not None:
            conditions.append(Event.floor_id == floor_id)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(Event.timestamp.desc(), Event.id.desc()).limit(limit)
        return await self._scalars(query)
