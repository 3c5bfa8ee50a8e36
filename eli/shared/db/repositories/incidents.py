"""Incident repository."""

from typing import Optional, List
from datetime import datetime

from sqlalchemy import select, func, and_

from ..models import Incident, IncidentStatus, IncidentPriority
from .base import BaseRepository


def timeline_entry(action: str, user_id: Optional[int] = None, at: Optional[datetime] = None) -> dict:
    """Build a JSON-serializable incident timeline entry."""
    return {
        "timestamp": (at or datetime.utcnow()).isoformat(),
        "action": action,
        "user_id": user_id,
    }


class IncidentRepository(BaseRepository[Incident]):
    """Repository for incidents."""

    model = Incident

    async def get_filtered(
        self,
        status: Optional[IncidentStatus] = None,
        priority: Optional[IncidentPriority] = None,
        limit: int = 50,
    ) -> List[Incident]:
        """Get incidents with filters, newest first."""
        conditions = []
        if status is not None:
            conditions.append(Incident.status == status)
        if priority is not None:
            conditions.append(Incident.priority == priority)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(Incident.created_at.desc(), Incident.id.desc()).limit(limit)
        return await self._scalars(query)

    async def update_status(
        self,
        incident: Incident,
        status: IncidentStatus,
        user_id: Optional[int] = None,
    ) -> Incident:
        """Move an incident to a new status and log it on the timeline."""
        now = datetime.utcnow()
        incident.status = status
        incident.updated_at = now
        if status == IncidentStatus.RESOLVED:
            incident.resolved_at = now
        if status == IncidentStatus.CLOSED:
            incident.closed_at = now

        # Reassign so the JSON column is marked dirty
        incident.timeline = list(incident.timeline or []) + [
            timeline_entry(f"status:{status.value}", user_id, now)
        ]

        return await self.update(incident)

    async def count_by_status(self) -> dict:
        """Get incident counts keyed by status value."""
        query = select(Incident.status, func.count().label("count")).group_by(Incident.status)
        result = await self.session.execute(query)
        return {
            (row.status.value if row.status else None): row.count
            for row in result.all()
        }
