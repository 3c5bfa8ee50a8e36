"""Alert repository."""

from typing import Optional, List
from datetime import datetime

from sqlalchemy import select, func, and_

from ..models import Alert, AlertStatus, AlertSeverity, AlertType
from .base import BaseRepository


class AlertRepository(BaseRepository[Alert]):
    """Repository for security alerts."""

    model = Alert

    async def get_filtered(
        self,
        status: Optional[AlertStatus] = None,
        severity: Optional[AlertSeverity] = None,
        type: Optional[AlertType] = None,
        limit: int = 50,
    ) -> List[Alert]:
        """Get alerts with filters, newest first."""
        conditions = []
        if status is not None:
            conditions.append(Alert.status == status)
        if severity is not None:
            conditions.append(Alert.severity == severity)
        if type is not None:
            conditions.append(Alert.type == type)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(Alert.created_at.desc(), Alert.id.desc()).limit(limit)
        return await self._scalars(query)

    async def update_status(
        self,
        alert: Alert,
        status: AlertStatus,
        resolution_notes: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Alert:
        """
        Move an alert to a new status.

        Resolving (or marking a false alarm) stamps resolved_at and keeps the
        notes; acknowledging stamps acknowledged_at.
        """
        now = datetime.utcnow()
        alert.status = status
        alert.updated_at = now

        if status in (AlertStatus.RESOLVED, AlertStatus.FALSE_ALARM):
            alert.resolved_at = now
            if resolution_notes:
                alert.resolution_notes = resolution_notes
            if user_id is not None:
                alert.resolved_by = user_id
        if status == AlertStatus.ACKNOWLEDGED:
            alert.acknowledged_at = now
            if user_id is not None:
                alert.acknowledged_by = user_id

        return await self.update(alert)

    async def count_by_status(self) -> dict:
        """Get alert counts keyed by status value."""
        query = select(Alert.status, func.count().label("count")).group_by(Alert.status)
        result = await self.session.execute(query)
        return {
            (row.status.value if row.status else None): row.count
            for row in result.all()
        }

    async def count_active_by_severity(self) -> dict:
        """Get active alert counts keyed by severity value."""
        query = (
            select(Alert.severity, func.count().label("count"))
            .where(Alert.status == AlertStatus.ACTIVE)
            .group_by(Alert.severity)
        )
        result = await self.session.execute(query)
        return {
            (row.severity.value if row.severity else None): row.count
            for row in result.all()
        }
