"""Audit log repository."""

from typing import Optional, List

from sqlalchemy import and_

from ..models import AuditLog
from .base import BaseRepository


class AuditRepository(BaseRepository[AuditLog]):
    """Repository for the audit trail of state changes."""

    model = AuditLog

    async def record(
        self,
        action: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[int] = None,
        user_id: Optional[int] = None,
        details: Optional[dict] = None,
        ip_address: Optional[str] = None,
    ) -> AuditLog:
        """Append an audit row."""
        log = AuditLog(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            details=details,
            ip_address=ip_address,
        )
        self.session.add(log)
        await self.session.flush()
        return log

    async def get_filtered(
        self,
        action: Optional[str] = None,
        entity_type: Optional[str] = None,
        limit: int = 100,
    ) -> List[AuditLog]:
        """Get audit rows with filters, newest first."""
        conditions = []
        if action is not None:
            conditions.append(AuditLog.action == action)
        if entity_type is not None:
            conditions.append(AuditLog.entity_type == entity_type)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(limit)
        return await self._scalars(query)
