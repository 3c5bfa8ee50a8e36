"""Tracked entity and location event repositories."""

from typing import Optional, List
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import select, func, and_

from ..models import (
    TrackedEntity,
    EntityRole,
    EntityType,
    LocationEvent,
    LocationSource,
)
from .base import BaseRepository

# Entities seen within this window count as currently present
PRESENCE_WINDOW = timedelta(minutes=5)


class EntityRepository(BaseRepository[TrackedEntity]):
    """Repository for tracked entities."""

    model = TrackedEntity

    async def get_filtered(
        self,
        floor_id: Optional[int] = None,
        role: Optional[EntityRole] = None,
        is_watchlist: Optional[bool] = None,
        type: Optional[EntityType] = None,
        min_risk_score: Optional[int] = None,
    ) -> List[TrackedEntity]:
        """Get entities with filters, most recently seen first."""
        conditions = []
        if floor_id is not None:
            conditions.append(TrackedEntity.last_floor_id == floor_id)
        if role is not None:
            conditions.append(TrackedEntity.role == role)
        if is_watchlist is not None:
            conditions.append(TrackedEntity.is_watchlist == is_watchlist)
        if type is not None:
            conditions.append(TrackedEntity.type == type)
        if min_risk_score is not None:
            conditions.append(TrackedEntity.risk_score >= min_risk_score)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(TrackedEntity.last_seen_at.desc().nulls_last())
        return await self._scalars(query)

    async def get_present_on_floor(
        self,
        floor_id: int,
        now: Optional[datetime] = None,
    ) -> List[TrackedEntity]:
        """Get entities whose last fix is on the floor and recent."""
        since = (now or datetime.utcnow()) - PRESENCE_WINDOW
        query = (
            self._base_query()
            .where(TrackedEntity.last_floor_id == floor_id)
            .where(TrackedEntity.last_seen_at >= since)
        )
        return await self._scalars(query)

    async def count_by_role(self) -> dict:
        """Get entity counts keyed by role value."""
        query = (
            select(TrackedEntity.role, func.count().label("count"))
            .group_by(TrackedEntity.role)
        )
        result = await self.session.execute(query)
        return {
            (row.role.value if row.role else None): row.count
            for row in result.all()
        }

    async def count_watchlist(self) -> int:
        """Get count of watchlisted entities."""
        return await self.count(TrackedEntity.is_watchlist == True)


class LocationRepository(BaseRepository[LocationEvent]):
    """Repository for location fixes."""

    model = LocationEvent

    async def get_history(
        self,
        entity_id: int,
        minutes: int = 30,
        now: Optional[datetime] = None,
    ) -> List[LocationEvent]:
        """Get an entity's fixes from the last N minutes, oldest first."""
        since = (now or datetime.utcnow()) - timedelta(minutes=minutes)
        query = (
            self._base_query()
            .where(LocationEvent.entity_id == entity_id)
            .where(LocationEvent.timestamp >= since)
            .order_by(LocationEvent.timestamp)
        )
        return await self._scalars(query)

    async def record(
        self,
        entity: TrackedEntity,
        floor_id: int,
        source_type: LocationSource,
        x: Decimal,
        y: Decimal,
        confidence: Optional[Decimal] = None,
    ) -> LocationEvent:
        """Insert a fix and move the entity's last known position to it."""
        now = datetime.utcnow()
        event = LocationEvent(
            entity_id=entity.id,
            floor_id=floor_id,
            source_type=source_type,
            x=x,
            y=y,
            confidence=confidence if confidence is not None else Decimal("0.8"),
            timestamp=now,
        )
        self.session.add(event)

        entity.last_floor_id = floor_id
        entity.last_x = x
        entity.last_y = y
        entity.last_seen_at = now
        entity.updated_at = now

        await self.session.flush()
        return event
