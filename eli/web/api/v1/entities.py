"""Tracked entity API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query

from ....shared.db.models import EntityRole, EntityType
from ....shared.db.repositories.entities import EntityRepository, LocationRepository
from ....shared.schemas.entity import (
    EntityResponse,
    EntityStatsResponse,
    LocationEventResponse,
)
from ...deps import DbSession

router = APIRouter()


@router.get("", response_model=List[EntityResponse])
async def list_entities(
    db: DbSession,
    floor_id: Optional[int] = None,
    role: Optional[EntityRole] = None,
    is_watchlist: Optional[bool] = None,
    type: Optional[EntityType] = None,
    min_risk_score: Optional[int] = Query(None, ge=0, le=100),
):
    """List tracked entities, most recently seen first."""
    if db is None:
        return []
    entities = await EntityRepository(db).get_filtered(
        floor_id=floor_id,
        role=role,
        is_watchlist=is_watchlist,
        type=type,
        min_risk_score=min_risk_score,
    )
    return [EntityResponse.model_validate(e) for e in entities]


@router.get("/stats", response_model=EntityStatsResponse)
async def entity_stats(db: DbSession):
    """
    Entity counts by role.

    Contractors and entities without a role are reported as unknown so the
    role counts always add up to the total.
    """
    if db is None:
        return EntityStatsResponse()

    repo = EntityRepository(db)
    by_role = await repo.count_by_role()
    total = sum(by_role.values())
    staff = by_role.get(EntityRole.STAFF.value, 0)
    students = by_role.get(EntityRole.STUDENT.value, 0)
    visitors = by_role.get(EntityRole.VISITOR.value, 0)

    return EntityStatsResponse(
        total=total,
        staff=staff,
        students=students,
        visitors=visitors,
        unknown=total - staff - students - visitors,
        watchlist=await repo.count_watchlist(),
    )


@router.get("/{entity_id}", response_model=Optional[EntityResponse])
async def get_entity(entity_id: int, db: DbSession):
    if db is None:
        return None
    entity = await EntityRepository(db).get_by_id(entity_id)
    return EntityResponse.model_validate(entity) if entity else None


@router.get("/{entity_id}/location-history", response_model=List[LocationEventResponse])
async def get_location_history(
    entity_id: int,
    db: DbSession,
    minutes: int = Query(30, ge=1, le=24 * 60),
):
    """Location fixes for an entity from the last N minutes, oldest first."""
    if db is None:
        return []
    events = await LocationRepository(db).get_history(entity_id, minutes=minutes)
    return [LocationEventResponse.model_validate(e) for e in events]
