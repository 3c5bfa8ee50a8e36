"""Activity event API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query

from ....shared.db.models import EventType, Severity
from ....shared.db.repositories.events import EventRepository
from ....shared.schemas.event import EventResponse
from ...deps import DbSession

router = APIRouter()


@router.get("", response_model=List[EventResponse])
async def list_events(
    db: DbSession,
    type: Optional[EventType] = None,
    severity: Optional[Severity] = None,
    building_id: Optional[int] = None,
    floor_id: Optional[int] = None,
    limit: int = Query(100, ge=1, le=1000),
):
    """List activity events, newest first."""
    if db is None:
        return []
    events = await EventRepository(db).get_filtered(
        type=type,
        severity=severity,
        building_id=building_id,
        floor_id=floor_id,
        limit=limit,
    )
    return [EventResponse.model_validate(e) for e in events]
