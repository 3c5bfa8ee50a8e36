"""Incident API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from ....shared.db.models import Incident, IncidentStatus, IncidentPriority
from ....shared.db.repositories.incidents import IncidentRepository, timeline_entry
from ....shared.schemas.auth import SuccessResponse
from ....shared.schemas.incident import (
    IncidentCreate,
    IncidentStatusUpdate,
    IncidentResponse,
    IncidentStatsResponse,
)
from ...auth.dependencies import OptionalUser
from ...deps import DbSession, require_db, not_found, audit
from ...live import publish_live

router = APIRouter()


@router.get("", response_model=List[IncidentResponse])
async def list_incidents(
    db: DbSession,
    status: Optional[IncidentStatus] = None,
    priority: Optional[IncidentPriority] = None,
    limit: int = Query(50, ge=1, le=500),
):
    """List incidents, newest first."""
    if db is None:
        return []
    incidents = await IncidentRepository(db).get_filtered(
        status=status,
        priority=priority,
        limit=limit,
    )
    return [IncidentResponse.model_validate(i) for i in incidents]


@router.get("/stats", response_model=IncidentStatsResponse)
async def incident_stats(db: DbSession):
    if db is None:
        return IncidentStatsResponse()

    by_status = await IncidentRepository(db).count_by_status()
    return IncidentStatsResponse(
        total=sum(by_status.values()),
        open=by_status.get(IncidentStatus.OPEN.value, 0),
        in_progress=by_status.get(IncidentStatus.IN_PROGRESS.value, 0),
        resolved=by_status.get(IncidentStatus.RESOLVED.value, 0),
        closed=by_status.get(IncidentStatus.CLOSED.value, 0),
    )


@router.get("/{incident_id}", response_model=Optional[IncidentResponse])
async def get_incident(incident_id: int, db: DbSession):
    if db is None:
        return None
    incident = await IncidentRepository(db).get_by_id(incident_id)
    return IncidentResponse.model_validate(incident) if incident else None


@router.post("", response_model=IncidentResponse, status_code=status.HTTP_201_CREATED)
async def create_incident(
    body: IncidentCreate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Open an incident. The timeline starts with a created entry."""
    db = require_db(db)
    user_id = user.id if user else None
    incident = await IncidentRepository(db).create(Incident(
        title=body.title,
        description=body.description,
        priority=body.priority,
        status=IncidentStatus.OPEN,
        building_id=body.building_id,
        floor_id=body.floor_id,
        commander_id=user_id,
        linked_alert_ids=body.linked_alert_ids,
        timeline=[timeline_entry("created", user_id)],
    ))
    await audit(
        db, request, user, "incident.create", "incident", incident.id,
        {"priority": body.priority.value},
    )
    await db.commit()

    response = IncidentResponse.model_validate(incident)
    await publish_live("incident_update", response.model_dump(mode="json"))
    return response


@router.patch("/{incident_id}/status", response_model=SuccessResponse)
async def update_incident_status(
    incident_id: int,
    body: IncidentStatusUpdate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Move an incident through its workflow and log it on the timeline."""
    db = require_db(db)
    repo = IncidentRepository(db)
    incident = await repo.get_by_id(incident_id)
    if not incident:
        raise not_found("Incident")

    await repo.update_status(incident, body.status, user_id=user.id if user else None)
    await audit(
        db, request, user, "incident.update_status", "incident", incident_id,
        {"status": body.status.value},
    )
    await db.commit()
    await publish_live("incident_update", {
        "incident_id": incident_id,
        "status": body.status.value,
    })
    return SuccessResponse(success=True)
