"""Alert API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from ....shared.db.models import Alert, AlertType, AlertSeverity, AlertStatus
from ....shared.db.repositories.alerts import AlertRepository
from ....shared.schemas.alert import (
    AlertCreate,
    AlertStatusUpdate,
    AlertResponse,
    AlertStatsResponse,
)
from ....shared.schemas.auth import SuccessResponse
from ...auth.dependencies import OptionalUser
from ...deps import DbSession, require_db, not_found, audit
from ...live import publish_live

router = APIRouter()


@router.get("", response_model=List[AlertResponse])
async def list_alerts(
    db: DbSession,
    status: Optional[AlertStatus] = None,
    severity: Optional[AlertSeverity] = None,
    type: Optional[AlertType] = None,
    limit: int = Query(50, ge=1, le=500),
):
    """List alerts, newest first."""
    if db is None:
        return []
    alerts = await AlertRepository(db).get_filtered(
        status=status,
        severity=severity,
        type=type,
        limit=limit,
    )
    return [AlertResponse.model_validate(a) for a in alerts]


@router.get("/stats", response_model=AlertStatsResponse)
async def alert_stats(db: DbSession):
    """Alert totals plus severity counts of the active ones."""
    if db is None:
        return AlertStatsResponse()

    repo = AlertRepository(db)
    by_status = await repo.count_by_status()
    by_severity = await repo.count_active_by_severity()
    return AlertStatsResponse(
        total=sum(by_status.values()),
        active=by_status.get(AlertStatus.ACTIVE.value, 0),
        critical=by_severity.get(AlertSeverity.CRITICAL.value, 0),
        high=by_severity.get(AlertSeverity.HIGH.value, 0),
        medium=by_severity.get(AlertSeverity.MEDIUM.value, 0),
        low=by_severity.get(AlertSeverity.LOW.value, 0),
    )


@router.get("/{alert_id}", response_model=Optional[AlertResponse])
async def get_alert(alert_id: int, db: DbSession):
    if db is None:
        return None
    alert = await AlertRepository(db).get_by_id(alert_id)
    return AlertResponse.model_validate(alert) if alert else None


@router.post("", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert(
    body: AlertCreate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Raise a new alert."""
    db = require_db(db)
    alert = await AlertRepository(db).create(Alert(
        type=body.type,
        severity=body.severity,
        status=AlertStatus.ACTIVE,
        title=body.title,
        description=body.description,
        building_id=body.building_id,
        floor_id=body.floor_id,
        x=body.x,
        y=body.y,
        ai_confidence=body.ai_confidence,
    ))
    await audit(
        db, request, user, "alert.create", "alert", alert.id,
        {"type": body.type.value, "severity": body.severity.value},
    )
    # Subscribers read the row back on receipt
    await db.commit()

    response = AlertResponse.model_validate(alert)
    await publish_live("alert_new", response.model_dump(mode="json"))
    return response


@router.patch("/{alert_id}/status", response_model=SuccessResponse)
async def update_alert_status(
    alert_id: int,
    body: AlertStatusUpdate,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """
    Move an alert through its workflow.

    Acknowledging and resolving record who did it when there is a session.
    """
    db = require_db(db)
    repo = AlertRepository(db)
    alert = await repo.get_by_id(alert_id)
    if not alert:
        raise not_found("Alert")

    await repo.update_status(
        alert,
        body.status,
        resolution_notes=body.resolution_notes,
        user_id=user.id if user else None,
    )
    await audit(
        db, request, user, "alert.update_status", "alert", alert_id,
        {"status": body.status.value},
    )
    await db.commit()
    await publish_live("alert_update", {
        "alert_id": alert_id,
        "status": body.status.value,
    })
    return SuccessResponse(success=True)
