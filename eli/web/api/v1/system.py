"""System API endpoints: health and owner notifications."""

from fastapi import APIRouter, HTTPException, Query, status

from ....shared.notification import notify_owner, NotificationError
from ....shared.schemas.system import (
    SystemHealthResponse,
    NotifyOwnerRequest,
    NotifyOwnerResponse,
)
from ...auth.dependencies import AdminUser
from ...config import config

router = APIRouter()


@router.get("/health", response_model=SystemHealthResponse)
async def system_health(
    timestamp: float = Query(..., description="Client clock, epoch ms"),
):
    """Typed health probe. The timestamp only has to be non-negative."""
    if timestamp < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="timestamp cannot be negative",
        )
    return SystemHealthResponse(ok=True)


@router.post("/notify-owner", response_model=NotifyOwnerResponse)
async def system_notify_owner(
    request: NotifyOwnerRequest,
    user: AdminUser,
):
    """
    Send a notification to the project owner (admin only).

    Returns success=false when the notification service rejects the
    message or cannot be reached.
    """
    try:
        delivered = await notify_owner(
            request.title,
            request.content,
            api_url=config.NOTIFY_API_URL,
            api_key=config.NOTIFY_API_KEY,
        )
    except NotificationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return NotifyOwnerResponse(success=delivered)
