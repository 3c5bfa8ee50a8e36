"""Shared route dependencies: database session, client address, audit trail."""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..shared.db.database import get_db_session
from ..shared.db.repositories.audit import AuditRepository
from .auth.dependencies import SessionUser

DB_UNAVAILABLE_MSG = "Database not available"

# None when DATABASE_URL is not configured
DbSession = Annotated[Optional[AsyncSession], Depends(get_db_session)]


def require_db(db: Optional[AsyncSession]) -> AsyncSession:
    """
    Return the session, or fail a mutation when there is no database.

    Raises:
        HTTPException 500: If the database is not configured
    """
    if db is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=DB_UNAVAILABLE_MSG,
        )
    return db


def not_found(thing: str) -> HTTPException:
    """404 for an id-addressed mutation."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{thing} not found",
    )


def client_ip(request: Request) -> Optional[str]:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()[:45]
    return request.client.host if request.client else None


async def audit(
    db: AsyncSession,
    request: Request,
    user: Optional[SessionUser],
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    details: Optional[dict] = None,
) -> None:
    """Record a state change in the audit log."""
    await AuditRepository(db).record(
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        user_id=user.id if user else None,
        details=details,
        ip_address=client_ip(request),
    )
