"""Audit log API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query

from ....shared.db.repositories.audit import AuditRepository
from ....shared.schemas.system import AuditLogResponse
from ...auth.dependencies import AdminUser
from ...deps import DbSession

router = APIRouter()


@router.get("", response_model=List[AuditLogResponse])
async def list_audit_logs(
    user: AdminUser,
    db: DbSession,
    action: Optional[str] = None,
    entity_type: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
):
    """List audit rows, newest first (admin only)."""
    if db is None:
        return []
    logs = await AuditRepository(db).get_filtered(
        action=action,
        entity_type=entity_type,
        limit=limit,
    )
    return [AuditLogResponse.model_validate(log) for log in logs]
