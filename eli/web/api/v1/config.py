"""Platform settings API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Request

from ....shared.db.repositories.config import ConfigRepository
from ....shared.schemas.system import ConfigSetRequest, ConfigResponse
from ...auth.dependencies import CurrentUser
from ...deps import DbSession, require_db, audit

router = APIRouter()


@router.get("", response_model=List[ConfigResponse])
async def list_config(db: DbSession):
    """List settings ordered by key."""
    if db is None:
        return []
    entries = await ConfigRepository(db).list_by_key()
    return [ConfigResponse.model_validate(e) for e in entries]


@router.get("/{key}", response_model=Optional[ConfigResponse])
async def get_config(key: str, db: DbSession):
    if db is None:
        return None
    entry = await ConfigRepository(db).get_by_key(key)
    return ConfigResponse.model_validate(entry) if entry else None


@router.put("", response_model=ConfigResponse)
async def set_config(
    body: ConfigSetRequest,
    request: Request,
    user: CurrentUser,
    db: DbSession,
):
    """Create or replace a setting (signed-in users only)."""
    db = require_db(db)
    entry = await ConfigRepository(db).upsert(body.key, body.value, body.description)
    await audit(db, request, user, "config.set", "config", entry.id, {"key": body.key})
    return ConfigResponse.model_validate(entry)
