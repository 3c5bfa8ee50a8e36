"""Demo scenario API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Request

from ....shared.db.repositories.scenarios import ScenarioRepository
from ....shared.schemas.system import ScenarioResponse
from ...auth.dependencies import OptionalUser
from ...deps import DbSession, require_db, not_found, audit
from ...live import publish_live

router = APIRouter()


@router.get("", response_model=List[ScenarioResponse])
async def list_scenarios(db: DbSession):
    if db is None:
        return []
    scenarios = await ScenarioRepository(db).list_by_name()
    return [ScenarioResponse.model_validate(s) for s in scenarios]


@router.get("/{scenario_id}", response_model=Optional[ScenarioResponse])
async def get_scenario(scenario_id: int, db: DbSession):
    if db is None:
        return None
    scenario = await ScenarioRepository(db).get_by_id(scenario_id)
    return ScenarioResponse.model_validate(scenario) if scenario else None


@router.post("/{scenario_id}/activate", response_model=ScenarioResponse)
async def activate_scenario(
    scenario_id: int,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    """Activate a scenario. Any other active scenario is switched off."""
    db = require_db(db)
    scenario = await ScenarioRepository(db).activate(scenario_id)
    if not scenario:
        raise not_found("Scenario")

    await audit(db, request, user, "scenario.activate", "demo_scenario", scenario_id)
    await db.commit()
    await publish_live("system_status", {
        "active_scenario_id": scenario_id,
        "scenario": scenario.name,
    })
    return ScenarioResponse.model_validate(scenario)


@router.post("/{scenario_id}/deactivate", response_model=ScenarioResponse)
async def deactivate_scenario(
    scenario_id: int,
    request: Request,
    user: OptionalUser,
    db: DbSession,
):
    db = require_db(db)
    scenario = await ScenarioRepository(db).deactivate(scenario_id)
    if not scenario:
        raise not_found("Scenario")

    await audit(db, request, user, "scenario.deactivate", "demo_scenario", scenario_id)
    await db.commit()
    await publish_live("system_status", {"active_scenario_id": None})
    return ScenarioResponse.model_validate(scenario)
