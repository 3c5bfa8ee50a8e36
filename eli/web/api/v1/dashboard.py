"""Dashboard API endpoints."""

from fastapi import APIRouter

from ....shared.db.repositories.stats import StatsRepository
from ....shared.schemas.stats import DashboardOverviewResponse
from ...deps import DbSession

router = APIRouter()


@router.get("/overview", response_model=DashboardOverviewResponse)
async def dashboard_overview(db: DbSession):
    """
    Headline counts for the dashboard.

    open_incidents includes in-progress ones, tracked_entities covers the
    last 5 minutes and recent_events the last hour.
    """
    if db is None:
        return DashboardOverviewResponse()
    overview = await StatsRepository(db).get_overview()
    return DashboardOverviewResponse(**overview)
