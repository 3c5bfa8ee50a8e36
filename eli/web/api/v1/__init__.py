"""API v1 module."""

from fastapi import APIRouter

from .system import router as system_router
from .auth import router as auth_router
from .buildings import buildings_router, floors_router, zones_router
from .cameras import router as cameras_router
from .devices import router as devices_router
from .entities import router as entities_router
from .locations import router as locations_router
from .alerts import router as alerts_router
from .incidents import router as incidents_router
from .events import router as events_router
from .dashboard import router as dashboard_router
from .config import router as config_router
from .audit import router as audit_router
from .scenarios import router as scenarios_router
from .sse import router as sse_router

# Create main API router
router = APIRouter(prefix="/api/v1")

# Include sub-routers
router.include_router(system_router, prefix="/system", tags=["system"])
router.include_router(auth_router, prefix="/auth", tags=["auth"])
router.include_router(buildings_router, prefix="/buildings", tags=["campus"])
router.include_router(floors_router, prefix="/floors", tags=["campus"])
router.include_router(zones_router, prefix="/zones", tags=["campus"])
router.include_router(cameras_router, prefix="/cameras", tags=["cameras"])
router.include_router(devices_router, tags=["devices"])
router.include_router(entities_router, prefix="/entities", tags=["entities"])
router.include_router(locations_router, prefix="/locations", tags=["locations"])
router.include_router(alerts_router, prefix="/alerts", tags=["alerts"])
router.include_router(incidents_router, prefix="/incidents", tags=["incidents"])
router.include_router(events_router, prefix="/events", tags=["events"])
router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
router.include_router(config_router, prefix="/config", tags=["config"])
router.include_router(audit_router, prefix="/audit", tags=["audit"])
router.include_router(scenarios_router, prefix="/scenarios", tags=["scenarios"])
router.include_router(sse_router, tags=["sse"])
