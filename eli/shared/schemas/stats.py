"""Dashboard statistics schemas."""

from pydantic import BaseModel


class DashboardOverviewResponse(BaseModel):
    """Headline counts for the dashboard."""
    total_cameras: int = 0
    cameras_online: int = 0
    active_alerts: int = 0
    critical_alerts: int = 0
    open_incidents: int = 0  # open + in_progress
    tracked_entities: int = 0  # seen in the last 5 minutes
    recent_events: int = 0  # last hour
