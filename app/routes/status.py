# app/routes/status.py — /countryinfo/v1/status
from fastapi import APIRouter, Request

from app.schemas.country import HealthStatus
from app.services.status_service import get_health_status

router = APIRouter(tags=["status"])


@router.get("/countryinfo/v1/status", response_model=HealthStatus, summary="Service diagnostics")
def status(request: Request) -> HealthStatus:
    # Health of both upstreams, the API version and uptime in seconds.
    return get_health_status(request.app.state.clock)
