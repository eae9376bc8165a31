"""
Health Check Endpoint.

This module provides the liveness endpoint used for monitoring and
deployment verification.
"""

from fastapi import APIRouter

from seyali.server.schemas import ERROR_RESPONSES, HealthReport
from seyali.server.services.deps import SettingsDep, StartedAtDep
from seyali.server.services.status import build_health_report

router = APIRouter(responses=ERROR_RESPONSES)


@router.get(
    "/health",
    response_model=HealthReport,
    summary="Health Check",
    description="Check the operational status of the Status Service.",
    response_description="Status object with timestamp, uptime and environment.",
)
@router.head("/health", include_in_schema=False)
async def health_check(settings: SettingsDep, started_at: StartedAtDep):
    """
    Health check endpoint.

    Confirms the server is running and reachable, and reports how long the
    process has been up and which environment it runs in.
    """
    return build_health_report(settings, started_at=started_at)
