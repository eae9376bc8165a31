"""
Greeting and Status Endpoints.

Exposes:
- GET /api/hello : static greeting and API version
- GET /api/status: which backing services have a connection string configured
"""

from fastapi import APIRouter

from seyali.server.schemas import ERROR_RESPONSES, Greeting, StatusSnapshot
from seyali.server.services.deps import SettingsDep
from seyali.server.services.status import build_greeting, build_status_snapshot

router = APIRouter(responses=ERROR_RESPONSES)


@router.get(
    "/hello",
    response_model=Greeting,
    summary="Get Greeting",
    response_description="Greeting message and API version.",
)
async def hello():
    return build_greeting()


@router.get(
    "/status",
    response_model=StatusSnapshot,
    summary="Get Backend Status",
    description="Report whether the database and cache connection strings are set. No connection is attempted.",
    response_description="Status snapshot.",
)
async def status(settings: SettingsDep):
    """
    Get backend status.

    The snapshot is rebuilt from the settings on every call.
    """
    return build_status_snapshot(settings)
