"""
Status Reporting Service.

Builds the payloads served by the Status Service. Every function is pure with
respect to its inputs: the settings object, the process start instant and the
current clock. No state is kept between calls.
"""

import time
from datetime import datetime, timezone
from typing import Optional

from seyali.server.core import constant
from seyali.server.core.config import Settings
from seyali.server.schemas import ConfigurationState, Greeting, HealthReport, StatusSnapshot

PROCESS_STARTED_AT = time.monotonic()


def format_timestamp(moment: datetime) -> str:
    """Render a UTC instant as ``2024-01-01T00:00:00.000Z``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime_seconds(started_at: float = PROCESS_STARTED_AT, now: Optional[float] = None) -> float:
    """Seconds elapsed on the monotonic clock since ``started_at``, never negative."""
    current = time.monotonic() if now is None else now
    return max(0.0, current - started_at)


def build_health_report(
    settings: Settings,
    started_at: float = PROCESS_STARTED_AT,
    now: Optional[datetime] = None,
) -> HealthReport:
    return HealthReport(
        status="ok",
        timestamp=format_timestamp(now or datetime.now(timezone.utc)),
        uptime=uptime_seconds(started_at),
        environment=settings.environment,
    )


def build_greeting() -> Greeting:
    return Greeting(message=constant.GREETING_MESSAGE, version=constant.API_VERSION)


def build_status_snapshot(settings: Settings) -> StatusSnapshot:
    """
    Summarize which backing services are configured.

    Only the presence of the connection strings is checked. An empty string
    counts as absent.
    """
    return StatusSnapshot(
        backend="running",
        database=ConfigurationState.from_setting(settings.database_url),
        redis=ConfigurationState.from_setting(settings.redis_url),
    )
