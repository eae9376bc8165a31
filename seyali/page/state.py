"""
Status Page display state.

The page shows three independent regions:

- the connection indicator, driven by ``GET /health``
- the greeting message, driven by ``GET /api/hello``
- the status section, driven by ``GET /api/status``

``load_page_state`` issues the three calls concurrently. Each outcome writes
exactly one region; a failed call is logged and leaves its region in the
degraded form (``Disconnected``, blank message, omitted status section).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .client import StatusServiceClient
from .errors import StateTransitionError, StatusServiceError
from .models import GreetingView, HealthView, StatusView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pending:
    """No answer from the health check yet."""

    label: str = "checking..."


@dataclass(frozen=True)
class Connected:
    health: HealthView
    label: str = "✅ Connected"


@dataclass(frozen=True)
class Disconnected:
    reason: str
    label: str = "❌ Disconnected"


ConnectionState = Union[Pending, Connected, Disconnected]


@dataclass
class PageState:
    connection: ConnectionState = field(default_factory=Pending)
    message: str = ""
    status: Optional[StatusView] = None
    _resolved: set[str] = field(default_factory=set, init=False, repr=False)

    def _claim(self, region: str) -> None:
        if region in self._resolved:
            raise StateTransitionError(f"Page region '{region}' was already resolved")
        self._resolved.add(region)

    def is_resolved(self, region: str) -> bool:
        return region in self._resolved

    def resolve_health(self, outcome: Union[HealthView, StatusServiceError]) -> None:
        self._claim("connection")
        if isinstance(outcome, StatusServiceError):
            logger.error(f"API Error: {outcome}", extra={"status_code": outcome.status_code})
            self.connection = Disconnected(reason=str(outcome))
        else:
            logger.info(f"API Health: {outcome.model_dump(exclude_none=True)}")
            self.connection = Connected(health=outcome)

    def resolve_greeting(self, outcome: Union[GreetingView, StatusServiceError]) -> None:
        self._claim("message")
        if isinstance(outcome, StatusServiceError):
            logger.error(f"API Error: {outcome}", extra={"status_code": outcome.status_code})
            return
        self.message = outcome.message

    def resolve_status(self, outcome: Union[StatusView, StatusServiceError]) -> None:
        self._claim("status")
        if isinstance(outcome, StatusServiceError):
            logger.error(f"Status Error: {outcome}", extra={"status_code": outcome.status_code})
            return
        self.status = outcome


async def _settle(call):
    try:
        return await call
    except StatusServiceError as e:
        return e


async def load_page_state(client: StatusServiceClient) -> PageState:
    """
    Run the three Status Service calls concurrently and build the page state.

    Only ``StatusServiceError`` is treated as a degraded outcome; anything
    else is a bug and propagates.
    """
    state = PageState()

    async def health() -> None:
        state.resolve_health(await _settle(client.get_health()))

    async def greeting() -> None:
        state.resolve_greeting(await _settle(client.get_greeting()))

    async def status() -> None:
        state.resolve_status(await _settle(client.get_status()))

    await asyncio.gather(health(), greeting(), status())
    return state
