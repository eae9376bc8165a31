"""
Rate Limiting Middleware.

Applies a fixed-window request limit per client address to the ``/api/``
routes. Counters live in process memory; a multi-instance deployment gets one
budget per instance.
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from seyali.core.logging_config import get_logger
from seyali.server.core import constant

logger = get_logger(__name__)


@dataclass
class RateLimitDecision:
    """Outcome of counting one request against a client's window."""

    allowed: bool
    limit: int
    remaining: int
    reset_after: float


@dataclass
class _Window:
    started_at: float
    count: int = 0


class FixedWindowRateLimiter:
    """
    Count requests per key inside fixed windows of ``window_seconds``.

    A window starts with the first request of a key and lasts
    ``window_seconds``; the next request after it expires opens a new one.
    """

    def __init__(self, max_requests: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        window = self._windows.get(key)
        if window is None or now - window.started_at >= self.window_seconds:
            self._evict_expired(now)
            window = _Window(started_at=now)
            self._windows[key] = window

        window.count += 1
        reset_after = max(0.0, window.started_at + self.window_seconds - now)
        return RateLimitDecision(
            allowed=window.count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - window.count),
            reset_after=reset_after,
        )

    def reset(self) -> None:
        self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, w in self._windows.items() if now - w.started_at >= self.window_seconds]
        for key in expired:
            del self._windows[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware rejecting clients that exceed their request budget with 429."""

    def __init__(
        self,
        app: ASGIApp,
        max_requests: int = 100,
        window_seconds: float = 15 * 60,
        path_prefix: str = f"{constant.API_PREFIX}/",
        limiter: Optional[FixedWindowRateLimiter] = None,
    ) -> None:
        super().__init__(app)
        self.path_prefix = path_prefix
        self.limiter = limiter or FixedWindowRateLimiter(max_requests, window_seconds)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        decision = self.limiter.hit(client)
        headers = {
            "RateLimit-Limit": str(decision.limit),
            "RateLimit-Remaining": str(decision.remaining),
            "RateLimit-Reset": str(math.ceil(decision.reset_after)),
        }

        if not decision.allowed:
            logger.warning(
                f"Rate limit exceeded for {client}: {request.method} {request.url.path}",
                extra={"client": client, "path": request.url.path, "limit": decision.limit},
            )
            headers["Retry-After"] = str(math.ceil(decision.reset_after))
            return JSONResponse(status_code=429, content={"error": constant.RATE_LIMITED_MESSAGE}, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
