"""Error types raised by the Status Page's service client.

Purpose:
- Give every failed call to the Status Service one exception family so the
  page can catch it at the call site and degrade a single display region.
- Keep HTTP-oriented context (status code, response body) for the log.
"""

from __future__ import annotations

from typing import Any, Optional


class StatusServiceError(Exception):
    """Base error for failed Status Service calls.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code when the service answered.
        details: Response body or underlying error text.
    """
    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class StatusServiceUnavailableError(StatusServiceError):
    """Raised when the request never got an HTTP answer (connection refused, DNS, timeout)."""


class StateTransitionError(RuntimeError):
    """Raised when a display region of the page is assigned a second time."""
