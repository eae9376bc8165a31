"""
Seyali Status Page.

A server-rendered page that polls the Status Service and shows the connection
indicator, the greeting and the backend status, degrading each region
independently when its call fails.
"""

from .client import StatusServiceClient
from .errors import StateTransitionError, StatusServiceError, StatusServiceUnavailableError
from .state import Connected, ConnectionState, Disconnected, PageState, Pending, load_page_state

__all__ = [
    "Connected",
    "ConnectionState",
    "Disconnected",
    "PageState",
    "Pending",
    "StateTransitionError",
    "StatusServiceClient",
    "StatusServiceError",
    "StatusServiceUnavailableError",
    "load_page_state",
]
