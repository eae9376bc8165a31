"""
Middleware modules for the Seyali Status Service.

This package contains custom middleware for request logging, rate limiting
and security headers.
"""

from .logfire_middleware import LogfireMiddleware
from .rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from .security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "FixedWindowRateLimiter",
    "LogfireMiddleware",
    "RateLimitMiddleware",
    "SECURITY_HEADERS",
    "SecurityHeadersMiddleware",
]
