"""
Main Application Entry Point.

This module builds the Status Service FastAPI application: it configures the
middleware stack (CORS, security headers, rate limiting, request tracing),
registers the exception handlers and includes the API routers. The settings
object is created once and stored on ``app.state`` for the request handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seyali.core.logging_config import get_logger, setup_logging
from seyali.core.monitoring import initialize_logfire

from .api import health, status
from .core import constant
from .core.config import Settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware, RateLimitMiddleware, SecurityHeadersMiddleware
from .services.status import PROCESS_STARTED_AT

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Logs where the service listens and which environment it reports.
    """
    settings: Settings = app.state.settings
    setup_logging(log_level=settings.log_level)
    logger.info(f"Starting up {constant.PROJECT_NAME} on port {settings.port}...")
    logger.info(f"Environment: {settings.environment}")
    if settings.frontend_url:
        logger.info(f"Status Page expected at {settings.frontend_url}")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME}...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the Status Service application.

    Args:
        settings: Service configuration. Read from the environment when omitted.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or Settings()

    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        Seyali Status Service

        Reports liveness, a greeting and which backing services are configured.
        """,
        version=constant.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = PROCESS_STARTED_AT

    # Starlette runs the last added middleware first.
    rate_limit = settings.rate_limit
    if rate_limit.enabled:
        app.add_middleware(
            RateLimitMiddleware,
            max_requests=rate_limit.max_requests,
            window_seconds=rate_limit.window_seconds,
        )
    app.add_middleware(SecurityHeadersMiddleware)
    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LogfireMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(status.router, prefix=constant.API_PREFIX, tags=["status"])

    initialize_logfire(app, service_name="seyali-api")
    return app


# ASGI entrypoint (uvicorn: `uvicorn seyali.server.main:app`)
app = create_app()
