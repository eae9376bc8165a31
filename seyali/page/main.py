"""
Status Page Application.

Serves the home page. Every request to ``/`` queries the Status Service
(health, greeting, status) concurrently and renders whatever subset answered.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from seyali.core.logging_config import get_logger, setup_logging
from seyali.core.monitoring import initialize_logfire

from .client import StatusServiceClient
from .config import PageSettings
from .render import render_home
from .state import load_page_state

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared Status Service client for the lifetime of the app."""
    settings: PageSettings = app.state.settings
    setup_logging(log_level=settings.log_level)
    if getattr(app.state, "client", None) is None:
        app.state.client = StatusServiceClient(settings.base_url, timeout=settings.api_timeout)
    logger.info(f"Status Page using API at {settings.base_url}")

    yield

    await app.state.client.aclose()


def create_app(settings: Optional[PageSettings] = None, client: Optional[StatusServiceClient] = None) -> FastAPI:
    """
    Build the Status Page application.

    Args:
        settings: Page configuration. Read from the environment when omitted.
        client: Status Service client to use instead of one built from settings.
    """
    settings = settings or PageSettings()

    app = FastAPI(title="Seyali", docs_url=None, redoc_url=None, openapi_url=None, lifespan=lifespan)
    app.state.settings = settings
    app.state.client = client

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        state = await load_page_state(request.app.state.client)
        return HTMLResponse(render_home(state, settings.base_url))

    initialize_logfire(app, service_name="seyali-page")
    return app


# ASGI entrypoint (uvicorn: `uvicorn seyali.page.main:app`)
app = create_app()
