from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from seyali.server.core.config import Settings
from seyali.server.main import create_app


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build settings from explicit values only, ignoring any .env file."""

    def _make(**env) -> Settings:
        return Settings(_env_file=None, **env)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


def _asgi_client(app: FastAPI) -> AsyncClient:
    # Server faults come back as 500 responses instead of raising.
    return AsyncClient(transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost")


@pytest.fixture
def make_client() -> Callable[[FastAPI], AsyncClient]:
    return _asgi_client


@pytest_asyncio.fixture(name="client")
async def client_fixture(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with _asgi_client(app) as client:
        yield client
