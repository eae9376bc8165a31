from typing import Callable, Optional

import httpx
import pytest
from page_fakes import API_URL, HEALTH_OK, HELLO_OK, STATUS_OK, Responder, ok, route_transport, unreachable

from seyali.page.client import StatusServiceClient


@pytest.fixture
def make_service_client() -> Callable[..., StatusServiceClient]:
    """Build a client whose transport answers each endpoint with the given responder."""

    def _make(
        health: Optional[Responder] = None,
        hello: Optional[Responder] = None,
        status: Optional[Responder] = None,
    ) -> StatusServiceClient:
        routes = {
            "/health": health or ok(HEALTH_OK),
            "/api/hello": hello or ok(HELLO_OK),
            "/api/status": status or ok(STATUS_OK),
        }
        http = httpx.AsyncClient(transport=route_transport(routes))
        return StatusServiceClient(API_URL, client=http)

    return _make


@pytest.fixture
def failing_client(make_service_client) -> StatusServiceClient:
    return make_service_client(health=unreachable, hello=unreachable, status=unreachable)


@pytest.fixture
def healthy_client(make_service_client) -> StatusServiceClient:
    return make_service_client()
