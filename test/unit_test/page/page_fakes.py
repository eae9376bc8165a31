"""Canned Status Service answers for the page tests."""

from typing import Callable

import httpx

API_URL = "http://mock-api"

HEALTH_OK = {"status": "ok", "timestamp": "2024-01-01T00:00:00.000Z", "uptime": 1.5, "environment": "test"}
HELLO_OK = {"message": "Welcome to Seyali API!"}
STATUS_OK = {"backend": "running", "database": "configured", "redis": "not configured"}

Responder = Callable[[httpx.Request], httpx.Response]


def route_transport(routes: dict[str, Responder]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "Not found"})
        return route(request)

    return httpx.MockTransport(handler)


def ok(payload) -> Responder:
    return lambda request: httpx.Response(200, json=payload)


def unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def timed_out(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


def server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"error": "Something went wrong!"})


def not_json(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>proxy error</html>", headers={"Content-Type": "text/html"})
