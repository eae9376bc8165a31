from __future__ import annotations

from typing import Iterable

import httpx
import pytest

# Environment variables read by the settings models. Cleared for every test so
# values exported on the host never leak into assertions.
SEYALI_ENV_VARS = (
    "HOST",
    "PORT",
    "NODE_ENV",
    "SEYALI_LOG_LEVEL",
    "FRONTEND_URL",
    "DATABASE_URL",
    "REDIS_URL",
    "CORS_ORIGIN",
    "CORS_ALLOW_CREDENTIALS",
    "RATE_LIMIT_ENABLED",
    "RATE_LIMIT_MAX",
    "RATE_LIMIT_WINDOW_SECONDS",
    "SEYALI_API_URL",
    "SEYALI_API_TIMEOUT",
    "PAGE_HOST",
    "PAGE_PORT",
)


@pytest.fixture(autouse=True)
def _clean_seyali_env(monkeypatch: pytest.MonkeyPatch):
    for name in SEYALI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "http://testserver",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)
