from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import StatusServiceError, StatusServiceUnavailableError
from .models import GreetingView, HealthView, StatusView

ModelT = TypeVar("ModelT", bound=BaseModel)


class StatusServiceClient:
    """
    Thin async HTTP client for the Seyali Status Service.

    Responsibilities:
    - get_health   -> GET /health
    - get_greeting -> GET /api/hello
    - get_status   -> GET /api/status

    Every failure (no answer, non-2xx answer, unreadable body) surfaces as a
    ``StatusServiceError``. The client never retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    async def get_health(self) -> HealthView:
        return await self._get("/health", HealthView)

    async def get_greeting(self) -> GreetingView:
        return await self._get("/api/hello", GreetingView)

    async def get_status(self) -> StatusView:
        return await self._get("/api/status", StatusView)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "StatusServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _url(self, path: str) -> httpx.URL:
        """Build the request URL, rejecting base URLs no request could be sent to."""
        raw = f"{self.base_url}{path}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise StatusServiceUnavailableError(f"GET {path} failed: {e}", details=raw) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise StatusServiceUnavailableError(f"GET {path} failed: invalid URL {raw!r}", details=raw)
        if url.port is not None and not 0 < url.port <= 65535:
            raise StatusServiceUnavailableError(f"GET {path} failed: port {url.port} out of range", details=raw)
        return url

    async def _get(self, path: str, model: Type[ModelT]) -> ModelT:
        url = self._url(path)
        try:
            self._logger.debug("StatusServiceClient: GET %s", url)
            r = await self._client.get(url, headers={"Accept": "application/json"})
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise StatusServiceError(
                f"GET {path} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
            raise StatusServiceUnavailableError(f"GET {path} failed: {e}", details=str(e)) from e

        try:
            data = r.json()
        except ValueError as e:
            raise StatusServiceError(
                f"GET {path} returned a non-JSON body", status_code=r.status_code, details=r.text
            ) from e
        if not isinstance(data, dict):
            raise StatusServiceError(
                f"Unexpected response shape from GET {path}", status_code=r.status_code, details=data
            )
        try:
            parsed = model.model_validate(data)
        except ValidationError as e:
            raise StatusServiceError(
                f"GET {path} returned an invalid payload", status_code=r.status_code, details=data
            ) from e
        self._logger.debug("StatusServiceClient: GET %s -> %d", url, r.status_code)
        return parsed
