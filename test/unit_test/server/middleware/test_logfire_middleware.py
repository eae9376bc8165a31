"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Performance metrics collection
- Error handling and exception tracking
- Slow request detection
- Header injection
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from seyali.server.middleware.logfire_middleware import LogfireMiddleware

MODULE = "seyali.server.middleware.logfire_middleware"


@pytest.fixture
def mock_request():
    request = AsyncMock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/status"
    request.url.query = ""
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self, mock_request):
        mock_response = Response(content="test", status_code=200)

        async def mock_call_next(request):
            return mock_response

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(mock_request, mock_call_next)

            assert response.status_code == 200
            mock_log.assert_called_once()
            call_args = mock_log.call_args
            assert call_args[1]["method"] == "GET"
            assert call_args[1]["path"] == "/api/status"
            assert call_args[1]["status_code"] == 200
            assert call_args[1]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_middleware_adds_process_time_header(self, mock_request):
        async def mock_call_next(request):
            return Response(content="test", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"):
            response = await middleware.dispatch(mock_request, mock_call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_middleware_detects_slow_requests(self, mock_request):
        async def mock_call_next(request):
            return Response(content="test", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"), patch(f"{MODULE}.logger") as mock_logger, patch(
            f"{MODULE}.time.perf_counter"
        ) as mock_time:
            # Simulate 1.5 second duration
            mock_time.side_effect = [0, 1.5]

            await middleware.dispatch(mock_request, mock_call_next)

            mock_logger.warning.assert_called_once()
            assert "Slow API request" in mock_logger.warning.call_args[0][0]

    @pytest.mark.asyncio
    async def test_fast_request_is_not_flagged(self, mock_request):
        async def mock_call_next(request):
            return Response(content="test", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"), patch(f"{MODULE}.logger") as mock_logger, patch(
            f"{MODULE}.time.perf_counter"
        ) as mock_time:
            mock_time.side_effect = [0, 0.01]

            await middleware.dispatch(mock_request, mock_call_next)

            mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_middleware_handles_request_exception(self, mock_request):
        async def mock_call_next(request):
            raise ValueError("Test error")

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log, patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(ValueError, match="Test error"):
                await middleware.dispatch(mock_request, mock_call_next)

            mock_logger.error.assert_called_once()
            assert mock_log.call_args[1]["status_code"] == 500


class TestLogfireMiddlewareIntegration:
    @pytest.mark.asyncio
    async def test_process_time_header_on_real_app(self, client):
        response = await client.get("/health")

        assert "X-Process-Time" in response.headers
