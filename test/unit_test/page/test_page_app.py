import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError

from seyali.page.config import PageSettings
from seyali.page.main import create_app


async def _get_home(service_client, settings=None):
    app = create_app(settings or PageSettings(_env_file=None), client=service_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        return await client.get("/")


async def test_home_with_healthy_service(healthy_client):
    response = await _get_home(healthy_client)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "✅ Connected" in response.text
    assert "Welcome to Seyali API!" in response.text
    assert "Database: configured" in response.text
    assert "Redis: not configured" in response.text


async def test_home_with_unreachable_service(failing_client):
    response = await _get_home(failing_client)

    assert response.status_code == 200
    assert "❌ Disconnected" in response.text
    assert "Message:" not in response.text
    assert "Database:" not in response.text


async def test_home_shows_configured_api_url(healthy_client):
    settings = PageSettings(_env_file=None, SEYALI_API_URL="https://api.seyali.example/")

    response = await _get_home(healthy_client, settings)

    assert "API URL: https://api.seyali.example" in response.text


async def test_each_render_queries_the_service_again(make_service_client):
    calls = []

    def counting(request):
        calls.append(request.url.path)
        return httpx.Response(200, json={"status": "ok"})

    service_client = make_service_client(health=counting)
    app = create_app(PageSettings(_env_file=None), client=service_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        await client.get("/")
        await client.get("/")

    assert calls == ["/health", "/health"]


class TestPageSettings:
    def test_defaults(self):
        settings = PageSettings(_env_file=None)

        assert settings.base_url == "http://localhost:10000"
        assert settings.port == 3000
        assert settings.api_timeout == 10.0

    def test_env_binding(self, monkeypatch):
        monkeypatch.setenv("SEYALI_API_URL", "https://api.example/")
        monkeypatch.setenv("PAGE_PORT", "8080")

        settings = PageSettings(_env_file=None)

        assert settings.base_url == "https://api.example"
        assert settings.port == 8080

    def test_blank_api_url_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("SEYALI_API_URL", "")

        assert PageSettings(_env_file=None).base_url == "http://localhost:10000"

    @pytest.mark.parametrize("api_url", ["http://[::1", "http://localhost:99999", "localhost:10000"])
    def test_malformed_api_url_is_rejected_at_startup(self, api_url):
        with pytest.raises(ValidationError):
            PageSettings(_env_file=None, SEYALI_API_URL=api_url)
