"""
Items API — Health, Docs and Application Factory Tests
=======================================================

What we test:
    ✅ GET /health returns the fixed payload
    ✅ Swagger UI, ReDoc and OpenAPI schema are served
    ✅ Default app seeds the demo item; seeding can be turned off
"""

import pytest
from httpx import ASGITransport, AsyncClient

from items_api.config import Settings
from items_api.main import create_app


@pytest.mark.asyncio
async def test_health_ok(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_docs_served(test_client):
    response = await test_client.get("/docs")
    assert response.status_code == 200
    assert "swagger-ui" in response.text.lower()


@pytest.mark.asyncio
async def test_redoc_served(test_client):
    response = await test_client.get("/redoc")
    assert response.status_code == 200
    assert "redoc" in response.text.lower()


@pytest.mark.asyncio
async def test_openapi_lists_item_routes(test_client):
    response = await test_client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/health" in paths
    assert set(paths["/api/items"]) == {"get", "post"}
    assert set(paths["/api/items/{item_id}"]) == {"get", "put", "delete"}


class TestCreateApp:

    @pytest.mark.asyncio
    async def test_default_store_has_demo_item(self):
        app = create_app(settings=Settings(mysql_host="", seed_demo_item=True))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/items")
        assert response.json() == [{"id": 1, "name": "item-1"}]

    def test_seed_disabled(self):
        app = create_app(settings=Settings(mysql_host="", seed_demo_item=False))
        assert app.state.item_store.list() == []

    def test_settings_attached(self, test_settings):
        app = create_app(settings=test_settings)
        assert app.state.settings is test_settings


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(log_level="loud")

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_probe_timeout_has_no_upper_bound(self):
        assert Settings(db_probe_timeout=300).db_probe_timeout == 300

    def test_probe_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(db_probe_timeout=0)

    def test_probe_enabled_only_with_host(self):
        assert Settings(mysql_host="").database_probe_enabled is False
        assert Settings(mysql_host="db").database_probe_enabled is True
