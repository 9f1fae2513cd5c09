"""
Items API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, created fresh for each test):
    ├── test_settings: Settings with the database probe disabled
    ├── item_store:    Empty ItemStore
    ├── test_app:      FastAPI app wired to test_settings and item_store
    ├── test_client:   HTTPX AsyncClient talking to test_app in-process
    └── manifest_path: Temporary JSON manifest for version-bump tests
"""

import json
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["MYSQL_HOST"] = ""

from items_api.config import Settings  # noqa: E402
from items_api.main import create_app  # noqa: E402
from items_api.store import ItemStore  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings with the database probe disabled and no demo seed."""
    return Settings(mysql_host="", seed_demo_item=False, log_level="WARNING")


@pytest.fixture
def item_store():
    return ItemStore()


@pytest.fixture
def test_app(test_settings, item_store):
    return create_app(settings=test_settings, store=item_store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly into the ASGI app (no server, no lifespan).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def manifest_path(tmp_path):
    """A package.json-style manifest at version 1.2.3."""
    path = tmp_path / "package.json"
    path.write_text(
        json.dumps({"name": "demo", "version": "1.2.3", "private": True}, indent=2) + "\n",
        encoding="utf-8",
    )
    return path
