"""
Mock Location API — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (settings variants, services, API clients).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── default_settings: Settings with the stock defaults
    ├── seeded_settings: Settings with a fixed FAKER_SEED
    ├── service / seeded_service: LocationService instances
    ├── test_client: HTTPX AsyncClient bound to the module-level app
    └── client_for: factory building an AsyncClient for any Settings
"""

import os
from contextlib import asynccontextmanager

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("FAKER_SEED", None)
os.environ.pop("TIMESTAMP_TIMEZONE", None)
os.environ.pop("TOTAL_ITEMS", None)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from mock_locations.config import Settings
from mock_locations.main import create_app
from mock_locations.services.location_service import LocationService

TEST_SEED = 20250820


@pytest.fixture
def default_settings():
    """Settings with the stock defaults (100 records, page size 10)."""
    return Settings()


@pytest.fixture
def seeded_settings():
    """Settings that make every generation run identical."""
    return Settings(faker_seed=TEST_SEED)


@pytest.fixture
def service(default_settings):
    return LocationService(default_settings)


@pytest.fixture
def seeded_service(seeded_settings):
    return LocationService(seeded_settings)


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from mock_locations.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def client_for():
    """
    Factory for clients bound to a freshly built app.

    Usage:
        async with client_for(Settings(environment="production")) as client:
            ...

    Pass `raise_app_exceptions=False` to inspect the 500 response produced
    by the catch-all handler instead of getting the exception re-raised.
    """

    @asynccontextmanager
    async def _client_for(config=None, app=None, raise_app_exceptions=True):
        app = app or create_app(config)
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return _client_for
