"""Pytest configuration and fixtures for the produce API."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from supermarket.services.produce_store import (
    SEED_PRODUCE,
    ProduceStore,
    get_produce_store,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def store():
    """Provide a freshly seeded store and route the app to it."""
    from supermarket.main import app

    fresh = ProduceStore(SEED_PRODUCE)
    app.dependency_overrides[get_produce_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_produce_store, None)


@pytest_asyncio.fixture()
async def client(store):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from supermarket.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
