"""API test fixtures."""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from luredb.api.dependencies import get_services
from luredb.api.main import app
from luredb.application.services import CatalogServices, set_catalog_services


def _install(services: CatalogServices) -> None:
    set_catalog_services(services)
    app.dependency_overrides[get_services] = lambda: services


def _uninstall() -> None:
    app.dependency_overrides.clear()
    set_catalog_services(None)


@pytest.fixture
def client(catalog_services: CatalogServices) -> Generator[TestClient, None, None]:
    """Sync test client over the sample catalog."""
    _install(catalog_services)
    with TestClient(app) as c:
        yield c
    _uninstall()


@pytest_asyncio.fixture
async def async_client(catalog_services: CatalogServices) -> AsyncGenerator[AsyncClient, None]:
    """Async test client over the sample catalog."""
    _install(catalog_services)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    _uninstall()
