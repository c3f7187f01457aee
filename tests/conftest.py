"""Pytest configuration and fixtures."""

import pytest

from catalog_viewer.services import ProductApiClient, ProductStore, RecordingRequestObserver
from tests.fakes import BASE_URL, SAMPLE_PRODUCTS, FakeCatalogServer


@pytest.fixture
def server():
    """Empty fake catalog server."""
    return FakeCatalogServer()


@pytest.fixture
def seeded_server(server):
    """Fake catalog server holding the sample products."""
    server.seed(*SAMPLE_PRODUCTS)
    return server


@pytest.fixture
def observer():
    return RecordingRequestObserver()


@pytest.fixture
def client(server, observer):
    """API client wired to the fake server."""
    return ProductApiClient(base_url=BASE_URL, session=server, observer=observer)


@pytest.fixture
def store(client):
    """Product store over the fake server."""
    return ProductStore(client)
