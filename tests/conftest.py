import pytest
from unittest.mock import AsyncMock


@pytest.fixture
def anyio_backend():
    """The code under test is asyncio-only; run anyio-marked tests on asyncio."""
    return "asyncio"


@pytest.fixture
def mock_http_client(monkeypatch):
    """Mock shared httpx client; every SearchService in the test talks to it."""
    client = AsyncMock()
    client.post = AsyncMock()
    monkeypatch.setattr("utils.http_client.HTTPClientManager.get_search_client", lambda: client)
    return client


@pytest.fixture
def store():
    """Empty SessionStore."""
    from services.session_store import SessionStore
    return SessionStore()


@pytest.fixture
def fake_search_service():
    """Empty FakeSearchService; tests queue payloads on `.items`."""
    from tests.fixtures.mock_clients import FakeSearchService
    return FakeSearchService()


@pytest.fixture
def dispatcher(store, fake_search_service):
    """QueryDispatcher wired to the fake search service, stale replies kept."""
    from services.dispatcher import QueryDispatcher
    return QueryDispatcher(store, fake_search_service, discard_stale=False)


@pytest.fixture
def configured_app(monkeypatch, mock_http_client):
    """Pre-configured app with a fresh session registry and a mocked search backend."""
    from fastapi.testclient import TestClient
    import services.chat_controller
    from main import app

    monkeypatch.setattr(services.chat_controller, "_session_registry", None)

    with TestClient(app) as client:
        yield client
