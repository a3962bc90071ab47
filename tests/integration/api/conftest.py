"""Fixtures for API tests.

The application is built with explicit settings and an in-memory data
store, so these tests need neither a .env file nor a database.
"""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures import TestUserFactory, in_memory_store
from tests.shared.fixtures.settings import TEST_JWT_SECRET, build_settings
from vecino.infrastructure.persistence.store import DataStore
from vecino.presentation.api.app import create_app
from vecino.presentation.api.dependencies import get_password_service
from vecino_auth import JWTService, PasswordHashingService
from vecino_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    return "/api"


@pytest.fixture
def settings() -> Settings:
    return build_settings()


@pytest.fixture
def data_store() -> DataStore:
    """Store in database mode, pre-loaded with a provider account."""
    return in_memory_store(users=[TestUserFactory.provider()])


@pytest.fixture
def make_client() -> Generator[Callable[..., TestClient], None, None]:
    """Build a TestClient for any settings/store combination."""
    clients: list[TestClient] = []

    def _make(
        settings: Settings,
        data_store: DataStore,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        app = create_app(settings=settings, data_store=data_store)
        app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
            rounds=4,
        )
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def test_client(make_client, settings, data_store) -> TestClient:
    return make_client(settings, data_store)


@pytest.fixture
def mock_client(make_client, settings) -> TestClient:
    """Client whose store has no database behind it."""
    return make_client(settings, DataStore.unavailable())


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def auth_header(jwt_service) -> Callable[..., dict[str, str]]:
    def _header(user_id: str, role: str) -> dict[str, str]:
        token = jwt_service.create_token(user_id, role)
        return {"Authorization": f"Bearer {token}"}

    return _header
