"""API tests for health, info, status and demo seeding."""

from fastapi.testclient import TestClient

from tests.shared.fixtures.settings import build_settings
from tests.shared.fixtures import in_memory_store
from vecino.infrastructure.persistence.store import DataStore
from vecino.presentation.api.dependencies import get_provider_service


class TestHealthAndInfo:
    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}

    def test_root_reports_database_mode(self, test_client: TestClient, mock_client: TestClient):
        assert test_client.get("/").json()["database"] == "MongoDB"
        assert mock_client.get("/").json()["database"] == "development mode (mock data)"

    def test_unknown_route_uses_error_envelope(self, test_client: TestClient):
        response = test_client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["code"] == "ENTITY_NOT_FOUND"

    def test_docs_hidden_without_debug(self, test_client: TestClient):
        assert test_client.get("/docs").status_code == 404

    def test_unhandled_error_is_generic(self, make_client, settings, data_store):
        client = make_client(settings, data_store, raise_server_exceptions=False)

        class Broken:
            async def list_providers(self):
                raise RuntimeError("boom: secret detail")

        client.app.dependency_overrides[get_provider_service] = Broken

        response = client.get("/api/providers")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }


class TestStatus:
    def test_store_without_connection(self, test_client: TestClient, api_v1_prefix: str):
        body = test_client.get(f"{api_v1_prefix}/status").json()

        assert body["success"] is True
        assert body["database"]["type"] == "MongoDB"
        assert body["database"]["connected"] is False

    def test_mock_store(self, mock_client: TestClient, api_v1_prefix: str):
        body = mock_client.get(f"{api_v1_prefix}/status").json()

        assert body["database"] == {
            "connected": False,
            "state": "disconnected",
            "type": "simulated",
        }


class TestSeed:
    def test_disabled_by_default(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(f"{api_v1_prefix}/seed")

        assert response.status_code == 403
        assert response.json()["error"] == "Demo seeding is disabled"

    def test_seed_then_login(self, make_client, api_v1_prefix: str):
        client = make_client(build_settings(demo_seed_enabled=True), in_memory_store())

        response = client.post(f"{api_v1_prefix}/seed")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "demo@lataona.com"
        assert body["provider"]["name"] == "Servicio Demo"

        login = client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "demo@lataona.com", "password": "demo123"},
        )
        assert login.status_code == 200

    def test_seed_without_database(self, make_client, api_v1_prefix: str):
        client = make_client(build_settings(demo_seed_enabled=True), DataStore.unavailable())

        response = client.post(f"{api_v1_prefix}/seed")

        assert response.status_code == 503
