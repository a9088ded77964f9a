"""Tests for application wiring and error mapping."""

from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings
from modules.storage.memory import MemoryStore
from tests.conftest import make_headers


class ExplodingStore(MemoryStore):
    """Store raising an error outside the store error taxonomy."""

    async def get_doc(self, username, document_id):
        raise ValueError("unexpected row shape")


class TestErrorMapping:
    def test_unexpected_error_is_internal(self, settings):
        """Unhandled exceptions become the generic internal error."""
        store = ExplodingStore()
        store._users["bob"] = "p@ss"
        app = create_app(settings=settings, store=store)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/syncs/progress/doc1", headers=make_headers("bob", "p@ss"))
        assert response.status_code == 502
        assert response.json() == {"code": 2000, "message": "Unknown server error."}
        assert "row shape" not in response.text

    def test_storage_unavailable(self):
        """A store that cannot be built answers every request with code 1000."""
        settings = Settings(_env_file=None, store_backend="nosuchdb")
        with TestClient(create_app(settings=settings)) as client:
            response = client.get("/users/auth", headers=make_headers("bob", "p@ss"))
        assert response.status_code == 502
        assert response.json() == {"code": 1000, "message": "Cannot connect to storage backend."}


class TestAppConfiguration:
    def test_docs_hidden_by_default(self, client):
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404

    def test_docs_in_debug(self):
        settings = Settings(_env_file=None, debug=True)
        with TestClient(create_app(settings=settings, store=MemoryStore())) as client:
            assert client.get("/openapi.json").status_code == 200

    def test_store_is_shared(self, app, store):
        """Every service works on the one store handed to the app."""
        container = app.state.container
        assert container.store is store
        assert container.auth_gate is container.auth_gate
        assert container.progress is container.progress

    def test_container_reset_keeps_store(self, app, store):
        container = app.state.container
        gate = container.auth_gate
        container.reset()
        assert container.auth_gate is not gate
        assert container.store is store

    def test_cors(self):
        settings = Settings(_env_file=None, cors_origins=["https://reader.example"])
        with TestClient(create_app(settings=settings, store=MemoryStore())) as client:
            response = client.options(
                "/users/create",
                headers={
                    "origin": "https://reader.example",
                    "access-control-request-method": "POST",
                },
            )
        assert response.headers["access-control-allow-origin"] == "https://reader.example"
