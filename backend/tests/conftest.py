"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory store, an application wired to it and helpers for the
credential headers.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings, get_settings
from shared.exceptions import StoreError
from modules.progress.models import ProgressRecord
from modules.storage.memory import MemoryStore


TEST_USERNAME = "bob"
TEST_PASSWORD = "p@ss"


def make_headers(username: str, key: str) -> dict[str, str]:
    """Build the credential headers of the sync protocol."""
    return {"x-auth-user": username, "x-auth-key": key}


def make_record(
    document: str = "doc1",
    percentage: float = 42.0,
    progress: str = "p123",
    device: str = "Kobo",
    device_id: str = "abc",
) -> ProgressRecord:
    """Create a progress record with protocol field names."""
    return ProgressRecord(
        document=document,
        percentage=percentage,
        progress=progress,
        device=device,
        device_id=device_id,
    )


class FailingStore(MemoryStore):
    """
    Memory store whose selected operations raise StoreError.

    Usage:
        store = FailingStore(fail_on={"get_doc"})
    """

    def __init__(self, fail_on: Optional[set[str]] = None):
        super().__init__()
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StoreError(operation, reason="connection refused at 10.0.0.5:5432")

    async def get_user(self, username):
        self._maybe_fail("get_user")
        return await super().get_user(username)

    async def put_user(self, username, secret):
        self._maybe_fail("put_user")
        await super().put_user(username, secret)

    async def get_doc(self, username, document_id):
        self._maybe_fail("get_doc")
        return await super().get_doc(username, document_id)

    async def put_doc(self, username, document_id, record):
        self._maybe_fail("put_doc")
        await super().put_doc(username, document_id, record)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the developer's environment and .env file."""
    return Settings(_env_file=None, store_backend="memory")


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory store."""
    return MemoryStore()


@pytest.fixture
def app(settings, store):
    """Application wired to the in-memory store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Test client; runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client) -> tuple[str, str]:
    """Register the default test user and return its credentials."""
    response = client.post(
        "/users/create",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201
    return TEST_USERNAME, TEST_PASSWORD


@pytest.fixture
def auth_headers(registered_user) -> dict[str, str]:
    """Credential headers of the registered test user."""
    return make_headers(*registered_user)
