"""Pytest fixtures for the fleet admin API tests.

Every test gets its own RecordStore and application instance, so state
never leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.init_db import init_db
from app.db.store import RecordStore
from app.main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"

VALID_CAR = {
    "make": "Toyota",
    "model": "Camry",
    "year": 2024,
    "licensePlate": "ABC-123",
    "owner": "John Smith",
    "status": "active",
}


@pytest.fixture
def app_settings() -> Settings:
    """Settings with seeding disabled; stores are built by the fixtures."""
    return Settings(SEED_DEMO_DATA=False, SESSION_TTL_MINUTES=None)


@pytest.fixture
def store() -> RecordStore:
    """An empty record store."""
    return RecordStore()


@pytest.fixture
def seeded_store(store: RecordStore) -> RecordStore:
    """A record store loaded with the demo data."""
    init_db(store)
    return store


@pytest.fixture
def client(app_settings: Settings, seeded_store: RecordStore) -> TestClient:
    """Client for an app backed by the seeded store."""
    return TestClient(create_app(app_settings, store=seeded_store))


@pytest.fixture
def empty_client(app_settings: Settings, store: RecordStore) -> TestClient:
    """Client for an app backed by an empty store."""
    return TestClient(create_app(app_settings, store=store))


@pytest.fixture
def admin_token(client: TestClient) -> str:
    response = client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token: str) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def admin_user(seeded_store: RecordStore):
    return seeded_store.get_user_by_email(ADMIN_EMAIL)
