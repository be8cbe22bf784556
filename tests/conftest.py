import pytest
from fastapi.testclient import TestClient

from app.achievements.service import AchievementService
from app.auth.service import AuthService
from app.main import app
from app.store import SqliteStore


@pytest.fixture(scope="function")
def store(tmp_path):
    """Fresh SQLite file database per test, schema created and catalog seeded."""
    store = SqliteStore(f"sqlite:///{tmp_path / 'test.db'}")
    store.init_db()
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def achievement_service(store):
    return AchievementService(store)


@pytest.fixture
def auth_service(store, achievement_service):
    return AuthService(store, achievement_service, session_max_age_hours=24)


@pytest.fixture(scope="function")
def client(store):
    """Create a test client bound to the per-test store."""
    app.state.store = store
    with TestClient(app) as test_client:
        yield test_client
    del app.state.store


@pytest.fixture
def test_user_data():
    """Sample user registration data."""
    return {
        "username": "alice",
        "password": "secret123",
        "email": "alice@example.com",
    }


@pytest.fixture
def registered_user(client, test_user_data):
    """Register a user through the API; the client keeps its session cookie."""
    response = client.post("/api/register", json=test_user_data)
    assert response.status_code == 201
    return response.json()
