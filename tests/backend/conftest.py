"""
Fixtures for HTTP-level tests.

The app runs against the per-test SQLite database and a temporary blob
store through FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from backend.app.auth.dependencies import get_current_principal
from backend.app.dependencies import get_blob_store
from backend.app.main import create_app
from core.db import get_db
from core.models import User


@pytest.fixture
def test_app_client(test_db, blob_store):
    """TestClient wired to the test database and blob store."""
    _, TestingSessionLocal, _ = test_db

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    with TestClient(app, raise_server_exceptions=False) as client:
        client.session_factory = TestingSessionLocal
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def seeded_user(test_db):
    """A committed user row visible to request sessions."""
    _, TestingSessionLocal, _ = test_db
    with TestingSessionLocal() as session:
        user = User(email="api@example.com", full_name="Api User", phone_number="555-0111")
        session.add(user)
        session.commit()
        return user


@pytest.fixture
def authorized_client(test_app_client, seeded_user):
    """Client whose requests run as seeded_user, bypassing token checks."""
    test_app_client.app.dependency_overrides[get_current_principal] = lambda: seeded_user.id
    return test_app_client
