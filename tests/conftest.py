"""
Pytest fixtures for Job Profile Service tests.

Uses an in-memory SQLite database per test, built with the same engine
factory the application uses (foreign keys and SAVEPOINTs enabled).
"""

import os
import tempfile

# Must be set before core.config is imported anywhere
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_ROOT", tempfile.mkdtemp(prefix="job-profiles-uploads-"))
os.environ.setdefault("JWT_SECRET_KEY", "unit-tests-only-jwt-key-0123456789abcdef")

import pytest  # noqa: E402

from core import models  # noqa: F401,E402  # register mappers
from core.db import Base, create_db_engine, create_session_factory  # noqa: E402
from core.models import User  # noqa: E402
from core.storage import BlobStore  # noqa: E402


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    db_url = "sqlite://"
    engine = create_db_engine(db_url)

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = create_session_factory(engine)

    yield db_url, TestingSessionLocal, engine

    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    _, TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def blob_store(tmp_path):
    """Blob store rooted in a per-test temporary directory."""
    store = BlobStore(tmp_path / "uploads")
    store.initialize()
    return store


@pytest.fixture
def sample_user(test_session):
    """A user with no profile yet."""
    user = User(email="seeker@example.com", full_name="Jane Seeker", phone_number="555-0100")
    test_session.add(user)
    test_session.flush()
    return user


@pytest.fixture
def sample_update_payload():
    """Sample profile setup payload, as a front-end would send it."""
    return {
        "full_name": "Jane Q. Seeker",
        "phone_number": "555-0199",
        "target_role": "Backend Engineer",
        "experience_years": 4,
        "bio": "Builds APIs.",
        "remote_only": True,
        "preferred_location": "Berlin",
        "min_salary": 70000,
        "github_profile": "https://github.com/jseeker",
        "linkedin_profile": "https://linkedin.com/in/jseeker",
        "skills": ["Python", "PostgreSQL", " Docker "],
    }
