"""Tests for the database manager and engine setup."""

import threading

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from core.db import Base, DatabaseManager, create_db_engine, create_session_factory, db
from core.models import User, UserProfile


@pytest.fixture
def fresh_db():
    """Singleton database manager on an in-memory database, reset afterwards."""
    db.reset()
    db.initialize("sqlite://")
    db.create_all_tables()
    yield db
    db.reset()


def test_singleton():
    assert DatabaseManager() is db


def test_health_check(fresh_db):
    health = fresh_db.health_check()

    assert health["healthy"] is True
    assert health["error"] is None


def test_health_check_uninitialized():
    db.reset()

    assert db.health_check()["healthy"] is False
    with pytest.raises(RuntimeError):
        with db.session():
            pass


def test_session_commits(fresh_db):
    with fresh_db.session() as session:
        session.add(User(email="commit@example.com"))

    with fresh_db.session() as session:
        assert session.query(User).filter_by(email="commit@example.com").count() == 1


def test_session_rolls_back_on_error(fresh_db):
    with pytest.raises(ValueError):
        with fresh_db.session() as session:
            session.add(User(email="rollback@example.com"))
            session.flush()
            raise ValueError("boom")

    with fresh_db.session() as session:
        assert session.query(User).count() == 0


def test_foreign_keys_enforced(test_session):
    assert test_session.execute(text("PRAGMA foreign_keys")).scalar() == 1

    test_session.add(UserProfile(user_id=999))
    with pytest.raises(IntegrityError):
        test_session.flush()
    test_session.rollback()


def test_savepoint_rollback_keeps_outer_work(test_session):
    test_session.add(User(email="outer@example.com"))
    test_session.flush()

    with pytest.raises(IntegrityError):
        with test_session.begin_nested():
            test_session.add(User(email="outer@example.com"))
            test_session.flush()

    assert test_session.query(User).count() == 1


@pytest.fixture
def file_session_factory(tmp_path):
    """Session factory on a file-backed SQLite database."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'job_profiles.db'}")
    Base.metadata.create_all(bind=engine)
    yield create_session_factory(engine)
    engine.dispose()


def test_file_sqlite_sessions_hold_transactions_concurrently(file_session_factory):
    barrier = threading.Barrier(2, timeout=10)
    errors = []

    def worker():
        session = file_session_factory()
        try:
            session.query(User).count()
            # Both threads now have a transaction open at the same time
            barrier.wait()
            session.commit()
        except Exception as exc:
            errors.append(exc)
            barrier.abort()
        finally:
            session.close()

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []


def test_file_sqlite_rollback_does_not_touch_other_session(file_session_factory):
    writer = file_session_factory()
    reader = file_session_factory()
    try:
        writer.add(User(email="kept@example.com"))
        writer.flush()

        assert reader.query(User).count() == 0
        reader.rollback()

        writer.commit()
    finally:
        reader.close()
        writer.close()

    with file_session_factory() as session:
        assert session.query(User).filter_by(email="kept@example.com").count() == 1


def test_file_sqlite_enforces_foreign_keys(file_session_factory):
    with file_session_factory() as session:
        session.add(UserProfile(user_id=999))
        with pytest.raises(IntegrityError):
            session.flush()
