"""
Unified Database Management Layer.

Provides a singleton DatabaseManager for:
- Connection pooling (PostgreSQL, file SQLite) / StaticPool (in-memory SQLite)
- Session management with context managers
- Auto-commit/rollback behavior

Usage:
    from core.db import db, get_db, Base

    db.initialize()
    with db.session() as session:
        user = session.query(User).first()
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import Engine, create_engine, event, make_url, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


def _is_memory_sqlite(url: str) -> bool:
    database = make_url(url).database
    return not database or database == ":memory:" or "mode=memory" in url


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Build an engine for the given URL.

    SQLite connections get foreign keys enabled and explicit BEGIN handling
    so that SAVEPOINTs (used to recover from unique-constraint races) work.
    """
    settings = get_settings()
    is_sqlite = url.startswith("sqlite")

    pool_config: dict = {}
    if is_sqlite:
        connect_args = {"check_same_thread": False}
        # An in-memory database lives only as long as its one connection.
        # File databases keep the default pool: one connection per session.
        if _is_memory_sqlite(url):
            pool_config = {"poolclass": StaticPool}
    else:
        connect_args = {}
        pool_config = {
            "poolclass": QueuePool,
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_pre_ping": settings.db_pool_pre_ping,
        }

    engine = create_engine(
        url,
        connect_args=connect_args,
        echo=echo,
        **pool_config,
    )

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            # Let SQLAlchemy own transaction boundaries instead of pysqlite
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine, "begin")
        def do_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


class DatabaseManager:
    """
    Singleton database manager with connection pooling and health checks.

    Features:
    - Connection pooling (QueuePool, StaticPool for in-memory SQLite only)
    - Context manager for automatic commit/rollback
    - Thread-safe session factory
    - Health check support
    """

    _instance: Optional["DatabaseManager"] = None
    _initialized: bool = False

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        pass  # Prevent re-initialization

    def initialize(self, database_url: str | None = None) -> None:
        """
        Initialize database connection. Call once at app startup.

        Args:
            database_url: Optional override. Uses settings.database_url if not provided.
        """
        if self._initialized:
            return

        settings = get_settings()
        url = database_url or settings.database_url

        self.engine = create_db_engine(url, echo=settings.debug)
        self.SessionLocal = create_session_factory(self.engine)

        self._initialized = True

    def create_all_tables(self) -> None:
        """Create all tables defined by models."""
        self._ensure_initialized()
        import core.models  # noqa: F401  # register mappers

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions with auto-commit/rollback.

        Usage:
            with db.session() as session:
                user = session.query(User).first()
        """
        self._ensure_initialized()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @property
    def is_initialized(self) -> bool:
        """Check if database manager is initialized."""
        return self._initialized

    def health_check(self) -> dict:
        """
        Perform database health check.

        Returns:
            dict with 'healthy' (bool), 'latency_ms' (float), and 'error' (str or None)
        """
        import time

        if not self._initialized:
            return {"healthy": False, "latency_ms": 0, "error": "Database not initialized"}

        start = time.perf_counter()
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": True, "latency_ms": round(latency, 2), "error": None}
        except Exception as e:
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": False, "latency_ms": round(latency, 2), "error": str(e)}

    def reset(self) -> None:
        """Reset database manager. Disposes engine and clears singleton state."""
        if hasattr(self, "engine") and self.engine:
            self.engine.dispose()
        self._initialized = False

    def _ensure_initialized(self) -> None:
        """Raise error if not initialized."""
        if not self._initialized:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")


# Global singleton
db = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @app.get("/users")
        def get_users(db: Session = Depends(get_db)):
            return db.query(User).all()
    """
    with db.session() as session:
        yield session


__all__ = ["Base", "DatabaseManager", "create_db_engine", "create_session_factory", "db", "get_db"]
