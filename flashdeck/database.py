"""Database configuration, connection pool and session management."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.config import Settings
from flashdeck.exceptions import PoolError, StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def build_engine(settings: Settings) -> Engine:
    """Create an engine whose pool honours the configured bounds and timeouts."""
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # A single shared connection keeps the in-memory database alive
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )

    connect_args: dict[str, Any] = {}
    if url.get_backend_name() == "postgresql":
        connect_args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"

    return create_engine(
        url,
        connect_args=connect_args,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def initialize_database(settings: Settings) -> Engine:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = build_engine(settings)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    logger.info(
        "Database pool ready (backend=%s, pool_size=%s, max_overflow=%s, timeout=%ss)",
        _engine.url.get_backend_name(),
        settings.DB_POOL_SIZE,
        settings.DB_MAX_OVERFLOW,
        settings.DB_POOL_TIMEOUT,
    )
    return _engine


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Get database session.

    The session borrows a pooled connection on its first statement and hands
    it back when closed, whichever way the request ends.
    """
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_errors(db: Session) -> Iterator[None]:
    """Translate SQLAlchemy failures into PoolError / StorageError."""
    try:
        yield
    except PoolTimeoutError as e:
        raise PoolError(f"No database connection available: {e}") from e
    except DBAPIError as e:
        db.rollback()
        if e.connection_invalidated:
            raise PoolError(f"Database connection lost: {e.orig}") from e
        raise StorageError(f"Database error: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Database error: {e}") from e


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
