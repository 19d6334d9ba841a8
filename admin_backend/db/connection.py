"""Database connection management for the admin backend.

Provides the shared engine, session factory and FastAPI session
dependency. Supports SQLite for development with PostgreSQL for
deployments; the URL comes from DATABASE_URL.

Usage:
    from admin_backend.db.connection import get_db, init_db

    init_db()  # Create tables
    db = next(get_db())
    # ... use db session
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from admin_backend.config import load_settings
from admin_backend.db.models import Base


def get_database_url() -> str:
    """Get database URL from environment or use default SQLite."""
    return load_settings().database_url


# Engine creation
DATABASE_URL = get_database_url()

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False}
    if DATABASE_URL.startswith("sqlite")
    else {},
    echo=load_settings().sql_echo,
    pool_pre_ping=not DATABASE_URL.startswith("sqlite"),
)


@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    """Enable foreign keys for SQLite so message rows cascade with chats."""
    if DATABASE_URL.startswith("sqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session scoped to one request.

    Intended for use with FastAPI's Depends().

    Yields:
        Session: SQLAlchemy session that will be closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            user = db.query(User).first()
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db() -> None:
    """Create all database tables.

    Safe to call multiple times - existing tables are left untouched.
    """
    Base.metadata.create_all(bind=engine)


def close_db() -> None:
    """Dispose of the engine's connection pool."""
    engine.dispose()
