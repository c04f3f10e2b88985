"""
Database engine and session management.
"""
from typing import Iterator

from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.config import settings
from app.core.logging_config import log_info


def _build_engine(database_url: str):
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(database_url, **kwargs)

        @event.listens_for(sqlite_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return sqlite_engine
    return create_engine(database_url, pool_pre_ping=True)


engine = _build_engine(settings.database_url)


def create_db_and_tables() -> None:
    """Create tables that do not exist yet (development and tests)."""
    # Import models so every table is registered on the metadata.
    from app.models import BaseModel  # noqa: F401

    BaseModel.metadata.create_all(engine)
    log_info("Database tables ensured", database_url=settings.database_url.split("://")[0])


def get_session() -> Iterator[Session]:
    """FastAPI dependency yielding a request-scoped session."""
    with Session(engine) as session:
        yield session
