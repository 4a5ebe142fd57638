"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from skillshare.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base of the users and learning plan tables."""


# Process-wide, created by initialize_database()
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def create_db_engine(database_url: str) -> Engine:
    """
    Build an engine for the given URL.

    SQLite (development and tests) shares one connection across threads and
    turns on foreign key enforcement, which the plan subtree cascades rely on.
    Server databases get a pre-pinged, recycled pool.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=1800,
        )

    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory. Calling it again replaces both."""
    global _engine, _session_factory  # noqa: PLW0603

    if _engine is not None:
        _engine.dispose()
    _engine = create_db_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(bind=_engine, autoflush=False)


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Return the session factory, initializing the database on first use."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Database session factory could not be created")
    return _session_factory


@contextmanager
def session_scope(settings: Settings) -> Iterator[Session]:
    """Session for work outside a request, such as startup seeding."""
    session = get_session_factory(settings)()
    try:
        yield session
    finally:
        session.close()


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
