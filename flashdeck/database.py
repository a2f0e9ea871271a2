"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    Switch on foreign key enforcement for each new SQLite connection.

    Without it SQLite ignores the cards -> decks ON DELETE CASCADE.
    """

    @event.listens_for(engine, "connect")
    def _foreign_keys_on(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _create_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        engine = create_engine(
            url, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(
        url, pool_size=20, max_overflow=30, pool_pre_ping=True, pool_recycle=3600
    )


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory; called once from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603
    _engine = _create_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(bind=_engine, autoflush=False)


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory, created lazily when the lifespan did not run."""
    if _session_factory is None:
        initialize_database(settings)
    assert _session_factory is not None
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    with session_factory() as session:
        yield session


DatabaseSession = Annotated[Session, Depends(get_db)]
