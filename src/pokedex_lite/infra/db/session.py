from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pokedex_lite.infra.db.config import database_url

# Lazy initialization - one engine/session factory per database URL
_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker[Session]] = {}


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # Single shared connection, otherwise each checkout sees an empty database
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_size": 10,  # Keep 10 connections in pool
        "max_overflow": 20,  # Allow 20 additional connections if needed (30 total max)
        "pool_pre_ping": True,  # Verify connection health before checkout
        "pool_recycle": 3600,  # Recycle connections every hour (prevent stale connections)
    }


def get_engine(url: str | None = None) -> Engine:
    """
    Get or create the engine for ``url`` (defaults to DATABASE_URL).

    PostgreSQL engines get a sized connection pool; SQLite engines are
    configured for use from the event loop thread and worker threads.
    """
    url = url or database_url()
    engine = _engines.get(url)
    if engine is None:
        engine = create_engine(url, **_engine_options(url))
        _engines[url] = engine
    return engine


def get_session_local(url: str | None = None) -> sessionmaker[Session]:
    """Get or create the session factory for ``url``."""
    url = url or database_url()
    factory = _session_factories.get(url)
    if factory is None:
        factory = sessionmaker(
            bind=get_engine(url),
            class_=Session,
            expire_on_commit=False,
        )
        _session_factories[url] = factory
    return factory


@contextmanager
def get_session(url: str | None = None) -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local(url)()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def dispose_engines() -> None:
    """Close every pooled connection and forget cached engines."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
    _session_factories.clear()
