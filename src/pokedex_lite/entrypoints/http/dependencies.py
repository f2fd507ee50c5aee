"""
Dependency injection for FastAPI routes.

Key principle: Database sessions and HTTP clients are per-request, not cached.
Only the per-user lock registry is shared process-wide, because roster
mutations for one user must be serialized across requests.
"""

from __future__ import annotations

from typing import AsyncIterator, Iterator

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from pokedex_lite.adapters.pokeapi_catalog_source import PokeApiCatalogSource
from pokedex_lite.adapters.sqlalchemy_roster_repository import SqlAlchemyRosterRepository
from pokedex_lite.domain.errors import UnauthorizedError
from pokedex_lite.infra.config import pokeapi_base_url
from pokedex_lite.infra.db.session import get_session
from pokedex_lite.infra.http_client import build_async_client
from pokedex_lite.ports.catalog_source import CatalogSource
from pokedex_lite.use_cases.get_species_detail import GetSpeciesDetail
from pokedex_lite.use_cases.query_catalog import CatalogQueryEngine
from pokedex_lite.use_cases.roster_store import RosterStore, UserLocks

_user_locks = UserLocks()


def get_db() -> Iterator[Session]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


async def get_catalog_source() -> AsyncIterator[CatalogSource]:
    """Provides a PokeAPI-backed catalog source whose client closes with the request."""
    async with build_async_client(pokeapi_base_url()) as client:
        yield PokeApiCatalogSource(client)


def get_user_locks() -> UserLocks:
    return _user_locks


def get_current_user_id(
    x_user_id: int | None = Header(default=None, alias="X-User-Id"),
) -> int:
    """
    Caller identity supplied by the upstream auth layer.

    Raises:
        UnauthorizedError: If the header is missing
    """
    if x_user_id is None:
        raise UnauthorizedError("X-User-Id header is required")
    return x_user_id


def get_query_catalog_use_case(
    source: CatalogSource = Depends(get_catalog_source),
) -> CatalogQueryEngine:
    return CatalogQueryEngine(catalog_source=source)


def get_species_detail_use_case(
    source: CatalogSource = Depends(get_catalog_source),
) -> GetSpeciesDetail:
    return GetSpeciesDetail(catalog_source=source)


def get_roster_store(
    db: Session = Depends(get_db),
    source: CatalogSource = Depends(get_catalog_source),
    locks: UserLocks = Depends(get_user_locks),
) -> RosterStore:
    """
    Factory function that returns a RosterStore bound to this request's session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
        source: Catalog source used to enrich listings
        locks: Process-wide per-user lock registry
    """
    repository = SqlAlchemyRosterRepository(session=db)
    return RosterStore(repository=repository, catalog_source=source, locks=locks)
