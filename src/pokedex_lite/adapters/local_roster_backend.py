"""RosterBackend served from a local SQLite file.

Used while the remote service is unreachable. Business rules come from the
same RosterStore and CatalogQueryEngine the remote service runs; only the
storage differs.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pokedex_lite.adapters.sqlalchemy_roster_repository import SqlAlchemyRosterRepository
from pokedex_lite.domain.roster import RosterEntry, Team
from pokedex_lite.domain.species import CatalogFilters, CatalogPage, Paging, SpeciesDetail
from pokedex_lite.infra.db.seed import bootstrap_local_store
from pokedex_lite.infra.db.session import get_session
from pokedex_lite.ports.catalog_source import CatalogSource
from pokedex_lite.ports.roster_backend import RosterBackend
from pokedex_lite.use_cases.get_species_detail import GetSpeciesDetail, GetSpeciesDetailRequest
from pokedex_lite.use_cases.query_catalog import CatalogQueryEngine, CatalogQueryRequest
from pokedex_lite.use_cases.roster_store import RosterStore, UserLocks

logger = logging.getLogger(__name__)


class LocalRosterBackend(RosterBackend):
    """
    RosterBackend over a durable local database.

    - The schema is created and the default user seeded on first use
    - Each roster call runs in its own session (commit on success)
    - Catalog calls go straight to the catalog source
    """

    def __init__(
        self,
        database_url: str,
        catalog_source: CatalogSource,
        locks: UserLocks | None = None,
    ) -> None:
        self._database_url = database_url
        self._source = catalog_source
        self._locks = locks or UserLocks()
        self._ready = False

    async def query_catalog(self, filters: CatalogFilters, paging: Paging) -> CatalogPage:
        engine = CatalogQueryEngine(self._source)
        result = await engine.query(CatalogQueryRequest(filters=filters, paging=paging))
        return CatalogPage(total=result.total, entries=result.entries)

    async def get_species_detail(self, id_or_name: str) -> SpeciesDetail:
        response = await GetSpeciesDetail(self._source).execute(
            GetSpeciesDetailRequest(id_or_name=id_or_name)
        )
        return response.species

    async def list_roster(self, user_id: int) -> list[RosterEntry]:
        self._ensure_ready()
        with get_session(self._database_url) as session:
            return await self._store(session).list_roster(user_id)

    async def capture(
        self,
        user_id: int,
        species_id: int,
        species_name: str,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        self._ensure_ready()
        with get_session(self._database_url) as session:
            return await self._store(session).capture(
                user_id, species_id, species_name, note=note, team=team
            )

    async def update(
        self,
        user_id: int,
        entry_id: int,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        self._ensure_ready()
        with get_session(self._database_url) as session:
            return await self._store(session).update(user_id, entry_id, note=note, team=team)

    async def release(self, user_id: int, entry_id: int) -> None:
        self._ensure_ready()
        with get_session(self._database_url) as session:
            await self._store(session).release(user_id, entry_id)

    def _store(self, session: Session) -> RosterStore:
        return RosterStore(SqlAlchemyRosterRepository(session), self._source, self._locks)

    def _ensure_ready(self) -> None:
        if self._ready:
            return
        bootstrap_local_store(self._database_url)
        self._ready = True
        logger.info("Local roster store ready", extra={"database_url": self._database_url})
