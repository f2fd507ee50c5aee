from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable, TypeVar

from pokedex_lite.domain.roster import RosterEntry, Team
from pokedex_lite.domain.species import CatalogFilters, CatalogPage, Paging, SpeciesDetail
from pokedex_lite.ports.roster_backend import ProbedRosterBackend, RosterBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[RosterBackend], Awaitable[T]]

OFFLINE_NOTICE = "Service unavailable, running in offline mode"


class BackendMode(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class PersistenceGateway:
    """
    Routes each call to the remote service or the local fallback.

    Before every call the remote backend is probed; success selects REMOTE,
    failure selects LOCAL. The decision is per call, never sticky.

    Errors raised by the selected backend, SourceUnavailableError included,
    reach the caller unchanged; the next call probes again. Data written
    while LOCAL stays in the local store and is not merged back.
    """

    def __init__(self, remote: ProbedRosterBackend, local: RosterBackend) -> None:
        self._remote = remote
        self._local = local
        self._mode: BackendMode | None = None

    @property
    def mode(self) -> BackendMode | None:
        """Backend chosen for the most recent call (None before the first call)."""
        return self._mode

    @property
    def offline(self) -> bool:
        return self._mode == BackendMode.LOCAL

    async def execute(self, operation: Operation[T]) -> T:
        backend = await self._select_backend()
        return await operation(backend)

    async def query_catalog(self, filters: CatalogFilters, paging: Paging) -> CatalogPage:
        return await self.execute(lambda backend: backend.query_catalog(filters, paging))

    async def get_species_detail(self, id_or_name: str) -> SpeciesDetail:
        return await self.execute(lambda backend: backend.get_species_detail(id_or_name))

    async def list_roster(self, user_id: int) -> list[RosterEntry]:
        return await self.execute(lambda backend: backend.list_roster(user_id))

    async def capture(
        self,
        user_id: int,
        species_id: int,
        species_name: str,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        return await self.execute(
            lambda backend: backend.capture(
                user_id, species_id, species_name, note=note, team=team
            )
        )

    async def update(
        self,
        user_id: int,
        entry_id: int,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        return await self.execute(
            lambda backend: backend.update(user_id, entry_id, note=note, team=team)
        )

    async def release(self, user_id: int, entry_id: int) -> None:
        await self.execute(lambda backend: backend.release(user_id, entry_id))

    async def _select_backend(self) -> RosterBackend:
        mode = BackendMode.REMOTE if await self._remote.probe() else BackendMode.LOCAL

        if mode != self._mode:
            if mode == BackendMode.LOCAL:
                logger.warning("Remote backend unreachable, switching to local store")
            elif self._mode is not None:
                logger.info("Remote backend reachable again, switching back")
        self._mode = mode

        return self._remote if mode == BackendMode.REMOTE else self._local
