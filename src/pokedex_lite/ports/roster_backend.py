from __future__ import annotations

from abc import ABC, abstractmethod

from pokedex_lite.domain.roster import RosterEntry, Team
from pokedex_lite.domain.species import CatalogFilters, CatalogPage, Paging, SpeciesDetail


class RosterBackend(ABC):
    """
    The full contract a consumer can call, served either remotely or locally.

    Both realizations must raise the same domain error classes for the same
    situations (DuplicateSpeciesError, TeamFullError, RosterEntryNotFoundError,
    SpeciesNotFoundError, SourceUnavailableError).
    """

    @abstractmethod
    async def query_catalog(self, filters: CatalogFilters, paging: Paging) -> CatalogPage: ...

    @abstractmethod
    async def get_species_detail(self, id_or_name: str) -> SpeciesDetail: ...

    @abstractmethod
    async def list_roster(self, user_id: int) -> list[RosterEntry]: ...

    @abstractmethod
    async def capture(
        self,
        user_id: int,
        species_id: int,
        species_name: str,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry: ...

    @abstractmethod
    async def update(
        self,
        user_id: int,
        entry_id: int,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry: ...

    @abstractmethod
    async def release(self, user_id: int, entry_id: int) -> None: ...


class ProbedRosterBackend(RosterBackend):
    """A RosterBackend whose availability can be checked before use."""

    @abstractmethod
    async def probe(self) -> bool:
        """Cheap liveness check. Must not raise; returns False on any failure."""
        ...
