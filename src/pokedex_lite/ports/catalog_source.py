from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pokedex_lite.domain.species import SpeciesDetail, SpeciesRef


@dataclass(frozen=True)
class SourcePage:
    """One page of the upstream catalog in upstream order."""

    total: int
    refs: list[SpeciesRef] = field(default_factory=list)


class CatalogSource(ABC):
    """
    Port for the externally hosted species catalog.

    Implementations are thin fetch layers: no caching, no retries and no
    filter composition.

    Contract:
        - Explicit absence of a species raises SpeciesNotFoundError
        - Every other transport or upstream failure raises SourceUnavailableError
    """

    @abstractmethod
    async def list_page(self, limit: int, offset: int) -> SourcePage:
        """Return ``limit`` refs starting at ``offset`` plus the catalog size."""
        ...

    @abstractmethod
    async def list_by_type(self, type_name: str) -> list[SpeciesRef]:
        """Return every species carrying ``type_name``. Unknown types yield []."""
        ...

    @abstractmethod
    async def get_detail(self, id_or_name: str) -> SpeciesDetail:
        """Return the full record for a numeric id or an exact name."""
        ...
