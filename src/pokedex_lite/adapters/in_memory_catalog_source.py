from __future__ import annotations

from pokedex_lite.domain.errors import SourceUnavailableError, SpeciesNotFoundError
from pokedex_lite.domain.species import SpeciesDetail, SpeciesRef
from pokedex_lite.ports.catalog_source import CatalogSource, SourcePage


class InMemoryCatalogSource(CatalogSource):
    """
    Canonical contract implementation for tests and fixtures.

    - Catalog order is ascending species id
    - Paging offsets are national dex positions (offset 0 is id 1), so a
      sparse fixture still answers generation windows correctly
    - Type membership keeps catalog order
    - ``available = False`` makes every call raise SourceUnavailableError
    """

    def __init__(self, species: list[SpeciesDetail]) -> None:
        self._species = sorted(species, key=lambda detail: detail.id)
        self.available = True
        self.detail_calls: list[str] = []

    async def list_page(self, limit: int, offset: int) -> SourcePage:
        self._check_available()
        refs = [
            SpeciesRef(id=d.id, name=d.name)
            for d in self._species
            if offset < d.id <= offset + limit
        ]
        return SourcePage(total=len(self._species), refs=refs)

    async def list_by_type(self, type_name: str) -> list[SpeciesRef]:
        self._check_available()
        wanted = type_name.lower()
        return [SpeciesRef(id=d.id, name=d.name) for d in self._species if wanted in d.types]

    async def get_detail(self, id_or_name: str) -> SpeciesDetail:
        self._check_available()
        key = str(id_or_name).strip().lower()
        self.detail_calls.append(key)
        for detail in self._species:
            if key == detail.name or key == str(detail.id):
                return detail
        raise SpeciesNotFoundError(key)

    def _check_available(self) -> None:
        if not self.available:
            raise SourceUnavailableError("Species catalog is unavailable")
