"""Get species detail use case."""

from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.errors import ValidationError
from pokedex_lite.domain.species import SpeciesDetail
from pokedex_lite.ports.catalog_source import CatalogSource


@dataclass(frozen=True, slots=True)
class GetSpeciesDetailRequest:
    """Request a species by numeric id or exact name."""

    id_or_name: str


@dataclass(frozen=True, slots=True)
class GetSpeciesDetailResponse:
    species: SpeciesDetail


class GetSpeciesDetail:
    """
    Use case for retrieving a single species record.

    Responsibilities:
    - Reject blank identifiers
    - Delegate to the catalog source, which raises SpeciesNotFoundError
      or SourceUnavailableError
    """

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._source = catalog_source

    async def execute(self, request: GetSpeciesDetailRequest) -> GetSpeciesDetailResponse:
        id_or_name = request.id_or_name.strip()
        if not id_or_name:
            raise ValidationError(
                errors=[
                    {
                        "field": "id_or_name",
                        "message": "Must not be blank",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        species = await self._source.get_detail(id_or_name.lower())
        return GetSpeciesDetailResponse(species=species)
