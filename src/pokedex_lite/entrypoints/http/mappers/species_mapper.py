from __future__ import annotations

from pokedex_lite.domain.species import CatalogEntry, CatalogFilters, Paging, SpeciesDetail
from pokedex_lite.entrypoints.http.dtos.species import (
    BaseStatsDTO,
    SpeciesDetailResponseDTO,
    SpeciesSearchQueryDTO,
    SpeciesSearchResponseDTO,
    SpeciesSummaryDTO,
)
from pokedex_lite.use_cases.query_catalog import CatalogQueryRequest, CatalogQueryResponse


class SpeciesMapper:
    """Maps between REST DTOs and domain models for the species catalog."""

    @staticmethod
    def to_domain_request(dto: SpeciesSearchQueryDTO) -> CatalogQueryRequest:
        """
        Builds a complete domain request from query parameters.

        Blank strings are treated as absent filters.
        """
        return CatalogQueryRequest(
            filters=CatalogFilters(
                generation=dto.generation,
                type=dto.type,
                search=dto.search,
            ).normalized(),
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_summary(entry: CatalogEntry) -> SpeciesSummaryDTO:
        return SpeciesSummaryDTO(
            id=entry.id,
            name=entry.name,
            image=entry.image,
            types=list(entry.types),
        )

    @staticmethod
    def to_response(
        result: CatalogQueryResponse,
        offset: int,
        limit: int,
    ) -> SpeciesSearchResponseDTO:
        """
        Converts a catalog query result to the REST response with pagination metadata.

        Args:
            result: Total of the filtered set and the page of entries
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return SpeciesSearchResponseDTO(
            species=[SpeciesMapper.to_summary(entry) for entry in result.entries],
            total=result.total,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def to_detail_response(detail: SpeciesDetail) -> SpeciesDetailResponseDTO:
        return SpeciesDetailResponseDTO(
            id=detail.id,
            name=detail.name,
            image=detail.image,
            types=list(detail.types),
            height=detail.height,
            weight=detail.weight,
            abilities=list(detail.abilities),
            stats=BaseStatsDTO(
                hp=detail.stats.hp,
                attack=detail.stats.attack,
                defense=detail.stats.defense,
                special_attack=detail.stats.special_attack,
                special_defense=detail.stats.special_defense,
                speed=detail.stats.speed,
            ),
        )
