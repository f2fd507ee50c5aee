from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from pokedex_lite.domain.errors import SpeciesNotFoundError
from pokedex_lite.domain.generations import GenerationRange, generation_range
from pokedex_lite.domain.species import (
    CatalogEntry,
    CatalogFilters,
    Paging,
    SpeciesRef,
    compose_candidates,
)
from pokedex_lite.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogQueryRequest:
    filters: CatalogFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class CatalogQueryResponse:
    total: int  # Size of the filtered set before paging
    entries: list[CatalogEntry] = field(default_factory=list)


class CatalogQueryEngine:
    """
    Species catalog search combining generation, type and name filters.

    The upstream source cannot combine filters, so the engine fetches the
    candidate sets, composes them, pages the result and only then enriches
    the page with detail lookups.

    A name search without generation or type is an exact id/name lookup;
    combined with either filter it is a case-insensitive substring match.
    Filters are normalized first, so blank values mean "no filter" whichever
    entrypoint built the request.
    """

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._source = catalog_source

    async def query(self, request: CatalogQueryRequest) -> CatalogQueryResponse:
        """
        Execute a catalog query.

        Args:
            request: Filters and paging

        Returns:
            Total of the filtered set and the enriched requested page

        Raises:
            FilterValidationError: If the generation is unknown
            PagingValidationError: If paging parameters are invalid
            SourceUnavailableError: If the upstream catalog fails
        """
        filters = request.filters.normalized()
        paging = request.paging
        filters.validate()
        paging.validate()

        if filters.is_empty:
            page = await self._source.list_page(limit=paging.limit, offset=paging.offset)
            entries = await self._enrich(page.refs)
            return CatalogQueryResponse(total=page.total, entries=entries)

        if not (filters.generation or filters.type):
            matches = await self._exact_lookup(filters.search or "")
            return CatalogQueryResponse(total=len(matches), entries=paging.slice(matches))

        candidates = await self._composed_candidates(
            filters, generation_range(filters.generation or "")
        )
        page_refs = paging.slice(candidates)
        entries = await self._enrich(page_refs)

        logger.debug(
            "Catalog query composed",
            extra={
                "generation": filters.generation,
                "type": filters.type,
                "search": filters.search,
                "total": len(candidates),
                "returned": len(entries),
            },
        )
        return CatalogQueryResponse(total=len(candidates), entries=entries)

    async def _composed_candidates(
        self, filters: CatalogFilters, generation: GenerationRange | None
    ) -> list[SpeciesRef]:
        if generation is not None:
            page = await self._source.list_page(
                limit=generation.size, offset=generation.start - 1
            )
            members = await self._source.list_by_type(filters.type) if filters.type else None
            return compose_candidates(page.refs, members, filters.search)

        # Type only: the membership list is the base set
        base = await self._source.list_by_type(filters.type or "")
        return compose_candidates(base, None, filters.search)

    async def _exact_lookup(self, search: str) -> list[CatalogEntry]:
        try:
            detail = await self._source.get_detail(search.lower())
        except SpeciesNotFoundError:
            return []
        return [detail.to_entry()]

    async def _enrich(self, refs: list[SpeciesRef]) -> list[CatalogEntry]:
        details = await asyncio.gather(*(self._source.get_detail(str(ref.id)) for ref in refs))
        return [detail.to_entry() for detail in details]
