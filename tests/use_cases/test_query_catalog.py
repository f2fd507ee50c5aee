"""
Test suite for CatalogQueryEngine.

Verifies:
- Unfiltered browsing delegates paging to the source
- Generation, type and search compose as an intersection in catalog order
- A bare search is an exact id/name lookup
- Totals describe the filtered set, pages are enriched after slicing
"""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from pokedex_lite.adapters.in_memory_catalog_source import InMemoryCatalogSource
from pokedex_lite.domain.errors import SourceUnavailableError
from pokedex_lite.domain.species import (
    CatalogFilters,
    FilterValidationError,
    Paging,
    PagingValidationError,
    SpeciesDetail,
)
from pokedex_lite.ports.catalog_source import CatalogSource, SourcePage
from pokedex_lite.use_cases.query_catalog import (
    CatalogQueryEngine,
    CatalogQueryRequest,
    CatalogQueryResponse,
)

KANTO_FIRE = [
    "charmander",
    "charmeleon",
    "charizard",
    "vulpix",
    "ninetales",
    "growlithe",
    "arcanine",
    "ponyta",
    "rapidash",
    "magmar",
    "flareon",
    "moltres",
]


@pytest.fixture
def engine(catalog_source: InMemoryCatalogSource) -> CatalogQueryEngine:
    return CatalogQueryEngine(catalog_source)


async def _query(engine: CatalogQueryEngine, paging: Paging = Paging(), **filters: str) -> CatalogQueryResponse:
    return await engine.query(
        CatalogQueryRequest(filters=CatalogFilters(**filters), paging=paging)
    )


def _names(response: CatalogQueryResponse) -> list[str]:
    return [entry.name for entry in response.entries]


# ==============================================================================
# Unfiltered
# ==============================================================================


@pytest.mark.asyncio
async def test_unfiltered_uses_source_paging() -> None:
    source = Mock(spec=CatalogSource)
    source.list_page = AsyncMock(return_value=SourcePage(total=1025, refs=[]))
    engine = CatalogQueryEngine(source)

    response = await _query(engine, Paging(offset=40, limit=10))

    source.list_page.assert_awaited_once_with(limit=10, offset=40)
    assert response.total == 1025
    assert response.entries == []


@pytest.mark.asyncio
async def test_unfiltered_page_is_enriched(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(offset=0, limit=3))

    assert _names(response) == ["bulbasaur", "ivysaur", "venusaur"]
    assert response.entries[0].types == ("grass", "poison")
    assert response.entries[0].image is not None


# ==============================================================================
# Composed filters
# ==============================================================================


@pytest.mark.asyncio
async def test_generation_and_type(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(limit=50), generation="1", type="fire")

    assert response.total == 12
    assert _names(response) == KANTO_FIRE


@pytest.mark.asyncio
async def test_generation_type_and_search(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, generation="1", type="fire", search="char")

    assert response.total == 3
    assert _names(response) == ["charmander", "charmeleon", "charizard"]


@pytest.mark.asyncio
async def test_generation_only_excludes_other_generations(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(limit=200), generation="2")

    assert _names(response) == ["chikorita", "cyndaquil"]


@pytest.mark.asyncio
async def test_type_only_spans_generations(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(limit=200), type="fire")

    assert response.total == 14
    assert _names(response)[-2:] == ["cyndaquil", "torchic"]


@pytest.mark.asyncio
async def test_search_with_type_is_substring(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, type="fire", search="TAL")

    assert _names(response) == ["ninetales"]


@pytest.mark.asyncio
async def test_padded_filters_are_normalized(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(limit=50), generation=" 1 ", type=" Fire ")

    assert response.total == 12
    assert _names(response) == KANTO_FIRE


@pytest.mark.asyncio
async def test_unknown_type_gives_empty_result(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, generation="1", type="shadow")

    assert response.total == 0
    assert response.entries == []


@pytest.mark.asyncio
async def test_only_the_page_is_enriched(
    engine: CatalogQueryEngine, catalog_source: InMemoryCatalogSource
) -> None:
    response = await _query(engine, Paging(offset=10, limit=5), generation="1", type="fire")

    assert response.total == 12
    assert _names(response) == ["flareon", "moltres"]
    assert sorted(catalog_source.detail_calls) == ["136", "146"]


@pytest.mark.asyncio
async def test_offset_past_total_is_empty(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(offset=12, limit=5), generation="1", type="fire")

    assert response.total == 12
    assert response.entries == []


# ==============================================================================
# Bare search
# ==============================================================================


@pytest.mark.asyncio
async def test_bare_search_is_exact_name_lookup(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, search="Pikachu")

    assert response.total == 1
    assert _names(response) == ["pikachu"]


@pytest.mark.asyncio
async def test_bare_search_accepts_id(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, search="150")

    assert _names(response) == ["mewtwo"]


@pytest.mark.asyncio
async def test_bare_search_is_not_substring(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, search="char")

    assert response.total == 0
    assert response.entries == []


@pytest.mark.asyncio
async def test_bare_search_past_first_item(engine: CatalogQueryEngine) -> None:
    response = await _query(engine, Paging(offset=1, limit=20), search="pikachu")

    assert response.total == 1
    assert response.entries == []


@pytest.mark.asyncio
async def test_blank_search_browses_unfiltered(
    engine: CatalogQueryEngine, catalog_species: list[SpeciesDetail]
) -> None:
    response = await _query(engine, Paging(limit=50), search="   ")

    assert response.total == len(catalog_species)
    assert _names(response)[:3] == ["bulbasaur", "ivysaur", "venusaur"]


# ==============================================================================
# Validation and failures
# ==============================================================================


@pytest.mark.asyncio
async def test_unknown_generation_is_rejected(engine: CatalogQueryEngine) -> None:
    with pytest.raises(FilterValidationError):
        await _query(engine, generation="10")


@pytest.mark.asyncio
async def test_invalid_paging_is_rejected(engine: CatalogQueryEngine) -> None:
    with pytest.raises(PagingValidationError):
        await _query(engine, Paging(limit=500))


@pytest.mark.asyncio
async def test_source_failure_propagates(
    engine: CatalogQueryEngine, catalog_source: InMemoryCatalogSource
) -> None:
    catalog_source.available = False

    with pytest.raises(SourceUnavailableError):
        await _query(engine, generation="1", type="fire")
