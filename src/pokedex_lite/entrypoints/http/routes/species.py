from fastapi import APIRouter, Depends

from pokedex_lite.entrypoints.http.dependencies import (
    get_query_catalog_use_case,
    get_species_detail_use_case,
)
from pokedex_lite.entrypoints.http.dtos.species import (
    SpeciesDetailResponseDTO,
    SpeciesSearchQueryDTO,
    SpeciesSearchResponseDTO,
)
from pokedex_lite.entrypoints.http.mappers.species_mapper import SpeciesMapper
from pokedex_lite.use_cases.get_species_detail import GetSpeciesDetail, GetSpeciesDetailRequest
from pokedex_lite.use_cases.query_catalog import CatalogQueryEngine


router = APIRouter(tags=["Species"])


@router.get(
    "/species",
    response_model=SpeciesSearchResponseDTO,
    summary="Search species catalog",
    description="""
    Browse the species catalog with optional filters and pagination.

    ## Filters
    - generation: 1-9, each a fixed national dex id range
    - type: type tag such as fire or water
    - search: substring of the name when combined with generation or type;
      on its own it is an exact name or id lookup

    ## Pagination
    - Default limit: 20, max limit: 200
    - total is the size of the filtered set before paging

    ## Example
    ```
    GET /v1/species?generation=1&type=fire&limit=10
    ```
    """,
    responses={
        503: {"description": "Species catalog unavailable"},
    },
)
async def list_species(
    query: SpeciesSearchQueryDTO = Depends(),
    engine: CatalogQueryEngine = Depends(get_query_catalog_use_case),
) -> SpeciesSearchResponseDTO:
    """Search species endpoint following parse → execute → map → return pattern."""
    request = SpeciesMapper.to_domain_request(query)

    result = await engine.query(request)

    return SpeciesMapper.to_response(result=result, offset=query.offset, limit=query.limit)


@router.get(
    "/species/{id_or_name}",
    response_model=SpeciesDetailResponseDTO,
    summary="Get species detail",
    responses={
        404: {"description": "Species not found"},
        503: {"description": "Species catalog unavailable"},
    },
)
async def get_species(
    id_or_name: str,
    use_case: GetSpeciesDetail = Depends(get_species_detail_use_case),
) -> SpeciesDetailResponseDTO:
    response = await use_case.execute(GetSpeciesDetailRequest(id_or_name=id_or_name))
    return SpeciesMapper.to_detail_response(response.species)
