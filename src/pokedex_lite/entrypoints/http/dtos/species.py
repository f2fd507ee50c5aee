from pydantic import BaseModel, ConfigDict, Field


class SpeciesSummaryDTO(BaseModel):
    id: int
    name: str
    image: str | None = None
    types: list[str]


class BaseStatsDTO(BaseModel):
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int


class SpeciesDetailResponseDTO(SpeciesSummaryDTO):
    height: int
    weight: int
    abilities: list[str]
    stats: BaseStatsDTO


class SpeciesSearchQueryDTO(BaseModel):
    """Query parameters for searching the species catalog."""

    generation: str | None = Field(
        default=None,
        description="Generation identifier 1-9 (contiguous national dex id range)",
        examples=["1"],
    )
    type: str | None = Field(
        default=None,
        description="Species type tag, e.g. fire",
        examples=["fire"],
    )
    search: str | None = Field(
        default=None,
        description=(
            "Name filter. Substring match when combined with generation or type, "
            "otherwise an exact name or id lookup"
        ),
        examples=["char"],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "generation": "1",
                "type": "fire",
                "search": "char",
                "offset": 0,
                "limit": 20,
            }
        }
    )


class SpeciesSearchResponseDTO(BaseModel):
    species: list[SpeciesSummaryDTO]
    total: int
    offset: int
    limit: int
