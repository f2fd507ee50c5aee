from datetime import datetime

from pydantic import BaseModel, Field

from pokedex_lite.domain.roster import Team
from pokedex_lite.entrypoints.http.dtos.species import SpeciesSummaryDTO


class CaptureRequestDTO(BaseModel):
    species_id: int = Field(ge=1, examples=[25])
    species_name: str = Field(min_length=1, max_length=100, examples=["pikachu"])
    note: str | None = Field(default=None, examples=["Caught in Viridian Forest"])
    team: Team | None = Field(
        default=None,
        description="Destination team. Defaults to Personal",
        examples=["Alpha"],
    )


class UpdateRosterEntryDTO(BaseModel):
    """Partial update: omitted fields are left unchanged."""

    note: str | None = None
    team: Team | None = None


class RosterEntryResponseDTO(BaseModel):
    id: int
    user_id: int
    species_id: int
    species_name: str
    note: str | None = None
    team: Team
    captured_at: datetime
    details: SpeciesSummaryDTO | None = None


class RosterListResponseDTO(BaseModel):
    entries: list[RosterEntryResponseDTO]
    total: int
