from __future__ import annotations

from pokedex_lite.domain.roster import RosterEntry
from pokedex_lite.entrypoints.http.dtos.roster import (
    RosterEntryResponseDTO,
    RosterListResponseDTO,
)
from pokedex_lite.entrypoints.http.mappers.species_mapper import SpeciesMapper


class RosterMapper:
    """Maps roster domain entities to REST response DTOs."""

    @staticmethod
    def to_entry_response(entry: RosterEntry) -> RosterEntryResponseDTO:
        return RosterEntryResponseDTO(
            id=entry.id,
            user_id=entry.user_id,
            species_id=entry.species_id,
            species_name=entry.species_name,
            note=entry.note,
            team=entry.team,
            captured_at=entry.captured_at,
            details=SpeciesMapper.to_summary(entry.details) if entry.details else None,
        )

    @staticmethod
    def to_list_response(entries: list[RosterEntry]) -> RosterListResponseDTO:
        return RosterListResponseDTO(
            entries=[RosterMapper.to_entry_response(entry) for entry in entries],
            total=len(entries),
        )
