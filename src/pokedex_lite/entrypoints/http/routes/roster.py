from fastapi import APIRouter, Depends, Response, status

from pokedex_lite.entrypoints.http.dependencies import get_current_user_id, get_roster_store
from pokedex_lite.entrypoints.http.dtos.roster import (
    CaptureRequestDTO,
    RosterEntryResponseDTO,
    RosterListResponseDTO,
    UpdateRosterEntryDTO,
)
from pokedex_lite.entrypoints.http.mappers.roster_mapper import RosterMapper
from pokedex_lite.use_cases.roster_store import RosterStore


router = APIRouter(prefix="/roster", tags=["Roster"])


@router.get(
    "",
    response_model=RosterListResponseDTO,
    summary="List the caller's roster",
    description="Entries in capture order. Entries whose species detail "
    "could not be fetched are returned without `details`.",
)
async def list_roster(
    user_id: int = Depends(get_current_user_id),
    store: RosterStore = Depends(get_roster_store),
) -> RosterListResponseDTO:
    entries = await store.list_roster(user_id)
    return RosterMapper.to_list_response(entries)


@router.post(
    "",
    response_model=RosterEntryResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Capture a species",
    description="""
    Add a species to one of the caller's teams (default: Personal).

    ## Rules
    - At most 6 entries per team → 409 TEAM_FULL
    - A species can be held once across all teams → 409 DUPLICATE_SPECIES
    """,
)
async def capture(
    payload: CaptureRequestDTO,
    user_id: int = Depends(get_current_user_id),
    store: RosterStore = Depends(get_roster_store),
) -> RosterEntryResponseDTO:
    entry = await store.capture(
        user_id,
        species_id=payload.species_id,
        species_name=payload.species_name,
        note=payload.note,
        team=payload.team,
    )
    return RosterMapper.to_entry_response(entry)


@router.patch(
    "/{entry_id}",
    response_model=RosterEntryResponseDTO,
    summary="Update note and/or team of an entry",
    responses={
        404: {"description": "Entry not found for this user"},
        409: {"description": "Destination team is full"},
    },
)
async def update_entry(
    entry_id: int,
    payload: UpdateRosterEntryDTO,
    user_id: int = Depends(get_current_user_id),
    store: RosterStore = Depends(get_roster_store),
) -> RosterEntryResponseDTO:
    entry = await store.update(user_id, entry_id, note=payload.note, team=payload.team)
    return RosterMapper.to_entry_response(entry)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Release an entry",
    responses={404: {"description": "Entry not found for this user"}},
)
async def release_entry(
    entry_id: int,
    user_id: int = Depends(get_current_user_id),
    store: RosterStore = Depends(get_roster_store),
) -> Response:
    await store.release(user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
