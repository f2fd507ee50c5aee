"""
Test suite for RosterStore.

Verifies:
- Team capacity and per-user species uniqueness
- Partial updates and moves between teams
- Release semantics (second release is not found, ids never reused)
- Per-user serialization of concurrent captures
- Listing degrades gracefully when the catalog cannot enrich an entry
"""

from __future__ import annotations

import asyncio
from contextlib import nullcontext
from datetime import datetime, timezone

import pytest

from pokedex_lite.adapters.in_memory_catalog_source import InMemoryCatalogSource
from pokedex_lite.adapters.in_memory_roster_repository import InMemoryRosterRepository
from pokedex_lite.domain.errors import (
    DuplicateSpeciesError,
    RosterEntryNotFoundError,
    TeamFullError,
)
from pokedex_lite.domain.roster import TEAM_CAPACITY, Team
from pokedex_lite.use_cases.roster_store import RosterStore, UserLocks

NOW = datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)
USER = 1


@pytest.fixture
def repository() -> InMemoryRosterRepository:
    return InMemoryRosterRepository()


@pytest.fixture
def store(
    repository: InMemoryRosterRepository, catalog_source: InMemoryCatalogSource
) -> RosterStore:
    return RosterStore(repository, catalog_source, UserLocks(), clock=lambda: NOW)


async def _fill(store: RosterStore, team: Team, species_ids: range) -> None:
    for species_id in species_ids:
        await store.capture(USER, species_id, f"species-{species_id}", team=team)


# ==============================================================================
# Capture
# ==============================================================================


@pytest.mark.asyncio
async def test_capture_defaults_to_personal_team(store: RosterStore) -> None:
    entry = await store.capture(USER, 25, "pikachu", note="first")

    assert entry.team == Team.PERSONAL
    assert entry.captured_at == NOW
    assert entry.note == "first"
    assert entry.user_id == USER


@pytest.mark.asyncio
async def test_seventh_capture_into_team_is_rejected(store: RosterStore) -> None:
    await _fill(store, Team.ALPHA, range(1, TEAM_CAPACITY + 1))

    with pytest.raises(TeamFullError):
        await store.capture(USER, 150, "mewtwo", team=Team.ALPHA)

    other = await store.capture(USER, 150, "mewtwo", team=Team.BETA)
    assert other.team == Team.BETA


@pytest.mark.asyncio
async def test_same_species_twice_is_rejected_across_teams(store: RosterStore) -> None:
    await store.capture(USER, 25, "pikachu", team=Team.ALPHA)

    with pytest.raises(DuplicateSpeciesError):
        await store.capture(USER, 25, "pikachu", team=Team.BETA)


@pytest.mark.asyncio
async def test_uniqueness_is_per_user(store: RosterStore) -> None:
    await store.capture(USER, 25, "pikachu")

    entry = await store.capture(2, 25, "pikachu")

    assert entry.user_id == 2


class NoLocks:
    """Stand-in lock registry that never blocks."""

    def for_user(self, user_id: int) -> nullcontext[None]:
        return nullcontext()


async def _capture_many(store: RosterStore, species_ids: list[int], team: Team) -> list:
    return await asyncio.gather(
        *(
            store.capture(USER, species_id, f"species-{species_id}", team=team)
            for species_id in species_ids
        ),
        return_exceptions=True,
    )


@pytest.mark.asyncio
async def test_unserialized_captures_overfill_a_team(
    repository: InMemoryRosterRepository, catalog_source: InMemoryCatalogSource
) -> None:
    # Every capture reads the roster before any of them writes
    unlocked = RosterStore(repository, catalog_source, NoLocks())  # type: ignore[arg-type]

    results = await _capture_many(unlocked, list(range(1, 11)), Team.DELTA)

    captured = [result for result in results if not isinstance(result, Exception)]
    assert len(captured) > TEAM_CAPACITY


@pytest.mark.asyncio
async def test_concurrent_captures_never_overfill(store: RosterStore) -> None:
    results = await _capture_many(store, list(range(1, 11)), Team.DELTA)

    captured = [result for result in results if not isinstance(result, Exception)]
    rejected = [result for result in results if isinstance(result, TeamFullError)]

    assert len(captured) == TEAM_CAPACITY
    assert len(rejected) == 4
    assert len(await store.list_roster(USER)) == TEAM_CAPACITY


@pytest.mark.asyncio
async def test_unserialized_duplicate_captures_both_land(
    repository: InMemoryRosterRepository, catalog_source: InMemoryCatalogSource
) -> None:
    unlocked = RosterStore(repository, catalog_source, NoLocks())  # type: ignore[arg-type]

    results = await asyncio.gather(
        unlocked.capture(USER, 25, "pikachu", team=Team.ALPHA),
        unlocked.capture(USER, 25, "pikachu", team=Team.BETA),
    )

    assert [entry.species_id for entry in results] == [25, 25]


@pytest.mark.asyncio
async def test_concurrent_duplicate_captures(store: RosterStore) -> None:
    results = await asyncio.gather(
        store.capture(USER, 25, "pikachu", team=Team.ALPHA),
        store.capture(USER, 25, "pikachu", team=Team.BETA),
        return_exceptions=True,
    )

    assert sum(isinstance(result, DuplicateSpeciesError) for result in results) == 1
    assert [entry.species_id for entry in await store.list_roster(USER)] == [25]


# ==============================================================================
# Update
# ==============================================================================


@pytest.mark.asyncio
async def test_update_note_keeps_team(store: RosterStore) -> None:
    entry = await store.capture(USER, 25, "pikachu", team=Team.GAMMA)

    updated = await store.update(USER, entry.id, note="loves ketchup")

    assert updated.note == "loves ketchup"
    assert updated.team == Team.GAMMA


@pytest.mark.asyncio
async def test_update_without_fields_changes_nothing(store: RosterStore) -> None:
    entry = await store.capture(USER, 25, "pikachu", note="keep me")

    updated = await store.update(USER, entry.id)

    assert updated == entry


@pytest.mark.asyncio
async def test_move_into_full_team_is_rejected(
    store: RosterStore, repository: InMemoryRosterRepository
) -> None:
    await _fill(store, Team.ALPHA, range(1, TEAM_CAPACITY + 1))
    mover = await store.capture(USER, 150, "mewtwo", team=Team.BETA)

    with pytest.raises(TeamFullError):
        await store.update(USER, mover.id, team=Team.ALPHA)

    assert repository.get(USER, mover.id).team == Team.BETA  # type: ignore[union-attr]


@pytest.mark.asyncio
async def test_reassigning_same_team_when_full_is_allowed(store: RosterStore) -> None:
    await _fill(store, Team.ALPHA, range(1, TEAM_CAPACITY + 1))

    updated = await store.update(USER, 1, note="leader", team=Team.ALPHA)

    assert updated.team == Team.ALPHA
    assert updated.note == "leader"


@pytest.mark.asyncio
async def test_update_other_users_entry_is_not_found(store: RosterStore) -> None:
    entry = await store.capture(USER, 25, "pikachu")

    with pytest.raises(RosterEntryNotFoundError):
        await store.update(2, entry.id, note="mine now")


# ==============================================================================
# Release
# ==============================================================================


@pytest.mark.asyncio
async def test_release_then_release_again(store: RosterStore) -> None:
    entry = await store.capture(USER, 25, "pikachu")

    await store.release(USER, entry.id)

    with pytest.raises(RosterEntryNotFoundError):
        await store.release(USER, entry.id)


@pytest.mark.asyncio
async def test_release_frees_capacity_and_species(store: RosterStore) -> None:
    await _fill(store, Team.ALPHA, range(1, TEAM_CAPACITY + 1))

    await store.release(USER, 3)
    again = await store.capture(USER, 3, "species-3", team=Team.ALPHA)

    assert again.id == TEAM_CAPACITY + 1


# ==============================================================================
# Listing
# ==============================================================================


@pytest.mark.asyncio
async def test_list_roster_in_capture_order_with_details(store: RosterStore) -> None:
    await store.capture(USER, 6, "charizard", team=Team.ALPHA)
    await store.capture(USER, 25, "pikachu")
    await store.capture(2, 7, "squirtle")

    entries = await store.list_roster(USER)

    assert [entry.species_id for entry in entries] == [6, 25]
    assert entries[0].details is not None
    assert entries[0].details.types == ("fire", "flying")


@pytest.mark.asyncio
async def test_list_roster_without_catalog_keeps_entries(
    store: RosterStore, catalog_source: InMemoryCatalogSource
) -> None:
    await store.capture(USER, 25, "pikachu")
    # Species not in the catalog fixture
    await store.capture(USER, 9999, "custom")
    catalog_source.available = False

    entries = await store.list_roster(USER)

    assert [entry.details for entry in entries] == [None, None]
    assert [entry.species_name for entry in entries] == ["pikachu", "custom"]


@pytest.mark.asyncio
async def test_list_roster_skips_details_for_unknown_species(store: RosterStore) -> None:
    await store.capture(USER, 9999, "custom")

    entries = await store.list_roster(USER)

    assert entries[0].details is None


# ==============================================================================
# End-to-end roster flows
# ==============================================================================


@pytest.mark.asyncio
async def test_fresh_user_captures_into_alpha(store: RosterStore) -> None:
    await store.capture(USER, 25, "pikachu", team=Team.ALPHA)

    entries = await store.list_roster(USER)

    assert len(entries) == 1
    assert [entry.team for entry in entries] == [Team.ALPHA]


@pytest.mark.asyncio
async def test_rejected_seventh_capture_leaves_roster_unchanged(store: RosterStore) -> None:
    await _fill(store, Team.ALPHA, range(1, TEAM_CAPACITY + 1))

    with pytest.raises(TeamFullError):
        await store.capture(USER, 7, "squirtle", team=Team.ALPHA)

    assert len(await store.list_roster(USER)) == TEAM_CAPACITY


@pytest.mark.asyncio
async def test_capture_then_release_restores_roster(store: RosterStore) -> None:
    await store.capture(USER, 25, "pikachu")
    before = await store.list_roster(USER)

    entry = await store.capture(USER, 133, "eevee", team=Team.BETA)
    await store.release(USER, entry.id)

    assert await store.list_roster(USER) == before
