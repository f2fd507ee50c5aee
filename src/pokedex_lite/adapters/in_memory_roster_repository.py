from __future__ import annotations

from dataclasses import replace
from itertools import count

from pokedex_lite.domain.roster import NewRosterEntry, RosterEntry
from pokedex_lite.ports.roster_repository import RosterRepository


class InMemoryRosterRepository(RosterRepository):
    """
    Canonical contract implementation for tests.

    - Stores entries in insertion order
    - Identifiers come from a monotonic counter and are never reused
    - Ownership is enforced on every lookup
    """

    def __init__(self) -> None:
        self._entries: list[RosterEntry] = []
        self._ids = count(1)

    def list_for_user(self, user_id: int) -> list[RosterEntry]:
        return [entry for entry in self._entries if entry.user_id == user_id]

    def get(self, user_id: int, entry_id: int) -> RosterEntry | None:
        for entry in self._entries:
            if entry.id == entry_id and entry.user_id == user_id:
                return entry
        return None

    def add(self, entry: NewRosterEntry) -> RosterEntry:
        stored = RosterEntry(
            id=next(self._ids),
            user_id=entry.user_id,
            species_id=entry.species_id,
            species_name=entry.species_name,
            team=entry.team,
            captured_at=entry.captured_at,
            note=entry.note,
        )
        self._entries.append(stored)
        return stored

    def save(self, entry: RosterEntry) -> RosterEntry:
        for index, existing in enumerate(self._entries):
            if existing.id == entry.id and existing.user_id == entry.user_id:
                stored = replace(existing, note=entry.note, team=entry.team)
                self._entries[index] = stored
                return stored
        raise KeyError(entry.id)

    def delete(self, user_id: int, entry_id: int) -> bool:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id and entry.user_id == user_id:
                del self._entries[index]
                return True
        return False

    def commit(self) -> None:
        pass
