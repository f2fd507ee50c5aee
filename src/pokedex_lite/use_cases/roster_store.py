from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from pokedex_lite.domain.errors import DomainError, RosterEntryNotFoundError
from pokedex_lite.domain.roster import (
    DEFAULT_TEAM,
    NewRosterEntry,
    RosterEntry,
    Team,
    ensure_can_capture,
    ensure_can_move,
)
from pokedex_lite.ports.catalog_source import CatalogSource
from pokedex_lite.ports.roster_repository import RosterRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserLocks:
    """One asyncio.Lock per user id; mutations for a user run one at a time."""

    def __init__(self) -> None:
        self._locks: defaultdict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    def for_user(self, user_id: int) -> asyncio.Lock:
        return self._locks[user_id]


class RosterStore:
    """
    Per-user roster with team capacity and global species uniqueness.

    Repository calls run in worker threads so blocking database IO never
    stalls the event loop. Every mutation re-reads the user's entries and
    runs the shared checks from ``pokedex_lite.domain.roster`` while holding
    the user's lock, so check and write stay atomic across those awaits with
    respect to other mutations for the same user in this process. Reads take
    no lock.
    """

    def __init__(
        self,
        repository: RosterRepository,
        catalog_source: CatalogSource,
        locks: UserLocks,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._source = catalog_source
        self._locks = locks
        self._clock = clock

    async def list_roster(self, user_id: int) -> list[RosterEntry]:
        """
        Return the user's entries in capture order, enriched with catalog detail.

        An entry whose detail lookup fails is returned with ``details=None``.
        """
        entries = await asyncio.to_thread(self._repository.list_for_user, user_id)
        return list(await asyncio.gather(*(self._with_details(entry) for entry in entries)))

    async def capture(
        self,
        user_id: int,
        species_id: int,
        species_name: str,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        """
        Add a species to one of the user's teams.

        Raises:
            TeamFullError: If the destination team already holds 6 entries
            DuplicateSpeciesError: If the user already holds this species
        """
        destination = team or DEFAULT_TEAM
        async with self._locks.for_user(user_id):
            entries = await asyncio.to_thread(self._repository.list_for_user, user_id)
            ensure_can_capture(entries, species_id, destination)
            entry = await asyncio.to_thread(
                self._repository.add,
                NewRosterEntry(
                    user_id=user_id,
                    species_id=species_id,
                    species_name=species_name,
                    team=destination,
                    captured_at=self._clock(),
                    note=note,
                ),
            )
            await asyncio.to_thread(self._repository.commit)

        logger.info(
            "Species captured",
            extra={
                "user_id": user_id,
                "entry_id": entry.id,
                "species_id": species_id,
                "team": destination.value,
            },
        )
        return entry

    async def update(
        self,
        user_id: int,
        entry_id: int,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        """
        Change the note and/or team of an entry. Omitted fields are kept.

        Raises:
            RosterEntryNotFoundError: If the entry does not belong to the user
            TeamFullError: If moving to a different team that is full
        """
        async with self._locks.for_user(user_id):
            entry = await asyncio.to_thread(self._repository.get, user_id, entry_id)
            if entry is None:
                raise RosterEntryNotFoundError(entry_id)

            if team is not None:
                entries = await asyncio.to_thread(self._repository.list_for_user, user_id)
                ensure_can_move(entries, entry, team)

            changed = replace(
                entry,
                note=note if note is not None else entry.note,
                team=team if team is not None else entry.team,
            )
            saved = await asyncio.to_thread(self._repository.save, changed)
            await asyncio.to_thread(self._repository.commit)
            return saved

    async def release(self, user_id: int, entry_id: int) -> None:
        """
        Remove an entry from the user's roster.

        Raises:
            RosterEntryNotFoundError: If the entry does not belong to the user
                (including a second release of the same id)
        """
        async with self._locks.for_user(user_id):
            if not await asyncio.to_thread(self._repository.delete, user_id, entry_id):
                raise RosterEntryNotFoundError(entry_id)
            await asyncio.to_thread(self._repository.commit)

        logger.info("Species released", extra={"user_id": user_id, "entry_id": entry_id})

    async def _with_details(self, entry: RosterEntry) -> RosterEntry:
        try:
            detail = await self._source.get_detail(str(entry.species_id))
        except DomainError as exc:
            logger.warning(
                "Roster entry returned without details",
                extra={
                    "entry_id": entry.id,
                    "species_id": entry.species_id,
                    "error_code": exc.error_code,
                },
            )
            return entry
        return replace(entry, details=detail.to_entry())
