"""SQLAlchemy implementation of RosterRepository.

Serves PostgreSQL on the remote service and SQLite in the local fallback.
"""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pokedex_lite.domain.errors import DuplicateSpeciesError
from pokedex_lite.domain.roster import NewRosterEntry, RosterEntry, Team
from pokedex_lite.infra.db.models.roster_entry import RosterEntryRow
from pokedex_lite.ports.roster_repository import RosterRepository


class SqlAlchemyRosterRepository(RosterRepository):
    """
    SQLAlchemy implementation of RosterRepository.

    - Every query is filtered by user_id (ownership)
    - Entries are returned in id order, which is capture order
    - Converts RosterEntryRow (infrastructure) to RosterEntry (domain)
    - Commit is left to the session owner (get_session)
    - A unique-constraint violation on add raises DuplicateSpeciesError
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def list_for_user(self, user_id: int) -> list[RosterEntry]:
        query = (
            select(RosterEntryRow)
            .where(RosterEntryRow.user_id == user_id)
            .order_by(RosterEntryRow.id)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get(self, user_id: int, entry_id: int) -> RosterEntry | None:
        row = self._get_row(user_id, entry_id)
        return self._to_domain(row) if row else None

    def add(self, entry: NewRosterEntry) -> RosterEntry:
        row = RosterEntryRow(
            user_id=entry.user_id,
            species_id=entry.species_id,
            species_name=entry.species_name,
            note=entry.note,
            team=entry.team.value,
            captured_at=entry.captured_at,
        )
        self._session.add(row)
        # Flush to get the generated id
        try:
            self._session.flush()
        except IntegrityError as exc:
            # Another process captured the same species between check and write
            self._session.rollback()
            raise DuplicateSpeciesError(entry.species_id) from exc
        return self._to_domain(row)

    def save(self, entry: RosterEntry) -> RosterEntry:
        row = self._get_row(entry.user_id, entry.id)
        if row is None:
            raise KeyError(entry.id)
        row.note = entry.note
        row.team = entry.team.value
        self._session.flush()
        return self._to_domain(row)

    def delete(self, user_id: int, entry_id: int) -> bool:
        result = self._session.execute(
            delete(RosterEntryRow).where(
                RosterEntryRow.id == entry_id,
                RosterEntryRow.user_id == user_id,
            )
        )
        return bool(result.rowcount)

    def commit(self) -> None:
        self._session.commit()

    def _get_row(self, user_id: int, entry_id: int) -> RosterEntryRow | None:
        query = select(RosterEntryRow).where(
            RosterEntryRow.id == entry_id,
            RosterEntryRow.user_id == user_id,
        )
        return self._session.execute(query).scalar_one_or_none()

    def _to_domain(self, row: RosterEntryRow) -> RosterEntry:
        """
        Convert database model (RosterEntryRow) to domain entity (RosterEntry).

        SQLite drops tzinfo on round-trip; stored values are always UTC.
        """
        captured_at = row.captured_at
        if captured_at.tzinfo is None:
            captured_at = captured_at.replace(tzinfo=timezone.utc)
        return RosterEntry(
            id=row.id,
            user_id=row.user_id,
            species_id=row.species_id,
            species_name=row.species_name,
            team=Team(row.team),
            captured_at=captured_at,
            note=row.note,
        )
