from __future__ import annotations

from abc import ABC, abstractmethod

from pokedex_lite.domain.roster import NewRosterEntry, RosterEntry


class RosterRepository(ABC):
    """
    Port for raw roster record storage.

    Repositories only read and write records. Capacity and uniqueness are
    checked by the caller (RosterStore) before any write.

    Contract:
        - list_for_user returns entries in capture order
        - add assigns an identifier that is never reused, even after delete
        - get/delete only see entries owned by ``user_id``
    """

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[RosterEntry]: ...

    @abstractmethod
    def get(self, user_id: int, entry_id: int) -> RosterEntry | None: ...

    @abstractmethod
    def add(self, entry: NewRosterEntry) -> RosterEntry: ...

    @abstractmethod
    def save(self, entry: RosterEntry) -> RosterEntry:
        """Persist note and team of an existing entry."""
        ...

    @abstractmethod
    def delete(self, user_id: int, entry_id: int) -> bool:
        """Remove an entry. Returns False if nothing was removed."""
        ...

    @abstractmethod
    def commit(self) -> None:
        """Make pending writes visible to other sessions."""
        ...
