from pokedex_lite.infra.db.models.base import Base
from pokedex_lite.infra.db.models.roster_entry import RosterEntryRow
from pokedex_lite.infra.db.models.user import UserRow

__all__ = ["Base", "RosterEntryRow", "UserRow"]
