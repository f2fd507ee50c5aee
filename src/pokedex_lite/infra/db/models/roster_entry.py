from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pokedex_lite.infra.db.models.base import Base


class RosterEntryRow(Base):
    __tablename__ = "roster_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "species_id", name="uq_roster_entries_user_species"),
        # Released ids must never come back on SQLite
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    species_id: Mapped[int] = mapped_column(Integer, nullable=False)
    species_name: Mapped[str] = mapped_column(String(100), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    team: Mapped[str] = mapped_column(String(20), nullable=False)

    captured_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
