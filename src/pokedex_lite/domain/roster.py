"""Roster entities and the invariants every roster backend enforces.

Both the remote service and the local fallback call ``ensure_can_capture``
and ``ensure_can_move`` against the entries they just read, so the two
backends cannot drift apart on capacity or uniqueness rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable

from pokedex_lite.domain.errors import DuplicateSpeciesError, TeamFullError
from pokedex_lite.domain.species import CatalogEntry

TEAM_CAPACITY = 6


class Team(str, Enum):
    PERSONAL = "Personal"
    ALPHA = "Alpha"
    BETA = "Beta"
    GAMMA = "Gamma"
    DELTA = "Delta"
    OMEGA = "Omega"


DEFAULT_TEAM = Team.PERSONAL


@dataclass(frozen=True, slots=True)
class User:
    id: int
    email: str
    name: str


DEFAULT_USER = User(id=1, email="trainer@pokemon.com", name="Red Trainer")


@dataclass(frozen=True, slots=True)
class RosterEntry:
    id: int
    user_id: int
    species_id: int
    species_name: str
    team: Team
    captured_at: datetime
    note: str | None = None
    details: CatalogEntry | None = None


@dataclass(frozen=True, slots=True)
class NewRosterEntry:
    """Validated capture waiting for the repository to assign an id."""

    user_id: int
    species_id: int
    species_name: str
    team: Team
    captured_at: datetime
    note: str | None = None


def team_size(entries: Iterable[RosterEntry], team: Team) -> int:
    return sum(1 for entry in entries if entry.team == team)


def ensure_can_capture(entries: list[RosterEntry], species_id: int, team: Team) -> None:
    """
    Check a capture against the user's current roster.

    Raises:
        TeamFullError: If ``team`` already holds TEAM_CAPACITY entries
        DuplicateSpeciesError: If ``species_id`` is already held in any team
    """
    if team_size(entries, team) >= TEAM_CAPACITY:
        raise TeamFullError(team.value, TEAM_CAPACITY)
    if any(entry.species_id == species_id for entry in entries):
        raise DuplicateSpeciesError(species_id)


def ensure_can_move(entries: list[RosterEntry], entry: RosterEntry, destination: Team) -> None:
    """
    Check that ``entry`` may move to ``destination``.

    Staying in the current team is always allowed.

    Raises:
        TeamFullError: If the destination team is at capacity
    """
    if destination == entry.team:
        return
    if team_size(entries, destination) >= TEAM_CAPACITY:
        raise TeamFullError(destination.value, TEAM_CAPACITY)
