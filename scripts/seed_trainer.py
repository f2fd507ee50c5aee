#!/usr/bin/env python3
"""
Seed the default trainer and a demo roster into DATABASE_URL.

Features:
- Idempotent: safe to run multiple times (the demo roster is replaced)
- Demo roster respects team capacity and species uniqueness

Usage:
    alembic upgrade head
    python scripts/seed_trainer.py
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pokedex_lite.domain.roster import DEFAULT_USER, TEAM_CAPACITY, Team
from pokedex_lite.infra.db.models import RosterEntryRow
from pokedex_lite.infra.db.seed import seed_default_user
from pokedex_lite.infra.db.session import get_session


# ==============================================================================
# Demo roster: (species_id, species_name, team)
# ==============================================================================

DEMO_ROSTER = [
    (1, "bulbasaur", Team.ALPHA),
    (4, "charmander", Team.ALPHA),
    (7, "squirtle", Team.ALPHA),
    (25, "pikachu", Team.PERSONAL),
    (133, "eevee", Team.BETA),
    (143, "snorlax", Team.BETA),
]


def seed_trainer() -> None:
    """Insert the default trainer and replace their roster with DEMO_ROSTER."""
    for team in Team:
        size = sum(1 for _, _, entry_team in DEMO_ROSTER if entry_team == team)
        if size > TEAM_CAPACITY:
            raise ValueError(f"Demo roster puts {size} entries in {team.value}")

    print(f"🌱 Seeding trainer {DEFAULT_USER.email}...")

    with get_session() as session:
        if seed_default_user(session):
            print(f"   Created user {DEFAULT_USER.id} ({DEFAULT_USER.name})")
        else:
            print("   User already present")

        print("🗑️  Clearing existing roster...")
        deleted_count = (
            session.query(RosterEntryRow)
            .filter(RosterEntryRow.user_id == DEFAULT_USER.id)
            .delete()
        )
        print(f"   Deleted {deleted_count} existing entries")

        now = datetime.now(timezone.utc)
        rows = [
            RosterEntryRow(
                user_id=DEFAULT_USER.id,
                species_id=species_id,
                species_name=species_name,
                team=team.value,
                captured_at=now,
            )
            for species_id, species_name, team in DEMO_ROSTER
        ]
        session.add_all(rows)
        session.flush()

        print(f"✅ Seeded {len(rows)} roster entries")
        for row in rows:
            print(f"   #{row.species_id} {row.species_name} → {row.team}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_trainer()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
