"""Schema bootstrap and default user seeding for local stores."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pokedex_lite.domain.roster import DEFAULT_USER, User
from pokedex_lite.infra.db.models import Base, UserRow
from pokedex_lite.infra.db.session import get_engine, get_session

logger = logging.getLogger(__name__)


def seed_default_user(session: Session, user: User = DEFAULT_USER) -> bool:
    """Insert ``user`` unless a row with its id exists. Returns True on insert."""
    if session.get(UserRow, user.id) is not None:
        return False

    session.add(UserRow(id=user.id, email=user.email, name=user.name))
    session.flush()
    logger.info("Seeded default user", extra={"user_id": user.id, "email": user.email})
    return True


def bootstrap_local_store(url: str) -> None:
    """Create tables if missing and seed the default user (idempotent)."""
    Base.metadata.create_all(get_engine(url))
    with get_session(url) as session:
        seed_default_user(session)
