from __future__ import annotations

import os
from pathlib import Path


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def local_database_url() -> str:
    """SQLite file used when the remote service is unreachable."""
    url = os.getenv("LOCAL_DATABASE_URL")
    if url:
        return url

    path = Path.home() / ".pokedex_lite" / "roster.db"
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{path}"
