"""Builds the persistence gateway used by CLI commands."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from pokedex_lite.adapters.local_roster_backend import LocalRosterBackend
from pokedex_lite.adapters.pokeapi_catalog_source import PokeApiCatalogSource
from pokedex_lite.adapters.remote_roster_backend import RemoteRosterBackend
from pokedex_lite.infra.config import pokeapi_base_url, probe_timeout_seconds, remote_api_url
from pokedex_lite.infra.db.config import local_database_url
from pokedex_lite.infra.http_client import build_async_client
from pokedex_lite.use_cases.persistence_gateway import PersistenceGateway


@asynccontextmanager
async def open_gateway() -> AsyncIterator[PersistenceGateway]:
    """Yield a gateway over the configured remote service and local store."""
    async with build_async_client(remote_api_url()) as remote_client, build_async_client(
        pokeapi_base_url()
    ) as catalog_client:
        remote = RemoteRosterBackend(remote_client, probe_timeout=probe_timeout_seconds())
        local = LocalRosterBackend(local_database_url(), PokeApiCatalogSource(catalog_client))
        yield PersistenceGateway(remote=remote, local=local)
