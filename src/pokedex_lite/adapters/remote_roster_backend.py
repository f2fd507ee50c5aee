"""HTTP client for the remote roster service.

Speaks to ``pokedex_lite.entrypoints.http`` and turns its structured error
responses back into the domain error classes the local backend raises.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx

from pokedex_lite.domain.errors import (
    DomainError,
    DuplicateSpeciesError,
    NotFoundError,
    RosterEntryNotFoundError,
    SourceUnavailableError,
    SpeciesNotFoundError,
    TeamFullError,
    UnauthorizedError,
    ValidationError,
)
from pokedex_lite.domain.roster import TEAM_CAPACITY, RosterEntry, Team
from pokedex_lite.domain.species import (
    BaseStats,
    CatalogEntry,
    CatalogFilters,
    CatalogPage,
    Paging,
    SpeciesDetail,
)
from pokedex_lite.ports.roster_backend import ProbedRosterBackend

logger = logging.getLogger(__name__)

USER_HEADER = "X-User-Id"


class RemoteRosterBackend(ProbedRosterBackend):
    """
    RosterBackend served by the remote HTTP service.

    - Invariants are enforced server side by the same RosterStore
    - Error payloads ``{"detail", "code", "context"}`` are mapped back to
      domain errors by code
    - Transport failures and 5xx responses raise SourceUnavailableError
    """

    def __init__(self, client: httpx.AsyncClient, probe_timeout: float = 1.0) -> None:
        """
        Initialize the backend.

        Args:
            client: AsyncClient whose base_url points at the roster service
            probe_timeout: Seconds allowed for the liveness probe
        """
        self._client = client
        self._probe_timeout = probe_timeout

    async def probe(self) -> bool:
        """Return True if the service answers GET /health in time."""
        try:
            response = await self._client.get("/health", timeout=self._probe_timeout)
        except httpx.HTTPError as exc:
            logger.debug("Liveness probe failed", extra={"error_type": type(exc).__name__})
            return False
        return response.status_code == 200

    async def query_catalog(self, filters: CatalogFilters, paging: Paging) -> CatalogPage:
        params: dict[str, Any] = {"offset": paging.offset, "limit": paging.limit}
        if filters.generation:
            params["generation"] = filters.generation
        if filters.type:
            params["type"] = filters.type
        if filters.search:
            params["search"] = filters.search

        data = await self._request("GET", "/v1/species", params=params)
        return CatalogPage(
            total=data["total"],
            entries=[_catalog_entry(item) for item in data["species"]],
        )

    async def get_species_detail(self, id_or_name: str) -> SpeciesDetail:
        data = await self._request("GET", f"/v1/species/{id_or_name}")
        stats = data["stats"]
        return SpeciesDetail(
            id=data["id"],
            name=data["name"],
            image=data.get("image"),
            types=tuple(data["types"]),
            height=data["height"],
            weight=data["weight"],
            abilities=tuple(data["abilities"]),
            stats=BaseStats(
                hp=stats["hp"],
                attack=stats["attack"],
                defense=stats["defense"],
                special_attack=stats["special_attack"],
                special_defense=stats["special_defense"],
                speed=stats["speed"],
            ),
        )

    async def list_roster(self, user_id: int) -> list[RosterEntry]:
        data = await self._request("GET", "/v1/roster", user_id=user_id)
        return [_roster_entry(item) for item in data["entries"]]

    async def capture(
        self,
        user_id: int,
        species_id: int,
        species_name: str,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        payload: dict[str, Any] = {"species_id": species_id, "species_name": species_name}
        if note is not None:
            payload["note"] = note
        if team is not None:
            payload["team"] = team.value

        data = await self._request("POST", "/v1/roster", user_id=user_id, json=payload)
        return _roster_entry(data)

    async def update(
        self,
        user_id: int,
        entry_id: int,
        note: str | None = None,
        team: Team | None = None,
    ) -> RosterEntry:
        payload: dict[str, Any] = {}
        if note is not None:
            payload["note"] = note
        if team is not None:
            payload["team"] = team.value

        data = await self._request(
            "PATCH", f"/v1/roster/{entry_id}", user_id=user_id, json=payload
        )
        return _roster_entry(data)

    async def release(self, user_id: int, entry_id: int) -> None:
        await self._request("DELETE", f"/v1/roster/{entry_id}", user_id=user_id)

    async def _request(
        self,
        method: str,
        path: str,
        user_id: int | None = None,
        **kwargs: Any,
    ) -> Any:
        headers = {USER_HEADER: str(user_id)} if user_id is not None else None
        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "Roster service request failed",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise SourceUnavailableError("Roster service is unavailable") from exc

        if response.is_error:
            raise error_from_response(response)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def error_from_response(response: httpx.Response) -> DomainError:
    """Rebuild the domain error described by a structured error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    code = payload.get("code")
    detail = payload.get("detail") or response.reason_phrase or "Request failed"
    context = payload.get("context") or {}

    if code == "DUPLICATE_SPECIES":
        return DuplicateSpeciesError(int(context.get("species_id", 0)))
    if code == "TEAM_FULL":
        return TeamFullError(
            str(context.get("team", "")), int(context.get("capacity", TEAM_CAPACITY))
        )
    if code == "SPECIES_NOT_FOUND":
        return SpeciesNotFoundError(str(context.get("identifier", "")))
    if code == "NOT_FOUND":
        identifier = context.get("identifier")
        if context.get("resource") == "RosterEntry" and identifier is not None:
            return RosterEntryNotFoundError(int(identifier))
        return NotFoundError(str(context.get("resource", "Resource")), identifier)
    if code == "VALIDATION_ERROR":
        return ValidationError(detail, errors=payload.get("errors"))
    if code == "UNAUTHORIZED":
        return UnauthorizedError(detail)
    if code == "SOURCE_UNAVAILABLE" or response.status_code >= 500:
        return SourceUnavailableError(detail, status_code=response.status_code)
    return DomainError(detail, status_code=response.status_code)


def _catalog_entry(item: dict[str, Any]) -> CatalogEntry:
    return CatalogEntry(
        id=item["id"],
        name=item["name"],
        image=item.get("image"),
        types=tuple(item.get("types", ())),
    )


def _roster_entry(item: dict[str, Any]) -> RosterEntry:
    details = item.get("details")
    return RosterEntry(
        id=item["id"],
        user_id=item["user_id"],
        species_id=item["species_id"],
        species_name=item["species_name"],
        team=Team(item["team"]),
        captured_at=datetime.fromisoformat(item["captured_at"]),
        note=item.get("note"),
        details=_catalog_entry(details) if details else None,
    )
