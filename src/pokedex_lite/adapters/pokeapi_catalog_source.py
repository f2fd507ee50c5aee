"""PokeAPI implementation of CatalogSource."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pokedex_lite.domain.errors import SourceUnavailableError, SpeciesNotFoundError
from pokedex_lite.domain.species import BaseStats, SpeciesDetail, SpeciesRef
from pokedex_lite.ports.catalog_source import CatalogSource, SourcePage

logger = logging.getLogger(__name__)


class PokeApiCatalogSource(CatalogSource):
    """
    PokeAPI implementation of CatalogSource.

    - GET /pokemon?limit&offset for native pagination
    - GET /type/{name} for type membership
    - GET /pokemon/{id_or_name} for detail
    - 404 on detail → SpeciesNotFoundError, 404 on type → empty membership
    - Any other HTTP or transport failure → SourceUnavailableError
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize the source with an HTTP client.

        Args:
            client: AsyncClient whose base_url points at the PokeAPI root
        """
        self._client = client

    async def list_page(self, limit: int, offset: int) -> SourcePage:
        data = await self._get_json("/pokemon", params={"limit": limit, "offset": offset})
        try:
            refs = [_ref_from_resource(item) for item in data["results"]]
            return SourcePage(total=int(data["count"]), refs=refs)
        except (KeyError, TypeError, ValueError) as exc:
            raise _malformed("/pokemon", exc) from exc

    async def list_by_type(self, type_name: str) -> list[SpeciesRef]:
        path = f"/type/{type_name.lower()}"
        try:
            data = await self._get_json(path)
        except SpeciesNotFoundError:
            logger.info("Unknown species type", extra={"type": type_name})
            return []
        try:
            return [_ref_from_resource(slot["pokemon"]) for slot in data["pokemon"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise _malformed(path, exc) from exc

    async def get_detail(self, id_or_name: str) -> SpeciesDetail:
        key = str(id_or_name).strip().lower()
        if not key:
            raise SpeciesNotFoundError(key)
        path = f"/pokemon/{key}"
        data = await self._get_json(path, not_found_key=key)
        try:
            return _detail_from_payload(data)
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise _malformed(path, exc) from exc

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        not_found_key: str | None = None,
    ) -> Any:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                raise SpeciesNotFoundError(not_found_key or path) from exc
            logger.warning(
                "Catalog source returned an error status",
                extra={"path": path, "status_code": exc.response.status_code},
            )
            raise SourceUnavailableError(
                "Species catalog is unavailable",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Catalog source request failed",
                extra={"path": path, "error_type": type(exc).__name__},
            )
            raise SourceUnavailableError("Species catalog is unavailable") from exc
        except ValueError as exc:  # Non-JSON body
            raise _malformed(path, exc) from exc


def _malformed(path: str, exc: Exception) -> SourceUnavailableError:
    logger.warning("Malformed catalog payload", extra={"path": path, "error": str(exc)})
    return SourceUnavailableError("Species catalog returned a malformed response")


def _id_from_url(url: str) -> int:
    # https://pokeapi.co/api/v2/pokemon/25/ → 25
    return int(url.rstrip("/").rsplit("/", 1)[-1])


def _ref_from_resource(resource: dict[str, Any]) -> SpeciesRef:
    return SpeciesRef(id=_id_from_url(resource["url"]), name=resource["name"])


def _image_from_sprites(sprites: dict[str, Any]) -> str | None:
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default")


def _detail_from_payload(data: dict[str, Any]) -> SpeciesDetail:
    stats = {slot["stat"]["name"]: int(slot["base_stat"]) for slot in data["stats"]}
    types = sorted(data["types"], key=lambda slot: slot.get("slot", 0))
    return SpeciesDetail(
        id=int(data["id"]),
        name=data["name"],
        image=_image_from_sprites(data.get("sprites") or {}),
        types=tuple(slot["type"]["name"] for slot in types),
        height=int(data["height"]),
        weight=int(data["weight"]),
        abilities=tuple(slot["ability"]["name"] for slot in data["abilities"]),
        stats=BaseStats(
            hp=stats["hp"],
            attack=stats["attack"],
            defense=stats["defense"],
            special_attack=stats["special-attack"],
            special_defense=stats["special-defense"],
            speed=stats["speed"],
        ),
    )
