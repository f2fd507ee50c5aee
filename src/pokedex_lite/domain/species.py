from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from pokedex_lite.domain.errors import ValidationError
from pokedex_lite.domain.generations import GENERATIONS, generation_range

T = TypeVar("T")


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


# ==============================================================================
# Catalog records
# ==============================================================================


@dataclass(frozen=True, slots=True)
class SpeciesRef:
    """Unenriched catalog record as returned by list and type endpoints."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    id: int
    name: str
    image: str | None
    types: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int


@dataclass(frozen=True, slots=True)
class SpeciesDetail:
    id: int
    name: str
    image: str | None
    types: tuple[str, ...]
    height: int
    weight: int
    abilities: tuple[str, ...]
    stats: BaseStats

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry(id=self.id, name=self.name, image=self.image, types=self.types)


@dataclass(frozen=True, slots=True)
class CatalogPage:
    """A page of enriched entries plus the size of the full filtered set."""

    total: int
    entries: list[CatalogEntry] = field(default_factory=list)


# ==============================================================================
# Query parameters
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    generation: str | None = None
    type: str | None = None
    search: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.generation or self.type or self.search)

    def normalized(self) -> CatalogFilters:
        """Strip whitespace, lowercase the type and treat blank values as absent."""
        type_name = _blank_to_none(self.type)
        return CatalogFilters(
            generation=_blank_to_none(self.generation),
            type=type_name.lower() if type_name else None,
            search=_blank_to_none(self.search),
        )

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If the generation identifier is unknown
        """
        if self.generation and generation_range(self.generation) is None:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "generation",
                        "message": f"Must be one of {', '.join(GENERATIONS)}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > 200:
            raise PagingValidationError("limit must be <= 200")

    def slice(self, items: list[T]) -> list[T]:
        return items[self.offset : self.offset + self.limit]


def compose_candidates(
    base: Iterable[SpeciesRef],
    members: Iterable[SpeciesRef] | None = None,
    search: str | None = None,
) -> list[SpeciesRef]:
    """
    Narrow an ordered base set by type membership and name substring.

    Order of ``base`` is preserved. Membership matches on name or id, the
    substring match is case-insensitive.
    """
    candidates = list(base)

    if members is not None:
        member_list = list(members)
        names = {ref.name for ref in member_list}
        ids = {ref.id for ref in member_list}
        candidates = [ref for ref in candidates if ref.name in names or ref.id in ids]

    if search:
        needle = search.lower()
        candidates = [ref for ref in candidates if needle in ref.name.lower()]

    return candidates
