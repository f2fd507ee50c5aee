"""Shared catalog fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from pokedex_lite.adapters.in_memory_catalog_source import InMemoryCatalogSource
from pokedex_lite.domain.species import BaseStats, SpeciesDetail

SpeciesFactory = Callable[..., SpeciesDetail]

# (id, name, types)
KANTO_AND_FRIENDS = [
    (1, "bulbasaur", ("grass", "poison")),
    (2, "ivysaur", ("grass", "poison")),
    (3, "venusaur", ("grass", "poison")),
    (4, "charmander", ("fire",)),
    (5, "charmeleon", ("fire",)),
    (6, "charizard", ("fire", "flying")),
    (7, "squirtle", ("water",)),
    (25, "pikachu", ("electric",)),
    (37, "vulpix", ("fire",)),
    (38, "ninetales", ("fire",)),
    (58, "growlithe", ("fire",)),
    (59, "arcanine", ("fire",)),
    (77, "ponyta", ("fire",)),
    (78, "rapidash", ("fire",)),
    (126, "magmar", ("fire",)),
    (133, "eevee", ("normal",)),
    (136, "flareon", ("fire",)),
    (143, "snorlax", ("normal",)),
    (146, "moltres", ("fire", "flying")),
    (150, "mewtwo", ("psychic",)),
    (152, "chikorita", ("grass",)),
    (155, "cyndaquil", ("fire",)),
    (255, "torchic", ("fire",)),
]


@pytest.fixture
def make_species() -> SpeciesFactory:
    """Build a SpeciesDetail with plausible defaults."""

    def factory(species_id: int, name: str, types: tuple[str, ...] = ("normal",)) -> SpeciesDetail:
        return SpeciesDetail(
            id=species_id,
            name=name,
            image=f"https://img.example/{species_id}.png",
            types=types,
            height=7,
            weight=69,
            abilities=("overgrow",),
            stats=BaseStats(
                hp=45,
                attack=49,
                defense=49,
                special_attack=65,
                special_defense=65,
                speed=45,
            ),
        )

    return factory


@pytest.fixture
def catalog_species(make_species: SpeciesFactory) -> list[SpeciesDetail]:
    return [make_species(sid, name, types) for sid, name, types in KANTO_AND_FRIENDS]


@pytest.fixture
def catalog_source(catalog_species: list[SpeciesDetail]) -> InMemoryCatalogSource:
    return InMemoryCatalogSource(catalog_species)
