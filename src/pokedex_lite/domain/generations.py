from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRange:
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, species_id: object) -> bool:
        return isinstance(species_id, int) and self.start <= species_id <= self.end


# Inclusive national dex id ranges. Non-overlapping, covering 1..1025.
GENERATIONS: dict[str, GenerationRange] = {
    "1": GenerationRange(1, 151),
    "2": GenerationRange(152, 251),
    "3": GenerationRange(252, 386),
    "4": GenerationRange(387, 493),
    "5": GenerationRange(494, 649),
    "6": GenerationRange(650, 721),
    "7": GenerationRange(722, 809),
    "8": GenerationRange(810, 905),
    "9": GenerationRange(906, 1025),
}


def generation_range(generation: str) -> GenerationRange | None:
    """Return the id range for a generation identifier, or None if unknown."""
    return GENERATIONS.get(generation)
