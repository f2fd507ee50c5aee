"""Rich renderables for CLI output."""

from __future__ import annotations

from rich.table import Table

from pokedex_lite.domain.roster import TEAM_CAPACITY, RosterEntry, Team
from pokedex_lite.domain.species import CatalogPage, Paging, SpeciesDetail


def species_table(page: CatalogPage, paging: Paging) -> Table:
    last = min(paging.offset + len(page.entries), page.total)
    table = Table(
        title="Species",
        caption=f"{paging.offset + 1 if page.entries else 0}-{last} of {page.total}",
    )
    table.add_column("#", justify="right", style="bright_green", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Types", style="cyan")

    for entry in page.entries:
        table.add_row(str(entry.id), entry.name, " / ".join(entry.types))
    return table


def species_detail_table(detail: SpeciesDetail) -> Table:
    table = Table(title=f"#{detail.id} {detail.name}", show_header=False)
    table.add_column("Field", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Types", " / ".join(detail.types))
    table.add_row("Height", str(detail.height))
    table.add_row("Weight", str(detail.weight))
    table.add_row("Abilities", ", ".join(detail.abilities))
    stats = detail.stats
    table.add_row("HP", str(stats.hp))
    table.add_row("Attack", str(stats.attack))
    table.add_row("Defense", str(stats.defense))
    table.add_row("Sp. Attack", str(stats.special_attack))
    table.add_row("Sp. Defense", str(stats.special_defense))
    table.add_row("Speed", str(stats.speed))
    if detail.image:
        table.add_row("Image", detail.image)
    return table


def roster_table(entries: list[RosterEntry]) -> Table:
    table = Table(title="Roster", caption=_team_summary(entries))
    table.add_column("Entry", justify="right", style="dim", no_wrap=True)
    table.add_column("Team", style="magenta")
    table.add_column("#", justify="right", style="bright_green")
    table.add_column("Species", style="white")
    table.add_column("Types", style="cyan")
    table.add_column("Note", style="dim")
    table.add_column("Captured", style="dim")

    for entry in entries:
        types = " / ".join(entry.details.types) if entry.details else "-"
        table.add_row(
            str(entry.id),
            entry.team.value,
            str(entry.species_id),
            entry.species_name,
            types,
            entry.note or "",
            entry.captured_at.strftime("%Y-%m-%d %H:%M"),
        )
    return table


def _team_summary(entries: list[RosterEntry]) -> str:
    parts = []
    for team in Team:
        size = sum(1 for entry in entries if entry.team == team)
        if size:
            parts.append(f"{team.value} {size}/{TEAM_CAPACITY}")
    return ", ".join(parts)
