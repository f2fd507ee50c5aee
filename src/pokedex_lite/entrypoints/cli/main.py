"""``pokedex`` command line client.

Every command goes through the PersistenceGateway: the remote service when
it answers the liveness probe, the local store otherwise.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console

from pokedex_lite.domain.errors import DomainError
from pokedex_lite.domain.roster import DEFAULT_USER, Team
from pokedex_lite.domain.species import CatalogFilters, Paging
from pokedex_lite.entrypoints.cli import render
from pokedex_lite.entrypoints.cli.wiring import open_gateway
from pokedex_lite.infra.logging import configure_logging
from pokedex_lite.use_cases.persistence_gateway import OFFLINE_NOTICE, PersistenceGateway

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Browse species and manage your teams.")
species_app = typer.Typer(no_args_is_help=True, help="Species catalog.")
roster_app = typer.Typer(no_args_is_help=True, help="Your roster of captured species.")
app.add_typer(species_app, name="species")
app.add_typer(roster_app, name="roster")

_console = Console()
_err_console = Console(stderr=True)


def _user_option() -> typer.models.OptionInfo:
    return typer.Option(
        DEFAULT_USER.id,
        "--user",
        "-u",
        envvar="POKEDEX_USER_ID",
        help="Trainer id supplied by your session.",
    )


def _run(operation: Callable[[PersistenceGateway], Awaitable[T]]) -> T:
    async def runner() -> T:
        async with open_gateway() as gateway:
            try:
                return await operation(gateway)
            finally:
                if gateway.offline:
                    _err_console.print(f"[yellow]{OFFLINE_NOTICE}[/yellow]")

    try:
        return asyncio.run(runner())
    except DomainError as exc:
        _err_console.print(f"[bold red]{exc.error_code}[/bold red] {exc.message}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    configure_logging(log_level)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    """Run the roster HTTP service."""
    import uvicorn

    uvicorn.run("pokedex_lite.entrypoints.http.app:app", host=host, port=port)


@species_app.command("list")
def list_species(
    generation: Optional[str] = typer.Option(None, "--generation", "-g", help="1-9"),
    type_name: Optional[str] = typer.Option(None, "--type", "-t", help="Type tag, e.g. fire"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Name filter"),
    offset: int = typer.Option(0, min=0),
    limit: int = typer.Option(20, min=1, max=200),
) -> None:
    """Browse the catalog."""
    filters = CatalogFilters(generation=generation, type=type_name, search=search)
    paging = Paging(offset=offset, limit=limit)
    page = _run(lambda gateway: gateway.query_catalog(filters, paging))
    _console.print(render.species_table(page, paging))


@species_app.command("show")
def show_species(id_or_name: str = typer.Argument(..., help="National dex id or name")) -> None:
    """Show one species in detail."""
    detail = _run(lambda gateway: gateway.get_species_detail(id_or_name))
    _console.print(render.species_detail_table(detail))


@roster_app.command("list")
def list_roster(user_id: int = _user_option()) -> None:
    """List captured species by team."""
    entries = _run(lambda gateway: gateway.list_roster(user_id))
    _console.print(render.roster_table(entries))


@roster_app.command("capture")
def capture(
    species_id: int = typer.Argument(..., min=1),
    species_name: str = typer.Argument(...),
    note: Optional[str] = typer.Option(None, "--note", "-n"),
    team: Optional[Team] = typer.Option(None, "--team", "-t", help="Defaults to Personal."),
    user_id: int = _user_option(),
) -> None:
    """Capture a species into one of your teams."""
    entry = _run(
        lambda gateway: gateway.capture(user_id, species_id, species_name, note=note, team=team)
    )
    _console.print(
        f"[green]Captured[/green] {entry.species_name} into {entry.team.value} (entry {entry.id})"
    )


@roster_app.command("update")
def update(
    entry_id: int = typer.Argument(...),
    note: Optional[str] = typer.Option(None, "--note", "-n"),
    team: Optional[Team] = typer.Option(None, "--team", "-t"),
    user_id: int = _user_option(),
) -> None:
    """Change the note or team of an entry."""
    entry = _run(lambda gateway: gateway.update(user_id, entry_id, note=note, team=team))
    _console.print(
        f"[green]Updated[/green] entry {entry.id}: {entry.species_name} in {entry.team.value}"
    )


@roster_app.command("release")
def release(entry_id: int = typer.Argument(...), user_id: int = _user_option()) -> None:
    """Release an entry."""
    _run(lambda gateway: gateway.release(user_id, entry_id))
    _console.print(f"[green]Released[/green] entry {entry_id}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
