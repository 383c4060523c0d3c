"""CLI `d2-platform` (Typer + Rich).

Por qué la CLI es fina:
- Toda la lógica vive en el cliente y en `core.services`; aquí solo se
  parsean argumentos, se arranca el event loop y se pinta el resultado.
- Los errores de la librería (`BungieError`) se muestran en un panel y
  terminan con código 1; cualquier otro error es un bug y se propaga.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.bungie_client import BungieClient, BungieClientBuilder
from adapters.json_exporter import export_models_json
from cli import doctor
from cli.ui_components import (
    build_cards_table,
    build_error_panel,
    build_manifest_table,
    build_player_panel,
    print_banner,
)
from core.config import BungieSettings, load_settings
from core.domain.destiny import DestinyManifest
from core.domain.enums import BungieMembershipType
from core.domain.user import UserInfoCard
from core.errors import BungieError, ConfigurationError
from core.logging import configure_logging
from core.services.player_lookup import PlayerSummary, find_players, parse_bungie_name, summarize_players

app = typer.Typer(
    name="d2-platform",
    no_args_is_help=True,
    help="Bungie.net Destiny 2 API from the command line.",
)
app.add_typer(doctor.app, name="doctor")
app.command(name="setup")(doctor.setup)

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
    json_logs: Optional[bool] = typer.Option(None, "--json-logs/--console-logs", help="Log format."),
) -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
    )


def _build_client(settings: BungieSettings) -> BungieClient:
    return BungieClientBuilder.from_settings(settings).build()


def _run(coro_factory):
    """Ejecuta una corrutina de la librería y traduce `BungieError` a exit 1."""

    try:
        return asyncio.run(coro_factory())
    except BungieError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


@app.command()
def manifest(
    as_json: bool = typer.Option(False, "--json", help="Print the raw manifest as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the manifest to a JSON file."),
) -> None:
    """Show the current Destiny manifest version and content paths."""

    settings = load_settings()

    async def _fetch() -> DestinyManifest:
        async with _build_client(settings) as client:
            return await client.destiny2.get_destiny_manifest()

    result: DestinyManifest = _run(_fetch)
    if output is not None:
        export_models_json(models=result, output_path=output)
        _console.print(f"[green]Saved manifest to:[/green] {output}")
    if as_json:
        typer.echo(json.dumps(result.to_wire(), ensure_ascii=False, indent=2))
        return
    _console.print(build_manifest_table(result, locale=settings.default_locale.value))


def _validate_bungie_name(value: str) -> str:
    try:
        parse_bungie_name(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value


def _validate_platform(value: int) -> BungieMembershipType:
    try:
        return BungieMembershipType(value)
    except ValueError as exc:
        valid = ", ".join(str(int(member)) for member in BungieMembershipType)
        raise typer.BadParameter(f"{value} is not a membership type (valid: {valid})") from exc


@app.command()
def search(
    bungie_name: str = typer.Argument(..., callback=_validate_bungie_name, help="Bungie Name, e.g. 'Guardian#0123'."),
    platform: int = typer.Option(
        int(BungieMembershipType.ALL),
        "--platform",
        callback=_validate_platform,
        help="BungieMembershipType to search (-1 = all).",
    ),
) -> None:
    """Find Destiny memberships by exact Bungie Name."""

    settings = load_settings()

    async def _search() -> list[UserInfoCard]:
        async with _build_client(settings) as client:
            return await find_players(client, bungie_name, platform)

    cards: list[UserInfoCard] = _run(_search)
    if not cards:
        _console.print(f"[yellow]No players found for[/yellow] {bungie_name}")
        raise typer.Exit(code=1)
    _console.print(build_cards_table(cards))


@app.command()
def profile(
    bungie_name: str = typer.Argument(..., callback=_validate_bungie_name, help="Bungie Name, e.g. 'Guardian#0123'."),
    platform: int = typer.Option(
        int(BungieMembershipType.ALL),
        "--platform",
        callback=_validate_platform,
        help="BungieMembershipType to search (-1 = all).",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the profiles to a JSON file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
) -> None:
    """Summarize the profiles and characters behind a Bungie Name."""

    settings = load_settings()

    async def _summaries() -> list[PlayerSummary]:
        async with _build_client(settings) as client:
            return await summarize_players(client, bungie_name, platform)

    summaries: list[PlayerSummary] = _run(_summaries)
    if not summaries:
        _console.print(f"[yellow]No players found for[/yellow] {bungie_name}")
        raise typer.Exit(code=1)

    if not no_banner:
        print_banner(_console)
    for summary in summaries:
        _console.print(build_player_panel(summary))
    if output is not None:
        export_models_json(models=[s.profile for s in summaries], output_path=output)
        _console.print(f"[green]Saved profiles to:[/green] {output}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
