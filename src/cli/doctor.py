"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.bungie_client import BungieClientBuilder
from core.config import BungieSettings, get_user_env_file, load_settings, read_user_env_vars, write_user_env_vars
from core.errors import BungieError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: BungieSettings) -> tuple[bool, str]:
    """Llama a `/Destiny2/Manifest/` con la configuración actual."""

    try:
        async with BungieClientBuilder.from_settings(settings).build() as client:
            manifest = await client.destiny2.get_destiny_manifest()
    except BungieError as exc:
        return False, str(exc)
    return True, f"manifest {manifest.version}"


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the live API call."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="D2-Platform Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_key:
        table.add_row("API key", "OK", f"…{settings.api_key[-4:]}")
    else:
        table.add_row("API key", "MISSING", "Run `d2-platform setup`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Locale", "OK", f"{settings.default_locale.label()} ({settings.default_locale.value})")
    if settings.oauth_client_id is not None:
        secret = "confidential" if settings.oauth_client_secret else "public"
        table.add_row("OAuth client", "OK", f"{settings.oauth_client_id} ({secret})")
    else:
        table.add_row("OAuth client", "OPTIONAL", "Only needed for authorized endpoints")
    user_vars = read_user_env_vars()
    table.add_row("User config", f"{len(user_vars)} vars" if user_vars else "NONE", str(get_user_env_file()))

    # Connectivity
    ok_api = False
    if settings.api_key and not offline:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("Bungie API", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("Bungie API", "SKIPPED", "offline" if offline else "no API key")

    _console.print(table)

    if not settings.api_key or (not offline and not ok_api):
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores credentials in the user config .env).

    Designed for non-Python users: no manual .env editing.
    """

    api_key = typer.prompt("Bungie API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    client_id = typer.prompt("OAuth client id (blank to skip)", default="", show_default=False).strip()
    client_secret = ""
    if client_id:
        if not client_id.isdigit():
            raise typer.BadParameter("OAuth client id must be numeric")
        client_secret = typer.prompt(
            "OAuth client secret (blank for public clients)",
            default="",
            show_default=False,
            hide_input=True,
        ).strip()

    env_path = write_user_env_vars(
        {
            "D2_PLATFORM_API_KEY": api_key,
            "D2_PLATFORM_OAUTH_CLIENT_ID": client_id or None,
            "D2_PLATFORM_OAUTH_CLIENT_SECRET": client_secret or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
