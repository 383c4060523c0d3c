"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.destiny import DestinyManifest
from core.domain.enums import BungieMembershipType
from core.domain.user import UserInfoCard
from core.errors import BungieError, RemoteError
from core.services.player_lookup import PlayerSummary


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("D2-PLATFORM", style="bold cyan")
    subtitle = Text("Bungie.net • Destiny 2 API", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _platform_label(membership_type: BungieMembershipType) -> str:
    return membership_type.name.replace("TIGER_", "").replace("_", " ").title()


def build_cards_table(cards: Sequence[UserInfoCard]) -> Table:
    """Tabla de membresías encontradas por una búsqueda."""

    table = Table(title="Destiny Memberships")
    table.add_column("Bungie Name", style="cyan", no_wrap=True)
    table.add_column("Platform", style="white")
    table.add_column("Membership ID", style="magenta")
    table.add_column("Cross save", style="dim")
    for card in cards:
        cross_save = "-"
        if card.cross_save_override != BungieMembershipType.NONE:
            cross_save = _platform_label(card.cross_save_override)
        table.add_row(
            card.bungie_name or card.display_name or "?",
            _platform_label(card.membership_type),
            str(card.membership_id),
            cross_save,
        )
    return table


def build_player_panel(summary: PlayerSummary) -> Panel:
    """Panel con el resumen de un perfil y sus personajes."""

    card = summary.card
    body = Text()
    body.append(f"{_platform_label(card.membership_type)} · {card.membership_id}\n", style="dim")

    profile = summary.profile.profile.data if summary.profile.profile else None
    if profile is not None and profile.date_last_played:
        body.append(f"Last played: {profile.date_last_played:%Y-%m-%d %H:%M}\n")

    if not summary.characters:
        body.append("No visible characters (private profile?)\n", style="yellow")
    for character in sorted(summary.characters, key=lambda c: c.light, reverse=True):
        body.append(f"- {character.class_type.name.title():<8}", style="bold")
        body.append(f" light {character.light:>4}")
        body.append(f"  {int(character.minutes_played_total) // 60}h played\n", style="dim")

    title = Text(card.bungie_name or card.display_name or "Player", style="bold green")
    return Panel(body, title=title, border_style="green")


def build_manifest_table(manifest: DestinyManifest, *, locale: str) -> Table:
    table = Table(title=f"Destiny Manifest {manifest.version or '?'}")
    table.add_column("Content", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_row("SQLite (mobile)", manifest.mobile_world_content_paths.get(locale, "-"))
    table.add_row("JSON", manifest.json_world_content_paths.get(locale, "-"))
    table.add_row("Clan banners", manifest.mobile_clan_banner_database_path or "-")
    return table


def build_error_panel(error: BungieError) -> Panel:
    """Panel de error legible; incluye el código del vendor si lo hay."""

    body = Text(str(error) if isinstance(error, RemoteError) else error.message)
    if isinstance(error, RemoteError) and error.throttle_seconds:
        body.append(f"\nRetry after {error.throttle_seconds}s", style="dim")
    return Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red")
