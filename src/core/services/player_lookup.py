"""Orquestación de búsquedas de jugadores.

Combina varios endpoints en los flujos que usa la CLI (y cualquier otro
punto de entrada): Bungie Name -> tarjetas de membresía -> perfiles. Sin
efectos de UI; los errores del cliente se propagan sin tocar.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from core.domain.destiny import DestinyCharacterComponent, DestinyProfileResponse
from core.domain.enums import BungieMembershipType, DestinyComponentType
from core.domain.user import ExactSearchRequest, UserInfoCard

if TYPE_CHECKING:
    from adapters.bungie_client import BungieClient

_BUNGIE_NAME_RE = re.compile(r"^(?P<name>.+)#(?P<code>\d{1,4})$")

DEFAULT_PROFILE_COMPONENTS: tuple[DestinyComponentType, ...] = (
    DestinyComponentType.PROFILES,
    DestinyComponentType.CHARACTERS,
)


@dataclass
class PlayerSummary:
    """Perfil de un jugador listo para presentar."""

    card: UserInfoCard
    profile: DestinyProfileResponse
    characters: list[DestinyCharacterComponent] = field(default_factory=list)

    @property
    def highest_light(self) -> int:
        return max((c.light for c in self.characters), default=0)


def parse_bungie_name(bungie_name: str) -> tuple[str, int]:
    """Separa `Nombre#0123` en `("Nombre", 123)`.

    Raises:
        ValueError: si falta el `#`, el nombre está vacío o el código no es
            un número de 1 a 4 dígitos.
    """

    match = _BUNGIE_NAME_RE.match(bungie_name.strip())
    if not match or not match.group("name").strip():
        raise ValueError(f"Invalid Bungie Name {bungie_name!r}; expected 'Name#0123'")
    return match.group("name").strip(), int(match.group("code"))


async def find_players(
    client: BungieClient,
    bungie_name: str,
    membership_type: BungieMembershipType = BungieMembershipType.ALL,
) -> list[UserInfoCard]:
    """Tarjetas de Destiny que coinciden exactamente con un Bungie Name."""

    display_name, code = parse_bungie_name(bungie_name)
    body = ExactSearchRequest(display_name=display_name, display_name_code=code)
    return await client.destiny2.search_destiny_player_by_bungie_name(membership_type, body)


async def load_profiles(
    client: BungieClient,
    cards: Sequence[UserInfoCard],
    components: Sequence[DestinyComponentType] = DEFAULT_PROFILE_COMPONENTS,
) -> list[DestinyProfileResponse]:
    """Descarga el perfil de cada tarjeta en paralelo, respetando el orden.

    Si una descarga falla, la excepción se propaga (sin resultados parciales).
    """

    tasks = [
        client.destiny2.get_profile(card.membership_type, card.membership_id, components)
        for card in cards
    ]
    return list(await asyncio.gather(*tasks))


async def summarize_players(
    client: BungieClient,
    bungie_name: str,
    membership_type: BungieMembershipType = BungieMembershipType.ALL,
) -> list[PlayerSummary]:
    """Bungie Name -> resúmenes con personajes, uno por membresía encontrada."""

    cards = await find_players(client, bungie_name, membership_type)
    profiles = await load_profiles(client, cards)

    summaries: list[PlayerSummary] = []
    for card, profile in zip(cards, profiles):
        characters: list[DestinyCharacterComponent] = []
        if profile.characters is not None:
            characters = list(profile.characters.data.values())
        summaries.append(PlayerSummary(card=card, profile=profile, characters=characters))
    return summaries
