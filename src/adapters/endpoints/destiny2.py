"""Endpoints del área Destiny2.

Por qué un módulo aparte:
- Es el área más grande del vendor (perfiles, manifest, acciones de objetos).
- Las acciones de objetos (`/Actions/Items/...`) requieren bearer token con
  scope de movimiento/equipo; el resto funciona solo con la API key.
"""

from __future__ import annotations

from typing import Sequence

from adapters.endpoints._base import EndpointGroup
from adapters.endpoints._params import path_segment, render_components
from core.domain.destiny import (
    DestinyCharacterResponse,
    DestinyDefinition,
    DestinyEquipItemResults,
    DestinyItemActionRequest,
    DestinyItemResponse,
    DestinyItemSetActionRequest,
    DestinyItemStateRequest,
    DestinyItemTransferRequest,
    DestinyLinkedProfilesResponse,
    DestinyManifest,
    DestinyMilestone,
    DestinyPostGameCarnageReportData,
    DestinyPostmasterTransferRequest,
    DestinyProfileResponse,
    DestinyPublicMilestone,
)
from core.domain.enums import BungieMembershipType, DestinyComponentType
from core.domain.user import ExactSearchRequest, UserInfoCard

Components = Sequence[DestinyComponentType | int]


class Destiny2Endpoints(EndpointGroup):
    # -- Manifest ------------------------------------------------------------

    async def get_destiny_manifest(self, *, access_token: str | None = None) -> DestinyManifest:
        """Versión actual del manifest y rutas a sus bases de datos de contenido."""

        return await self._get("/Destiny2/Manifest/", DestinyManifest, access_token=access_token)

    async def get_destiny_entity_definition(
        self,
        entity_type: str,
        hash_identifier: int,
        *,
        access_token: str | None = None,
    ) -> DestinyDefinition:
        """Una definición estática del manifest.

        `entity_type` es el nombre del tipo sin namespace
        (p.ej. `DestinyInventoryItemDefinition`).
        """

        return await self._get(
            f"/Destiny2/Manifest/{path_segment(entity_type)}/{path_segment(hash_identifier)}/",
            DestinyDefinition,
            access_token=access_token,
        )

    # -- Players & profiles ---------------------------------------------------

    async def search_destiny_player_by_bungie_name(
        self,
        membership_type: BungieMembershipType,
        body: ExactSearchRequest,
        *,
        access_token: str | None = None,
    ) -> list[UserInfoCard]:
        return await self._post(
            f"/Destiny2/SearchDestinyPlayerByBungieName/{path_segment(membership_type)}/",
            list[UserInfoCard],
            body=body,
            access_token=access_token,
        )

    async def get_linked_profiles(
        self,
        membership_type: BungieMembershipType,
        membership_id: int,
        get_all_memberships: bool | None = None,
        *,
        access_token: str | None = None,
    ) -> DestinyLinkedProfilesResponse:
        return await self._get(
            f"/Destiny2/{path_segment(membership_type)}/Profile/{path_segment(membership_id)}/LinkedProfiles/",
            DestinyLinkedProfilesResponse,
            params={"getAllMemberships": get_all_memberships},
            access_token=access_token,
        )

    async def get_profile(
        self,
        membership_type: BungieMembershipType,
        destiny_membership_id: int,
        components: Components,
        *,
        access_token: str | None = None,
    ) -> DestinyProfileResponse:
        """Perfil de Destiny con los componentes pedidos.

        Los componentes no solicitados llegan como None. Los que el usuario
        tiene privados llegan con `privacy=PRIVATE` y sin `data`, salvo que el
        token pertenezca al propio usuario.
        """

        return await self._get(
            f"/Destiny2/{path_segment(membership_type)}/Profile/{path_segment(destiny_membership_id)}/",
            DestinyProfileResponse,
            params={"components": render_components(components)},
            access_token=access_token,
        )

    async def get_character(
        self,
        membership_type: BungieMembershipType,
        destiny_membership_id: int,
        character_id: int,
        components: Components,
        *,
        access_token: str | None = None,
    ) -> DestinyCharacterResponse:
        return await self._get(
            f"/Destiny2/{path_segment(membership_type)}/Profile/{path_segment(destiny_membership_id)}"
            f"/Character/{path_segment(character_id)}/",
            DestinyCharacterResponse,
            params={"components": render_components(components)},
            access_token=access_token,
        )

    async def get_item(
        self,
        membership_type: BungieMembershipType,
        destiny_membership_id: int,
        item_instance_id: int,
        components: Components,
        *,
        access_token: str | None = None,
    ) -> DestinyItemResponse:
        return await self._get(
            f"/Destiny2/{path_segment(membership_type)}/Profile/{path_segment(destiny_membership_id)}"
            f"/Item/{path_segment(item_instance_id)}/",
            DestinyItemResponse,
            params={"components": render_components(components)},
            access_token=access_token,
        )

    # -- Milestones & history -------------------------------------------------

    async def get_clan_weekly_reward_state(
        self,
        group_id: int,
        *,
        access_token: str | None = None,
    ) -> DestinyMilestone:
        return await self._get(
            f"/Destiny2/Clan/{path_segment(group_id)}/WeeklyRewardState/",
            DestinyMilestone,
            access_token=access_token,
        )

    async def get_public_milestones(
        self,
        *,
        access_token: str | None = None,
    ) -> dict[int, DestinyPublicMilestone]:
        """Milestones públicos activos, indexados por `milestoneHash`."""

        return await self._get("/Destiny2/Milestones/", dict[int, DestinyPublicMilestone], access_token=access_token)

    async def get_post_game_carnage_report(
        self,
        activity_id: int,
        *,
        access_token: str | None = None,
    ) -> DestinyPostGameCarnageReportData:
        return await self._get(
            f"/Destiny2/Stats/PostGameCarnageReport/{path_segment(activity_id)}/",
            DestinyPostGameCarnageReportData,
            access_token=access_token,
        )

    # -- Item actions (bearer token required) ---------------------------------

    async def transfer_item(
        self,
        body: DestinyItemTransferRequest,
        *,
        access_token: str | None = None,
    ) -> int:
        """Mueve un objeto entre personaje y depósito. Devuelve el código del vendor."""

        return await self._post("/Destiny2/Actions/Items/TransferItem/", int, body=body, access_token=access_token)

    async def pull_from_postmaster(
        self,
        body: DestinyPostmasterTransferRequest,
        *,
        access_token: str | None = None,
    ) -> int:
        return await self._post(
            "/Destiny2/Actions/Items/PullFromPostmaster/",
            int,
            body=body,
            access_token=access_token,
        )

    async def equip_item(
        self,
        body: DestinyItemActionRequest,
        *,
        access_token: str | None = None,
    ) -> int:
        return await self._post("/Destiny2/Actions/Items/EquipItem/", int, body=body, access_token=access_token)

    async def equip_items(
        self,
        body: DestinyItemSetActionRequest,
        *,
        access_token: str | None = None,
    ) -> DestinyEquipItemResults:
        """Equipa varios objetos; el resultado trae un `equipStatus` por objeto."""

        return await self._post(
            "/Destiny2/Actions/Items/EquipItems/",
            DestinyEquipItemResults,
            body=body,
            access_token=access_token,
        )

    async def set_item_lock_state(
        self,
        body: DestinyItemStateRequest,
        *,
        access_token: str | None = None,
    ) -> int:
        return await self._post("/Destiny2/Actions/Items/SetLockState/", int, body=body, access_token=access_token)

    async def set_quest_tracked_state(
        self,
        body: DestinyItemStateRequest,
        *,
        access_token: str | None = None,
    ) -> int:
        return await self._post(
            "/Destiny2/Actions/Items/SetTrackedState/",
            int,
            body=body,
            access_token=access_token,
        )
