"""Endpoints del área User."""

from __future__ import annotations

from adapters.endpoints._base import EndpointGroup
from adapters.endpoints._params import path_segment
from core.domain.enums import BungieMembershipType
from core.domain.user import GeneralUser, UserMembershipData, UserSearchPrefixRequest, UserSearchResponse


class UserEndpoints(EndpointGroup):
    async def get_bungie_net_user_by_id(
        self,
        user_id: int,
        *,
        access_token: str | None = None,
    ) -> GeneralUser:
        return await self._get(
            f"/User/GetBungieNetUserById/{path_segment(user_id)}/",
            GeneralUser,
            access_token=access_token,
        )

    async def get_membership_data_by_id(
        self,
        membership_id: int,
        membership_type: BungieMembershipType,
        *,
        access_token: str | None = None,
    ) -> UserMembershipData:
        """Cuentas de Destiny y de bungie.net asociadas a una membresía.

        `membership_type` puede ser `ALL` si no se conoce la plataforma.
        """

        return await self._get(
            f"/User/GetMembershipsById/{path_segment(membership_id)}/{path_segment(membership_type)}/",
            UserMembershipData,
            access_token=access_token,
        )

    async def get_membership_data_for_current_user(
        self,
        *,
        access_token: str | None = None,
    ) -> UserMembershipData:
        """Membresías del usuario dueño del bearer token (obligatorio)."""

        return await self._get(
            "/User/GetMembershipsForCurrentUser/",
            UserMembershipData,
            access_token=access_token,
        )

    async def search_by_global_name_post(
        self,
        page: int,
        body: UserSearchPrefixRequest,
        *,
        access_token: str | None = None,
    ) -> UserSearchResponse:
        """Búsqueda por prefijo de Bungie Name (página base 0)."""

        return await self._post(
            f"/User/Search/GlobalName/{path_segment(page)}/",
            UserSearchResponse,
            body=body,
            access_token=access_token,
        )

    async def search_by_global_name_prefix(
        self,
        display_name_prefix: str,
        page: int = 0,
        *,
        access_token: str | None = None,
    ) -> UserSearchResponse:
        return await self._get(
            f"/User/Search/Prefix/{path_segment(display_name_prefix)}/{path_segment(page)}/",
            UserSearchResponse,
            access_token=access_token,
        )
