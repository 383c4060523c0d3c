"""Endpoints del área GroupV2 (clanes)."""

from __future__ import annotations

from adapters.endpoints._base import EndpointGroup
from adapters.endpoints._params import path_segment
from core.domain.enums import BungieMembershipType, GroupsForMemberFilter, GroupType, RuntimeGroupMemberType
from core.domain.groups import GetGroupsForMemberResponse, GroupMember, GroupResponse
from core.domain.models import SearchResult


class GroupV2Endpoints(EndpointGroup):
    async def get_group(self, group_id: int, *, access_token: str | None = None) -> GroupResponse:
        return await self._get(f"/GroupV2/{path_segment(group_id)}/", GroupResponse, access_token=access_token)

    async def get_group_by_name(
        self,
        group_name: str,
        group_type: GroupType = GroupType.CLAN,
        *,
        access_token: str | None = None,
    ) -> GroupResponse:
        return await self._get(
            f"/GroupV2/Name/{path_segment(group_name)}/{path_segment(group_type)}/",
            GroupResponse,
            access_token=access_token,
        )

    async def get_members_of_group(
        self,
        group_id: int,
        currentpage: int = 1,
        member_type: RuntimeGroupMemberType | None = None,
        name_search: str | None = None,
        *,
        access_token: str | None = None,
    ) -> SearchResult[GroupMember]:
        """Miembros de un grupo, paginados de 50 en 50 (página base 1).

        `name_search` filtra por nombre; `member_type` por rango mínimo.
        """

        return await self._get(
            f"/GroupV2/{path_segment(group_id)}/Members/",
            SearchResult[GroupMember],
            params={"currentpage": currentpage, "memberType": member_type, "nameSearch": name_search},
            access_token=access_token,
        )

    async def get_groups_for_member(
        self,
        membership_type: BungieMembershipType,
        membership_id: int,
        filter: GroupsForMemberFilter = GroupsForMemberFilter.ALL,
        group_type: GroupType = GroupType.CLAN,
        *,
        access_token: str | None = None,
    ) -> GetGroupsForMemberResponse:
        return await self._get(
            f"/GroupV2/User/{path_segment(membership_type)}/{path_segment(membership_id)}"
            f"/{path_segment(filter)}/{path_segment(group_type)}/",
            GetGroupsForMemberResponse,
            access_token=access_token,
        )
