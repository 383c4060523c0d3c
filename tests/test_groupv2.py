"""Tests for the GroupV2 endpoint group."""

from __future__ import annotations

import httpx
from respx import MockRouter

from adapters.bungie_client import BungieClient
from conftest import BASE_URL, envelope
from core.domain.enums import (
    BungieMembershipType,
    Capabilities,
    GroupsForMemberFilter,
    GroupType,
    RuntimeGroupMemberType,
)

GROUP_ID = 881267
MEMBERSHIP_ID = 4611686018467284386

GROUP_DETAIL = {
    "groupId": str(GROUP_ID),
    "name": "Clan of the Week",
    "groupType": 1,
    "membershipIdCreated": "123",
    "creationDate": "2017-09-06T00:00:00Z",
    "memberCount": 97,
    "isPublic": True,
    "motto": "Eyes up",
    "features": {"maximumMembers": 100, "capabilities": 31, "joinLevel": 1},
    "clanInfo": {"clanCallsign": "COTW"},
}


async def test_get_group(client: BungieClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/GroupV2/{GROUP_ID}/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "detail": GROUP_DETAIL,
                    "founder": {"memberType": 5, "isOnline": False, "groupId": str(GROUP_ID)},
                    "alliedIds": ["1", "2"],
                    "groupJoinInviteCount": 0,
                }
            ),
        )
    )

    group = await client.groupv2.get_group(GROUP_ID)

    assert group.detail is not None
    assert group.detail.group_id == GROUP_ID
    assert group.detail.group_type is GroupType.CLAN
    assert group.detail.clan_info is not None
    assert group.detail.clan_info.clan_callsign == "COTW"
    assert group.detail.features is not None
    capabilities = group.detail.features.capabilities
    assert Capabilities.CALLSIGN in capabilities
    assert Capabilities.TAGS not in capabilities
    assert group.founder is not None
    assert group.founder.member_type is RuntimeGroupMemberType.FOUNDER
    assert group.allied_ids == [1, 2]


async def test_get_group_by_name_quotes_name(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(url__regex=r".*/GroupV2/Name/.+/1/$").mock(
        return_value=httpx.Response(200, json=envelope({"detail": GROUP_DETAIL}))
    )

    group = await client.groupv2.get_group_by_name("Clan of the Week")

    assert route.calls[0].request.url.raw_path == b"/Platform/GroupV2/Name/Clan%20of%20the%20Week/1/"
    assert group.detail is not None
    assert group.detail.member_count == 97


async def test_get_members_of_group(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/GroupV2/{GROUP_ID}/Members/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "results": [
                        {
                            "memberType": 3,
                            "isOnline": True,
                            "lastOnlineStatusChange": "1709300000",
                            "groupId": str(GROUP_ID),
                            "destinyUserInfo": {
                                "membershipType": 3,
                                "membershipId": str(MEMBERSHIP_ID),
                                "LastSeenDisplayName": "Guardian",
                            },
                            "joinDate": "2020-01-01T00:00:00Z",
                        }
                    ],
                    "totalResults": 1,
                    "hasMore": False,
                    "query": {"itemsPerPage": 50, "currentPage": 1},
                    "useTotalResults": True,
                }
            ),
        )
    )

    page = await client.groupv2.get_members_of_group(
        GROUP_ID, currentpage=1, member_type=RuntimeGroupMemberType.ADMIN, name_search="Guard"
    )

    params = route.calls[0].request.url.params
    assert params["currentpage"] == "1"
    assert params["memberType"] == "3"
    assert params["nameSearch"] == "Guard"
    assert page.total_results == 1
    assert page.query is not None
    assert page.query.items_per_page == 50
    member = page.results[0]
    assert member.is_online is True
    assert member.last_online_status_change == 1709300000
    assert member.destiny_user_info is not None
    assert member.destiny_user_info.last_seen_display_name == "Guardian"


async def test_get_members_of_group_default_query(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/GroupV2/{GROUP_ID}/Members/").mock(
        return_value=httpx.Response(200, json=envelope({"results": [], "totalResults": 0, "hasMore": False}))
    )

    await client.groupv2.get_members_of_group(GROUP_ID)

    assert dict(route.calls[0].request.url.params) == {"currentpage": "1"}


async def test_get_groups_for_member(client: BungieClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/GroupV2/User/3/{MEMBERSHIP_ID}/0/1/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "areAllMembershipsInactive": {str(GROUP_ID): False},
                    "results": [
                        {
                            "member": {"memberType": 2, "groupId": str(GROUP_ID)},
                            "group": GROUP_DETAIL,
                        }
                    ],
                    "totalResults": 1,
                    "hasMore": False,
                }
            ),
        )
    )

    response = await client.groupv2.get_groups_for_member(
        BungieMembershipType.TIGER_STEAM, MEMBERSHIP_ID, GroupsForMemberFilter.ALL, GroupType.CLAN
    )

    assert response.are_all_memberships_inactive == {str(GROUP_ID): False}
    assert response.results[0].group is not None
    assert response.results[0].group.name == "Clan of the Week"
