"""Tests for the Destiny2 endpoint group: paths, query rendering, bodies and payloads."""

from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from adapters.bungie_client import BungieClient
from conftest import BASE_URL, envelope
from core.domain.destiny import (
    DestinyItemActionRequest,
    DestinyItemSetActionRequest,
    DestinyItemStateRequest,
    DestinyItemTransferRequest,
    DestinyPostmasterTransferRequest,
)
from core.domain.enums import (
    BungieMembershipType,
    DestinyClass,
    DestinyComponentType,
    DestinyGameVersions,
    ItemState,
    TransferStatuses,
)
from core.domain.user import ExactSearchRequest

MEMBERSHIP_ID = 4611686018467284386
CHARACTER_ID = 2305843009299499863
ITEM_ID = 6917529123456789012

PROFILE_PAYLOAD = {
    "responseMintedTimestamp": "2024-03-01T12:00:00Z",
    "profile": {
        "data": {
            "userInfo": {
                "membershipType": 3,
                "membershipId": str(MEMBERSHIP_ID),
                "displayName": "Guardian",
                "bungieGlobalDisplayName": "Guardian",
                "bungieGlobalDisplayNameCode": 42,
            },
            "dateLastPlayed": "2024-02-28T20:15:00Z",
            "versionsOwned": 319,
            "characterIds": [str(CHARACTER_ID)],
        },
        "privacy": 1,
    },
    "characters": {
        "data": {
            str(CHARACTER_ID): {
                "membershipId": str(MEMBERSHIP_ID),
                "membershipType": 3,
                "characterId": str(CHARACTER_ID),
                "light": 1810,
                "classType": 2,
                "minutesPlayedTotal": "12345",
                "stats": {"1935470627": 1810},
            }
        },
        "privacy": 1,
    },
    "profileInventory": {"privacy": 2},
}


async def test_search_destiny_player_by_bungie_name(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BASE_URL}/Destiny2/SearchDestinyPlayerByBungieName/-1/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                [
                    {
                        "membershipType": 3,
                        "membershipId": str(MEMBERSHIP_ID),
                        "bungieGlobalDisplayName": "Guardian",
                        "bungieGlobalDisplayNameCode": 42,
                        "crossSaveOverride": 3,
                        "applicableMembershipTypes": [2, 3],
                    }
                ]
            ),
        )
    )

    cards = await client.destiny2.search_destiny_player_by_bungie_name(
        BungieMembershipType.ALL,
        ExactSearchRequest(display_name="Guardian", display_name_code=42),
    )

    assert json.loads(route.calls[0].request.content) == {"displayName": "Guardian", "displayNameCode": 42}
    assert cards[0].membership_id == MEMBERSHIP_ID
    assert cards[0].membership_type is BungieMembershipType.TIGER_STEAM
    assert cards[0].bungie_name == "Guardian#0042"
    assert cards[0].applicable_membership_types == [BungieMembershipType.TIGER_PSN, BungieMembershipType.TIGER_STEAM]


async def test_get_profile_renders_components_and_parses_payload(
    client: BungieClient, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/Destiny2/3/Profile/{MEMBERSHIP_ID}/").mock(
        return_value=httpx.Response(200, json=envelope(PROFILE_PAYLOAD))
    )

    profile = await client.destiny2.get_profile(
        BungieMembershipType.TIGER_STEAM,
        MEMBERSHIP_ID,
        [DestinyComponentType.PROFILES, DestinyComponentType.CHARACTERS, DestinyComponentType.PROFILES],
    )

    assert route.calls[0].request.url.params["components"] == "100,200"
    assert profile.profile is not None
    data = profile.profile.data
    assert data is not None
    assert data.user_info is not None
    assert data.user_info.bungie_name == "Guardian#0042"
    assert data.character_ids == [CHARACTER_ID]
    assert data.versions_owned == (
        DestinyGameVersions.DESTINY2
        | DestinyGameVersions.DLC1
        | DestinyGameVersions.DLC2
        | DestinyGameVersions.FORSAKEN
        | DestinyGameVersions.YEAR_TWO_ANNUAL_PASS
        | DestinyGameVersions.SHADOWKEEP
        | DestinyGameVersions.THE_WITCH_QUEEN
    )
    assert profile.characters is not None
    character = profile.characters.data[str(CHARACTER_ID)]
    assert character.class_type is DestinyClass.WARLOCK
    assert character.minutes_played_total == 12345
    assert character.stats == {1935470627: 1810}
    assert profile.profile_inventory is not None
    assert profile.profile_inventory.data is None
    assert profile.character_equipment is None


async def test_get_profile_requires_components(client: BungieClient) -> None:
    with pytest.raises(ValueError):
        await client.destiny2.get_profile(BungieMembershipType.TIGER_STEAM, MEMBERSHIP_ID, [])


async def test_get_character_and_item_paths(client: BungieClient, respx_mock: MockRouter) -> None:
    character_route = respx_mock.get(
        f"{BASE_URL}/Destiny2/3/Profile/{MEMBERSHIP_ID}/Character/{CHARACTER_ID}/"
    ).mock(return_value=httpx.Response(200, json=envelope({"equipment": {"data": {"items": []}, "privacy": 1}})))
    item_route = respx_mock.get(f"{BASE_URL}/Destiny2/3/Profile/{MEMBERSHIP_ID}/Item/{ITEM_ID}/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "characterId": str(CHARACTER_ID),
                    "item": {
                        "data": {
                            "itemHash": 1363886209,
                            "itemInstanceId": str(ITEM_ID),
                            "state": 5,
                            "transferStatus": -1,
                            "location": 1,
                        },
                        "privacy": 1,
                    },
                }
            ),
        )
    )

    character = await client.destiny2.get_character(
        BungieMembershipType.TIGER_STEAM, MEMBERSHIP_ID, CHARACTER_ID, [DestinyComponentType.CHARACTER_EQUIPMENT]
    )
    item = await client.destiny2.get_item(
        BungieMembershipType.TIGER_STEAM, MEMBERSHIP_ID, ITEM_ID, [300, DestinyComponentType.ITEM_COMMON_DATA]
    )

    assert character_route.calls[0].request.url.params["components"] == "205"
    assert item_route.calls[0].request.url.params["components"] == "300,307"
    assert character.equipment is not None
    assert character.equipment.data is not None
    assert character.equipment.data.items == []
    assert item.character_id == CHARACTER_ID
    assert item.item is not None
    assert item.item.data is not None
    assert item.item.data.state == ItemState.LOCKED | ItemState.MASTERWORK
    assert item.item.data.transfer_status == 0xFFFFFFFF
    assert TransferStatuses.ITEM_IS_EQUIPPED in item.item.data.transfer_status


async def test_get_linked_profiles(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/Destiny2/254/Profile/{MEMBERSHIP_ID}/LinkedProfiles/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "profiles": [
                        {
                            "membershipType": 2,
                            "membershipId": str(MEMBERSHIP_ID),
                            "isCrossSavePrimary": True,
                            "unpairedGameVersions": 0,
                        }
                    ],
                    "profilesWithErrors": [],
                }
            ),
        )
    )

    linked = await client.destiny2.get_linked_profiles(
        BungieMembershipType.BUNGIE_NEXT, MEMBERSHIP_ID, get_all_memberships=False
    )

    assert route.calls[0].request.url.params["getAllMemberships"] == "false"
    assert linked.profiles[0].is_cross_save_primary is True
    assert linked.profiles[0].unpaired_game_versions == DestinyGameVersions(0)


async def test_get_linked_profiles_omits_unset_query(client: BungieClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/Destiny2/2/Profile/{MEMBERSHIP_ID}/LinkedProfiles/").mock(
        return_value=httpx.Response(200, json=envelope({"profiles": []}))
    )

    await client.destiny2.get_linked_profiles(BungieMembershipType.TIGER_PSN, MEMBERSHIP_ID)

    assert "getAllMemberships" not in route.calls[0].request.url.params


async def test_entity_definition_keeps_unknown_fields(client: BungieClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/Destiny2/Manifest/DestinyInventoryItemDefinition/1363886209/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "hash": 1363886209,
                    "index": 7,
                    "displayProperties": {"name": "Gjallarhorn", "hasIcon": True},
                    "itemTypeDisplayName": "Rocket Launcher",
                }
            ),
        )
    )

    definition = await client.destiny2.get_destiny_entity_definition("DestinyInventoryItemDefinition", 1363886209)

    assert definition.hash == 1363886209
    assert definition.display_properties is not None
    assert definition.display_properties.name == "Gjallarhorn"
    assert definition.model_extra == {"itemTypeDisplayName": "Rocket Launcher"}


async def test_milestones_and_reports(client: BungieClient, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/Destiny2/Milestones/").mock(
        return_value=httpx.Response(200, json=envelope({"3603098564": {"milestoneHash": 3603098564, "order": 1}}))
    )
    respx_mock.get(f"{BASE_URL}/Destiny2/Clan/881267/WeeklyRewardState/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "milestoneHash": 4253138191,
                    "rewards": [{"rewardCategoryHash": 1064137897, "entries": [{"rewardEntryHash": 3, "earned": True}]}],
                }
            ),
        )
    )
    respx_mock.get(f"{BASE_URL}/Destiny2/Stats/PostGameCarnageReport/12345678901/").mock(
        return_value=httpx.Response(
            200,
            json=envelope(
                {
                    "period": "2024-03-01T18:00:00Z",
                    "activityDetails": {"instanceId": "12345678901", "mode": 5, "modes": [5, 69]},
                    "entries": [
                        {
                            "standing": 0,
                            "characterId": str(CHARACTER_ID),
                            "values": {"kills": {"statId": "kills", "basic": {"value": 21, "displayValue": "21"}}},
                        }
                    ],
                }
            ),
        )
    )

    milestones = await client.destiny2.get_public_milestones()
    weekly = await client.destiny2.get_clan_weekly_reward_state(881267)
    report = await client.destiny2.get_post_game_carnage_report(12345678901)

    assert milestones[3603098564].order == 1
    assert weekly.rewards[0].entries[0].earned is True
    assert report.activity_details is not None
    assert report.activity_details.instance_id == 12345678901
    kills = report.entries[0].values["kills"].basic
    assert kills is not None
    assert kills.value == 21


async def test_item_actions_post_wire_bodies(client: BungieClient, respx_mock: MockRouter) -> None:
    actions = f"{BASE_URL}/Destiny2/Actions/Items"
    transfer = respx_mock.post(f"{actions}/TransferItem/").mock(return_value=httpx.Response(200, json=envelope(0)))
    postmaster = respx_mock.post(f"{actions}/PullFromPostmaster/").mock(
        return_value=httpx.Response(200, json=envelope(0))
    )
    equip = respx_mock.post(f"{actions}/EquipItem/").mock(return_value=httpx.Response(200, json=envelope(0)))
    equip_many = respx_mock.post(f"{actions}/EquipItems/").mock(
        return_value=httpx.Response(
            200,
            json=envelope({"equipResults": [{"itemInstanceId": str(ITEM_ID), "equipStatus": 1}]}),
        )
    )
    lock = respx_mock.post(f"{actions}/SetLockState/").mock(return_value=httpx.Response(200, json=envelope(0)))
    track = respx_mock.post(f"{actions}/SetTrackedState/").mock(return_value=httpx.Response(200, json=envelope(0)))

    common = {"character_id": CHARACTER_ID, "membership_type": BungieMembershipType.TIGER_STEAM}
    await client.destiny2.transfer_item(
        DestinyItemTransferRequest(item_reference_hash=1363886209, transfer_to_vault=True, item_id=ITEM_ID, **common),
        access_token="user-token",
    )
    await client.destiny2.pull_from_postmaster(
        DestinyPostmasterTransferRequest(item_reference_hash=1363886209, stack_size=3, **common),
        access_token="user-token",
    )
    await client.destiny2.equip_item(DestinyItemActionRequest(item_id=ITEM_ID, **common), access_token="user-token")
    results = await client.destiny2.equip_items(
        DestinyItemSetActionRequest(item_ids=[ITEM_ID], **common), access_token="user-token"
    )
    await client.destiny2.set_item_lock_state(
        DestinyItemStateRequest(state=True, item_id=ITEM_ID, **common), access_token="user-token"
    )
    status = await client.destiny2.set_quest_tracked_state(
        DestinyItemStateRequest(state=False, item_id=ITEM_ID, **common), access_token="user-token"
    )

    assert json.loads(transfer.calls[0].request.content) == {
        "itemReferenceHash": 1363886209,
        "stackSize": 1,
        "transferToVault": True,
        "itemId": str(ITEM_ID),
        "characterId": str(CHARACTER_ID),
        "membershipType": 3,
    }
    assert json.loads(postmaster.calls[0].request.content)["itemId"] == "0"
    assert json.loads(equip.calls[0].request.content)["itemId"] == str(ITEM_ID)
    assert json.loads(equip_many.calls[0].request.content)["itemIds"] == [str(ITEM_ID)]
    assert json.loads(lock.calls[0].request.content)["state"] is True
    assert json.loads(track.calls[0].request.content)["state"] is False
    assert results.equip_results[0].equip_status == 1
    assert status == 0
    for route in (transfer, postmaster, equip, equip_many, lock, track):
        assert route.calls[0].request.headers["authorization"] == "Bearer user-token"
