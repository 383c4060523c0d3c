"""Contratos del área GroupV2 (clanes y grupos)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.domain.enums import Capabilities, GroupType, RuntimeGroupMemberType
from core.domain.models import BungieModel, CapabilitiesFlags, Int64
from core.domain.user import GroupUserInfoCard, UserInfoCard


class GroupFeatures(BungieModel):
    maximum_members: int = Field(default=0, alias="maximumMembers")
    maximum_memberships_of_group_type: int = Field(default=0, alias="maximumMembershipsOfGroupType")
    capabilities: CapabilitiesFlags = Field(
        default=Capabilities(0),
        description="Bits de `Capabilities`; combinar con `|` para comprobar varios.",
    )
    membership_types: list[int] = Field(default_factory=list, alias="membershipTypes")
    invite_permission_override: bool = Field(default=False, alias="invitePermissionOverride")
    update_culture_permission_override: bool = Field(default=False, alias="updateCulturePermissionOverride")
    update_banner_permission_override: bool = Field(default=False, alias="updateBannerPermissionOverride")
    join_level: RuntimeGroupMemberType = Field(default=RuntimeGroupMemberType.BEGINNER, alias="joinLevel")


class GroupV2ClanInfo(BungieModel):
    clan_callsign: str | None = Field(default=None, alias="clanCallsign")


class GroupV2(BungieModel):
    group_id: Int64 = Field(..., alias="groupId")
    name: str | None = None
    group_type: GroupType = Field(default=GroupType.GENERAL, alias="groupType")
    membership_id_created: Int64 = Field(default=0, alias="membershipIdCreated")
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    modification_date: datetime | None = Field(default=None, alias="modificationDate")
    about: str | None = None
    tags: list[str] = Field(default_factory=list)
    member_count: int = Field(default=0, alias="memberCount")
    is_public: bool = Field(default=False, alias="isPublic")
    motto: str | None = None
    allow_chat: bool = Field(default=False, alias="allowChat")
    locale: str | None = None
    avatar_image_index: int = Field(default=0, alias="avatarImageIndex")
    theme: str | None = None
    banner_path: str | None = Field(default=None, alias="bannerPath")
    avatar_path: str | None = Field(default=None, alias="avatarPath")
    conversation_id: Int64 = Field(default=0, alias="conversationId")
    features: GroupFeatures | None = None
    clan_info: GroupV2ClanInfo | None = Field(default=None, alias="clanInfo")


class GroupMember(BungieModel):
    member_type: RuntimeGroupMemberType = Field(default=RuntimeGroupMemberType.NONE, alias="memberType")
    is_online: bool = Field(default=False, alias="isOnline")
    last_online_status_change: Int64 = Field(
        default=0,
        alias="lastOnlineStatusChange",
        description="Epoch en segundos del último cambio de estado online.",
    )
    group_id: Int64 = Field(..., alias="groupId")
    destiny_user_info: GroupUserInfoCard | None = Field(default=None, alias="destinyUserInfo")
    bungie_net_user_info: UserInfoCard | None = Field(default=None, alias="bungieNetUserInfo")
    join_date: datetime | None = Field(default=None, alias="joinDate")


class GroupResponse(BungieModel):
    detail: GroupV2 | None = None
    founder: GroupMember | None = None
    allied_ids: list[Int64] = Field(default_factory=list, alias="alliedIds")
    parent_group: GroupV2 | None = Field(default=None, alias="parentGroup")
    group_join_invite_count: int = Field(default=0, alias="groupJoinInviteCount")
    current_user_memberships_inactive_for_destiny: bool = Field(
        default=False,
        alias="currentUserMembershipsInactiveForDestiny",
    )
    current_user_member_map: dict[str, GroupMember] = Field(default_factory=dict, alias="currentUserMemberMap")


class GroupMembership(BungieModel):
    member: GroupMember | None = None
    group: GroupV2 | None = None


class GetGroupsForMemberResponse(BungieModel):
    are_all_memberships_inactive: dict[str, bool] = Field(
        default_factory=dict,
        alias="areAllMembershipsInactive",
        description="Por groupId: True si todas las membresías del usuario en ese grupo están inactivas.",
    )
    results: list[GroupMembership] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
    has_more: bool = Field(default=False, alias="hasMore")
