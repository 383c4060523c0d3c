"""Contratos del área User (cuentas de bungie.net y tarjetas de membresía)."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.domain.enums import BungieMembershipType
from core.domain.models import BungieModel, Int64


class UserInfoCard(BungieModel):
    """Información mínima para mostrar a un usuario en una plataforma concreta."""

    supplemental_display_name: str | None = Field(default=None, alias="supplementalDisplayName")
    icon_path: str | None = Field(default=None, alias="iconPath")
    cross_save_override: BungieMembershipType = Field(
        default=BungieMembershipType.NONE,
        alias="crossSaveOverride",
        description="Si no es NONE, esta membresía está cubierta por cross save en otra plataforma.",
    )
    applicable_membership_types: list[BungieMembershipType] = Field(
        default_factory=list,
        alias="applicableMembershipTypes",
    )
    is_public: bool = Field(default=False, alias="isPublic")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")
    membership_id: Int64 = Field(..., alias="membershipId")
    display_name: str | None = Field(default=None, alias="displayName")
    bungie_global_display_name: str | None = Field(default=None, alias="bungieGlobalDisplayName")
    bungie_global_display_name_code: int | None = Field(default=None, alias="bungieGlobalDisplayNameCode")

    @property
    def bungie_name(self) -> str | None:
        """`Nombre#0123`, o None si la cuenta no tiene Bungie Name."""

        if not self.bungie_global_display_name or self.bungie_global_display_name_code is None:
            return None
        return f"{self.bungie_global_display_name}#{self.bungie_global_display_name_code:04d}"


class GroupUserInfoCard(UserInfoCard):
    last_seen_display_name: str | None = Field(default=None, alias="LastSeenDisplayName")
    last_seen_display_name_type: BungieMembershipType = Field(
        default=BungieMembershipType.NONE,
        alias="LastSeenDisplayNameType",
    )


class GeneralUser(BungieModel):
    membership_id: Int64 = Field(..., alias="membershipId")
    unique_name: str | None = Field(default=None, alias="uniqueName")
    normalized_name: str | None = Field(default=None, alias="normalizedName")
    display_name: str | None = Field(default=None, alias="displayName")
    profile_picture: int = Field(default=0, alias="profilePicture")
    profile_theme: int = Field(default=0, alias="profileTheme")
    user_title: int = Field(default=0, alias="userTitle")
    success_message_flags: Int64 = Field(default=0, alias="successMessageFlags")
    is_deleted: bool = Field(default=False, alias="isDeleted")
    about: str | None = None
    first_access: datetime | None = Field(default=None, alias="firstAccess")
    last_update: datetime | None = Field(default=None, alias="lastUpdate")
    locale: str | None = None
    cached_bungie_global_display_name: str | None = Field(default=None, alias="cachedBungieGlobalDisplayName")
    cached_bungie_global_display_name_code: int | None = Field(
        default=None,
        alias="cachedBungieGlobalDisplayNameCode",
    )


class UserMembershipData(BungieModel):
    destiny_memberships: list[GroupUserInfoCard] = Field(default_factory=list, alias="destinyMemberships")
    primary_membership_id: Int64 | None = Field(
        default=None,
        alias="primaryMembershipId",
        description="Membresía primaria de cross save; None si el usuario no usa cross save.",
    )
    bungie_net_user: GeneralUser | None = Field(default=None, alias="bungieNetUser")


class UserSearchResponseDetail(BungieModel):
    bungie_global_display_name: str | None = Field(default=None, alias="bungieGlobalDisplayName")
    bungie_global_display_name_code: int | None = Field(default=None, alias="bungieGlobalDisplayNameCode")
    bungie_net_membership_id: Int64 | None = Field(default=None, alias="bungieNetMembershipId")
    destiny_memberships: list[UserInfoCard] = Field(default_factory=list, alias="destinyMemberships")


class UserSearchResponse(BungieModel):
    search_results: list[UserSearchResponseDetail] = Field(default_factory=list, alias="searchResults")
    page: int = 0
    has_more: bool = Field(default=False, alias="hasMore")


class UserSearchPrefixRequest(BungieModel):
    display_name_prefix: str = Field(..., min_length=1, alias="displayNamePrefix")


class ExactSearchRequest(BungieModel):
    """Cuerpo de la búsqueda exacta por Bungie Name (`Nombre` + `#0123`)."""

    display_name: str = Field(..., min_length=1, alias="displayName")
    display_name_code: int = Field(..., ge=0, le=9999, alias="displayNameCode")
