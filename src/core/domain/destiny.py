"""Contratos del área Destiny2.

Solo se modelan los campos que usan los endpoints implementados; el resto se
ignora al deserializar. Los hashes de definiciones son uint32 y viajan como
números; los ids de instancia/personaje/membresía son int64 y viajan como
strings (`Int64`).
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import Field
from pydantic.config import ConfigDict

from core.domain.enums import (
    BungieMembershipType,
    ComponentPrivacySetting,
    DestinyClass,
    DestinyGameVersions,
    DestinyGender,
    DestinyRace,
    ItemBindStatus,
    ItemLocation,
    ItemState,
    TransferStatuses,
)
from core.domain.models import (
    BungieModel,
    GameVersionsFlags,
    Int64,
    ItemStateFlags,
    TransferStatusFlags,
)
from core.domain.user import UserInfoCard

C = TypeVar("C")


# =============================================================================
# Manifest
# =============================================================================


class GearAssetDataBaseDefinition(BungieModel):
    version: int = 0
    path: str | None = None


class ImagePyramidEntry(BungieModel):
    name: str | None = Field(default=None, description="Subcarpeta donde viven las imágenes reducidas.")
    factor: float = Field(default=1.0, description="Factor de reducción respecto a la imagen completa.")


class DestinyManifest(BungieModel):
    """Rutas de las bases de datos de definiciones publicadas por versión."""

    version: str | None = None
    mobile_asset_content_path: str | None = Field(default=None, alias="mobileAssetContentPath")
    mobile_gear_asset_data_bases: list[GearAssetDataBaseDefinition] = Field(
        default_factory=list,
        alias="mobileGearAssetDataBases",
    )
    mobile_world_content_paths: dict[str, str] = Field(default_factory=dict, alias="mobileWorldContentPaths")
    json_world_content_paths: dict[str, str] = Field(
        default_factory=dict,
        alias="jsonWorldContentPaths",
        description="Por locale: ruta al JSON agregado con todas las definiciones.",
    )
    json_world_component_content_paths: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        alias="jsonWorldComponentContentPaths",
        description="Por locale y tipo de definición: ruta al JSON de ese tipo.",
    )
    mobile_clan_banner_database_path: str | None = Field(default=None, alias="mobileClanBannerDatabasePath")
    mobile_gear_cdn: dict[str, str] = Field(default_factory=dict, alias="mobileGearCDN")
    icon_image_pyramid_info: list[ImagePyramidEntry] = Field(default_factory=list, alias="iconImagePyramidInfo")


class DestinyDisplayPropertiesDefinition(BungieModel):
    description: str | None = None
    name: str | None = None
    icon: str | None = None
    has_icon: bool = Field(default=False, alias="hasIcon")


class DestinyDefinition(BungieModel):
    """Definición genérica del manifest.

    Cada tipo de entidad tiene su propio esquema; los campos no modelados se
    conservan como extras para que el llamador los lea.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    hash: int = 0
    index: int = 0
    redacted: bool = False
    blacklisted: bool = False
    display_properties: DestinyDisplayPropertiesDefinition | None = Field(default=None, alias="displayProperties")


# =============================================================================
# Component envelopes
# =============================================================================


class SingleComponentResponse(BungieModel, Generic[C]):
    """Un componente individual de una respuesta "Get" (perfil, personaje...)."""

    data: C | None = None
    privacy: ComponentPrivacySetting = ComponentPrivacySetting.NONE
    disabled: bool | None = None


class DictionaryComponentResponse(BungieModel, Generic[C]):
    """Componentes indexados por id (p.ej. un componente por personaje).

    Las claves son int64 del vendor y se dejan como string, tal cual el cable.
    """

    data: dict[str, C] = Field(default_factory=dict)
    privacy: ComponentPrivacySetting = ComponentPrivacySetting.NONE
    disabled: bool | None = None


# =============================================================================
# Profiles & characters
# =============================================================================


class DestinyProfileComponent(BungieModel):
    user_info: UserInfoCard | None = Field(default=None, alias="userInfo")
    date_last_played: datetime | None = Field(default=None, alias="dateLastPlayed")
    versions_owned: GameVersionsFlags = Field(default=DestinyGameVersions(0), alias="versionsOwned")
    character_ids: list[Int64] = Field(default_factory=list, alias="characterIds")
    season_hashes: list[int] = Field(default_factory=list, alias="seasonHashes")
    current_season_hash: int | None = Field(default=None, alias="currentSeasonHash")
    current_season_reward_power_cap: int | None = Field(default=None, alias="currentSeasonRewardPowerCap")


class DestinyCharacterComponent(BungieModel):
    membership_id: Int64 = Field(..., alias="membershipId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")
    character_id: Int64 = Field(..., alias="characterId")
    date_last_played: datetime | None = Field(default=None, alias="dateLastPlayed")
    minutes_played_this_session: Int64 = Field(default=0, alias="minutesPlayedThisSession")
    minutes_played_total: Int64 = Field(default=0, alias="minutesPlayedTotal")
    light: int = 0
    stats: dict[int, int] = Field(default_factory=dict)
    race_hash: int = Field(default=0, alias="raceHash")
    gender_hash: int = Field(default=0, alias="genderHash")
    class_hash: int = Field(default=0, alias="classHash")
    race_type: DestinyRace = Field(default=DestinyRace.UNKNOWN, alias="raceType")
    class_type: DestinyClass = Field(default=DestinyClass.UNKNOWN, alias="classType")
    gender_type: DestinyGender = Field(default=DestinyGender.UNKNOWN, alias="genderType")
    emblem_path: str | None = Field(default=None, alias="emblemPath")
    emblem_background_path: str | None = Field(default=None, alias="emblemBackgroundPath")
    emblem_hash: int = Field(default=0, alias="emblemHash")
    base_character_level: int = Field(default=0, alias="baseCharacterLevel")
    percent_to_next_level: float = Field(default=0.0, alias="percentToNextLevel")
    title_record_hash: int | None = Field(default=None, alias="titleRecordHash")


class DestinyItemComponent(BungieModel):
    item_hash: int = Field(..., alias="itemHash")
    item_instance_id: Int64 | None = Field(default=None, alias="itemInstanceId")
    quantity: int = 1
    bind_status: ItemBindStatus = Field(default=ItemBindStatus.NOT_BOUND, alias="bindStatus")
    location: ItemLocation = ItemLocation.UNKNOWN
    bucket_hash: int = Field(default=0, alias="bucketHash")
    transfer_status: TransferStatusFlags = Field(default=TransferStatuses(0), alias="transferStatus")
    lockable: bool = False
    state: ItemStateFlags = ItemState(0)
    override_style_item_hash: int | None = Field(default=None, alias="overrideStyleItemHash")
    expiration_date: datetime | None = Field(default=None, alias="expirationDate")
    is_wrapper: bool = Field(default=False, alias="isWrapper")
    version_number: int | None = Field(default=None, alias="versionNumber")


class DestinyInventoryComponent(BungieModel):
    items: list[DestinyItemComponent] = Field(default_factory=list)


class DestinyProfileResponse(BungieModel):
    """Respuesta de GetProfile: cada componente solo aparece si se pidió."""

    response_minted_timestamp: datetime | None = Field(default=None, alias="responseMintedTimestamp")
    secondary_components_minted_timestamp: datetime | None = Field(
        default=None,
        alias="secondaryComponentsMintedTimestamp",
    )
    profile: SingleComponentResponse[DestinyProfileComponent] | None = None
    profile_inventory: SingleComponentResponse[DestinyInventoryComponent] | None = Field(
        default=None,
        alias="profileInventory",
    )
    characters: DictionaryComponentResponse[DestinyCharacterComponent] | None = None
    character_inventories: DictionaryComponentResponse[DestinyInventoryComponent] | None = Field(
        default=None,
        alias="characterInventories",
    )
    character_equipment: DictionaryComponentResponse[DestinyInventoryComponent] | None = Field(
        default=None,
        alias="characterEquipment",
    )


class DestinyCharacterResponse(BungieModel):
    character: SingleComponentResponse[DestinyCharacterComponent] | None = None
    inventory: SingleComponentResponse[DestinyInventoryComponent] | None = None
    equipment: SingleComponentResponse[DestinyInventoryComponent] | None = None


class DestinyItemResponse(BungieModel):
    character_id: Int64 | None = Field(
        default=None,
        alias="characterId",
        description="Personaje que tiene el objeto; None si está en el perfil (bóveda).",
    )
    item: SingleComponentResponse[DestinyItemComponent] | None = None


class DestinyProfileUserInfoCard(UserInfoCard):
    date_last_played: datetime | None = Field(default=None, alias="dateLastPlayed")
    is_overridden: bool = Field(default=False, alias="isOverridden")
    is_cross_save_primary: bool = Field(default=False, alias="isCrossSavePrimary")
    unpaired_game_versions: GameVersionsFlags | None = Field(default=None, alias="unpairedGameVersions")


class DestinyErrorProfile(BungieModel):
    error_code: int = Field(..., alias="errorCode")
    info_card: UserInfoCard | None = Field(default=None, alias="infoCard")


class DestinyLinkedProfilesResponse(BungieModel):
    profiles: list[DestinyProfileUserInfoCard] = Field(default_factory=list)
    bnet_membership: UserInfoCard | None = Field(default=None, alias="bnetMembership")
    profiles_with_errors: list[DestinyErrorProfile] = Field(default_factory=list, alias="profilesWithErrors")


# =============================================================================
# Milestones & activity history
# =============================================================================


class DestinyMilestoneRewardEntry(BungieModel):
    reward_entry_hash: int = Field(default=0, alias="rewardEntryHash")
    earned: bool = False
    redeemed: bool = False


class DestinyMilestoneRewardCategory(BungieModel):
    reward_category_hash: int = Field(default=0, alias="rewardCategoryHash")
    entries: list[DestinyMilestoneRewardEntry] = Field(default_factory=list)


class DestinyMilestone(BungieModel):
    milestone_hash: int = Field(..., alias="milestoneHash")
    values: dict[str, float] = Field(default_factory=dict)
    vendor_hashes: list[int] = Field(default_factory=list, alias="vendorHashes")
    rewards: list[DestinyMilestoneRewardCategory] = Field(default_factory=list)
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")
    order: int = 0


class DestinyPublicMilestone(BungieModel):
    milestone_hash: int = Field(..., alias="milestoneHash")
    vendor_hashes: list[int] = Field(default_factory=list, alias="vendorHashes")
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")
    order: int = 0


class DestinyHistoricalStatsActivity(BungieModel):
    reference_id: int = Field(default=0, alias="referenceId")
    director_activity_hash: int = Field(default=0, alias="directorActivityHash")
    instance_id: Int64 = Field(default=0, alias="instanceId")
    mode: int = 0
    modes: list[int] = Field(default_factory=list)
    is_private: bool = Field(default=False, alias="isPrivate")
    membership_type: BungieMembershipType = Field(default=BungieMembershipType.NONE, alias="membershipType")


class DestinyHistoricalStatsValuePair(BungieModel):
    value: float = 0.0
    display_value: str | None = Field(default=None, alias="displayValue")


class DestinyHistoricalStatsValue(BungieModel):
    stat_id: str | None = Field(default=None, alias="statId")
    basic: DestinyHistoricalStatsValuePair | None = None


class DestinyPlayer(BungieModel):
    destiny_user_info: UserInfoCard | None = Field(default=None, alias="destinyUserInfo")
    character_class: str | None = Field(default=None, alias="characterClass")
    class_hash: int = Field(default=0, alias="classHash")
    light_level: int = Field(default=0, alias="lightLevel")


class DestinyPostGameCarnageReportEntry(BungieModel):
    standing: int = 0
    score: DestinyHistoricalStatsValue | None = None
    player: DestinyPlayer | None = None
    character_id: Int64 = Field(default=0, alias="characterId")
    values: dict[str, DestinyHistoricalStatsValue] = Field(default_factory=dict)


class DestinyPostGameCarnageReportData(BungieModel):
    period: datetime
    starting_phase_index: int | None = Field(default=None, alias="startingPhaseIndex")
    activity_was_started_from_beginning: bool | None = Field(
        default=None,
        alias="activityWasStartedFromBeginning",
    )
    activity_details: DestinyHistoricalStatsActivity | None = Field(default=None, alias="activityDetails")
    entries: list[DestinyPostGameCarnageReportEntry] = Field(default_factory=list)


# =============================================================================
# Item actions (request bodies)
# =============================================================================


class DestinyItemActionRequest(BungieModel):
    item_id: Int64 = Field(..., alias="itemId")
    character_id: Int64 = Field(..., alias="characterId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")


class DestinyItemSetActionRequest(BungieModel):
    item_ids: list[Int64] = Field(..., min_length=1, alias="itemIds")
    character_id: Int64 = Field(..., alias="characterId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")


class DestinyItemStateRequest(BungieModel):
    state: bool
    item_id: Int64 = Field(..., alias="itemId")
    character_id: Int64 = Field(..., alias="characterId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")


class DestinyItemTransferRequest(BungieModel):
    item_reference_hash: int = Field(..., alias="itemReferenceHash")
    stack_size: int = Field(default=1, ge=1, alias="stackSize")
    transfer_to_vault: bool = Field(..., alias="transferToVault")
    item_id: Int64 = Field(default=0, alias="itemId", description="0 para objetos sin instancia (apilables).")
    character_id: Int64 = Field(..., alias="characterId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")


class DestinyPostmasterTransferRequest(BungieModel):
    item_reference_hash: int = Field(..., alias="itemReferenceHash")
    stack_size: int = Field(default=1, ge=1, alias="stackSize")
    item_id: Int64 = Field(default=0, alias="itemId")
    character_id: Int64 = Field(..., alias="characterId")
    membership_type: BungieMembershipType = Field(..., alias="membershipType")


class DestinyEquipItemResult(BungieModel):
    item_instance_id: Int64 = Field(..., alias="itemInstanceId")
    equip_status: int = Field(
        ...,
        alias="equipStatus",
        description="PlatformErrorCodes por objeto; 1 (Success) si se equipó.",
    )


class DestinyEquipItemResults(BungieModel):
    equip_results: list[DestinyEquipItemResult] = Field(default_factory=list, alias="equipResults")
