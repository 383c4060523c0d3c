"""Enumeraciones del catálogo de tipos.

Convenciones:
- Enums simples: `IntEnum`, el valor en el cable es el entero del vendor.
- Enums de bits: `IntFlag` sin miembros "None" ni "All". El valor vacío es
  `Flag(0)` y las combinaciones se construyen con `|`. Todos los flags se
  tratan como enteros sin signo; `FLAG_WIDTHS` documenta el ancho de cada uno.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag


class BungieMembershipType(IntEnum):
    """Membership types supported by the accounts system.

    `ALL` is only valid for searches; calls that take a known membership id
    need the actual matching type.
    """

    NONE = 0
    TIGER_XBOX = 1
    TIGER_PSN = 2
    TIGER_STEAM = 3
    TIGER_BLIZZARD = 4
    TIGER_STADIA = 5
    TIGER_EGS = 6
    TIGER_DEMON = 10
    BUNGIE_NEXT = 254
    ALL = -1


class BungieCredentialType(IntEnum):
    NONE = 0
    XUID = 1
    PSNID = 2
    WLID = 3
    FAKE = 4
    FACEBOOK = 5
    GOOGLE = 8
    WINDOWS = 9
    DEMON_ID = 10
    STEAM_ID = 12
    BATTLE_NET_ID = 14
    STADIA_ID = 16
    TWITCH_ID = 18
    EGS_ID = 20


class DestinyComponentType(IntEnum):
    """Components requested through the `components` query parameter."""

    NONE = 0
    PROFILES = 100
    VENDOR_RECEIPTS = 101
    PROFILE_INVENTORIES = 102
    PROFILE_CURRENCIES = 103
    PROFILE_PROGRESSION = 104
    PLATFORM_SILVER = 105
    CHARACTERS = 200
    CHARACTER_INVENTORIES = 201
    CHARACTER_PROGRESSIONS = 202
    CHARACTER_RENDER_DATA = 203
    CHARACTER_ACTIVITIES = 204
    CHARACTER_EQUIPMENT = 205
    ITEM_INSTANCES = 300
    ITEM_OBJECTIVES = 301
    ITEM_PERKS = 302
    ITEM_RENDER_DATA = 303
    ITEM_STATS = 304
    ITEM_SOCKETS = 305
    ITEM_TALENT_GRIDS = 306
    ITEM_COMMON_DATA = 307
    ITEM_PLUG_STATES = 308
    ITEM_PLUG_OBJECTIVES = 309
    ITEM_REUSABLE_PLUGS = 310
    VENDORS = 400
    VENDOR_CATEGORIES = 401
    VENDOR_SALES = 402
    KIOSKS = 500
    CURRENCY_LOOKUPS = 600
    PRESENTATION_NODES = 700
    COLLECTIBLES = 800
    RECORDS = 900
    TRANSITORY = 1000
    METRICS = 1100
    STRING_VARIABLES = 1200
    CRAFTABLES = 1300


class ComponentPrivacySetting(IntEnum):
    NONE = 0
    PUBLIC = 1
    PRIVATE = 2


class GlobalAlertLevel(IntEnum):
    UNKNOWN = 0
    BLUE = 1
    YELLOW = 2
    RED = 3


class GlobalAlertType(IntEnum):
    GLOBAL_ALERT = 0
    STREAMING_ALERT = 1


class DestinyClass(IntEnum):
    TITAN = 0
    HUNTER = 1
    WARLOCK = 2
    UNKNOWN = 3


class DestinyGender(IntEnum):
    MALE = 0
    FEMALE = 1
    UNKNOWN = 2


class DestinyRace(IntEnum):
    HUMAN = 0
    AWOKEN = 1
    EXO = 2
    UNKNOWN = 3


class ItemBindStatus(IntEnum):
    NOT_BOUND = 0
    BOUND_TO_CHARACTER = 1
    BOUND_TO_ACCOUNT = 2
    BOUND_TO_GUILD = 3


class ItemLocation(IntEnum):
    UNKNOWN = 0
    INVENTORY = 1
    VAULT = 2
    VENDOR = 3
    POSTMASTER = 4


class GroupType(IntEnum):
    GENERAL = 0
    CLAN = 1


class GroupsForMemberFilter(IntEnum):
    ALL = 0
    FOUNDED = 1
    NON_FOUNDED = 2


class RuntimeGroupMemberType(IntEnum):
    NONE = 0
    BEGINNER = 1
    MEMBER = 2
    ADMIN = 3
    ACTING_FOUNDER = 4
    FOUNDER = 5


class PlatformErrorCodes(IntEnum):
    """Subset of the vendor's `PlatformErrorCodes` seen by these endpoints.

    The envelope keeps `ErrorCode` as a plain int so unlisted codes still
    parse; `RemoteError.platform_error` maps onto this enum when possible.
    """

    NONE = 0
    SUCCESS = 1
    TRANSPORT_EXCEPTION = 2
    UNHANDLED_EXCEPTION = 3
    NOT_IMPLEMENTED = 4
    SYSTEM_DISABLED = 5
    FAILED_TO_LOAD_AVAILABLE_LOCALES_CONFIGURATION = 6
    PARAMETER_PARSE_FAILURE = 7
    PARAMETER_INVALID_RANGE = 8
    BAD_REQUEST = 9
    WEB_AUTH_REQUIRED = 99
    DESTINY_ACCOUNT_NOT_FOUND = 1601
    DESTINY_PRIVACY_RESTRICTION = 1665
    API_INVALID_OR_EXPIRED_KEY = 2101
    API_KEY_MISSING_FROM_REQUEST = 2102


# ---------------------------------------------------------------------------
# Bit-flag enums
# ---------------------------------------------------------------------------


class DestinyGameVersions(IntFlag):
    """Versions of the game a user has purchased."""

    DESTINY2 = 1
    DLC1 = 2
    DLC2 = 4
    FORSAKEN = 8
    YEAR_TWO_ANNUAL_PASS = 16
    SHADOWKEEP = 32
    BEYOND_LIGHT = 64
    ANNIVERSARY_30TH = 128
    THE_WITCH_QUEEN = 256


class ItemState(IntFlag):
    """Per-instance item state bits (locked, tracked, masterwork...)."""

    LOCKED = 1
    TRACKED = 2
    MASTERWORK = 4
    CRAFTED = 8
    HIGHLIGHTED_OBJECTIVE = 16


class TransferStatuses(IntFlag):
    """Why an item cannot be transferred. `TransferStatuses(0)` means it can."""

    ITEM_IS_EQUIPPED = 1
    NOT_TRANSFERRABLE = 2
    NO_ROOM_IN_DESTINATION = 4


class DestinyRecordState(IntFlag):
    """`DestinyRecordState(0)` is a record that could be redeemed but was not yet."""

    RECORD_REDEEMED = 1
    REWARD_UNAVAILABLE = 2
    OBJECTIVE_NOT_COMPLETED = 4
    OBSCURED = 8
    INVISIBLE = 16
    ENTITLEMENT_UNOWNED = 32
    CAN_EQUIP_TITLE = 64


class DestinyPresentationNodeState(IntFlag):
    INVISIBLE = 1
    OBSCURED = 2


class Capabilities(IntFlag):
    """Group capabilities."""

    LEADERBOARDS = 1
    CALLSIGN = 2
    OPTIONAL_CONVERSATIONS = 4
    CLAN_BANNER = 8
    D2_INVESTMENT_DATA = 16
    TAGS = 32
    ALLIANCES = 64


class OptInFlags(IntFlag):
    NEWSLETTER = 1
    SYSTEM = 2
    MARKETING = 4
    USER_RESEARCH = 8
    CUSTOMER_SERVICE = 16
    SOCIAL = 32
    PLAY_TESTS = 64
    PLAY_TESTS_LOCAL = 128
    CAREERS = 256


class PresenceOnlineStateFlags(IntFlag):
    DESTINY1 = 1
    DESTINY2 = 2


# Unsigned width, in bits, of each flag type on the wire. The vendor declares
# most of them as signed int32; `OptInFlags` is an int64.
FLAG_WIDTHS: dict[type[IntFlag], int] = {
    DestinyGameVersions: 32,
    ItemState: 32,
    TransferStatuses: 32,
    DestinyRecordState: 32,
    DestinyPresentationNodeState: 32,
    Capabilities: 32,
    OptInFlags: 64,
    PresenceOnlineStateFlags: 32,
}
