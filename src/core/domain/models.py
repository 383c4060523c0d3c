"""Modelos base del catálogo (Pydantic v2).

Convenciones de todo el paquete `core.domain`:
- Nombres de campo en snake_case; el identificador del cable vive en `alias`
  y es el que se usa al serializar (`model_dump(by_alias=True)`).
- Los int64 del vendor viajan como strings JSON: `Int64` los acepta en
  cualquiera de las dos formas y los vuelve a emitir como string.
- Los campos desconocidos se ignoran: la API añade campos sin avisar.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntFlag
from typing import Annotated, Any, Callable, Generic, TypeVar

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator
from pydantic.config import ConfigDict

from core.domain.enums import (
    FLAG_WIDTHS,
    Capabilities,
    DestinyGameVersions,
    DestinyRecordState,
    GlobalAlertLevel,
    GlobalAlertType,
    ItemState,
    OptInFlags,
    PresenceOnlineStateFlags,
    TransferStatuses,
)

T = TypeVar("T")
F = TypeVar("F", bound=IntFlag)

SUCCESS_ERROR_CODE = 1

Int64 = Annotated[int, PlainSerializer(str, return_type=str, when_used="json")]


def unsigned_flag_validator(flag_type: type[F]) -> Callable[[Any], F]:
    """Validador que normaliza un entero del cable a un `IntFlag` sin signo.

    El vendor declara los flags como enteros con signo: un `-1` de 32 bits se
    convierte en `0xFFFFFFFF`. Los bits sin miembro con nombre se conservan.
    """

    mask = (1 << FLAG_WIDTHS.get(flag_type, 32)) - 1

    def validate(value: Any) -> F:
        if isinstance(value, flag_type):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"{flag_type.__name__} expects an integer, got {value!r}")
        return flag_type(int(value) & mask)

    return validate


def _flag(flag_type: type[F]) -> Any:
    return Annotated[
        flag_type,
        PlainValidator(unsigned_flag_validator(flag_type)),
        PlainSerializer(int, return_type=int),
    ]


GameVersionsFlags = _flag(DestinyGameVersions)
ItemStateFlags = _flag(ItemState)
TransferStatusFlags = _flag(TransferStatuses)
RecordStateFlags = _flag(DestinyRecordState)
CapabilitiesFlags = _flag(Capabilities)
OptInFlagSet = _flag(OptInFlags)
PresenceFlags = _flag(PresenceOnlineStateFlags)


class BungieModel(BaseModel):
    """Base de todos los contratos del vendor."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serializa con los nombres del cable, lista para `json=`."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# Envelope
# =============================================================================


class BungieApiResponse(BungieModel, Generic[T]):
    """Envoltorio estándar de toda respuesta de la plataforma.

    `response` solo tiene sentido cuando `error_code` es Success (1).
    """

    response: T | None = Field(default=None, alias="Response")
    error_code: int = Field(..., alias="ErrorCode")
    throttle_seconds: int = Field(default=0, alias="ThrottleSeconds")
    error_status: str = Field(default="", alias="ErrorStatus")
    message: str = Field(default="", alias="Message")
    message_data: dict[str, str] = Field(default_factory=dict, alias="MessageData")
    detailed_error_trace: str | None = Field(default=None, alias="DetailedErrorTrace")

    @property
    def is_success(self) -> bool:
        return self.error_code == SUCCESS_ERROR_CODE


class BungieTokenResponse(BungieModel):
    """Respuesta del endpoint OAuth de tokens (no usa el envoltorio estándar)."""

    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = Field(default=None, description="Vida del access token en segundos.")
    refresh_token: str | None = None
    refresh_expires_in: int | None = None
    membership_id: Int64 | None = Field(
        default=None,
        description="membershipId de Bungie.net del usuario que autorizó.",
    )
    error: str | None = None
    error_description: str | None = None


# =============================================================================
# Paging
# =============================================================================


class PagedQuery(BungieModel):
    items_per_page: int = Field(default=0, alias="itemsPerPage")
    current_page: int = Field(default=0, alias="currentPage")
    request_continuation_token: str | None = Field(default=None, alias="requestContinuationToken")


class SearchResult(BungieModel, Generic[T]):
    """Página genérica (`SearchResultOf...` en el vendor).

    Si `use_total_results` es falso, `total_results` puede ser una estimación:
    fiarse siempre de `has_more`.
    """

    results: list[T] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
    has_more: bool = Field(default=False, alias="hasMore")
    query: PagedQuery | None = None
    replacement_continuation_token: str | None = Field(default=None, alias="replacementContinuationToken")
    use_total_results: bool = Field(default=False, alias="useTotalResults")


# =============================================================================
# Root endpoints
# =============================================================================


class StreamInfo(BungieModel):
    channel_name: str | None = Field(default=None, alias="ChannelName")


class GlobalAlert(BungieModel):
    alert_key: str | None = Field(default=None, alias="AlertKey")
    alert_html: str | None = Field(default=None, alias="AlertHtml")
    alert_timestamp: datetime = Field(..., alias="AlertTimestamp")
    alert_link: str | None = Field(default=None, alias="AlertLink")
    alert_level: GlobalAlertLevel = Field(default=GlobalAlertLevel.UNKNOWN, alias="AlertLevel")
    alert_type: GlobalAlertType = Field(default=GlobalAlertType.GLOBAL_ALERT, alias="AlertType")
    stream_info: StreamInfo | None = Field(default=None, alias="StreamInfo")


class CoreSystem(BungieModel):
    enabled: bool = False
    parameters: dict[str, str] = Field(default_factory=dict)


class CoreSetting(BungieModel):
    identifier: str | None = None
    is_default: bool = Field(default=False, alias="isDefault")
    display_name: str | None = Field(default=None, alias="displayName")
    summary: str | None = None
    image_path: str | None = Field(default=None, alias="imagePath")
    child_settings: list[CoreSetting] = Field(default_factory=list, alias="childSettings")


class CoreSettingsConfiguration(BungieModel):
    """Configuración global de bungie.net (`/Settings/`)."""

    environment: str | None = None
    systems: dict[str, CoreSystem] = Field(
        default_factory=dict,
        description="Sistemas habilitados/deshabilitados por nombre (p.ej. 'Destiny2').",
    )
    ignore_reasons: list[CoreSetting] = Field(default_factory=list, alias="ignoreReasons")
    destiny_membership_types: list[CoreSetting] = Field(default_factory=list, alias="destinyMembershipTypes")
    user_content_locales: list[CoreSetting] = Field(default_factory=list, alias="userContentLocales")
    system_content_locales: list[CoreSetting] = Field(default_factory=list, alias="systemContentLocales")


# =============================================================================
# Applications
# =============================================================================


class Datapoint(BungieModel):
    time: datetime
    count: float | None = None


class Series(BungieModel):
    datapoints: list[Datapoint] = Field(default_factory=list)
    target: str | None = None


class ApiUsage(BungieModel):
    api_calls: list[Series] = Field(default_factory=list, alias="apiCalls")
    throttled_requests: list[Series] = Field(default_factory=list, alias="throttledRequests")


class Application(BungieModel):
    application_id: int = Field(..., alias="applicationId")
    name: str | None = None
    redirect_url: str | None = Field(default=None, alias="redirectUrl")
    link: str | None = None
    scope: Int64 = 0
    origin: str | None = None
    status: int = 0
    creation_date: datetime | None = Field(default=None, alias="creationDate")
    first_published: datetime | None = Field(default=None, alias="firstPublished")
