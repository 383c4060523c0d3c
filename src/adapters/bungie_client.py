"""Cliente asíncrono de la plataforma Bungie.net.

Por qué este diseño:
- Un único `httpx.AsyncClient` compartido por todos los grupos de endpoints;
  el cliente es inmutable tras `build()` y seguro para llamadas concurrentes.
- Cada grupo (`client.destiny2`, `client.user`, ...) solo arma la petición;
  el envío, el parseo del envoltorio y la traducción de errores viven aquí.
- No hay reintentos ni caché: un fallo se propaga tal cual al llamador.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.endpoints import (
    AppEndpoints,
    Destiny2Endpoints,
    GroupV2Endpoints,
    RootEndpoints,
    UserEndpoints,
)
from adapters.endpoints._params import render_query, render_value
from adapters.http_client import build_async_client
from core.config import DEFAULT_BASE_URL, BungieSettings, load_settings
from core.domain.language import Locale
from core.domain.models import BungieApiResponse, BungieModel, BungieTokenResponse
from core.errors import ConfigurationError, RemoteError, TransportError
from core.logging import get_logger

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 20.0
OAUTH_AUTHORIZE_URL = "https://www.bungie.net/{language}/OAuth/Authorize/"
OAUTH_TOKEN_PATH = "/App/OAuth/Token/"

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


_ENVELOPE = TypeAdapter(BungieApiResponse[Any])


class BungieClientBuilder:
    """Acumula la configuración y construye un `BungieClient`.

    `build()` valida todo antes de abrir conexiones: una key vacía, un timeout
    no positivo o una base URL que no sea http(s) dan `ConfigurationError`.
    """

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._access_token: str | None = None
        self._base_url: str = DEFAULT_BASE_URL
        self._timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
        self._user_agent: str | None = None
        self._oauth_client_id: int | None = None
        self._oauth_client_secret: str | None = None

    @classmethod
    def from_settings(cls, settings: BungieSettings | None = None) -> BungieClientBuilder:
        """Builder precargado desde `BungieSettings` (entorno + .env).

        Un entorno inválido da `ConfigurationError`, igual que `build()`.
        """

        settings = settings or load_settings()
        builder = (
            cls()
            .with_base_url(settings.base_url)
            .with_timeout(settings.http_timeout_seconds)
        )
        if settings.api_key:
            builder.with_api_key(settings.api_key)
        if settings.access_token:
            builder.with_access_token(settings.access_token)
        if settings.user_agent:
            builder.with_user_agent(settings.user_agent)
        if settings.oauth_client_id is not None:
            builder.with_oauth_client_id(settings.oauth_client_id)
        if settings.oauth_client_secret:
            builder.with_oauth_client_secret(settings.oauth_client_secret)
        return builder

    def with_api_key(self, api_key: str) -> BungieClientBuilder:
        self._api_key = api_key
        return self

    def with_access_token(self, access_token: str | None) -> BungieClientBuilder:
        self._access_token = access_token
        return self

    def with_base_url(self, base_url: str) -> BungieClientBuilder:
        self._base_url = base_url
        return self

    def with_timeout(self, seconds: float) -> BungieClientBuilder:
        self._timeout_seconds = seconds
        return self

    def with_user_agent(self, user_agent: str) -> BungieClientBuilder:
        """Identifica a la aplicación; se le añade el sufijo de la librería."""

        self._user_agent = user_agent
        return self

    def with_oauth_client_id(self, client_id: int) -> BungieClientBuilder:
        self._oauth_client_id = client_id
        return self

    def with_oauth_client_secret(self, client_secret: str) -> BungieClientBuilder:
        self._oauth_client_secret = client_secret
        return self

    def build(self) -> BungieClient:
        api_key = (self._api_key or "").strip()
        if not api_key:
            raise ConfigurationError("An API key is required to build a client")
        if self._timeout_seconds <= 0:
            raise ConfigurationError(
                "Timeout must be positive",
                {"timeout_seconds": self._timeout_seconds},
            )
        base_url = (self._base_url or "").strip().rstrip("/")
        if not base_url.startswith(("https://", "http://")):
            raise ConfigurationError("Base URL must be an http(s) URL", {"base_url": self._base_url})
        if self._oauth_client_id is not None and self._oauth_client_id < 1:
            raise ConfigurationError(
                "OAuth client id must be a positive integer",
                {"oauth_client_id": self._oauth_client_id},
            )

        return BungieClient(
            api_key=api_key,
            access_token=self._access_token or None,
            base_url=base_url,
            timeout_seconds=self._timeout_seconds,
            user_agent=self._user_agent,
            oauth_client_id=self._oauth_client_id,
            oauth_client_secret=self._oauth_client_secret or None,
        )


class BungieClient:
    """Cliente de la API. Se obtiene con `BungieClient.builder()...build()`.

    Uso:
        async with BungieClient.builder().with_api_key(key).build() as client:
            manifest = await client.destiny2.get_destiny_manifest()
    """

    def __init__(
        self,
        *,
        api_key: str,
        access_token: str | None,
        base_url: str,
        timeout_seconds: float,
        user_agent: str | None,
        oauth_client_id: int | None,
        oauth_client_secret: str | None,
    ) -> None:
        self._access_token = access_token
        self._base_url = base_url
        self._oauth_client_id = oauth_client_id
        self._oauth_client_secret = oauth_client_secret
        self._http = build_async_client(
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
        )

        self.root = RootEndpoints(self)
        self.app = AppEndpoints(self)
        self.destiny2 = Destiny2Endpoints(self)
        self.user = UserEndpoints(self)
        self.groupv2 = GroupV2Endpoints(self)

    @staticmethod
    def builder() -> BungieClientBuilder:
        return BungieClientBuilder()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def has_access_token(self) -> bool:
        return self._access_token is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> BungieClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        response_type: type[T] | Any,
        params: Mapping[str, Any] | None = None,
        body: BungieModel | None = None,
        access_token: str | None = None,
    ) -> T:
        """Envía una petición y devuelve el payload tipado del envoltorio."""

        headers: dict[str, str] = {}
        token = access_token or self._access_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        query = render_query(dict(params) if params else None)
        logger.debug("Bungie request", method=method, path=path, authorized=bool(token))
        try:
            response = await self._http.request(
                method,
                f"{self._base_url}{path}",
                params=query or None,
                json=body.to_wire() if body is not None else None,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"Timed out calling {method} {path}", details={"path": path}) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"HTTP error calling {method} {path}: {exc}", details={"path": path}) from exc

        return self._read_envelope(response, path, response_type)

    def _read_envelope(self, response: httpx.Response, path: str, response_type: Any) -> Any:
        content_type = response.headers.get("content-type", "")
        if not content_type.lower().startswith("application/json"):
            raise TransportError(
                f"Expected a JSON response from {path}, got {content_type or 'no content type'!r}",
                http_status=response.status_code,
                details={"path": path},
            )

        try:
            envelope: BungieApiResponse[Any] = _ENVELOPE.validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                f"Malformed response envelope from {path}",
                http_status=response.status_code,
                details={"path": path, "errors": exc.errors(include_url=False)},
            ) from exc

        logger.debug(
            "Bungie response",
            path=path,
            status=response.status_code,
            error_code=envelope.error_code,
        )

        if not envelope.is_success:
            logger.warning(
                "Bungie API error",
                path=path,
                error_code=envelope.error_code,
                error_status=envelope.error_status,
                throttle_seconds=envelope.throttle_seconds,
            )
            raise RemoteError(
                envelope.message,
                error_code=envelope.error_code,
                error_status=envelope.error_status,
                throttle_seconds=envelope.throttle_seconds,
                message_data=envelope.message_data,
                http_status=response.status_code,
            )

        if envelope.response is None:
            raise TransportError(
                f"Successful response from {path} carried no payload",
                http_status=response.status_code,
                details={"path": path},
            )

        try:
            return _adapter(response_type).validate_python(envelope.response)
        except ValidationError as exc:
            raise TransportError(
                f"Response payload from {path} does not match the expected type",
                http_status=response.status_code,
                details={"path": path, "errors": exc.errors(include_url=False)},
            ) from exc

    # ------------------------------------------------------------------
    # OAuth (authorization code flow)
    # ------------------------------------------------------------------

    def get_authorization_url(self, language_code: Locale | str = "en", state: str | None = None) -> str:
        """URL a la que redirigir al usuario para que autorice la aplicación.

        `state` se devuelve tal cual en la redirección; úsalo contra CSRF.
        """

        client_id = self._require_client_id()
        params: dict[str, str] = {"client_id": str(client_id)}
        if state is not None:
            params["state"] = state
        params["response_type"] = "code"
        url = httpx.URL(OAUTH_AUTHORIZE_URL.format(language=render_value(language_code)), params=params)
        return str(url)

    async def get_auth_token(self, auth_code: str) -> BungieTokenResponse:
        """Canjea el `code` de la redirección por un access token."""

        form: dict[str, str] = {"client_id": str(self._require_client_id())}
        if self._oauth_client_secret:
            form["client_secret"] = self._oauth_client_secret
        form["grant_type"] = "authorization_code"
        form["code"] = auth_code
        return await self._request_token(form)

    async def refresh_auth_token(self, refresh_token: str) -> BungieTokenResponse:
        """Renueva el access token. Solo clientes confidenciales (con secret)."""

        client_id = self._require_client_id()
        if not self._oauth_client_secret:
            raise ConfigurationError("Refreshing a token requires an OAuth client secret")
        form = {
            "client_id": str(client_id),
            "client_secret": self._oauth_client_secret,
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        return await self._request_token(form)

    def _require_client_id(self) -> int:
        if self._oauth_client_id is None:
            raise ConfigurationError("An OAuth client id is required for the OAuth flow")
        return self._oauth_client_id

    async def _request_token(self, form: dict[str, str]) -> BungieTokenResponse:
        logger.debug("Bungie token request", grant_type=form["grant_type"])
        try:
            response = await self._http.post(f"{self._base_url}{OAUTH_TOKEN_PATH}", data=form)
        except httpx.TimeoutException as exc:
            raise TransportError("Timed out requesting an OAuth token") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"HTTP error requesting an OAuth token: {exc}") from exc

        content_type = response.headers.get("content-type", "")
        if not content_type.lower().startswith("application/json"):
            raise TransportError(
                f"Expected a JSON token response, got {content_type or 'no content type'!r}",
                http_status=response.status_code,
                details={"path": OAUTH_TOKEN_PATH},
            )

        try:
            token = BungieTokenResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                "Malformed OAuth token response",
                http_status=response.status_code,
            ) from exc

        if not token.access_token:
            logger.warning("Bungie token error", status=response.status_code, error=token.error)
            raise RemoteError(
                token.error_description or token.error or "Token response carried no access token",
                error_code=0,
                error_status=token.error or "",
                http_status=response.status_code,
            )
        return token
