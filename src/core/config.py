"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El builder del cliente y la CLI leen la misma fuente de verdad.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Locale
from core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://www.bungie.net/Platform"
APP_DIR_NAME = "d2-platform"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    """Variables del .env global del usuario (vacío si no existe)."""

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return {key: value for key, value in dotenv_values(env_path).items() if value is not None}


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; los valores `None` se ignoran.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text(f"# {APP_DIR_NAME} user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class BungieSettings(BaseSettings):
    """Configuración central del cliente.

    La API key puede faltar aquí: la validación estricta ocurre al construir
    el cliente (`ConfigurationError`), no al leer el entorno.
    """

    model_config = SettingsConfigDict(
        env_prefix="D2_PLATFORM_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API key de la aplicación registrada en bungie.net (header X-API-Key).",
    )
    access_token: str | None = Field(
        default=None,
        description="Bearer token OAuth opcional para endpoints autorizados.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Raíz de la API de plataforma.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str | None = Field(
        default=None,
        description="Prefijo de User-Agent de la aplicación (se le añade el de la librería).",
    )

    oauth_client_id: int | None = Field(
        default=None,
        ge=1,
        description="client_id OAuth de la aplicación.",
    )
    oauth_client_secret: str | None = Field(
        default=None,
        description="client_secret OAuth (solo clientes confidenciales).",
    )

    default_locale: Locale = Field(
        default=Locale.ENGLISH,
        description="Idioma por defecto para definiciones y URLs OAuth.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON en lugar de consola coloreada.",
    )


def load_settings() -> BungieSettings:
    """Lee `BungieSettings` y traduce un entorno inválido a `ConfigurationError`.

    Por qué: la CLI y el builder solo conocen los errores de la librería; un
    `D2_PLATFORM_HTTP_TIMEOUT_SECONDS=0` no debe salir como traza de pydantic.
    """

    try:
        return BungieSettings()
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        raise ConfigurationError(
            f"Invalid environment configuration: {', '.join(fields)}",
            {"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc
