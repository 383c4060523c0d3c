"""Errores públicos de la librería.

Tres familias, todas derivadas de `BungieError`:
- `ConfigurationError`: setup inválido, detectado antes de cualquier I/O.
- `TransportError`: red, timeout o cuerpo de respuesta ilegible.
- `RemoteError`: la API respondió con un `ErrorCode` distinto de Success.
"""

from __future__ import annotations

from typing import Any

from core.domain.enums import PlatformErrorCodes


class BungieError(Exception):
    """Base error class for every failure raised by the client."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(BungieError):
    """Invalid or missing client setup."""


class TransportError(BungieError):
    """Network failure, timeout or malformed response body."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.http_status = http_status

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.http_status is not None:
            result["http_status"] = self.http_status
        return result


class RemoteError(BungieError):
    """The vendor returned a non-success `ErrorCode`.

    `error_code`, `error_status` and `message` are copied verbatim from the
    response envelope.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: int,
        error_status: str = "",
        throttle_seconds: int = 0,
        message_data: dict[str, str] | None = None,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, dict(message_data or {}))
        self.error_code = error_code
        self.error_status = error_status
        self.throttle_seconds = throttle_seconds
        self.message_data = dict(message_data or {})
        self.http_status = http_status

    @property
    def platform_error(self) -> PlatformErrorCodes | None:
        """Known `PlatformErrorCodes` member for `error_code`, if any."""
        try:
            return PlatformErrorCodes(self.error_code)
        except ValueError:
            return None

    def __str__(self) -> str:
        label = self.error_status or str(self.error_code)
        return f"{label} ({self.error_code}): {self.message}"

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["error_code"] = self.error_code
        result["error_status"] = self.error_status
        if self.throttle_seconds:
            result["throttle_seconds"] = self.throttle_seconds
        return result
