"""Logging estructurado (structlog).

Por qué structlog:
- Eventos con campos (`method`, `path`, `error_code`) en vez de strings libres.
- El mismo stream sirve para humanos (consola) o para pipelines (JSON).

La librería nunca configura logging por su cuenta: solo emite eventos. La CLI
llama a `configure_logging` una vez al arrancar.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

# Claves que jamás deben llegar a un renderer.
SECRET_KEYS = frozenset(
    {
        "api_key",
        "access_token",
        "refresh_token",
        "client_secret",
        "authorization",
        "x-api-key",
        "code",
    }
)

REDACTED = "***"


def redact_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Procesador que enmascara credenciales si alguien las pasa como campo."""

    for key in list(event_dict.keys()):
        if key.lower() in SECRET_KEYS and event_dict[key] is not None:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configura structlog sobre el logging de la stdlib.

    Args:
        level: Nivel mínimo (DEBUG, INFO, WARNING, ERROR).
        json_logs: True para JSON de una línea por evento; False para consola.
    """

    shared: list[Processor] = [
        merge_contextvars,
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if json_logs:
        processors = [*shared, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared, structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Logger perezoso: toma la configuración vigente en su primer uso, no al importarse."""

    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
