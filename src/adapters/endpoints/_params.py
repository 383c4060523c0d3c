"""Renderizado de parámetros de ruta y de query al formato del vendor."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable
from urllib.parse import quote


def render_value(value: Any) -> str:
    """Convierte un valor tipado al string que espera la plataforma.

    - bool: `true` / `false` (antes que int: `bool` es subclase de `int`).
    - Enum / IntFlag: su valor entero.
    - datetime / date: ISO 8601.
    - Iterables (no string): elementos separados por comas.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(int(value.value)) if isinstance(value.value, int) else str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(render_value(item) for item in value)
    return str(value)


def render_components(components: Iterable[Any]) -> str:
    """`components=100,200,205`: enteros separados por comas, sin duplicados."""

    seen: list[int] = []
    for component in components:
        number = int(component)
        if number not in seen:
            seen.append(number)
    if not seen:
        raise ValueError("at least one component is required")
    return ",".join(str(number) for number in seen)


def path_segment(value: Any) -> str:
    """Parámetro de ruta renderizado y escapado (incluye `/`, `#`, espacios)."""

    return quote(render_value(value), safe="")


def render_query(params: dict[str, Any] | None) -> dict[str, str]:
    """Query final: omite los `None` y renderiza el resto."""

    if not params:
        return {}
    return {name: render_value(value) for name, value in params.items() if value is not None}
