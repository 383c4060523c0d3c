"""Contrato del transporte de la plataforma.

Por qué Protocol:
- Cada grupo de endpoints (`destiny2`, `user`, ...) solo necesita "envía esta
  petición y dame el payload tipado"; no le importa httpx.
- En tests se puede sustituir por un doble que registre las peticiones.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable

from core.domain.models import BungieModel

T = TypeVar("T")


@runtime_checkable
class PlatformTransport(Protocol):
    """Envía una petición y devuelve el `Response` del envoltorio ya validado.

    Reglas:
    - `path` es relativo a la raíz de la plataforma y ya trae los parámetros
      de ruta sustituidos y escapados.
    - Los valores `None` de `params` no se envían.
    - `access_token` sustituye, solo para esta llamada, al token del cliente.
    - Un `ErrorCode` distinto de Success se traduce en `RemoteError`.
    """

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
        ...
