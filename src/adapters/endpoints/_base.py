"""Base de los grupos de endpoints."""

from __future__ import annotations

from typing import Any

from core.domain.models import BungieModel
from core.interfaces.transport import PlatformTransport


class EndpointGroup:
    """Un área funcional del vendor (`Destiny2`, `User`, ...) sobre un transporte."""

    def __init__(self, transport: PlatformTransport) -> None:
        self._transport = transport

    async def _get(
        self,
        path: str,
        response_type: Any,
        *,
        params: dict[str, Any] | None = None,
        access_token: str | None = None,
    ) -> Any:
        return await self._transport.request(
            "GET",
            path,
            response_type=response_type,
            params=params,
            access_token=access_token,
        )

    async def _post(
        self,
        path: str,
        response_type: Any,
        *,
        body: BungieModel | None = None,
        params: dict[str, Any] | None = None,
        access_token: str | None = None,
    ) -> Any:
        return await self._transport.request(
            "POST",
            path,
            response_type=response_type,
            params=params,
            body=body,
            access_token=access_token,
        )
