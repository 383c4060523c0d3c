"""Endpoints del área App (aplicaciones registradas)."""

from __future__ import annotations

from datetime import datetime

from adapters.endpoints._base import EndpointGroup
from adapters.endpoints._params import path_segment
from core.domain.models import ApiUsage, Application


class AppEndpoints(EndpointGroup):
    async def get_application_api_usage(
        self,
        application_id: int,
        start: datetime | None = None,
        end: datetime | None = None,
        *,
        access_token: str | None = None,
    ) -> ApiUsage:
        """Uso de la API de una aplicación propia.

        Requiere bearer token del dueño de la aplicación. El vendor limita la
        ventana a 48h y por defecto devuelve las últimas 24h.
        """

        return await self._get(
            f"/App/ApiUsage/{path_segment(application_id)}/",
            ApiUsage,
            params={"start": start, "end": end},
            access_token=access_token,
        )

    async def get_bungie_applications(self, *, access_token: str | None = None) -> list[Application]:
        return await self._get("/App/FirstParty/", list[Application], access_token=access_token)
