"""Endpoints sin área (raíz de la plataforma)."""

from __future__ import annotations

from adapters.endpoints._base import EndpointGroup
from core.domain.models import CoreSettingsConfiguration, CoreSystem, GlobalAlert


class RootEndpoints(EndpointGroup):
    async def get_available_locales(self, *, access_token: str | None = None) -> dict[str, str]:
        """Locales disponibles: nombre legible -> código (p.ej. `"English": "en"`)."""

        return await self._get("/GetAvailableLocales/", dict[str, str], access_token=access_token)

    async def get_common_settings(self, *, access_token: str | None = None) -> CoreSettingsConfiguration:
        return await self._get("/Settings/", CoreSettingsConfiguration, access_token=access_token)

    async def get_global_alerts(
        self,
        includestreaming: bool | None = None,
        *,
        access_token: str | None = None,
    ) -> list[GlobalAlert]:
        return await self._get(
            "/GlobalAlerts/",
            list[GlobalAlert],
            params={"includestreaming": includestreaming},
            access_token=access_token,
        )

    async def get_user_system_overrides(self, *, access_token: str | None = None) -> dict[str, CoreSystem]:
        return await self._get("/UserSystemOverrides/", dict[str, CoreSystem], access_token=access_token)
