"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers de autenticación para todos los endpoints.
- Facilita testeo: respx intercepta el `httpx.AsyncClient` que sale de aquí.
"""

from __future__ import annotations

import httpx

LIBRARY_NAME = "d2-platform"
LIBRARY_VERSION = "0.1.0"
LIBRARY_URL = "+https://github.com/d2-platform/d2-platform"


def library_user_agent(app_user_agent: str | None) -> str | None:
    """User-Agent final: el de la aplicación seguido del de la librería.

    Devuelve None si la aplicación no declaró el suyo (httpx usa su default).
    """

    if not app_user_agent or not app_user_agent.strip():
        return None
    return f"{app_user_agent.strip()} {LIBRARY_NAME}/{LIBRARY_VERSION} ({LIBRARY_URL})"


def build_async_client(
    *,
    api_key: str,
    timeout_seconds: float,
    user_agent: str | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los headers fijos de la plataforma.

    Por qué un builder:
    - `X-API-Key` va en todas las peticiones; el bearer token se decide por
      llamada, así que NO se fija aquí.
    - Las redirecciones se desactivan: la API nunca redirige una respuesta
      válida y seguirlas perdería el header de la key.
    """

    headers: dict[str, str] = {
        "X-API-Key": api_key,
        "Accept": "application/json",
    }
    final_user_agent = library_user_agent(user_agent)
    if final_user_agent:
        headers["User-Agent"] = final_user_agent
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=False,
        headers=headers,
    )
