"""Cliente HTTP compartido (httpx).

La API de GitHub rechaza peticiones sin User-Agent, así que todas las
llamadas salen de aquí. Los tests inyectan un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from ghosts.core.config import AppSettings

DEFAULT_ACCEPT = "application/json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """`httpx.AsyncClient` con el UA y el timeout de `AppSettings`."""

    settings = settings or AppSettings()
    headers = {"User-Agent": settings.user_agent, "Accept": DEFAULT_ACCEPT, **(extra_headers or {})}
    return httpx.AsyncClient(
        headers=headers,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )
