"""Descarga del documento `https://api.github.com/meta`.

Un único GET por ejecución. Cualquier respuesta no-2xx es un fallo duro
(`MetaFetchError`); los errores de transporte de httpx se propagan tal cual.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ghosts.adapters.http_client import build_async_client
from ghosts.core.config import AppSettings
from ghosts.core.errors import MetaFetchError
from ghosts.core.interfaces.capabilities import MetaFetcher

logger = logging.getLogger(__name__)


async def fetch_github_meta(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    settings = settings or AppSettings()
    headers = {
        # GitHub requiere UA. Accept JSON versión estable.
        "Accept": settings.meta_accept,
    }

    logger.info("Fetching %s", settings.meta_url)
    async with build_async_client(settings, extra_headers=headers, transport=transport) as client:
        resp = await client.get(settings.meta_url)

    if not resp.is_success:
        raise MetaFetchError(resp.status_code, resp.reason_phrase)

    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"GitHub meta returned {type(data).__name__}, expected a JSON object")
    return data


def github_meta_fetcher(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MetaFetcher:
    """Capacidad `MetaFetcher` ligada a una configuración concreta."""

    async def fetch() -> dict[str, Any]:
        return await fetch_github_meta(settings=settings, transport=transport)

    return fetch
