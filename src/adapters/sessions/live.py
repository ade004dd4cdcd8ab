"""Sesión live: GET real contra el endpoint JSON.

- Un locator que no es una URL http(s) absoluta falla como `NOT_FOUND` sin I/O.
- Cualquier error de httpx o status no-2xx es `TRANSPORT_ERROR`.
"""

from __future__ import annotations

import httpx
import structlog

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import ResourceNotFoundError, TransportError
from core.domain.models import ResourceLocator
from core.interfaces.session import DataSession

logger = structlog.get_logger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def parse_url(locator: ResourceLocator) -> httpx.URL:
    """Valida el locator como URL absoluta http(s) con host."""

    try:
        url = httpx.URL(locator.value)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise ResourceNotFoundError(f"malformed URL: {locator.value!r}", locator=locator.value) from exc
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise ResourceNotFoundError(f"malformed URL: {locator.value!r}", locator=locator.value)
    return url


class LiveSession(DataSession):
    """Obtiene el payload por red. No guarda estado entre llamadas."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, locator: ResourceLocator) -> bytes:
        url = parse_url(locator)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(url)
        except httpx.HTTPError as exc:
            logger.debug("live.transport_failed", url=str(url), error=str(exc))
            raise TransportError(f"GET {url} failed: {exc}", locator=locator.value) from exc

        if not resp.is_success:
            raise TransportError(
                f"GET {url} returned HTTP {resp.status_code}",
                locator=locator.value,
                status_code=resp.status_code,
            )

        logger.debug("live.fetched", url=str(url), status_code=resp.status_code, size=len(resp.content))
        return resp.content
