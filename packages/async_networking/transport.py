"""Transport boundary between the client and the network stack."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx

from packages.networking_shared.config import HttpSettings
from packages.networking_shared.logging import fields, get_logger, log_context

from .builder import RequestDescriptor

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HttpResponseMeta:
    """Structured metadata for one HTTP response."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str | None = None


@runtime_checkable
class Transport(Protocol):
    """Performs one request and returns raw body bytes plus response metadata.

    Implementations raise on transport-level failure (connectivity, DNS,
    TLS, timeouts). Metadata should be ``HttpResponseMeta`` or an
    ``httpx.Response``; anything else is rejected by the client.
    """

    async def perform(self, request: RequestDescriptor) -> tuple[bytes, object]:
        """Send ``request`` and return ``(body, metadata)``."""
        ...


class HttpxTransport:
    """``Transport`` implementation over ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        settings: HttpSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Wrap ``client`` or build one from ``settings`` and ``transport``.

        ``client`` already carries its own configuration, so passing it together
        with ``settings`` or ``transport`` raises ``ValueError``.
        """
        if client is not None and (settings is not None or transport is not None):
            raise ValueError("pass either client or settings/transport, not both")
        self._owns_client = client is None
        self._client = client or _new_client(settings or HttpSettings(), transport)

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    async def perform(self, request: RequestDescriptor) -> tuple[bytes, object]:
        """Send one request; ``httpx`` failures propagate to the caller."""
        with log_context({fields.HTTP_METHOD: request.method, fields.URL: request.url}):
            logger.debug("Sending request")
            response = await self._client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.body,
            )
            meta = HttpResponseMeta(
                status_code=response.status_code,
                headers=httpx.Headers(response.headers),
                url=str(response.url),
            )
            with log_context({fields.STATUS_CODE: meta.status_code}):
                logger.debug("Response received")
        return response.content, meta


def _new_client(
    settings: HttpSettings,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` from HTTP settings."""
    headers = {"User-Agent": settings.user_agent, **settings.default_headers}
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )
