"""Unit tests for the httpx-backed transport adapter."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from packages.async_networking import (
    HttpResponseMeta,
    HttpxTransport,
    RequestDescriptor,
)
from packages.networking_shared.config import HttpSettings


def test_perform_sends_descriptor_and_returns_metadata() -> None:
    """Method, headers and body should reach the wire; metadata comes back."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            201, headers={"X-Trace": "abc"}, content=b'{"ok":true}', request=request
        )

    descriptor = RequestDescriptor(
        url="https://example.test/items?key=value",
        method="PUT",
        headers={"Accept": "application/json"},
        body=b'{"name":"demo"}',
    )

    async def _run() -> tuple[bytes, object]:
        async with HttpxTransport(transport=httpx.MockTransport(handler)) as transport:
            return await transport.perform(descriptor)

    body, metadata = asyncio.run(_run())

    assert body == b'{"ok":true}'
    assert isinstance(metadata, HttpResponseMeta)
    assert metadata.status_code == 201
    assert metadata.url == "https://example.test/items?key=value"
    assert metadata.headers["x-trace"] == "abc"
    assert seen[0].method == "PUT"
    assert seen[0].headers["Accept"] == "application/json"
    assert seen[0].content == b'{"name":"demo"}'


def test_perform_applies_settings_headers() -> None:
    """User agent and default headers from settings should be sent."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, request=request)

    settings = HttpSettings(
        user_agent="movies-cli/2.0", default_headers={"X-Client": "tests"}
    )

    async def _run() -> None:
        async with HttpxTransport(
            settings=settings, transport=httpx.MockTransport(handler)
        ) as transport:
            await transport.perform(
                RequestDescriptor(url="https://example.test/", method="GET")
            )

    asyncio.run(_run())

    assert seen[0].headers["User-Agent"] == "movies-cli/2.0"
    assert seen[0].headers["X-Client"] == "tests"


def test_aclose_leaves_injected_client_open() -> None:
    """Only transports that created their client should close it."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, request=request)

    async def _run() -> tuple[bool, bool]:
        injected = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        borrowed = HttpxTransport(client=injected)
        await borrowed.aclose()
        injected_closed = injected.is_closed
        await injected.aclose()

        owned = HttpxTransport(transport=httpx.MockTransport(handler))
        await owned.aclose()
        return injected_closed, owned._client.is_closed

    injected_closed, owned_closed = asyncio.run(_run())

    assert injected_closed is False
    assert owned_closed is True


@pytest.mark.parametrize(
    "extra",
    [
        {"settings": HttpSettings(timeout_seconds=1.0)},
        {"transport": httpx.MockTransport(lambda request: httpx.Response(200))},
    ],
)
def test_injected_client_rejects_construction_options(extra: dict) -> None:
    """Settings or a transport alongside an injected client should be refused."""
    client = httpx.AsyncClient()
    try:
        with pytest.raises(ValueError, match="not both"):
            HttpxTransport(client=client, **extra)
    finally:
        asyncio.run(client.aclose())
