"""Execute request descriptors through a transport and decode typed results.

Each ``execute`` call moves through a fixed sequence:

    Idle -> Sent -> Validated -> Decoded
                 -> Invalid
         -> TransportFailed

A transport failure short-circuits validation and a validation failure
short-circuits decoding, so every failure surfaces as exactly one of
``NetworkError``, ``InvalidResponseError`` or ``DecodingError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import httpx

from packages.networking_shared.logging import fields, get_logger, log_context

from .builder import HttpRequestBuilder, RequestDescriptor
from .codec import BodyDecoder, JsonCodec
from .endpoint import HttpEndpoint
from .errors import (
    INVALID_RESPONSE_DESCRIPTION,
    INVALID_RESPONSE_STATUS,
    DecodingError,
    HttpClientError,
    InvalidResponseError,
    NetworkError,
)
from .transport import HttpResponseMeta, Transport

T = TypeVar("T")

logger = get_logger(__name__)


class HttpClient:
    """Runs one transport call per request and decodes the body."""

    def __init__(
        self, transport: Transport, decoder: BodyDecoder | None = None
    ) -> None:
        self._transport = transport
        self._decoder = decoder if decoder is not None else JsonCodec()

    async def execute(self, request: RequestDescriptor, response_type: type[T]) -> T:
        """Send ``request`` and decode a 2xx body as ``response_type``.

        Raises ``NetworkError``, ``InvalidResponseError`` or ``DecodingError``.
        """
        with log_context({fields.HTTP_METHOD: request.method, fields.URL: request.url}):
            data, metadata = await self._send(request)
            _validate_response(metadata, request)
            return self._decode(data, response_type)

    async def request(
        self,
        builder: HttpRequestBuilder,
        endpoint: HttpEndpoint,
        response_type: type[T],
        payload: Any = None,
    ) -> T:
        """Build a request for ``endpoint`` and execute it.

        Construction errors from ``builder`` propagate unchanged.
        """
        return await self.execute(builder.build(endpoint, payload), response_type)

    async def _send(self, request: RequestDescriptor) -> tuple[bytes, object]:
        """Invoke the transport once, mapping foreign failures to ``NetworkError``."""
        try:
            return await self._transport.perform(request)
        except HttpClientError:
            raise
        except Exception as exc:
            with log_context({fields.ERROR_KIND: type(exc).__name__}):
                logger.debug("Transport failed")
            raise NetworkError(
                message=f"Network failure for {request.method} {request.url}: {exc}",
                cause=exc,
            ) from exc

    def _decode(self, data: bytes, response_type: type[T]) -> T:
        """Decode the body, mapping decoder failures to ``DecodingError``."""
        try:
            return self._decoder.decode(data, response_type)
        except Exception as exc:
            type_name = getattr(response_type, "__name__", repr(response_type))
            with log_context({fields.RESPONSE_TYPE: type_name}):
                logger.debug("Response body decoding failed")
            raise DecodingError(
                message=f"Could not decode response body as {type_name}: {exc}",
                cause=exc,
            ) from exc


def _validate_response(metadata: object, request: RequestDescriptor) -> None:
    """Raise ``InvalidResponseError`` unless ``metadata`` is a 2xx HTTP response."""
    interpreted = _interpret_metadata(metadata)
    if interpreted is None:
        logger.debug("Response metadata is not an HTTP response")
        raise InvalidResponseError(
            message=(
                f"{INVALID_RESPONSE_DESCRIPTION} for {request.method} {request.url}"
            ),
            status_code=INVALID_RESPONSE_STATUS,
            url=request.url,
            description=INVALID_RESPONSE_DESCRIPTION,
            headers=None,
        )

    status_code, headers = interpreted
    if 200 <= status_code < 300:
        return

    description = reason_phrase(status_code)
    with log_context({fields.STATUS_CODE: status_code}):
        logger.debug("Response rejected by status validation")
    raise InvalidResponseError(
        message=(
            f"HTTP {status_code} ({description}) for {request.method} {request.url}"
        ),
        status_code=status_code,
        url=request.url,
        description=description,
        headers=headers,
    )


def _interpret_metadata(metadata: object) -> tuple[int, Mapping[str, str]] | None:
    """Return ``(status_code, headers)`` for structured HTTP metadata."""
    if isinstance(metadata, HttpResponseMeta):
        return metadata.status_code, metadata.headers
    if isinstance(metadata, httpx.Response):
        return metadata.status_code, httpx.Headers(metadata.headers)
    return None


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase, or a class phrase for unknown codes."""
    phrase = httpx.codes.get_reason_phrase(status_code)
    if phrase:
        return phrase
    if 100 <= status_code < 200:
        return "Informational"
    if 200 <= status_code < 300:
        return "Success"
    if 300 <= status_code < 400:
        return "Redirection"
    if 400 <= status_code < 500:
        return "Client Error"
    if 500 <= status_code < 600:
        return "Server Error"
    return "Unknown Status"
