"""Turn declarative endpoints into transport-ready request descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from packages.networking_shared.logging import fields, get_logger, log_context

from .codec import BodyEncoder, JsonCodec
from .endpoint import HttpEndpoint, QueryValue, query_value_to_string
from .errors import UrlConstructionError

logger = get_logger(__name__)


@dataclass
class RequestDescriptor:
    """One concrete HTTP call: final URL, verb token, headers and body bytes."""

    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


class HttpRequestBuilder:
    """Build ``RequestDescriptor`` values from ``HttpEndpoint`` descriptions.

    The builder is stateless apart from its encoder, so one instance can be
    shared by concurrent callers.
    """

    def __init__(self, encoder: BodyEncoder | None = None) -> None:
        self._encoder = encoder if encoder is not None else JsonCodec()

    def build(self, endpoint: HttpEndpoint, payload: Any = None) -> RequestDescriptor:
        """Return a descriptor for ``endpoint`` with ``payload`` as the body.

        Raises ``UrlConstructionError`` when the joined URL is not a valid
        absolute URL. Payload encoding failures propagate unchanged.
        """
        url = _build_url(endpoint)
        request = RequestDescriptor(
            url=url,
            method=endpoint.method.value,
            headers=dict(endpoint.headers or {}),
        )
        if payload is not None:
            request.body = self._encoder.encode(payload)

        with log_context({fields.HTTP_METHOD: request.method, fields.URL: request.url}):
            logger.debug("Request built")
        return request


def _build_url(endpoint: HttpEndpoint) -> str:
    """Join the path onto the base URL's path, validate, then append parameters.

    The path is joined as a path segment, so a query or fragment on the base
    URL stays where it is. Endpoint parameters follow any base query items.
    """
    try:
        url = httpx.URL(endpoint.base_url)
        if endpoint.path:
            url = url.copy_with(path=_join_path(url.path, endpoint.path))
    except httpx.InvalidURL as exc:
        raise UrlConstructionError(
            message=(
                f"Invalid URL from {endpoint.base_url!r} and {endpoint.path!r}: {exc}"
            ),
            base_url=endpoint.base_url,
            path=endpoint.path,
        ) from exc

    if not url.scheme or not url.host:
        raise UrlConstructionError(
            message=f"URL {str(url)!r} must be absolute with a scheme and host",
            base_url=endpoint.base_url,
            path=endpoint.path,
        )

    params = _query_items(endpoint.parameters)
    if params:
        url = url.copy_with(params=[*url.params.multi_items(), *params])
    return str(url)


def _join_path(base_path: str, path: str) -> str:
    """Join ``base_path`` and ``path`` with exactly one slash between them."""
    return f"{base_path.rstrip('/')}/{path.lstrip('/')}"


def _query_items(parameters: Mapping[str, QueryValue] | None) -> list[tuple[str, str]]:
    """Stringify parameter values, dropping those without a canonical form."""
    items: list[tuple[str, str]] = []
    for key, value in (parameters or {}).items():
        text = query_value_to_string(value)
        if text is None:
            with log_context({fields.QUERY_PARAMETER: key}):
                logger.debug("Query parameter dropped: value has no string form")
            continue
        items.append((key, text))
    return items
