"""Typed errors for request construction and client execution.

Errors stay mutable with identity equality; ``contextlib`` managers assign
``__traceback__`` on exceptions leaving their block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, TypeAlias

INVALID_RESPONSE_STATUS = -1
INVALID_RESPONSE_DESCRIPTION = "Invalid response type"


@dataclass(eq=False)
class UrlConstructionError(Exception):
    """Endpoint base URL and path did not form a valid absolute URL."""

    message: str
    base_url: str
    path: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class HttpClientError(Exception):
    """Base error for failures reported by ``HttpClient.execute``."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class InvalidResponseError(HttpClientError):
    """Response metadata was unusable or the status was outside 2xx."""

    status_code: int = INVALID_RESPONSE_STATUS
    url: str | None = None
    description: str | None = None
    headers: Mapping[str, str] | None = None


@dataclass(eq=False)
class DecodingError(HttpClientError):
    """Response body did not decode into the requested type."""

    cause: Exception | None = None


@dataclass(eq=False)
class NetworkError(HttpClientError):
    """Transport failed before any response was available."""

    cause: Exception | None = None


ClientError: TypeAlias = InvalidResponseError | DecodingError | NetworkError
