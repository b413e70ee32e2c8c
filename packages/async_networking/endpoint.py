"""Declarative HTTP endpoint contract and query value conversion."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Protocol, TypeAlias, runtime_checkable


class HttpMethod(Enum):
    """HTTP verbs an endpoint may declare; values are the wire tokens."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    HEAD = "HEAD"
    DELETE = "DELETE"


QueryValue: TypeAlias = str | int | float | bool


@runtime_checkable
class HttpEndpoint(Protocol):
    """Read-only description of one HTTP operation.

    Any object exposing these attributes qualifies: frozen dataclasses, enums
    or plain classes with properties. ``path`` is appended to ``base_url``
    and ``parameters`` become the query string.
    """

    @property
    def base_url(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HttpMethod: ...

    @property
    def headers(self) -> Mapping[str, str] | None: ...

    @property
    def parameters(self) -> Mapping[str, QueryValue] | None: ...


def query_value_to_string(value: object) -> str | None:
    """Return the canonical query-string form of ``value``.

    ``None`` means the value has no canonical form and must be dropped.
    """
    if isinstance(value, Enum):
        value = value.value
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, (int, float)):
        return str(value)
    return None
