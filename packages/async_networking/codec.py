"""JSON body encoding/decoding backed by pydantic."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

import pydantic_core
from pydantic import TypeAdapter

T = TypeVar("T")


class BodyEncoder(Protocol):
    """Serializes request payloads to bytes."""

    def encode(self, value: Any) -> bytes:
        """Return the wire bytes for ``value`` or raise an encoding failure."""
        ...


class BodyDecoder(Protocol):
    """Deserializes response bodies into caller-requested types."""

    def decode(self, data: bytes, type_: type[T]) -> T:
        """Return ``data`` parsed as ``type_`` or raise a decoding failure."""
        ...


class JsonCodec:
    """JSON codec for pydantic models, dataclasses and plain containers.

    Field names map directly to JSON keys and nested structures recurse.
    Optional fields missing from a document decode to ``None``.
    """

    def __init__(self, *, by_alias: bool = False, exclude_none: bool = False) -> None:
        self._by_alias = by_alias
        self._exclude_none = exclude_none

    def encode(self, value: Any) -> bytes:
        """Serialize ``value``; raises ``PydanticSerializationError`` if unsupported."""
        return pydantic_core.to_json(
            value,
            by_alias=self._by_alias,
            exclude_none=self._exclude_none,
        )

    def decode(self, data: bytes, type_: type[T]) -> T:
        """Validate ``data`` as JSON for ``type_``; raises ``ValidationError``."""
        return TypeAdapter(type_).validate_json(data)
