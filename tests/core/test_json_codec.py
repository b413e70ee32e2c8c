"""Unit tests for the pydantic-backed JSON codec."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field, ValidationError

from packages.async_networking import JsonCodec


class _Genre(BaseModel):
    id: int
    name: str


class _Movie(BaseModel):
    id: int
    title: str
    overview: str | None = None
    genres: list[_Genre] = Field(default_factory=list)


@dataclass
class _Login:
    username: str
    request_token: str


def test_encode_supports_models_dataclasses_and_mappings() -> None:
    """Models, dataclasses and dicts should serialize by field name."""
    codec = JsonCodec()

    assert json.loads(codec.encode(_Genre(id=1, name="Drama"))) == {
        "id": 1,
        "name": "Drama",
    }
    assert json.loads(codec.encode(_Login(username="u", request_token="t"))) == {
        "username": "u",
        "request_token": "t",
    }
    assert json.loads(codec.encode({"nested": [1, 2]})) == {"nested": [1, 2]}


def test_encode_can_exclude_none_fields() -> None:
    """exclude_none should drop absent optional fields from the body."""
    body = JsonCodec(exclude_none=True).encode(_Movie(id=1, title="Heat"))

    assert json.loads(body) == {"id": 1, "title": "Heat", "genres": []}


def test_decode_recurses_and_defaults_absent_optionals() -> None:
    """Nested structures decode recursively; missing optionals become None."""
    movie = JsonCodec().decode(
        b'{"id": 2, "title": "Ran", "genres": [{"id": 18, "name": "Drama"}]}',
        _Movie,
    )

    assert movie.overview is None
    assert movie.genres == [_Genre(id=18, name="Drama")]


def test_decode_raises_validation_error_for_bad_payload() -> None:
    """Invalid JSON should raise pydantic's ValidationError."""
    with pytest.raises(ValidationError):
        JsonCodec().decode(b"invalid-json", _Movie)
