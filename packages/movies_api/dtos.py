"""Response payload models for the movies API."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

TItem = TypeVar("TItem")


class _Dto(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TokenDTO(_Dto):
    success: bool
    expires_at: str
    request_token: str


class SessionDTO(_Dto):
    success: bool
    session_id: str | None = None
    guest_session_id: str | None = None
    expires_at: str | None = None


class PosterSize(str, Enum):
    W92 = "w92"
    W154 = "w154"
    W185 = "w185"
    W342 = "w342"
    W500 = "w500"
    W780 = "w780"
    ORIGINAL = "original"


class ImagesDTO(_Dto):
    secure_base_url: str
    poster_sizes: list[PosterSize]


class ConfigurationDTO(_Dto):
    images: ImagesDTO


class MovieDTO(_Dto):
    id: int
    title: str
    poster_path: str


class GenreDTO(_Dto):
    id: int
    name: str


class LanguageDTO(_Dto):
    name: str


class MovieDetailDTO(_Dto):
    """Full detail payload for one movie."""

    id: int
    title: str
    overview: str | None = None
    poster_path: str
    vote_average: float | None = None
    genres: list[GenreDTO]
    release_date: str | None = None
    runtime: int | None = None
    spoken_languages: list[LanguageDTO]


class PageDTO(_Dto, Generic[TItem]):
    """One page of a paginated listing."""

    page: int | None = None
    total_results: int | None = None
    total_pages: int | None = None
    results: list[TItem]
