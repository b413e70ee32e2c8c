"""Example movies API binding built on ``packages.async_networking``."""

from .api import DefaultMoviesApi, MoviesApi
from .dtos import (
    ConfigurationDTO,
    GenreDTO,
    ImagesDTO,
    LanguageDTO,
    MovieDetailDTO,
    MovieDTO,
    PageDTO,
    PosterSize,
    SessionDTO,
    TokenDTO,
)
from .endpoint import DEFAULT_BASE_URL, MoviesEndpoint, MoviesRoute, TimeWindow

__all__ = [
    "DEFAULT_BASE_URL",
    "ConfigurationDTO",
    "DefaultMoviesApi",
    "GenreDTO",
    "ImagesDTO",
    "LanguageDTO",
    "MovieDTO",
    "MovieDetailDTO",
    "MoviesApi",
    "MoviesEndpoint",
    "MoviesRoute",
    "PageDTO",
    "PosterSize",
    "SessionDTO",
    "TokenDTO",
    "TimeWindow",
]
