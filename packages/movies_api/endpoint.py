"""Endpoint catalogue for the TMDB-style movies API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from packages.async_networking import HttpMethod, QueryValue

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class TimeWindow(Enum):
    """Trending aggregation window."""

    DAY = "day"
    WEEK = "week"


class MoviesRoute(Enum):
    """Logical operations exposed by the movies API."""

    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    SESSION = "session"
    GUEST_SESSION = "guest_session"
    DELETE_SESSION = "delete_session"
    CONFIGURATION = "configuration"
    TRENDING = "trending"
    MOVIE_DETAIL = "movie_detail"


_STATIC_PATHS: dict[MoviesRoute, str] = {
    MoviesRoute.AUTHENTICATION: "authentication/token/new",
    MoviesRoute.VALIDATION: "authentication/token/validate_with_login",
    MoviesRoute.SESSION: "authentication/session/new",
    MoviesRoute.GUEST_SESSION: "authentication/guest_session/new",
    MoviesRoute.DELETE_SESSION: "authentication/session",
    MoviesRoute.CONFIGURATION: "configuration",
}

_JSON_BODY_ROUTES = frozenset(
    {MoviesRoute.VALIDATION, MoviesRoute.SESSION, MoviesRoute.DELETE_SESSION}
)


@dataclass(frozen=True, slots=True)
class MoviesEndpoint:
    """One movies API call; satisfies ``HttpEndpoint`` structurally."""

    route: MoviesRoute
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    time_window: TimeWindow = TimeWindow.WEEK
    movie_id: int | None = None

    @property
    def path(self) -> str:
        if self.route is MoviesRoute.TRENDING:
            return f"trending/movie/{self.time_window.value}"
        if self.route is MoviesRoute.MOVIE_DETAIL:
            if self.movie_id is None:
                raise ValueError("movie_detail endpoint requires movie_id")
            return f"movie/{self.movie_id}"
        return _STATIC_PATHS[self.route]

    @property
    def method(self) -> HttpMethod:
        if self.route in (MoviesRoute.VALIDATION, MoviesRoute.SESSION):
            return HttpMethod.POST
        if self.route is MoviesRoute.DELETE_SESSION:
            return HttpMethod.DELETE
        return HttpMethod.GET

    @property
    def headers(self) -> Mapping[str, str]:
        headers = {"Accept": "application/json"}
        if self.route in _JSON_BODY_ROUTES:
            headers["Content-Type"] = "application/json"
        return headers

    @property
    def parameters(self) -> Mapping[str, QueryValue]:
        return {"api_key": self.api_key}
