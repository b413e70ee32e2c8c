"""Typed movies API facade over the request builder and HTTP client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from packages.async_networking import HttpClient, HttpRequestBuilder
from packages.networking_shared.config import MoviesSettings

from .dtos import (
    ConfigurationDTO,
    MovieDetailDTO,
    MovieDTO,
    PageDTO,
    SessionDTO,
    TokenDTO,
)
from .endpoint import MoviesEndpoint, MoviesRoute, TimeWindow

TResponse = TypeVar("TResponse")


class MoviesApi(Protocol):
    """Operations offered by the movies API binding."""

    async def authentication(self) -> TokenDTO: ...

    async def validation(
        self, username: str, password: str, token: str
    ) -> TokenDTO: ...

    async def session(self, token: str) -> SessionDTO: ...

    async def guest_session(self) -> SessionDTO: ...

    async def delete_session(self, session_id: str) -> SessionDTO: ...

    async def configuration(self) -> ConfigurationDTO: ...

    async def trending(
        self, window: TimeWindow = TimeWindow.WEEK
    ) -> PageDTO[MovieDTO]: ...

    async def movie_detail(self, movie_id: int) -> MovieDetailDTO: ...


@dataclass(frozen=True, slots=True)
class _Login:
    username: str
    password: str
    request_token: str


@dataclass(frozen=True, slots=True)
class _Token:
    request_token: str


@dataclass(frozen=True, slots=True)
class _Session:
    session_id: str


class DefaultMoviesApi:
    """``MoviesApi`` implementation; one builder+client round trip per call."""

    def __init__(
        self,
        *,
        client: HttpClient,
        builder: HttpRequestBuilder | None = None,
        settings: MoviesSettings | None = None,
    ) -> None:
        self._client = client
        self._builder = builder if builder is not None else HttpRequestBuilder()
        self._settings = settings if settings is not None else MoviesSettings()

    async def authentication(self) -> TokenDTO:
        return await self._call(self._endpoint(MoviesRoute.AUTHENTICATION), TokenDTO)

    async def validation(self, username: str, password: str, token: str) -> TokenDTO:
        payload = _Login(username=username, password=password, request_token=token)
        return await self._call(
            self._endpoint(MoviesRoute.VALIDATION), TokenDTO, payload
        )

    async def session(self, token: str) -> SessionDTO:
        return await self._call(
            self._endpoint(MoviesRoute.SESSION), SessionDTO, _Token(request_token=token)
        )

    async def guest_session(self) -> SessionDTO:
        return await self._call(self._endpoint(MoviesRoute.GUEST_SESSION), SessionDTO)

    async def delete_session(self, session_id: str) -> SessionDTO:
        return await self._call(
            self._endpoint(MoviesRoute.DELETE_SESSION),
            SessionDTO,
            _Session(session_id=session_id),
        )

    async def configuration(self) -> ConfigurationDTO:
        return await self._call(
            self._endpoint(MoviesRoute.CONFIGURATION), ConfigurationDTO
        )

    async def trending(self, window: TimeWindow = TimeWindow.WEEK) -> PageDTO[MovieDTO]:
        endpoint = self._endpoint(MoviesRoute.TRENDING, time_window=window)
        return await self._call(endpoint, PageDTO[MovieDTO])

    async def movie_detail(self, movie_id: int) -> MovieDetailDTO:
        endpoint = self._endpoint(MoviesRoute.MOVIE_DETAIL, movie_id=movie_id)
        return await self._call(endpoint, MovieDetailDTO)

    def _endpoint(
        self,
        route: MoviesRoute,
        *,
        time_window: TimeWindow = TimeWindow.WEEK,
        movie_id: int | None = None,
    ) -> MoviesEndpoint:
        """Bind ``route`` to configured base URL and API key."""
        return MoviesEndpoint(
            route=route,
            api_key=self._settings.api_key,
            base_url=self._settings.base_url,
            time_window=time_window,
            movie_id=movie_id,
        )

    async def _call(
        self,
        endpoint: MoviesEndpoint,
        response_type: type[TResponse],
        payload: object = None,
    ) -> TResponse:
        return await self._client.request(
            self._builder, endpoint, response_type, payload
        )
