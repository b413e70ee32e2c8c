"""Typed configuration models for async-networking runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    EnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ENV_PREFIX = "ASYNC_NETWORKING_"
DEFAULT_CONFIG_PATH = (
    Path.home() / ".config" / "async-networking" / "networking.yaml"
)


class LoggingSettings(BaseModel):
    """Structured logging configuration for applications using the client."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "async-networking"
    environment: str = "dev"


class HttpSettings(BaseModel):
    """Defaults applied by ``HttpxTransport`` when it builds its own client."""

    timeout_seconds: float = Field(default=10.0, gt=0)
    follow_redirects: bool = False
    user_agent: str = Field(default="async-networking/0.1", min_length=1)
    default_headers: dict[str, str] = Field(default_factory=dict)


class MoviesSettings(BaseModel):
    """Connection settings for the bundled movies API binding."""

    base_url: str = "https://api.themoviedb.org/3"
    api_key: str = ""

    @field_validator("base_url")
    @classmethod
    def _require_absolute_url(cls, value: str) -> str:
        """Reject relative base URLs early instead of at request build time."""
        if "://" not in value:
            raise ValueError("movies.base_url must be an absolute URL")
        return value


class NetworkingSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    movies: MoviesSettings = Field(default_factory=MoviesSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH
    _environ: ClassVar[Mapping[str, str] | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        if cls._environ is not None:
            env_settings = MappingEnvSettingsSource(settings_cls, environ=cls._environ)
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )


class MappingEnvSettingsSource(EnvSettingsSource):
    """Environment source that reads a given mapping instead of ``os.environ``."""

    def __init__(
        self, settings_cls: type[BaseSettings], *, environ: Mapping[str, str]
    ) -> None:
        self._environ_values = dict(environ)
        super().__init__(settings_cls)

    def _load_env_vars(self) -> Mapping[str, str | None]:
        return {
            key if self.case_sensitive else key.lower(): value
            for key, value in self._environ_values.items()
            if not (self.env_ignore_empty and value == "")
        }
