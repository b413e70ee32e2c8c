"""Public API for shared networking configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    HttpSettings,
    LoggingSettings,
    MappingEnvSettingsSource,
    MoviesSettings,
    NetworkingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "HttpSettings",
    "LoggingSettings",
    "MappingEnvSettingsSource",
    "MoviesSettings",
    "NetworkingSettings",
    "load_settings",
]
