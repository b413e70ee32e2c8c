"""Settings resolution with deterministic precedence.

The cascade is always:
1) CLI/init params
2) Environment variables
3) ~/.config/async-networking/networking.yaml
4) Model defaults

Environment variable format:
- Prefix: ``ASYNC_NETWORKING_``
- Nested keys: ``__`` separator
- Example: ``ASYNC_NETWORKING_HTTP__TIMEOUT_SECONDS=5`` -> ``http.timeout_seconds = 5``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, NetworkingSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> NetworkingSettings:
    """Resolve typed settings through the pydantic-settings source cascade.

    ``environ`` replaces ``os.environ`` and ``config_path`` replaces the
    default YAML location, so callers and tests can resolve settings without
    touching process state.
    """
    resolved_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

    class _BoundSettings(NetworkingSettings):
        _config_path: ClassVar[Path] = resolved_path
        _environ: ClassVar[Mapping[str, str] | None] = environ

    return _BoundSettings(**dict(cli_params or {}))
