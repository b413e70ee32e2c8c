"""Stdout logging for applications built on async-networking.

Library modules only emit DEBUG records through ``get_logger``. Applications
call ``configure_logging`` once at startup to choose the level and whether
records render as JSON lines or plain text. Both formats put the request
fields (method, URL, status) in a fixed place ahead of other context.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Mapping

from . import fields
from .context import get_context

if TYPE_CHECKING:
    from packages.networking_shared.config import LoggingSettings

_HANDLER_NAME = "async-networking"


class RequestContextFilter(logging.Filter):
    """Split bound context into request fields and extra fields on each record.

    Process-level fields (service, environment) are fixed per handler and sit
    underneath the task-local context.
    """

    def __init__(self, static_fields: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._static_fields = dict(static_fields or {})

    def filter(self, record: logging.LogRecord) -> bool:
        bound = {**self._static_fields, **get_context()}
        record.request_fields = {
            key: bound.pop(key) for key in fields.REQUEST_FIELDS if key in bound
        }
        record.extra_fields = bound
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line; request fields nested under ``request``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        request_fields = getattr(record, "request_fields", None)
        if request_fields:
            payload[fields.REQUEST] = request_fields
        payload.update(getattr(record, "extra_fields", None) or {})
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """``<time> <level> <logger> [<method> <url> <status>] <message> k=v ...``"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(request_label)s%(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        request_fields = getattr(record, "request_fields", None) or {}
        parts = [
            str(request_fields[key])
            for key in fields.REQUEST_FIELDS
            if key in request_fields
        ]
        record.request_label = f"[{' '.join(parts)}] " if parts else ""
        line = super().formatMessage(record)
        extra_fields = getattr(record, "extra_fields", None) or {}
        if not extra_fields:
            return line
        suffix = " ".join(
            f"{key}={value}" for key, value in sorted(extra_fields.items())
        )
        return f"{line} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> logging.Handler:
    """Install one stdout handler on the root logger and return it.

    A handler installed by an earlier call is replaced; handlers installed by
    other code are left alone.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()

    static_fields = {fields.SERVICE: service, fields.ENVIRONMENT: environment}
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.addFilter(
        RequestContextFilter({k: v for k, v in static_fields.items() if v})
    )
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())
    return handler


def configure_logging_from_settings(settings: LoggingSettings) -> logging.Handler:
    """Apply one ``LoggingSettings`` block via ``configure_logging``."""
    return configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
