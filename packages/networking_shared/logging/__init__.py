"""Structured logging for async-networking packages.

Library code emits through ``get_logger`` and attaches request fields with
``log_context``; applications choose the output with ``configure_logging``.
"""

from .config import configure_logging, configure_logging_from_settings, get_logger
from .context import get_context, log_context

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_context",
    "get_logger",
    "log_context",
]
