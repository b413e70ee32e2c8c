"""Task-local request fields for networking log records.

The builder, transport and client layer fields over whatever the caller has
already bound, so a record emitted deep inside ``HttpClient.execute`` carries
the method and URL of the request being executed. Each asyncio task works on
its own copy of the context.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, object] = MappingProxyType({})

_REQUEST_FIELDS: ContextVar[Mapping[str, object]] = ContextVar(
    "networking_request_fields", default=_EMPTY
)


def get_context() -> dict[str, object]:
    """Return the fields bound for the current task."""
    return dict(_REQUEST_FIELDS.get())


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Layer ``values`` over the current fields until the block exits.

    ``None`` values are skipped. Values keep their type so the JSON output can
    render status codes as numbers.
    """
    layered = dict(_REQUEST_FIELDS.get())
    layered.update(
        (str(key), value) for key, value in values.items() if value is not None
    )
    token = _REQUEST_FIELDS.set(MappingProxyType(layered))
    try:
        yield
    finally:
        _REQUEST_FIELDS.reset(token)
