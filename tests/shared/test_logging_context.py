"""Tests for structured logging configuration and request context."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Iterator

import pytest

from packages.async_networking import HttpMethod, HttpRequestBuilder
from packages.networking_shared.config import LoggingSettings
from packages.networking_shared.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_context,
    get_logger,
    log_context,
)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class _Endpoint:
    base_url = "https://example.com"
    path = "/path"
    method = HttpMethod.GET
    headers = None
    parameters = {"key": "value", "skip": None}


def _json_lines(output: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_log_context_layers_and_restores_fields() -> None:
    """Nested blocks should add fields and restore the outer set on exit."""
    with log_context({"http_method": "GET", "ignored": None}):
        with log_context({"status_code": 404}):
            assert get_context() == {"http_method": "GET", "status_code": 404}
        assert get_context() == {"http_method": "GET"}

    assert get_context() == {}


def test_log_context_restores_fields_when_block_raises() -> None:
    """An exception leaving the block should still drop its fields."""
    with pytest.raises(RuntimeError):
        with log_context({"url": "https://example.com"}):
            raise RuntimeError("boom")

    assert get_context() == {}


def test_log_context_is_isolated_per_task() -> None:
    """Concurrent tasks should not observe each other's bound fields."""

    async def _worker(url: str) -> dict[str, object]:
        with log_context({"url": url}):
            await asyncio.sleep(0)
            return get_context()

    async def _run() -> list[dict[str, object]]:
        return await asyncio.gather(_worker("a"), _worker("b"))

    assert asyncio.run(_run()) == [{"url": "a"}, {"url": "b"}]


def test_json_output_nests_request_fields(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Method, URL and status should render under ``request`` with native types."""
    configure_logging(level="INFO", json_output=True, service="svc", environment="test")

    context = {
        "http_method": "GET",
        "url": "https://example.com",
        "status_code": 404,
        "error_kind": "ConnectError",
    }
    with log_context(context):
        get_logger("tests.logging").info("hello")

    record = _json_lines(capsys.readouterr().out)[-1]
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["logger"] == "tests.logging"
    assert record["request"] == {
        "http_method": "GET",
        "url": "https://example.com",
        "status_code": 404,
    }
    assert record["error_kind"] == "ConnectError"
    assert record["service"] == "svc"
    assert record["environment"] == "test"
    assert "url" not in record


def test_json_output_omits_request_without_request_fields(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Records emitted outside any request should carry no ``request`` key."""
    configure_logging(level="INFO", json_output=True)

    get_logger("tests.logging").info("idle")

    record = _json_lines(capsys.readouterr().out)[-1]
    assert "request" not in record


def test_plain_output_prefixes_message_with_request_label(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Plain text should show ``[method url status]`` ahead of the message."""
    configure_logging(level="INFO", json_output=False, service="movies")

    with log_context({"http_method": "DELETE", "url": "https://x.test/s"}):
        with log_context({"status_code": 500, "error_kind": "X"}):
            get_logger("tests.logging").warning("rejected")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert "WARNING tests.logging [DELETE https://x.test/s 500] rejected" in line
    assert line.endswith("error_kind=X service=movies")


def test_configure_logging_replaces_only_its_own_handler() -> None:
    """Repeated configuration should keep one owned handler and foreign ones."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)

    first = configure_logging(level="INFO")
    second = configure_logging(level="WARNING", json_output=False)

    assert first not in root.handlers
    assert second in root.handlers
    assert foreign in root.handlers
    assert root.level == logging.WARNING


def test_configure_logging_from_settings_applies_block(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """LoggingSettings should drive level, format and process fields."""
    configure_logging_from_settings(
        LoggingSettings(level="DEBUG", json_output=False, service="movies")
    )

    get_logger("tests.logging").debug("plain")

    output = capsys.readouterr().out
    assert "DEBUG tests.logging plain" in output
    assert "service=movies" in output
    assert "environment=dev" in output


def test_builder_debug_logs_carry_request_fields(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Builder debug records should include method and URL context."""
    configure_logging(level="DEBUG", json_output=True)

    HttpRequestBuilder().build(_Endpoint())

    records = _json_lines(capsys.readouterr().out)
    built = [record for record in records if record["message"] == "Request built"]
    dropped = [
        record
        for record in records
        if record["message"].startswith("Query parameter dropped")
    ]
    assert built[0]["request"] == {
        "http_method": "GET",
        "url": "https://example.com/path?key=value",
    }
    assert dropped[0]["query_parameter"] == "skip"
