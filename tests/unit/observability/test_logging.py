"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from indexbridge.config.settings import ObservabilitySettings
from indexbridge.observability.logging import HANDLER_NAME, setup_logging


def _handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in _handlers():
        root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
    for name in ("opensearch", "opensearchpy.trace"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_transport_loggers_quietened(self) -> None:
        setup_logging(ObservabilitySettings(log_level="info"))
        assert logging.getLogger("opensearch").level == logging.WARNING

    def test_debug_keeps_transport_loggers(self) -> None:
        setup_logging(ObservabilitySettings(log_level="debug", log_format="console"))
        assert logging.getLogger("opensearch").level == logging.NOTSET
        assert logging.getLogger().level == logging.DEBUG

    def test_console_renderer(self) -> None:
        setup_logging(ObservabilitySettings(log_format="console"))
        formatter = _handlers()[0].formatter
        assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_by_default(self) -> None:
        setup_logging()
        formatter = _handlers()[0].formatter
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging()
        setup_logging(ObservabilitySettings(log_format="console"))
        assert len(_handlers()) == 1

    def test_stdlib_records_rendered_as_json(self) -> None:
        setup_logging()
        formatter = _handlers()[0].formatter
        record = logging.LogRecord(
            name="opensearch",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="POST %s [status:%d]",
            args=("/_bulk", 429),
            exc_info=None,
        )
        event = json.loads(formatter.format(record))
        assert event["event"] == "POST /_bulk [status:429]"
        assert event["level"] == "warning"
        assert event["logger"] == "opensearch"
