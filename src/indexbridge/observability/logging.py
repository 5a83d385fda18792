"""Structured logging configuration using structlog.

Both structlog loggers and plain ``logging`` loggers (ours, and the
opensearch-py transport) are rendered by one handler on the root logger,
so engine request logs come out in the same JSON or console format as
adapter logs.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from indexbridge.config.settings import ObservabilitySettings

HANDLER_NAME = "indexbridge"

# opensearch-py logs every request at INFO on these loggers
_TRANSPORT_LOGGERS = ("opensearch", "opensearchpy.trace")


def _shared_processors() -> list:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.typing.Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(settings: ObservabilitySettings | None = None) -> None:
    """Configure structured logging for IndexBridge.

    Safe to call more than once: the handler installed by a previous call
    is replaced, not duplicated.

    Args:
        settings: Observability settings. Uses defaults if None.
    """
    level = getattr(logging, settings.log_level.upper() if settings else "INFO", logging.INFO)
    log_format = settings.log_format if settings else "json"
    shared = _shared_processors()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_format),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    transport_level = logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
