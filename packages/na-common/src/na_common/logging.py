"""
Structured logging setup for NewsAlert.

Configures structlog for JSON-formatted structured logging. Every log line
includes timestamp, level, service name, and event. Per-cycle context
(list_name, request_url) is bound at processing time.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    service_name: str,
    *,
    level: str = "INFO",
    json_logs: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        service_name: Value of the ``service`` key added to every event.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Render JSON lines when ``True``, coloured console output otherwise.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer: structlog.types.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _add_service(service_name),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _add_service(service_name: str) -> structlog.types.Processor:
    """Return a processor stamping ``service`` onto every event dict."""

    def processor(
        _logger: object, _method: str, event_dict: structlog.types.EventDict,
    ) -> structlog.types.EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor
