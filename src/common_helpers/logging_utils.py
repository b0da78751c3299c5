"""
Structured logging utilities for common_helpers, built on structlog.

Key Features:
- Processor that flattens errors passed as ``error=`` into ``error.*`` fields
  read through the carrier protocols
- Async-safe request correlation with contextvars
- Environment-based output formatting (console or JSON)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars
from structlog.typing import Processor

from common_helpers import config


def add_error_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Expand an exception logged as ``error=`` into structured fields.

    The ``error`` key is replaced by the error message and the snapshot
    fields (type, carrier metadata, chain) are added as ``error.<name>``.
    Debug detail is never added to logs by this processor.

    Args:
        logger: The logger instance (unused but required by structlog)
        method_name: The logging method name (unused but required by structlog)
        event_dict: The log event dictionary to enrich

    Returns:
        Enriched event dictionary
    """
    error = event_dict.get("error")
    if not isinstance(error, BaseException):
        return event_dict

    from common_helpers.errorsx.chain import error_snapshot

    snapshot = error_snapshot(error)
    event_dict["error"] = snapshot.pop("error_message")
    for key, value in snapshot.items():
        event_dict[f"error.{key}"] = value
    return event_dict


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog and stdlib logging.

    Args:
        log_level: Logging level (defaults to COMMON_HELPERS_LOG_LEVEL)
        log_format: "json" for JSON lines, "console" for human-readable output
            (defaults to COMMON_HELPERS_LOG_FORMAT)
    """
    if log_level is None:
        log_level = config.settings.LOG_LEVEL
    if log_format is None:
        log_format = config.settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        merge_contextvars,
        add_error_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    if log_format.lower() == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: str | None = None) -> Any:
    """
    Create a logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "error-chain")

    Returns:
        A lazy structlog logger; configuration is resolved on first use, so
        module-level loggers follow a later configure_logging() call
    """
    if name:
        return structlog.get_logger(logger_name=name)

    return structlog.get_logger()


def log_error(logger: Any, message: str, error: BaseException, **additional_context: Any) -> None:
    """
    Log an error with its request correlation bound to the contextvars.

    When any error in the chain carries a request id it is bound as
    ``request_id`` for the duration of this log call.

    Args:
        logger: The structlog logger instance
        message: Log message
        error: The error being reported
        **additional_context: Additional context to include in the log
    """
    from common_helpers.errorsx.chain import find_in_chain

    request_id = find_in_chain(error, "request_id")
    if request_id is None:
        logger.error(message, error=error, **additional_context)
        return

    with bound_contextvars(request_id=request_id):
        logger.error(message, error=error, **additional_context)
