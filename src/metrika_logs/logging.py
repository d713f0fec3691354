"""Structured logging for the SDK."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from metrika_logs.config import get_settings

ROOT_LOGGER_NAME = "metrika_logs"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Shared by every SDK logger; rendering happens in the handler's formatter.
_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

# Silent until an application calls configure_logging().
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def configure_logging(
    level: int | str | None = None,
    json_format: bool | None = None,
    output: TextIO | None = None,
) -> None:
    """Send SDK log records to a stream.

    Library modules only ever call ``get_logger``; applications (and the
    CLI) decide where records go by calling this once at startup. Calling
    it again replaces the previous handler.

    Args:
        level: Logging level, as an int or one of DEBUG/INFO/WARNING/ERROR
            (default: ``SDKSettings.log_level``).
        json_format: Render JSON lines instead of console output
            (default: ``SDKSettings.log_json``).
        output: Stream to write to (default: the current ``sys.stderr``).
    """
    global _handler

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json_format is None:
        json_format = settings.log_json
    if isinstance(level, str):
        level = _LEVELS.get(level.upper(), logging.INFO)
    if output is None:
        output = sys.stderr

    if json_format:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=output.isatty())

    handler = logging.StreamHandler(output)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Remove the handler installed by ``configure_logging``."""
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger backed by the stdlib ``metrika_logs`` logger tree."""
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
