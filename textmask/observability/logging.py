"""Structured logging on top of the standard library."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from .config import LoggingConfig, get_config, set_config


def _processors(log_format: str) -> list[Any]:
    processors_list: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors_list.append(structlog.processors.JSONRenderer())
    else:
        processors_list.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors_list


def _configure_structlog(log_format: str) -> None:
    structlog.configure(
        processors=_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure structured logging.

    Library modules route their events through the standard library, so an
    application that never calls this function only sees warnings, printed
    by the standard library's last-resort handler.
    """
    if config is None:
        config = get_config()
    else:
        set_config(config)

    _configure_structlog(config.format)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.level, logging.WARNING),
        force=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    if not structlog.is_configured():
        _configure_structlog(get_config().format)
    return structlog.get_logger(name)
