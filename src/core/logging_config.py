"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Without an explicit config, the minimum level is read from the
environment when an event is emitted, never at import time.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, MutableMapping

import structlog

from core.config import QueryConfig

LevelFilter = Callable[[Any, str, MutableMapping[str, Any]], MutableMapping[str, Any]]

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger(name: str, config: QueryConfig | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        config: Optional runtime configuration; the environment is read per
            event when omitted.

    Returns:
        A structlog logger with structured output.
    """
    level_filter = _env_level_filter if config is None else _fixed_level_filter(config.log_level)
    structlog.configure(
        processors=[
            level_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def resolve_log_level(level_name: str) -> int:
    """Map a validated level name onto its numeric stdlib level."""
    return logging.getLevelName(level_name)


def _fixed_level_filter(level_name: str) -> LevelFilter:
    minimum_level = resolve_log_level(level_name)

    def level_filter(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        return _drop_below(minimum_level, method_name, event_dict)

    return level_filter


def _env_level_filter(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Filter events against the level configured in the environment.

    Raises:
        QueryConfigError: If the configured log level is invalid.
    """
    minimum_level = resolve_log_level(QueryConfig.from_env().log_level)
    return _drop_below(minimum_level, method_name, event_dict)


def _drop_below(
    minimum_level: int, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    if _METHOD_LEVELS.get(method_name, logging.INFO) < minimum_level:
        raise structlog.DropEvent
    return event_dict
