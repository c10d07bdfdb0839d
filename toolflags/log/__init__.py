"""
Logging for the toolflags argument pipeline.

This module extends Python's standard logging with:
- A custom TRACE level below DEBUG
- Colored console output with ANSI escape sequences
- Structured fields rendered from ``extra=``
- Hierarchical "/"-named loggers sharing one handler
- Complete logging disable (level=False or level="false")
"""

import logging

from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import ColorManager, LogFormatter
from .logger import Logger

logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]


def create_root_lg(level: str | int | bool = "info", colors: bool = True) -> Logger:
    """
    Create the root logger.

    Example:
        >>> lg = create_root_lg("debug", colors=False)
    """
    return LoggerFactory.create_root(LogConfig.from_params(level, colors=colors))


def create_lg(name: str, level: str | int | bool = "info", colors: bool = True) -> Logger:
    """Create a standalone logger with its own handler."""
    return LoggerFactory.create(name, LogConfig.from_params(level, colors=colors))


def derive_lg(lg: Logger, tags: str | list[str]) -> Logger:
    """
    Derive a child logger from a parent logger.

    Example:
        >>> child = derive_lg(create_root_lg("info"), "argv")
    """
    return LoggerFactory.derive(lg, tags)


def null_lg(name: str = "/null") -> Logger:
    """Return a logger that drops everything, for library use without a CLI."""
    return LoggerFactory.create(name, LogConfig(level=False, colors=False))


__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "create_lg",
    "create_root_lg",
    "derive_lg",
    "null_lg",
    "resolve_level",
]
