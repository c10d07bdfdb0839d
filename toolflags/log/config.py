"""
Configuration class for the logging system.

LogConfig is immutable so a logger's display settings cannot drift after the
logger has been created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        level: Level name ("debug", "trace", ...), numeric value, or False
               to disable logging

    Returns:
        Numeric log level, or False to disable logging

    Raises:
        InvalidLogLevelError: If the level name is unknown
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    key = level.lower()
    if key in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[key]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for loggers.

    Attributes:
        level: Numeric level, or False to disable logging
        location: Show the caller's file:line after each message
        colors: Emit ANSI colors per level
    """

    level: int | bool = logging.INFO
    location: bool = False
    colors: bool = True

    @classmethod
    def from_params(
        cls,
        level: str | int | bool = "info",
        location: bool = False,
        colors: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            location: Whether to show file locations
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=resolve_level(level), location=location, colors=colors)

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Parsed configuration (e.g. from a YAML file)
            section: Dotted path of the logging section

        Returns:
            LogConfig instance, with defaults for anything missing
        """
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break

        if not isinstance(current, dict):
            current = {}

        return cls.from_params(
            level=current.get("level", "info"),
            location=bool(current.get("location", False)),
            colors=bool(current.get("colors", True)),
        )
