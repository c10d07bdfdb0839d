"""
Factory for creating and configuring loggers.

Loggers use "/"-separated names: the CLI logs as "/", and each pipeline
stage derives its own view ("/argv", "/flags") that shares the root's
handler instead of installing another one.
"""

import logging
import sys
from dataclasses import replace
from typing import TextIO, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(
        config: LogConfig,
        logger_class: type[Logger] = Logger,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create the root ("/") logger.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("expanding arguments")
            [12:34:56,789] [I] expanding arguments          [/]
        """
        return LoggerFactory.create("/", config, logger_class, stream)

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        """Return an already-registered logger of ours, if any."""
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing
        return None

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        logger_class: type[Logger] = Logger,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create a logger with its own stream handler.

        Args:
            name: Logger name
            config: Logger configuration
            logger_class: Logger class to use
            stream: Output stream (stderr by default; stdout belongs to the tool)

        Returns:
            Configured logger instance
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        lg = logger_class(name, config)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg
        lg.trace("created logger", extra={"level": logging.getLevelName(lg.level)})
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the parent's handlers.

        Examples:
            >>> root = LoggerFactory.create_root(config)
            >>> LoggerFactory.derive(root, "argv").name
            '/argv'
            >>> LoggerFactory.derive(root, ["flags", "version"]).name
            '/flags/version'

        Args:
            parent: Parent logger instance
            tags: Single tag string or list of tags forming the hierarchy

        Returns:
            Derived logger with no handlers of its own
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        name = prefix + "/".join(tags)

        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        config = replace(parent.config, level=logging.NOTSET)
        lg = cast(Logger, parent.__class__(name, config))
        lg.setLevel(logging.NOTSET)
        lg.parent = parent
        lg.propagate = True

        logging.root.manager.loggerDict[name] = lg
        return lg
