"""
Logger class for the toolflags logging system.

Extends the standard Python logger with a TRACE level and an off switch
(level=False) used by library callers that want the pipeline silent.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """
    Enhanced logger with a custom trace() method and disable support.
    """

    def __init__(self, name: str, config: LogConfig | None = None):
        """
        Initialize the logger.

        Args:
            name: Logger name ("/" for the root, "/argv" etc. for children)
            config: Logger configuration; defaults to info level
        """
        if config is None:
            config = LogConfig()

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    @property
    def disabled(self) -> bool:
        """Check if logging is disabled here or on a parent this logger writes through."""
        if self._logging_disabled:
            return True
        parent = getattr(self, "parent", None)
        return isinstance(parent, Logger) and self.propagate and parent.disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if not self.disabled and self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)
