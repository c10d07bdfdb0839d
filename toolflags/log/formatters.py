"""
Log formatter for the toolflags logging system.

Produces lines of the form:

    [12:34:56,789] [W] Unable to open response file        [file:args.rsp] [/argv]

Structured fields passed through ``extra=`` are rendered as ``[key:value]``
after the message, padded to a common column.
"""

import logging
import os

from .config import LogConfig
from .constants import LogConstants

# Attributes every LogRecord has; anything else came in through extra=
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class ColorManager:
    """ANSI color selection per log level."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"
    GRAY = "\x1b[38;5;244"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: "\x1b[38;5;24",
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """Return the color escape for a level (without the trailing 'm')."""
        return ColorManager.COLORS.get(level, ColorManager.DEFAULT)


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    """Collect fields attached via extra=, in sorted key order."""
    fields = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
    return dict(sorted(fields.items()))


class LogFormatter(logging.Formatter):
    """
    Formatter with optional ANSI colors, structured fields and caller location.
    """

    def __init__(self, config: LogConfig) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT, LogConstants.DEFAULT_DATEFMT)
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def _render_fields(self, record: logging.LogRecord) -> str:
        parts = [f"[{k}:{v}]" for k, v in _extra_fields(record).items()]
        parts.append(f"[{record.name}]")
        if self._config.location:
            path = os.path.relpath(record.pathname, os.getcwd())
            parts.append(f"[./{path}:{record.lineno}]")
        return " ".join(parts)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log line
        """
        base = super().format(record)
        first, nl, rest = base.partition("\n")
        pad = " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - len(first))
        line = first + pad + self._render_fields(record)

        if self._config.colors:
            col = ColorManager.get_color_for_level(record.levelno)
            line = (
                col + "m" + first + ColorManager.RESET + pad
                + ColorManager.GRAY + "m" + self._render_fields(record)
                + ColorManager.RESET
            )

        return line + nl + rest
