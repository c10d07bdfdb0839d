"""
Constants for the toolflags logging system.

Format strings, rule widths and the custom TRACE level used by the
argument pipeline's debug output.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s,%(msecs)03d] [%(levelname).1s] %(message)s"
    DEFAULT_DATEFMT: str = "%H:%M:%S"

    # Column where structured fields start
    DEFAULT_RULE_WIDTH: int = 60

    # Below DEBUG: per-token tokenizer and flag dispatch detail
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Level names for resolution; "false" disables logging entirely
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "false": False,
    }

    RESET: str = "\x1b[0m"
