"""
Unified exception hierarchy for toolflags.

This module provides a consistent exception hierarchy for all errors raised
while expanding and parsing a tool's command line, making it easy to catch
every toolflags failure with a single except clause.
"""

from typing import Any


class ToolflagsError(Exception):
    """
    Base exception for all toolflags errors.

    Example:
        try:
            rest = flags.parse(sys.argv)
        except ToolflagsError as e:
            lg.error(f"command line error: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ResponseFileError(ToolflagsError):
    """
    Fatal I/O failure on an @-referenced response file.

    Raised for every failure except "file not found", which the expander
    tolerates by keeping the original token.

    Examples:
        - Permission denied while opening
        - Path names a directory
        - Read error mid-file
        - Close error after reading
    """

    def __init__(self, path: str, operation: str, error: OSError) -> None:
        self.path = path
        self.operation = operation
        self.error = error
        super().__init__(
            f"Unable to {operation} response file ({path}): {error}",
            errno=error.errno,
        )


class FlagValueError(ToolflagsError):
    """Raised by FlagValue.set() when the supplied text is not acceptable."""

    pass


class FlagDefinitionError(ToolflagsError):
    """Raised when a flag is registered twice or with an invalid name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Cannot define flag -{name}: {reason}")


class FlagParseError(ToolflagsError):
    """Raised by FlagSet.parse() when it is not allowed to exit on errors."""

    pass


class ConfigError(ToolflagsError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found
        - Invalid YAML syntax
        - Top-level document is not a mapping
    """

    pass


class ExitRequested(ToolflagsError):
    """
    Signal that a flag handler asked for immediate program termination.

    Not a failure: the version flag raises it with code 0 after writing its
    report. The entry point catches it and returns the code, so no further
    flags are processed and no process exit happens inside library code.
    """

    def __init__(self, code: int = 0, message: str = "") -> None:
        self.code = code
        super().__init__(message or f"exit requested with status {code}")
