"""
Flag value adapters.

A FlagValue is the handler a FlagSet calls for each occurrence of its flag on
the command line. Besides plain typed values this module provides the custom
kinds a toolchain binary needs:

- CountValue: ``-v`` increments a level, ``-v=N`` sets it
- TriggerValue: ``-x`` runs a zero-argument action
- CallbackValue: ``-I dir`` runs a one-argument action
- VersionValue: ``-V`` prints the version and ends the program
"""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..exceptions import ExitRequested, FlagValueError
from ..output import ConsoleOutput, OutputWriter
from ..version.info import VersionInfo, format_version, program_name

# strconv.Atoi syntax: optional sign, ASCII digits, 64-bit range
_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def parse_int(s: str) -> int:
    """
    Parse a base-10 integer the way Go's strconv.Atoi does.

    Unlike int(), surrounding whitespace, underscores and non-ASCII digits are
    rejected, as are values outside the 64-bit range.

    Raises:
        ValueError: if ``s`` is not a valid integer
    """
    if not _INT_PATTERN.fullmatch(s):
        raise ValueError(f"invalid syntax: {s!r}")
    n = int(s)
    if not _INT_MIN <= n <= _INT_MAX:
        raise ValueError(f"value out of range: {s!r}")
    return n


_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(s: str) -> bool:
    """Parse a boolean the way Go's strconv.ParseBool does."""
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"invalid syntax: {s!r}")


class FlagValue(ABC):
    """
    Handler for one registered flag.

    Subclasses implement set() and __str__(). A bool-style flag may appear
    without ``=value``; the FlagSet then calls ``set("true")``.
    """

    @abstractmethod
    def set(self, s: str) -> None:
        """
        Apply one occurrence of the flag.

        Raises:
            FlagValueError: if ``s`` is not acceptable
        """

    @abstractmethod
    def __str__(self) -> str: ...

    def get(self) -> Any:
        """Typed current value, or None for action flags."""
        return None

    def is_bool_flag(self) -> bool:
        return False

    def is_count_flag(self) -> bool:
        return False


class CountValue(FlagValue):
    """
    A flag that is like both a bool and an int flag.

    Used as ``-name`` it increments the count, ``-name=false`` resets it and
    ``-name=N`` sets it. Meant for verbosity flags such as ``-v``.
    """

    def __init__(self, value: int = 0) -> None:
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def set(self, s: str) -> None:
        if s == "true":
            self._value += 1
        elif s == "false":
            self._value = 0
        else:
            try:
                self._value = parse_int(s)
            except ValueError:
                raise FlagValueError(f'invalid count "{s}"') from None

    def __str__(self) -> str:
        return str(self._value)

    def get(self) -> int:
        return self._value

    def is_bool_flag(self) -> bool:
        return True

    def is_count_flag(self) -> bool:
        return True


class TriggerValue(FlagValue):
    """Zero-argument action flag: every occurrence calls ``fn()``."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn

    def set(self, s: str) -> None:
        self._fn()

    def __str__(self) -> str:
        return ""

    def is_bool_flag(self) -> bool:
        return True


class CallbackValue(FlagValue):
    """One-argument action flag: every occurrence calls ``fn(value)``."""

    def __init__(self, fn: Callable[[str], Any]) -> None:
        self._fn = fn

    def set(self, s: str) -> None:
        self._fn(s)

    def __str__(self) -> str:
        return ""


class VersionValue(FlagValue):
    """
    The ``-V`` flag: writes the version line and requests a clean exit.

    Args:
        info: Version strings to report
        program: Program path (sys.argv[0] at the time of use by default)
        output: Where the report goes (stdout by default)
    """

    def __init__(
        self,
        info: VersionInfo,
        program: str | None = None,
        output: OutputWriter | None = None,
    ) -> None:
        self.info = info
        self.program = program
        self._output = output if output is not None else ConsoleOutput()

    def report(self, s: str) -> str:
        """Compose the version line without writing it."""
        path = self.program if self.program is not None else sys.argv[0]
        return format_version(self.info, program_name(path), s)

    def set(self, s: str) -> None:
        line = self.report(s)
        self._output.write(line)
        raise ExitRequested(0, line)

    def __str__(self) -> str:
        return ""

    def is_bool_flag(self) -> bool:
        return True


class StringValue(FlagValue):
    """Plain string flag."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, s: str) -> None:
        self.value = s

    def __str__(self) -> str:
        return self.value

    def get(self) -> str:
        return self.value


class BoolValue(FlagValue):
    """Plain boolean flag; ``-name`` alone means true."""

    def __init__(self, value: bool = False) -> None:
        self.value = value

    def set(self, s: str) -> None:
        try:
            self.value = parse_bool(s)
        except ValueError:
            raise FlagValueError(f'invalid boolean "{s}"') from None

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def get(self) -> bool:
        return self.value

    def is_bool_flag(self) -> bool:
        return True
