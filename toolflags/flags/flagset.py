"""
Flag registration and parsing on top of argparse.

FlagSet gives a toolchain binary the single-dash flag conventions it expects
(``-v``, ``-v=2``, ``-I dir``, ``-V=full``) while argparse does the lookup,
dispatch and error reporting. Each flag is registered with a FlagValue
handler; every occurrence on the command line calls ``handler.set(text)``.

Parsing stops at the first non-flag argument or after ``--``. What remains
is returned to the caller as the positional arguments.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any, NoReturn, TextIO

from ..argv import expand_args
from ..exceptions import (
    ExitRequested,
    FlagDefinitionError,
    FlagParseError,
    FlagValueError,
)
from ..log import Logger
from ..output import OutputWriter
from ..version.info import VersionInfo, program_name
from .values import (
    BoolValue,
    CallbackValue,
    CountValue,
    FlagValue,
    StringValue,
    TriggerValue,
    VersionValue,
)

HELP_NAMES = ("h", "help")


def unquote_usage(value: FlagValue, usage: str) -> tuple[str, str]:
    """
    Extract the value placeholder name from a usage string.

    A back-quoted word in the usage names the placeholder and loses its
    quotes; otherwise the name is derived from the flag kind.

    Example:
        >>> unquote_usage(StringValue(), "read config from `file`")
        ('file', 'read config from file')
    """
    start = usage.find("`")
    if start >= 0:
        end = usage.find("`", start + 1)
        if end >= 0:
            name = usage[start + 1 : end]
            return name, usage[:start] + name + usage[end + 1 :]

    if value.is_bool_flag():
        return "", usage
    if isinstance(value, StringValue):
        return "string", usage
    return "value", usage


class FlagValueAction(argparse.Action):
    """
    argparse action that forwards each occurrence to a FlagValue.

    When ``raw_values`` is given, the flag text is taken from its front
    instead of from argparse, which drops a value of exactly "--".
    """

    def __init__(
        self,
        option_strings: list[str],
        dest: str,
        flag_value: FlagValue,
        raw_values: deque[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=argparse.SUPPRESS,
            **kwargs,
        )
        self.flag_value = flag_value
        self.raw_values = raw_values

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if self.raw_values:
            values = self.raw_values.popleft()
        try:
            self.flag_value.set(values)
        except FlagValueError as e:
            flag = "-" + self.dest
            raise argparse.ArgumentError(
                self, f'invalid value "{values}" for flag {flag}: {e}'
            ) from e


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser that can raise instead of exiting, with a custom usage hook."""

    def __init__(
        self,
        *args: Any,
        usage_fn: Callable[[], None] | None = None,
        raise_errors: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.usage_fn = usage_fn
        self.raise_errors = raise_errors

    def print_usage(self, file: TextIO | None = None) -> None:
        if self.usage_fn is not None:
            self.usage_fn()
        else:
            super().print_usage(file)

    def error(self, message: str) -> NoReturn:
        if self.raise_errors:
            raise FlagParseError(message)
        super().error(message)


class FlagSet:
    """
    A set of flags for one program.

    Args:
        name: Program name used in messages (defaults to the basename of argv[0])
        usage: Called instead of argparse's usage printer on errors and -help
        output: Writer for the version report (stdout by default)
        lg: Logger passed on to response file expansion
        exit_on_error: Exit with status 2 on flag errors (True), or raise
                       FlagParseError (False)

    Example:
        flags = FlagSet("compile")
        verbose = flags.count("v", "increase verbosity")
        flags.fn1("I", "add `directory` to import search path", includes.append)
        flags.add_version_flag()
        files = flags.parse(sys.argv)
    """

    def __init__(
        self,
        name: str | None = None,
        usage: Callable[[], None] | None = None,
        output: OutputWriter | None = None,
        lg: Logger | None = None,
        exit_on_error: bool = True,
    ) -> None:
        self.name = name
        self.usage = usage
        self._output = output
        self._lg = lg
        self._values: dict[str, FlagValue] = {}
        self._usages: dict[str, str] = {}
        # Flag texts in command line order, one per canonical flag token
        self._raw_values: deque[str] = deque()
        self._parser = _FlagParser(
            prog=name,
            add_help=False,
            allow_abbrev=False,
            usage_fn=usage,
            raise_errors=not exit_on_error,
        )
        self.program: str | None = None
        self.expanded: list[str] = []
        self.args: list[str] = []

    # Registration

    def var(self, value: FlagValue, name: str, usage: str) -> FlagValue:
        """
        Register ``value`` as the handler for ``-name`` (and ``--name``).

        Raises:
            FlagDefinitionError: if the name is empty, malformed or taken
        """
        if not name or name.startswith("-") or "=" in name:
            raise FlagDefinitionError(name, "bad flag name")
        if name in self._values:
            raise FlagDefinitionError(name, "flag redefined")

        placeholder, _ = unquote_usage(value, usage)
        self._parser.add_argument(
            f"-{name}",
            f"--{name}",
            action=FlagValueAction,
            flag_value=value,
            raw_values=self._raw_values,
            dest=name,
            help=usage,
            metavar=placeholder or None,
        )
        self._values[name] = value
        self._usages[name] = usage
        return value

    def count(self, name: str, usage: str, value: int = 0) -> CountValue:
        """Register a counting flag: ``-name`` increments, ``-name=N`` sets."""
        cv = CountValue(value)
        self.var(cv, name, usage)
        return cv

    def fn0(self, name: str, usage: str, fn: Callable[[], Any]) -> TriggerValue:
        """Register a flag that calls ``fn()`` each time it is given."""
        tv = TriggerValue(fn)
        self.var(tv, name, usage)
        return tv

    def fn1(self, name: str, usage: str, fn: Callable[[str], Any]) -> CallbackValue:
        """Register a flag that calls ``fn(value)`` each time it is given."""
        cb = CallbackValue(fn)
        self.var(cb, name, usage)
        return cb

    def string(self, name: str, default: str, usage: str) -> StringValue:
        sv = StringValue(default)
        self.var(sv, name, usage)
        return sv

    def bool(self, name: str, default: bool, usage: str) -> BoolValue:
        bv = BoolValue(default)
        self.var(bv, name, usage)
        return bv

    def add_version_flag(
        self, info: VersionInfo | None = None, program: str | None = None
    ) -> VersionValue:
        """
        Register ``-V``, which prints the version and requests exit.

        Args:
            info: Version strings (VersionInfo.current() by default)
            program: Program path (the parsed argv[0] by default)
        """
        vv = VersionValue(info or VersionInfo.current(), program, self._output)
        self.var(vv, "V", "print version and exit")
        return vv

    def lookup(self, name: str) -> FlagValue | None:
        return self._values.get(name)

    # Help

    def print_defaults(self, stdout: bool = False) -> None:
        """
        Print every flag with its usage, sorted by name.

        Args:
            stdout: Write to stdout instead of stderr
        """
        out = sys.stdout if stdout else sys.stderr
        for name in sorted(self._values):
            out.write(self._format_default(name) + "\n")

    def _format_default(self, name: str) -> str:
        value = self._values[name]
        placeholder, usage = unquote_usage(value, self._usages[name])

        line = f"  -{name}"
        if placeholder:
            line += " " + placeholder
        # Single-letter bool flags fit on one line with their usage
        line += "\t" if len(line) <= 4 else "\n    \t"
        line += usage.replace("\n", "\n    \t")

        if value.is_count_flag():
            return line + " (repeatable)"
        if isinstance(value, StringValue) and value.value:
            return line + f' (default "{value.value}")'
        if isinstance(value, BoolValue) and value.value:
            return line + " (default true)"
        return line

    # Parsing

    def _split(self, args: Sequence[str]) -> tuple[list[str], list[str]]:
        """
        Separate flags from positional arguments and canonicalize them.

        Every flag occurrence becomes a single ``-name=value`` token:
        bool-style flags given bare get ``=true``, and value flags absorb the
        following argument whatever it looks like.
        """
        flags: list[str] = []
        i = 0
        while i < len(args):
            s = args[i]
            if s == "--":
                return flags, list(args[i + 1 :])
            if len(s) < 2 or not s.startswith("-"):
                break

            body = s[2:] if s.startswith("--") else s[1:]
            if not body or body[0] in "-=":
                self._parser.error(f"bad flag syntax: {s}")

            name, eq, text = body.partition("=")
            value = self._values.get(name)
            i += 1

            if value is None:
                if name in HELP_NAMES:
                    self._help()
                self._parser.error(f"flag provided but not defined: -{name}")

            if not eq:
                if value.is_bool_flag():
                    text = "true"
                elif i < len(args):
                    text = args[i]
                    i += 1
                else:
                    self._parser.error(f"flag needs an argument: -{name}")
            flags.append(f"-{name}={text}")
            self._raw_values.append(text)

        return flags, list(args[i:])

    def _help(self) -> NoReturn:
        if self.usage is not None:
            self.usage()
        else:
            sys.stderr.write(f"Usage of {self._parser.prog}:\n")
            self.print_defaults()
        raise ExitRequested(0)

    def parse(self, argv: Sequence[str]) -> list[str]:
        """
        Expand response files in ``argv`` and parse its flags.

        Args:
            argv: Full argument vector; argv[0] is the program path

        Returns:
            The positional arguments left after the flags

        Raises:
            ResponseFileError: on a fatal response file I/O failure
            ExitRequested: when -V or -help asked the program to stop
            FlagParseError: on a flag error, when exit_on_error is False
        """
        expanded = expand_args(argv, self._lg)
        self.expanded = expanded
        self.program = expanded[0] if expanded else (self.name or "")
        if self.name is None:
            self._parser.prog = program_name(self.program)

        for value in self._values.values():
            if isinstance(value, VersionValue) and value.program is None:
                value.program = self.program

        return self.parse_flags(expanded[1:])

    def parse_flags(self, args: Sequence[str]) -> list[str]:
        """Parse flags only, with no program path and no response files."""
        self._raw_values.clear()
        flags, self.args = self._split(args)
        self._parser.parse_args(flags)
        return self.args
