#!/usr/bin/env python3
"""
toolflags - show how a toolchain command line expands and parses.

Usage:
    toolflags -v -I include @build.rsp main.go util.go
    toolflags -V=full
    toolflags -x -json @args.rsp

Every @file argument is replaced by the arguments in that file, the flags
are applied, and the remaining arguments are listed one per line.
"""

from __future__ import annotations

import json
import logging
import shlex
import sys
from collections.abc import Sequence

from .config import ToolConfig
from .exceptions import ConfigError, ExitRequested, ResponseFileError
from .flags import FlagSet
from .log import Logger, LoggerFactory, LogConstants, derive_lg
from .output import ConsoleOutput, OutputWriter
from .version import VersionInfo

PROG = "toolflags"


def apply_log_level(lg: Logger, config: ToolConfig) -> None:
    """Set the logger level from config, or disable it for level false."""
    level = config.log_config.level
    if level is False:
        lg.disabled = True
    else:
        lg.disabled = False
        lg.setLevel(level)


class Tool:
    """The toolflags command: flag definitions plus the listing it prints."""

    def __init__(self, config: ToolConfig, lg: Logger, output: OutputWriter) -> None:
        self.config = config
        self.lg = lg
        self.out = output
        self.includes: list[str] = []
        self.echo = False

        self.flags = FlagSet(
            PROG, usage=self.usage, output=output, lg=derive_lg(lg, "argv")
        )
        self.verbose = self.flags.count("v", "increase log verbosity")
        self.flags.fn1("I", "add `directory` to include search path", self.includes.append)
        self.flags.fn0("x", "echo the expanded command line", self._enable_echo)
        self.flags.fn1("config", "read settings from `file`", self._load_config)
        self.package = self.flags.string("p", "", "set expected package import `path`")
        self.json = self.flags.bool("json", False, "print the listing as JSON")
        self.version = self.flags.add_version_flag(VersionInfo.current(config))

    def usage(self) -> None:
        sys.stderr.write(f"usage: {PROG} [options] [@file] [args...]\n")
        self.flags.print_defaults()

    def _enable_echo(self) -> None:
        self.echo = True

    def _load_config(self, path: str) -> None:
        self.config = ToolConfig.load(path)
        self.version.info = VersionInfo.current(self.config)

        apply_log_level(self.lg, self.config)

    def _apply_verbosity(self) -> None:
        if self.verbose.value >= 2:
            level = LogConstants.CUSTOM_LEVELS["TRACE"]
        elif self.verbose.value == 1:
            level = logging.DEBUG
        else:
            return
        if not self.lg.disabled:
            self.lg.setLevel(min(level, self.lg.level))

    def run(self, argv: Sequence[str]) -> int:
        """
        Parse ``argv`` and print the listing.

        Raises:
            ExitRequested: for -V and -help
            ResponseFileError: on a fatal response file failure
            ConfigError: when -config names an unusable file
        """
        rest = self.flags.parse(argv)
        self._apply_verbosity()
        self.lg.debug(
            "parsed command line",
            extra={"positional": len(rest), "verbose": self.verbose.value},
        )

        if self.echo:
            self.out.write("+ " + shlex.join(self.flags.expanded))

        if self.json.value:
            self.out.write(
                json.dumps(
                    {
                        "program": self.flags.program,
                        "args": rest,
                        "includes": self.includes,
                        "package": self.package.value,
                        "verbose": self.verbose.value,
                    }
                )
            )
            return 0

        for d in self.includes:
            self.out.write(f"I: {d}")
        if self.package.value:
            self.out.write(f"p: {self.package.value}")
        for i, arg in enumerate(rest):
            self.out.write(f"{i}: {arg}")
        return 0


def main(argv: Sequence[str] | None = None, output: OutputWriter | None = None) -> int:
    """Main entry point for the toolflags CLI."""
    argv = sys.argv if argv is None else argv
    output = output if output is not None else ConsoleOutput()

    try:
        config = ToolConfig.load()
    except ConfigError as e:
        sys.stderr.write(f"{PROG}: {e}\n")
        return 1

    lg = LoggerFactory.create_root(config.log_config)
    # The root logger is cached across calls; drop any earlier -v or -config
    apply_log_level(lg, config)
    try:
        return Tool(config, lg, output).run(argv)
    except ExitRequested as e:
        return e.code
    except (ResponseFileError, ConfigError) as e:
        lg.critical(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
