"""
Response file expansion.

Any argument of the form ``@path`` is replaced by the arguments stored in
``path``, split with build_argv(). Anything that is not a response file
(no ``@`` prefix, empty argument, or a file that does not exist) is passed
through untouched, on the assumption that the user knows what they are doing.

Expansion is single-level: ``@`` tokens that come out of a response file are
not expanded again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import IO, Any

from ..exceptions import ResponseFileError
from ..log import Logger, create_lg
from .tokenizer import build_argv

RESPONSE_FILE_PREFIX = "@"

Opener = Callable[[str, str], IO[bytes]]


def _default_logger() -> Logger:
    return create_lg("/argv", "info", colors=False)


class ArgExpander:
    """
    Expands @response-file arguments into an ordinary argument list.

    Args:
        lg: Logger for diagnostics (a stderr "/argv" logger by default)
        opener: Callable used to open files, ``open`` by default
    """

    def __init__(self, lg: Logger | None = None, opener: Opener | None = None) -> None:
        self._lg = lg if lg is not None else _default_logger()
        self._open: Opener = opener if opener is not None else open

    def expand(self, args: Iterable[str]) -> list[str]:
        """
        Return a new argument list with every response file spliced in.

        Raises:
            ResponseFileError: on any I/O failure other than file-not-found
        """
        result: list[str] = []
        for arg in args:
            if not arg.startswith(RESPONSE_FILE_PREFIX):
                result.append(arg)
                continue

            rows = self._read(arg[len(RESPONSE_FILE_PREFIX) :])
            if rows is None:
                result.append(arg)
                continue
            result.extend(rows)
        return result

    def _read(self, path: str) -> list[str] | None:
        """Tokenize one response file, or None when it does not exist."""
        try:
            f = self._open(path, "rb")
        except FileNotFoundError as e:
            self._lg.warning(
                "Unable to open response file",
                extra={"file": path, "error": e.strerror or e},
            )
            return None
        except OSError as e:
            raise ResponseFileError(path, "open", e) from e

        try:
            try:
                contents = f.read()
            except OSError as e:
                raise ResponseFileError(path, "read", e) from e
        finally:
            self._close(f, path)

        rows = build_argv(contents)
        self._lg.debug("expanded response file", extra={"file": path, "count": len(rows)})
        return rows

    @staticmethod
    def _close(f: Any, path: str) -> None:
        try:
            f.close()
        except OSError as e:
            raise ResponseFileError(path, "close", e) from e


def expand_args(
    args: Iterable[str], lg: Logger | None = None, opener: Opener | None = None
) -> list[str]:
    """
    Expand response files in ``args``.

    Example:
        >>> expand_args(["prog", "@resp"])  # resp holds b"-x -y=1"
        ['prog', '-x', '-y=1']
    """
    return ArgExpander(lg, opener).expand(args)
