"""
Output abstraction for tool reports.

The version flag and the CLI write through an OutputWriter rather than
print(), so their output can be checked without capturing stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for report writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer bound to a stream (stdout by default).

    The stream is looked up at write time when none was given, so a
    redirected sys.stdout (pytest's capsys, for one) is honored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        print(text, file=self.stream)

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        print(text, end="", file=self.stream)

    def flush(self) -> None:
        self.stream.flush()


class BufferedOutput:
    """
    Output writer that captures output to a list.

    Example:
        out = BufferedOutput()
        out.write("tool version devel")
        assert out.lines == ["tool version devel"]
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._raw_parts: list[str] = []

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        if self._raw_parts:
            prefix = "".join(self._raw_parts)
            self._raw_parts.clear()
            self._lines.append(prefix + text)
        else:
            self._lines.append(text)

    def write_raw(self, text: str) -> None:
        """Buffer text without newline (will be prefixed to next write)."""
        self._raw_parts.append(text)

    def flush(self) -> None:
        """Flush any pending raw parts as a line."""
        if self._raw_parts:
            self._lines.append("".join(self._raw_parts))
            self._raw_parts.clear()

    @property
    def lines(self) -> list[str]:
        """Get all output lines."""
        return self._lines.copy()

    @property
    def text(self) -> str:
        """Get all output as a single string with newlines."""
        self.flush()
        return "\n".join(self._lines) + ("\n" if self._lines else "")
