"""
Shell-style word splitting for response file contents.

This is a close copy of gcc's libiberty buildargv(): arguments are separated
by runs of whitespace, single and double quotes group text (and are dropped),
and a backslash makes the next byte literal, quotes and whitespace included.

Malformed input is never rejected. An unterminated quote or a trailing
backslash simply ends the current argument at the end of the buffer.

Tokenizing is not an inverse of any quoting step: the output of one pass fed
back in as raw input can split differently, because the quotes and escapes
that grouped it are gone.
"""

from __future__ import annotations

import os

# space, \t, \n, \v, \f, \r
WHITESPACE = frozenset(b" \t\n\v\f\r")

_BACKSLASH = ord("\\")
_SQUOTE = ord("'")
_DQUOTE = ord('"')


def _skip_whitespace(data: bytes, idx: int) -> int:
    """Return the index of the first non-whitespace byte at or after idx."""
    n = len(data)
    while idx < n and data[idx] in WHITESPACE:
        idx += 1
    return idx


def build_argv(data: bytes | str) -> list[str]:
    """
    Split a response file buffer into arguments.

    Args:
        data: Raw file contents. A str is encoded with os.fsencode first.

    Returns:
        Arguments in buffer order, decoded with os.fsdecode so undecodable
        bytes survive as surrogate escapes (the same way sys.argv holds them).

    Example:
        >>> build_argv(b"a 'b c' d")
        ['a', 'b c', 'd']
        >>> build_argv(b"a\\\\ b")
        ['a b']
    """
    if isinstance(data, str):
        data = os.fsencode(data)

    result: list[str] = []
    squote = dquote = bsquote = False

    di = _skip_whitespace(data, 0)
    n = len(data)

    while di < n:
        arg = bytearray()

        while di < n:
            ch = data[di]
            if ch in WHITESPACE and not (squote or dquote or bsquote):
                break

            if bsquote:
                bsquote = False
                arg.append(ch)
            elif ch == _BACKSLASH:
                bsquote = True
            elif squote:
                if ch == _SQUOTE:
                    squote = False
                else:
                    arg.append(ch)
            elif dquote:
                if ch == _DQUOTE:
                    dquote = False
                else:
                    arg.append(ch)
            elif ch == _SQUOTE:
                squote = True
            elif ch == _DQUOTE:
                dquote = True
            else:
                arg.append(ch)

            di += 1

        result.append(os.fsdecode(bytes(arg)))
        di = _skip_whitespace(data, di)

    return result
