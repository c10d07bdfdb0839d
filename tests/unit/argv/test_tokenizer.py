"""
Tests for response file tokenizing.

Covers whitespace splitting, single and double quotes, backslash escapes,
and the permissive handling of malformed input.
"""

import os

import pytest

from toolflags.argv import WHITESPACE, build_argv

# =============================================================================
# Test Whitespace Splitting
# =============================================================================


@pytest.mark.unit
class TestWhitespace:
    """Test argument separation on whitespace."""

    def test_splits_on_spaces(self):
        assert build_argv(b"-x -y=1") == ["-x", "-y=1"]

    def test_every_whitespace_byte_separates(self):
        """Space, tab, newline, vertical tab, form feed and CR all separate."""
        assert build_argv(b"a b\tc\nd\ve\ff\rg") == ["a", "b", "c", "d", "e", "f", "g"]

    def test_whitespace_set(self):
        assert WHITESPACE == frozenset(b" \t\n\v\f\r")

    def test_leading_and_trailing_whitespace_skipped(self):
        assert build_argv(b"  \n a   b \r\n") == ["a", "b"]

    def test_empty_buffer(self):
        assert build_argv(b"") == []

    def test_whitespace_only_buffer(self):
        assert build_argv(b" \t\n\v\f\r  ") == []

    def test_other_control_bytes_are_content(self):
        """Only the six whitespace bytes separate; NUL and friends do not."""
        assert build_argv(b"a\x00b \x1cc") == ["a\x00b", "\x1cc"]


# =============================================================================
# Test Quoting
# =============================================================================


@pytest.mark.unit
class TestQuotes:
    """Test single and double quote handling."""

    def test_single_quotes_group(self):
        assert build_argv(b"a 'b c' d") == ["a", "b c", "d"]

    def test_double_quotes_group(self):
        assert build_argv(b'"a b" c') == ["a b", "c"]

    def test_quotes_are_dropped_and_adjacent_parts_join(self):
        assert build_argv(b"pre'mid'\"post\"") == ["premidpost"]

    def test_single_quote_inside_double_quotes(self):
        assert build_argv(b'"it\'s here"') == ["it's here"]

    def test_double_quote_inside_single_quotes(self):
        assert build_argv(b"'say \"hi\"'") == ['say "hi"']

    def test_empty_quotes_give_empty_argument(self):
        assert build_argv(b"a '' b") == ["a", "", "b"]
        assert build_argv(b'""') == [""]

    def test_newline_inside_quotes_is_literal(self):
        assert build_argv(b"'a\nb'") == ["a\nb"]

    def test_unterminated_single_quote(self):
        """An open quote runs to the end of the buffer without an error."""
        assert build_argv(b"x 'a b  ") == ["x", "a b  "]

    def test_unterminated_double_quote(self):
        assert build_argv(b'"abc') == ["abc"]


# =============================================================================
# Test Backslash Escapes
# =============================================================================


@pytest.mark.unit
class TestEscapes:
    """Test backslash handling."""

    def test_escaped_space_does_not_separate(self):
        assert build_argv(b"a\\ b") == ["a b"]

    def test_escaped_backslash(self):
        assert build_argv(b"a\\\\b") == ["a\\b"]

    def test_escaped_quotes_are_literal(self):
        assert build_argv(b"\\'a\\\"") == ["'a\""]

    def test_escape_inside_single_quotes(self):
        """A backslash escapes even inside quotes, so the quote stays open."""
        assert build_argv(b"'a\\'b'") == ["a'b"]

    def test_escape_inside_double_quotes(self):
        assert build_argv(b'"a\\"b"') == ['a"b']

    def test_escaped_newline(self):
        assert build_argv(b"a\\\nb c") == ["a\nb", "c"]

    def test_trailing_backslash(self):
        """A dangling backslash is dropped, and the partial argument kept."""
        assert build_argv(b"a b\\") == ["a", "b"]

    def test_lone_backslash_gives_empty_argument(self):
        assert build_argv(b"\\") == [""]

    def test_escaped_trailing_space(self):
        assert build_argv(b"a\\ ") == ["a "]


# =============================================================================
# Test Decoding
# =============================================================================


@pytest.mark.unit
class TestDecoding:
    """Test conversion of argument bytes to str."""

    def test_utf8_arguments(self):
        assert build_argv("é 'ü x'".encode()) == ["é", "ü x"]

    def test_undecodable_bytes_survive(self):
        result = build_argv(b"\xff\xfe ok")
        assert result == [os.fsdecode(b"\xff\xfe"), "ok"]
        assert os.fsencode(result[0]) == b"\xff\xfe"

    def test_str_input(self):
        assert build_argv("-v 'a b'") == ["-v", "a b"]

    def test_not_an_inverse_of_quoting(self):
        """Quotes consumed by one pass are not there for the next one."""
        first = build_argv(b"'a b'")
        assert first == ["a b"]
        assert build_argv(first[0]) == ["a", "b"]
