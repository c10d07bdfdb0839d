"""
Tests for the log formatter.
"""

import logging

import pytest

from toolflags.log import ColorManager, LogConfig, LogConstants, LogFormatter


def _record(msg="hello", level=logging.WARNING, name="/argv", **extra):
    record = logging.LogRecord(name, level, __file__, 42, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestLogFormatter:
    """Test formatting of log records."""

    def test_plain_line(self):
        line = LogFormatter(LogConfig(colors=False)).format(_record())
        assert "[W] hello" in line
        assert line.endswith("[/argv]")

    def test_fields_start_at_rule(self):
        line = LogFormatter(LogConfig(colors=False)).format(_record())
        assert line.index("[/argv]") == LogConstants.DEFAULT_RULE_WIDTH

    def test_extra_fields_sorted(self):
        record = _record(file="a.rsp", count=3)
        line = LogFormatter(LogConfig(colors=False)).format(record)
        assert line.endswith("[count:3] [file:a.rsp] [/argv]")

    def test_location(self):
        line = LogFormatter(LogConfig(colors=False, location=True)).format(_record())
        assert line.endswith("test_log_formatter.py:42]")

    def test_colors(self):
        line = LogFormatter(LogConfig(colors=True)).format(_record(level=logging.ERROR))
        assert line.startswith(ColorManager.RED + "m")
        assert ColorManager.RESET in line
        assert "hello" in line

    def test_trace_level_name(self):
        record = _record(level=LogConstants.CUSTOM_LEVELS["TRACE"])
        line = LogFormatter(LogConfig(colors=False)).format(record)
        assert "[T] hello" in line

    def test_multiline_message(self):
        line = LogFormatter(LogConfig(colors=False)).format(_record(msg="one\ntwo"))
        first, second = line.split("\n")
        assert first.endswith("[/argv]")
        assert second == "two"

    def test_level_colors(self):
        assert ColorManager.get_color_for_level(logging.WARNING) == ColorManager.YELLOW
        assert ColorManager.get_color_for_level(99) == ColorManager.DEFAULT
