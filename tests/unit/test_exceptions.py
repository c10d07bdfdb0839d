"""
Tests for the toolflags exception hierarchy.
"""

import errno

import pytest

from toolflags.exceptions import (
    ConfigError,
    ExitRequested,
    FlagDefinitionError,
    FlagParseError,
    FlagValueError,
    ResponseFileError,
    ToolflagsError,
)
from toolflags.log import InvalidLogLevelError, LogError


@pytest.mark.unit
class TestToolflagsError:
    """Test the base class."""

    def test_message(self):
        error = ToolflagsError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}

    def test_context(self):
        error = ToolflagsError("Bad thing", file="a.rsp", line=3)
        assert str(error) == "Bad thing (file=a.rsp, line=3)"
        assert error.context == {"file": "a.rsp", "line": 3}

    @pytest.mark.parametrize(
        "cls",
        [ConfigError, ExitRequested, FlagParseError, FlagValueError, LogError],
    )
    def test_hierarchy(self, cls):
        assert issubclass(cls, ToolflagsError)


@pytest.mark.unit
class TestSpecificErrors:
    """Test the errors with their own constructors."""

    def test_response_file_error(self):
        cause = PermissionError(errno.EACCES, "Permission denied")
        error = ResponseFileError("args.rsp", "open", cause)

        assert error.path == "args.rsp"
        assert error.operation == "open"
        assert error.error is cause
        assert str(error) == (
            "Unable to open response file (args.rsp): [Errno 13] Permission denied "
            f"(errno={errno.EACCES})"
        )

    def test_flag_definition_error(self):
        error = FlagDefinitionError("v", "flag redefined")
        assert error.name == "v"
        assert str(error) == "Cannot define flag -v: flag redefined"

    def test_exit_requested_defaults(self):
        exit_req = ExitRequested()
        assert exit_req.code == 0
        assert str(exit_req) == "exit requested with status 0"

    def test_exit_requested_message(self):
        exit_req = ExitRequested(0, "tool version 1.0")
        assert str(exit_req) == "tool version 1.0"

    def test_invalid_log_level_error(self):
        error = InvalidLogLevelError("loud")
        assert isinstance(error, LogError)
        assert str(error) == "Invalid log level: loud"
