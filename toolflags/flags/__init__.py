"""
Flag values and the FlagSet that parses them.
"""

from .flagset import FlagSet, FlagValueAction, unquote_usage
from .values import (
    BoolValue,
    CallbackValue,
    CountValue,
    FlagValue,
    StringValue,
    TriggerValue,
    VersionValue,
    parse_bool,
    parse_int,
)

__all__ = [
    "BoolValue",
    "CallbackValue",
    "CountValue",
    "FlagSet",
    "FlagValue",
    "FlagValueAction",
    "StringValue",
    "TriggerValue",
    "VersionValue",
    "parse_bool",
    "parse_int",
    "unquote_usage",
]
