"""
Version reporting for the -V flag.
"""

from .info import DEVEL_PREFIX, FULL_VALUE, VersionInfo, format_version, program_name

__all__ = [
    "DEVEL_PREFIX",
    "FULL_VALUE",
    "VersionInfo",
    "format_version",
    "program_name",
]
