from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _dist_version

from .argv import build_argv, expand_args
from .config import ToolConfig
from .exceptions import (
    ConfigError,
    ExitRequested,
    FlagDefinitionError,
    FlagParseError,
    FlagValueError,
    ResponseFileError,
    ToolflagsError,
)
from .flags import (
    CallbackValue,
    CountValue,
    FlagSet,
    FlagValue,
    TriggerValue,
    VersionValue,
)
from .version import VersionInfo

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = _dist_version("toolflags")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Argument pipeline
    "build_argv",
    "expand_args",
    # Flags
    "FlagSet",
    "FlagValue",
    "CountValue",
    "TriggerValue",
    "CallbackValue",
    "VersionValue",
    "VersionInfo",
    # Config
    "ToolConfig",
    # Exceptions
    "ToolflagsError",
    "ResponseFileError",
    "FlagValueError",
    "FlagDefinitionError",
    "FlagParseError",
    "ConfigError",
    "ExitRequested",
]
