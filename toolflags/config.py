"""
Configuration for toolflags-based tools.

Settings come from an optional YAML file and are then overridden by
environment variables:

    # toolflags.yaml
    toolflags:
      experiment: "X:fieldtrack"
      default_experiment: ""
    logging:
      level: debug
      colors: false

Environment Variable Override Format:
    TOOLFLAGS_<FIELD>=value

Examples:
    TOOLFLAGS_BUILD_ID=0f3c9a
    TOOLFLAGS_LOG_LEVEL=trace
    TOOLFLAGS_CONFIG=/etc/toolflags.yaml
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError
from .log import InvalidLogLevelError, LogConfig, resolve_level

ENV_PREFIX = "TOOLFLAGS_"
CONFIG_ENV = ENV_PREFIX + "CONFIG"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for {name}", value=raw)


@dataclass(frozen=True)
class ToolConfig:
    """
    Settings shared by the version flag and the logging setup.

    Attributes:
        version_override: Replaces the package version in -V reports
        experiment: Enabled experiments descriptor
        default_experiment: Baseline descriptor, omitted from -V reports
        build_id: Replaces the build identifier written at install time
        log_level: Level name for the root logger
        log_colors: Whether log lines are colored
    """

    version_override: str = ""
    experiment: str = ""
    default_experiment: str = ""
    build_id: str = ""
    log_level: str = "info"
    log_colors: bool = True

    @property
    def log_config(self) -> LogConfig:
        return LogConfig.from_params(self.log_level, colors=self.log_colors)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolConfig:
        """
        Build a config from a parsed YAML document.

        Reads the "toolflags" section for the version fields and the
        "logging" section for level and colors; unknown keys are ignored.
        """
        section = data.get("toolflags") or {}
        logging_section = data.get("logging") or {}
        if not isinstance(section, Mapping) or not isinstance(logging_section, Mapping):
            raise ConfigError("Config sections must be mappings")

        log = LogConfig.from_config(dict(data))
        level = logging_section.get("level", "info")
        return cls(
            version_override=str(section.get("version_override", "")),
            experiment=str(section.get("experiment", "")),
            default_experiment=str(section.get("default_experiment", "")),
            build_id=str(section.get("build_id", "")),
            log_level=("info" if level else "false") if isinstance(level, bool) else str(level),
            log_colors=log.colors,
        )

    def with_env(self, env: Mapping[str, str]) -> ToolConfig:
        """Return a copy with TOOLFLAGS_<FIELD> environment overrides applied."""
        overrides: dict[str, Any] = {}
        for f in fields(self):
            key = ENV_PREFIX + f.name.upper()
            if key not in env:
                continue
            raw = env[key]
            overrides[f.name] = _to_bool(key, raw) if f.type in ("bool", bool) else raw
        return replace(self, **overrides) if overrides else self

    @classmethod
    def load(
        cls, path: str | Path | None = None, env: Mapping[str, str] | None = None
    ) -> ToolConfig:
        """
        Load configuration from YAML (optional) plus environment overrides.

        Args:
            path: Config file; falls back to $TOOLFLAGS_CONFIG, then to defaults
            env: Environment mapping (os.environ by default)

        Raises:
            ConfigError: if the file cannot be read or is not a YAML mapping
        """
        env = os.environ if env is None else env
        if path is None:
            path = env.get(CONFIG_ENV) or None

        try:
            config = cls() if path is None else cls.from_dict(_load_yaml(Path(path)))
            config = config.with_env(env)
            resolve_level(config.log_level)
        except InvalidLogLevelError as e:
            raise ConfigError("Invalid log level in configuration", level=e.level) from e
        return config


def _load_yaml(path: Path) -> Mapping[str, Any]:
    try:
        size = path.stat().st_size
        if size > MAX_CONFIG_SIZE_BYTES:
            raise ConfigError("Configuration file too large", file=path, size=size)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("Unable to read configuration file", file=path, error=e) from e
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in configuration file", file=path) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration file must contain a mapping", file=path)
    return data
