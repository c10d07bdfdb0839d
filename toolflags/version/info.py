"""
Version metadata and the -V report line.

The report mirrors what toolchain binaries print for ``-V``:

    compile version devel +abc123 X:fieldtrack buildID=0f3c...

The build ID is only included for ``-V=full`` on development builds: the
release version alone identifies a release, but a rebuilt development binary
must report something that changes with the build.
"""

from __future__ import annotations

import importlib.metadata
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import ToolConfig

DEVEL_PREFIX = "devel"
FULL_VALUE = "full"
EXE_SUFFIX = ".exe"


@dataclass(frozen=True)
class VersionInfo:
    """
    Process-wide version strings.

    Attributes:
        version: Release version, or a "devel ..." string for development builds
        experiment: Enabled experiments/features descriptor
        default_experiment: Descriptor of the baseline; omitted from reports
        build_id: Build identifier written at build time
    """

    version: str
    experiment: str = ""
    default_experiment: str = ""
    build_id: str = ""

    @property
    def is_devel(self) -> bool:
        return self.version.startswith(DEVEL_PREFIX)

    @classmethod
    def current(cls, config: ToolConfig | None = None) -> VersionInfo:
        """Collect version strings from package metadata, build info and config."""
        from .. import _build_info

        try:
            version = importlib.metadata.version("toolflags")
        except importlib.metadata.PackageNotFoundError:
            version = DEVEL_PREFIX

        build_id = _build_info.BUILD_ID
        experiment = default_experiment = ""
        if config is not None:
            version = config.version_override or version
            build_id = config.build_id or build_id
            experiment = config.experiment
            default_experiment = config.default_experiment

        return cls(
            version=version,
            experiment=experiment,
            default_experiment=default_experiment,
            build_id=build_id,
        )


def program_name(path: str) -> str:
    """
    Base name of a program path, without directory or ".exe" suffix.

    Both "/" and "\\" count as separators, whatever the host OS.

    Example:
        >>> program_name("/usr/local/bin/tool.exe")
        'tool'
        >>> program_name(r"C:\\go\\bin\\compile.exe")
        'compile'
    """
    name = path[path.rfind("/") + 1 :]
    name = name[name.rfind("\\") + 1 :]
    return name.removesuffix(EXE_SUFFIX)


def format_version(info: VersionInfo, name: str, value: str) -> str:
    """
    Compose the version line for program ``name``.

    Args:
        info: Version strings
        name: Program base name
        value: The text the flag was set to ("true", or "full")
    """
    p = info.experiment
    if p == info.default_experiment:
        p = ""
    sep = " " if p else ""

    if value == FULL_VALUE and info.is_devel:
        p += " buildID=" + info.build_id

    return f"{name} version {info.version}{sep}{p}"
