"""Custom setup.py to generate _build_info.py during build.

Works alongside pyproject.toml - pyproject.toml provides the configuration,
this script just adds the build-time code generation hook.

The generated module carries the build identifier that ``-V=full`` reports
for development builds.
"""

import subprocess
import sys
from datetime import UTC, datetime
from pathlib import Path

from setuptools import setup
from setuptools.command.build_py import build_py

_BUILD_INFO_TEMPLATE = '''\
"""Build information - auto-generated during install, do not edit."""

BUILD_ID = "{build_id}"
BUILD_TIME = "{build_time}"
'''


def _run_git(*args: str) -> str | None:
    """Run git command and return stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=Path(__file__).parent,
        )
        return result.stdout.strip() if result.returncode == 0 else None
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return None


def _get_build_id() -> str | None:
    """Commit hash, with "+dirty" when the work tree has local changes."""
    commit = _run_git("rev-parse", "HEAD")
    if not commit:
        return None
    status = _run_git("status", "--porcelain")
    return commit + "+dirty" if status else commit


def _generate_build_info(package_dir: Path) -> bool:
    build_id = _get_build_id()
    if not build_id:
        print("toolflags: git info not available, skipping _build_info.py", file=sys.stderr)
        return False

    content = _BUILD_INFO_TEMPLATE.format(
        build_id=build_id,
        build_time=datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )
    (package_dir / "_build_info.py").write_text(content)
    print(f"toolflags: generated _build_info.py ({build_id[:7]})", file=sys.stderr)
    return True


class BuildPyWithBuildInfo(build_py):
    """build_py that writes _build_info.py into the build directory."""

    def run(self):
        super().run()

        # Only the build copy is rewritten; the source stub stays empty
        if self.build_lib:
            build_package_dir = Path(self.build_lib) / "toolflags"
            if build_package_dir.is_dir():
                _generate_build_info(build_package_dir)


setup(cmdclass={"build_py": BuildPyWithBuildInfo})
