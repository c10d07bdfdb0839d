"""
Build identifier generator.

Writes ``_build_info.py`` into a package directory so that ``-V=full`` can
report which build of a development binary is running. setup.py runs the
same logic during ``pip install``; this module is for git hooks and CI:

    python -m toolflags.version.build_info toolflags/
"""

from __future__ import annotations

import subprocess
import sys
from datetime import UTC, datetime
from pathlib import Path

_TEMPLATE = '''\
"""Build information - auto-generated during install, do not edit."""

BUILD_ID = "{build_id}"
BUILD_TIME = "{build_time}"
'''


def _run_git(*args: str, cwd: Path | None = None) -> str | None:
    """Run git command and return stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=cwd,
        )
        return result.stdout.strip() if result.returncode == 0 else None
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return None


def get_build_id(cwd: Path | None = None) -> str | None:
    """
    Build identifier for the current checkout.

    Returns:
        The full commit hash, with "+dirty" appended when the work tree has
        local modifications, or None outside a git repository
    """
    commit = _run_git("rev-parse", "HEAD", cwd=cwd)
    if not commit:
        return None

    status = _run_git("status", "--porcelain", cwd=cwd)
    return commit + "+dirty" if status else commit


def generate(package_dir: Path, cwd: Path | None = None) -> bool:
    """
    Generate _build_info.py in the given package directory.

    Args:
        package_dir: Path to the package directory
        cwd: Directory to run git in (defaults to the current directory)

    Returns:
        True if successful, False otherwise
    """
    build_id = get_build_id(cwd)
    if not build_id:
        print("Not in a git repo or no commits", file=sys.stderr)
        return False

    content = _TEMPLATE.format(
        build_id=build_id,
        build_time=datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )

    path = package_dir / "_build_info.py"
    path.write_text(content)
    print(f"Generated {path}")
    return True


def main() -> int:
    """CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: python -m toolflags.version.build_info <package_dir>")
        return 1

    package_dir = Path(sys.argv[1])
    if not package_dir.is_dir():
        print(f"Not a directory: {package_dir}", file=sys.stderr)
        return 1

    return 0 if generate(package_dir) else 1


if __name__ == "__main__":
    sys.exit(main())
