"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the toolflags test suite.
"""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full command line runs)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="toolflags-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def response_file(temp_dir: Path):
    """
    Provide a factory that writes a response file and returns its path.

    Example:
        path = response_file(b"-v 'a b'")
    """

    def _write(contents: bytes | str, name: str = "args.rsp") -> Path:
        path = temp_dir / name
        if isinstance(contents, str):
            path.write_text(contents)
        else:
            path.write_bytes(contents)
        return path

    return _write


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without another category marker."""
    for item in items:
        if not any(mark.name in ["e2e"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
