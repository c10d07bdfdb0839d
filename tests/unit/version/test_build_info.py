"""
Tests for the build identifier generator.

Tests the _build_info.py generator used by git hooks and CI.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from toolflags.version.build_info import generate, get_build_id, main


def _git(commit="abc123def456", status=""):
    """subprocess.run side effect answering rev-parse and status."""

    def run_side_effect(args, **kwargs):
        if "rev-parse" in args:
            if commit is None:
                return MagicMock(returncode=128, stdout="")
            return MagicMock(returncode=0, stdout=commit + "\n")
        if "status" in args:
            return MagicMock(returncode=0, stdout=status)
        return MagicMock(returncode=1)

    return run_side_effect


# =============================================================================
# Test get_build_id
# =============================================================================


@pytest.mark.unit
class TestGetBuildId:
    """Test get_build_id function."""

    @patch("subprocess.run")
    def test_clean_tree(self, mock_run):
        mock_run.side_effect = _git()
        assert get_build_id() == "abc123def456"

    @patch("subprocess.run")
    def test_dirty_tree(self, mock_run):
        mock_run.side_effect = _git(status=" M toolflags/cli.py\n")
        assert get_build_id() == "abc123def456+dirty"

    @patch("subprocess.run")
    def test_not_a_repository(self, mock_run):
        mock_run.side_effect = _git(commit=None)
        assert get_build_id() is None

    @patch("subprocess.run")
    def test_handles_subprocess_error(self, mock_run):
        mock_run.side_effect = subprocess.SubprocessError("git error")
        assert get_build_id() is None

    @patch("subprocess.run")
    def test_handles_missing_git(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git not found")
        assert get_build_id() is None

    @patch("subprocess.run")
    def test_runs_in_cwd(self, mock_run, temp_dir):
        mock_run.side_effect = _git()
        get_build_id(cwd=temp_dir)
        assert all(call.kwargs["cwd"] == temp_dir for call in mock_run.call_args_list)


# =============================================================================
# Test generate
# =============================================================================


@pytest.mark.unit
class TestGenerate:
    """Test generate function."""

    @patch("toolflags.version.build_info.get_build_id", return_value="abc123+dirty")
    def test_writes_build_info(self, _mock_id, temp_dir, capsys):
        assert generate(temp_dir) is True

        content = (temp_dir / "_build_info.py").read_text()
        assert 'BUILD_ID = "abc123+dirty"' in content
        assert "BUILD_TIME = " in content
        assert "Generated" in capsys.readouterr().out

    @patch("toolflags.version.build_info.get_build_id", return_value=None)
    def test_outside_git(self, _mock_id, temp_dir, capsys):
        assert generate(temp_dir) is False
        assert not (temp_dir / "_build_info.py").exists()
        assert "Not in a git repo" in capsys.readouterr().err

    @patch("toolflags.version.build_info.get_build_id", return_value="abc")
    def test_generated_module_is_valid_python(self, _mock_id, temp_dir):
        generate(temp_dir)
        namespace: dict = {}
        exec((temp_dir / "_build_info.py").read_text(), namespace)
        assert namespace["BUILD_ID"] == "abc"


# =============================================================================
# Test main
# =============================================================================


@pytest.mark.unit
class TestMain:
    """Test the CLI entry point."""

    def test_requires_argument(self, capsys):
        with patch("sys.argv", ["build_info"]):
            assert main() == 1
        assert "Usage:" in capsys.readouterr().out

    def test_rejects_non_directory(self, temp_dir, capsys):
        with patch("sys.argv", ["build_info", str(temp_dir / "nope")]):
            assert main() == 1
        assert "Not a directory" in capsys.readouterr().err

    @patch("toolflags.version.build_info.generate", return_value=True)
    def test_generates(self, mock_generate, temp_dir):
        with patch("sys.argv", ["build_info", str(temp_dir)]):
            assert main() == 0
        mock_generate.assert_called_once_with(temp_dir)
