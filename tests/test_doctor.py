"""Tests for the ``kubesim doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* Missing UI packages warn instead of failing.
* Doctor returns GENERAL_ERROR when the Python version check fails.
* Plain-text rendering when Rich is unavailable.
"""

from __future__ import annotations

from importlib import metadata
from unittest.mock import MagicMock, patch

import pytest

from kubesim.cli import exit_codes


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from kubesim.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestPackageCheck:
    @patch("kubesim.cli.doctor.metadata.version", return_value="13.7.1")
    def test_installed(self, _mock_version: MagicMock) -> None:
        from kubesim.cli.doctor import _package_check

        assert _package_check("rich") == ("rich", "13.7.1", "[green]OK[/green]")

    @patch(
        "kubesim.cli.doctor.metadata.version",
        side_effect=metadata.PackageNotFoundError("questionary"),
    )
    def test_missing_is_a_warning(self, _mock_version: MagicMock) -> None:
        from kubesim.cli.doctor import _package_check

        label, value, status = _package_check("questionary")
        assert label == "questionary"
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestOsCheck:
    @patch("kubesim.cli.doctor.platform.machine", return_value="arm64")
    @patch("kubesim.cli.doctor.platform.release", return_value="23.4.0")
    @patch("kubesim.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from kubesim.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert value == "macOS 23.4.0 (arm64)"
        assert "OK" in status


class TestKubesimVersionCheck:
    def test_returns_current_version(self) -> None:
        from kubesim.cli.doctor import _kubesim_version_check
        from kubesim.version import __version__

        label, value, status = _kubesim_version_check()
        assert label == "kubesim"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass_returns_success(self) -> None:
        from kubesim.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch(
        "kubesim.cli.doctor.metadata.version",
        side_effect=metadata.PackageNotFoundError("rich"),
    )
    def test_missing_packages_still_succeed(self, _mock_version: MagicMock) -> None:
        from kubesim.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch(
        "kubesim.cli.doctor._python_version_check",
        return_value=("Python", "3.8.0", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_python_failure_returns_general_error(self, _mock_check: MagicMock) -> None:
        from kubesim.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(self, capsys: pytest.CaptureFixture[str]) -> None:
        from kubesim.cli.doctor import run_doctor

        code = run_doctor()
        out = capsys.readouterr().out
        assert code == exit_codes.SUCCESS
        assert "kubesim doctor" in out
        assert "Component" in out
        assert "[green]" not in out
        assert "All checks passed." in out
