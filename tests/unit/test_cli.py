"""Tests for CLI commands."""

from __future__ import annotations

import os
from typing import Any

import pytest
from typer.testing import CliRunner

import rebench.cli.main as cli_main
from rebench import __version__
from rebench.cli.main import app

# Disable rich/typer color output to avoid ANSI escape codes in test assertions
os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"

runner = CliRunner()


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Replace the run and logging setup with recorders."""
    recorded: dict[str, Any] = {"exit_code": 0}

    def fake_rebench(speed: int, record: int, **kwargs: Any) -> int:
        recorded["tolerances"] = (speed, record)
        recorded["settings"] = kwargs.get("settings")
        return int(recorded["exit_code"])

    def fake_logging(level: str, quiet: bool) -> None:
        recorded["logging"] = (level, quiet)

    monkeypatch.setattr(cli_main, "rebench", fake_rebench)
    monkeypatch.setattr(cli_main, "configure_logging", fake_logging)
    return recorded


class TestVersion:
    """Tests for --version."""

    def test_version_flag(self) -> None:
        """--version flag shows version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_short_flag(self) -> None:
        """-v flag shows version and exits."""
        result = runner.invoke(app, ["-v"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestHelp:
    """Tests for --help."""

    def test_help(self) -> None:
        """--help describes the tool and its flags."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Track benchmarks across development" in result.stdout
        assert "--speed-tol" in result.stdout
        assert "--record-tol" in result.stdout
        assert "--quiet" in result.stdout


class TestRun:
    """Tests for running comparisons from the CLI."""

    def test_defaults(self, calls: dict[str, Any]) -> None:
        """Without flags the default tolerances are used."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert calls["tolerances"] == (150, 70)
        assert calls["logging"] == ("INFO", False)

    def test_custom_tolerances(self, calls: dict[str, Any]) -> None:
        """Tolerance flags are passed through."""
        result = runner.invoke(app, ["--speed-tol", "200", "--record-tol", "50"])

        assert result.exit_code == 0
        assert calls["tolerances"] == (200, 50)

    def test_camel_case_flags(self, calls: dict[str, Any]) -> None:
        """camelCase flag names are accepted as aliases."""
        result = runner.invoke(app, ["--speedTol", "175", "--recordTol", "60"])

        assert result.exit_code == 0
        assert calls["tolerances"] == (175, 60)

    def test_env_tolerances(self, calls: dict[str, Any], monkeypatch: pytest.MonkeyPatch) -> None:
        """Tolerances fall back to settings from the environment."""
        monkeypatch.setenv("REBENCH_RECORD_TOLERANCE", "80")

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert calls["tolerances"] == (150, 80)

    def test_quiet(self, calls: dict[str, Any]) -> None:
        """-q mutes logging."""
        result = runner.invoke(app, ["-q"])

        assert result.exit_code == 0
        assert calls["logging"] == ("INFO", True)

    @pytest.mark.parametrize("exit_code", [1, -1])
    def test_exit_code_propagated(self, calls: dict[str, Any], exit_code: int) -> None:
        """The run's exit code becomes the process exit code."""
        calls["exit_code"] = exit_code

        result = runner.invoke(app, [])

        assert result.exit_code == exit_code

    def test_invalid_tolerances(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Inconsistent tolerances are a usage error."""
        monkeypatch.setattr(cli_main, "configure_logging", lambda level, quiet: None)

        result = runner.invoke(app, ["--speed-tol", "50", "--record-tol", "90"])

        assert result.exit_code == 2
        assert "must not exceed speed tolerance" in result.output
