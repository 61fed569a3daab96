"""Tests for Typer-based CLI."""

import os

import pytest
from typer.testing import CliRunner

from conftest import FakeRunner

from hfetch import __version__
from hfetch.cli import app as app_module
from hfetch.cli.app import app
from hfetch.core.banner import LOGO
from hfetch.core.collectors import collect_system_info
from hfetch.utils.formatters import strip_ansi


@pytest.fixture
def empty_host(fake_root, no_sysconf, monkeypatch):
    """
    Point the CLI at a bare host: no package manager, no flatpak, no init
    markers and an os-release without PRETTY_NAME.
    """
    root = fake_root("/etc")
    (root / "etc" / "os-release").write_text("ID=minimal\n")
    runner = FakeRunner()

    monkeypatch.setattr(
        os,
        "uname",
        lambda: os.uname_result(("Linux", "minimal", "6.6.0", "#1", "x86_64")),
    )
    monkeypatch.setattr(
        app_module,
        "collect_system_info",
        lambda: collect_system_info(root, runner),
    )
    return runner


class TestCLIStructure:
    """Test CLI structure and basic functionality."""

    def test_app_help(self):
        runner = CliRunner()
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "hostname" in result.output.lower()
        assert "--version" in result.output
        assert "--log-level" not in result.output  # hidden

    def test_version_flag(self):
        runner = CliRunner()
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"hfetch v{__version__}" in result.output

    def test_rejects_positional_arguments(self):
        runner = CliRunner()
        result = runner.invoke(app, ["extra"])

        assert result.exit_code != 0

    def test_invalid_log_level(self, empty_host):
        runner = CliRunner()
        result = runner.invoke(app, ["--log-level", "loud"])

        assert result.exit_code == 1


class TestBannerOutput:
    """Test end-to-end banner output."""

    def test_empty_host_defaults(self, empty_host):
        runner = CliRunner()
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        lines = [strip_ansi(line) for line in result.stdout.splitlines()]
        assert len(lines) == 6
        for logo_line, line in zip(LOGO, lines):
            assert line.startswith(logo_line)

        assert "hostname: minimal" in lines[0]
        assert "distro: unknown" in lines[1]
        assert "kernel: 6.6.0" in lines[2]
        assert "init: other" in lines[3]
        assert "packages: 0 native | 0 flatpak" in lines[4]
        assert "memory: 0MB | 0MB" in lines[5]

    def test_flatpak_always_queried(self, empty_host):
        runner = CliRunner()
        runner.invoke(app, [])

        assert empty_host.commands == ["flatpak list | wc -l"]

    def test_output_is_colored(self, empty_host):
        runner = CliRunner()
        result = runner.invoke(app, [])

        assert "\033[1;35m" in result.stdout
        assert "\033[1;34m" in result.stdout
        assert "\033[0m" in result.stdout

    def test_unexpected_error_exits_nonzero(self, monkeypatch):
        def mock_collect():
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "collect_system_info", mock_collect)

        runner = CliRunner()
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "boom" in result.output

    def test_live_host(self):
        """Test against the real host: always a six-line banner."""
        runner = CliRunner()
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 6
