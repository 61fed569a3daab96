"""Pytest configuration and shared fixtures for hfetch tests."""

import pytest

from hfetch.core.shell import SPAWN_FAILED, CommandResult


class FakeRunner:
    """Command runner returning canned output keyed by command string.

    Unknown commands behave like a missing binary: empty stdout and a
    non-zero exit status.
    """

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.commands = []

    def run(self, command):
        self.commands.append(command)
        if command in self.outputs:
            return CommandResult(self.outputs[command], 0)
        return CommandResult("", SPAWN_FAILED)


@pytest.fixture
def fake_runner():
    """Provide a FakeRunner with no known commands."""
    return FakeRunner()


@pytest.fixture
def fake_root(tmp_path):
    """
    Provide an empty directory standing in for the filesystem root.

    Use the returned ``make`` helper to stage marker paths below it:
    ``make("/etc/s6", "/run/shepherd")``.
    """
    root = tmp_path / "root"
    root.mkdir()

    def make(*paths):
        for path in paths:
            (root / path.lstrip("/")).mkdir(parents=True, exist_ok=True)
        return root

    make.root = root
    return make


@pytest.fixture
def no_sysconf(monkeypatch):
    """Make sysconf memory queries fail so /proc/meminfo is used instead."""
    def mock_sysconf(name):
        raise ValueError(f"unrecognized configuration name: {name}")

    monkeypatch.setattr("os.sysconf", mock_sysconf)
