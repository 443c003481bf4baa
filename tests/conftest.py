from pathlib import Path

import pytest

from macsetup.config import Config
from macsetup.errors import CommandError


class FakeShell:
    """Stands in for macsetup.shell, recording every command it is asked to run."""

    def __init__(self):
        self.calls: list[tuple[str, ...]] = []
        self.succeeding: set[tuple[str, ...]] = set()
        self.failing: dict[tuple[str, ...], int] = {}
        self.captured: dict[tuple[str, ...], tuple[int, str]] = {}

    def run(self, args):
        args = tuple(args)
        self.calls.append(args)
        if args in self.failing:
            raise CommandError(f"{' '.join(args)} exited with status {self.failing[args]}", self.failing[args])

    def succeeds(self, args):
        args = tuple(args)
        self.calls.append(args)
        return args in self.succeeding

    def capture(self, args):
        args = tuple(args)
        self.calls.append(args)
        return self.captured.get(args, (0, ""))

    def installs(self):
        return [call for call in self.calls if call[:2] == ("brew", "install")]


@pytest.fixture
def fake_shell(monkeypatch):
    shell = FakeShell()
    monkeypatch.setattr("macsetup.shell.run", shell.run)
    monkeypatch.setattr("macsetup.shell.succeeds", shell.succeeds)
    monkeypatch.setattr("macsetup.shell.capture", shell.capture)
    return shell


@pytest.fixture
def config(tmp_path: Path) -> Config:
    working_dir = tmp_path / "repo"
    home_dir = tmp_path / "home"
    (working_dir / "dotfiles").mkdir(parents=True)
    home_dir.mkdir()
    return Config(working_dir=working_dir, home_dir=home_dir)
