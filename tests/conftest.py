from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

import pytest

from setup_luarocks import exporter
from setup_luarocks.actions import Actions
from setup_luarocks.context import Context
from setup_luarocks.host import Platform
from setup_luarocks.inputs import Inputs
from setup_luarocks.installers import base, unix, windows


class RecordingActions(Actions):
    def __init__(self, events: list[tuple], inputs: Optional[dict[str, str]] = None) -> None:
        self.events = events
        self.inputs = inputs or {}
        self.paths: list[str] = []
        self.variables: dict[str, str] = {}
        self.messages: list[str] = []
        self.errors: list[str] = []

    def get_input(self, name: str) -> str:
        return self.inputs.get(name, "")

    def add_path(self, path: str) -> None:
        self.paths.append(path)
        self.events.append(("add_path", path))

    def export_variable(self, name: str, value: str) -> None:
        self.variables[name] = value
        self.events.append(("export", name, value))

    def info(self, message: str) -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class FakeShell:
    """Stands in for ``utility.run``/``utility.capture``.

    Exit codes and outputs are keyed by the command line with the program
    reduced to its file name, or by the program name alone.
    """

    def __init__(self, events: list[tuple]) -> None:
        self.events = events
        self.commands: list[str] = []
        self.outputs: dict[str, str] = {}
        self.exit_codes: dict[str, int] = {}
        self.stderr: dict[str, str] = {}

    @staticmethod
    def key(cmd: list[str]) -> str:
        return " ".join([Path(cmd[0]).name, *cmd[1:]])

    def run(self, cmd: list[str], cwd: Optional[Path] = None, check: bool = True, log=print) -> int:
        key = self.key(cmd)
        self.commands.append(key)
        self.events.append(("run", key, cwd))
        code = self.exit_codes.get(key, self.exit_codes.get(Path(cmd[0]).name, 0))
        if check and code != 0:
            raise subprocess.CalledProcessError(code, cmd)
        return code

    def run_reported(self, cmd: list[str], actions: Actions, cwd: Optional[Path] = None) -> int:
        code = self.run(cmd, cwd=cwd, check=False)
        if err := self.stderr.get(Path(cmd[0]).name):
            actions.error(err)
        return code

    def capture(self, cmd: list[str], cwd: Optional[Path] = None, log=print) -> str:
        key = self.key(cmd)
        self.commands.append(key)
        self.events.append(("capture", key))
        return self.outputs.get(key, "")

    def ran(self, prefix: str) -> bool:
        return any(c.startswith(prefix) for c in self.commands)


class FakeReleases:
    def __init__(self, events: list[tuple]) -> None:
        self.events = events
        self.urls: list[str] = []
        self.with_install_script = True

    def download_file(self, url: str, out_path: Path, log=print) -> None:
        self.urls.append(url)
        self.events.append(("download", url))

    def extract_file(self, file_path: Path, out_path: Path, log=print) -> None:
        self.events.append(("extract", file_path.name))
        if file_path.name.endswith("-win32.zip"):
            source_dir = out_path / file_path.name.removesuffix(".zip")
            source_dir.mkdir(parents=True, exist_ok=True)
            if self.with_install_script:
                (source_dir / "install.bat").write_text("@ECHO off\n")


@pytest.fixture
def events() -> list[tuple]:
    return []


@pytest.fixture
def actions(events: list[tuple]) -> RecordingActions:
    return RecordingActions(events)


@pytest.fixture
def shell(monkeypatch: pytest.MonkeyPatch, events: list[tuple]) -> FakeShell:
    fake = FakeShell(events)
    monkeypatch.setattr(windows, "run", fake.run)
    monkeypatch.setattr(windows, "capture", fake.capture)
    monkeypatch.setattr(windows, "run_reported", fake.run_reported)
    monkeypatch.setattr(unix, "run", fake.run)
    monkeypatch.setattr(exporter, "capture", fake.capture)
    return fake


@pytest.fixture
def releases(monkeypatch: pytest.MonkeyPatch, events: list[tuple]) -> FakeReleases:
    fake = FakeReleases(events)
    monkeypatch.setattr(base, "download_file", fake.download_file)
    monkeypatch.setattr(base, "extract_file", fake.extract_file)
    return fake


@pytest.fixture
def make_context(tmp_path: Path, actions: RecordingActions):
    def _make(version: str = "3.11.1", platform: Platform = Platform.UNIX, lua_path: str = "") -> Context:
        return Context(
            actions,
            Inputs(luarocks_version=version, lua_path=lua_path),
            platform=platform,
            cwd=tmp_path / "work",
            runner_temp=tmp_path / "temp",
        )

    return _make
