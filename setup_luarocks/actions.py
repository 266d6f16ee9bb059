"""Runner environment capability.

Everything the step changes outside its own process goes through an ``Actions``
object: reading inputs, extending ``PATH``, exporting variables and reporting
failure. ``GithubActions`` speaks the GitHub runner's file command protocol, so
values written here are visible to every later step of the job.
"""

import os
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class Actions(ABC):
    failed: bool = False

    @abstractmethod
    def get_input(self, name: str) -> str: ...

    @abstractmethod
    def add_path(self, path: str) -> None: ...

    @abstractmethod
    def export_variable(self, name: str, value: str) -> None: ...

    def info(self, message: str) -> None:
        print(message, flush=True)

    def error(self, message: str) -> None:
        print(f"::error::{_escape(message)}", flush=True)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.error(message)


def _escape(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _file_command(var: str) -> Optional[Path]:
    if file := os.getenv(var):
        return Path(file)
    return None


class GithubActions(Actions):
    def get_input(self, name: str) -> str:
        return os.getenv(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()

    def add_path(self, path: str) -> None:
        # GITHUB_PATH is line oriented, so a multi-line value adds one entry per line
        entries = [p for p in path.splitlines() if p]
        if file := _file_command("GITHUB_PATH"):
            with file.open("a", encoding="utf-8") as f:
                f.writelines(f"{p}\n" for p in entries)
        else:
            for p in entries:
                print(f"::add-path::{_escape(p)}", flush=True)
        for p in reversed(entries):
            os.environ["PATH"] = os.pathsep.join([p, os.environ["PATH"]]) if os.getenv("PATH") else p

    def export_variable(self, name: str, value: str) -> None:
        os.environ[name] = value
        if file := _file_command("GITHUB_ENV"):
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            if delimiter in name or delimiter in value:
                raise ValueError(f"Unexpected input: value should not contain the delimiter '{delimiter}'")
            with file.open("a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            print(f"::set-env name={name}::{_escape(value)}", flush=True)
