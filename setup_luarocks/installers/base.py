from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from setup_luarocks import config
from setup_luarocks.context import Context
from setup_luarocks.utility import download_file, extract_file, render


class FailureReason(Enum):
    INSTALL_SCRIPT_MISSING = "install-script-missing"
    INSTALL_SCRIPT_FAILED = "install-script-failed"


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    message: str


InstallResult = Union[Success, Failure]


class Installer(ABC):
    """Installs LuaRocks into ``ctx.install_dir``.

    Conditions the step reports and stops on are returned as a ``Failure``.
    Anything else (network, archive or subprocess errors) is raised.
    """

    archive: str
    source_dir: str

    @abstractmethod
    def install(self, ctx: Context) -> InstallResult: ...

    def fetch(self, ctx: Context) -> Path:
        """Download and unpack the release archive, returning the unpacked tree."""
        archive = render(self.archive, version=ctx.luarocks_version)
        archive_path = ctx.build_dir / archive
        download_file(
            render(config.archive_url, releases_url=config.releases_url, archive=archive),
            archive_path,
            log=ctx.actions.info,
        )
        extract_file(archive_path, ctx.build_dir, log=ctx.actions.info)
        return ctx.build_dir / render(self.source_dir, version=ctx.luarocks_version)
