import os
from pathlib import Path
from typing import Optional

from setup_luarocks import config
from setup_luarocks.actions import Actions
from setup_luarocks.host import Platform
from setup_luarocks.inputs import Inputs


class Context:
    actions: Actions
    platform: Platform
    luarocks_version: str
    lua_path: Path
    build_dir: Path
    install_dir: Path

    def __init__(
        self,
        actions: Actions,
        inputs: Inputs,
        platform: Optional[Platform] = None,
        cwd: Optional[Path] = None,
        runner_temp: Optional[Path] = None,
    ) -> None:
        cwd = cwd or Path(os.getcwd())
        self.actions = actions
        self.platform = platform or Platform.detect()
        self.luarocks_version = inputs.luarocks_version
        self.lua_path = Path(inputs.lua_path) if inputs.lua_path else cwd / config.lua_prefix
        self.build_dir = (runner_temp or config.runner_temp) / config.build_prefix
        self.install_dir = cwd / config.luarocks_prefix

    @property
    def bin_dir(self) -> Path:
        return self.install_dir / "bin"
