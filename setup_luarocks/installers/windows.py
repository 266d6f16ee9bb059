import os

from setup_luarocks import config
from setup_luarocks.context import Context
from setup_luarocks.installers.base import Failure, FailureReason, InstallResult, Installer, Success
from setup_luarocks.utility import capture, run, run_reported


class LuaVersionNotFoundError(Exception):
    pass


class WindowsInstaller(Installer):
    archive = config.windows_archive
    source_dir = "luarocks-{{ version }}-win32"

    def install(self, ctx: Context) -> InstallResult:
        # ctx.lua_path is not used here, install.bat finds lua on PATH
        log = ctx.actions.info
        source_dir = self.fetch(ctx)

        lua_version = capture(["lua", "-e", "print(_VERSION:sub(5))"], log=log).strip()
        if not lua_version:
            raise LuaVersionNotFoundError("Lua version not found.")

        ctx.bin_dir.mkdir(parents=True, exist_ok=True)
        install_bat = source_dir / "install.bat"
        if not install_bat.exists():
            return Failure(FailureReason.INSTALL_SCRIPT_MISSING, f"install.bat does not exist at {install_bat}")
        install_bat.chmod(0o755)

        log("Installing LuaRocks")
        exit_code = run_reported(
            [str(install_bat), "/LV", lua_version, "/P", str(ctx.bin_dir), "/Q", "/NOADMIN"],
            ctx.actions,
        )
        if exit_code != 0:
            return Failure(FailureReason.INSTALL_SCRIPT_FAILED, f"install.bat failed with exit code {exit_code}")
        log("Done installing LuaRocks")

        log("Configuring LuaRocks")
        run(["luarocks", "config", "lua_version", lua_version], log=log)
        # mingw without msvc, not needed from LuaRocks 3.9.2 onwards
        if not os.getenv("VCINSTALLDIR"):
            run(["luarocks", "config", "variables.CC", config.mingw_cc], log=log)
            run(["luarocks", "config", "variables.LD", config.mingw_cc], log=log)
        log("Done configuring LuaRocks")

        return Success()
