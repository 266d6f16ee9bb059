import re

from setup_luarocks import config
from setup_luarocks.context import Context
from setup_luarocks.installers.base import InstallResult, Installer, Success
from setup_luarocks.utility import run

_LEGACY_VERSION = re.compile(r"^2\.")


class UnixInstaller(Installer):
    archive = config.source_archive
    source_dir = "luarocks-{{ version }}"

    def install(self, ctx: Context) -> InstallResult:
        source_dir = self.fetch(ctx)

        def make(*args: str) -> None:
            run(["make", *args], cwd=source_dir, log=ctx.actions.info)

        run(
            ["./configure", f"--with-lua={ctx.lua_path}", f"--prefix={ctx.install_dir}"],
            cwd=source_dir,
            log=ctx.actions.info,
        )
        make()
        # 2.x needs a separate build stage before install
        if _LEGACY_VERSION.match(ctx.luarocks_version):
            make("build")
        make("install")

        return Success()
