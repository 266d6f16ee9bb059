import argparse
import sys
from typing import Optional

import argcomplete

from setup_luarocks.actions import GithubActions
from setup_luarocks.context import Context
from setup_luarocks.exporter import export_environment
from setup_luarocks.inputs import Inputs, load_inputs
from setup_luarocks.installers import Failure, installer_for


def run(ctx: Context) -> None:
    ctx.build_dir.mkdir(parents=True, exist_ok=True)

    # on PATH before installing so later steps see it even if they start early
    ctx.actions.add_path(str(ctx.bin_dir))

    result = installer_for(ctx.platform).install(ctx)
    if isinstance(result, Failure):
        # only the installer stops, the luarocks queries still run
        ctx.actions.set_failed(result.message)

    export_environment(ctx.actions)


def main(argv: Optional[list[str]] = None) -> None:
    actions = GithubActions()
    try:

        def formatter(prog):
            return argparse.HelpFormatter(prog, width=80, max_help_position=1000)

        parser = argparse.ArgumentParser(
            prog="setup-luarocks",
            description="install LuaRocks and expose it to the following steps",
            formatter_class=formatter,
        )
        parser.add_argument("--luarocks-version", metavar="VERSION", help="LuaRocks version, overrides luaRocksVersion")
        parser.add_argument("--with-lua-path", metavar="PATH", help="existing Lua installation, overrides withLuaPath")

        argcomplete.autocomplete(parser)

        args = parser.parse_args(argv)

        inputs = Inputs.resolve(
            actions,
            load_inputs(),
            luarocks_version=args.luarocks_version,
            lua_path=args.with_lua_path,
        )
        run(Context(actions, inputs))

    except Exception as e:
        actions.set_failed(f"Failed to install LuaRocks: {e}")
    except KeyboardInterrupt:
        pass

    sys.exit(1 if actions.failed else 0)
