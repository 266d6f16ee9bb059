from setup_luarocks.actions import Actions
from setup_luarocks.utility import capture


def export_environment(actions: Actions) -> None:
    def query(flag: str) -> str:
        return capture(["luarocks", "path", flag], log=actions.info)

    # --lr-bin is queried twice and the outputs joined; both entries land on PATH
    lr_bin = query("--lr-bin")
    lr_bin += query("--lr-bin")
    if lr_bin := lr_bin.strip():
        actions.add_path(lr_bin)

    lr_path = query("--lr-path").strip()
    lr_cpath = query("--lr-cpath").strip()

    # a leading ";;" keeps lua's builtin search path
    if lr_path:
        actions.export_variable("LUA_PATH", f";;{lr_path}")
    if lr_cpath:
        actions.export_variable("LUA_CPATH", f";;{lr_cpath}")
