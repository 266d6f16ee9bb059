import os
import tempfile
from pathlib import Path

build_prefix = ".build-luarocks"
lua_prefix = ".lua"  # default install path used by gh-actions-lua
luarocks_prefix = ".luarocks"

releases_url = os.getenv("SETUP_LUAROCKS_RELEASES_URL", "https://luarocks.org/releases").rstrip("/")
source_archive = "luarocks-{{ version }}.tar.gz"
windows_archive = "luarocks-{{ version }}-win32.zip"
archive_url = "{{ releases_url }}/{{ archive }}"

runner_temp = Path(os.getenv("RUNNER_TEMP") or tempfile.gettempdir())
# the installed package lives in site-packages, so prefer the checked out action
action_file = Path(
    os.getenv("SETUP_LUAROCKS_ACTION_FILE")
    or Path(os.getenv("GITHUB_ACTION_PATH") or Path(__file__).parent.parent) / "action.yml"
)

mingw_cc = os.getenv("SETUP_LUAROCKS_MINGW_CC", "x86_64-w64-mingw32-gcc")
