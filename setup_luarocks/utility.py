import shutil
import subprocess
import tarfile
import zipfile
from pathlib import Path
from typing import Any, Callable, Optional

import requests
from jinja2 import Environment
from tqdm import tqdm

from setup_luarocks.actions import Actions

Log = Callable[[str], None]

_env = Environment()


def render(template: str, **values: Any) -> str:
    return _env.from_string(template).render(**values)


def extract_file(file_path: Path, out_path=Path("."), log: Log = print) -> None:
    log(f"Extracting '{file_path.name}'...")
    match file_path.suffixes[-2:]:
        case [".tar", ".gz"] | [_, ".tgz"] | [".tgz"]:
            with tarfile.open(file_path, "r:gz") as tar:
                tar.extractall(path=out_path, filter="data")
        case [_, ".zip"] | [".zip"]:
            with zipfile.ZipFile(file_path, "r") as zip_ref:
                zip_ref.extractall(out_path)
        case _:
            raise ValueError(f"Unsupported file type: {file_path}")


def download_file(url: str, out_path: Path, log: Log = print) -> None:
    log(f"Downloading '{url}'...")
    with requests.get(url, stream=True) as response:
        response.raise_for_status()
        total_size = int(response.headers.get("content-length", 0))
        with (
            out_path.open("wb") as f,
            tqdm(
                total=total_size,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"Downloading {out_path.name}",
            ) as progress,
        ):
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
                progress.update(len(chunk))


def _resolve(cmd: list[str]) -> list[str]:
    # luarocks is a .bat on windows, which CreateProcess only finds with its suffix
    return [shutil.which(cmd[0]) or cmd[0], *cmd[1:]]


def run(cmd: list[str], cwd: Optional[Path] = None, check: bool = True, log: Log = print) -> int:
    log(f"[command]{' '.join(cmd)}")
    return subprocess.run(_resolve(cmd), cwd=cwd, check=check).returncode


def run_reported(cmd: list[str], actions: Actions, cwd: Optional[Path] = None) -> int:
    """Run without raising, forwarding stdout to ``actions.info`` and stderr to ``actions.error``."""
    actions.info(f"[command]{' '.join(cmd)}")
    result = subprocess.run(_resolve(cmd), cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    if out := result.stdout.rstrip():
        actions.info(out)
    if err := result.stderr.rstrip():
        actions.error(err)
    return result.returncode


def capture(cmd: list[str], cwd: Optional[Path] = None, log: Log = print) -> str:
    log(f"[command]{' '.join(cmd)}")
    return subprocess.run(_resolve(cmd), cwd=cwd, stdout=subprocess.PIPE, text=True, check=True).stdout
