from setup_luarocks.host import Platform

from .base import Failure, FailureReason, InstallResult, Installer, Success
from .unix import UnixInstaller
from .windows import LuaVersionNotFoundError, WindowsInstaller


def installer_for(platform: Platform) -> Installer:
    match platform:
        case Platform.WINDOWS:
            return WindowsInstaller()
        case Platform.UNIX:
            return UnixInstaller()


__all__ = [
    "Failure",
    "FailureReason",
    "InstallResult",
    "Installer",
    "LuaVersionNotFoundError",
    "Success",
    "UnixInstaller",
    "WindowsInstaller",
    "installer_for",
]
