import sys
from enum import Enum
from typing import Optional


class Platform(Enum):
    WINDOWS = "windows"
    UNIX = "unix"

    @classmethod
    def detect(cls, identifier: Optional[str] = None) -> "Platform":
        identifier = sys.platform if identifier is None else identifier
        # anything that isn't windows, known or not, is built from source
        return cls.WINDOWS if identifier.startswith("win32") else cls.UNIX
