from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from setup_luarocks import config
from setup_luarocks.actions import Actions


@dataclass
class Input:
    name: str
    description: str = ""
    required: bool = False
    default: Optional[str] = None

    def __init__(self, name: str, data: dict[str, Any]) -> None:
        self.name = name
        self.description = str(data.get("description", "")).strip()
        self.required = bool(data.get("required", False))
        default = data.get("default")
        self.default = None if default is None else str(default)


def load_inputs(action_file: Optional[Path] = None) -> dict[str, Input]:
    action_file = action_file or config.action_file
    if not action_file.exists():
        return {}
    data = yaml.safe_load(action_file.read_text(encoding="utf-8")) or {}
    return {name: Input(name, spec or {}) for name, spec in (data.get("inputs") or {}).items()}


def get_input(actions: Actions, name: str, definitions: dict[str, Input], required: bool = False) -> str:
    value = actions.get_input(name)
    definition = definitions.get(name)
    if not value and definition and definition.default:
        value = definition.default.strip()
    if not value and (required or (definition and definition.required)):
        raise ValueError(f"Input required and not supplied: {name}")
    return value


@dataclass
class Inputs:
    luarocks_version: str
    lua_path: str

    @classmethod
    def resolve(cls, actions: Actions, definitions: dict[str, Input], **overrides: Optional[str]) -> "Inputs":
        luarocks_version = overrides.get("luarocks_version") or get_input(
            actions, "luaRocksVersion", definitions, required=True
        )
        lua_path = overrides.get("lua_path") or get_input(actions, "withLuaPath", definitions)
        return cls(luarocks_version=luarocks_version, lua_path=lua_path)
