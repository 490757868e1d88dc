"""Loading the service settings from a configuration file."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

DEFAULT_DIRECTORY = "configs"
CONFIG_NAME = "config"
_EXTENSIONS = ("json", "toml", "yaml", "yml")


@dataclass(frozen=True)
class Settings:
    """Addresses of the status server and the simulator, and the data directory."""

    server_addr: str = ""
    server_port: str = ""
    simulator_addr: str = ""
    simulator_port: str = ""
    data_path: str = ""

    def simulator_url(self) -> str:
        """Return the simulator's host:port."""
        return f"{self.simulator_addr}:{self.simulator_port}"


def _parse(path: Path, extension: str) -> dict:
    text = path.read_text(encoding="utf-8")
    try:
        if extension == "json":
            tree = json.loads(text)
        elif extension == "toml":
            tree = tomllib.loads(text)
        else:
            tree = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid configuration {path}: {exc}") from exc
    if tree is None:
        return {}
    if not isinstance(tree, dict):
        raise ValueError(f"configuration {path} is not a mapping")
    return tree


def _to_string(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(Decimal(repr(value)).normalize(), "f")
    return str(value)


def _get_string(tree: dict, *keys: str) -> str:
    node: Any = tree
    for key in keys:
        if not isinstance(node, dict):
            return ""
        node = {str(name).lower(): value for name, value in node.items()}.get(key)
    return _to_string(node)


def load_settings(directory: str | Path = DEFAULT_DIRECTORY) -> Settings:
    """Read config.json, config.toml, config.yaml or config.yml from a directory.

    Raises FileNotFoundError if none exists and ValueError if it cannot be parsed.
    """
    base = Path(directory)
    for extension in _EXTENSIONS:
        path = base / f"{CONFIG_NAME}.{extension}"
        if path.is_file():
            tree = _parse(path, extension)
            return Settings(
                server_addr=_get_string(tree, "server", "addr"),
                server_port=_get_string(tree, "server", "port"),
                simulator_addr=_get_string(tree, "simulator", "addr"),
                simulator_port=_get_string(tree, "simulator", "port"),
                data_path=_get_string(tree, "data", "path"),
            )
    raise FileNotFoundError(f'Config File "{CONFIG_NAME}" Not Found in "{base}"')