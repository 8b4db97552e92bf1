from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml

from wkt_parser.core.context import DEFAULT_MAX_DEPTH, Dimension
from wkt_parser.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "wkt_parser.yml"


class WKTConfig:
    def __init__(self, data):
        self.parser = data.get("parser", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def dimension(self) -> Dimension:
        return Dimension.parse(self.parser.get("dimension", "xy"))

    @property
    def allow_trailing(self) -> bool:
        return bool(self.parser.get("allow_trailing", True))

    @property
    def max_depth(self) -> int:
        value = self.parser.get("max_depth", DEFAULT_MAX_DEPTH)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ConfigError(f"parser.max_depth must be a positive integer, got {value!r}")
        return value


def load_config(path: Optional[Union[str, Path]] = None) -> WKTConfig:
    """
    Load configuration from YAML.

    With no path, the project's ``config/wkt_parser.yml`` is used when
    present and built-in defaults otherwise. An explicit path must exist.
    """
    if path is None:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return WKTConfig({})
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return WKTConfig(data)


_config_cache = None


def get_config() -> WKTConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
