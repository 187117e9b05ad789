"""Configuration loading logic."""

import os
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any, Dict

from qutescript.errors import ConfigError

CONFIG_DIR_ENV = "QUTESCRIPT_CONFIG_DIR"
CONFIG_FILES = ["general.toml"]


def _get_config_dir() -> Path:
    """Return the configuration directory path."""
    override = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "qutescript"


def merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``update`` into ``base`` and return ``base``."""
    for k, v in update.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            merge(base[k], v)
        else:
            base[k] = v
    return base


def load_config() -> Dict[str, Any]:
    """Load bundled defaults, then overlay the user's TOML files.

    Raises ``ConfigError`` when a user file is not valid TOML.
    """
    config_dir = _get_config_dir()
    final_config: Dict[str, Any] = {"general": {}}

    for filename in CONFIG_FILES:
        resource_path = resources.files("qutescript.data.config").joinpath(filename)
        with resource_path.open("rb") as f:
            merge(final_config, tomllib.load(f))

    for filename in CONFIG_FILES:
        user_file_path = config_dir / filename
        if not user_file_path.exists():
            continue
        try:
            with open(user_file_path, "rb") as f:
                merge(final_config, tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(str(user_file_path), str(e)) from e

    return final_config
