"""Configuration constants and re-exports for qutescript.

Only ``qutescript.runner`` imports this package; the environment and
channel helpers never read configuration.
"""

from qutescript.config.loader import load_config, _get_config_dir


# --- Initialize Configuration ---
_CONFIG = load_config()

# General
_gen = _CONFIG["general"]
LOG_LEVEL = _gen.get("log_level", "WARNING")
LOG_FILE = _gen.get("log_file", "")

CONFIG_DIR = _get_config_dir()

__all__ = [
    "CONFIG_DIR",
    "LOG_FILE",
    "LOG_LEVEL",
    "load_config",
]
