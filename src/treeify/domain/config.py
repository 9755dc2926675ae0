from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loads optional overrides
from a JSON file. Unknown keys in the file are ignored.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from treeify.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

# Never persisted; the walk target always comes from the invocation
SESSION_ONLY_KEYS = ("path",)


def get_default_config_path() -> str:
    """Return the path of the per-user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Target
        "path": os.getcwd(),

        # Walk behaviour
        "include_hidden": False,
        "count_entries": False,
        "dirs_only": False,
        "sort_entries": False,
        "follow_symlinks": True,

        # Output
        "output_file": "",
        "json_output": False,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk merged over the defaults.

    A missing file is not an error. Unreadable or malformed files are
    logged and the defaults are returned. The per-user file cannot change
    the walk target; an explicitly passed file can.

    Args:
        config_path: JSON file to read. Defaults to the per-user file.

    Returns:
        Dict[str, Any]: Merged configuration.
    """
    defaults = get_default_config()
    path = config_path or get_default_config_path()
    ignored = () if config_path else SESSION_ONLY_KEYS

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Using defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return defaults

    for key, value in data.items():
        if key in ignored:
            logger.debug(f"Ignoring session-only key in user config: {key}")
        elif key in defaults:
            defaults[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")
    return defaults


def save_config(config: Dict[str, Any], config_path: Optional[str] = None) -> bool:
    """
    Persist known configuration keys as JSON, leaving out the walk target.

    Returns:
        bool: True if the file was written.
    """
    path = config_path or get_default_config_path()
    known = get_default_config()
    payload = {
        k: v for k, v in config.items()
        if k in known and k not in SESSION_ONLY_KEYS
    }
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
