from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the user's preferred shared folder and
diagnostic settings as JSON in the per-user data directory.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from sharedfolder.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "shared_folder": os.getcwd(),
        "log_level": "INFO",
        "log_file": "",
        "json_output": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    A missing or unreadable file is not an error: defaults are returned.

    Args:
        config_file: Override for the configuration file location.

    Returns:
        Dict[str, Any]: The active configuration.
    """
    path = config_file or get_config_file()
    config = get_default_config()

    if not os.path.exists(path):
        logger.debug(f"Config file '{path}' not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update({k: v for k, v in data.items() if k in config})
    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        config_file: Override for the configuration file location.
    """
    path = config_file or get_config_file()
    state = dict(config)
    state["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
