"""
Configuration management for the storefront catalog tool.

Handles loading and saving configuration, with environment overrides for
backend credentials.
"""

import json
import os
import logging
from typing import Dict, Any, Optional


# Config file name, looked up in the working directory
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> str:
    """Path of config.json in the current working directory."""
    return os.path.join(os.getcwd(), CONFIG_FILE_NAME)


# Default configuration
DEFAULT_CONFIG = {
    "_BACKEND_SETTINGS": "# Hosted backend (REST) connection",
    "supabase_url": "",
    "supabase_key": "",
    "products_table": "products",
    "page_size": 1000,
    "timeout": 30,
    "min_request_delay": 0.2,
    "max_retries": 3,

    "_USER_SETTINGS": "# Application Settings",
    "input_file": "",
    "output_file": "",
    "log_file": "",
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_ANON_KEY": "supabase_key",
}


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or create with defaults.

    Args:
        config_file: Path to config JSON (defaults to ./config.json)

    Returns:
        Configuration dictionary
    """
    config_file = config_file or default_config_path()

    if not os.path.exists(config_file):
        logging.info(f"Config file not found, creating default: {config_file}")
        save_config(DEFAULT_CONFIG, config_file)
        merged = DEFAULT_CONFIG.copy()
    else:
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)

            # Merge with defaults (add any new keys from DEFAULT_CONFIG)
            merged = DEFAULT_CONFIG.copy()
            merged.update(config)

        except (OSError, json.JSONDecodeError) as e:
            logging.error(f"Failed to load config: {e}")
            merged = DEFAULT_CONFIG.copy()

    return apply_env_overrides(merged)


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay credentials from environment variables that are set."""
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[key] = value
    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None):
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        config_file: Path to config JSON (defaults to ./config.json)
    """
    config_file = config_file or default_config_path()
    try:
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=4, ensure_ascii=False)

    except OSError as e:
        logging.error(f"Failed to save config: {e}")
