"""
Configuration Management Module

Handles loading and validating application configuration from config.json
Missing keys are filled in from defaults and written back
"""

import json
from pathlib import Path
import logging

logger = logging.getLogger("version_badge")


def default_config():
    """Fresh copy of the built-in defaults"""
    return {
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
            "debug": False,
        },
        "logging": {
            "context": "web",
        },
        # module_path -> {"latest": "v1.2.0", "versions": [...], "packages": [...]}
        "modules": {},
    }


def load_config(config_file: Path = None):
    """
    Load configuration from config.json with sensible defaults

    Args:
        config_file: Override for the config location (defaults to CONFIG_FILE)

    Returns:
        dict: Configuration dictionary
    """
    if config_file is None:
        from .constants import CONFIG_FILE
        config_file = CONFIG_FILE

    defaults = default_config()

    if not config_file.exists():
        _save_config(config_file, defaults)
        return defaults

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)

        # Merge with defaults to ensure all keys exist
        merged = _deep_merge(defaults, config)

        # Save merged config back if anything was added
        if merged != config:
            _save_config(config_file, merged)

        return merged
    except json.JSONDecodeError as e:
        logger.error(f"Config file corrupted: {e}. Using defaults.")
        return defaults
    except OSError as e:
        logger.error(f"Error loading config: {e}. Using defaults.")
        return defaults


def _deep_merge(defaults: dict, override: dict) -> dict:
    """
    Deep merge override config into defaults, preserving new defaults

    Args:
        defaults: Default configuration
        override: User-provided configuration

    Returns:
        dict: Merged configuration
    """
    result = defaults.copy()
    for key, value in override.items():
        if key in defaults and isinstance(defaults[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(defaults[key], value)
        else:
            result[key] = value
    return result


def _save_config(config_file: Path, config: dict):
    """
    Save configuration to file

    Args:
        config_file: Path to config file
        config: Configuration dictionary
    """
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4)
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
