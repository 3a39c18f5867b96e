"""Configuration loading (YAML over built-in defaults)."""

import os

import yaml

DEFAULTS = {
    "log_level": "INFO",
    "data_only": True,
    "default_value": "",
    "output_format": "json",
}


def load_config(config_path):
    """Load configuration from a YAML file, falling back to defaults."""
    config = dict(DEFAULTS)
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f) or {}
        config.update(user_config)
    return config
