"""
Settings Paths
==============
Locations of the files TinyLingo keeps under its config directory.
"""

import os
from pathlib import Path

from .defaults import (
    ENV_HOME,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    GLOSSARY_FILE_NAME,
    LOG_FILE_NAME,
)


def get_config_dir() -> Path:
    """Return $TINYLINGO_HOME or ~/.config/tinylingo, creating it if needed."""
    override = os.getenv(ENV_HOME)
    if override:
        config_dir = Path(override)
    else:
        config_dir = Path.home() / ".config" / CONFIG_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def get_glossary_path() -> Path:
    return get_config_dir() / GLOSSARY_FILE_NAME


def get_log_path() -> Path:
    return get_config_dir() / LOG_FILE_NAME
