# TinyLingo Settings Module
"""
Configuration management for TinyLingo.
Provides persistent storage, validation, and dot-path access to settings.
"""

from .schemas import SmartSettings, TinyLingoConfig
from .service import (
    load_config,
    save_config,
    get_config_value,
    set_config_value,
    infer_type,
)
from .paths import (
    get_config_dir,
    get_config_path,
    get_glossary_path,
    get_log_path,
)

__all__ = [
    "SmartSettings",
    "TinyLingoConfig",
    "load_config",
    "save_config",
    "get_config_value",
    "set_config_value",
    "infer_type",
    "get_config_dir",
    "get_config_path",
    "get_glossary_path",
    "get_log_path",
]
