"""
Settings Service
================
Loading, saving and dot-path access for the TinyLingo configuration.

The stored file only needs the keys that differ from the defaults; pydantic
fills in the rest. Environment overrides are applied on load and never
written back.
"""

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from tinylingo import ConfigError
from .defaults import ENV_API_KEY, ENV_DEBUG
from .paths import get_config_path
from .schemas import TinyLingoConfig

logger = logging.getLogger(__name__)


def _read_stored(path: Path) -> Dict[str, Any]:
    """Read the raw stored config dict ({} if the file does not exist)."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def _validate(data: Dict[str, Any]) -> TinyLingoConfig:
    try:
        return TinyLingoConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def _apply_env(config: TinyLingoConfig) -> TinyLingoConfig:
    """Apply environment overrides to a loaded config."""
    api_key = os.getenv(ENV_API_KEY)
    if api_key and not config.smart.api_key:
        config.smart.api_key = api_key

    if os.getenv(ENV_DEBUG, "").lower() in ("1", "true", "yes"):
        config.debug = True

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> TinyLingoConfig:
    """
    Load the configuration.

    Args:
        path: Config file path (defaults to the config dir's config.json)

    Returns:
        Validated config; defaults when the file does not exist

    Raises:
        ConfigError: If the file is not valid JSON or fails validation
    """
    config_path = Path(path) if path else get_config_path()
    config = _validate(_read_stored(config_path))
    return _apply_env(config)


def save_config(config: TinyLingoConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Write the configuration as pretty JSON."""
    config_path = Path(path) if path else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(config.model_dump(), indent=2, ensure_ascii=False),
        encoding="utf-8"
    )
    logger.debug(f"Saved config to {config_path}")


def infer_type(raw: str) -> Any:
    """
    Infer the type of a command-line value.

    "true"/"false" become booleans, "null" becomes None, numeric strings
    become int or float, anything else stays a string.
    """
    if raw == "true":
        return True
    if raw == "false":
        return False
    if raw == "null":
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return raw
    return number if math.isfinite(number) else raw


def get_config_value(dot_path: str, path: Optional[Union[str, Path]] = None) -> Any:
    """
    Get a config value by dot-separated path (e.g. "smart.enabled").

    Returns:
        The value, a dict for sections, or None if the path does not exist
    """
    if not dot_path:
        return None

    current: Any = load_config(path).model_dump()
    for key in dot_path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def set_config_value(
    dot_path: str,
    raw: str,
    path: Optional[Union[str, Path]] = None
) -> TinyLingoConfig:
    """
    Set a config value by dot-separated path and save the file.

    The type of `raw` is inferred first; if the inferred value does not
    validate (e.g. a numeric model name), the raw string is tried.

    Raises:
        ConfigError: If the path is unknown or the value is invalid
    """
    keys = dot_path.split(".") if dot_path else []
    if not keys or not all(keys):
        raise ConfigError(f"Invalid config key: '{dot_path}'")

    config_path = Path(path) if path else get_config_path()
    stored = _read_stored(config_path)

    def candidate_with(value: Any) -> Dict[str, Any]:
        data = json.loads(json.dumps(stored))
        current = data
        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]
        current[keys[-1]] = value
        return data

    inferred = infer_type(raw)
    try:
        config = _validate(candidate_with(inferred))
    except ConfigError:
        if inferred == raw and type(inferred) is str:
            raise
        config = _validate(candidate_with(raw))

    save_config(config, config_path)
    logger.info(f"Config updated: {dot_path} = {raw}")
    return config
