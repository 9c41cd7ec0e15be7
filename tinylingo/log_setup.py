# TinyLingo - Logging Setup
# =========================
"""
Logging configuration for the two entry points.

- CLI: console logging via logging.basicConfig
- Hook: stdout carries the hook protocol, so logs only ever go to a
  size-bounded debug.log file, and only when debug is enabled
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

MAX_LOG_BYTES = 512 * 1024

PACKAGE_LOGGER = "tinylingo"


def configure_logging(debug: bool = False) -> None:
    """Console logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT
    )


def configure_debug_log(enabled: bool, path: Optional[Union[str, Path]] = None) -> Optional[RotatingFileHandler]:
    """
    Attach a rotating file handler to the package logger.

    Args:
        enabled: Whether debug logging is on; nothing is attached otherwise
        path: Log file (defaults to debug.log in the config dir)

    Returns:
        The attached handler, or None when disabled
    """
    if not enabled:
        return None

    if path is None:
        from tinylingo.settings.paths import get_log_path
        path = get_log_path()
    log_path = Path(path)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == os.path.abspath(log_path):
            return handler

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=1,
        encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler
