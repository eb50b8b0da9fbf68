"""Mini README: Application-wide logging helpers for groupledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and level once.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The root
    handler is attached a single time per process so reloading modules (or
    building several web applications in tests) never duplicates output.
    When no level is passed, ``GROUPLEDGER_LOG_LEVEL`` decides it, so the CLI,
    the web adapter and library callers all log at the same verbosity.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger, reading the level from settings when omitted."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    if level is None:
        from .configuration import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
