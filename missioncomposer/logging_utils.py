"""Mini README: Application-wide logging helpers for the mission composer.

Structure:
    * configure_root_logger - install the shared handler and apply a level.
    * get_logger - module logger factory used as ``LOGGER`` across the package.

Usage:
    Modules call ``get_logger(__name__)`` at import time; that only ensures a
    handler exists and never touches the level. The level comes from
    ``MISSIONCOMPOSER_LOG_LEVEL`` and is applied by the CLI and by the web
    application factory, so uvicorn workers pick it up as well.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DEFAULT_LEVEL = logging.INFO

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach the shared handler once and apply ``level`` when one is given."""

    global _handler
    root_logger = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(_handler)
        root_logger.setLevel(DEFAULT_LEVEL)
    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger; the root level is left as configured."""

    configure_root_logger()
    return logging.getLogger(name)
