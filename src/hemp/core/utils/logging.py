"""Logging utilities for hemp.

The library never configures the root logger on import; applications call
``configure_logging`` when they want hemp's diagnostics on screen.
"""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER_NAME = "hemp"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stream handler to the ``hemp`` logger.

    The level comes from the loaded configuration (``logging.level``), or
    ``DEBUG`` when ``verbose`` is set. Calling this twice does not add a
    second handler.

    Args:
        verbose: Enable debug logging when True.
    """
    from hemp.core.config import get_config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = "DEBUG" if verbose else get_config().logging.level
    logger.setLevel(_level_value(level))

    if not any(getattr(h, "_hemp_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._hemp_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    ``component`` is relative to the ``hemp`` logger (``"core.presenter"``)
    unless it already starts with ``hemp``. Accepts either string levels
    (e.g., "INFO") or numeric constants.
    """
    if component != ROOT_LOGGER_NAME and not component.startswith(f"{ROOT_LOGGER_NAME}."):
        component = f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(component).setLevel(_level_value(level))


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level
