"""Centralized logging configuration for fastgraph.

All modules log through children of the ``"fastgraph"`` logger, which owns a
single stdout handler. The initial level is INFO unless ``FASTGRAPH_LOG_LEVEL``
names another one (e.g. ``FASTGRAPH_LOG_LEVEL=debug``).
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "fastgraph"
LOG_LEVEL_ENV = "FASTGRAPH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_root_logger(level: Union[int, str, None] = None) -> None:
    """Attach the stdout handler to the ``"fastgraph"`` logger once.

    Args:
        level: Level number or name. Defaults to ``FASTGRAPH_LOG_LEVEL``,
            then INFO.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    # Keep propagating so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of ``"fastgraph"``; pass the module ``__name__``."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of every fastgraph logger (e.g. ``logging.DEBUG`` or ``"debug"``)."""
    setup_root_logger()
    resolved = _resolve_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(resolved)
    for handler in root_logger.handlers:
        handler.setLevel(resolved)


def reset_logging(level: Optional[Union[int, str]] = None) -> None:
    """Drop the handler and configure again from scratch (mainly for tests)."""
    global _configured
    _configured = False
    logging.getLogger(ROOT_LOGGER_NAME).handlers.clear()
    setup_root_logger(level)


setup_root_logger()
