"""Logging set-up for the server."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "todoserver"
LEVEL_VARIABLE = "LOG_LEVEL"

_HANDLER_NAME = "todoserver-console"
_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _level_from_env() -> int:
    raw = os.environ.get(LEVEL_VARIABLE, "")
    return _LEVELS.get(raw.strip().lower(), logging.DEBUG)


def init() -> logging.Logger:
    """Configure the package logger once; later calls change nothing.

    The level comes from LOG_LEVEL and falls back to debug.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if any(handler.name == _HANDLER_NAME for handler in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.name = _HANDLER_NAME
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(_level_from_env())
    return logger