"""Logging configuration for Junk Shop Ledger.

Usage:
    from app_logging import get_logger
    logger = get_logger(__name__)

Environment variables:
    JUNKSHOP_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = logging.INFO
ROOT_LOGGER_NAME = "junkshop"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

_logging_configured = False


def _level_from_env() -> int:
    env_level = os.environ.get("JUNKSHOP_LOG_LEVEL", "").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    return level_map.get(env_level, DEFAULT_LOG_LEVEL)


def configure_logging(level: Optional[int] = None) -> None:
    """Configure the application logger namespace once.

    Args:
        level: Log level to use. If None, reads JUNKSHOP_LOG_LEVEL or uses INFO.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = _level_from_env()

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name, typically __name__"""
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
