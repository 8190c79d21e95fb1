# -*- coding: utf-8 -*-

import logging
import os
import sys
from typing import Optional

from core.constants import LOG_FILE_ENV, LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(raw: Optional[str]) -> int:
    """Map a level name like "debug" to its logging constant, INFO if unknown."""
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> Optional[str]:
    """Configure root logging; returns the log file path if one is used."""
    if level is None:
        level = resolve_level(os.environ.get(LOG_LEVEL_ENV))
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    return log_file


def handle_exception(exc_type, exc_value, exc_traceback):
    """Global hook: log uncaught exceptions instead of dying silently."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def install_debugger() -> Optional[str]:
    log_file = setup_logging()
    sys.excepthook = handle_exception
    logging.getLogger(__name__).debug("exception hook installed")
    return log_file
