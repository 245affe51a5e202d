# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Updated: 2026-10-17
# Description: logging_utils.py
# -----------------------------------------------------------------------------
"""
Loggers for kbrag live under the ``kbrag`` namespace.

Each logger gets a colour console handler on stderr (stdout carries the
answer) and, when KB_LOG_TO_FILE is set, a rotating file handler.

    KB_LOG_LEVEL         DEBUG | INFO | WARNING | ERROR   (default INFO)
    KB_LOG_TO_FILE       1 / true / yes / y              (default off)
    KB_LOG_FILE          path of the log file            (./logs/kbrag.log)
    KB_LOG_MAX_BYTES     rotate after this many bytes    (5 MB)
    KB_LOG_BACKUP_COUNT  rotated files to keep           (5)
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_LOGGER_NAME = "kbrag"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
CONSOLE_FORMAT = (
    "%(log_color)s%(asctime)s [%(levelname)s] "
    "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
)

LEVEL_COLOURS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}
MESSAGE_COLOURS = {
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "light_red",
    "CRITICAL": "red",
}


def _flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in ("1", "true", "yes", "y")


def _level() -> int:
    return getattr(logging, os.getenv("KB_LOG_LEVEL", "INFO").upper(), logging.INFO)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        fmt=CONSOLE_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors=LEVEL_COLOURS,
        secondary_log_colors={"message": MESSAGE_COLOURS},
        style="%",
    ))
    return handler


def _file_handler() -> logging.Handler:
    path = Path(os.getenv("KB_LOG_FILE", "./logs/kbrag.log"))
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=int(os.getenv("KB_LOG_MAX_BYTES", str(5 * 1024 * 1024))),
        backupCount=int(os.getenv("KB_LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _named_logger(*parts: str) -> logging.Logger:
    logger = logging.getLogger(".".join((BASE_LOGGER_NAME,) + parts))
    if logger.handlers:
        return logger

    logger.addHandler(_console_handler())
    if _flag("KB_LOG_TO_FILE"):
        logger.addHandler(_file_handler())

    logger.setLevel(_level())
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Module-level logger, e.g. ``kbrag.cli.main``."""
    return _named_logger(name) if name else _named_logger()


def get_class_logger(cls: type) -> logging.Logger:
    """Logger named after module and class, e.g. ``kbrag.retrieval.KBRetriever.KBRetriever``."""
    return _named_logger(
        getattr(cls, "__module__", "unknown_module"),
        getattr(cls, "__name__", "UnknownClass"),
    )
