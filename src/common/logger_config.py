# src/common/logger_config.py
"""Logging for the stock movement CLI and services: Rich on the console, optional plain-text file."""

import logging
from typing import Optional

from rich.logging import RichHandler

from src.common.config.settings import settings

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Database and HTTP clients only report problems
QUIET_LOGGERS = ("mysql.connector", "requests", "urllib3")

_installed_handlers: list[logging.Handler] = []


def _console_handler(show_path: bool) -> RichHandler:
    return RichHandler(
        show_time=True,
        show_level=True,
        show_path=show_path,
        markup=True,
        rich_tracebacks=True,
        tracebacks_word_wrap=True,
        tracebacks_suppress=[logging],
    )


def _file_handler(path: str) -> logging.FileHandler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logging(log_file: Optional[str] = None) -> None:
    """
    Replaces the root logger's handlers with the configured ones.

    With a log file (argument or LOG_FILE) records are also written there
    as plain text.
    Calling it again closes the handlers it installed before.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in _installed_handlers:
        handler.close()

    handlers: list[logging.Handler] = [_console_handler(settings.LOG_SHOW_PATH)]
    log_file = log_file or settings.LOG_FILE
    if log_file:
        handlers.append(_file_handler(log_file))
    root_logger.handlers = handlers
    _installed_handlers[:] = handlers

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
