"""Coloured console log formatting and logger setup."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime

_RESET = "\x1b[0m"
_CYAN = "\x1b[36m"
_GREEN = "\x1b[32m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_MAGENTA = "\x1b[35m"

_LEVELS = {
    logging.DEBUG: ("DEBUG", _CYAN),
    logging.INFO: ("INFO", _GREEN),
    logging.WARNING: ("WARN", _YELLOW),
    logging.ERROR: ("ERROR", _RED),
    logging.CRITICAL: ("FATAL", _RED),
}


def color_level(levelno: int) -> str:
    """Return the capitalised level name wrapped in its colour."""
    name, color = _LEVELS.get(levelno, (f"LEVEL({levelno})", _RESET))
    return f"{color}{name}{_RESET}"


def color_time(moment: datetime) -> str:
    """Return the time with millisecond precision, coloured cyan."""
    text = moment.strftime("%Y-%m-%d %H:%M:%S.") + f"{moment.microsecond // 1000:03d}"
    return f"{_CYAN}{text}{_RESET}"


def _trimmed_path(path: str) -> str:
    last = path.rfind("/")
    if last < 0:
        return path
    previous = path.rfind("/", 0, last)
    if previous < 0:
        return path
    return path[previous + 1:]


def color_caller(path: str) -> str:
    """Return "dir/file:line" (the last two path parts) coloured magenta."""
    return f"{_MAGENTA}{_trimmed_path(path)}{_RESET}"


class ConsoleFormatter(logging.Formatter):
    """Tab-separated, coloured console output.

    A record's ``fields`` attribute, if present, is appended as JSON.
    """

    def __init__(self, show_caller: bool = False) -> None:
        super().__init__()
        self.show_caller = show_caller

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            color_time(datetime.fromtimestamp(record.created)),
            color_level(record.levelno),
        ]
        if self.show_caller:
            parts.append(color_caller(f"{record.pathname}:{record.lineno}"))
        parts.append(record.getMessage())
        fields = getattr(record, "fields", None)
        if fields:
            parts.append(
                json.dumps(fields, default=str, ensure_ascii=False, separators=(",", ":"))
            )
        line = "\t".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def init_logger(service_name: str) -> logging.Logger:
    """Configure and return a debug-level console logger for the service."""
    logger = logging.getLogger(service_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger