"""Structured logging for dictation-cleanup.

Provides configurable logging with:
- Multiple verbosity levels
- Text or JSON log output
- Console and optional file handlers
- Extra context rendered alongside each message
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "dictation_cleanup"

# Attributes every LogRecord carries; anything else came in through `extra`
RESERVED_RECORD_ATTRS = frozenset({
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "exc_info",
    "exc_text",
    "thread",
    "threadName",
    "message",
    "taskName",
})


class LogLevel(IntEnum):
    """Log verbosity levels."""

    QUIET = 0  # Only errors
    NORMAL = 1  # Errors + warnings
    VERBOSE = 2  # Errors + warnings + info
    DEBUG = 3  # Everything including per-word corrections


LEVEL_MAP = {
    LogLevel.QUIET: logging.ERROR,
    LogLevel.NORMAL: logging.WARNING,
    LogLevel.VERBOSE: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


@dataclass
class LogConfig:
    """Configuration for logging.

    Attributes:
        level: Verbosity level
        log_file: Optional path to log file
        json_format: Use JSON format for logs
        include_timestamp: Include timestamp in logs
        include_context: Include extra context in logs
        color: Use colored output (console only)
    """

    level: LogLevel = LogLevel.NORMAL
    log_file: Path | None = None
    json_format: bool = False
    include_timestamp: bool = True
    include_context: bool = True
    color: bool = True


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_RECORD_ATTRS
    }


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log records.

    Supports both text and JSON formats with optional coloring.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.GRAY,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.RED,
    }

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_context: bool = True,
        color: bool = True,
    ):
        super().__init__()
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_context = include_context
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        if self.json_format:
            return self._format_json(record)
        return self._format_text(record)

    def _format_json(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }

        if self.include_timestamp:
            data["timestamp"] = datetime.now().isoformat()

        if self.include_context:
            extra = {}
            for key, value in _extra_fields(record).items():
                try:
                    json.dumps(value)
                    extra[key] = value
                except (TypeError, ValueError):
                    extra[key] = str(value)
            if extra:
                data["context"] = extra

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, ensure_ascii=False)

    def _colorize(self, text: str, color: str) -> str:
        if self.color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def _format_text(self, record: logging.LogRecord) -> str:
        parts = []

        if self.include_timestamp:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            parts.append(self._colorize(timestamp, Colors.GRAY))

        level = record.levelname.upper()[:5].ljust(5)
        parts.append(self._colorize(level, self.LEVEL_COLORS.get(record.levelno, Colors.RESET)))

        # Logger name, shortened from the left
        name = record.name
        if len(name) > 20:
            name = "..." + name[-17:]
        parts.append(self._colorize(f"{name:>20}", Colors.CYAN))

        parts.append(record.getMessage())

        result = " | ".join(parts)

        if self.include_context:
            extra = _extra_fields(record)
            if extra:
                context_str = " ".join(f"{k}={v}" for k, v in extra.items())
                result += " " + self._colorize(f"[{context_str}]", Colors.GRAY)

        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)

        return result


_config: LogConfig = LogConfig()
_initialized: bool = False


def configure_logging(config: LogConfig | None = None) -> None:
    """Configure the package logger.

    Replaces any handlers previously installed on the package logger.

    Args:
        config: Logging configuration (defaults to the current one)
    """
    global _config, _initialized

    if config:
        _config = config

    log_level = LEVEL_MAP[_config.level]

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter(
        json_format=_config.json_format,
        include_timestamp=_config.include_timestamp,
        include_context=_config.include_context,
        color=_config.color and sys.stderr.isatty(),
    ))
    root_logger.addHandler(console_handler)

    if _config.log_file:
        _config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(_config.log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter(
            json_format=_config.json_format,
            include_timestamp=True,
            include_context=True,
            color=False,
        ))
        root_logger.addHandler(file_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Configures the package logger with defaults on first use.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger that propagates to the package logger
    """
    if not _initialized:
        configure_logging()

    return logging.getLogger(name)


def set_verbosity(level: LogLevel) -> None:
    """Set global verbosity level.

    Args:
        level: Verbosity level
    """
    _config.level = level
    configure_logging(_config)
