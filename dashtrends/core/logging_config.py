"""
Logging configuration for the trend engine.

Provides:
- JSON structured logging for log aggregation
- Human-readable, color-coded console logging for development
- Context fields via log_with_context()

The library never installs handlers on import; applications (or tests)
call setup_logging() once.

Usage:
    from dashtrends.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Built series chart for 'coverage'")
"""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "dashtrends"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed via log_with_context()
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """Console formatter with color-coded level names (only on a TTY)"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not sys.stderr.isatty():
            return message

        color = self.COLORS.get(record.levelname, "")
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> logging.Logger:
    """
    Configure logging for the dashtrends package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path; file output is always JSON
        json_output: Use JSON on the console instead of the human-readable format

    Returns:
        The configured package logger

    Example:
        setup_logging(level="DEBUG")
        setup_logging(level="INFO", log_file=Path(".tmp/logs/trends.log"), json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    package_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (use __name__ in calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log message with additional context fields (emitted as JSON keys by JSONFormatter).

    Example:
        log_with_context(logger, "debug", "Chart built", metric="coverage", points=12)
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": context})


# Library default: stay silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
