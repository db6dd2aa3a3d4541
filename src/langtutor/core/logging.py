"""
Centralized logging configuration for langtutor.

Provides structured logging with JSON formatting support, a context manager
for adding context to log messages, and lazy configuration.

Usage:
    from langtutor.core.logging import get_logger, setup_logging

    # Setup logging (typically at application startup)
    setup_logging(level="DEBUG", json_format=True)

    # Get a logger for your module
    logger = get_logger(__name__)
    logger.info("Tutorial generated", extra={"language_id": "css"})
"""

import json
import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "langtutor"

# Context variable for per-generation tracking
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs logs as JSON objects with consistent fields for easy parsing
    by log aggregation systems.
    """

    # Extra attributes copied onto the JSON payload when present
    EXTRA_FIELDS = ("language_id", "category", "provider", "section_count", "duration")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted string.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        ctx = _log_context.get()
        if ctx:
            log_data["context"] = ctx

        for attr in self.EXTRA_FIELDS:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["exception_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool | None = None,
    colored: bool = True,
) -> None:
    """Configure package logging.

    Should be called once at application startup. Subsequent calls
    will update the configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path for log output.
        json_format: Use JSON formatting for structured logs. Defaults to config value.
        colored: Use colored output in console (ignored if json_format=True).
    """
    global _logging_configured

    # Import here to avoid circular imports
    from langtutor.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.log_json

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers on reconfiguration
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)

    if json_format:
        console_handler.setFormatter(JSONFormatter())
    elif colored and sys.stdout.isatty():
        console_handler.setFormatter(
            ColoredFormatter(
                "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={level}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Automatically ensures logging is configured before returning.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        setup_logging()

    # Normalize name to be under our package
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the active log context."""
    return dict(_log_context.get())


class LogContext:
    """Context manager for adding context to log messages.

    Example:
        with LogContext(language_id="react"):
            logger.debug("Resolving specs")  # Includes context
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        current = _log_context.get()
        self._token = _log_context.set({**current, **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Iterator[None]:
    """Context manager for logging operation start/end with timing.

    Args:
        logger: Logger to use.
        operation: Operation name for logging.
        level: Log level for messages.

    Example:
        with log_operation(logger, "tutorial generation"):
            # ... do work ...
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        logger.error(
            f"Failed: {operation}",
            extra={"duration": round(time.perf_counter() - start, 4), "error": str(e)},
            exc_info=True,
        )
        raise
    logger.log(level, f"Completed: {operation}", extra={"duration": round(time.perf_counter() - start, 4)})
