"""Logging utilities for tapsmith.

All handlers live on the application logger ("tapsmith"). Module loggers
obtained with ``get_logger(__name__)`` propagate to it. Console output goes
to stderr so that formula text written to stdout stays clean. File logging
is optional and configured from the global settings.
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Any

from .config import config_manager
from .constants import (
    APP_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_BACKUP_COUNT,
    LOG_COLORS,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_FILE_NAME,
    LOG_MAX_FILE_SIZE_BYTES,
)
from .exceptions import TapsmithError

# Global registry to prevent duplicate loggers across the application
_logger_instances: dict[str, "TapsmithLogger"] = {}

# Lock for thread-safe logger operations
_logger_lock = threading.Lock()


def _load_log_settings() -> tuple[str, str, Path | None]:
    """Load console level, file level and log file path from configuration.

    Returns:
        Tuple of (console log level name, file log level name, log file path
        or None when file logging is disabled).

    """
    try:
        global_config = config_manager.load_global_config()
    except (OSError, TapsmithError):
        return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, None

    log_file = None
    if global_config["file_logging"]:
        log_file = global_config["directory"]["logs"] / LOG_FILE_NAME

    return (
        global_config["console_log_level"],
        global_config["log_level"],
        log_file,
    )


class LoggingError(Exception):
    """Error in logging configuration."""


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        Args:
            record: The log record to format

        Returns:
            Formatted log message with color codes

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class TapsmithLogger:
    """Logger manager for tapsmith."""

    def __init__(self, name: str = APP_NAME) -> None:
        """Initialize logger with given name.

        Only the application logger gets handlers. Module loggers propagate
        their records to it.

        Args:
            name: Logger name

        """
        self._name = name
        self.logger = logging.getLogger(name)
        self._console_handler: logging.StreamHandler | None = None
        self._previous_console_level: int | None = None
        self._file_handler: logging.handlers.RotatingFileHandler | None = None

        if name == APP_NAME:
            self.logger.setLevel(logging.DEBUG)
            self.logger.propagate = False
            if not self.logger.handlers:
                self._setup_console_handler()

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._name

    def _setup_console_handler(self) -> None:
        """Set up console handler with colors."""
        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setFormatter(
            ColoredFormatter(LOG_CONSOLE_FORMAT, datefmt=LOG_CONSOLE_DATE_FORMAT)
        )
        self._console_handler.setLevel(logging.WARNING)
        self.logger.addHandler(self._console_handler)

    def setup_file_logging(self, log_file: Path, level: str = "DEBUG") -> None:
        """Set up file logging with rotation.

        Args:
            log_file: Path to log file
            level: Logging level for file output

        Raises:
            LoggingError: If file logging setup fails

        """
        with _logger_lock:
            if self._file_handler:
                return

            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=LOG_MAX_FILE_SIZE_BYTES,
                    backupCount=LOG_BACKUP_COUNT,
                    encoding="utf-8",
                )
            except OSError as e:
                raise LoggingError(f"Failed to setup file logging: {e}") from e

            self._file_handler.setFormatter(
                logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
            )
            self._file_handler.setLevel(
                getattr(logging, level.upper(), logging.INFO)
            )
            self.logger.addHandler(self._file_handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(message, *args, **kwargs)

    def error(
        self, message: str, *args: Any, exc_info: bool = False, **kwargs: Any
    ) -> None:
        """Log error message.

        Args:
            message: Log message
            *args: Message arguments
            exc_info: Include exception info
            **kwargs: Message keyword arguments

        """
        self.logger.error(message, *args, exc_info=exc_info, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self.logger.exception(message, *args, **kwargs)

    def set_console_level(self, level: str) -> None:
        """Set console logging level.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        """
        if self._console_handler:
            numeric_level = getattr(logging, level.upper(), logging.WARNING)
            self._console_handler.setLevel(numeric_level)

    def set_console_level_temporarily(self, level: str) -> None:
        """Temporarily adjust console logging level.

        Stores the current console level so it can be restored later.

        Args:
            level: Temporary logging level name.

        """
        if not self._console_handler:
            return

        if self._previous_console_level is None:
            self._previous_console_level = self._console_handler.level

        self.set_console_level(level)

    def restore_console_level(self) -> None:
        """Restore the console logging level after a temporary change."""
        if not self._console_handler:
            return

        if self._previous_console_level is not None:
            self._console_handler.setLevel(self._previous_console_level)

        self._previous_console_level = None


def get_logger(name: str = APP_NAME) -> TapsmithLogger:
    """Get logger instance with singleton pattern.

    Args:
        name: Logger name, usually ``__name__`` of the calling module

    Returns:
        Logger instance

    """
    with _logger_lock:
        if name in _logger_instances:
            return _logger_instances[name]

        logger_instance = TapsmithLogger(name)
        _logger_instances[name] = logger_instance
        return logger_instance


def configure_logging(verbose: bool = False) -> TapsmithLogger:
    """Apply configured levels and file logging to the application logger.

    Args:
        verbose: Raise console output to DEBUG for this run

    Returns:
        The application logger

    """
    app_logger = get_logger(APP_NAME)
    console_level, file_level, log_file = _load_log_settings()
    app_logger.set_console_level(console_level)
    if log_file is not None:
        app_logger.setup_file_logging(log_file, file_level)
    if verbose:
        app_logger.set_console_level_temporarily("DEBUG")
    return app_logger


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes."""
    with _logger_lock:
        for instance in _logger_instances.values():
            for handler in instance.logger.handlers[:]:
                instance.logger.removeHandler(handler)
                handler.close()
        _logger_instances.clear()


# Application logger instance; module loggers propagate to it
logger = get_logger(APP_NAME)
