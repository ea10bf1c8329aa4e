# sconf/utils/logger.py

"""
Logging configuration and utilities for sconf.

This module provides centralized logging configuration and a few helper
functions so every sconf module reports file operations, recoveries and
configuration changes in the same format.

The logging system provides:
- A single ``sconf`` logger with lazy initialization
- Console output on stderr and optional file output
- Standardized ``[MODULE] message | Context: ...`` formatting
- Configuration change and file operation logging

The initial level comes from the ``SCONF_LOG_LEVEL`` environment variable
and the optional log file from ``SCONF_LOG_FILE``.
"""

import logging
import os
import sys
from typing import Any

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

LOGGER_NAME = "sconf"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "SCONF_LOG_LEVEL"
LOG_FILE_ENV = "SCONF_LOG_FILE"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for sconf.

    Replaces any handlers previously attached to the ``sconf`` logger with a
    stderr handler and, when ``log_file`` is given, a file handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        format_string: Custom log format string (optional)

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    global _logger

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it is set up from the
    ``SCONF_LOG_LEVEL`` and ``SCONF_LOG_FILE`` environment variables.
    """
    if _logger is None:
        return setup_logging(
            level=os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
            log_file=os.getenv(LOG_FILE_ENV) or None,
        )
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    If an exception is provided, the stack trace is included.
    """
    logger = get_logger()
    logger.error(_format(module, error, context), exc_info=exception is not None)


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_configuration_change(setting: str, old_value: Any, new_value: Any) -> None:
    """
    Log a configuration change.

    Args:
        setting: Name of the setting that changed
        old_value: Previous value of the setting
        new_value: New value of the setting
    """
    logger = get_logger()
    logger.info(f"Configuration changed: {setting} = {old_value!r} -> {new_value!r}")


def log_file_operation(
    operation: str, file_path: str, success: bool, error: str | None = None
) -> None:
    """
    Log a file operation.

    Successful operations are logged at debug level, failures at error level.
    """
    logger = get_logger()
    if success:
        logger.debug(f"File {operation}: {file_path}")
    else:
        logger.error(f"File {operation} failed: {file_path} - {error}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _logger = None
