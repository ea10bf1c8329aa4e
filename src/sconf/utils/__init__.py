"""
Utility modules for sconf.

Currently this holds the centralized logging configuration.
"""

from .logger import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    reset_logging,
    setup_logging,
)

__all__ = [
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "reset_logging",
    "setup_logging",
]
