"""Logging infrastructure for sqlcraft.

This module provides structured logging with JSON output and request
context tracking.
"""

from sqlcraft.logging.filters import ContextFilter, set_logging_context
from sqlcraft.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "set_logging_context",
    "CustomJsonFormatter",
    "ContextFilter",
]
