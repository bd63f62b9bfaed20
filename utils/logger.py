# utils/logger.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Logging utility for the vector clock core with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the vector clock core."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ClockLogger:
    """Centralized logger for the vector clock core with structured output."""

    def __init__(self, name: str = "vclock", level: LogLevel = LogLevel.WARNING):
        """Initialize the clock logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ClockFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for clock storage and mutation events
    def storage_spilled(self, old_len: int, new_len: int, capacity: int):
        """Log a timestamp buffer moving from inline to heap storage."""
        self.debug(
            f"Timestamp storage spilled to heap: {old_len} -> {new_len} slots "
            f"(inline capacity {capacity})"
        )

    def trailing_zeros_trimmed(self, operation: str, old_len: int, new_len: int):
        """Log a mutator trimming trailing zero slots."""
        self.debug(f"{operation}: trimmed trailing zeros {old_len} -> {new_len} slots")

    def timestamp_overflow(self, index: int, value: int):
        """Log a fatal timestamp overflow."""
        self.error(f"Vector clock overflow at index {index} (timestamp {value})")

    def index_overflow(self, value: int):
        """Log a fatal vector index conversion overflow."""
        self.error(f"Vector index {value} does not fit in 32 bits")


class ClockFormatter(logging.Formatter):
    """Custom formatter for clock logging with clean output."""

    def format(self, record):
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ClockLogger] = None


def get_logger(name: str = "vclock") -> ClockLogger:
    """Get or create the global clock logger instance.

    Args:
        name: Logger name (default: "vclock")

    Returns:
        ClockLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ClockLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on caller flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
