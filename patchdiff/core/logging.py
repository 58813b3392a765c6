"""
patchdiff Unified Logging Configuration

Provides consistent logging setup across all patchdiff modules.
Configurable via environment variables and supports console and file output.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = Path("logs")

# Environment variable names
ENV_LOG_LEVEL = "PATCHDIFF_LOG_LEVEL"
ENV_LOG_FORMAT = "PATCHDIFF_LOG_FORMAT"
ENV_LOG_DIR = "PATCHDIFF_LOG_DIR"


def setup_logging(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    console: bool = True,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    Set up unified logging with consistent format.

    Args:
        name: Logger name (usually __name__ from calling module, or the
              package name to configure every patchdiff module at once)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Defaults to PATCHDIFF_LOG_LEVEL env var or INFO
        log_file: Optional log file name (created in log_dir)
        log_dir: Directory for log files
                Defaults to PATCHDIFF_LOG_DIR env var or "./logs"
        console: Whether to output to console (default: True)
        format_string: Custom format string
        date_format: Custom date format string

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logging("patchdiff")
        >>> logger = setup_logging("patchdiff", level="DEBUG", log_file="diff.log")
    """
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    if format_string is None:
        format_string = os.getenv(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT)

    if date_format is None:
        date_format = DEFAULT_DATE_FORMAT

    if log_dir is None:
        log_dir_str = os.getenv(ENV_LOG_DIR)
        log_dir = Path(log_dir_str) if log_dir_str else DEFAULT_LOG_DIR

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(format_string, datefmt=date_format)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(getattr(logging, level.upper()))
        logger.addHandler(console_handler)

    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)

        log_path = log_dir / log_file
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(getattr(logging, level.upper()))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with standard patchdiff configuration.

    Shortcut for setup_logging with defaults.

    Args:
        name: Logger name (usually __name__ from calling module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logging(name)
    return logger


class LoggerContext:
    """
    Context manager for temporary logging configuration.

    Useful for temporarily changing log level for a block of code.

    Examples:
        >>> logger = setup_logging("patchdiff", level="INFO")
        >>> with LoggerContext(logger, logging.DEBUG):
        ...     logger.debug("Run breaks are visible here")
    """

    def __init__(self, logger: logging.Logger, level: int):
        self.logger = logger
        self.new_level = level
        self.old_level = None

    def __enter__(self):
        """Save current level and set new level."""
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore original level."""
        if self.old_level is not None:
            self.logger.setLevel(self.old_level)
        return False
