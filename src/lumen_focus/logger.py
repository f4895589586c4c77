"""Centralized logging configuration for Lumen-Focus.

Colorized console output through colorlog plus optional file logging. Usage:

    from lumen_focus.logger import get_logger, setup_logging

    setup_logging(level=logging.DEBUG)
    logger = get_logger(__name__)
    logger.info("Classifier ready")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

# Color scheme for different log levels
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Optional[Path] = None,
    enable_colors: bool = True,
) -> None:
    """Setup root logging configuration.

    Args:
        level: Logging level, as an int or a level name (default: INFO)
        log_file: Optional path to log file
        enable_colors: Whether to enable colored console output
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if enable_colors:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(cyan)s[%(name)s]%(reset)s %(message)s",
            reset=True,
            log_colors=LOG_COLORS,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    _suppress_third_party_loggers()


def _suppress_third_party_loggers() -> None:
    """Suppress verbose debug logging from third-party libraries."""
    suppressed_loggers = {
        "huggingface_hub": logging.WARNING,
        "filelock": logging.WARNING,
        "urllib3": logging.WARNING,
        "httpx": logging.WARNING,
    }

    for logger_name, logger_level in suppressed_loggers.items():
        logging.getLogger(logger_name).setLevel(logger_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
