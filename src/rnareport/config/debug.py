"""Debug and logging configuration for rnareport.

Provides application-wide logging with configurable log levels.
Log level can be set via:
1. Environment variable: RNAREPORT_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
2. Programmatically: set_log_level("DEBUG")
3. CLI flag: --log-level DEBUG

Default level is INFO.
"""

import logging
import os
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]

ENV_VAR = "RNAREPORT_LOG_LEVEL"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LOG_LEVEL = "INFO"

_logger: logging.Logger | None = None
_current_level: str = DEFAULT_LOG_LEVEL


def _get_level_from_env() -> str:
    """Get log level from environment variable."""
    env_level = os.environ.get(ENV_VAR, "").upper()
    if env_level in _LEVEL_MAP:
        return env_level
    return DEFAULT_LOG_LEVEL


def _create_logger(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Create and configure the package logger."""
    logger = logging.getLogger("rnareport")

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.setLevel(_LEVEL_MAP.get(level.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_LEVEL_MAP.get(level.upper(), logging.INFO))

    # Format: time [LEVEL] module: message
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the given module.

    Args:
        name: Optional module name (e.g., "rnareport.findings.aggregator").
              If None, returns the root rnareport logger.

    Returns:
        Logger instance configured with the current log level.

    Example:
        from rnareport.config.debug import get_logger
        logger = get_logger(__name__)
        logger.info("Loaded report for %s", sample_id)
    """
    global _logger, _current_level

    if _logger is None:
        _current_level = _get_level_from_env()
        _logger = _create_logger(_current_level)

    if name is None or name == "rnareport":
        return _logger

    # Child loggers inherit handlers from the package logger
    if name.startswith("rnareport."):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"rnareport.{name}")


def set_log_level(level: LogLevel) -> None:
    """Set the log level for all rnareport loggers.

    Args:
        level: One of "DEBUG", "INFO", "WARN", "ERROR"

    Raises:
        ValueError: If the level is not recognised.
    """
    global _logger, _current_level

    level_upper = level.upper()
    if level_upper not in _LEVEL_MAP:
        raise ValueError(f"Invalid log level: {level}. Must be one of: DEBUG, INFO, WARN, ERROR")

    _current_level = level_upper

    if _logger is not None:
        _logger.setLevel(_LEVEL_MAP[level_upper])
        for handler in _logger.handlers:
            handler.setLevel(_LEVEL_MAP[level_upper])
    else:
        _logger = _create_logger(level_upper)

    # Also set environment variable for child processes (streamlit subprocess)
    os.environ[ENV_VAR] = level_upper


def get_log_level() -> str:
    """Get the current log level."""
    return _current_level


def reset_logger() -> None:
    """Reset the logger (mainly for testing)."""
    global _logger, _current_level
    if _logger is not None:
        _logger.handlers.clear()
    _logger = None
    _current_level = DEFAULT_LOG_LEVEL
