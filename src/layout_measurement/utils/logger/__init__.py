"""
Structured logging for Layout Measurement.

This module provides:
- Human-readable and JSON log formats
- Log file rotation
- Layout pass context tracking
- Crash handling

Simple API:
    from layout_measurement.utils.logger import debug, info, warn, error

    debug("Debug message")
    info("Info message")

Component loggers and pass context:
    from layout_measurement.utils.logger import get_logger, log_context

    logger = get_logger("canvas")
    with log_context(auto_pass_id=True):
        logger.debug("Measuring")  # Logged as "layout.canvas" with [pass=...]
"""

import logging
from typing import Any, Optional

from .config import LogConfig, get_config, ensure_log_directory
from .context import (
    ContextFilter,
    log_context,
    get_pass_id,
    set_pass_id,
    generate_pass_id,
)
from .crash import install_crash_handler, uninstall_crash_handler
from .handlers import setup_handlers

ROOT_LOGGER_NAME = "layout"

_initialized = False
_root_logger: Optional[logging.Logger] = None


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Initialize the logging system.

    Call once at application startup. Sets up the file handlers, the
    pass-id filter and the crash handler.

    Args:
        config: Optional LogConfig. If not provided, reads from environment.

    Returns:
        The configured root logger.
    """
    global _initialized, _root_logger

    if config is None:
        config = get_config()

    ensure_log_directory(config)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    setup_handlers(logger, config)

    if not any(isinstance(f, ContextFilter) for f in logger.filters):
        logger.addFilter(ContextFilter())

    install_crash_handler(logger)

    # Keep our records out of the root logger
    logger.propagate = False

    _initialized = True
    _root_logger = logger

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the root application logger, or a child logger for a component.

    The logging system is initialized on first use.

    Example:
        get_logger("canvas").info("Resized")  # Logs as "layout.canvas"
    """
    if not _initialized:
        setup_logging()

    if name:
        child = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        # Filters on the parent do not run for records created on a child
        if not any(isinstance(f, ContextFilter) for f in child.filters):
            child.addFilter(ContextFilter())
        return child
    return _root_logger or logging.getLogger(ROOT_LOGGER_NAME)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().warning(msg, *args, **kwargs)


def warning(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().error(msg, *args, **kwargs)


def critical(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().critical(msg, *args, **kwargs)


def exception(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log an error with the active exception's traceback.

    Call from an exception handler.
    """
    get_logger().exception(msg, *args, **kwargs)


class _LazyLogger:
    """Logger proxy that initializes logging on first attribute access."""

    _instance: Optional[logging.Logger] = None

    def __getattr__(self, name: str) -> Any:
        if self._instance is None:
            self._instance = get_logger()
        return getattr(self._instance, name)


log: Any = _LazyLogger()


__all__ = [
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "critical",
    "exception",
    "log",
    "setup_logging",
    "get_logger",
    "LogConfig",
    "get_config",
    "log_context",
    "get_pass_id",
    "set_pass_id",
    "generate_pass_id",
    "ContextFilter",
    "install_crash_handler",
    "uninstall_crash_handler",
]
