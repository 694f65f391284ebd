"""
Log handlers for Layout Measurement.

Three files live in the log directory:

    layout-measurement.log    every record, human readable, rotated
    layout-measurement.json   every record, JSON Lines, rotated
    crash.log                 errors and crashes only, never rotated

plus an optional stderr stream for interactive runs.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LogConfig, ensure_log_directory, get_config
from .formatters import HumanFormatter, JsonFormatter


def _rotating(
    path: Path, max_bytes: int, backups: int, formatter: logging.Formatter
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def create_file_handler(config: LogConfig) -> RotatingFileHandler:
    """Human-readable log receiving every record, including pass debug lines."""
    ensure_log_directory(config)
    return _rotating(
        config.human_log_path,
        config.human_log_max_bytes,
        config.human_log_backup_count,
        HumanFormatter(),
    )


def create_json_handler(config: LogConfig) -> RotatingFileHandler:
    """JSON Lines log with the same records, for grep and jq."""
    ensure_log_directory(config)
    return _rotating(
        config.json_log_path,
        config.json_log_max_bytes,
        config.json_log_backup_count,
        JsonFormatter(),
    )


def create_console_handler(config: LogConfig) -> logging.StreamHandler:
    """stderr output: warnings and above, or everything when debugging."""
    handler = logging.StreamHandler(sys.stderr)
    debugging = config.default_level <= logging.DEBUG
    handler.setLevel(logging.DEBUG if debugging else logging.WARNING)
    handler.setFormatter(HumanFormatter())
    return handler


def create_crash_handler(config: LogConfig) -> logging.FileHandler:
    """Append-only log of errors, such as a failed single-child precondition."""
    ensure_log_directory(config)
    handler = logging.FileHandler(config.crash_log_path, mode="a", encoding="utf-8")
    handler.setLevel(logging.ERROR)
    handler.setFormatter(HumanFormatter())
    return handler


def setup_handlers(
    logger: logging.Logger,
    config: Optional[LogConfig] = None,
    include_console: Optional[bool] = None,
) -> None:
    """Replace the handlers of a logger with the configured set.

    Args:
        logger: The logger to configure.
        config: Optional LogConfig. If not provided, uses get_config().
        include_console: Override console setting. If None, uses config.console_enabled.
    """
    config = config or get_config()
    if include_console is None:
        include_console = config.console_enabled

    # Closing releases the file descriptors of a previous setup
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = [
        create_file_handler(config),
        create_json_handler(config),
        create_crash_handler(config),
    ]
    if include_console:
        handlers.append(create_console_handler(config))

    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(config.default_level)
