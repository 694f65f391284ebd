"""
Logging configuration for Layout Measurement.

Everything is driven by environment variables so the dashboard, the trace
CLI and the tests can redirect or silence logging without code changes:

    LAYOUT_MEASUREMENT_DEBUG        1/true/yes: DEBUG level and stderr output
    LAYOUT_MEASUREMENT_LOG_LEVEL    debug, info, warning, error or critical
    LAYOUT_MEASUREMENT_LOG_CONSOLE  1/0: force stderr output on or off
    LAYOUT_MEASUREMENT_LOG_DIR      directory for the log files
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEBUG_ENV = "LAYOUT_MEASUREMENT_DEBUG"
LOG_LEVEL_ENV = "LAYOUT_MEASUREMENT_LOG_LEVEL"
LOG_CONSOLE_ENV = "LAYOUT_MEASUREMENT_LOG_CONSOLE"
LOG_DIR_ENV = "LAYOUT_MEASUREMENT_LOG_DIR"

# macOS standard location
LOG_DIR = Path.home() / "Library/Logs/LayoutMeasurement"  # nosec B108

HUMAN_LOG_FILE = "layout-measurement.log"
JSON_LOG_FILE = "layout-measurement.json"
CRASH_LOG_FILE = "crash.log"

LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

MB = 1024 * 1024


def _env_flag(name: str) -> Optional[bool]:
    """True/False for a recognised boolean value, None when unset or unknown."""
    value = os.environ.get(name, "").strip().lower()
    if value in ("1", "true", "yes"):
        return True
    if value in ("0", "false", "no"):
        return False
    return None


@dataclass
class LogConfig:
    """Where logs go, how big they grow and what reaches stderr."""

    log_dir: Path = field(default_factory=lambda: LOG_DIR)
    human_log_max_bytes: int = 5 * MB
    human_log_backup_count: int = 3
    json_log_max_bytes: int = 10 * MB
    json_log_backup_count: int = 2
    default_level: int = logging.INFO
    console_enabled: bool = False

    @property
    def human_log_path(self) -> Path:
        return self.log_dir / HUMAN_LOG_FILE

    @property
    def json_log_path(self) -> Path:
        return self.log_dir / JSON_LOG_FILE

    @property
    def crash_log_path(self) -> Path:
        return self.log_dir / CRASH_LOG_FILE


def get_config() -> LogConfig:
    """Build a LogConfig from the environment, falling back to defaults.

    An explicit level or console setting overrides what the debug flag implies.
    """
    config = LogConfig()

    if _env_flag(DEBUG_ENV):
        config.default_level = logging.DEBUG
        config.console_enabled = True

    level = LOG_LEVEL_MAP.get(os.environ.get(LOG_LEVEL_ENV, "").strip().lower())
    if level is not None:
        config.default_level = level

    console = _env_flag(LOG_CONSOLE_ENV)
    if console is not None:
        config.console_enabled = console

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        config.log_dir = Path(log_dir).expanduser()

    return config


def ensure_log_directory(config: Optional[LogConfig] = None) -> Path:
    """Create the log directory if needed and return it."""
    log_dir = config.log_dir if config else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
