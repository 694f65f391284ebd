"""
Crash handler for Layout Measurement.

Records unhandled exceptions (including a layout wrapper's failed
single-child precondition) before the process goes down.
"""

import logging
import sys
import traceback
from datetime import datetime, timezone
from types import TracebackType
from typing import Any, Callable, Optional, Type

from .config import ensure_log_directory, get_config

ExceptHook = Callable[
    [Type[BaseException], BaseException, Optional[TracebackType]], Any
]

_original_excepthook: Optional[ExceptHook] = None
_crash_logger: Optional[logging.Logger] = None


def crash_handler(
    exc_type: Type[BaseException],
    exc_value: BaseException,
    exc_traceback: Optional[TracebackType],
) -> None:
    """sys.excepthook replacement: log the crash, then defer to the original hook."""
    if issubclass(exc_type, KeyboardInterrupt):
        if _original_excepthook:
            _original_excepthook(exc_type, exc_value, exc_traceback)
        return

    timestamp = datetime.now(tz=timezone.utc).isoformat()
    tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))

    if _crash_logger:
        _crash_logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )
    else:
        try:
            config = get_config()
            ensure_log_directory(config)
            with open(config.crash_log_path, "a", encoding="utf-8") as f:
                f.write(f"\n{'=' * 80}\n")
                f.write(f"CRASH at {timestamp}\n")
                f.write(f"{'=' * 80}\n")
                f.write(tb_text)
                f.write("\n")
        except OSError as e:
            print(f"Could not write crash log: {e}", file=sys.stderr)

    if _original_excepthook:
        _original_excepthook(exc_type, exc_value, exc_traceback)


def install_crash_handler(logger: logging.Logger) -> None:
    """Install crash_handler as sys.excepthook (idempotent)."""
    global _original_excepthook, _crash_logger

    if _original_excepthook is None:
        _original_excepthook = sys.excepthook

    _crash_logger = logger
    sys.excepthook = crash_handler


def uninstall_crash_handler() -> None:
    """Restore the original sys.excepthook. Mostly useful for tests."""
    global _original_excepthook, _crash_logger

    if _original_excepthook is not None:
        sys.excepthook = _original_excepthook
        _original_excepthook = None

    _crash_logger = None
