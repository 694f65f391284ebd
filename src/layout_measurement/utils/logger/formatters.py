"""
Log formatters for Layout Measurement.

Both formatters carry the layout pass id when a record was emitted inside
a pass, so every line of one pass can be grepped together.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Optional


def _utc(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _pass_id(record: logging.LogRecord) -> Optional[str]:
    return getattr(record, "pass_id", None)


class HumanFormatter(logging.Formatter):
    """Human-readable log formatter.

    Format: YYYY-MM-DD HH:MM:SS.mmm | LEVEL | component | file:line | message [pass=id]

    Example:
        2024-01-15 14:23:45.123 | DEBUG | layout.core          | layout.py:88 | Pass finished [pass=1a2b3c4d]
    """

    LEVEL_WIDTH = 5
    NAME_WIDTH = 20

    def format(self, record: logging.LogRecord) -> str:
        stamp = _utc(record).strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"
        message = record.getMessage()
        if _pass_id(record):
            message += f" [pass={_pass_id(record)}]"

        line = " | ".join(
            (
                stamp,
                record.levelname.ljust(self.LEVEL_WIDTH),
                self._shorten_name(record.name),
                f"{record.filename}:{record.lineno}",
                message,
            )
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

    def _shorten_name(self, name: str, max_len: Optional[int] = None) -> str:
        """Fit a logger name into a fixed column as "first...last" when too long."""
        width = max_len or self.NAME_WIDTH
        if len(name) > width:
            parts = name.split(".")
            short = f"{parts[0]}...{parts[-1]}" if len(parts) > 1 else ""
            if not short or len(short) > width:
                return name[: width - 3] + "..."
            name = short
        return name.ljust(width)


class JsonFormatter(logging.Formatter):
    """JSON Lines log formatter.

    One object per line with timestamp, level, logger, message, source
    location, and when present pass_id and exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _utc(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        if _pass_id(record):
            payload["pass_id"] = _pass_id(record)
        if record.exc_info:
            payload["exception"] = self._exception(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

    @staticmethod
    def _exception(exc_info: tuple) -> dict[str, Any]:
        exc_type, exc_value, exc_tb = exc_info
        lines: list[str] = []
        if exc_tb is not None:
            for chunk in traceback.format_exception(exc_type, exc_value, exc_tb):
                lines.extend(part for part in chunk.splitlines() if part.strip())
        return {
            "type": exc_type.__name__ if exc_type else None,
            "message": str(exc_value) if exc_value else None,
            "traceback": lines,
        }
