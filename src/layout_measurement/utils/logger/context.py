"""
Logging context for Layout Measurement.

Every top-level layout pass gets a short id so that the debug lines emitted
while measuring and placing one pass can be grouped together in the logs.
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

pass_id_var: ContextVar[Optional[str]] = ContextVar("pass_id", default=None)


def get_pass_id() -> Optional[str]:
    """Get the id of the layout pass currently running, if any."""
    return pass_id_var.get()


def set_pass_id(pass_id: Optional[str]) -> None:
    pass_id_var.set(pass_id)


def generate_pass_id() -> str:
    """Generate a new pass id (8 hex characters)."""
    return uuid.uuid4().hex[:8]


@contextmanager
def log_context(
    pass_id: Optional[str] = None,
    auto_pass_id: bool = False,
) -> Generator[dict[str, Optional[str]], None, None]:
    """Context manager binding a pass id to every record logged inside it.

    The previous value is restored when the context exits, so nested passes
    (a pass started from a listener, for example) log under their own id.

    Args:
        pass_id: Pass id to set. If None and auto_pass_id is True, generates one.
        auto_pass_id: If True, auto-generate pass_id if not provided.

    Yields:
        Dictionary with the active context ids.

    Example:
        with log_context(auto_pass_id=True) as ctx:
            debug(f"Starting pass {ctx['pass_id']}")
    """
    old_pass_id = pass_id_var.get()

    new_pass_id = pass_id
    if new_pass_id is None and auto_pass_id:
        new_pass_id = generate_pass_id()

    if new_pass_id is not None:
        pass_id_var.set(new_pass_id)

    try:
        yield {"pass_id": pass_id_var.get()}
    finally:
        pass_id_var.set(old_pass_id)


class ContextFilter(logging.Filter):
    """Logging filter that stamps the current pass id onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.pass_id = pass_id_var.get()
        return True
