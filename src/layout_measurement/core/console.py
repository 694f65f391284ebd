"""
Trace log store.

Console holds the ordered list of propose/report entries written by the
LogSizes tracers during a layout pass. It is wiped (not replaced) by
ClearConsole at the start of every top-level pass, and pushes a snapshot
to its listeners synchronously after every change.

Lifecycle of the shared instance:
    created lazily by get_console() on first use, lives for the whole
    process, cleared once per pass, observed by any number of views.
"""

import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from ..utils.logger import debug, exception

Snapshot = tuple["LogEntry", ...]
Listener = Callable[[Snapshot], None]


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LogEntry:
    """One line of the trace, e.g. ("Propose Orange", "58.00⨉100.00").

    The id only gives list views a stable row identity.
    """

    label: str
    value: str
    id: str = field(default_factory=_new_entry_id)


class Console:
    """Ordered, observable, append-only (between clears) trace log."""

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._listeners: list[Listener] = []
        # Reentrant so a listener may read current() while being notified
        self._lock = threading.RLock()

    def append(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.append(entry)
            snapshot = tuple(self._entries)
        self._notify(snapshot)

    def log(self, label: str, value: str) -> LogEntry:
        """Create an entry and append it."""
        entry = LogEntry(label=label, value=value)
        self.append(entry)
        return entry

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        debug(f"[Console] Cleared {dropped} entries")
        self._notify(())

    def current(self) -> Snapshot:
        """Read-only snapshot of the entries in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def labels(self) -> list[str]:
        return [entry.label for entry in self.current()]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, snapshot: Snapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:  # A broken view must not abort the layout pass
                exception(f"[Console] Listener {listener!r} failed")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.current())

    def __repr__(self) -> str:
        return f"Console(entries={len(self)}, listeners={len(self._listeners)})"


# Global console instance
_console: Optional[Console] = None
_console_lock = threading.Lock()


def get_console() -> Console:
    """Get the process-wide console, creating it on first use."""
    global _console
    with _console_lock:
        if _console is None:
            _console = Console()
        return _console
