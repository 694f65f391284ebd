"""
Qt signals bridging the console to the dashboard.

The console notifies plain Python callbacks; ConsoleSignals turns those
notifications into a Qt signal so views can use queued connections and
render once control returns to the event loop.
"""

from PyQt6.QtCore import QObject, pyqtSignal


class ConsoleSignals(QObject):
    """Signals for console updates."""

    log_changed = pyqtSignal(object)  # tuple[LogEntry, ...]

    def emit_snapshot(self, snapshot: tuple) -> None:
        self.log_changed.emit(snapshot)
