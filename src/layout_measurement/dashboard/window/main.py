"""
Dashboard main window.

Top to bottom:
- the framed, traced subject (orange box, text, blue box)
- a slider for the width proposed to it
- the console listing the propose/report messages of the latest pass
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent

from ...core import Console, get_console
from ...utils.logger import debug, info, warn
from ...utils.settings import Settings, get_settings
from ..styles import SPACING, UI, get_stylesheet
from ..widgets import ConsoleView, LayoutCanvas, SectionHeader, WidthSlider
from .signals import ConsoleSignals


class DashboardWindow(QMainWindow):
    """Main window pairing the live layout with its trace."""

    def __init__(
        self,
        console: Optional[Console] = None,
        settings: Optional[Settings] = None,
        parent: QWidget | None = None,
    ):
        """Initialize dashboard window.

        Args:
            console: Console the tracers write to (defaults to the shared one)
            settings: Settings to read sizes and slider range from
            parent: Parent widget (optional)
        """
        super().__init__(parent)

        self._console = console if console is not None else get_console()
        self._settings = settings if settings is not None else get_settings()
        self._signals = ConsoleSignals()
        self._unsubscribe: Optional[Callable[[], None]] = None

        self._setup_window()
        self._setup_ui()
        self._connect_signals()

    def _setup_window(self) -> None:
        self.setWindowTitle("Layout Measurement")
        self.setMinimumSize(UI["window_min_width"], UI["window_min_height"])
        self.resize(UI["window_default_width"], UI["window_default_height"])
        self.setStyleSheet(get_stylesheet())

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(
            SPACING["md"], SPACING["md"], SPACING["md"], SPACING["md"]
        )
        layout.setSpacing(SPACING["sm"])

        settings = self._settings
        self._canvas = LayoutCanvas(
            self._console,
            width=settings.initial_width,
            height=settings.initial_height,
            text=settings.text,
            spacing=settings.stack_spacing,
            parent=central,
        )
        layout.addWidget(self._canvas, stretch=2)

        self._slider = WidthSlider(
            minimum=settings.slider_min,
            maximum=settings.slider_max,
            value=settings.initial_width,
        )
        layout.addWidget(self._slider)

        layout.addWidget(
            SectionHeader("Console", "Propose/report messages of the latest layout pass")
        )

        self._console_view = ConsoleView()
        self._console_view.set_entries(self._console.current())
        layout.addWidget(self._console_view, stretch=3)

    def _connect_signals(self) -> None:
        # Queued: the table is rebuilt after the pass, from the newest snapshot
        self._signals.log_changed.connect(
            self._on_log_changed, Qt.ConnectionType.QueuedConnection
        )
        self._unsubscribe = self._console.subscribe(self._signals.emit_snapshot)
        self._slider.width_changed.connect(self._on_width_changed)

    def _on_log_changed(self, snapshot: tuple) -> None:
        # Several snapshots queue up during one pass; only the latest matters
        current = self._console.current()
        self._console_view.set_entries(current)

    def _on_width_changed(self, width: float) -> None:
        debug(f"[Dashboard] Proposed width changed to {width:.2f}")
        self._canvas.set_proposed_width(width)

    @property
    def canvas(self) -> LayoutCanvas:
        return self._canvas

    @property
    def slider(self) -> WidthSlider:
        return self._slider

    @property
    def console_view(self) -> ConsoleView:
        return self._console_view

    def closeEvent(self, a0: QCloseEvent | None) -> None:
        """Stop listening to the console and remember the chosen width."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

        self._settings.initial_width = self._slider.value()
        try:
            self._settings.save()
        except OSError as e:
            warn(f"[Dashboard] Could not save settings: {e}")
        info("[Dashboard] Window closed")
        if a0:
            a0.accept()
