"""
Canvas rendering the traced demo subject.

The canvas owns the view tree. Every width change or resize runs one
layout pass over it (which rewrites the console) and then paints the
frames the pass assigned.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import QEvent, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPaintEvent, QPen, QResizeEvent

from ...core import (
    Console,
    Point,
    ProposedSize,
    Rect,
    Rectangle,
    Size,
    Text,
    TextMetrics,
    run_layout_pass,
)
from ...demo import DEFAULT_TEXT, build_content
from ...utils.logger import debug
from ..styles import COLORS, UI


def _to_qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


class LayoutCanvas(QWidget):
    """Hosts the framed subject and repaints it after each layout pass."""

    layout_finished = pyqtSignal(object)  # Size reported by the root

    # changeEvent can arrive from QWidget.__init__, before the tree exists
    _ready = False

    def __init__(
        self,
        console: Console,
        width: float = 200.0,
        height: float = 100.0,
        text: str = DEFAULT_TEXT,
        spacing: float = 0.0,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setMinimumHeight(UI["canvas_min_height"])
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._console = console
        self._last_size: Optional[Size] = None

        # A stylesheet font only applies once the widget is polished
        self.ensurePolished()
        self._metrics_font = QFont(self.font())
        self._metrics = self._font_metrics()
        self._root = build_content(
            console, width, height, text=text, spacing=spacing, metrics=self._metrics
        )
        self._ready = True

    def _font_metrics(self) -> TextMetrics:
        font_metrics = QFontMetricsF(self.font())
        return TextMetrics(
            line_height=font_metrics.height(),
            measure=font_metrics.horizontalAdvance,
        )

    def _refresh_metrics(self) -> bool:
        """Measure text with the font paintEvent draws with.

        Returns True when the metrics were rebuilt.
        """
        if self.font() == self._metrics_font:
            return False
        self._metrics_font = QFont(self.font())
        self._metrics = self._font_metrics()
        for view in self._root.walk():
            if isinstance(view, Text):
                view.metrics = self._metrics
        debug(f"[Canvas] Text metrics rebuilt for {self._metrics_font.family()}")
        return True

    @property
    def metrics(self) -> TextMetrics:
        return self._metrics

    @property
    def root(self):
        return self._root

    @property
    def last_size(self) -> Optional[Size]:
        return self._last_size

    def proposed_width(self) -> float:
        return self._root.width

    def set_proposed_width(self, width: float) -> None:
        self._root.width = width
        self.relayout()

    def relayout(self) -> Size:
        """Run one layout pass and schedule a repaint."""
        self.ensurePolished()
        self._refresh_metrics()
        width = self._root.width or 0.0
        height = self._root.height or 0.0
        origin = Point(
            max(0.0, (self.width() - width) / 2),
            max(0.0, (self.height() - height) / 2),
        )
        size = run_layout_pass(self._root, ProposedSize(width, height), origin)
        self._last_size = size
        debug(f"[Canvas] Laid out subject at {size.pretty}")
        self.layout_finished.emit(size)
        self.update()
        return size

    def changeEvent(self, a0: QEvent | None) -> None:
        super().changeEvent(a0)
        if not self._ready or a0 is None:
            return
        if a0.type() in (QEvent.Type.FontChange, QEvent.Type.StyleChange):
            if self._refresh_metrics():
                self.relayout()

    def resizeEvent(self, a0: QResizeEvent | None) -> None:
        super().resizeEvent(a0)
        self.relayout()

    def paintEvent(self, a0: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(COLORS["canvas_bg"]))

        for view in self._root.walk():
            if view.frame is None:
                continue
            if isinstance(view, Rectangle):
                painter.fillRect(_to_qrect(view.frame), QColor(view.fill))
            elif isinstance(view, Text):
                painter.setPen(QColor(COLORS["text_fill"]))
                painter.drawText(
                    _to_qrect(view.frame),
                    int(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop),
                    "\n".join(view.lines),
                )

        if self._root.frame is not None:
            pen = QPen(QColor(COLORS["frame_border"]))
            pen.setWidthF(UI["frame_border_width"])
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(_to_qrect(self._root.frame))

        painter.end()
