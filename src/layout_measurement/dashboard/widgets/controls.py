"""
Control widgets for user interaction and layout.
"""

from PyQt6.QtWidgets import (
    QLabel,
    QHBoxLayout,
    QSlider,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt, pyqtSignal

from ...core import format_dimension
from ..styles import COLORS, SPACING, FONTS, UI


class SectionHeader(QWidget):
    """Section header with title and optional subtitle."""

    def __init__(
        self,
        title: str,
        subtitle: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, SPACING["sm"], 0, SPACING["sm"])
        layout.setSpacing(SPACING["xs"])

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_lg"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
        """)
        layout.addWidget(self._title)

        if subtitle:
            self._subtitle = QLabel(subtitle)
            self._subtitle.setStyleSheet(f"""
                font-size: {FONTS["size_sm"]}px;
                color: {COLORS["text_muted"]};
            """)
            layout.addWidget(self._subtitle)


class WidthSlider(QWidget):
    """Labelled slider choosing the width proposed to the traced subject.

    QSlider only holds integers, so the value is kept in tenths of a point.
    """

    width_changed = pyqtSignal(float)

    STEPS = UI["slider_steps_per_point"]

    def __init__(
        self,
        minimum: float = 0.0,
        maximum: float = 300.0,
        value: float = 200.0,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        if maximum < minimum:
            raise ValueError(f"Slider maximum {maximum} is below minimum {minimum}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING["md"])

        title = QLabel("Width")
        title.setStyleSheet(f"color: {COLORS['text_secondary']};")
        layout.addWidget(title)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(round(minimum * self.STEPS), round(maximum * self.STEPS))
        self._slider.setValue(round(value * self.STEPS))
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider, stretch=1)

        self._value_label = QLabel(format_dimension(self.value()))
        self._value_label.setMinimumWidth(56)
        self._value_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        layout.addWidget(self._value_label)

    def _on_value_changed(self, raw: int) -> None:
        width = raw / self.STEPS
        self._value_label.setText(format_dimension(width))
        self.width_changed.emit(width)

    def value(self) -> float:
        return self._slider.value() / self.STEPS

    def set_value(self, width: float) -> None:
        self._slider.setValue(round(width * self.STEPS))

    def value_text(self) -> str:
        return self._value_label.text()
