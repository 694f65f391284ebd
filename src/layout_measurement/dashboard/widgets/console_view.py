"""
Console view: the trace log as a two-column table.
"""

from typing import Sequence

from PyQt6.QtWidgets import (
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont

from ...core import LogEntry
from ..styles import COLORS, FONTS, UI


class ConsoleView(QTableWidget):
    """Scrollable list of (label, value) rows, in insertion order."""

    HEADERS = ["Message", "Size"]
    ROW_HEIGHT = UI["row_height"]
    HEADER_HEIGHT = UI["header_height"]

    def __init__(self, parent=None):
        super().__init__(parent)

        self._entry_ids: list[str] = []

        self.setColumnCount(len(self.HEADERS))
        self.setHorizontalHeaderLabels(self.HEADERS)

        self.setAlternatingRowColors(True)
        self.setShowGrid(False)
        self.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        # Row order is the negotiation order; never sort
        self.setSortingEnabled(False)

        palette = self.palette()
        palette.setColor(palette.ColorRole.Base, QColor(COLORS["bg_surface"]))
        palette.setColor(palette.ColorRole.AlternateBase, QColor(COLORS["bg_elevated"]))
        self.setPalette(palette)

        v_header = self.verticalHeader()
        if v_header is not None:
            v_header.setVisible(False)
            v_header.setDefaultSectionSize(self.ROW_HEIGHT)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        header = self.horizontalHeader()
        if header:
            header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
            header.setSectionResizeMode(1, QHeaderView.ResizeMode.Fixed)
            header.resizeSection(1, UI["value_column_width"])
            header.setFixedHeight(self.HEADER_HEIGHT)

    def set_entries(self, entries: Sequence[LogEntry]) -> None:
        """Replace the rows with the given snapshot."""
        self.setRowCount(0)
        self._entry_ids = []

        mono = QFont()
        mono.setFamilies([f.strip(" '") for f in FONTS["mono"].split(",")])

        for entry in entries:
            row = self.rowCount()
            self.insertRow(row)

            label_item = QTableWidgetItem(entry.label)
            color = COLORS["propose"] if entry.label.startswith("Propose") else COLORS["report"]
            label_item.setForeground(QColor(color))

            value_item = QTableWidgetItem(entry.value)
            value_item.setFont(mono)
            value_item.setTextAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )

            self.setItem(row, 0, label_item)
            self.setItem(row, 1, value_item)
            self._entry_ids.append(entry.id)

    def entry_ids(self) -> list[str]:
        return list(self._entry_ids)

    def rows(self) -> list[tuple[str, str]]:
        """(label, value) pairs currently displayed, top to bottom."""
        result = []
        for row in range(self.rowCount()):
            label = self.item(row, 0)
            value = self.item(row, 1)
            result.append(
                (label.text() if label else "", value.text() if value else "")
            )
        return result
