"""
Dashboard entry point.

Usage: python -m layout_measurement.dashboard
"""

import sys
from PyQt6.QtWidgets import QApplication

from ..utils.logger import info, setup_logging
from .window import DashboardWindow


def main():
    """Run the dashboard as a standalone Qt application."""
    setup_logging()
    app = QApplication(sys.argv)

    window = DashboardWindow()
    window.show()
    info("[Dashboard] Started")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
