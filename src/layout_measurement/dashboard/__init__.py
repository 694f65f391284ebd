"""
Layout Measurement Dashboard - PyQt6 visualization interface.

Shows the traced demo subject, a width slider and the console of
propose/report messages for the latest layout pass.
"""

from .window import DashboardWindow, ConsoleSignals
from .styles import COLORS, SPACING, RADIUS, FONTS, UI, get_stylesheet
from .widgets import ConsoleView, LayoutCanvas, SectionHeader, WidthSlider

__all__ = [
    # Main entry point
    "DashboardWindow",
    "ConsoleSignals",
    # Styles
    "COLORS",
    "SPACING",
    "RADIUS",
    "FONTS",
    "UI",
    "get_stylesheet",
    # Widgets
    "ConsoleView",
    "LayoutCanvas",
    "SectionHeader",
    "WidthSlider",
]
