"""
Dashboard widgets.

This package provides re-exports for all widget classes.
"""

from .canvas import LayoutCanvas
from .console_view import ConsoleView
from .controls import SectionHeader, WidthSlider

__all__ = [
    "LayoutCanvas",
    "ConsoleView",
    "SectionHeader",
    "WidthSlider",
]
