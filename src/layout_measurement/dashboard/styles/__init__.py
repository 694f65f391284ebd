"""
Dashboard styles.

This package provides:
- COLORS: Color palette dictionary
- SPACING, RADIUS, FONTS, UI: Dimension constants
- get_stylesheet: QSS stylesheet generator
"""

from .colors import COLORS
from .dimensions import SPACING, RADIUS, FONTS, UI
from .stylesheet import get_stylesheet

__all__ = [
    "COLORS",
    "SPACING",
    "RADIUS",
    "FONTS",
    "UI",
    "get_stylesheet",
]
