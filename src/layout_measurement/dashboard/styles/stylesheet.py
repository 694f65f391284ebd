"""
Dashboard QSS stylesheet generation.
"""

from .colors import COLORS
from .dimensions import SPACING, RADIUS, FONTS


def get_stylesheet() -> str:
    """QSS for the window, the console table and the width slider."""
    return f"""
/* Window */

QWidget {{
    font-family: {FONTS["family"]};
    font-size: {FONTS["size_base"]}px;
    color: {COLORS["text_primary"]};
    background-color: transparent;
}}

QMainWindow {{
    background-color: {COLORS["bg_base"]};
}}

/* Console scroll bar */

QScrollBar:vertical {{
    background-color: transparent;
    width: 8px;
    margin: 0;
    border-radius: 4px;
}}

QScrollBar::handle:vertical {{
    background-color: {COLORS["border_strong"]};
    min-height: 40px;
    border-radius: 4px;
}}

QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}

/* Console rows: label | size */

QTableWidget {{
    background-color: {COLORS["bg_surface"]};
    border: 1px solid {COLORS["border_default"]};
    border-radius: {RADIUS["md"]}px;
    gridline-color: transparent;
    selection-background-color: {COLORS["bg_hover"]};
}}

QTableWidget::item {{
    padding: 0 {SPACING["sm"]}px;
    border: none;
    border-bottom: 1px solid {COLORS["border_subtle"]};
}}

QHeaderView::section {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_muted"]};
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
    border: none;
    border-bottom: 1px solid {COLORS["border_default"]};
    font-weight: {FONTS["weight_semibold"]};
    font-size: {FONTS["size_xs"]}px;
}}

/* Width slider */

QSlider::groove:horizontal {{
    height: 4px;
    background-color: {COLORS["bg_elevated"]};
    border-radius: 2px;
}}

QSlider::sub-page:horizontal {{
    background-color: {COLORS["accent_primary"]};
    border-radius: 2px;
}}

QSlider::handle:horizontal {{
    background-color: {COLORS["text_primary"]};
    width: 16px;
    margin: -6px 0;
    border-radius: 8px;
}}

QSlider::handle:horizontal:hover {{
    background-color: {COLORS["accent_primary_hover"]};
}}
"""
