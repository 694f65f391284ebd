"""
Dashboard dimensions - Spacing, typography, and UI constants.
"""

# ============================================================
# SPACING SYSTEM (8px base)
# ============================================================

SPACING = {
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
}

RADIUS = {
    "sm": 6,
    "md": 8,
    "lg": 12,
}

# ============================================================
# TYPOGRAPHY
# ============================================================

FONTS = {
    "family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    "mono": "ui-monospace, 'SF Mono', Menlo, Monaco, 'Courier New', monospace",
    "size_xs": 11,
    "size_sm": 12,
    "size_base": 13,
    "size_lg": 16,
    "weight_normal": 400,
    "weight_medium": 500,
    "weight_semibold": 600,
}

# ============================================================
# UI CONSTANTS
# ============================================================

UI = {
    # Canvas hosting the traced subject
    "canvas_min_height": 160,
    "frame_border_width": 1,
    # Slider resolution: steps per point of width
    "slider_steps_per_point": 10,
    # Console table
    "row_height": 28,
    "header_height": 32,
    "value_column_width": 140,
    # Window
    "window_min_width": 420,
    "window_min_height": 520,
    "window_default_width": 520,
    "window_default_height": 640,
}
