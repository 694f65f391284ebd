"""
Dashboard color palette - dark theme.

Backgrounds are layered for depth; the demo colours are the ones the
traced views are filled with.
"""

COLORS = {
    # Backgrounds (layered depth)
    "bg_base": "#0d0d0d",
    "bg_surface": "#1a1a1a",
    "bg_elevated": "#222222",
    "bg_hover": "#2a2a2a",
    # Text hierarchy
    "text_primary": "#f5f5f5",
    "text_secondary": "#b3b3b3",
    "text_muted": "#737373",
    # Accent
    "accent_primary": "#3b82f6",  # Blue 500
    "accent_primary_hover": "#60a5fa",  # Blue 400
    # Borders
    "border_subtle": "rgba(255, 255, 255, 0.08)",
    "border_default": "rgba(255, 255, 255, 0.12)",
    "border_strong": "rgba(255, 255, 255, 0.18)",
    # Trace rows
    "propose": "#60a5fa",  # Blue 400
    "report": "#22c55e",  # Green 500
    # Demo canvas
    "canvas_bg": "#111111",
    "frame_border": "#22c55e",  # Green border around the framed subject
    "text_fill": "#f5f5f5",
}
