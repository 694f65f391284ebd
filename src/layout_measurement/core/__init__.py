"""
Layout core: geometry, the trace console, the layout protocol and the tracers.
"""

from .geometry import (
    SIZE_SEPARATOR,
    Point,
    ProposedSize,
    Rect,
    Size,
    format_dimension,
    format_size,
)
from .console import Console, LogEntry, get_console
from .layout import Group, Layout, View, run_layout_pass
from .views import Frame, HStack, Rectangle, Text, TextMetrics, VerticalAlignment
from .tracing import ClearConsole, LogSizes, clear_console, log_sizes

__all__ = [
    # Geometry
    "SIZE_SEPARATOR",
    "Point",
    "ProposedSize",
    "Rect",
    "Size",
    "format_dimension",
    "format_size",
    # Console
    "Console",
    "LogEntry",
    "get_console",
    # Layout protocol
    "Group",
    "Layout",
    "View",
    "run_layout_pass",
    # Views
    "Frame",
    "HStack",
    "Rectangle",
    "Text",
    "TextMetrics",
    "VerticalAlignment",
    # Tracers
    "ClearConsole",
    "LogSizes",
    "clear_console",
    "log_sizes",
]
