"""
The demonstration tree.

    Frame(width, height)
      ClearConsole
        LogSizes "HStack"
          HStack(spacing)
            LogSizes "Orange"  Rectangle(orange)
            LogSizes "Text"    Text            (layout priority 1)
            LogSizes "Blue"    Rectangle(blue)

The text tracer carries the priority, so the stack negotiates with it
first and the two boxes share what is left.
"""

from typing import Optional

from .core import (
    ClearConsole,
    Console,
    Frame,
    HStack,
    LogEntry,
    LogSizes,
    ProposedSize,
    Rectangle,
    Text,
    TextMetrics,
    run_layout_pass,
)

DEFAULT_TEXT = "Hello, world"


def build_subject(
    console: Console,
    text: str = DEFAULT_TEXT,
    spacing: float = 0.0,
    metrics: Optional[TextMetrics] = None,
) -> LogSizes:
    """Build the traced stack of orange box, text and blue box."""
    return LogSizes(
        HStack(
            LogSizes(Rectangle("orange"), "Orange", console),
            LogSizes(Text(text, metrics), "Text", console).with_priority(1),
            LogSizes(Rectangle("blue"), "Blue", console),
            spacing=spacing,
        ),
        "HStack",
        console,
    )


def build_content(
    console: Console,
    width: float,
    height: float,
    text: str = DEFAULT_TEXT,
    spacing: float = 0.0,
    metrics: Optional[TextMetrics] = None,
) -> Frame:
    """Wrap the subject in the clearing wrapper and a fixed frame."""
    subject = build_subject(console, text=text, spacing=spacing, metrics=metrics)
    return Frame(ClearConsole(subject, console), width=width, height=height)


def trace_pass(
    console: Console,
    width: float,
    height: float,
    text: str = DEFAULT_TEXT,
    spacing: float = 0.0,
    metrics: Optional[TextMetrics] = None,
) -> tuple[LogEntry, ...]:
    """Run a single layout pass over the demo tree and return the trace."""
    root = build_content(
        console, width, height, text=text, spacing=spacing, metrics=metrics
    )
    run_layout_pass(root, ProposedSize(width, height))
    return console.current()
