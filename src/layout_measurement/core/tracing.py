"""
Layout tracers.

LogSizes wraps a single view and records the negotiation it takes part in:

    Propose <label>   the size its parent offered
    Report <label>    the size the wrapped view answered

and then hands the real answer back untouched, so tracing never changes
the layout. Nesting tracers interleaves their entries in negotiation order:
an outer tracer's "Propose" comes before everything its subtree logs and
its "Report" after.

ClearConsole goes outermost and empties the console every time it is
measured, so the console only shows the latest pass.
"""

from typing import Optional, Sequence

from .console import Console, get_console
from .geometry import ProposedSize, Rect, Size
from .layout import Content, Layout, View


def _single_subview(wrapper: Layout, subviews: Sequence[View]) -> View:
    # Raised explicitly rather than with assert so it survives python -O
    if len(subviews) != 1:
        raise AssertionError(
            f"{wrapper!r} must wrap exactly one view, got {len(subviews)}"
        )
    return subviews[0]


class LogSizes(Layout):
    """Tracepoint logging the proposal and report of its single subview."""

    def __init__(
        self,
        content: Content,
        label: str,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(content)
        self.label = label
        self.console = console if console is not None else get_console()

    def measure(self, proposal: ProposedSize, subviews: Sequence[View]) -> Size:
        subview = _single_subview(self, subviews)
        self.console.log(f"Propose {self.label}", proposal.pretty)
        result = subview.size_that_fits(proposal)
        self.console.log(f"Report {self.label}", result.pretty)
        return result

    def place(
        self, bounds: Rect, proposal: ProposedSize, subviews: Sequence[View]
    ) -> None:
        _single_subview(self, subviews).place_at(bounds.origin, proposal)

    def __repr__(self) -> str:
        return f"LogSizes({self.label!r})"


class ClearConsole(Layout):
    """Empties the console whenever it is measured, then defers to its subview.

    The clear happens on every measure() call, including repeated queries
    within one pass.
    """

    def __init__(self, content: Content, console: Optional[Console] = None) -> None:
        super().__init__(content)
        self.console = console if console is not None else get_console()

    def measure(self, proposal: ProposedSize, subviews: Sequence[View]) -> Size:
        subview = _single_subview(self, subviews)
        self.console.clear()
        return subview.size_that_fits(proposal)

    def place(
        self, bounds: Rect, proposal: ProposedSize, subviews: Sequence[View]
    ) -> None:
        _single_subview(self, subviews).place_at(bounds.origin, proposal)


def log_sizes(view: Content, label: str, console: Optional[Console] = None) -> LogSizes:
    return LogSizes(view, label, console)


def clear_console(view: Content, console: Optional[Console] = None) -> ClearConsole:
    return ClearConsole(view, console)
