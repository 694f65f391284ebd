"""
Views used by the demo tree: shapes, text, a horizontal stack and a frame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from .geometry import Point, ProposedSize, Rect, Size
from .layout import Content, Layout, View

# Size a shape reports on an axis it was not given a proposal for
DEFAULT_SHAPE_DIMENSION = 10.0


class VerticalAlignment(Enum):
    TOP = 0.0
    CENTER = 0.5
    BOTTOM = 1.0


class Rectangle(View):
    """Shape that takes whatever it is offered."""

    def __init__(self, fill: str = "black") -> None:
        super().__init__()
        self.fill = fill

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        width = proposal.width if proposal.width is not None else DEFAULT_SHAPE_DIMENSION
        height = (
            proposal.height if proposal.height is not None else DEFAULT_SHAPE_DIMENSION
        )
        return Size(width, height)

    def __repr__(self) -> str:
        return f"Rectangle(fill={self.fill!r})"


@dataclass(frozen=True)
class TextMetrics:
    """Font measurements used by Text.

    The defaults approximate a 13px system font with a fixed advance so
    that layouts are reproducible without a GUI toolkit. The dashboard
    passes the real font's metrics instead.
    """

    advance: float = 7.0
    line_height: float = 16.0
    measure: Optional[Callable[[str], float]] = None

    def width_of(self, text: str) -> float:
        if self.measure is not None:
            return float(self.measure(text))
        return len(text) * self.advance


class Text(View):
    """Text label that wraps at word boundaries when it is offered less than its natural width."""

    def __init__(self, content: str, metrics: Optional[TextMetrics] = None) -> None:
        super().__init__()
        self.content = content
        self.metrics = metrics or TextMetrics()
        self.lines: tuple[str, ...] = (content,)

    def _wrap(self, width: float) -> list[str]:
        lines: list[str] = []
        current = ""
        for word in self.content.split():
            candidate = f"{current} {word}" if current else word
            if current and self.metrics.width_of(candidate) > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current or not lines:
            lines.append(current)
        return lines

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        line_height = self.metrics.line_height
        natural = self.metrics.width_of(self.content)

        if proposal.width is None or proposal.width >= natural:
            self.lines = (self.content,)
            return Size(natural, line_height)

        if proposal.width <= 0:
            self.lines = ()
            return Size(0.0, line_height)

        lines = self._wrap(proposal.width)
        if proposal.height is not None:
            max_lines = max(1, int(proposal.height // line_height))
            lines = lines[:max_lines]

        self.lines = tuple(lines)
        # A single word wider than the proposal is clipped
        width = min(proposal.width, max(self.metrics.width_of(line) for line in lines))
        return Size(width, len(lines) * line_height)

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class HStack(Layout):
    """Arranges its subviews left to right.

    Subviews are measured in descending layout priority, ties in
    declaration order. Each subview of a priority group is offered an even
    share of the width not yet claimed by spacing and by subviews measured
    before it; the height proposal is passed through unchanged.
    """

    def __init__(
        self,
        *content: Content,
        spacing: float = 8.0,
        alignment: VerticalAlignment = VerticalAlignment.CENTER,
    ) -> None:
        super().__init__(*content)
        self.spacing = spacing
        self.alignment = alignment
        self._child_proposals: dict[int, ProposedSize] = {}
        self._child_sizes: dict[int, Size] = {}

    def _measure_order(self, subviews: Sequence[View]) -> list[int]:
        # sorted() is stable, so equal priorities keep declaration order
        return sorted(range(len(subviews)), key=lambda i: -subviews[i].layout_priority)

    def measure(self, proposal: ProposedSize, subviews: Sequence[View]) -> Size:
        self._child_proposals = {}
        self._child_sizes = {}
        if not subviews:
            return Size.zero()

        total_spacing = self.spacing * (len(subviews) - 1)
        order = self._measure_order(subviews)

        if proposal.width is None:
            for index in order:
                child_proposal = proposal.replacing(width=None)
                self._child_proposals[index] = child_proposal
                self._child_sizes[index] = subviews[index].size_that_fits(child_proposal)
        else:
            remaining = max(0.0, proposal.width - total_spacing)
            position = 0
            while position < len(order):
                priority = subviews[order[position]].layout_priority
                group = [
                    i for i in order[position:] if subviews[i].layout_priority == priority
                ]
                for offset, index in enumerate(group):
                    share = remaining / (len(group) - offset)
                    child_proposal = proposal.replacing(width=share)
                    size = subviews[index].size_that_fits(child_proposal)
                    self._child_proposals[index] = child_proposal
                    self._child_sizes[index] = size
                    remaining = max(0.0, remaining - size.width)
                position += len(group)

        width = sum(size.width for size in self._child_sizes.values()) + total_spacing
        height = max(size.height for size in self._child_sizes.values())
        return Size(width, height)

    def place(
        self, bounds: Rect, proposal: ProposedSize, subviews: Sequence[View]
    ) -> None:
        if len(self._child_sizes) != len(subviews):
            self.measure(proposal, subviews)

        x = bounds.min_x
        for index, subview in enumerate(subviews):
            size = self._child_sizes[index]
            y = bounds.min_y + (bounds.height - size.height) * self.alignment.value
            subview.place_at(Point(x, y), self._child_proposals[index])
            x += size.width + self.spacing


class Frame(Layout):
    """Fixes the proposal on the given axes and centres its child inside."""

    def __init__(
        self,
        content: Content,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        super().__init__(content)
        self.width = width
        self.height = height
        self._child_sizes: list[Size] = []

    def _child_proposal(self, proposal: ProposedSize) -> ProposedSize:
        fixed: dict[str, float] = {}
        if self.width is not None:
            fixed["width"] = self.width
        if self.height is not None:
            fixed["height"] = self.height
        return proposal.replacing(**fixed)

    def measure(self, proposal: ProposedSize, subviews: Sequence[View]) -> Size:
        child_proposal = self._child_proposal(proposal)
        self._child_sizes = [subview.size_that_fits(child_proposal) for subview in subviews]
        return Size(
            self.width
            if self.width is not None
            else max((s.width for s in self._child_sizes), default=0.0),
            self.height
            if self.height is not None
            else max((s.height for s in self._child_sizes), default=0.0),
        )

    def place(
        self, bounds: Rect, proposal: ProposedSize, subviews: Sequence[View]
    ) -> None:
        if len(self._child_sizes) != len(subviews):
            self.measure(proposal, subviews)

        child_proposal = self._child_proposal(proposal)
        for subview, size in zip(subviews, self._child_sizes):
            origin = Point(
                bounds.mid_x - size.width / 2,
                bounds.mid_y - size.height / 2,
            )
            subview.place_at(origin, child_proposal)

    def __repr__(self) -> str:
        return f"Frame(width={self.width}, height={self.height})"
