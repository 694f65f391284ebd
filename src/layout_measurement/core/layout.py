"""
Layout protocol.

Views answer two questions from their parent:

    size_that_fits(proposal) -> Size      what size would you take?
    place_at(origin, proposal)            take your final position

Containers subclass Layout and implement the two hooks the host calls
with their subviews:

    measure(proposal, subviews) -> Size
    place(bounds, proposal, subviews)

Every size_that_fits call is a fresh negotiation and reaches measure().
place_at() reuses the size measured for the same proposal so that
placement never negotiates again; this is what keeps a pass's trace to a
single propose/report pair per tracepoint.
"""

from typing import Iterable, Iterator, Optional, Sequence, Union

from .geometry import Point, ProposedSize, Rect, Size
from ..utils.logger import debug, log_context


class View:
    """Base class for every node of a view tree."""

    layout_priority: float = 0.0

    def __init__(self) -> None:
        self.frame: Optional[Rect] = None

    @property
    def children(self) -> Sequence["View"]:
        return ()

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        raise NotImplementedError("Subclasses must implement size_that_fits()")

    def place_at(self, origin: Point, proposal: ProposedSize) -> None:
        self.frame = Rect(origin, self.size_that_fits(proposal))

    def with_priority(self, priority: float) -> "View":
        """Set the layout priority and return the view, for inline use in trees."""
        self.layout_priority = float(priority)
        return self

    def walk(self) -> Iterator["View"]:
        """Depth-first iteration over this view and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Group(View):
    """Several views handed to a container as its direct children.

    A Group is never measured itself: the container it is given to
    unpacks it into subviews.
    """

    def __init__(self, *views: View) -> None:
        super().__init__()
        self.views = tuple(views)

    @property
    def children(self) -> Sequence[View]:
        return self.views

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        raise TypeError("Group has no layout of its own; wrap it in a container")

    def __repr__(self) -> str:
        return f"Group({len(self.views)} views)"


Content = Union[View, Iterable[View]]


def _flatten(content: Iterable[Content]) -> tuple[View, ...]:
    views: list[View] = []
    for item in content:
        if isinstance(item, Group):
            views.extend(item.views)
        elif isinstance(item, View):
            views.append(item)
        elif isinstance(item, (str, bytes)):
            raise TypeError(f"Expected a view, got {item!r}")
        else:
            views.extend(_flatten(item))
    return tuple(views)


class Layout(View):
    """Container view that lays out an ordered tuple of subviews."""

    def __init__(self, *content: Content) -> None:
        super().__init__()
        self.subviews: tuple[View, ...] = _flatten(content)
        self._measured: Optional[tuple[ProposedSize, Size]] = None

    @property
    def children(self) -> Sequence[View]:
        return self.subviews

    def measure(self, proposal: ProposedSize, subviews: Sequence[View]) -> Size:
        raise NotImplementedError("Subclasses must implement measure()")

    def place(
        self, bounds: Rect, proposal: ProposedSize, subviews: Sequence[View]
    ) -> None:
        raise NotImplementedError("Subclasses must implement place()")

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        size = self.measure(proposal, self.subviews)
        self._measured = (proposal, size)
        return size

    def place_at(self, origin: Point, proposal: ProposedSize) -> None:
        if self._measured is not None and self._measured[0] == proposal:
            size = self._measured[1]
        else:
            size = self.size_that_fits(proposal)
        self.frame = Rect(origin, size)
        self.place(self.frame, proposal, self.subviews)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.subviews)} subviews)"


def run_layout_pass(
    root: View,
    proposal: ProposedSize,
    origin: Point = Point(0.0, 0.0),
) -> Size:
    """Run one top-level layout pass: measure the root, then place it.

    Returns the size the root reported.
    """
    with log_context(auto_pass_id=True):
        debug(f"[Layout] Pass started for {root!r} with {proposal.pretty}")
        size = root.size_that_fits(proposal)
        root.place_at(origin, proposal)
        debug(f"[Layout] Pass finished at {size.pretty}")
    return size
