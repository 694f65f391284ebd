"""
Geometry values exchanged during layout negotiation.

A parent offers a ProposedSize (either axis may be left unconstrained) and
the child answers with a concrete Size. Both format the same way in the
trace log: two decimals per axis joined by "⨉", "nil" for a missing axis.
"""

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

# U+2A09 N-ARY TIMES OPERATOR
SIZE_SEPARATOR = "⨉"


def format_dimension(value: Optional[float]) -> str:
    """Format one axis: "123.46" for 123.456, "nil" for an unconstrained axis."""
    if value is None:
        return "nil"
    return f"{value:.2f}"


def format_size(size: Union["Size", "ProposedSize"]) -> str:
    """Format a size pair, e.g. "200.00⨉100.00" or "nil⨉100.00"."""
    return f"{format_dimension(size.width)}{SIZE_SEPARATOR}{format_dimension(size.height)}"


def _check_dimension(name: str, value: float) -> None:
    if math.isnan(value):
        raise ValueError(f"{name} must be a number, got NaN")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class ProposedSize:
    """Size a parent offers to a child. None on an axis means unconstrained."""

    width: Optional[float] = None
    height: Optional[float] = None

    def __post_init__(self) -> None:
        if self.width is not None:
            _check_dimension("width", self.width)
        if self.height is not None:
            _check_dimension("height", self.height)

    @classmethod
    def unspecified(cls) -> "ProposedSize":
        return cls(None, None)

    @classmethod
    def zero(cls) -> "ProposedSize":
        return cls(0.0, 0.0)

    @classmethod
    def infinity(cls) -> "ProposedSize":
        return cls(math.inf, math.inf)

    def replacing(self, **changes: Optional[float]) -> "ProposedSize":
        return replace(self, **changes)

    @property
    def pretty(self) -> str:
        return format_size(self)


@dataclass(frozen=True)
class Size:
    """Concrete size reported by a child."""

    width: float
    height: float

    def __post_init__(self) -> None:
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)

    @classmethod
    def zero(cls) -> "Size":
        return cls(0.0, 0.0)

    @property
    def pretty(self) -> str:
        return format_size(self)


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    origin: Point
    size: Size

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width / 2

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height / 2

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height
