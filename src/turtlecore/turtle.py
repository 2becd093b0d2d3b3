"""Turtle state: validated values and the immutable cursor record."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Protocol

from .errors import DomainError

HEADING_MIN = -360.0
HEADING_MAX = 360.0


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


class PenState(str, Enum):
    UP = "up"
    DOWN = "down"


class Surface(Protocol):
    """Anything the turtle can draw on."""

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def stroke(self) -> None: ...


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def parse_point(value: Any) -> Point:
    """Narrow a point-like value to a Point.

    Coordinates must be finite numbers; no range check is applied.
    """
    if isinstance(value, Point):
        x, y = value.x, value.y
    elif isinstance(value, Mapping):
        try:
            x, y = value["x"], value["y"]
        except KeyError as e:
            raise DomainError(f"point is missing coordinate {e}") from None
    else:
        try:
            x, y = value
        except (TypeError, ValueError):
            raise DomainError(f"point must be an (x, y) pair, got {value!r}") from None
    if not (is_number(x) and is_number(y)):
        raise DomainError(f"point coordinates must be numbers, got ({x!r}, {y!r})")
    if not (math.isfinite(x) and math.isfinite(y)):
        raise DomainError(f"point coordinates must be finite, got ({x!r}, {y!r})")
    if isinstance(value, Point):
        return value
    return Point(x, y)


def parse_heading(value: Any) -> float:
    """Validate a heading in degrees; the range [-360, 360] is inclusive."""
    if not is_number(value):
        raise DomainError("degree value must be a number")
    # NaN fails both comparisons
    if not HEADING_MIN <= value <= HEADING_MAX:
        raise DomainError(f"degree out of range: {value} not in [-360, 360]")
    return value


def parse_pen_state(value: Any) -> PenState:
    if not isinstance(value, str):
        raise DomainError(f"pen state must be a string, got {type(value).__name__}")
    try:
        return PenState(value)
    except ValueError:
        raise DomainError(f'pen state must be "up" or "down", got {value!r}') from None


@dataclass(frozen=True)
class Turtle:
    """Drawing cursor bound to a surface.

    Never mutated: every transition returns a new Turtle carrying the same
    surface.
    """

    position: Point
    heading: float
    pen: PenState
    surface: Surface

    @property
    def is_drawing(self) -> bool:
        return self.pen is PenState.DOWN

    def describe(self) -> str:
        x, y = self.position.x, self.position.y
        return f"position=({x}, {y}) heading={self.heading} pen={self.pen.value}"


def create_turtle(position: Any, heading: Any, pen: Any, surface: Surface) -> Turtle:
    """Build the initial Turtle from raw values and a drawing surface."""
    return Turtle(
        position=parse_point(position),
        heading=parse_heading(heading),
        pen=parse_pen_state(pen),
        surface=surface,
    )

