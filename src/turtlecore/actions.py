"""Turtle transitions.

Each action takes its parameter and returns a function ``Turtle -> Turtle``.
Only ``move`` touches the surface; the pen actions take effect on the next move.
"""

import math
from collections.abc import Callable
from dataclasses import replace

from .errors import DomainError
from .turtle import (
    PenState,
    Point,
    Turtle,
    is_number,
    parse_heading,
    parse_pen_state,
    parse_point,
)

Transition = Callable[[Turtle], Turtle]


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def next_position(distance: float, heading: float, position: Point) -> Point:
    """Position after travelling `distance` along `heading`, floored to the pixel grid."""
    radians = degrees_to_radians(heading)
    x = position.x + distance * math.cos(radians)
    y = position.y + distance * math.sin(radians)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise DomainError(f"move of {distance} from ({position.x}, {position.y}) leaves the plane")
    return Point(math.floor(x), math.floor(y))


def move(distance: float) -> Transition:
    if not is_number(distance):
        raise DomainError(f"distance must be a number, got {distance!r}")
    if not math.isfinite(distance):
        raise DomainError(f"distance must be finite, got {distance!r}")

    def action(turtle: Turtle) -> Turtle:
        start = turtle.position
        end = next_position(distance, turtle.heading, start)
        surface = turtle.surface
        if turtle.pen is PenState.DOWN:
            surface.move_to(start)
            surface.line_to(end)
            surface.stroke()
        else:
            surface.move_to(end)
        return replace(turtle, position=parse_point(end))

    return action


def turn(degrees: float) -> Transition:
    """Rotate by `degrees`. The heading is cumulative and never wrapped."""
    if not is_number(degrees):
        raise DomainError("degree value must be a number")

    def action(turtle: Turtle) -> Turtle:
        return replace(turtle, heading=parse_heading(turtle.heading + degrees))

    return action


def pen_up() -> Transition:
    def action(turtle: Turtle) -> Turtle:
        return replace(turtle, pen=parse_pen_state("up"))

    return action


def pen_down() -> Transition:
    def action(turtle: Turtle) -> Turtle:
        return replace(turtle, pen=parse_pen_state("down"))

    return action


def get_turtle() -> Transition:
    def action(turtle: Turtle) -> Turtle:
        return turtle

    return action
