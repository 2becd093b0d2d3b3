"""Test value validators and the turtle factory.

Test cases:
    - test_heading_accepts_inclusive_range()
    - test_heading_rejects_out_of_range()
    - test_heading_rejects_non_numbers()
    - test_pen_state_closure()
    - test_parse_point_forms()
    - test_create_turtle_validates()

Run:
    pytest tests/test_turtle.py -v
"""

import math
from dataclasses import FrozenInstanceError

import pytest

from turtlecore.errors import DomainError
from turtlecore.surfaces import PathRecorder
from turtlecore.turtle import (
    PenState,
    Point,
    create_turtle,
    parse_heading,
    parse_pen_state,
    parse_point,
)


@pytest.mark.parametrize("value", [-360, -359.5, 0, 90, 359.999, 360])
def test_heading_accepts_inclusive_range(value):
    assert parse_heading(value) == value


@pytest.mark.parametrize("value", [-360.0001, 360.0001, 720, -1000, math.inf, -math.inf, math.nan])
def test_heading_rejects_out_of_range(value):
    with pytest.raises(DomainError, match="out of range"):
        parse_heading(value)


@pytest.mark.parametrize("value", ["90", None, True, [90]])
def test_heading_rejects_non_numbers(value):
    with pytest.raises(DomainError, match="must be a number"):
        parse_heading(value)


def test_pen_state_closure():
    assert parse_pen_state("up") is PenState.UP
    assert parse_pen_state("down") is PenState.DOWN
    assert parse_pen_state(PenState.DOWN) is PenState.DOWN

    for bad in ["UP", "Down", "", "sideways", " up"]:
        with pytest.raises(DomainError):
            parse_pen_state(bad)
    for bad in [1, None, b"up"]:
        with pytest.raises(DomainError, match="string"):
            parse_pen_state(bad)


def test_parse_point_forms():
    p = Point(1.5, -2)
    assert parse_point(p) is p
    assert parse_point((3, 4)) == Point(3, 4)
    assert parse_point({"x": -1e9, "y": 1e9}) == Point(-1e9, 1e9)

    with pytest.raises(DomainError):
        parse_point({"x": 1})
    with pytest.raises(DomainError):
        parse_point((1, 2, 3))
    with pytest.raises(DomainError):
        parse_point(("1", 2))


def test_create_turtle_validates():
    surface = PathRecorder()
    t = create_turtle((10, 20), -45, "down", surface)
    assert t.position == Point(10, 20)
    assert t.heading == -45
    assert t.pen is PenState.DOWN
    assert t.surface is surface
    assert t.is_drawing

    with pytest.raises(DomainError):
        create_turtle((0, 0), 361, "up", surface)
    with pytest.raises(DomainError):
        create_turtle((0, 0), 0, "left", surface)


def test_turtle_is_immutable(turtle):
    with pytest.raises(FrozenInstanceError):
        turtle.heading = 0


@pytest.mark.parametrize(
    "value",
    [(math.inf, 0), (0, -math.inf), {"x": math.nan, "y": 1}, Point(math.inf, 0)],
)
def test_parse_point_rejects_non_finite(value):
    with pytest.raises(DomainError, match="finite"):
        parse_point(value)


def test_create_turtle_rejects_non_finite_position():
    with pytest.raises(DomainError):
        create_turtle((math.nan, 0), 0, "up", PathRecorder())
