import pytest

from turtlecore.surfaces import PathRecorder
from turtlecore.turtle import create_turtle


@pytest.fixture
def recorder():
    return PathRecorder()


@pytest.fixture
def turtle(recorder):
    """Turtle at (100, 100) facing 90 degrees with the pen up."""
    return create_turtle((100, 100), 90, "up", recorder)
