"""Command interpreter: inert command data dispatched onto turtle transitions."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .actions import Transition, get_turtle, move, pen_down, pen_up, turn
from .errors import InvariantViolation
from .turtle import Turtle

logger = logging.getLogger(__name__)


class CommandName(str, Enum):
    MOVE = "MOVE"
    TURN = "TURN"
    PEN_UP = "PEN UP"
    PEN_DOWN = "PEN DOWN"


@dataclass(frozen=True)
class Command:
    """A named instruction with an optional numeric payload.

    `name` is deliberately a plain string: unknown names are valid data and
    run as no-ops.
    """

    name: str
    value: float | None = None

    @property
    def is_known(self) -> bool:
        return any(self.name == n.value for n in CommandName)


def command(name: str | CommandName, value: float | None = None) -> Command:
    if isinstance(name, CommandName):
        name = name.value
    return Command(name, value)


def transition_for(cmd: Command) -> Transition:
    """Map a command onto its transition. Unknown names map to the identity."""
    match cmd.name:
        case CommandName.MOVE:
            return move(cmd.value if cmd.value is not None else 0)
        case CommandName.TURN:
            return turn(cmd.value if cmd.value is not None else 0)
        case CommandName.PEN_UP:
            return pen_up()
        case CommandName.PEN_DOWN:
            return pen_down()
        case _:
            return get_turtle()


def execute_command(cmd: Command) -> Transition:
    def action(turtle: Turtle) -> Turtle:
        result = transition_for(cmd)(turtle)
        if not isinstance(result, Turtle):
            raise InvariantViolation(
                f"command {cmd.name!r} produced {type(result).__name__}, not a Turtle"
            )
        return result

    return action


def run_commands(commands: Iterable[Command], turtle: Turtle) -> Turtle:
    """Fold `commands` over `turtle` in order and return the final turtle."""
    for i, cmd in enumerate(commands):
        if not cmd.is_known:
            logger.debug("command %d: unknown name %r, skipping", i, cmd.name)
        turtle = execute_command(cmd)(turtle)
    return turtle


def batch(commands: Iterable[Command]) -> Transition:
    """Curried form of `run_commands`, usable as a stage in `pipe`."""
    commands = list(commands)

    def action(turtle: Turtle) -> Turtle:
        return run_commands(commands, turtle)

    return action
