"""Command scripts: the JSON form of a command list.

A script is a JSON array of objects::

    [{"name": "PEN DOWN"}, {"name": "MOVE", "value": 50}, {"name": "TURN", "value": 90}]
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, FiniteFloat, TypeAdapter, ValidationError

from .commands import Command
from .errors import DomainError

logger = logging.getLogger(__name__)


class ScriptError(DomainError):
    """A script does not have the command-list shape."""


class CommandModel(BaseModel):
    name: str
    value: FiniteFloat | None = None

    def to_command(self) -> Command:
        return Command(self.name, self.value)


_script_adapter = TypeAdapter(list[CommandModel])


def parse_script(text: str | bytes) -> list[Command]:
    try:
        models = _script_adapter.validate_json(text)
    except ValidationError as e:
        raise ScriptError(f"invalid command script: {e}") from e
    return [m.to_command() for m in models]


def load_script(path: str | Path) -> list[Command]:
    path = Path(path)
    commands = parse_script(path.read_bytes())
    logger.info("Loaded %d commands from %s", len(commands), path)
    return commands


def dump_script(commands: list[Command], indent: int | None = 2) -> str:
    data = []
    for cmd in commands:
        item = {"name": cmd.name}
        if cmd.value is not None:
            item["value"] = cmd.value
        data.append(item)
    return json.dumps(data, indent=indent)


def save_script(commands: list[Command], path: str | Path):
    Path(path).write_text(dump_script(commands))
