"""CLI for turtlecore."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from .commands import Command, CommandName, command, run_commands
from .config import Config
from .errors import DomainError
from .turtle import Turtle, create_turtle

logger = logging.getLogger(__name__)

SQUARE = [
    command(CommandName.PEN_DOWN),
    command(CommandName.MOVE, 50),
    command(CommandName.TURN, 90),
    command(CommandName.MOVE, 50),
    command(CommandName.TURN, 90),
    command(CommandName.MOVE, 50),
    command(CommandName.TURN, 90),
    command(CommandName.MOVE, 50),
    command(CommandName.PEN_UP),
]


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


def _draw(commands: list[Command], config: Config, png: Path | None, gcode: Path | None) -> Turtle:
    from .surfaces import PathRecorder, RasterSurface, Tee

    canvas = config.canvas
    raster = RasterSurface(
        canvas.width, canvas.height, canvas.background, canvas.ink, canvas.line_width
    )
    recorder = PathRecorder()
    start = config.start
    turtle = create_turtle((start.x, start.y), start.heading, start.pen, Tee([raster, recorder]))

    try:
        turtle = run_commands(commands, turtle)
    finally:
        # strokes committed before a failure stay on the surfaces
        if png:
            raster.save(png)
            click.echo(f"Saved: {png}")
        if gcode:
            from .gcode import GcodeExporter

            gcode.write_text(GcodeExporter(config).export(recorder))
            click.echo(f"Saved: {gcode}")

    logger.debug("Recorded %d paths from %d strokes", len(recorder.paths), recorder.strokes)
    return turtle


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """turtlecore - Turtle graphics from command scripts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--png", type=Path, help="Write the drawing as an image")
@click.option("--gcode", type=Path, help="Write the drawing as plotter gcode")
def run(script: Path, config_path: Path | None, png: Path | None, gcode: Path | None):
    """Run a command script."""
    from .script import load_script

    try:
        commands = load_script(script)
        turtle = _draw(commands, _load_config(config_path), png, gcode)
    except ValidationError as e:
        click.echo(click.style(f"Error: invalid config {config_path}: {e}", fg="red"), err=True)
        raise SystemExit(1)
    except DomainError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)
    click.echo(turtle.describe())


@main.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(script: Path):
    """List the commands in a script."""
    from .script import load_script

    try:
        commands = load_script(script)
    except DomainError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    for i, cmd in enumerate(commands, 1):
        line = f"{i:4d}  {cmd.name}" + ("" if cmd.value is None else f" {cmd.value:g}")
        if cmd.is_known:
            click.echo(line)
        else:
            click.echo(click.style(f"{line}  (unknown, no-op)", fg="yellow"))
    click.echo(f"{len(commands)} commands")


@main.command()
@click.option("--png", type=Path)
def demo(png: Path | None):
    """Draw the built-in square."""
    turtle = _draw(SQUARE, Config(), png, None)
    click.echo(turtle.describe())


if __name__ == "__main__":
    main()
