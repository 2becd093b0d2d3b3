"""Drawing surfaces a Turtle can be bound to."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, ImageDraw

from .turtle import Point

logger = logging.getLogger(__name__)


@dataclass
class PathRecorder:
    """Records strokes as polylines.

    Segments that continue from the end of the previous stroke extend the
    same path; a stroke starting anywhere else opens a new one.
    """

    paths: list = field(default_factory=list)
    cursor: Point = field(default_factory=Point)
    moves: int = 0
    strokes: int = 0
    _pending: list = field(default_factory=list)

    def move_to(self, point: Point):
        self.cursor = point
        self.moves += 1

    def line_to(self, point: Point):
        if not self._pending:
            self._pending = [(self.cursor.x, self.cursor.y)]
        self._pending.append((point.x, point.y))
        self.cursor = point

    def stroke(self):
        if len(self._pending) < 2:
            self._pending = []
            return
        if self.paths and self.paths[-1][-1] == self._pending[0]:
            self.paths[-1].extend(self._pending[1:])
        else:
            self.paths.append(list(self._pending))
        self.strokes += 1
        self._pending = []

    @property
    def segments(self) -> list:
        return [(a, b) for path in self.paths for a, b in zip(path, path[1:])]

    def bounds(self) -> tuple[float, float, float, float] | None:
        """(min_x, min_y, max_x, max_y) of everything drawn, or None."""
        points = [p for path in self.paths for p in path]
        if not points:
            return None
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return min(xs), min(ys), max(xs), max(ys)


class RasterSurface:
    """Renders strokes into a Pillow image."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        background: str = "white",
        ink: str = "black",
        line_width: int = 1,
    ):
        self.image = Image.new("RGB", (width, height), background)
        self.draw = ImageDraw.Draw(self.image)
        self.ink = ink
        self.line_width = line_width
        self.cursor = Point()
        self._pending: list[tuple[float, float]] = []

    def move_to(self, point: Point):
        self.cursor = point

    def line_to(self, point: Point):
        if not self._pending:
            self._pending = [(self.cursor.x, self.cursor.y)]
        self._pending.append((point.x, point.y))
        self.cursor = point

    def stroke(self):
        if len(self._pending) >= 2:
            self.draw.line(self._pending, fill=self.ink, width=self.line_width)
        self._pending = []

    def save(self, path: str | Path):
        path = Path(path)
        self.image.save(path)
        logger.info("Saved %dx%d image to %s", *self.image.size, path)


@dataclass
class Tee:
    """Forwards every drawing call to several surfaces."""

    surfaces: list

    def move_to(self, point: Point):
        for s in self.surfaces:
            s.move_to(point)

    def line_to(self, point: Point):
        for s in self.surfaces:
            s.line_to(point)

    def stroke(self):
        for s in self.surfaces:
            s.stroke()
