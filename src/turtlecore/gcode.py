"""GCode generation from recorded turtle paths."""

from .config import Config
from .surfaces import PathRecorder


class GcodeExporter:
    """Exports recorded paths to pen-plotter gcode.

    Canvas coordinates are pixels with +y down; machine coordinates are mm
    with +y up, so y is flipped against the canvas height.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.pen = self.config.plotter
        self.canvas = self.config.canvas

    def to_machine(self, x: float, y: float) -> tuple[float, float]:
        scale = self.pen.mm_per_px
        return x * scale, (self.canvas.height - y) * scale

    def _servo(self, down: bool) -> str:
        if down:
            return f"M280 P0 S{self.pen.down_angle} ; lower pen"
        return f"M280 P0 S{self.pen.up_angle} ; raise pen"

    def _header(self, comment: str) -> list[str]:
        lines = [f"; {comment}"] if comment else []
        lines += [
            f"; turtlecore canvas {self.canvas.width}x{self.canvas.height}px"
            f" @ {self.pen.mm_per_px} mm/px",
            "G21 ; millimetres",
            "G90 ; absolute coordinates",
            self._servo(down=False),
            "G28 ; home axes",
        ]
        return lines

    def _footer(self) -> list[str]:
        return [
            self._servo(down=False),
            f"G0 X0 Y0 F{self.pen.travel_speed} ; park",
            "M84 ; motors off",
        ]

    def _path(self, path: list) -> list[str]:
        x0, y0 = self.to_machine(*path[0])
        lines = [f"G0 X{x0:.2f} Y{y0:.2f} F{self.pen.travel_speed}", self._servo(down=True)]
        for px, py in path[1:]:
            x, y = self.to_machine(px, py)
            lines.append(f"G1 X{x:.2f} Y{y:.2f} F{self.pen.draw_speed}")
        lines.append(self._servo(down=False))
        return lines

    def export(self, recorder: PathRecorder, comment: str = "") -> str:
        """Convert recorded paths to a gcode string."""
        lines = self._header(comment)
        for path in recorder.paths:
            # a lone point draws nothing
            if len(path) >= 2:
                lines += self._path(path)
        lines += self._footer()
        return "\n".join(lines)
