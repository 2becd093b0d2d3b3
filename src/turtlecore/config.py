"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, field_validator

from .errors import DomainError
from .turtle import parse_heading, parse_pen_state


class CanvasConfig(BaseModel):
    width: int = 800
    height: int = 600
    background: str = "white"
    ink: str = "black"
    line_width: int = 1


class StartConfig(BaseModel):
    x: float = 100.0
    y: float = 100.0
    heading: float = 90.0
    pen: str = "up"

    @field_validator("heading")
    @classmethod
    def check_heading(cls, v: float) -> float:
        try:
            return parse_heading(v)
        except DomainError as e:
            raise ValueError(str(e)) from e

    @field_validator("pen")
    @classmethod
    def check_pen(cls, v: str) -> str:
        try:
            return parse_pen_state(v).value
        except DomainError as e:
            raise ValueError(str(e)) from e


class PlotterConfig(BaseModel):
    mm_per_px: float = 0.5
    up_angle: int = 90
    down_angle: int = 40
    travel_speed: int = 1000
    draw_speed: int = 500


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    start: StartConfig = StartConfig()
    plotter: PlotterConfig = PlotterConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/turtle.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/turtle.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
