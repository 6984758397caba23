from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union


TextAnchor = Literal["start", "middle", "end"]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[str]
    stroke: Optional[str]
    stroke_width: float
    id: Optional[str] = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Optional[str]
    stroke_width: float
    dash: Optional[tuple[float, ...]] = None


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Optional[str]
    stroke: Optional[str]
    stroke_width: float


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    font_family: str
    font_size: float
    anchor: TextAnchor = "start"
    fill: str = "black"
    # Degrees about (x, y); negative turns counter-clockwise on screen.
    rotate: float = 0.0


Primitive = Union[Rect, Line, Circle, Text]


@dataclass(frozen=True)
class PlotDocument:
    width: float
    height: float
    primitives: tuple[Primitive, ...]

    def of_type(self, kind: type) -> list[Primitive]:
        return [p for p in self.primitives if isinstance(p, kind)]
