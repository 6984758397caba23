from __future__ import annotations

from dataclasses import dataclass
import logging

from luvatrix_scatter.primitives import Rect
from luvatrix_scatter.settings import PlotSettings

LOGGER = logging.getLogger(__name__)

# Extra room around the plot, in multiples of the font size, for tick text and axis titles.
CANVAS_WIDTH_FONT_MARGIN = 6
CANVAS_HEIGHT_FONT_MARGIN = 5


@dataclass(frozen=True)
class FrameGeometry:
    x0: float
    y0: float
    width: float
    height: float
    thickness: float

    @property
    def x1(self) -> float:
        return self.x0 + self.width

    @property
    def y1(self) -> float:
        return self.y0 + self.height

    def rect(self) -> Rect:
        return Rect(
            x=self.x0,
            y=self.y0,
            width=self.width,
            height=self.height,
            fill="white",
            stroke="black",
            stroke_width=self.thickness,
            id="frame",
        )


def canvas_size(settings: PlotSettings) -> tuple[float, float]:
    width = settings.width + CANVAS_WIDTH_FONT_MARGIN * settings.font_size
    height = settings.height + CANVAS_HEIGHT_FONT_MARGIN * settings.font_size
    return (width, height)


def compute_frame(
    canvas_width: float,
    canvas_height: float,
    setback_ratio: float,
    thickness: float,
) -> FrameGeometry:
    """Place the plotting rectangle inside the canvas.

    The setback is a percentage of the larger canvas side. Wide canvases use twice the width-based
    setback so the left gutter keeps room for the y tick text.
    """
    if canvas_height > canvas_width:
        setback = canvas_height * setback_ratio / 100
    else:
        setback = 2 * canvas_width * setback_ratio / 100
    x0 = 2 * setback
    y0 = thickness + setback
    frame = FrameGeometry(
        x0=x0,
        y0=y0,
        width=canvas_width - 2 * x0,
        height=canvas_height - 2 * y0,
        thickness=thickness,
    )
    if frame.width <= 0 or frame.height <= 0:
        LOGGER.warning(
            "plot frame collapsed to %.2fx%.2f (canvas %.2fx%.2f, setback %s%%)",
            frame.width,
            frame.height,
            canvas_width,
            canvas_height,
            setback_ratio,
        )
    return frame
