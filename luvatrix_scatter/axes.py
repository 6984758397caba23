from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import numpy as np

from luvatrix_scatter.extent import AxisExtent
from luvatrix_scatter.layout import FrameGeometry
from luvatrix_scatter.primitives import Line, Text
from luvatrix_scatter.settings import PlotSettings


MARK_COLOR = "black"
GRID_COLOR = "#cccccc"
GRID_WIDTH = 1
GRID_DASH = (4, 4)


def tick_marks(frame: FrameGeometry, settings: PlotSettings) -> list[Line]:
    """Major and minor ticks standing on the bottom (x) and left (y) frame edges.

    Majors sit on the interval boundaries, minors (half length) halfway between them.
    """
    n = settings.graph_axis_marks_interval
    dx = frame.width / n
    dy = frame.height / n
    major = settings.font_size / 2
    minor = major / 2
    width = settings.graph_axis_marks_thickness

    marks: list[Line] = []
    for i in range(n):
        if settings.bigger_marks:
            x = frame.x0 + i * dx
            marks.append(Line(x, frame.y1, x, frame.y1 - major, MARK_COLOR, width))
        if settings.smaller_marks:
            x = frame.x0 + (i + 0.5) * dx
            marks.append(Line(x, frame.y1, x, frame.y1 - minor, MARK_COLOR, width))
    for i in range(n):
        if settings.bigger_marks:
            y = frame.y0 + i * dy
            marks.append(Line(frame.x0, y, frame.x0 + major, y, MARK_COLOR, width))
        if settings.smaller_marks:
            y = frame.y0 + (i + 0.5) * dy
            marks.append(Line(frame.x0, y, frame.x0 + minor, y, MARK_COLOR, width))
    return marks


def grid_lines(frame: FrameGeometry, settings: PlotSettings) -> list[Line]:
    if not settings.grid:
        return []
    n = settings.graph_axis_marks_interval
    dx = frame.width / n
    dy = frame.height / n
    lines = [
        Line(frame.x0 + i * dx, frame.y0, frame.x0 + i * dx, frame.y1, GRID_COLOR, GRID_WIDTH, GRID_DASH)
        for i in range(n)
    ]
    lines.extend(
        Line(frame.x0, frame.y0 + i * dy, frame.x1, frame.y0 + i * dy, GRID_COLOR, GRID_WIDTH, GRID_DASH)
        for i in range(n)
    )
    return lines


def tick_values(lo: float, hi: float, n: int) -> np.ndarray:
    if n <= 0:
        raise ValueError("n must be > 0")
    return np.linspace(lo, hi, n + 1, dtype=np.float64)


def format_tick_value(value: float, decimals: int) -> str:
    """Fixed-point text with exactly ``decimals`` places, ties rounded away from zero."""
    quant = Decimal("1").scaleb(-decimals)
    d = Decimal(str(float(value)))
    try:
        q = d.quantize(quant, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # "-0" / "-0.00" after rounding a tiny negative.
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def tick_labels(frame: FrameGeometry, extent: AxisExtent, settings: PlotSettings) -> list[Text]:
    n = settings.graph_axis_marks_interval
    dx = frame.width / n
    dy = frame.height / n
    fs = settings.font_size

    labels: list[Text] = []
    for i, value in enumerate(tick_values(extent.x_min, extent.x_max, n)):
        labels.append(
            Text(
                x=frame.x0 + i * dx,
                y=frame.y1 + 1.25 * fs,
                text=format_tick_value(value, settings.x_decimal_places),
                font_family=settings.font,
                font_size=fs,
                anchor="middle",
            )
        )
    # Top of the frame is y_max.
    for i, value in enumerate(tick_values(extent.y_max, extent.y_min, n)):
        labels.append(
            Text(
                x=frame.x0 - fs / 2,
                y=frame.y0 + i * dy + fs / 3,
                text=format_tick_value(value, settings.y_decimal_places),
                font_family=settings.font,
                font_size=fs,
                anchor="end",
            )
        )
    return labels


def axis_titles(
    frame: FrameGeometry,
    canvas_width: float,
    canvas_height: float,
    settings: PlotSettings,
) -> list[Text]:
    fs = settings.font_size
    x_title = Text(
        x=frame.x0 + frame.width / 2,
        y=canvas_height - fs / 2,
        text=settings.x_label,
        font_family=settings.font,
        font_size=fs,
        anchor="middle",
    )
    y_title = Text(
        x=fs,
        y=frame.y0 + frame.height / 2,
        text=settings.y_label,
        font_family=settings.font,
        font_size=fs,
        anchor="middle",
        rotate=-90.0,
    )
    return [x_title, y_title]
