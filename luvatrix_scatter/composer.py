from __future__ import annotations

import logging
from typing import Sequence

from luvatrix_scatter.axes import axis_titles, grid_lines, tick_labels, tick_marks
from luvatrix_scatter.extent import compute_extent, extent_seed
from luvatrix_scatter.layout import canvas_size, compute_frame
from luvatrix_scatter.mapping import build_transform
from luvatrix_scatter.markers import render_markers
from luvatrix_scatter.primitives import PlotDocument, Primitive
from luvatrix_scatter.series import Series
from luvatrix_scatter.settings import PlotSettings

LOGGER = logging.getLogger(__name__)


def compose(settings: PlotSettings, series_list: Sequence[Series]) -> PlotDocument:
    """Lay out and draw a full scatter plot.

    Draw order: frame, tick marks, grid, points (series order), tick text, axis titles. Any stage
    failure propagates before a document exists.
    """
    extent = compute_extent(series_list, extent_seed(settings))
    width, height = canvas_size(settings)
    frame = compute_frame(width, height, settings.graph_frame_setback, settings.graph_frame_thickness)
    transform = build_transform(extent, frame)
    LOGGER.debug(
        "scatter layout: canvas=%sx%s frame=(%.2f, %.2f, %.2f, %.2f) extent=%s series=%d",
        width,
        height,
        frame.x0,
        frame.y0,
        frame.width,
        frame.height,
        extent,
        len(series_list),
    )

    primitives: list[Primitive] = [frame.rect()]
    primitives.extend(tick_marks(frame, settings))
    primitives.extend(grid_lines(frame, settings))
    primitives.extend(render_markers(series_list, transform, settings))
    primitives.extend(tick_labels(frame, extent, settings))
    primitives.extend(axis_titles(frame, width, height, settings))
    return PlotDocument(width=width, height=height, primitives=tuple(primitives))
