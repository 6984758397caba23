from __future__ import annotations

from typing import Iterable, Iterator

from luvatrix_scatter.mapping import PlotTransform, map_points
from luvatrix_scatter.primitives import Circle
from luvatrix_scatter.series import Series
from luvatrix_scatter.settings import PlotSettings


HOLLOW_FILL = "white"
MARKER_STROKE_WIDTH = 1


def series_markers(series: Series, transform: PlotTransform, settings: PlotSettings) -> Iterator[Circle]:
    radius = series.point_size or settings.point_size
    fill = series.color if series.fill else HOLLOW_FILL
    px, py = map_points(transform, series.x, series.y)
    for cx, cy in zip(px.tolist(), py.tolist(), strict=True):
        yield Circle(
            cx=cx,
            cy=cy,
            r=radius,
            fill=fill,
            stroke=series.color,
            stroke_width=MARKER_STROKE_WIDTH,
        )


def render_markers(
    series_list: Iterable[Series],
    transform: PlotTransform,
    settings: PlotSettings,
) -> list[Circle]:
    """Markers in draw order: series by series, points by index, later ones on top."""
    markers: list[Circle] = []
    for series in series_list:
        markers.extend(series_markers(series, transform, settings))
    return markers
