from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from luvatrix_scatter.extent import AxisExtent, require_span
from luvatrix_scatter.layout import FrameGeometry


@dataclass(frozen=True)
class PlotTransform:
    sx: float
    sy: float
    x0: float
    y0: float
    x_min: float
    y_max: float


def build_transform(extent: AxisExtent, frame: FrameGeometry) -> PlotTransform:
    require_span(extent)
    return PlotTransform(
        sx=frame.width / (extent.x_max - extent.x_min),
        sy=frame.height / (extent.y_max - extent.y_min),
        x0=frame.x0,
        y0=frame.y0,
        x_min=extent.x_min,
        y_max=extent.y_max,
    )


def map_point(transform: PlotTransform, x: float, y: float) -> tuple[float, float]:
    # Pixel rows grow downward, so y is measured down from the top of the extent.
    px = transform.x0 + (x - transform.x_min) * transform.sx
    py = transform.y0 - (y - transform.y_max) * transform.sy
    return (px, py)


def map_points(transform: PlotTransform, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    px = transform.x0 + (np.asarray(x, dtype=np.float64) - transform.x_min) * transform.sx
    py = transform.y0 - (np.asarray(y, dtype=np.float64) - transform.y_max) * transform.sy
    return px, py
