from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from luvatrix_scatter.errors import DegenerateExtent
from luvatrix_scatter.series import Series
from luvatrix_scatter.settings import PlotSettings


@dataclass(frozen=True)
class AxisExtent:
    x_min: float
    x_max: float
    y_min: float
    y_max: float


def extent_seed(settings: PlotSettings) -> AxisExtent:
    return AxisExtent(
        x_min=float(settings.x_min),
        x_max=float(settings.x_max),
        y_min=float(settings.y_min),
        y_max=float(settings.y_max),
    )


def compute_extent(series: Iterable[Series], seed: AxisExtent) -> AxisExtent:
    """Widen ``seed`` until it covers every point of every series.

    The seed is only ever widened, so bounds supplied through settings survive even when the data
    sits well inside them.
    """
    x_min, x_max = seed.x_min, seed.x_max
    y_min, y_max = seed.y_min, seed.y_max
    for s in series:
        if s.x.size:
            x_min = min(x_min, float(np.min(s.x)))
            x_max = max(x_max, float(np.max(s.x)))
        if s.y.size:
            y_min = min(y_min, float(np.min(s.y)))
            y_max = max(y_max, float(np.max(s.y)))
    return AxisExtent(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def require_span(extent: AxisExtent) -> None:
    if extent.x_max == extent.x_min:
        raise DegenerateExtent(f"x extent has zero span at {extent.x_min!r}")
    if extent.y_max == extent.y_min:
        raise DegenerateExtent(f"y extent has zero span at {extent.y_min!r}")
