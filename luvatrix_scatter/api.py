from __future__ import annotations

from typing import Any, Mapping, Sequence

from luvatrix_scatter.composer import compose
from luvatrix_scatter.primitives import PlotDocument
from luvatrix_scatter.series import ColorSource, validate_series_list
from luvatrix_scatter.settings import PlotSettings, resolve_settings


class ScatterPlot:
    """Finished plot; read the drawable document through :attr:`graphic`."""

    __slots__ = ("_graphic",)

    def __init__(self, graphic: PlotDocument) -> None:
        self._graphic = graphic

    @property
    def graphic(self) -> PlotDocument:
        return self._graphic


def render(
    settings: Mapping[str, Any] | PlotSettings | None = None,
    series: Sequence[Any] = (),
    *,
    color_source: ColorSource | None = None,
) -> ScatterPlot:
    resolved = resolve_settings(settings)
    verified = validate_series_list(series, color_source=color_source)
    return ScatterPlot(compose(resolved, verified))
