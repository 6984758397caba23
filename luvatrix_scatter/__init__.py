from luvatrix_scatter.api import ScatterPlot, render
from luvatrix_scatter.errors import DegenerateExtent, InvalidSeries, InvalidSettings, ScatterPlotError
from luvatrix_scatter.extent import AxisExtent
from luvatrix_scatter.primitives import Circle, Line, PlotDocument, Rect, Text
from luvatrix_scatter.series import ColorSource, RandomColorSource, Series
from luvatrix_scatter.settings import DEFAULT_SETTINGS, PlotSettings, load_settings_file, resolve_settings
from luvatrix_scatter.svg import to_svg_markup, write_svg

__all__ = [
    "AxisExtent",
    "Circle",
    "ColorSource",
    "DEFAULT_SETTINGS",
    "DegenerateExtent",
    "InvalidSeries",
    "InvalidSettings",
    "Line",
    "PlotDocument",
    "PlotSettings",
    "RandomColorSource",
    "Rect",
    "ScatterPlot",
    "ScatterPlotError",
    "Series",
    "Text",
    "load_settings_file",
    "render",
    "resolve_settings",
    "to_svg_markup",
    "write_svg",
]
