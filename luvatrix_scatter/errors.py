from __future__ import annotations


class ScatterPlotError(ValueError):
    """Base class for every failure raised while building a scatter plot."""


class InvalidSettings(ScatterPlotError):
    pass


class InvalidSeries(ScatterPlotError):
    pass


class DegenerateExtent(ScatterPlotError):
    """An axis extent has zero span, so the data-to-pixel scale is undefined."""
