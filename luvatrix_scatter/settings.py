from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import math
from numbers import Integral, Real
from pathlib import Path
import tomllib
from typing import Any, Mapping

from luvatrix_scatter.errors import InvalidSettings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotSettings:
    font: str = "SourceSansPro-Regular"
    font_size: float = 16
    width: float = 700
    height: float = 560
    x_label: str = "x axis"
    y_label: str = "y axis"
    grid: bool = False
    # Extent seeds, not hard limits: data outside them still widens the axes.
    x_min: float = 0
    x_max: float = 0
    y_min: float = 0
    y_max: float = 0
    point_size: float = 2
    x_decimal_places: int = 0
    y_decimal_places: int = 0
    graph_axis_marks_interval: int = 6
    graph_axis_marks_thickness: float = 2
    graph_frame_thickness: float = 2
    graph_frame_setback: float = 4
    bigger_marks: bool = True
    smaller_marks: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {SURFACE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


DEFAULT_SETTINGS = PlotSettings()

# Input keys as callers write them, keyed by field name.
SURFACE_KEYS: dict[str, str] = {
    "font": "font",
    "font_size": "fontSize",
    "width": "width",
    "height": "height",
    "x_label": "xLabel",
    "y_label": "yLabel",
    "grid": "grid",
    "x_min": "xMin",
    "x_max": "xMax",
    "y_min": "yMin",
    "y_max": "yMax",
    "point_size": "pointSize",
    "x_decimal_places": "xDecimalPlaces",
    "y_decimal_places": "yDecimalPlaces",
    "graph_axis_marks_interval": "graphAxisMarksInterval",
    "graph_axis_marks_thickness": "graphAxisMarksThickness",
    "graph_frame_thickness": "graphFrameThickness",
    "graph_frame_setback": "graphFrameSetback",
    "bigger_marks": "biggerMarks",
    "smaller_marks": "smallerMarks",
}

_INTEGER_FIELDS = frozenset({"x_decimal_places", "y_decimal_places", "graph_axis_marks_interval"})
# Axis seeds are the only numbers allowed to go negative.
_SIGNED_FIELDS = frozenset({"x_min", "x_max", "y_min", "y_max"})


def resolve_settings(
    raw: Mapping[str, Any] | PlotSettings | None = None,
    *,
    defaults: PlotSettings = DEFAULT_SETTINGS,
) -> PlotSettings:
    """Merge caller settings over ``defaults`` one option at a time.

    Options that are missing or falsy (``None``, ``0``, ``False``, ``""``) take the default value, so
    an explicit zero or ``False`` cannot override a non-zero/``True`` default. Truthy values must share
    the default's type (string, flag or number). Unknown keys are ignored.
    """
    if raw is None:
        return defaults
    if isinstance(raw, PlotSettings):
        raw = raw.as_dict()
    if not isinstance(raw, Mapping):
        raise InvalidSettings(f"settings must be a mapping, got {type(raw).__name__}")

    known = set(SURFACE_KEYS) | set(SURFACE_KEYS.values())
    ignored = sorted(str(k) for k in raw if k not in known)
    if ignored:
        LOGGER.debug("ignoring unrecognized plot settings: %s", ", ".join(ignored))

    resolved: dict[str, Any] = {}
    for f in fields(defaults):
        default = getattr(defaults, f.name)
        value = _lookup(raw, f.name)
        if _is_unset(value):
            resolved[f.name] = default
            continue
        resolved[f.name] = _check_value(f.name, value, default)
    return replace(defaults, **resolved)


def load_settings_file(path: str | Path) -> PlotSettings:
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"settings file not found: {settings_path}")
    with settings_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidSettings(f"malformed settings file {settings_path}: {exc}") from exc
    table = raw.get("plot", raw)
    if not isinstance(table, dict):
        raise InvalidSettings(f"[plot] in {settings_path} must be a table")
    return resolve_settings(table)


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    surface = SURFACE_KEYS[name]
    if surface in raw:
        return raw[surface]
    return raw.get(name)


def _check_value(name: str, value: Any, default: Any) -> Any:
    key = SURFACE_KEYS[name]
    kind = _kind(default)
    if _kind(value) != kind:
        raise InvalidSettings(
            f"invalid settings: {key} must be a {kind}, got {type(value).__name__}"
        )
    if kind != "number":
        return value
    if not math.isfinite(value):
        raise InvalidSettings(f"invalid settings: {key} must be finite, got {value!r}")
    if name in _INTEGER_FIELDS:
        if not (isinstance(value, Integral) or float(value).is_integer()):
            raise InvalidSettings(f"invalid settings: {key} must be a whole number, got {value!r}")
        value = int(value)
    else:
        value = float(value) if not isinstance(value, Integral) else int(value)
    if value < 0 and name not in _SIGNED_FIELDS:
        raise InvalidSettings(f"invalid settings: {key} must be >= 0, got {value!r}")
    return value


def _is_unset(value: Any) -> bool:
    # Only scalars can be "empty"; containers fall through to the type check.
    if value is None:
        return True
    return isinstance(value, (bool, str, Real)) and not value


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "flag"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Real):
        return "number"
    return type(value).__name__
