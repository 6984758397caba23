from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
import math
from numbers import Real
from typing import Any, Mapping, Protocol

import numpy as np

from luvatrix_scatter.errors import InvalidSeries


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Series:
    x: np.ndarray
    y: np.ndarray
    color: str
    fill: bool = False
    point_size: float | None = None

    def __len__(self) -> int:
        return int(self.x.size)


class ColorSource(Protocol):
    def next_color(self) -> str:
        ...


class RandomColorSource:
    """Uniform draws over the 24-bit color space, formatted ``#rrggbb``."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def next_color(self) -> str:
        value = int(self._rng.integers(0, 0xFFFFFF))
        return f"#{value:06x}"


_DEFAULT_COLOR_SOURCE = RandomColorSource()


def random_hex_color() -> str:
    return _DEFAULT_COLOR_SOURCE.next_color()


def validate_series_list(raw_list: Any, *, color_source: ColorSource | None = None) -> list[Series]:
    if not isinstance(raw_list, (list, tuple)):
        raise InvalidSeries(f"series list must be a list or tuple, got {type(raw_list).__name__}")
    verified: list[Series] = []
    for index, raw in enumerate(raw_list):
        try:
            verified.append(validate_series(raw, color_source=color_source))
        except InvalidSeries as exc:
            raise InvalidSeries(f"series {index}: {exc}") from exc
    return verified


def validate_series(raw: Any, *, color_source: ColorSource | None = None) -> Series:
    """Check one series and fill in its fallback color and fill policy.

    ``raw`` is a mapping with ``x`` and ``y`` (plus optional ``color``, ``fill`` and ``pointSize``)
    or a :class:`Series`, which is checked the same way and keeps its color.
    """
    if isinstance(raw, Series):
        raw = {"x": raw.x, "y": raw.y, "color": raw.color, "fill": raw.fill, "pointSize": raw.point_size}
    if not isinstance(raw, Mapping):
        raise InvalidSeries(f"series must be a mapping with x and y, got {type(raw).__name__}")
    if raw.get("x") is None or raw.get("y") is None:
        raise InvalidSeries("x and y values are required")

    x_arr = _coerce_1d_numeric(raw["x"], label="x")
    y_arr = _coerce_1d_numeric(raw["y"], label="y")
    if x_arr.shape != y_arr.shape:
        raise InvalidSeries(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    fill = raw.get("fill") is True
    color = raw.get("color")
    if not isinstance(color, str) or not color:
        color = (color_source or _DEFAULT_COLOR_SOURCE).next_color()

    return Series(x=x_arr, y=y_arr, color=color, fill=fill, point_size=_point_size(raw))


def _point_size(raw: Mapping[str, Any]) -> float | None:
    value = raw.get("pointSize", raw.get("point_size"))
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSeries(f"pointSize must be a positive number, got {value!r}")
    # 0 means "use the settings default", like any other falsy option.
    if not value:
        return None
    if value < 0 or not math.isfinite(value):
        raise InvalidSeries(f"pointSize must be a positive number, got {value!r}")
    return float(value)


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise InvalidSeries(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _require_finite(tensor.to(torch.float64).numpy().copy(), label=label)

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise InvalidSeries(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise InvalidSeries(f"{label} must be a sequence of numbers, got {type(value).__name__}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return _require_finite(arr.astype(np.float64), label=label)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if isinstance(raw, bool) or not isinstance(raw, (Real, Decimal)):
            raise InvalidSeries(f"{label} contains non-numeric value at index {i}: {raw!r}")
        out[i] = float(raw)
    return _require_finite(out, label=label)


def _require_finite(arr: np.ndarray, *, label: str) -> np.ndarray:
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        raise InvalidSeries(f"{label} contains non-finite value at index {int(bad[0])}")
    return arr
