from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from luvatrix_scatter.errors import InvalidSeries


def load_series_file(path: str | Path) -> list[dict[str, Any]]:
    """Read raw series from JSON: a list of series objects or ``{"series": [...]}``.

    The result still has to go through ``validate_series_list``.
    """
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f"series file not found: {data_path}")
    try:
        raw = json.loads(data_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidSeries(f"malformed series file {data_path}: {exc}") from exc
    if isinstance(raw, dict):
        raw = raw.get("series")
    if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
        raise InvalidSeries(f"{data_path} must hold a list of series objects")
    return raw
