# folio/config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_MIN_CONTRAST = 4.5
MIN_CONTRAST_ENV = "FOLIO_MIN_CONTRAST"


@dataclass(frozen=True)
class CanvasGeometry:
    """Letter-size page at 96 dpi plus the estimates used to place separators."""

    width: float = 816.0  # 8.5in
    height: float = 1056.0  # 11in
    padding: float = 32.0
    title_height: float = 48.0
    date_height: float = 24.0
    row_gap: float = 24.0
    slot_height: float = 120.0
    between_offset: float = 200.0
    footer_margin: float = 80.0
    min_line_width: float = 8.0
    line_thickness: int = 2
    vector_height: float = 24.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def title_end(self) -> float:
        return self.padding + self.title_height

    @property
    def date_end(self) -> float:
        return self.title_end + self.row_gap + self.date_height

    @property
    def slots_start(self) -> float:
        return self.date_end + self.row_gap


DEFAULT_GEOMETRY = CanvasGeometry()


def geometry_from_mapping(obj: Dict[str, Any], base: CanvasGeometry = DEFAULT_GEOMETRY) -> CanvasGeometry:
    if not isinstance(obj, dict):
        raise TypeError(f"geometry must be a JSON object, got {type(obj).__name__}")
    known = {f.name: f for f in fields(CanvasGeometry)}
    changes: Dict[str, Any] = {}
    for k, v in obj.items():
        if k not in known:
            raise ValueError(f"unknown geometry key: {k!r}")
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"geometry key {k!r} must be a number, got {v!r}")
        if k == "line_thickness":
            changes[k] = int(v)
        else:
            changes[k] = float(v)
    return replace(base, **changes)


def load_geometry(path: Path) -> CanvasGeometry:
    """Read a JSON object of CanvasGeometry overrides."""
    try:
        obj = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return geometry_from_mapping(obj)


def min_contrast_from_env(default: float = DEFAULT_MIN_CONTRAST) -> float:
    raw: Optional[str] = os.environ.get(MIN_CONTRAST_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{MIN_CONTRAST_ENV} must be a number, got {raw!r}") from e
    if value < 1.0:
        raise ValueError(f"{MIN_CONTRAST_ENV} must be >= 1.0, got {value}")
    return value


__all__ = [
    "CanvasGeometry",
    "DEFAULT_GEOMETRY",
    "DEFAULT_MIN_CONTRAST",
    "MIN_CONTRAST_ENV",
    "geometry_from_mapping",
    "load_geometry",
    "min_contrast_from_env",
]
