# folio/overrides.py
"""Track which calendar style values are user-pinned vs theme-derived.

The override map is a plain dict (field name -> value). A concrete
(non-None) entry pins that field; absent or None entries track the live
derivation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .model import SURFACE_STYLE_FIELDS, DerivedSurfaceStyle

Overrides = Dict[str, Any]


@dataclass(frozen=True)
class MergeResult:
    effective: DerivedSurfaceStyle
    overrides: Overrides
    cleared: Tuple[str, ...] = ()


def merge_overrides(
    derived_new: DerivedSurfaceStyle,
    derived_old: Optional[DerivedSurfaceStyle],
    overrides: Optional[Mapping[str, Any]],
) -> MergeResult:
    """Overlay still-pinned overrides on the new derivation.

    With `derived_old` given (a theme change), overrides equal to what the old
    theme derived are cleared. Pass None when the theme did not change.
    Keys that are not style fields are kept but never applied.
    """
    kept: Overrides = dict(overrides or {})
    cleared = []

    if derived_old is not None:
        old = derived_old.as_dict()
        for name in list(kept):
            value = kept[name]
            if value is None or name not in old:
                continue
            if value == old[name]:
                del kept[name]
                cleared.append(name)

    applied = {k: v for k, v in kept.items() if k in SURFACE_STYLE_FIELDS and v is not None}
    effective = replace(derived_new, **applied) if applied else derived_new
    return MergeResult(effective=effective, overrides=kept, cleared=tuple(cleared))


def pin_override(overrides: Mapping[str, Any], name: str, value: Any) -> Overrides:
    if name not in SURFACE_STYLE_FIELDS:
        raise KeyError(f"unknown style field: {name}")
    out = dict(overrides)
    out[name] = value
    return out


def unpin_override(overrides: Mapping[str, Any], name: str) -> Overrides:
    out = dict(overrides)
    out.pop(name, None)
    return out


def overrides_from_obj(obj: Any, *, where: str = "overrides") -> Overrides:
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected a JSON object, got {type(obj).__name__}")
    out: Overrides = {}
    for k, v in obj.items():
        if not isinstance(k, str):
            raise ValueError(f"{where}: keys must be strings")
        if v is not None and not isinstance(v, (str, int, float)):
            raise ValueError(f"{where}: value for {k!r} must be a string, number or null")
        out[k] = v
    return out


def load_overrides(path: Path) -> Overrides:
    try:
        obj = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON: {e}") from e
    return overrides_from_obj(obj, where=str(path))


def dump_overrides(overrides: Mapping[str, Any]) -> str:
    return json.dumps(dict(overrides), indent=2, sort_keys=True) + "\n"


__all__ = [
    "MergeResult",
    "Overrides",
    "dump_overrides",
    "load_overrides",
    "merge_overrides",
    "overrides_from_obj",
    "pin_override",
    "unpin_override",
]
