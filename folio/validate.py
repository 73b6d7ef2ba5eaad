"""Catalog validation helpers (library-facing)."""

from __future__ import annotations

from typing import List, Sequence

from .color import is_hex_color
from .layouts import AFTER_SLOT, PLACEMENTS, TEMPLATES, LayoutTemplate, grid_cells, slot_region
from .line_styles import LINE_STYLES, THEMED, LineStyle, VectorLine
from .model import ALIGNMENTS, Theme
from .themes import THEMES


class CatalogValidationError(ValueError):
    """Raised when a built-in or user-supplied catalog is inconsistent."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def validate_templates(
    templates: Sequence[LayoutTemplate] = TEMPLATES,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
) -> List[str]:
    errs: List[str] = []
    line_ids = {s.id for s in line_styles}
    seen_ids = set()

    for t in templates:
        label = f"template {t.id}"
        _require(t.id not in seen_ids, f"{label}: duplicate id", errs)
        seen_ids.add(t.id)
        _require(t.slots >= 1, f"{label}: slots must be >= 1", errs)
        _require(len(t.variants) >= 1, f"{label}: needs at least one variant", errs)
        _require(t.kind in ("newsletter", "calendar"), f"{label}: unknown kind {t.kind!r}", errs)

        try:
            cells = grid_cells(t)
        except ValueError as e:
            errs.append(str(e))
            cells = {}
        for i in range(t.slots):
            _require(slot_region(i) in cells, f"{label}: grid areas missing region {slot_region(i)}", errs)
        extra = sorted(r for r in cells if r.startswith("sec") and r not in {slot_region(i) for i in range(t.slots)})
        _require(not extra, f"{label}: grid areas name unknown regions {extra}", errs)

        variant_names = set()
        for v in t.variants:
            vlabel = f"{label} variant {v.name}"
            _require(v.name not in variant_names, f"{vlabel}: duplicate variant name", errs)
            variant_names.add(v.name)
            _require(":" not in v.name, f"{vlabel}: name must not contain ':'", errs)
            for a in (v.title_align, v.date_align):
                _require(a is None or a in ALIGNMENTS, f"{vlabel}: bad alignment {a!r}", errs)
            if v.size_targets is not None:
                _require(
                    len(v.size_targets) == t.slots,
                    f"{vlabel}: size_targets has {len(v.size_targets)} entries, expected {t.slots}",
                    errs,
                )
                _require(all(n > 0 for n in v.size_targets), f"{vlabel}: size_targets must be positive", errs)

            keys = set()
            for i, d in enumerate(v.decorations):
                dlabel = f"{vlabel} decorations[{i}]"
                _require(d.placement in PLACEMENTS, f"{dlabel}: unknown placement {d.placement!r}", errs)
                if d.placement == AFTER_SLOT:
                    _require(
                        d.slot_index is not None and 0 <= d.slot_index < t.slots,
                        f"{dlabel}: after-slot needs a slot_index in [0, {t.slots})",
                        errs,
                    )
                _require(
                    d.line_ref == THEMED or d.line_ref in line_ids,
                    f"{dlabel}: unknown line style {d.line_ref!r}",
                    errs,
                )
                key = (d.placement, d.slot_index)
                _require(key not in keys, f"{dlabel}: duplicate decoration key", errs)
                keys.add(key)
    return errs


def validate_line_styles(line_styles: Sequence[LineStyle] = LINE_STYLES) -> List[str]:
    errs: List[str] = []
    seen = set()
    for s in line_styles:
        _require(s.id not in seen, f"line style {s.id}: duplicate id", errs)
        seen.add(s.id)
        _require(s.id != THEMED, f"line style {s.id}: id is reserved", errs)
        if s.default_color is not None:
            _require(is_hex_color(s.default_color), f"line style {s.id}: default_color must be hex", errs)
        if isinstance(s.kind, VectorLine):
            _require(bool(s.kind.src), f"line style {s.id}: vector line needs a src", errs)
    return errs


def validate_themes(themes: Sequence[Theme] = THEMES) -> List[str]:
    errs: List[str] = []
    seen = set()
    for t in themes:
        _require(t.name not in seen, f"theme {t.name}: duplicate name", errs)
        seen.add(t.name)
        bg = t.page.background_color
        _require(bg is None or is_hex_color(bg), f"theme {t.name}: page background must be hex", errs)
        for surface in ("title", "date"):
            align = t.surface(surface).align
            _require(align is None or align in ALIGNMENTS, f"theme {t.name}: bad {surface} alignment {align!r}", errs)
    return errs


def validate_catalog(
    templates: Sequence[LayoutTemplate] = TEMPLATES,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
    themes: Sequence[Theme] = THEMES,
) -> List[str]:
    """Return all catalog errors (empty list when consistent)."""
    return validate_templates(templates, line_styles) + validate_line_styles(line_styles) + validate_themes(themes)


def assert_valid_catalog(
    templates: Sequence[LayoutTemplate] = TEMPLATES,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
    themes: Sequence[Theme] = THEMES,
) -> None:
    errs = validate_catalog(templates, line_styles, themes)
    if errs:
        raise CatalogValidationError(errs[0])


__all__ = [
    "CatalogValidationError",
    "assert_valid_catalog",
    "validate_catalog",
    "validate_line_styles",
    "validate_templates",
    "validate_themes",
]
