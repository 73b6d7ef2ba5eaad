# folio/surface_style.py
"""Derive calendar surface styles from a newsletter theme.

Generic derivation runs for every theme. A small named-exception table is
consulted afterwards for themes that ship a hand-authored palette.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple, Union

from .color import contrast_ratio, ensure_contrast, is_hex_color, mix, normalize_hex, relative_luminance, with_alpha
from .config import DEFAULT_MIN_CONTRAST
from .model import DerivedSurfaceStyle, Theme

PAGE_BG_FALLBACK = "#ffffff"
SECTION_BG_FALLBACK = "#ffffff"
CONTENT_TEXT_FALLBACK = "#111827"
BORDER_FALLBACK = "#d1d5db"
ACCENT_FALLBACK = "#3b82f6"

DARK_LUMINANCE = 0.35
WEEKDAY_MIN_CONTRAST = 4.0
WEEKDAY_SHIFT = 0.15
CELL_DISTINCT_CONTRAST = 1.2


def _usable(value: Optional[str]) -> Optional[str]:
    if not value or value == "transparent":
        return None
    return value


def _hex_or(value: Optional[str], fallback: str) -> str:
    return value if is_hex_color(value) else fallback


def _canonical(value: Any) -> Any:
    # Analyzable hex becomes lowercase #rrggbb; anything else passes through.
    if isinstance(value, str):
        return normalize_hex(value, value)
    return value


def accent_color(theme: Theme) -> str:
    """First hex color among title, heading background, section border, heading text."""
    candidates = (
        theme.title.color,
        theme.heading.background_color,
        theme.section.border_color,
        theme.heading.color,
    )
    for c in candidates:
        if is_hex_color(c):
            return str(c)
    return ACCENT_FALLBACK


def page_background(theme: Theme) -> str:
    return _hex_or(_usable(theme.page.background_color), PAGE_BG_FALLBACK)


def is_dark_theme(theme: Theme) -> bool:
    return relative_luminance(page_background(theme)) < DARK_LUMINANCE


# Named exception table entries.


@dataclass(frozen=True)
class ThemeRef:
    """Theme attribute, or `fallback` when the attribute is unset."""

    surface: str
    attr: str
    fallback: "Source" = None


@dataclass(frozen=True)
class FieldRef:
    """Value of another (already resolved) derived field."""

    name: str


@dataclass(frozen=True)
class Contrasted:
    color: "Source"
    against: "Source"


Source = Union[None, str, float, ThemeRef, FieldRef, Contrasted]

BOARD = "#1f362b"
WOOD = "#C8A978"

NAMED_EXCEPTIONS: Dict[str, Tuple[str, Tuple[Tuple[str, Source], ...]]] = {
    "Default": (
        "chalkboard",
        (
            ("header_font_family", ThemeRef("heading", "font_family", FieldRef("header_font_family"))),
            ("header_color", ThemeRef("heading", "color", "#F8F9F3")),
            ("header_background_color", ThemeRef("heading", "background_color", WOOD)),
            ("weekday_background_color", ThemeRef("heading", "background_color", WOOD)),
            ("weekday_color", ThemeRef("heading", "color", "#1F3D2E")),
            ("weekday_font_family", ThemeRef("heading", "font_family", FieldRef("weekday_font_family"))),
            ("cell_background_color", BOARD),
            ("cell_text_color", Contrasted("#F4F6F3", BOARD)),
            ("cell_border_color", "#ffffff22"),
            ("weekend_cell_background_color", "#2a493a"),
            ("weekend_cell_text_color", FieldRef("cell_text_color")),
            ("non_current_month_cell_text_color", "#B8C4BC"),
            ("non_current_month_cell_background_color", BOARD),
            ("non_current_month_opacity", 0.35),
        ),
    ),
}


def exception_name(theme: Theme) -> Optional[str]:
    entry = NAMED_EXCEPTIONS.get(theme.name)
    return entry[0] if entry else None


def _resolve(src: Source, theme: Theme, current: Dict[str, Any], min_contrast: float) -> Any:
    if isinstance(src, ThemeRef):
        value = getattr(theme.surface(src.surface), src.attr)
        if value:
            return value
        return _resolve(src.fallback, theme, current, min_contrast)
    if isinstance(src, FieldRef):
        return current.get(src.name)
    if isinstance(src, Contrasted):
        color = _resolve(src.color, theme, current, min_contrast)
        against = _resolve(src.against, theme, current, min_contrast)
        return ensure_contrast(color, against, min_contrast)
    return src


def _apply_exception(
    theme: Theme, style: Dict[str, Any], min_contrast: float
) -> Dict[str, Any]:
    entry = NAMED_EXCEPTIONS.get(theme.name)
    if entry is None:
        return style
    out = dict(style)
    for field_name, src in entry[1]:
        out[field_name] = _resolve(src, theme, out, min_contrast)
    return out


def derive_surface_style(theme: Theme, *, min_contrast: float = DEFAULT_MIN_CONTRAST) -> DerivedSurfaceStyle:
    """Compute calendar defaults for `theme`.

    Every text/background pair that is contrast-enforced reaches
    `min_contrast` when both colors are analyzable and the target is reachable.
    """
    page_bg = page_background(theme)
    section_bg = _hex_or(_usable(theme.section.background_color), SECTION_BG_FALLBACK)
    content_text = _hex_or(_usable(theme.section.color), CONTENT_TEXT_FALLBACK)
    border = _usable(theme.section.border_color) or BORDER_FALLBACK
    accent = accent_color(theme)
    dark = relative_luminance(page_bg) < DARK_LUMINANCE

    header_color = _usable(theme.title.color)
    if not is_hex_color(header_color):
        header_color = accent
    header_color = ensure_contrast(str(header_color), page_bg, min_contrast)

    weekday_bg = _usable(theme.heading.background_color)
    if not is_hex_color(weekday_bg):
        weekday_bg = mix(accent, page_bg, 0.8)
    weekday_bg = str(weekday_bg)
    if contrast_ratio(content_text, weekday_bg) < WEEKDAY_MIN_CONTRAST:
        weekday_bg = mix(weekday_bg, page_bg, WEEKDAY_SHIFT)

    weekday_color = _usable(theme.heading.color) or header_color
    weekday_color = ensure_contrast(weekday_color, weekday_bg, min_contrast)

    cell_bg = section_bg
    if contrast_ratio(section_bg, page_bg) < CELL_DISTINCT_CONTRAST:
        cell_bg = mix(page_bg, "#ffffff", 0.1) if dark else "#ffffff"
    cell_text = ensure_contrast(content_text, cell_bg, min_contrast)

    weekend_bg = with_alpha(accent, "30" if dark else "20") or ACCENT_FALLBACK + "20"

    style: Dict[str, Any] = {
        "header_font_family": theme.title.font_family,
        "header_color": header_color,
        "header_background_color": None,
        "weekday_font_family": theme.heading.font_family or theme.title.font_family,
        "weekday_background_color": weekday_bg,
        "weekday_color": weekday_color,
        "cell_font_family": theme.section.font_family,
        "cell_background_color": cell_bg,
        "cell_text_color": cell_text,
        "cell_border_color": border,
        "weekend_cell_background_color": weekend_bg,
        "weekend_cell_text_color": cell_text,
        "non_current_month_cell_text_color": "#94a3b8" if dark else "#6b7280",
        "non_current_month_cell_background_color": cell_bg,
        "non_current_month_opacity": 0.5,
    }
    style = _apply_exception(theme, style, min_contrast)
    known = {f.name for f in fields(DerivedSurfaceStyle)}
    return DerivedSurfaceStyle(**{k: _canonical(v) for k, v in style.items() if k in known})


__all__ = [
    "ACCENT_FALLBACK",
    "Contrasted",
    "FieldRef",
    "NAMED_EXCEPTIONS",
    "ThemeRef",
    "accent_color",
    "derive_surface_style",
    "exception_name",
    "is_dark_theme",
    "page_background",
]
