# folio/line_styles.py
"""Catalog of separator line styles and the "themed" sentinel lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

THEMED = "themed"
DEFAULT_LINE_ID = "classic-solid"


@dataclass(frozen=True)
class CssLine:
    """A line drawn with a CSS border pattern."""

    pattern: str  # "solid" | "dashed" | "dotted" | "shadow"


@dataclass(frozen=True)
class VectorLine:
    """A line drawn from an SVG clipart strip."""

    src: str
    repeat: bool = False


LineKind = Union[CssLine, VectorLine]


@dataclass(frozen=True)
class LineStyle:
    id: str
    name: str
    kind: LineKind
    theme_tags: Tuple[str, ...] = ()
    color_customizable: bool = True
    default_color: Optional[str] = None
    weight: Optional[str] = None  # "light" | "regular" | "bold"


LINE_STYLES: Tuple[LineStyle, ...] = (
    LineStyle("classic-solid", "Classic Solid", CssLine("solid"),
              ("Default", "Magazine", "Storybook"), weight="regular"),
    LineStyle("classic-dashed", "Classic Dashed", CssLine("dashed"),
              ("Default", "Magazine", "Storybook"), weight="light"),
    LineStyle("classic-dotted", "Classic Dotted", CssLine("dotted"),
              ("Default", "Magazine", "Storybook"), weight="light"),
    LineStyle("shadow", "Shadow Line", CssLine("shadow"),
              ("Magazine", "Arcade"), weight="bold"),
    LineStyle("hearts", "Hearts", VectorLine("/horizontal-lines/hearts.svg", repeat=True),
              ("Valentine's Day",), default_color="#ef4444"),
    LineStyle("stars", "Stars", VectorLine("/horizontal-lines/stars.svg", repeat=True),
              ("Galaxy Mission", "Hollywood"), default_color="#fbbf24"),
    LineStyle("patriotic-flags", "Patriotic Flags",
              VectorLine("/horizontal-lines/patriotic-flags.svg", repeat=True),
              ("Patriotic",), color_customizable=False, default_color="#b22234"),
    LineStyle("clover", "Clover", VectorLine("/horizontal-lines/clover.svg", repeat=True),
              ("St. Patrick's Day",), color_customizable=False, default_color="#16a34a"),
    LineStyle("snowflakes", "Snowflakes", VectorLine("/horizontal-lines/snowflakes.svg", repeat=True),
              ("Winter Holiday", "Christmas"), color_customizable=False, default_color="#ffffff"),
    LineStyle("pumpkin", "Pumpkin", VectorLine("/horizontal-lines/pumpkin.svg", repeat=True),
              ("Halloween", "Thanksgiving"), color_customizable=False, default_color="#ea580c"),
    LineStyle("comic-halftone", "Comic Halftone",
              VectorLine("/horizontal-lines/comic-halftone.svg", repeat=True),
              ("Comic Boom",), color_customizable=False, default_color="#7c3aed"),
    LineStyle("arcade-pixel", "Arcade Pixel", VectorLine("/horizontal-lines/arcade-pixel.svg", repeat=True),
              ("Arcade", "Galaxy Mission"), color_customizable=False, default_color="#08f7fe"),
)


def find_line_style(line_id: str, catalog: Sequence[LineStyle] = LINE_STYLES) -> Optional[LineStyle]:
    for style in catalog:
        if style.id == line_id:
            return style
    return None


def _default_style(catalog: Sequence[LineStyle]) -> LineStyle:
    found = find_line_style(DEFAULT_LINE_ID, catalog)
    if found is not None:
        return found
    if catalog:
        return catalog[0]
    return LINE_STYLES[0]


def resolve_themed_line(theme_name: str, catalog: Sequence[LineStyle] = LINE_STYLES) -> LineStyle:
    """Pick a line for the "themed" sentinel.

    Prefer a repeatable vector line tagged with the theme, then any tagged
    line, then the classic solid default.
    """
    candidates = [s for s in catalog if theme_name in s.theme_tags]
    for c in candidates:
        if isinstance(c.kind, VectorLine) and c.kind.repeat:
            return c
    if candidates:
        return candidates[0]
    return _default_style(catalog)


def resolve_line_style(ref: str, theme_name: str, catalog: Sequence[LineStyle] = LINE_STYLES) -> LineStyle:
    """Resolve a descriptor's line reference; unknown ids degrade to classic solid."""
    if ref == THEMED:
        return resolve_themed_line(theme_name, catalog)
    found = find_line_style(ref, catalog)
    if found is None:
        return _default_style(catalog)
    return found


def stroke_for(style: LineStyle) -> str:
    kind = style.kind
    if isinstance(kind, VectorLine):
        return "clipart"
    if isinstance(kind, CssLine):
        return kind.pattern
    raise TypeError(f"unsupported line kind: {type(kind).__name__}")


def clipart_src_for(style: LineStyle) -> Optional[str]:
    kind = style.kind
    if isinstance(kind, VectorLine):
        return kind.src
    if isinstance(kind, CssLine):
        return None
    raise TypeError(f"unsupported line kind: {type(kind).__name__}")


__all__ = [
    "CssLine",
    "DEFAULT_LINE_ID",
    "LINE_STYLES",
    "LineKind",
    "LineStyle",
    "THEMED",
    "VectorLine",
    "clipart_src_for",
    "find_line_style",
    "resolve_line_style",
    "resolve_themed_line",
    "stroke_for",
]
