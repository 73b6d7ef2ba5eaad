# folio/model.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class StyleAttributeSet:
    """Visual attributes for one surface; None means "inherit"."""

    color: Optional[str] = None
    background_color: Optional[str] = None
    font_family: Optional[str] = None
    border_color: Optional[str] = None
    align: Optional[str] = None  # "left" | "center" | "right"


@dataclass(frozen=True)
class Theme:
    """Immutable bundle of per-surface styles. Replace, never mutate."""

    name: str
    page: StyleAttributeSet = StyleAttributeSet()
    title: StyleAttributeSet = StyleAttributeSet()
    date: StyleAttributeSet = StyleAttributeSet()
    section: StyleAttributeSet = StyleAttributeSet()
    heading: StyleAttributeSet = StyleAttributeSet()

    def surface(self, name: str) -> StyleAttributeSet:
        if name not in ("page", "title", "date", "section", "heading"):
            raise KeyError(f"unknown theme surface: {name}")
        return getattr(self, name)

    def with_alignment(self, title_align: str, date_align: str) -> "Theme":
        return replace(
            self,
            title=replace(self.title, align=title_align),
            date=replace(self.date, align=date_align),
        )


@dataclass(frozen=True)
class ContentBlock:
    id: str
    title: str = ""
    body: str = ""


@dataclass(frozen=True)
class DecorativeElement:
    """A materialized separator line on the canvas.

    Auto-generated elements carry a decoration_key
    (`templateId:variantName:placement:slotIndex`) used to recognize the same
    logical decoration across re-applications.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    color: str
    stroke: str  # "solid" | "dashed" | "dotted" | "shadow" | "clipart"
    line_style_id: str = "classic-solid"
    clipart_src: Optional[str] = None
    thickness: int = 2
    decoration_key: Optional[str] = None
    auto_generated: bool = False
    deletable: bool = True
    locked: bool = False
    color_pinned: bool = False


@dataclass(frozen=True)
class DerivedSurfaceStyle:
    """Calendar surface style computed from a theme.

    Field names double as keys of the persisted override map.
    """

    header_font_family: Optional[str] = None
    header_color: Optional[str] = None
    header_background_color: Optional[str] = None
    weekday_font_family: Optional[str] = None
    weekday_background_color: Optional[str] = None
    weekday_color: Optional[str] = None
    cell_font_family: Optional[str] = None
    cell_background_color: Optional[str] = None
    cell_text_color: Optional[str] = None
    cell_border_color: Optional[str] = None
    weekend_cell_background_color: Optional[str] = None
    weekend_cell_text_color: Optional[str] = None
    non_current_month_cell_text_color: Optional[str] = None
    non_current_month_cell_background_color: Optional[str] = None
    non_current_month_opacity: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


SURFACE_STYLE_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(DerivedSurfaceStyle))


__all__ = [
    "ALIGNMENTS",
    "ContentBlock",
    "DecorativeElement",
    "DerivedSurfaceStyle",
    "SURFACE_STYLE_FIELDS",
    "StyleAttributeSet",
    "Theme",
]
