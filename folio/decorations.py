# folio/decorations.py
"""Materialize a variant's separator descriptors into positioned elements.

Auto-generated elements are identified by a decoration key
(`templateId:variantName:placement:slotIndex`). Re-applying the same
template/variant finds the previous element under the same key and keeps its
identity and the attributes the user pinned.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_GEOMETRY, CanvasGeometry
from .layouts import (
    AFTER_DATE,
    AFTER_SLOT,
    AFTER_SLOTS,
    AFTER_TITLE,
    BEFORE_SLOTS,
    BETWEEN_SLOTS,
    DecorationDescriptor,
    LayoutTemplate,
    Variant,
)
from .line_styles import LINE_STYLES, LineStyle, VectorLine, clipart_src_for, resolve_line_style, stroke_for
from .model import DecorativeElement, Theme
from .util.stable_id import stable_hash

FALLBACK_LINE_COLOR = "#888888"

# Reposition tolerances (px).
MOVE_TOLERANCE = 5.0
WIDTH_TOLERANCE = 20.0


def decoration_key(template_id: str, variant_name: str, placement: str, slot_index: Optional[int] = None) -> str:
    slot = "" if slot_index is None else str(slot_index)
    return f"{template_id}:{variant_name}:{placement}:{slot}"


def parse_decoration_key(key: Optional[str]) -> Optional[Tuple[str, str, str, Optional[int]]]:
    """Split a decoration key; None if it has fewer than three parts."""
    if not key:
        return None
    parts = key.split(":")
    if len(parts) < 3:
        return None
    slot: Optional[int] = None
    if len(parts) > 3 and parts[3].strip():
        try:
            slot = int(parts[3])
        except ValueError:
            slot = None
    return parts[0], parts[1], parts[2], slot


def descriptor_key(template: LayoutTemplate, variant: Variant, d: DecorationDescriptor) -> str:
    return decoration_key(template.id, variant.name, d.placement, d.slot_index)


def element_id_for_key(key: str) -> str:
    return f"hline-{stable_hash(key)}"


def line_metrics(align: Optional[str], is_title: bool, geometry: CanvasGeometry = DEFAULT_GEOMETRY) -> Tuple[float, float]:
    """Return (x, width) for a line aligned within the content box."""
    cw = geometry.content_width
    floor = geometry.min_line_width
    short = max(floor, min(200.0, cw * 0.3))
    medium = max(floor, min(300.0, cw * 0.5))
    long_ = max(floor, min(400.0, cw * 0.7))

    if align == "left":
        width = long_ if is_title else medium
        return geometry.padding, width
    if align == "right":
        width = long_ if is_title else medium
        return geometry.padding + cw - width, width
    width = medium if is_title else short
    return geometry.padding + (cw - width) / 2, width


def placement_y(placement: str, slot_index: Optional[int], geometry: CanvasGeometry = DEFAULT_GEOMETRY) -> float:
    if placement == AFTER_DATE:
        return geometry.date_end - 4
    if placement == BEFORE_SLOTS:
        return geometry.slots_start - 8
    if placement == BETWEEN_SLOTS:
        return geometry.slots_start + geometry.between_offset
    if placement == AFTER_SLOTS:
        return geometry.height - geometry.padding - geometry.footer_margin
    if placement == AFTER_SLOT and slot_index is not None:
        return geometry.slots_start + (slot_index + 1) * geometry.slot_height + 8
    return geometry.title_end - 2


def anchor(
    placement: str,
    slot_index: Optional[int],
    variant: Variant,
    geometry: CanvasGeometry = DEFAULT_GEOMETRY,
) -> Tuple[float, float, float]:
    """(x, y, width) for a placement. Only title/date lines follow the variant alignment."""
    if placement == AFTER_DATE:
        x, width = line_metrics(variant.date_align or "center", False, geometry)
    elif placement in (BEFORE_SLOTS, BETWEEN_SLOTS, AFTER_SLOTS) or (placement == AFTER_SLOT and slot_index is not None):
        x, width = line_metrics("center", False, geometry)
    else:
        x, width = line_metrics(variant.title_align or "center", True, geometry)
    return x, placement_y(placement, slot_index, geometry), width


def line_color(style: LineStyle, theme: Theme) -> str:
    if style.default_color:
        return style.default_color
    if theme.section.border_color:
        return theme.section.border_color
    return FALLBACK_LINE_COLOR


def _index_previous(previous: Iterable[DecorativeElement]) -> Dict[str, DecorativeElement]:
    arena: Dict[str, DecorativeElement] = {}
    for el in previous:
        if el.auto_generated and el.decoration_key:
            arena.setdefault(el.decoration_key, el)
    return arena


def resolve_decorations(
    template: LayoutTemplate,
    variant: Variant,
    theme: Theme,
    previous: Iterable[DecorativeElement] = (),
    *,
    geometry: Optional[CanvasGeometry] = None,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
) -> List[DecorativeElement]:
    """One element per descriptor, in descriptor order.

    Descriptors whose key was already produced in this call are skipped.
    """
    geo = geometry or DEFAULT_GEOMETRY
    arena = _index_previous(previous)
    seen: set[str] = set()
    out: List[DecorativeElement] = []

    for d in variant.decorations:
        key = descriptor_key(template, variant, d)
        if key in seen:
            continue
        seen.add(key)

        style = resolve_line_style(d.line_ref, theme.name, line_styles)
        x, y, width = anchor(d.placement, d.slot_index, variant, geo)
        color = line_color(style, theme)

        prior = arena.get(key)
        if prior is not None:
            element_id = prior.id
            thickness = prior.thickness
            locked = prior.locked
            color_pinned = prior.color_pinned
            if color_pinned:
                color = prior.color
        else:
            element_id = element_id_for_key(key)
            thickness = geo.line_thickness
            locked = True
            color_pinned = False

        is_vector = isinstance(style.kind, VectorLine)
        out.append(
            DecorativeElement(
                id=element_id,
                x=x,
                y=y,
                width=width,
                height=geo.vector_height if is_vector else float(thickness),
                color=color,
                stroke=stroke_for(style),
                line_style_id=style.id,
                clipart_src=clipart_src_for(style),
                thickness=thickness,
                decoration_key=key,
                auto_generated=True,
                deletable=False,
                locked=locked,
                color_pinned=color_pinned,
            )
        )
    return out


def is_stale(element: DecorativeElement, template: LayoutTemplate, variant: Variant) -> bool:
    """True for auto-generated elements whose key names another template/variant."""
    if not element.auto_generated:
        return False
    parsed = parse_decoration_key(element.decoration_key)
    if parsed is None:
        return False
    template_id, variant_name, _, _ = parsed
    return template_id != template.id or variant_name != variant.name


def reposition_decorations(
    elements: Sequence[DecorativeElement],
    template: LayoutTemplate,
    variant: Variant,
    *,
    geometry: Optional[CanvasGeometry] = None,
) -> List[DecorativeElement]:
    """Snap auto-generated elements of this template/variant back to their anchors.

    Elements only move when off by more than MOVE_TOLERANCE in x/y or
    WIDTH_TOLERANCE in width. Others are returned as-is.
    """
    geo = geometry or DEFAULT_GEOMETRY
    out: List[DecorativeElement] = []
    for el in elements:
        parsed = parse_decoration_key(el.decoration_key) if el.auto_generated else None
        if parsed is None or is_stale(el, template, variant):
            out.append(el)
            continue
        _, _, placement, slot = parsed
        x, y, width = anchor(placement, slot, variant, geo)
        moved = (
            abs(el.x - x) > MOVE_TOLERANCE
            or abs(el.y - y) > MOVE_TOLERANCE
            or abs(el.width - width) > WIDTH_TOLERANCE
        )
        out.append(replace(el, x=x, y=y, width=width) if moved else el)
    return out


__all__ = [
    "FALLBACK_LINE_COLOR",
    "MOVE_TOLERANCE",
    "WIDTH_TOLERANCE",
    "anchor",
    "decoration_key",
    "descriptor_key",
    "element_id_for_key",
    "is_stale",
    "line_color",
    "line_metrics",
    "parse_decoration_key",
    "placement_y",
    "reposition_decorations",
    "resolve_decorations",
]
