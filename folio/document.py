# folio/document.py
"""Whole-document snapshot and the layout/theme application flows.

Each flow reads a full Document and returns a complete replacement. Callers
apply one flow, observe its result, then apply the next.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .config import DEFAULT_MIN_CONTRAST, CanvasGeometry
from .decorations import resolve_decorations
from .layouts import TEMPLATES, LayoutTemplate, Variant, find_template, find_variant
from .line_styles import LINE_STYLES, LineStyle
from .model import ContentBlock, DecorativeElement, DerivedSurfaceStyle, StyleAttributeSet, Theme
from .overrides import merge_overrides, overrides_from_obj
from .reallocate import reallocate_content, seed_blocks
from .surface_style import derive_surface_style
from .themes import THEMES, find_theme


@dataclass(frozen=True)
class Document:
    title: str
    date: str
    blocks: Tuple[ContentBlock, ...]
    template_id: str
    variant_name: str
    theme: Theme
    decorations: Tuple[DecorativeElement, ...] = ()
    calendar_overrides: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ThemeApplication:
    document: Document
    effective: DerivedSurfaceStyle
    cleared: Tuple[str, ...] = ()


def current_layout(doc: Document, catalog: Sequence[LayoutTemplate] = TEMPLATES) -> Tuple[LayoutTemplate, Variant]:
    template = find_template(doc.template_id, catalog)
    return template, find_variant(template, doc.variant_name)


def _aligned(theme: Theme, variant: Variant) -> Theme:
    return theme.with_alignment(variant.title_align or "center", variant.date_align or "center")


def _redecorate(
    doc: Document,
    template: LayoutTemplate,
    variant: Variant,
    theme: Theme,
    geometry: Optional[CanvasGeometry],
    line_styles: Sequence[LineStyle],
) -> Tuple[DecorativeElement, ...]:
    manual = [e for e in doc.decorations if not e.auto_generated]
    auto = resolve_decorations(template, variant, theme, doc.decorations, geometry=geometry, line_styles=line_styles)
    return tuple(manual + auto)


def new_document(
    title: str = "Class Newsletter",
    date: str = "",
    *,
    template_id: Optional[str] = None,
    variant_name: Optional[str] = None,
    theme_name: Optional[str] = None,
    geometry: Optional[CanvasGeometry] = None,
) -> Document:
    """Fresh document with starter blocks sized to the chosen template."""
    template = find_template(template_id)
    variant = find_variant(template, variant_name)
    theme = _aligned(find_theme(theme_name), variant)
    doc = Document(
        title=title,
        date=date,
        blocks=tuple(seed_blocks(template.slots)),
        template_id=template.id,
        variant_name=variant.name,
        theme=theme,
    )
    return replace(doc, decorations=_redecorate(doc, template, variant, theme, geometry, LINE_STYLES))


def apply_layout(
    doc: Document,
    template_id: str,
    variant_name: Optional[str] = None,
    *,
    geometry: Optional[CanvasGeometry] = None,
    catalog: Sequence[LayoutTemplate] = TEMPLATES,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
) -> Document:
    """Switch template/variant: reorder blocks, rebuild separators, align title/date."""
    template = find_template(template_id, catalog)
    variant = find_variant(template, variant_name)
    theme = _aligned(doc.theme, variant)
    blocks = tuple(reallocate_content(doc.blocks, variant.size_targets))
    decorations = _redecorate(doc, template, variant, theme, geometry, line_styles)
    return replace(
        doc,
        template_id=template.id,
        variant_name=variant.name,
        theme=theme,
        blocks=blocks,
        decorations=decorations,
    )


def apply_theme(
    doc: Document,
    theme: Union[Theme, str],
    *,
    geometry: Optional[CanvasGeometry] = None,
    min_contrast: float = DEFAULT_MIN_CONTRAST,
    themes: Sequence[Theme] = THEMES,
    catalog: Sequence[LayoutTemplate] = TEMPLATES,
    line_styles: Sequence[LineStyle] = LINE_STYLES,
) -> ThemeApplication:
    """Switch theme: refresh theme-linked calendar overrides and separators."""
    new_theme = find_theme(theme, themes) if isinstance(theme, str) else theme
    template, variant = current_layout(doc, catalog)
    new_theme = _aligned(new_theme, variant)

    derived_old = derive_surface_style(doc.theme, min_contrast=min_contrast)
    derived_new = derive_surface_style(new_theme, min_contrast=min_contrast)
    merged = merge_overrides(derived_new, derived_old, doc.calendar_overrides)

    decorations = _redecorate(doc, template, variant, new_theme, geometry, line_styles)
    out = replace(doc, theme=new_theme, decorations=decorations, calendar_overrides=merged.overrides)
    return ThemeApplication(document=out, effective=merged.effective, cleared=merged.cleared)


def effective_calendar_style(doc: Document, *, min_contrast: float = DEFAULT_MIN_CONTRAST) -> DerivedSurfaceStyle:
    derived = derive_surface_style(doc.theme, min_contrast=min_contrast)
    return merge_overrides(derived, None, doc.calendar_overrides).effective


# Snapshot (de)serialization.

_SURFACES = ("page", "title", "date", "section", "heading")


def _theme_to_dict(theme: Theme) -> Dict[str, Any]:
    out: Dict[str, Any] = {"name": theme.name}
    for s in _SURFACES:
        attrs = asdict(getattr(theme, s))
        out[s] = {k: v for k, v in attrs.items() if v is not None}
    return out


def _theme_from_obj(obj: Any) -> Theme:
    if isinstance(obj, str):
        return find_theme(obj)
    if not isinstance(obj, dict):
        raise ValueError("theme: expected a name or an object")
    name = obj.get("name")
    if not isinstance(name, str):
        raise ValueError("theme.name: expected a string")
    allowed = {f.name for f in fields(StyleAttributeSet)}
    surfaces: Dict[str, StyleAttributeSet] = {}
    for s in _SURFACES:
        raw = obj.get(s, {})
        if not isinstance(raw, dict):
            raise ValueError(f"theme.{s}: expected an object")
        unknown = sorted(set(raw) - allowed)
        if unknown:
            raise ValueError(f"theme.{s}: unknown keys {unknown}")
        surfaces[s] = StyleAttributeSet(**raw)
    return Theme(name=name, **surfaces)


def _element_from_obj(obj: Any, i: int) -> DecorativeElement:
    if not isinstance(obj, dict):
        raise ValueError(f"decorations[{i}]: expected an object")
    allowed = {f.name for f in fields(DecorativeElement)}
    unknown = sorted(set(obj) - allowed)
    if unknown:
        raise ValueError(f"decorations[{i}]: unknown keys {unknown}")
    try:
        return DecorativeElement(**obj)
    except TypeError as e:
        raise ValueError(f"decorations[{i}]: {e}") from e


def _block_from_obj(obj: Any, i: int) -> ContentBlock:
    if not isinstance(obj, dict):
        raise ValueError(f"blocks[{i}]: expected an object")
    block_id = obj.get("id")
    if not isinstance(block_id, str) or not block_id:
        raise ValueError(f"blocks[{i}].id: expected a non-empty string")
    return ContentBlock(id=block_id, title=str(obj.get("title", "")), body=str(obj.get("body", "")))


def document_to_dict(doc: Document) -> Dict[str, Any]:
    return {
        "title": doc.title,
        "date": doc.date,
        "template_id": doc.template_id,
        "variant_name": doc.variant_name,
        "theme": _theme_to_dict(doc.theme),
        "blocks": [asdict(b) for b in doc.blocks],
        "decorations": [asdict(e) for e in doc.decorations],
        "calendar_overrides": dict(doc.calendar_overrides),
    }


def document_from_dict(obj: Any) -> Document:
    """Rebuild a Document; raises ValueError on malformed snapshots."""
    if not isinstance(obj, dict):
        raise ValueError("document: expected a JSON object")
    blocks_raw = obj.get("blocks", [])
    decos_raw = obj.get("decorations", [])
    if not isinstance(blocks_raw, list):
        raise ValueError("blocks: expected a list")
    if not isinstance(decos_raw, list):
        raise ValueError("decorations: expected a list")
    blocks: List[ContentBlock] = [_block_from_obj(b, i) for i, b in enumerate(blocks_raw)]
    ids = [b.id for b in blocks]
    if len(set(ids)) != len(ids):
        raise ValueError("blocks: duplicate ids")

    template = find_template(obj.get("template_id"))
    variant = find_variant(template, obj.get("variant_name"))
    return Document(
        title=str(obj.get("title", "")),
        date=str(obj.get("date", "")),
        blocks=tuple(blocks),
        template_id=template.id,
        variant_name=variant.name,
        theme=_theme_from_obj(obj.get("theme", THEMES[0].name)),
        decorations=tuple(_element_from_obj(e, i) for i, e in enumerate(decos_raw)),
        calendar_overrides=overrides_from_obj(obj.get("calendar_overrides", {}), where="calendar_overrides"),
    )


__all__ = [
    "Document",
    "ThemeApplication",
    "apply_layout",
    "apply_theme",
    "current_layout",
    "document_from_dict",
    "document_to_dict",
    "effective_calendar_style",
    "new_document",
]
