"""folio.api

Stable *library* entrypoint for folio.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from folio.color import contrast_ratio, ensure_contrast, mix, normalize_hex, relative_luminance
from folio.config import CanvasGeometry, load_geometry
from folio.decorations import reposition_decorations, resolve_decorations
from folio.document import (
    Document,
    ThemeApplication,
    apply_layout,
    apply_theme,
    document_from_dict,
    document_to_dict,
    effective_calendar_style,
    new_document,
)
from folio.layouts import find_template, find_variant
from folio.line_styles import resolve_line_style
from folio.model import ContentBlock, DecorativeElement, DerivedSurfaceStyle, StyleAttributeSet, Theme
from folio.overrides import MergeResult, load_overrides, merge_overrides
from folio.reallocate import reallocate_content, set_block_count
from folio.surface_style import derive_surface_style
from folio.themes import find_theme
from folio.validate import assert_valid_catalog, validate_catalog


# --- Public API exports -------------------------------------------------------
# Keep exports explicit and stable.
_PUBLIC_EXPORTS = (
    "CanvasGeometry",
    "ContentBlock",
    "DecorativeElement",
    "DerivedSurfaceStyle",
    "Document",
    "MergeResult",
    "StyleAttributeSet",
    "Theme",
    "ThemeApplication",
    "apply_layout",
    "apply_theme",
    "assert_valid_catalog",
    "contrast_ratio",
    "derive_surface_style",
    "document_from_dict",
    "document_to_dict",
    "effective_calendar_style",
    "ensure_contrast",
    "find_template",
    "find_theme",
    "find_variant",
    "load_geometry",
    "load_overrides",
    "merge_overrides",
    "mix",
    "new_document",
    "normalize_hex",
    "reallocate_content",
    "relative_luminance",
    "reposition_decorations",
    "resolve_decorations",
    "resolve_line_style",
    "set_block_count",
    "validate_catalog",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
