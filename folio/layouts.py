# folio/layouts.py
"""Static registry of structural templates and their variants.

A template names its regions with CSS-grid style area rows: `title`, `date`
and one `secN` region per content slot. Variants tune sizing, alignment,
separator decorations and per-slot size targets (approximate character
counts) used to fit existing content after a template switch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

# Placement vocabulary for decoration descriptors.
AFTER_TITLE = "after-title"
AFTER_DATE = "after-date"
BEFORE_SLOTS = "before-slots"
BETWEEN_SLOTS = "between-slots"
AFTER_SLOTS = "after-slots"
AFTER_SLOT = "after-slot"

PLACEMENTS = (AFTER_TITLE, AFTER_DATE, BEFORE_SLOTS, BETWEEN_SLOTS, AFTER_SLOTS, AFTER_SLOT)

Cell = Tuple[int, int, int, int]  # row, col, row_span, col_span


@dataclass(frozen=True)
class DecorationDescriptor:
    placement: str
    line_ref: str = "themed"  # concrete line-style id or "themed"
    slot_index: Optional[int] = None  # zero-based; only for "after-slot"


@dataclass(frozen=True)
class Variant:
    name: str
    columns: str
    rows: str
    title_align: Optional[str] = None
    date_align: Optional[str] = None
    decorations: Tuple[DecorationDescriptor, ...] = ()
    size_targets: Optional[Tuple[int, ...]] = None
    description: Optional[str] = None
    orientation: Optional[str] = None  # "portrait" | "landscape"


@dataclass(frozen=True)
class LayoutTemplate:
    id: str
    name: str
    slots: int
    areas: Tuple[str, ...]
    variants: Tuple[Variant, ...]
    category: Optional[str] = None
    notes: Optional[str] = None
    legacy_name: Optional[str] = None
    kind: str = "newsletter"  # "newsletter" | "calendar"


def _sep(line_ref: str, placement: str, slot_index: Optional[int] = None) -> Tuple[DecorationDescriptor, ...]:
    return (DecorationDescriptor(placement=placement, line_ref=line_ref, slot_index=slot_index),)


def _v(name: str, columns: str, rows: str, align: str, decorations: Tuple[DecorationDescriptor, ...],
       targets: Sequence[int], description: Optional[str] = None) -> Variant:
    return Variant(
        name=name,
        columns=columns,
        rows=rows,
        title_align=align,
        date_align=align,
        decorations=decorations,
        size_targets=tuple(targets),
        description=description,
    )


TEMPLATES: Tuple[LayoutTemplate, ...] = (
    # 1 slot
    LayoutTemplate(
        id="one-single", name="One Column", slots=1, category="Basic", legacy_name="Single",
        areas=("title", "date", "sec1"),
        variants=(
            _v("Default", "1fr", "auto auto 1fr", "center",
               _sep("themed", AFTER_TITLE) + _sep("classic-dotted", AFTER_DATE),
               [1200], description="Single flowing vertical column."),
        ),
    ),
    # 2 slots
    LayoutTemplate(
        id="two-columns", name="Two Columns", slots=2, category="Split", legacy_name="Columns",
        areas=("title title", "date date", "sec1 sec2"),
        variants=(
            _v("Balanced", "1fr 1fr", "auto auto 1fr", "center", _sep("themed", AFTER_DATE), [750, 750]),
            _v("Wide Left", "2fr 1fr", "auto auto 1fr", "left", _sep("classic-solid", AFTER_TITLE), [900, 600]),
            _v("Wide Right", "1fr 2fr", "auto auto 1fr", "right", _sep("classic-solid", AFTER_TITLE), [600, 900]),
        ),
    ),
    LayoutTemplate(
        id="two-rows", name="Stacked Two", slots=2, category="Stacked", legacy_name="Rows",
        areas=("title", "date", "sec1", "sec2"),
        variants=(
            _v("Balanced", "1fr", "auto auto 1fr 1fr", "center", _sep("classic-dashed", AFTER_DATE), [800, 800]),
            _v("Tall Top", "1fr", "auto auto 2fr 1fr", "center", _sep("classic-dotted", AFTER_DATE), [950, 650]),
            _v("Tall Bottom", "1fr", "auto auto 1fr 2fr", "center", _sep("classic-dotted", AFTER_DATE), [650, 950]),
        ),
    ),
    # 3 slots
    LayoutTemplate(
        id="three-hero", name="Hero Split", slots=3, category="Hero", legacy_name="Hero",
        areas=("title title", "date date", "sec1 sec1", "sec2 sec3"),
        variants=(
            _v("Balanced", "1fr 1fr", "auto auto 2fr 1fr", "center", _sep("themed", AFTER_TITLE), [1000, 600, 600]),
            _v("Wide Left", "2fr 1fr", "auto auto 2fr 1fr", "left", _sep("classic-solid", AFTER_TITLE), [1050, 600, 600]),
            _v("Wide Right", "1fr 2fr", "auto auto 2fr 1fr", "right", _sep("classic-solid", AFTER_TITLE), [1050, 600, 600]),
        ),
    ),
    LayoutTemplate(
        id="three-feature-left", name="Sidebar Feature", slots=3, category="Sidebar", legacy_name="Feature Left",
        areas=("title title", "date date", "sec1 sec2", "sec1 sec3"),
        variants=(
            _v("Balanced", "2fr 1fr", "auto auto 1fr 1fr", "left", _sep("classic-dashed", AFTER_DATE), [1100, 550, 550]),
            _v("Tall Top", "2fr 1fr", "auto auto 2fr 1fr", "left", _sep("classic-dashed", AFTER_DATE), [1200, 500, 500]),
            _v("Tall Bottom", "2fr 1fr", "auto auto 1fr 2fr", "left", _sep("classic-dashed", AFTER_DATE), [1000, 600, 600]),
        ),
    ),
    # 4 slots
    LayoutTemplate(
        id="four-grid", name="2x2 Grid", slots=4, category="Grid", legacy_name="Grid",
        areas=("title title", "date date", "sec1 sec2", "sec3 sec4"),
        variants=(
            _v("Balanced", "1fr 1fr", "auto auto 1fr 1fr", "center", _sep("classic-solid", AFTER_TITLE), [650, 650, 650, 650]),
            _v("Wide Left", "2fr 1fr", "auto auto 1fr 1fr", "left", _sep("classic-solid", AFTER_TITLE), [750, 550, 750, 550]),
            _v("Tall Top", "1fr 1fr", "auto auto 2fr 1fr", "center", _sep("classic-solid", AFTER_TITLE), [750, 750, 600, 600]),
        ),
    ),
    # 5 slots
    LayoutTemplate(
        id="five-hero-plus", name="Hero Plus", slots=5, category="Hero", legacy_name="Hero+",
        areas=("title title", "date date", "sec1 sec1", "sec2 sec3", "sec4 sec5"),
        variants=(
            _v("Balanced", "1fr 1fr", "auto auto 4fr 3fr 3fr", "center", _sep("themed", AFTER_TITLE),
               [1000, 600, 600, 600, 600]),
            _v("Wide Left", "2fr 1fr", "auto auto 4fr 3fr 3fr", "left", _sep("themed", AFTER_TITLE),
               [1050, 600, 600, 600, 600]),
            _v("Wide Right", "1fr 2fr", "auto auto 4fr 3fr 3fr", "right", _sep("themed", AFTER_TITLE),
               [1050, 600, 600, 600, 600]),
        ),
    ),
    # 6 slots
    LayoutTemplate(
        id="six-grid", name="3x2 Grid", slots=6, category="Grid", legacy_name="Grid",
        areas=("title title title", "date date date", "sec1 sec2 sec3", "sec4 sec5 sec6"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 1fr", "center", _sep("classic-dotted", AFTER_DATE),
               [600, 600, 600, 600, 600, 600]),
            _v("Wide Center", "1fr 2fr 1fr", "auto auto 1fr 1fr", "center", _sep("classic-dotted", AFTER_DATE),
               [550, 700, 550, 550, 700, 550]),
        ),
    ),
    # 7 slots
    LayoutTemplate(
        id="seven-mosaic", name="Mosaic 7", slots=7, category="Mosaic",
        areas=("title title title", "date date date", "sec1 sec2 sec3", "sec4 sec5 sec6", "sec7 sec7 sec7"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("themed", AFTER_TITLE),
               [550, 550, 550, 550, 550, 550, 800]),
            _v("Tall Base", "1fr 1fr 1fr", "auto auto 1fr 1fr 1.5fr", "center", _sep("themed", AFTER_TITLE),
               [550, 550, 550, 550, 550, 550, 900]),
            _v("Wide Center", "1fr 2fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("themed", AFTER_TITLE),
               [550, 650, 550, 550, 650, 550, 800]),
        ),
    ),
    LayoutTemplate(
        id="seven-feature-band", name="Band Feature 7", slots=7, category="Mosaic",
        areas=("title title title", "date date date", "sec1 sec1 sec2", "sec3 sec4 sec5", "sec6 sec7 sec7"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-solid", AFTER_DATE),
               [750, 500, 550, 550, 550, 550, 700]),
            _v("Wide Ends", "1.5fr 1fr 1.5fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-solid", AFTER_DATE),
               [780, 500, 560, 560, 560, 560, 720]),
        ),
    ),
    # Thematic
    LayoutTemplate(
        id="event-program", name="Event Program", slots=6, category="Events",
        notes="Agenda style: intro + 5 segments.",
        areas=("title title title", "date date date", "sec1 sec1 sec1", "sec2 sec3 sec4", "sec5 sec6 sec6"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 0.9fr 1fr 1fr", "center", _sep("themed", AFTER_TITLE),
               [900, 550, 550, 550, 550, 650]),
            _v("Wide Closing", "1fr 1fr 1fr", "auto auto 0.9fr 1fr 1.2fr", "center", _sep("themed", AFTER_TITLE),
               [900, 550, 550, 550, 550, 750]),
        ),
    ),
    LayoutTemplate(
        id="superhero-grid", name="Superhero Grid", slots=7, category="Pop Culture",
        notes="Explosive mosaic with double finale.",
        areas=("title title title", "date date date", "sec1 sec2 sec3", "sec4 sec5 sec6", "sec7 sec7 sec7"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-dotted", AFTER_DATE),
               [550, 550, 550, 550, 550, 550, 800]),
            _v("Hero Center", "1fr 1.4fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-dotted", AFTER_DATE),
               [550, 650, 550, 550, 650, 550, 800]),
        ),
    ),
    LayoutTemplate(
        id="space-mission", name="Space Mission", slots=6, category="Pop Culture",
        notes="Telemetry band across center.",
        areas=("title title title", "date date date", "sec1 sec2 sec3", "sec4 sec4 sec4", "sec5 sec6 sec6"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 0.8fr 1fr", "center", _sep("classic-solid", AFTER_TITLE),
               [600, 600, 600, 750, 550, 650]),
            _v("Wide Telemetry", "1fr 1fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-solid", AFTER_TITLE),
               [600, 600, 600, 700, 550, 650]),
        ),
    ),
    LayoutTemplate(
        id="holiday-garland", name="Holiday Garland", slots=5, category="Holiday",
        notes="Banner top, two feature rows + footer.",
        areas=("title title title", "date date date", "sec1 sec2 sec3", "sec4 sec4 sec5"),
        variants=(
            _v("Balanced", "1fr 1fr 1fr", "auto auto 1fr 1fr", "center", _sep("themed", AFTER_DATE),
               [600, 600, 600, 750, 550]),
            _v("Wide Finale", "1fr 1fr 1fr", "auto auto 1fr 1.2fr", "center", _sep("themed", AFTER_DATE),
               [600, 600, 600, 800, 550]),
        ),
    ),
    LayoutTemplate(
        id="game-scoreboard", name="Game Scoreboard", slots=6, category="Events",
        notes="Top stats row, dynamic bottom split.",
        areas=("title title", "date date", "sec1 sec2", "sec3 sec4", "sec5 sec6"),
        variants=(
            _v("Balanced", "1fr 1fr", "auto auto 1fr 1fr 1fr", "center", _sep("classic-dashed", AFTER_DATE),
               [650, 650, 650, 650, 650, 650]),
            _v("Tall Stats", "1fr 1fr", "auto auto 1.2fr 1fr 1fr", "center", _sep("classic-dashed", AFTER_DATE),
               [750, 750, 600, 600, 600, 600]),
        ),
    ),
    # Monthly calendar (landscape); the single slot is the calendar grid.
    LayoutTemplate(
        id="monthly-calendar", name="Monthly Calendar", slots=1, category="Calendar", kind="calendar",
        notes="Landscape 5x7 grid calendar automatically populated with selected month",
        areas=("sec1 sec1 sec1 sec1 sec1 sec1 sec1",),
        variants=(
            Variant(
                name="Standard",
                columns="repeat(7, 1fr)",
                rows="1fr",
                orientation="landscape",
                description="Standard calendar layout with equal-sized cells",
            ),
        ),
    ),
)


def find_template(template_id: Optional[str], catalog: Sequence[LayoutTemplate] = TEMPLATES) -> LayoutTemplate:
    """Look up a template by id (or legacy name); misses fall back to the first entry."""
    for t in catalog:
        if t.id == template_id:
            return t
    for t in catalog:
        if template_id and t.legacy_name == template_id:
            return t
    if catalog:
        return catalog[0]
    return TEMPLATES[0]


def find_variant(template: LayoutTemplate, name: Optional[str]) -> Variant:
    for v in template.variants:
        if v.name == name:
            return v
    return template.variants[0]


def templates_for_slot_count(n: int, catalog: Sequence[LayoutTemplate] = TEMPLATES) -> List[LayoutTemplate]:
    return [t for t in catalog if t.slots == n]


def slot_region(index: int) -> str:
    """Grid region name for a zero-based slot index."""
    return f"sec{index + 1}"


def grid_cells(template: LayoutTemplate) -> Dict[str, Cell]:
    """Map each named region to its bounding cell (row, col, row_span, col_span).

    Raises ValueError when rows have different widths or a region is not a
    filled rectangle.
    """
    grid = [row.split() for row in template.areas]
    if not grid:
        return {}
    width = len(grid[0])
    for i, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(f"{template.id}: area row {i} has {len(row)} cells, expected {width}")

    seen: Dict[str, List[Tuple[int, int]]] = {}
    for r, row in enumerate(grid):
        for c, name in enumerate(row):
            if name == ".":
                continue
            seen.setdefault(name, []).append((r, c))

    out: Dict[str, Cell] = {}
    for name, pts in seen.items():
        r0 = min(p[0] for p in pts)
        r1 = max(p[0] for p in pts)
        c0 = min(p[1] for p in pts)
        c1 = max(p[1] for p in pts)
        rs, cs = r1 - r0 + 1, c1 - c0 + 1
        if rs * cs != len(pts):
            raise ValueError(f"{template.id}: region {name!r} is not rectangular")
        out[name] = (r0, c0, rs, cs)
    return out


__all__ = [
    "AFTER_DATE",
    "AFTER_SLOT",
    "AFTER_SLOTS",
    "AFTER_TITLE",
    "BEFORE_SLOTS",
    "BETWEEN_SLOTS",
    "DecorationDescriptor",
    "LayoutTemplate",
    "PLACEMENTS",
    "TEMPLATES",
    "Variant",
    "find_template",
    "find_variant",
    "grid_cells",
    "slot_region",
    "templates_for_slot_count",
]
