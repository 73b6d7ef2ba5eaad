from __future__ import annotations

import json
import unittest
from dataclasses import replace

from folio.document import (
    apply_layout,
    apply_theme,
    document_from_dict,
    document_to_dict,
    effective_calendar_style,
    new_document,
)
from folio.model import DecorativeElement
from folio.surface_style import derive_surface_style
from folio.themes import find_theme


def _manual_line() -> DecorativeElement:
    return DecorativeElement(id="manual-1", x=40, y=700, width=120, height=2, color="#000000", stroke="dashed")


class TestDocumentFlowsContract(unittest.TestCase):
    def setUp(self) -> None:
        self.doc = new_document("Week 3", "2024-09-16", template_id="three-hero", theme_name="Ocean Blue")

    def test_new_document(self) -> None:
        self.assertEqual([b.id for b in self.doc.blocks], ["announcements", "homework", "upcoming-events"])
        self.assertEqual(self.doc.variant_name, "Balanced")
        self.assertEqual(self.doc.theme.title.align, "center")
        self.assertEqual(len(self.doc.decorations), 1)
        self.assertEqual(self.doc.decorations[0].decoration_key, "three-hero:Balanced:after-title:")

    def test_apply_layout_reorders_aligns_and_redecorates(self) -> None:
        doc = replace(self.doc, decorations=self.doc.decorations + (_manual_line(),))
        out = apply_layout(doc, "three-feature-left", "Tall Top")

        self.assertEqual(out.template_id, "three-feature-left")
        self.assertEqual(out.variant_name, "Tall Top")
        self.assertEqual(out.theme.title.align, "left")
        self.assertEqual(out.theme.date.align, "left")
        self.assertEqual(sorted(b.id for b in out.blocks), sorted(b.id for b in doc.blocks))

        keys = [e.decoration_key for e in out.decorations if e.auto_generated]
        self.assertEqual(keys, ["three-feature-left:Tall Top:after-date:"])
        self.assertIn(_manual_line(), out.decorations)
        self.assertIsNot(out, doc)
        self.assertEqual(doc.template_id, "three-hero")

    def test_apply_layout_is_idempotent(self) -> None:
        once = apply_layout(self.doc, "three-hero", "Wide Left")
        twice = apply_layout(once, "three-hero", "Wide Left")
        self.assertEqual(twice, once)

    def test_shape_mismatch_keeps_block_order(self) -> None:
        out = apply_layout(self.doc, "four-grid")
        self.assertEqual(out.blocks, self.doc.blocks)

    def test_unknown_template_falls_back(self) -> None:
        out = apply_layout(self.doc, "no-such-template", "no-such-variant")
        self.assertEqual(out.template_id, "one-single")
        self.assertEqual(out.variant_name, "Default")

    def test_apply_theme_refreshes_theme_linked_overrides(self) -> None:
        old = derive_surface_style(self.doc.theme)
        doc = replace(self.doc, calendar_overrides={"cell_border_color": old.cell_border_color, "header_color": "#123456"})

        res = apply_theme(doc, "Forest Green")

        self.assertEqual(res.cleared, ("cell_border_color",))
        self.assertEqual(res.document.calendar_overrides, {"header_color": "#123456"})
        self.assertEqual(res.effective.header_color, "#123456")
        self.assertEqual(res.effective.cell_border_color, "#bbf7d0")
        self.assertEqual(res.document.theme.name, "Forest Green")
        self.assertEqual(res.document.decorations[0].color, "#BBF7D0")
        self.assertEqual(res.document.decorations[0].id, doc.decorations[0].id)

    def test_apply_theme_accepts_theme_objects_and_unknown_names(self) -> None:
        res = apply_theme(self.doc, find_theme("Halloween"))
        self.assertEqual(res.document.theme.name, "Halloween")
        self.assertEqual(apply_theme(self.doc, "No Such Theme").document.theme.name, "Default")

    def test_effective_calendar_style_applies_pins(self) -> None:
        doc = replace(self.doc, calendar_overrides={"weekday_color": "#000000"})
        self.assertEqual(effective_calendar_style(doc).weekday_color, "#000000")

    def test_snapshot_round_trip(self) -> None:
        doc = replace(self.doc, decorations=self.doc.decorations + (_manual_line(),), calendar_overrides={"header_color": "#123456"})
        raw = json.loads(json.dumps(document_to_dict(doc)))
        self.assertEqual(document_from_dict(raw), doc)

    def test_snapshot_rejects_malformed_input(self) -> None:
        good = document_to_dict(self.doc)
        for bad in (
            [],
            {**good, "blocks": "nope"},
            {**good, "blocks": [{"id": "a"}, {"id": "a"}]},
            {**good, "decorations": [{"id": "x", "bogus": 1}]},
            {**good, "theme": {"name": "T", "page": {"shade": "#fff"}}},
        ):
            with self.assertRaises(ValueError):
                document_from_dict(bad)


if __name__ == "__main__":
    unittest.main(verbosity=2)
