from __future__ import annotations

import unittest

from folio.layouts import (
    AFTER_SLOT,
    TEMPLATES,
    DecorationDescriptor,
    LayoutTemplate,
    Variant,
    find_template,
    find_variant,
    grid_cells,
    templates_for_slot_count,
)
from folio.validate import CatalogValidationError, assert_valid_catalog, validate_catalog, validate_templates


class TestLayoutCatalogContract(unittest.TestCase):
    def test_builtin_catalog_is_valid(self) -> None:
        self.assertEqual(validate_catalog(), [])
        assert_valid_catalog()

    def test_ids_are_unique_and_cover_one_to_seven_slots(self) -> None:
        ids = [t.id for t in TEMPLATES]
        self.assertEqual(len(ids), len(set(ids)))
        for n in range(1, 8):
            self.assertTrue(templates_for_slot_count(n), f"no template with {n} slots")

    def test_lookup_falls_back_to_first_entry(self) -> None:
        self.assertIs(find_template("no-such-template"), TEMPLATES[0])
        self.assertIs(find_template(None), TEMPLATES[0])
        self.assertEqual(find_template("two-columns").slots, 2)
        self.assertEqual(find_template("Hero").id, "three-hero")

        t = find_template("two-columns")
        self.assertIs(find_variant(t, "missing"), t.variants[0])
        self.assertEqual(find_variant(t, "Wide Right").title_align, "right")

    def test_size_targets_match_slot_counts(self) -> None:
        for t in TEMPLATES:
            for v in t.variants:
                if v.size_targets is not None:
                    self.assertEqual(len(v.size_targets), t.slots, f"{t.id}/{v.name}")

    def test_grid_cells(self) -> None:
        cells = grid_cells(find_template("three-feature-left"))
        self.assertEqual(cells["title"], (0, 0, 1, 2))
        self.assertEqual(cells["sec1"], (2, 0, 2, 1))
        self.assertEqual(cells["sec3"], (3, 1, 1, 1))

    def test_grid_cells_rejects_ragged_and_non_rectangular_areas(self) -> None:
        ragged = LayoutTemplate(id="ragged", name="Ragged", slots=1, areas=("title title", "sec1"), variants=(Variant("A", "1fr", "1fr"),))
        with self.assertRaises(ValueError):
            grid_cells(ragged)
        ell = LayoutTemplate(id="ell", name="Ell", slots=2, areas=("sec1 sec2", "sec2 sec2"), variants=(Variant("A", "1fr", "1fr"),))
        with self.assertRaises(ValueError):
            grid_cells(ell)

    def test_calendar_template_is_landscape(self) -> None:
        t = find_template("monthly-calendar")
        self.assertEqual(t.kind, "calendar")
        self.assertEqual(t.variants[0].orientation, "landscape")

    def test_validator_reports_broken_templates(self) -> None:
        bad = LayoutTemplate(
            id="bad",
            name="Bad",
            slots=2,
            areas=("title title", "sec1 sec2"),
            variants=(
                Variant(
                    name="X",
                    columns="1fr 1fr",
                    rows="auto 1fr",
                    title_align="middle",
                    decorations=(
                        DecorationDescriptor(AFTER_SLOT, "classic-solid"),
                        DecorationDescriptor("after-title", "no-such-line"),
                    ),
                    size_targets=(100,),
                ),
            ),
        )
        errs = validate_templates([bad])
        joined = "\n".join(errs)
        self.assertIn("bad alignment", joined)
        self.assertIn("size_targets has 1 entries", joined)
        self.assertIn("after-slot needs a slot_index", joined)
        self.assertIn("unknown line style", joined)

        with self.assertRaises(CatalogValidationError) as cm:
            assert_valid_catalog(templates=[bad])
        self.assertIsInstance(cm.exception, ValueError)


if __name__ == "__main__":
    unittest.main(verbosity=2)
