from __future__ import annotations

import json
from pathlib import Path

import pytest

from folio.overrides import dump_overrides, load_overrides, merge_overrides, pin_override, unpin_override
from folio.surface_style import derive_surface_style
from folio.themes import find_theme


def _derived(name: str):
    return derive_surface_style(find_theme(name))


class TestMergeOverridesContract:
    def test_theme_linked_override_is_cleared(self):
        old, new = _derived("Ocean Blue"), _derived("Forest Green")
        overrides = {"cell_border_color": old.cell_border_color, "header_color": "#123456"}

        res = merge_overrides(new, old, overrides)

        assert res.cleared == ("cell_border_color",)
        assert res.overrides == {"header_color": "#123456"}
        assert res.effective.cell_border_color == new.cell_border_color
        assert res.effective.header_color == "#123456"

    def test_lowercase_picker_value_matching_old_default_is_cleared(self):
        old, new = _derived("Ocean Blue"), _derived("Forest Green")
        res = merge_overrides(new, old, {"cell_border_color": "#bae6fd"})
        assert res.cleared == ("cell_border_color",)
        assert res.effective.cell_border_color == new.cell_border_color

    def test_deliberate_override_survives_verbatim(self):
        old, new = _derived("Ocean Blue"), _derived("Halloween")
        res = merge_overrides(new, old, {"cell_background_color": "#ABCDEF"})
        assert res.cleared == ()
        assert res.effective.cell_background_color == "#ABCDEF"

    def test_no_theme_change_clears_nothing(self):
        cur = _derived("Ocean Blue")
        res = merge_overrides(cur, None, {"cell_border_color": cur.cell_border_color})
        assert res.cleared == ()
        assert res.overrides == {"cell_border_color": cur.cell_border_color}

    def test_unset_and_unknown_entries_are_not_applied(self):
        old, new = _derived("Ocean Blue"), _derived("Forest Green")
        res = merge_overrides(new, old, {"header_color": None, "bogus": 1})
        assert res.effective == new
        assert res.overrides == {"header_color": None, "bogus": 1}

    def test_input_map_is_not_mutated(self):
        old, new = _derived("Ocean Blue"), _derived("Forest Green")
        overrides = {"cell_border_color": old.cell_border_color}
        merge_overrides(new, old, overrides)
        assert overrides == {"cell_border_color": old.cell_border_color}

    def test_pin_and_unpin(self):
        pinned = pin_override({}, "weekday_color", "#000000")
        assert pinned == {"weekday_color": "#000000"}
        assert unpin_override(pinned, "weekday_color") == {}
        assert unpin_override(pinned, "missing") == pinned
        with pytest.raises(KeyError):
            pin_override({}, "not_a_field", "#000000")


class TestOverridesIoContract:
    def test_load_and_dump(self, tmp_path: Path):
        p = tmp_path / "overrides.json"
        p.write_text(dump_overrides({"header_color": "#123456", "non_current_month_opacity": 0.4}), encoding="utf-8")
        assert load_overrides(p) == {"header_color": "#123456", "non_current_month_opacity": 0.4}

    @pytest.mark.parametrize("text", ["{not json", "[1, 2]", json.dumps({"header_color": [1]})])
    def test_malformed_input_raises_value_error(self, tmp_path: Path, text: str):
        p = tmp_path / "bad.json"
        p.write_text(text, encoding="utf-8")
        with pytest.raises(ValueError):
            load_overrides(p)
