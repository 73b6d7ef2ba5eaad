from __future__ import annotations

import unittest

from folio.color import BLACK, WHITE, contrast_ratio, is_hex_color, mix, normalize_hex
from folio.model import StyleAttributeSet as S
from folio.model import Theme
from folio.surface_style import accent_color, derive_surface_style, exception_name, is_dark_theme, page_background
from folio.themes import THEMES, find_theme


class TestSurfaceStyleContract(unittest.TestCase):
    def test_dark_page_with_transparent_title_gets_readable_header(self) -> None:
        theme = Theme(name="Night", page=S(background_color="#1a1a1a"), title=S(color="transparent", font_family="Creepster"))
        style = derive_surface_style(theme)
        self.assertGreaterEqual(contrast_ratio(style.header_color, "#1a1a1a"), 4.5)
        self.assertEqual(style.header_font_family, "Creepster")

    def test_accent_and_darkness(self) -> None:
        self.assertEqual(accent_color(find_theme("Default")), "#10B981")
        self.assertEqual(accent_color(find_theme("Ocean Blue")), "#075985")
        self.assertEqual(accent_color(Theme(name="Bare")), "#3b82f6")
        self.assertTrue(is_dark_theme(find_theme("Halloween")))
        self.assertFalse(is_dark_theme(find_theme("Ocean Blue")))

    def test_generic_light_theme(self) -> None:
        style = derive_surface_style(find_theme("Ocean Blue"))
        self.assertIsNone(style.header_background_color)
        self.assertEqual(style.weekday_background_color, "#0ea5e9")
        self.assertGreaterEqual(contrast_ratio(style.weekday_color, style.weekday_background_color), 4.5)
        self.assertEqual(style.cell_background_color, "#ffffff")
        self.assertGreaterEqual(contrast_ratio(style.cell_text_color, style.cell_background_color), 4.5)
        self.assertEqual(style.cell_border_color, "#bae6fd")
        self.assertEqual(style.weekend_cell_background_color, "#07598520")
        self.assertEqual(style.weekend_cell_text_color, style.cell_text_color)
        self.assertEqual(style.non_current_month_cell_text_color, "#6b7280")
        self.assertEqual(style.non_current_month_opacity, 0.5)
        self.assertEqual(
            (style.header_font_family, style.weekday_font_family, style.cell_font_family),
            ("Raleway", "Raleway", "Lato"),
        )

    def test_generic_dark_theme(self) -> None:
        style = derive_surface_style(find_theme("Halloween"))
        self.assertEqual(style.weekend_cell_background_color, "#ff751830")
        self.assertEqual(style.non_current_month_cell_text_color, "#94a3b8")
        self.assertGreaterEqual(contrast_ratio(style.header_color, "#1a1a1a"), 4.5)

    def test_weekday_background_fallbacks(self) -> None:
        no_heading = Theme(name="Red", page=S(background_color="#ffffff"), title=S(color="#ff0000"))
        self.assertEqual(derive_surface_style(no_heading).weekday_background_color, "#ffcccc")

        muddy = Theme(
            name="Muddy",
            page=S(background_color="#ffffff"),
            heading=S(background_color="#222222"),
            section=S(color="#111111"),
        )
        self.assertEqual(derive_surface_style(muddy).weekday_background_color, mix("#222222", "#ffffff", 0.15))

    def test_cell_background_when_indistinct_from_page(self) -> None:
        light = Theme(name="L", page=S(background_color="#ffffff"), section=S(background_color="#fefefe"))
        self.assertEqual(derive_surface_style(light).cell_background_color, "#ffffff")
        dark = Theme(name="D", page=S(background_color="#1a1a1a"), section=S(background_color="#1a1a1a"))
        self.assertEqual(derive_surface_style(dark).cell_background_color, "#313131")

    def test_default_theme_uses_chalkboard_palette(self) -> None:
        theme = find_theme("Default")
        self.assertEqual(exception_name(theme), "chalkboard")
        style = derive_surface_style(theme)
        self.assertEqual(style.cell_background_color, "#1f362b")
        self.assertGreaterEqual(contrast_ratio(style.cell_text_color, "#1f362b"), 4.5)
        self.assertEqual(style.header_color, "#ffffff")
        self.assertEqual(style.header_background_color, "#10b981")
        self.assertEqual(style.weekday_background_color, "#10b981")
        self.assertEqual(style.header_font_family, "Fredoka")
        self.assertEqual(style.cell_border_color, "#ffffff22")
        self.assertEqual(style.weekend_cell_text_color, style.cell_text_color)
        self.assertEqual(style.non_current_month_cell_background_color, "#1f362b")
        self.assertEqual(style.non_current_month_opacity, 0.35)

    def test_chalkboard_falls_back_when_heading_is_unset(self) -> None:
        bare_default = Theme(name="Default")
        style = derive_surface_style(bare_default)
        self.assertEqual(style.header_color, "#f8f9f3")
        self.assertEqual(style.weekday_color, "#1f3d2e")
        self.assertEqual(style.header_background_color, "#c8a978")
        self.assertIsNone(style.header_font_family)

    def test_configurable_minimum(self) -> None:
        for theme in THEMES:
            style = derive_surface_style(theme, min_contrast=3.0)
            self.assertGreaterEqual(contrast_ratio(style.cell_text_color, style.cell_background_color), 3.0, theme.name)

    def test_text_pairs_reach_minimum_when_reachable(self) -> None:
        for target in (4.5, 7.0):
            for theme in THEMES:
                if exception_name(theme):
                    continue
                style = derive_surface_style(theme, min_contrast=target)
                pairs = {
                    "header": (style.header_color, page_background(theme)),
                    "weekday": (style.weekday_color, style.weekday_background_color),
                    "cell": (style.cell_text_color, style.cell_background_color),
                }
                for label, (fg, bg) in pairs.items():
                    if not (is_hex_color(fg) and is_hex_color(bg)):
                        continue
                    if max(contrast_ratio(BLACK, bg), contrast_ratio(WHITE, bg)) < target:
                        continue
                    self.assertGreaterEqual(contrast_ratio(fg, bg), target, f"{theme.name} {label} at {target}")

    def test_weekday_text_flips_to_black_on_pink_strip(self) -> None:
        style = derive_surface_style(find_theme("Comic Boom"))
        self.assertEqual(style.weekday_background_color, "#de3c73")
        self.assertGreaterEqual(contrast_ratio(style.weekday_color, style.weekday_background_color), 4.5)

    def test_derived_hex_values_are_lowercase(self) -> None:
        for theme in THEMES:
            for name, value in derive_surface_style(theme).as_dict().items():
                if is_hex_color(value):
                    self.assertEqual(value, normalize_hex(value), f"{theme.name} {name}")

    def test_only_default_has_exception(self) -> None:
        self.assertEqual([t.name for t in THEMES if exception_name(t)], ["Default"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
