#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

from folio.color import contrast_ratio
from folio.config import min_contrast_from_env
from folio.overrides import load_overrides, merge_overrides
from folio.surface_style import derive_surface_style, exception_name, page_background
from folio.themes import THEMES, find_theme, theme_names
from folio.util.console import eprint

# (text field, background field) pairs reported with --report.
_PAIRS = (
    ("header_color", "header_background_color"),
    ("weekday_color", "weekday_background_color"),
    ("cell_text_color", "cell_background_color"),
)


def _die(msg: str, rc: int = 2) -> int:
    eprint(f"[folio-derive-style] ERROR: {msg}")
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="folio-derive-style",
        description="Print the calendar surface style derived from a theme (optionally with overrides).",
    )
    ap.add_argument("--theme", default=None, help="Theme name (default: all themes)")
    ap.add_argument("--overrides", default=None, help="Override map JSON to apply on top")
    ap.add_argument(
        "--min-contrast",
        type=float,
        default=None,
        help="Minimum contrast (default: env FOLIO_MIN_CONTRAST or 4.5)",
    )
    ap.add_argument("--report", action="store_true", help="Append contrast ratios of text/background pairs")
    ns = ap.parse_args(argv)

    try:
        min_contrast = ns.min_contrast if ns.min_contrast is not None else min_contrast_from_env()
    except ValueError as e:
        return _die(str(e))
    if min_contrast < 1.0:
        return _die(f"--min-contrast must be >= 1.0, got {min_contrast}")

    overrides = {}
    if ns.overrides:
        p = Path(ns.overrides)
        if not p.exists():
            return _die(f"Missing JSON file: {p}")
        try:
            overrides = load_overrides(p)
        except (OSError, ValueError) as e:
            return _die(f"Failed to load overrides: {e}")

    if ns.theme is not None and ns.theme not in theme_names():
        return _die(f"Unknown theme: {ns.theme!r}")
    themes = [find_theme(ns.theme)] if ns.theme is not None else list(THEMES)

    out = {}
    for theme in themes:
        derived = derive_surface_style(theme, min_contrast=min_contrast)
        effective = merge_overrides(derived, None, overrides).effective
        entry = {"style": effective.as_dict()}
        if exception_name(theme):
            entry["exception"] = exception_name(theme)
        if ns.report:
            page_bg = page_background(theme)
            styles = effective.as_dict()
            ratios = {}
            for fg, bg in _PAIRS:
                bg_value = styles.get(bg) or page_bg
                ratios[fg] = round(contrast_ratio(styles.get(fg), bg_value), 2)
            entry["contrast"] = ratios
        out[theme.name] = entry

    print(json.dumps(out, ensure_ascii=False, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
